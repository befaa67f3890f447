from enum import Enum


class Kind(str, Enum):
    """
    Classification axis for catalog descriptors.
    Declaration order is the processing order of the roadmaps.
    """
    COMPONENT = "component"
    DATAFORMAT = "dataformat"
    LANGUAGE = "language"
    OTHER = "other"


class State(str, Enum):
    """
    Lifecycle status of a catalog item.
    Declaration order is the section order of a roadmap file.
    """
    SUPPORTED = "supported"
    PLANNED = "planned"
    UNDECIDED = "undecided"
    REJECTED = "rejected"


ROADMAP_SUFFIX = ".roadmap"
PROPERTIES_SUFFIX = "s.properties"
ARTIFACT_SUFFIX = ".jar"
DEPRECATED_MARK = " (deprecated)"
