import logging
from typing import Optional

from .constants import State
from .model import RoadMap, Registry

logger = logging.getLogger(__name__)

# Only these sections are read back; everything else is regenerated each run
PERSISTED_SECTIONS = {
    f"[{State.PLANNED.value}]": State.PLANNED,
    f"[{State.REJECTED.value}]": State.REJECTED,
}


class RoadmapError(RuntimeError):
    """The pre-seeded roadmap file of a kind is missing or unreadable."""


def read_roadmap_states(roadmap: RoadMap) -> int:
    """
    Overlays the planned/rejected decisions of the roadmap file onto the
    items already collected for this kind. Returns the number of assignments.
    """
    section: Optional[State] = None
    assigned = 0

    try:
        with roadmap.outpath.open("r", encoding="utf-8") as f:
            for raw in f:
                line = raw.rstrip("\r\n")
                if not line or line.startswith("#"):
                    continue
                if line in PERSISTED_SECTIONS:
                    section = PERSISTED_SECTIONS[line]
                elif line.startswith("["):
                    section = None
                elif section is not None:
                    name = line.strip().split(" ", 1)[0]
                    item = roadmap.item(name)
                    if item is not None:
                        item.apply_state(section, "roadmap")
                        assigned += 1
    except OSError as e:
        raise RoadmapError(f"Cannot read roadmap for '{roadmap.kind.value}': {roadmap.outpath}: {e}") from e

    return assigned


def apply_roadmap_states(registry: Registry) -> int:
    total = 0
    for roadmap in registry.roadmaps():
        count = read_roadmap_states(roadmap)
        logger.info("Roadmap %s: %d persisted decisions applied", roadmap.outpath.name, count)
        total += count
    return total
