import logging
import shutil
from pathlib import Path
from typing import List

from .constants import State, ARTIFACT_SUFFIX
from .model import Item, Registry

logger = logging.getLogger(__name__)


def artifact_path(depdir: Path, item: Item) -> Path:
    return depdir / f"{item.artifact_id}{ARTIFACT_SUFFIX}"


def namespace_target(namespace_dir: Path, relpath: Path, strip_components: int) -> Path:
    """
    Mirrors a descriptor path under the output namespace, dropping its
    leading `strip_components` parts (the file name is always kept).
    """
    parts = relpath.parts[strip_components:] or (relpath.name,)
    return namespace_dir.joinpath(*parts)


def detect_supported(
    registry: Registry,
    depdir: Path,
    srcdir: Path,
    namespace_dir: Path,
    strip_components: int = 2,
    copy: bool = True,
) -> List[Item]:
    """
    Promotes every item whose artifact is present in `depdir` to supported,
    overriding any persisted decision, and copies its descriptor into the
    output namespace unless `copy` is False.
    """
    if not depdir.is_dir():
        raise FileNotFoundError(f"Dependency directory not found: {depdir}")

    supported = []
    for item in registry.items():
        if not artifact_path(depdir, item).is_file():
            continue
        if copy:
            source = srcdir / item.path
            target = namespace_target(namespace_dir, item.path, strip_components)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        item.apply_state(State.SUPPORTED, "artifact")
        supported.append(item)

    logger.info("Detected %d supported items in %s", len(supported), depdir)
    return supported
