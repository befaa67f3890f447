"""
Report writers for the per-kind properties and roadmap files.

Both renderings are pure functions of a roadmap so that `verify` can compare
them against the files on disk without writing anything.
"""

import logging
from pathlib import Path
from typing import List

from .constants import Kind, State, DEPRECATED_MARK, PROPERTIES_SUFFIX
from .model import RoadMap, Registry

logger = logging.getLogger(__name__)


def properties_path(properties_dir: Path, kind: Kind) -> Path:
    return properties_dir / f"{kind.value}{PROPERTIES_SUFFIX}"


def render_properties(roadmap: RoadMap) -> str:
    return "".join(f"{name}\n" for name in roadmap.sorted_names(State.SUPPORTED))


def render_roadmap(roadmap: RoadMap) -> str:
    lines = []
    for state in State:
        lines.append(f"[{state.value}]")
        for name in roadmap.sorted_names(state):
            item = roadmap.item(name)
            lines.append(name + (DEPRECATED_MARK if item.deprecated else ""))
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def write_properties(registry: Registry, properties_dir: Path) -> List[Path]:
    written = []
    for roadmap in registry.roadmaps():
        path = properties_path(properties_dir, roadmap.kind)
        _write_text(path, render_properties(roadmap))
        written.append(path)
    logger.info("Wrote %d properties files to %s", len(written), properties_dir)
    return written


def write_roadmaps(registry: Registry) -> List[Path]:
    written = []
    for roadmap in registry.roadmaps():
        _write_text(roadmap.outpath, render_roadmap(roadmap))
        written.append(roadmap.outpath)
    logger.info("Wrote %d roadmap files", len(written))
    return written
