"""
Descriptor scanner: walks the catalog tree and classifies descriptors into roadmaps.
"""

import json
import logging
import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema

from .constants import Kind
from .model import Item, Registry

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent.parent / "contracts" / "descriptor-fields.v1.schema.json"

# Skipped descriptors whose name contains this marker are dumped to stderr
DIAGNOSTIC_MARKER = "opentracing"


class DescriptorError(ValueError):
    """A classified descriptor lacks a field the build relies on."""


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def _raise_walk_error(err: OSError) -> None:
    raise err


def iter_descriptors(root: Path, extension: str = ".json") -> Iterator[Path]:
    """
    Yields every descriptor file below `root`, in sorted order per directory.
    Any directory that cannot be listed (including `root` itself) raises.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(extension):
                yield Path(dirpath) / filename


_MISSING = object()


def _find(node: Any, key: str) -> Any:
    if isinstance(node, dict):
        for k, v in node.items():
            if k == key:
                return v
            found = _find(v, key)
            if found is not _MISSING:
                return found
    elif isinstance(node, list):
        for element in node:
            found = _find(element, key)
            if found is not _MISSING:
                return found
    return _MISSING


def find_value(node: Any, key: str) -> Any:
    """
    Depth-first lookup of the first `key` anywhere in a parsed JSON tree.
    A mapping's own key is checked before descending into its value, and an
    explicit null ends the search. Returns None when the key is absent.
    """
    found = _find(node, key)
    return None if found is _MISSING else found


def parse_deprecated(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    return False


def read_descriptor(path: Path) -> Optional[Any]:
    """
    Parses one descriptor. Returns None when the content is not valid JSON;
    errors opening the file propagate.
    """
    with path.open("rb") as f:
        raw = f.read()
    try:
        return json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Skipping unparseable descriptor %s: %s", path, e)
        return None


def classify(relpath: Path, node: Any) -> Optional[Item]:
    kind_str = find_value(node, "kind")
    name = find_value(node, "name")

    try:
        kind = Kind(kind_str)
    except ValueError:
        if isinstance(name, str) and DIAGNOSTIC_MARKER in name:
            print(json.dumps(node), file=sys.stderr)
        logger.debug("Skipping %s: unknown kind %r", relpath.as_posix(), kind_str)
        return None

    fields = {
        "kind": kind.value,
        "artifactId": find_value(node, "artifactId"),
        "deprecated": find_value(node, "deprecated"),
        "name": name if isinstance(name, str) else None,
    }
    try:
        jsonschema.validate(instance=fields, schema=_load_schema())
    except jsonschema.ValidationError as e:
        raise DescriptorError(f"{relpath.as_posix()}: invalid descriptor fields: {e.message}")

    return Item(
        path=relpath,
        kind=kind,
        artifact_id=fields["artifactId"],
        deprecated=parse_deprecated(fields["deprecated"]),
    )


def scan_descriptors(registry: Registry, srcdir: Path, extension: str = ".json") -> int:
    """
    Classifies every descriptor under `srcdir` into the registry.
    Returns the number of items added.
    """
    added = 0
    skipped = 0
    for path in iter_descriptors(srcdir, extension):
        relpath = path.relative_to(srcdir)
        node = read_descriptor(path)
        item = classify(relpath, node) if node is not None else None
        if item is None:
            skipped += 1
            continue
        registry.roadmap(item.kind).add(item)
        added += 1

    logger.info("Scanned %s: %d classified, %d skipped", srcdir, added, skipped)
    return added
