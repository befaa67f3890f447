import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .constants import Kind, State, ROADMAP_SUFFIX

logger = logging.getLogger(__name__)


@dataclass
class Item:
    path: Path
    kind: Kind
    artifact_id: str
    deprecated: bool = False
    state: State = State.UNDECIDED
    name: str = field(init=False)

    def __post_init__(self):
        # "camel-foo.json" -> "camel-foo", "foo.bar.json" -> "foo"
        self.name = self.path.name.split(".", 1)[0]

    def apply_state(self, state: State, phase: str) -> None:
        """Single entry point for state transitions, so every change is logged."""
        if state != self.state:
            logger.debug("%s/%s: %s -> %s (%s)", self.kind.value, self.name, self.state.value, state.value, phase)
        self.state = state


@dataclass
class RoadMap:
    kind: Kind
    outpath: Path
    items: Dict[str, Item] = field(default_factory=dict)

    def add(self, item: Item) -> None:
        previous = self.items.get(item.name)
        if previous is not None:
            # Last discovered wins
            logger.warning(
                "Duplicate %s name '%s': %s replaces %s",
                self.kind.value, item.name, item.path.as_posix(), previous.path.as_posix()
            )
        self.items[item.name] = item

    def item(self, name: str) -> Optional[Item]:
        return self.items.get(name)

    def sorted_names(self, state: State) -> List[str]:
        return sorted(item.name for item in self.items.values() if item.state == state)


class Registry:
    """
    The four roadmaps of a single run, keyed by kind in declaration order.
    """

    def __init__(self, resdir: Path):
        self._roadmaps: Dict[Kind, RoadMap] = {
            kind: RoadMap(kind, resdir / f"{kind.value}{ROADMAP_SUFFIX}") for kind in Kind
        }

    def roadmap(self, kind: Kind) -> RoadMap:
        return self._roadmaps[kind]

    def roadmaps(self) -> List[RoadMap]:
        return list(self._roadmaps.values())

    def items(self) -> Iterator[Item]:
        for roadmap in self._roadmaps.values():
            yield from roadmap.items.values()

    def count(self, state: Optional[State] = None) -> int:
        return sum(1 for item in self.items() if state is None or item.state == state)
