import argparse
import json
import sys
from typing import Dict, List, Optional
from pydantic import ValidationError
from catalog.catalogkit.core.config import CatalogConfig
from catalog.catalogkit.core.constants import Kind, State, DEPRECATED_MARK
from catalog.catalogkit.core.creator import CatalogCreator

def collect_listing(creator: CatalogCreator, kind: Optional[str] = None, state: Optional[str] = None) -> Dict[str, Dict[str, List[str]]]:
    """
    {kind: {state: [names]}} for the selected kinds and states, in roadmap order.
    """
    kinds = [Kind(kind)] if kind else list(Kind)
    states = [State(state)] if state else list(State)
    listing = {}
    for k in kinds:
        roadmap = creator.roadmap(k)
        listing[k.value] = {s.value: roadmap.sorted_names(s) for s in states}
    return listing

def run_show(args: argparse.Namespace) -> int:
    try:
        config = CatalogConfig.from_args(args)
        creator = CatalogCreator(config).collect(copy=False)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    listing = collect_listing(creator, args.kind, args.state)

    if args.emit == "json":
        print(json.dumps(listing, indent=2))
        return 0

    for kind, states in listing.items():
        roadmap = creator.roadmap(Kind(kind))
        print(f"{kind} ({len(roadmap.items)} items)")
        for state, names in states.items():
            print(f"  [{state}] {len(names)}")
            for name in names:
                suffix = DEPRECATED_MARK if roadmap.item(name).deprecated else ""
                print(f"    {name}{suffix}")
    return 0
