import argparse
import sys
from pydantic import ValidationError
from catalog.catalogkit.core.config import CatalogConfig
from catalog.catalogkit.core.constants import State
from catalog.catalogkit.core.creator import CatalogCreator

def run_build(args: argparse.Namespace) -> int:
    try:
        config = CatalogConfig.from_args(args)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    print(f"Building catalog from {config.srcdir}...")
    try:
        creator = CatalogCreator(config).collect().generate()
    except (OSError, ValueError, RuntimeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    for roadmap in creator.roadmaps():
        supported = len(roadmap.sorted_names(State.SUPPORTED))
        print(f"  {roadmap.kind.value:<10} {supported:>4} supported / {len(roadmap.items):>4} total")
    registry = creator.registry
    print(f"  {'all':<10} {registry.count(State.SUPPORTED):>4} supported / {registry.count():>4} total")
    print(f"✅ Catalog written to {config.outdir}")
    return 0
