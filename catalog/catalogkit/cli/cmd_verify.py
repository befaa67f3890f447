import argparse
import sys
from pydantic import ValidationError
from catalog.catalogkit.core.config import CatalogConfig
from catalog.catalogkit.core.creator import CatalogCreator

def run_verify(args: argparse.Namespace) -> int:
    try:
        config = CatalogConfig.from_args(args)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    print(f"Verifying catalog outputs in {config.outdir} and {config.resdir}...")
    try:
        # Never copy descriptors while verifying
        creator = CatalogCreator(config).collect(copy=False)
        stale = creator.stale_outputs()
    except (OSError, ValueError, RuntimeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if stale:
        for path in stale:
            print(f"  stale: {path}")
        print("❌ Catalog outputs are stale or missing. Run 'catalogkit build'.")
        return 1

    print("✅ Catalog outputs are up-to-date.")
    return 0
