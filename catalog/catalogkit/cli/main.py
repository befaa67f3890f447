import argparse
import logging
import sys
from typing import List, Optional
from . import cmd_build
from . import cmd_verify
from . import cmd_show
from catalog.catalogkit.core.constants import Kind, State

def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--basedir", help="Project base directory (default: $CATALOG_BASEDIR or .)")
    common.add_argument("--srcdir", help="Descriptor tree (default: <basedir>/target/camel-catalog)")
    common.add_argument("--resdir", help="Roadmap directory (default: <basedir>/src/main/resources)")
    common.add_argument("--outdir", help="Output directory (default: <basedir>/target/classes)")
    common.add_argument("--depdir", help="Dependency directory (default: <basedir>/target/dependency)")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return common

def main(args: Optional[List[str]] = None) -> int:
    if args is None:
        args = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="catalogkit",
        description="catalogkit: Catalog roadmap and supported-items generator"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    common = _common_options()

    # Build command
    subparsers.add_parser("build", parents=[common], help="Collect descriptors and write properties and roadmaps")

    # Verify command
    subparsers.add_parser("verify", parents=[common], help="Check that generated files are up-to-date")

    # Show command
    show_parser = subparsers.add_parser("show", parents=[common], help="List items per kind and state")
    show_parser.add_argument("--kind", choices=[k.value for k in Kind], help="Restrict to one kind")
    show_parser.add_argument("--state", choices=[s.value for s in State], help="Restrict to one state")
    show_parser.add_argument("--emit", choices=["text", "json"], default="text", help="Output format")

    parsed_args = parser.parse_args(args)

    if parsed_args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if parsed_args.command == "build":
        return cmd_build.run_build(parsed_args)
    elif parsed_args.command == "verify":
        return cmd_verify.run_verify(parsed_args)
    elif parsed_args.command == "show":
        return cmd_show.run_show(parsed_args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
