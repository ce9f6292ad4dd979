"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Exit codes: 0 passed, 1 violations found, 2 usage or configuration errors
"""
import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from onionarch._package import __version__
from onionarch.bootstrap import Application, create_application
from onionarch.cli.formatters import format_output
from onionarch.domain.exceptions import DomainException
from onionarch.infrastructure.logging.logger import get_logger

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

FORMATS = ["json", "yaml", "table", "list"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "onionarch",
        description="Check that dependencies in a Python code base point inward (onion architecture)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s check src                          # Check src against onionarch.yml or defaults
  %(prog)s check src --config arch.yml        # Use an explicit configuration
  %(prog)s --format table check src           # Show violations as a table
  %(prog)s layers src                         # Show which layer each module belongs to
  %(prog)s dependencies src --all             # List every import, including third-party
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument("--format", choices=FORMATS, default="list", help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check = subparsers.add_parser("check", help="Check a source tree against the architecture")
    check.add_argument("root", help="Source root containing the top-level packages")
    _add_config_option(check)
    check.add_argument(
        "--warn-only", action="store_true", help="Exit with success even if violations found"
    )

    layers = subparsers.add_parser("layers", help="Show the layer of every module")
    layers.add_argument("root", help="Source root containing the top-level packages")
    _add_config_option(layers)

    dependencies = subparsers.add_parser("dependencies", help="List module dependencies")
    dependencies.add_argument("root", help="Source root containing the top-level packages")
    _add_config_option(dependencies)
    dependencies.add_argument(
        "--all", action="store_true", help="Include dependencies on modules outside the root"
    )

    return parser.parse_args(argv)


def _add_config_option(subparser: argparse.ArgumentParser) -> None:
    # Left unset when omitted so the global --config value applies
    subparser.add_argument("--config", default=argparse.SUPPRESS, help="Configuration file path")


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    """Run the selected command and return its serialisable result."""
    if args.command == "check":
        report = app.check_service.check(args.root, app.architecture)
        return report.to_dict()

    if args.command == "layers":
        assignment = app.check_service.assign_layers(args.root, app.architecture)
        return {"rule": app.architecture.description(), "layers": assignment}

    if args.command == "dependencies":
        deps = app.check_service.list_dependencies(args.root, internal_only=not args.all)
        return {"dependencies": [dependency.model_dump(mode="json") for dependency in deps]}

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        return EXIT_ERROR

    try:
        search_dirs = [str(Path.cwd()), args.root]
        app = create_application(args.config, search_dirs=search_dirs, log_level=args.log_level)
        result = execute_command(args, app)
    except DomainException as e:
        logger.error("Command failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    formatted_output = format_output(result, args.format)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(formatted_output)
    else:
        print(formatted_output)

    if args.command == "check" and not result["passed"] and not args.warn_only:
        return EXIT_VIOLATIONS
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
