# ============================================================================
# SOURCEFILE: cli.py
# RELPATH: search_path_helpers/src/pathhelpers/cli.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# ============================================================================

"""Command-Line Interface for Search Path Helpers."""

import argparse
import sys
import time
from typing import Any, Callable, Dict, List, Optional

from pathhelpers.logging import StructuredLogger, configure_utf8_console
from pathhelpers.config import ConfigManager
from pathhelpers.paths import PathHelpers
from pathhelpers.roots import DEFAULT_FLAVOR, available_flavors, get_classifier
from pathhelpers.exceptions import PathHelpersError, InvalidSearchPatternError

NONE_MARKER = "<none>"


def non_negative_int(value: str) -> int:
    """argparse type for root lengths."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="path-helpers",
        description="Search Path Helpers - split paths and prepare directory search strings"
    )
    parser.add_argument("--flavor", choices=available_flavors(),
                        help=f"Path rules to apply (default: config value, then {DEFAULT_FLAVOR})")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--log-dir", help="Write a JSONL session log to this directory")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_root = subparsers.add_parser("root", help="Print the root length of a path")
    parser_root.add_argument("path")

    parser_split = subparsers.add_parser("split", help="Split a path into directory and leaf")
    parser_split.add_argument("path")
    parser_split.add_argument("--root-length", type=non_negative_int)

    parser_dirname = subparsers.add_parser("dirname", help="Print the parent directory of a path")
    parser_dirname.add_argument("path")

    parser_check = subparsers.add_parser("check", help="Validate a search pattern")
    parser_check.add_argument("pattern")

    parser_normalize = subparsers.add_parser("normalize", help="Normalize a search pattern")
    parser_normalize.add_argument("pattern")

    parser_search = subparsers.add_parser("search-string", help="Join a directory and a search pattern")
    parser_search.add_argument("directory")
    parser_search.add_argument("pattern")

    parser_prepare = subparsers.add_parser("prepare", help="Normalize a pattern and build the full search request")
    parser_prepare.add_argument("directory")
    parser_prepare.add_argument("pattern")

    parser_trim = subparsers.add_parser("trim", help="Remove one trailing directory separator")
    parser_trim.add_argument("path")

    parser_drive = subparsers.add_parser("drive-relative", help="Detect a bare drive specifier such as C:")
    parser_drive.add_argument("path")

    return parser


def _show(value: Optional[str]) -> str:
    return NONE_MARKER if value is None else value


# ============================================================================
# Command Handlers
# ============================================================================

def handle_root(helpers: PathHelpers, args) -> Any:
    length = helpers.classifier.get_root_length(args.path)
    print(length)
    return length


def handle_split(helpers: PathHelpers, args) -> Any:
    result = helpers.split_directory_file(args.path, args.root_length)
    print(f"directory: {_show(result.directory)}")
    print(f"leaf: {_show(result.leaf)}")
    return {"directory": result.directory, "leaf": result.leaf}


def handle_dirname(helpers: PathHelpers, args) -> Any:
    directory = helpers.get_directory_name(args.path)
    print(_show(directory))
    return directory


def handle_check(helpers: PathHelpers, args) -> Any:
    helpers.pattern_validator.check_search_pattern(args.pattern)
    print("OK")
    return True


def handle_normalize(helpers: PathHelpers, args) -> Any:
    pattern = helpers.pattern_validator.normalize_search_pattern(args.pattern)
    print(pattern)
    return pattern


def handle_search_string(helpers: PathHelpers, args) -> Any:
    search_string = helpers.get_full_search_string(args.directory, args.pattern)
    print(search_string)
    return search_string


def handle_prepare(helpers: PathHelpers, args) -> Any:
    request = helpers.prepare_search(args.directory, args.pattern)
    print(f"pattern: {request.pattern}")
    print(f"search string: {request.search_string}")
    print(f"search directory: {_show(request.search_directory)}")
    print(f"search criteria: {_show(request.search_criteria)}")
    return request.to_dict()


def handle_trim(helpers: PathHelpers, args) -> Any:
    trimmed = helpers.trim_ending_directory_separator(args.path)
    print(trimmed)
    return trimmed


def handle_drive_relative(helpers: PathHelpers, args) -> Any:
    flag = helpers.should_treat_as_current_directory(args.path)
    print("true" if flag else "false")
    return flag


HANDLERS: Dict[str, Callable[[PathHelpers, Any], Any]] = {
    "root": handle_root,
    "split": handle_split,
    "dirname": handle_dirname,
    "check": handle_check,
    "normalize": handle_normalize,
    "search-string": handle_search_string,
    "prepare": handle_prepare,
    "trim": handle_trim,
    "drive-relative": handle_drive_relative,
}


def _command_arguments(args) -> Dict[str, Any]:
    skip = {"command", "flavor", "config", "log_dir"}
    return {k: v for k, v in vars(args).items() if k not in skip}


def _open_logger(args, config_manager: ConfigManager) -> Optional[StructuredLogger]:
    if args.log_dir:
        return StructuredLogger(args.log_dir)
    if config_manager.get("logging.enabled", False):
        return StructuredLogger(config_manager.get("logging.log_dir", "logs"))
    return None


def run(args) -> int:
    """
    Execute a parsed command.

    Returns:
        Process exit status

    Raises:
        PathHelpersError: If the command fails
    """
    if args.config:
        config_manager = ConfigManager(args.config, create_if_missing=False)
    else:
        config_manager = ConfigManager(create_if_missing=False)
    config_manager.validate()

    flavor = args.flavor or config_manager.get("paths.flavor", DEFAULT_FLAVOR)
    helpers = PathHelpers(get_classifier(flavor))
    logger = _open_logger(args, config_manager)
    if logger is None:
        return _run_command(helpers, args, None)

    logger.log_operation_start(args.command, _command_arguments(args), flavor)
    if args.config and not config_manager.loaded_from_file:
        logger.log_warning("Config file not found, using defaults", {"configFile": args.config})
    try:
        return _run_command(helpers, args, logger)
    finally:
        logger.close()


def _run_command(helpers: PathHelpers, args, logger: Optional[StructuredLogger]) -> int:
    started = time.perf_counter()
    try:
        result = HANDLERS[args.command](helpers, args)
    except InvalidSearchPatternError as e:
        if logger:
            logger.log_pattern_rejected(e.pattern, e.param_name, e.reason)
            logger.log_error(args.command, str(e), type(e).__name__)
        raise
    except PathHelpersError as e:
        if logger:
            logger.log_error(args.command, str(e), type(e).__name__)
        raise

    if logger:
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.log_operation_complete(args.command, result, elapsed_ms)

    return 0


def _check_root_length(parser: argparse.ArgumentParser, args) -> None:
    root_length = getattr(args, "root_length", None)
    if root_length is not None and root_length > len(args.path):
        parser.error(f"--root-length {root_length} exceeds the length of '{args.path}' ({len(args.path)})")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    configure_utf8_console()

    try:
        parser = build_parser()
        args = parser.parse_args(argv)
        _check_root_length(parser, args)
        sys.exit(run(args))

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)

    except PathHelpersError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
