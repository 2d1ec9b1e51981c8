"""
Command-line interface for resumed.

Provides the `resumed` command with the following subcommands:
- render (alias export, the default): Render a resume with a theme to HTML or PDF
- init (alias create): Write a sample resume to edit
- validate: Check a resume against the JSON Resume schema
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config, load_config
from .errors import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    ConfigurationError,
    RenderTimeoutError,
    ResumeValidationFailed,
    ThemeLoadError,
    ThemeNotSpecifiedError,
)
from .logging_config import parse_level_name, setup_logging
from .renderer import RenderOptions, render_file
from .scaffold import init_resume
from .validate_schema import validate_resume_file

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "resume.json"
DEFAULT_COMMAND = "render"

COMMAND_NAMES = {"render", "export", "init", "create", "validate"}
GLOBAL_FLAGS = {"-v", "--verbose", "--debug", "-q", "--quiet"}
GLOBAL_OPTIONS_WITH_VALUE = {"-c", "--config"}
SHORT_FLAG_LETTERS = set("vq")


def render_command(args: argparse.Namespace) -> int:
    """
    Execute the render command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code.
    """
    config = getattr(args, "_config", None) or Config()

    options = RenderOptions(
        output=args.output or config.render.output,
        theme=args.theme,
        browser_bin=args.browser_bin or config.render.browser_bin,
        timeout=args.timeout if args.timeout is not None else config.render.timeout,
    )

    try:
        output_path = render_file(args.filename, options)
    except (ThemeNotSpecifiedError, ThemeLoadError, RenderTimeoutError) as e:
        logger.error(e.message)
        if e.__cause__ is not None:
            logger.debug(f"Caused by: {e.__cause__!r}")
        return e.exit_code

    print(f"You can find your rendered resume at {output_path}. Nice work! 🚀")
    return EXIT_SUCCESS


def init_command(args: argparse.Namespace) -> int:
    """Execute the init command."""
    path = init_resume(args.filename)
    print(
        f"Done! Start editing {path} now, and run the render command "
        f"when you are ready. 👍"
    )
    return EXIT_SUCCESS


def validate_command(args: argparse.Namespace) -> int:
    """
    Execute the validate command.

    Schema violations are reported one per line; any other failure
    (missing file, malformed JSON) propagates.

    Returns:
        Exit code (0 if valid, 1 if the schema reports violations).
    """
    try:
        validate_resume_file(args.filename)
    except ResumeValidationFailed as e:
        logger.error(f"Uh-oh! The following errors were found in {args.filename}:\n")
        for issue in e.issues:
            logger.error(f" ❌ {issue.message} at {issue.path}.")
        return EXIT_ERROR

    print(f"Your {args.filename} looks amazing! ✨")
    return EXIT_SUCCESS


def timeout_value(value: str) -> float:
    """argparse type for --timeout: a non-negative number of seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}")
    if seconds < 0:
        raise argparse.ArgumentTypeError("timeout cannot be negative")
    return seconds


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="resumed",
        description="Render, scaffold and validate JSON Resume documents.",
        epilog="Example: resumed render resume.json --theme plain -o resume.pdf",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"resumed {__version__}",
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (INFO level logging)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level logging)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress output except errors",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        dest="config_file",
        help="Path to config file (default: resumed.toml)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands (render is used when none is given)",
    )

    # Render command
    render_parser = subparsers.add_parser(
        "render",
        aliases=["export"],
        help="Render resume",
        description="Render a resume with a theme. Output ending in .pdf is printed with headless Chromium.",
    )
    render_parser.add_argument(
        "filename",
        nargs="?",
        default=DEFAULT_FILENAME,
        help=f"Resume JSON file (default: {DEFAULT_FILENAME})",
    )
    render_parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output filename (default: resume.html)",
    )
    render_parser.add_argument(
        "--theme", "-t",
        type=str,
        help="Theme to use (default: the .meta.theme field of the resume)",
    )
    render_parser.add_argument(
        "--browser_bin", "--browser-bin", "-b",
        type=str,
        dest="browser_bin",
        help="Chromium executable used for PDF output",
    )
    render_parser.add_argument(
        "--timeout",
        type=timeout_value,
        default=None,
        help="Seconds to wait for the page to settle before printing a PDF (default: 30, 0 waits forever)",
    )
    render_parser.set_defaults(func=render_command)

    # Init command
    init_parser = subparsers.add_parser(
        "init",
        aliases=["create"],
        help="Create sample resume",
        description="Write a sample resume to edit. An existing file is overwritten.",
    )
    init_parser.add_argument(
        "filename",
        nargs="?",
        default=DEFAULT_FILENAME,
        help=f"File to create (default: {DEFAULT_FILENAME})",
    )
    init_parser.set_defaults(func=init_command)

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate resume",
        description="Check a resume against the JSON Resume schema.",
    )
    validate_parser.add_argument(
        "filename",
        nargs="?",
        default=DEFAULT_FILENAME,
        help=f"Resume JSON file (default: {DEFAULT_FILENAME})",
    )
    validate_parser.set_defaults(func=validate_command)

    return parser


def global_option_width(token: str) -> int:
    """
    Number of argv tokens a global option occupies, or 0 if ``token`` is not one.

    Handles `--config=FILE`, `-cFILE` and bundled short flags such as
    `-vq` or `-vc FILE`.
    """
    if token in GLOBAL_OPTIONS_WITH_VALUE:
        return 2
    if token in GLOBAL_FLAGS or token.startswith("--config="):
        return 1
    if len(token) < 3 or not token.startswith("-") or token.startswith("--"):
        return 0
    letters = token[1:]
    flags, sep, value = letters.partition("c")
    if not set(flags) <= SHORT_FLAG_LETTERS:
        return 0
    if sep and not value:
        return 2
    return 1


def with_default_command(argv: List[str]) -> List[str]:
    """
    Insert the default command when ``argv`` does not name one.

    ``resumed``, ``resumed cv.json`` and ``resumed -v -t plain`` all mean
    ``render``. Help and version requests are left alone.
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in ("-h", "--help", "--version"):
            return argv
        width = global_option_width(token)
        if width:
            i += width
            continue
        if token in COMMAND_NAMES:
            return argv
        return argv[:i] + [DEFAULT_COMMAND] + argv[i:]
    return argv + [DEFAULT_COMMAND]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(with_default_command(list(argv)))
    if not hasattr(args, "func"):
        parser.error("a command is required")

    setup_logging(verbose=args.verbose, debug=args.debug, quiet=args.quiet)

    config_path = Path(args.config_file) if args.config_file else None
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        logger.error(f"Config error: {e.message}")
        return e.exit_code

    if config.config_path is not None:
        setup_logging(
            verbose=args.verbose,
            debug=args.debug,
            quiet=args.quiet,
            log_file=Path(config.logging.log_file) if config.logging.log_file else None,
            default_level=min(parse_level_name(config.logging.level), logging.ERROR),
        )

    args._config = config
    return args.func(args)


def main_cli() -> None:
    """
    CLI entry point for the console script.

    Calls main() and exits with the returned code.
    """
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
