"""
Logging configuration for resumed.

Maps the CLI verbosity flags (--quiet, --verbose, --debug) and the optional
``[logging]`` config table onto the root logger.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _console_handler(level: int, format_str: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_str))
    return handler


def _file_handler(log_file: Path) -> Optional[logging.Handler]:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).warning(f"Not logging to {log_file}: {e}")
        return None
    # The file keeps everything, whatever the console shows.
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    return handler


def configure_logging(
    level: int = logging.WARNING,
    log_file: Optional[Path] = None,
    format_str: Optional[str] = None,
) -> None:
    """
    Install fresh root handlers: stderr at ``level``, plus ``log_file`` if given.

    Handlers from an earlier call are closed and replaced. A log file that
    cannot be opened is reported and skipped.
    """
    if format_str is None:
        format_str = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT

    handlers = [_console_handler(level, format_str)]
    if log_file is not None:
        file_handler = _file_handler(log_file)
        if file_handler is not None:
            handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger("resumed").setLevel(level)


def get_log_level_from_flags(
    quiet: bool = False,
    verbose: bool = False,
    debug: bool = False,
    default: int = logging.WARNING,
) -> int:
    """
    Determine the log level from CLI flags.

    Flag precedence (highest to lowest):
    1. --debug: DEBUG level
    2. --quiet: ERROR level only (overrides --verbose)
    3. --verbose: INFO level
    4. default (WARNING unless the config file says otherwise)
    """
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return default


def parse_level_name(name: Optional[str], fallback: int = logging.WARNING) -> int:
    """Translate a level name from the config file, ignoring unknown names."""
    if not name:
        return fallback
    return LEVEL_NAMES.get(name.strip().upper(), fallback)


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    default_level: int = logging.WARNING,
) -> None:
    """
    Configure logging based on CLI verbosity flags.

    Args:
        verbose: Enable INFO level logging.
        debug: Enable DEBUG level logging (overrides verbose and quiet).
        quiet: Enable ERROR level only (overrides verbose, overridden by debug).
        log_file: Optional path to a log file.
        default_level: Level used when no flag is given.
    """
    level = get_log_level_from_flags(
        quiet=quiet, verbose=verbose, debug=debug, default=default_level
    )
    configure_logging(level=level, log_file=log_file)
