"""
Resume rendering.

Loads a resume, hands it to a theme and writes the markup the theme returns.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import DEFAULT_OUTPUT, DEFAULT_TIMEOUT
from .io import load_resume
from .output import write_output
from .themes import Theme, ThemeRegistry, get_default_registry, select_theme_name

logger = logging.getLogger(__name__)


def render(resume: Dict[str, Any], theme: Theme) -> str:
    """
    Render ``resume`` with ``theme``.

    Themes may return the markup directly or an awaitable resolving to it.
    The markup is passed through untouched.
    """
    logger.debug(f"Rendering resume with {getattr(theme, '__name__', type(theme).__name__)}")
    result = theme.render(resume)
    if inspect.isawaitable(result):
        result = asyncio.run(_await(result))
    return result


async def _await(awaitable: Any) -> Any:
    return await awaitable


@dataclass
class RenderOptions:
    """Options for one render invocation, built from CLI flags and config."""

    output: str = DEFAULT_OUTPUT
    theme: Optional[str] = None
    browser_bin: Optional[str] = None
    timeout: Optional[float] = DEFAULT_TIMEOUT


def render_file(
    filename: Union[str, Path],
    options: RenderOptions,
    registry: Optional[ThemeRegistry] = None,
) -> Path:
    """
    Load a resume, render it with the selected theme and write the result.

    The theme is resolved before anything is written, so a missing or
    unloadable theme leaves no output behind.

    Raises:
        ThemeNotSpecifiedError: Neither ``options.theme`` nor ``meta.theme`` is set.
        ThemeLoadError: The selected theme cannot be loaded.
        RenderTimeoutError: PDF printing timed out waiting for the page.
    """
    if registry is None:
        registry = get_default_registry()

    resume = load_resume(filename)
    theme_name = select_theme_name(options.theme, resume)
    theme = registry.load(theme_name)
    logger.info(f"Rendering {filename} with theme {theme_name}")

    markup = render(resume, theme)
    return write_output(
        markup,
        options.output,
        browser_bin=options.browser_bin,
        timeout=options.timeout,
    )
