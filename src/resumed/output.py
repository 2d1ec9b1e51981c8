"""
Output writing for rendered resumes.

HTML (or any non-PDF target) is written verbatim. PDF targets are printed by
headless Chromium through Playwright.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .config import DEFAULT_TIMEOUT
from .errors import RenderTimeoutError

logger = logging.getLogger(__name__)

PDF_FORMAT = "A4"


def is_pdf_target(output: Union[str, Path]) -> bool:
    return str(output).endswith(".pdf")


def write_output(
    markup: str,
    output: Union[str, Path],
    browser_bin: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> Path:
    """
    Write rendered markup to ``output``.

    Args:
        markup: Markup returned by the theme.
        output: Destination path. A ``.pdf`` suffix selects PDF printing.
        browser_bin: Chromium executable to launch instead of Playwright's own.
        timeout: Seconds to wait for the page to go network-idle before
            printing. ``0`` or ``None`` waits indefinitely.

    Returns:
        The path written.
    """
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if is_pdf_target(output_path):
        print_pdf(markup, output_path, browser_bin=browser_bin, timeout=timeout)
    else:
        output_path.write_text(markup, encoding="utf-8")
        logger.info(f"Wrote {len(markup)} characters to {output_path}")

    return output_path


def print_pdf(
    markup: str,
    output_path: Path,
    browser_bin: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> None:
    """
    Print ``markup`` to an A4 PDF with backgrounds.

    The browser belongs to this call only and is closed even when loading or
    printing fails.

    Raises:
        RenderTimeoutError: If the page is still loading resources when
            ``timeout`` elapses.
    """
    timeout_ms = float(timeout) * 1000 if timeout else 0

    with sync_playwright() as p:
        if browser_bin and browser_bin.strip():
            logger.info(f"Launching browser: {browser_bin.strip()}")
            browser = p.chromium.launch(executable_path=browser_bin.strip())
        else:
            logger.info("Launching bundled Chromium")
            browser = p.chromium.launch()

        try:
            page = browser.new_page()
            try:
                page.set_content(markup, wait_until="networkidle", timeout=timeout_ms)
            except PlaywrightTimeoutError as e:
                raise RenderTimeoutError(timeout) from e
            page.pdf(path=str(output_path), format=PDF_FORMAT, print_background=True)
        finally:
            browser.close()

    logger.info(f"Printed PDF to {output_path}")
