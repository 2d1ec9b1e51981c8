"""
Tests for resumed.output module.

PDF printing is exercised against a fake Playwright; the real-browser test
runs only when Playwright's Chromium is installed.
"""

from pathlib import Path

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from resumed import output
from resumed.errors import RenderTimeoutError
from resumed.output import is_pdf_target, write_output


class FakePage:
    def __init__(self, browser: "FakeBrowser"):
        self.browser = browser

    def set_content(self, html, wait_until=None, timeout=None):
        self.browser.calls.append(("set_content", html, wait_until, timeout))
        if self.browser.fail_with is not None:
            raise self.browser.fail_with

    def pdf(self, path, format=None, print_background=None):
        self.browser.calls.append(("pdf", path, format, print_background))
        Path(path).write_bytes(b"%PDF-1.4\n% fake\n")


class FakeBrowser:
    def __init__(self, fail_with=None):
        self.calls = []
        self.closed = False
        self.fail_with = fail_with

    def new_page(self):
        return FakePage(self)

    def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser: FakeBrowser):
        self.browser = browser
        self.launch_kwargs = None

    def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self, fail_with=None):
        self.browser = FakeBrowser(fail_with=fail_with)
        self.chromium = FakeChromium(self.browser)

    def __call__(self):
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


@pytest.fixture
def fake_playwright(monkeypatch) -> FakePlaywright:
    fake = FakePlaywright()
    monkeypatch.setattr(output, "sync_playwright", fake)
    return fake


class TestIsPdfTarget:
    @pytest.mark.parametrize("name", ["out.pdf", "dir/x.pdf"])
    def test_pdf(self, name):
        assert is_pdf_target(name)

    @pytest.mark.parametrize("name", ["out.html", "out.pdf.html", "pdf", "out", "OUT.PDF", "cv.Pdf"])
    def test_not_pdf(self, name):
        assert not is_pdf_target(name)


class TestWriteHtml:
    """Tests for non-PDF output."""

    def test_writes_markup_verbatim(self, tmp_path: Path):
        target = tmp_path / "resume.html"
        markup = "<html><body>Zoë ✨</body></html>"

        assert write_output(markup, target) == target
        assert target.read_text(encoding="utf-8") == markup

    def test_creates_parent_directories(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "resume.html"
        write_output("<html></html>", str(target))
        assert target.exists()

    def test_non_pdf_never_launches_browser(self, tmp_path: Path, fake_playwright):
        write_output("<html></html>", tmp_path / "resume.txt")
        assert fake_playwright.chromium.launch_kwargs is None

    def test_uppercase_pdf_suffix_is_written_as_text(self, tmp_path: Path, fake_playwright):
        target = tmp_path / "OUT.PDF"
        write_output("<p>hi</p>", target)
        assert target.read_text(encoding="utf-8") == "<p>hi</p>"
        assert fake_playwright.chromium.launch_kwargs is None


class TestWritePdf:
    """Tests for PDF output through the browser."""

    def test_prints_a4_with_backgrounds(self, tmp_path: Path, fake_playwright):
        target = tmp_path / "out.pdf"

        write_output("<html></html>", target)

        calls = fake_playwright.browser.calls
        assert calls[0] == ("set_content", "<html></html>", "networkidle", 30000.0)
        assert calls[1] == ("pdf", str(target), "A4", True)
        assert fake_playwright.browser.closed
        assert target.read_bytes().startswith(b"%PDF-")

    def test_default_browser_launch(self, tmp_path: Path, fake_playwright):
        write_output("<html></html>", tmp_path / "out.pdf")
        assert fake_playwright.chromium.launch_kwargs == {}

    def test_blank_browser_bin_uses_default(self, tmp_path: Path, fake_playwright):
        write_output("<html></html>", tmp_path / "out.pdf", browser_bin="   ")
        assert fake_playwright.chromium.launch_kwargs == {}

    def test_explicit_browser_bin(self, tmp_path: Path, fake_playwright):
        write_output("<html></html>", tmp_path / "out.pdf", browser_bin="/usr/bin/chromium")
        assert fake_playwright.chromium.launch_kwargs == {"executable_path": "/usr/bin/chromium"}

    def test_zero_timeout_waits_forever(self, tmp_path: Path, fake_playwright):
        write_output("<html></html>", tmp_path / "out.pdf", timeout=0)
        assert fake_playwright.browser.calls[0][3] == 0

    def test_timeout_becomes_render_timeout(self, tmp_path: Path, monkeypatch):
        fake = FakePlaywright(fail_with=PlaywrightTimeoutError("Timeout 2000ms exceeded."))
        monkeypatch.setattr(output, "sync_playwright", fake)
        target = tmp_path / "out.pdf"

        with pytest.raises(RenderTimeoutError) as exc_info:
            write_output("<html></html>", target, timeout=2)

        assert exc_info.value.timeout == 2
        assert fake.browser.closed
        assert not target.exists()

    def test_browser_closed_on_other_failures(self, tmp_path: Path, monkeypatch):
        fake = FakePlaywright(fail_with=RuntimeError("page crashed"))
        monkeypatch.setattr(output, "sync_playwright", fake)

        with pytest.raises(RuntimeError, match="page crashed"):
            write_output("<html></html>", tmp_path / "out.pdf")

        assert fake.browser.closed


def _chromium_installed() -> bool:
    try:
        from playwright.sync_api import sync_playwright

        with sync_playwright() as p:
            return Path(p.chromium.executable_path).exists()
    except Exception:
        return False


@pytest.mark.browser
def test_real_pdf(tmp_path: Path):
    """Print a real PDF with headless Chromium."""
    if not _chromium_installed():
        pytest.skip("Playwright Chromium is not installed")

    target = tmp_path / "out.pdf"
    write_output("<html><body><h1>Resume</h1></body></html>", target)

    data = target.read_bytes()
    assert len(data) > 0
    assert data.startswith(b"%PDF-")
