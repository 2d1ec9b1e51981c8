"""
Custom error types and exit codes for resumed.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .validate_schema import ValidationIssue


class ResumedError(Exception):
    """Base exception for resumed errors."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ResumedError):
    """Configuration file errors."""

    exit_code = 2


class ThemeNotSpecifiedError(ResumedError):
    """Neither --theme nor .meta.theme names a theme."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "No theme to use. Please specify one via the --theme option "
            "or the .meta.theme field of your resume."
        )


class ThemeLoadError(ResumedError):
    """A theme name could not be turned into a usable theme."""

    def __init__(self, theme_name: str, message: Optional[str] = None):
        self.theme_name = theme_name
        super().__init__(message or f"Could not load theme {theme_name}. Is it installed?")


class ThemeNotFoundError(ThemeLoadError):
    """No installed module or registered theme matches the name."""


class InvalidThemeError(ThemeLoadError):
    """The resolved theme does not expose a render function."""

    def __init__(self, theme_name: str):
        super().__init__(
            theme_name,
            f"Theme {theme_name} does not expose a render(resume) function.",
        )


class RenderTimeoutError(ResumedError):
    """The page did not become idle before the PDF timeout elapsed."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(
            f"Timed out after {timeout:g}s waiting for the rendered page to settle. "
            "Use --timeout to wait longer or --timeout 0 to wait indefinitely."
        )


class ResumeValidationFailed(ResumedError):
    """The resume does not conform to the schema."""

    def __init__(self, issues: List["ValidationIssue"]):
        self.issues = list(issues)
        super().__init__(f"{len(self.issues)} schema violation(s) found")


# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
