"""
resumed - render JSON Resume documents with themes.

This package provides:
- Rendering a resume with a theme to HTML, or to PDF through headless Chromium
- Scaffolding a sample resume
- Validating a resume against the JSON Resume schema
"""

__version__ = "1.0.0"
__author__ = "resumed contributors"

from .errors import (
    ResumedError,
    ResumeValidationFailed,
    ThemeLoadError,
    ThemeNotFoundError,
    ThemeNotSpecifiedError,
)
from .io import load_resume
from .renderer import RenderOptions, render, render_file
from .scaffold import init_resume
from .themes import ThemeRegistry, load_theme, register_theme
from .validate_schema import ValidationIssue, validate_resume, validate_resume_file

__all__ = [
    # Rendering
    "render",
    "render_file",
    "RenderOptions",
    # Themes
    "ThemeRegistry",
    "load_theme",
    "register_theme",
    # Scaffolding
    "init_resume",
    # Validation
    "ValidationIssue",
    "validate_resume",
    "validate_resume_file",
    # IO
    "load_resume",
    # Errors
    "ResumedError",
    "ResumeValidationFailed",
    "ThemeLoadError",
    "ThemeNotFoundError",
    "ThemeNotSpecifiedError",
    # Version
    "__version__",
]
