"""
A plain single-page HTML theme.

Bundled so ``resumed render --theme plain`` works out of the box and as a
reference for theme authors: a theme is anything with ``render(resume)``.
"""

import logging
from typing import Any, Dict

from jinja2 import Environment, PackageLoader, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "plain.html"

SECTION_TITLES = {
    "work": "Work",
    "volunteer": "Volunteer",
    "education": "Education",
    "awards": "Awards",
    "certificates": "Certificates",
    "publications": "Publications",
    "skills": "Skills",
    "languages": "Languages",
    "interests": "Interests",
    "references": "References",
    "projects": "Projects",
}

_env = None


def get_environment() -> Environment:
    """Create (once) the Jinja2 environment for the bundled templates."""
    global _env
    if _env is None:
        _env = Environment(
            loader=PackageLoader("resumed", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        _env.filters["date_range"] = date_range
    return _env


def date_range(item: Dict[str, Any]) -> str:
    start = item.get("startDate") or item.get("date") or item.get("releaseDate") or ""
    end = item.get("endDate")
    if start and end:
        return f"{start} – {end}"
    if start and "endDate" in item:
        return f"{start} – Present"
    return start


def render(resume: Dict[str, Any]) -> str:
    """Render ``resume`` to a standalone HTML page."""
    template = get_environment().get_template(TEMPLATE_NAME)
    return template.render(
        resume=resume,
        basics=resume.get("basics") or {},
        sections=[
            (key, title, resume[key])
            for key, title in SECTION_TITLES.items()
            if resume.get(key)
        ],
    )
