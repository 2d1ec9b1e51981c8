"""
Schema validation for resume JSON files.

Validates documents against the bundled JSON Resume schema (draft-07) with
``jsonschema``. A failing document is reported by raising
``ResumeValidationFailed`` carrying every issue; any other problem (missing
file, malformed JSON) propagates unchanged.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from jsonschema import Draft7Validator, FormatChecker

from .errors import ResumeValidationFailed
from .io import load_resume

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationIssue:
    """A single schema violation."""

    message: str
    path: str

    def __str__(self) -> str:
        return f"{self.message} at {self.path}"


def get_schema_path() -> Path:
    """Get the path to the bundled resume schema."""
    return Path(__file__).parent / "schemas" / "resume.schema.json"


def load_schema() -> Dict[str, Any]:
    """
    Load the resume JSON schema.

    Raises:
        FileNotFoundError: If the schema file is not found.
        json.JSONDecodeError: If the schema is invalid JSON.
    """
    with open(get_schema_path(), encoding="utf-8") as f:
        return json.load(f)


def format_json_path(path: List[Any]) -> str:
    """
    Format a JSON path for human-readable display.

    Args:
        path: List of path components (strings and integers).

    Returns:
        JSONPath-like string (e.g., "$.work[0].startDate").
    """
    parts = ["$"]
    for component in path:
        if isinstance(component, int):
            parts.append(f"[{component}]")
        else:
            parts.append(f".{component}")
    return "".join(parts)


def _sort_key(path: List[Any]) -> List[Tuple[int, int, str]]:
    # Array indexes compare numerically, keys alphabetically.
    return [
        (0, component, "") if isinstance(component, int) else (1, 0, str(component))
        for component in path
    ]


def validate_resume(data: Any) -> List[ValidationIssue]:
    """
    Validate resume data against the schema.

    Returns:
        Every violation, ordered by location in the document.
    """
    validator = Draft7Validator(load_schema(), format_checker=FormatChecker())
    errors = sorted(validator.iter_errors(data), key=lambda e: _sort_key(list(e.absolute_path)))

    return [
        ValidationIssue(message=error.message, path=format_json_path(list(error.absolute_path)))
        for error in errors
    ]


def validate_resume_file(file_path: Union[str, Path]) -> None:
    """
    Validate a resume file against the schema.

    Raises:
        ResumeValidationFailed: If the document violates the schema.
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    data = load_resume(file_path)
    issues = validate_resume(data)

    if issues:
        logger.debug(f"{file_path}: {len(issues)} schema violation(s)")
        raise ResumeValidationFailed(issues)

    logger.debug(f"{file_path}: valid")
