"""
I/O utilities for resumed.

Provides functions for:
- Loading a resume JSON document
- Reading the theme declared inside a resume
- Writing JSON documents back to disk
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_resume(filepath: PathLike) -> Dict[str, Any]:
    """
    Load a resume from a JSON file.

    Read and decode errors are left to the caller.

    Args:
        filepath: Path to the resume JSON file.

    Returns:
        The parsed resume.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    filepath = Path(filepath)
    data = json.loads(filepath.read_text(encoding="utf-8"))
    logger.debug(f"Loaded resume from {filepath}")
    return data


def get_meta_theme(resume: Any) -> Optional[str]:
    """Return the theme named in ``meta.theme``, if the resume declares one."""
    if not isinstance(resume, dict):
        return None
    meta = resume.get("meta")
    if not isinstance(meta, dict):
        return None
    theme = meta.get("theme")
    if isinstance(theme, str) and theme.strip():
        return theme.strip()
    return None


def write_json(filepath: PathLike, data: Dict[str, Any]) -> Path:
    """Write ``data`` as indented JSON, creating parent directories."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return filepath
