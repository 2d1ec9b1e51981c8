"""
Theme registry and resolution for resumed.

A theme is any object exposing ``render(resume) -> str``: a module, a class
instance, or a namespace. Themes are looked up by name in this order:

1. Themes registered in-process (``register_theme``)
2. Entry points in the ``resumed.themes`` group of installed distributions
3. Importable modules: the name itself, the name with ``-`` replaced by ``_``,
   and ``jsonresume_theme_<name>``
"""

import importlib
import logging
from importlib.metadata import entry_points
from typing import Any, Dict, Iterator, List, Optional, Protocol, runtime_checkable

from .errors import (
    InvalidThemeError,
    ThemeLoadError,
    ThemeNotFoundError,
    ThemeNotSpecifiedError,
)
from .io import get_meta_theme

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "resumed.themes"
THEME_MODULE_PREFIX = "jsonresume_theme_"


@runtime_checkable
class Theme(Protocol):
    """Anything that can turn a resume into markup."""

    def render(self, resume: Dict[str, Any]) -> str:
        ...


def select_theme_name(explicit: Optional[str], resume: Any) -> str:
    """
    Pick the theme for one render.

    The explicit name (from ``--theme``) wins over ``meta.theme``.

    Raises:
        ThemeNotSpecifiedError: If neither source names a theme.
    """
    if explicit and explicit.strip():
        return explicit.strip()

    declared = get_meta_theme(resume)
    if declared:
        return declared

    raise ThemeNotSpecifiedError()


def _is_theme(candidate: Any) -> bool:
    return callable(getattr(candidate, "render", None))


def module_candidates(name: str) -> List[str]:
    """Module names tried for ``name``, most specific first."""
    candidates = [name]
    normalized = name.replace("-", "_")
    if normalized not in candidates:
        candidates.append(normalized)
    if not normalized.startswith(THEME_MODULE_PREFIX):
        candidates.append(THEME_MODULE_PREFIX + normalized)
    return candidates


def _missing_module(error: ModuleNotFoundError, module_name: str) -> bool:
    """True when ``error`` means ``module_name`` itself is not installed."""
    missing = error.name or ""
    return module_name == missing or module_name.startswith(missing + ".")


class ThemeRegistry:
    """
    Registry mapping theme names to theme objects.

    Registered themes shadow installed ones with the same name.
    """

    def __init__(self):
        self._themes: Dict[str, Any] = {}

    def register(self, name: str, theme: Any, *, replace: bool = False) -> None:
        """
        Register a theme under ``name``.

        Raises:
            ValueError: If the name is taken and ``replace`` is False.
            InvalidThemeError: If ``theme`` has no render function.
        """
        if not _is_theme(theme):
            raise InvalidThemeError(name)
        if name in self._themes and not replace:
            raise ValueError(f"Theme '{name}' is already registered")
        self._themes[name] = theme
        logger.debug(f"Registered theme: {name}")

    def unregister(self, name: str) -> bool:
        """Remove a registered theme. Returns False if it was not registered."""
        if name in self._themes:
            del self._themes[name]
            logger.debug(f"Unregistered theme: {name}")
            return True
        return False

    def get(self, name: str) -> Optional[Any]:
        return self._themes.get(name)

    def list(self) -> List[str]:
        return sorted(self._themes)

    def clear(self) -> None:
        self._themes.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._themes

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def load(self, name: str) -> Any:
        """
        Resolve ``name`` to a theme.

        Raises:
            ThemeNotFoundError: Nothing registered, advertised or importable matches.
            InvalidThemeError: The match has no render function.
            ThemeLoadError: The theme exists but failed while being imported.
        """
        theme = self.get(name)
        if theme is not None:
            logger.debug(f"Using registered theme: {name}")
            return theme

        theme = self._load_entry_point(name)
        if theme is None:
            theme = self._import_module(name)

        if not _is_theme(theme):
            raise InvalidThemeError(name)
        return theme

    def _load_entry_point(self, name: str) -> Optional[Any]:
        for entry_point in entry_points(group=ENTRY_POINT_GROUP):
            if entry_point.name != name:
                continue
            logger.debug(f"Loading theme {name} from entry point {entry_point.value}")
            try:
                return entry_point.load()
            except Exception as e:
                raise ThemeLoadError(
                    name, f"Could not load theme {name}: {e}"
                ) from e
        return None

    def _import_module(self, name: str) -> Any:
        if not name or name.startswith("."):
            raise ThemeNotFoundError(name)

        for module_name in module_candidates(name):
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                if _missing_module(e, module_name):
                    logger.debug(f"No module named {module_name}")
                    continue
                raise ThemeLoadError(
                    name, f"Could not load theme {name}: {e}"
                ) from e
            except Exception as e:
                raise ThemeLoadError(
                    name, f"Could not load theme {name}: {e}"
                ) from e

            logger.info(f"Loaded theme {name} from module {module_name}")
            return module

        raise ThemeNotFoundError(name)


_default_registry: Optional[ThemeRegistry] = None


def create_default_registry() -> ThemeRegistry:
    """Create a registry holding the bundled themes."""
    from . import plain_theme

    registry = ThemeRegistry()
    registry.register("plain", plain_theme)
    return registry


def get_default_registry() -> ThemeRegistry:
    """Get the process-wide theme registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def reset_default_registry() -> None:
    """Drop the process-wide registry so it is rebuilt on next use."""
    global _default_registry
    _default_registry = None


def register_theme(name: str, theme: Any, *, replace: bool = False) -> None:
    """Register a theme in the default registry."""
    get_default_registry().register(name, theme, replace=replace)


def load_theme(name: str) -> Any:
    """Resolve a theme name using the default registry."""
    return get_default_registry().load(name)
