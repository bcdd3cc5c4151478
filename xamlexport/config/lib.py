"""Centralized environment configuration management for xaml-export.

Provides a unified interface for all export options with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from xamlexport.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> ignore = get_environment(EnvVar.XAML_IGNORE_FONT_FAMILY)  # Returns bool
    >>> suffix = get_environment(EnvVar.XAML_DUPLICATE_SUFFIX)  # str | None
    >>>
    >>> # Override at runtime
    >>> ignore = get_environment(EnvVar.XAML_IGNORE_FONT_FAMILY, override=True)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

from pydantic import BaseModel

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "XAML_SORT_RESOURCES").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str or bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by xaml-export.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - styles: Label style generation
        - resources: Color and style resource dictionaries
        - runtime: Caching and logging
    """

    # -------------------------------------------------------------------------
    # Label Styles
    # -------------------------------------------------------------------------
    XAML_IGNORE_FONT_FAMILY = EnvConfig(
        name="XAML_IGNORE_FONT_FAMILY",
        default=False,
        var_type=bool,
        description="Leave font family out of style signatures and output",
        category="styles",
    )
    XAML_TEXT_ALIGNMENT_MODE = EnvConfig(
        name="XAML_TEXT_ALIGNMENT_MODE",
        default="style",
        var_type=str,
        description="'style' emits HorizontalTextAlignment in label styles",
        category="styles",
    )

    # -------------------------------------------------------------------------
    # Resources
    # -------------------------------------------------------------------------
    XAML_SORT_RESOURCES = EnvConfig(
        name="XAML_SORT_RESOURCES",
        default=True,
        var_type=bool,
        description="Sort color resources by name",
        category="resources",
    )
    XAML_DUPLICATE_SUFFIX = EnvConfig(
        name="XAML_DUPLICATE_SUFFIX",
        default=None,
        var_type=str,
        description="Name suffix marking duplicate resources to skip",
        category="resources",
    )

    # -------------------------------------------------------------------------
    # Runtime
    # -------------------------------------------------------------------------
    XAML_ENABLE_CACHE = EnvConfig(
        name="XAML_ENABLE_CACHE",
        default=False,
        var_type=bool,
        description="Cache exported resource dictionaries per session",
        category="runtime",
    )
    XAML_LOG_LEVEL = EnvConfig(
        name="XAML_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the command line interface",
        category="runtime",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str or bool).

    Example:
        >>> get_environment(EnvVar.XAML_SORT_RESOURCES)
        True
        >>> get_environment(EnvVar.XAML_SORT_RESOURCES, override=False)
        False
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)

    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (styles, resources, runtime).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Export Options
# =============================================================================


class ExportOptions(BaseModel):
    """Resolved option set for one export session.

    Field names follow the host application's option names so that
    `ExportContext.get_option("ignoreFontFamily")` keeps working through
    the camelCase aliases.
    """

    ignore_font_family: bool = False
    text_alignment_mode: str = "style"
    sort_resources: bool = True
    duplicate_suffix: str | None = None
    enable_cache: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_environment(cls, **overrides: Any) -> ExportOptions:
        """Build options from environment variables.

        Args:
            **overrides: Field values that take priority over the environment.

        Returns:
            ExportOptions with every field resolved.
        """
        return cls(
            ignore_font_family=get_environment(
                EnvVar.XAML_IGNORE_FONT_FAMILY,
                override=overrides.get("ignore_font_family"),
            ),
            text_alignment_mode=get_environment(
                EnvVar.XAML_TEXT_ALIGNMENT_MODE,
                override=overrides.get("text_alignment_mode"),
            ),
            sort_resources=get_environment(
                EnvVar.XAML_SORT_RESOURCES,
                override=overrides.get("sort_resources"),
            ),
            duplicate_suffix=get_environment(
                EnvVar.XAML_DUPLICATE_SUFFIX,
                override=overrides.get("duplicate_suffix"),
            ),
            enable_cache=get_environment(
                EnvVar.XAML_ENABLE_CACHE,
                override=overrides.get("enable_cache"),
            ),
        )

    def get_option(self, name: str) -> Any:
        """Look up an option by host name (camelCase) or field name.

        Raises:
            KeyError: If the option is unknown.
        """
        field_name = _OPTION_ALIASES.get(name, name)
        if field_name not in type(self).model_fields:
            available = ", ".join(sorted(_OPTION_ALIASES))
            raise KeyError(f"Unknown option '{name}'. Available: {available}")
        return getattr(self, field_name)


_OPTION_ALIASES: dict[str, str] = {
    "ignoreFontFamily": "ignore_font_family",
    "textAlignmentMode": "text_alignment_mode",
    "sortResources": "sort_resources",
    "duplicateSuffix": "duplicate_suffix",
    "enableCache": "enable_cache",
}


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "ExportOptions",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Introspection
    "list_environment_variables",
]
