"""Centralized configuration management for xaml-export.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from xamlexport.config import EnvVar, ExportOptions, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> sort = get_environment(EnvVar.XAML_SORT_RESOURCES)  # Returns bool: True
    >>>
    >>> # Resolve the full option set for an export session
    >>> options = ExportOptions.from_environment(ignore_font_family=True)

Environment Variable Categories:
    styles: Label style signatures and output
    resources: Color and style resource dictionaries
    runtime: Caching and logging
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    ExportOptions,
    # Main interface
    get_environment,
    get_environment_info,
    # Introspection
    list_environment_variables,
)

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
