"""Static validation of project resources before export."""

from .lib import ValidationIssue, is_valid, validate_project

__all__ = ["ValidationIssue", "is_valid", "validate_project"]
