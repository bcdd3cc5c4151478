"""Project resource validation.

This module provides static checks on a project's shared resources,
detecting problems that would produce broken or ambiguous resource
dictionaries before anything is exported.
"""

from dataclasses import dataclass

from xamlexport.color import actual_key
from xamlexport.design import Project


@dataclass
class ValidationIssue:
    """Represents a validation issue in a project.

    Attributes:
        subject: Name (or position) of the offending resource.
        message: Human-readable description.
        issue_type: Category of the issue.
    """

    subject: str
    message: str
    issue_type: str


def validate_project(
    project: Project, duplicate_suffix: str | None = None
) -> list[ValidationIssue]:
    """Validate a project's colors and text styles.

    Performs the following checks:
        - Every color has a name (unnamed colors get no resource key)
        - Color keys stay unique after whitespace and suffix removal
        - Text style names are unique (they decide key order)

    Resources whose names end with the duplicate suffix are skipped; the
    exporter filters them out too.

    Args:
        project: The project to validate.
        duplicate_suffix: Suffix marking duplicated resources.

    Returns:
        list[ValidationIssue]: Issues found (empty if valid).

    Example:
        >>> for issue in validate_project(project):
        ...     print(f"{issue.subject}: {issue.message}")
    """
    issues: list[ValidationIssue] = []
    issues.extend(_check_color_names(project, duplicate_suffix))
    issues.extend(_check_text_style_names(project, duplicate_suffix))
    return issues


def is_valid(project: Project, duplicate_suffix: str | None = None) -> bool:
    """Check if a project has no validation issues."""
    return not validate_project(project, duplicate_suffix)


def _skipped(name: str | None, duplicate_suffix: str | None) -> bool:
    return bool(duplicate_suffix and name and name.endswith(duplicate_suffix))


def _check_color_names(
    project: Project, duplicate_suffix: str | None
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    names_by_key: dict[str, list[str]] = {}

    for position, color in enumerate(project.colors):
        if _skipped(color.name, duplicate_suffix):
            continue
        key = actual_key(color.name, duplicate_suffix)
        if not key:
            issues.append(
                ValidationIssue(
                    subject=f"colors[{position}]",
                    message="Color has no name and cannot be referenced",
                    issue_type="unnamed_color",
                )
            )
            continue
        names_by_key.setdefault(key, []).append(color.name)

    for key, names in names_by_key.items():
        if len(names) > 1:
            listed = ", ".join(f"'{name}'" for name in names)
            issues.append(
                ValidationIssue(
                    subject=key,
                    message=f"Colors {listed} all map to key '{key}'",
                    issue_type="duplicate_color_key",
                )
            )

    return issues


def _check_text_style_names(
    project: Project, duplicate_suffix: str | None
) -> list[ValidationIssue]:
    counts: dict[str, int] = {}
    for text_style in project.text_styles:
        if _skipped(text_style.name, duplicate_suffix):
            continue
        counts[text_style.name] = counts.get(text_style.name, 0) + 1

    return [
        ValidationIssue(
            subject=name,
            message=f"Text style name '{name}' appears {count} times",
            issue_type="duplicate_text_style_name",
        )
        for name, count in counts.items()
        if count > 1
    ]


__all__ = ["ValidationIssue", "is_valid", "validate_project"]
