"""Provider abstraction for markup rendering.

This module defines the abstract base class for markup providers and
provides a registry/factory for accessing them by name.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from xamlexport.core import get_logger
from xamlexport.elements import Element

logger = get_logger("providers")


@dataclass
class RenderWarning:
    """Warning emitted when an element cannot be rendered by a provider.

    Attributes:
        element_type: Class name of the skipped element.
        message: Human-readable explanation.
    """

    element_type: str
    message: str


@dataclass
class RenderResult:
    """Result of rendering including markup and any warnings.

    Attributes:
        code: The generated markup.
        warnings: Elements that were skipped.
        provider: Name of the provider that generated this result.
    """

    code: str
    warnings: list[RenderWarning] = field(default_factory=list)
    provider: str = ""

    @property
    def has_warnings(self) -> bool:
        """Check if any warnings were emitted."""
        return len(self.warnings) > 0


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted XML attribute."""
    return escape(str(value), {'"': "&quot;"})


class MarkupProvider(ABC):
    """Abstract base class for markup providers.

    Each provider renders element property bags to one markup language
    (e.g., XAML, CSS).

    Subclasses must implement:
        - name: Provider identifier string
        - file_extension: Output file extension
        - language: Language tag of the generated code
        - supported_elements: Element classes the provider renders
        - render_element: Single element to markup

    Example:
        >>> class MyProvider(MarkupProvider):
        ...     name = "txt"
        ...     file_extension = ".txt"
        ...     language = "text"
        ...     supported_elements = frozenset({Label})
        ...     def render_element(self, element) -> str:
        ...         return element.text
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier string."""
        ...

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.xaml', '.css')."""
        ...

    @property
    @abstractmethod
    def language(self) -> str:
        """Language tag attached to generated code (e.g., 'xml')."""
        ...

    @property
    @abstractmethod
    def supported_elements(self) -> frozenset[type]:
        """Element classes this provider can render."""
        ...

    @abstractmethod
    def render_element(self, element: Element) -> str:
        """Render one supported element.

        Args:
            element: The element to render.

        Returns:
            str: Markup for the element.
        """
        ...

    def supports(self, element: Element) -> bool:
        """Check whether the provider renders this element."""
        return type(element) in self.supported_elements

    def render(self, element: Element) -> str:
        """Render one element.

        Raises:
            TypeError: If the element type is not supported.
        """
        if not self.supports(element):
            raise TypeError(
                f"{type(element).__name__} is not supported by {self.name}"
            )
        return self.render_element(element)

    def render_many(self, elements: Iterable[Element]) -> str:
        """Render supported elements one after another.

        Unsupported elements are skipped; use render_with_warnings to
        find out which.
        """
        return self.render_with_warnings(elements).code

    def render_with_warnings(self, elements: Iterable[Element]) -> RenderResult:
        """Render elements and collect warnings for skipped ones.

        Args:
            elements: Elements to render, in output order.

        Returns:
            RenderResult with the joined markup and warnings.
        """
        parts: list[str] = []
        warnings: list[RenderWarning] = []

        for element in elements:
            if self.supports(element):
                parts.append(self.render_element(element))
                continue
            element_type = type(element).__name__
            warnings.append(
                RenderWarning(
                    element_type=element_type,
                    message=f"{element_type} is not supported by {self.name}",
                )
            )

        for warning in warnings:
            logger.warning(f"[{self.name}] Skipped: {warning.message}")

        return RenderResult(code="".join(parts), warnings=warnings, provider=self.name)


# Provider registry - populated by provider modules on import
_registry: dict[str, type[MarkupProvider]] = {}


def register_provider(provider_cls: type[MarkupProvider]) -> type[MarkupProvider]:
    """Register a provider class in the registry.

    Uses a temporary instance to retrieve the provider name.

    Args:
        provider_cls: The provider class to register.

    Returns:
        The provider class (for decorator chaining).
    """
    _registry[provider_cls().name] = provider_cls
    return provider_cls


def get_provider(name: str) -> MarkupProvider:
    """Get a provider instance by name.

    Args:
        name: The provider identifier (e.g., "xaml", "css").

    Returns:
        MarkupProvider: An instance of the requested provider.

    Raises:
        KeyError: If no provider with the given name is registered.

    Example:
        >>> provider = get_provider("xaml")
        >>> provider.render(label)
    """
    if name not in _registry:
        _import_providers()
        if name not in _registry:
            available = ", ".join(_registry.keys()) or "(none)"
            raise KeyError(f"Unknown provider '{name}'. Available: {available}")
    return _registry[name]()


def list_providers() -> list[str]:
    """List all registered provider names.

    Example:
        >>> list_providers()
        ['xaml', 'css']
    """
    _import_providers()
    return list(_registry.keys())


def _import_providers() -> None:
    """Import provider modules to trigger registration."""
    import importlib

    for module_name in ("xaml", "css"):
        importlib.import_module(f"xamlexport.providers.{module_name}")
