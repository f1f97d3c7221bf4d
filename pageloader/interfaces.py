"""
================================================================================
PageLoader Interfaces
================================================================================

Contracts consumed by the element utilities.

    - PageLoaderElement: a handle to a single UI element
    - Finder: locates a scoped sub-element (ByCss, ByTagName)
    - PageUtils: environment-specific entry points (root element, by_tag)

Page objects need no base class: anything exposing a `root` attribute that
yields a PageLoaderElement is accepted by the utilities.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Mapping,
    Protocol,
    Sequence,
    Set,
    TypeVar,
    runtime_checkable,
)


T = TypeVar("T")


@runtime_checkable
class Finder(Protocol):
    """Anything that can be turned into a selector."""

    @property
    def selector(self) -> str:
        ...


@dataclass(frozen=True)
class ByCss:
    """Finds elements matching a CSS selector."""

    css: str

    @property
    def selector(self) -> str:
        return self.css


@dataclass(frozen=True)
class ByTagName:
    """Finds elements by tag name."""

    tag: str

    @property
    def selector(self) -> str:
        return self.tag


@runtime_checkable
class PageObjectCollection(Protocol):
    """Any group of page objects that can say whether it is empty."""

    @property
    def is_not_empty(self) -> bool:
        ...


class PageLoaderElement(ABC):
    """
    Handle to a single UI element.

    Implementations answer state queries against the live UI; every
    property may raise PageLoaderException when the query itself fails.
    """

    @property
    @abstractmethod
    def exists(self) -> bool:
        """Whether the element is currently present."""

    @property
    @abstractmethod
    def classes(self) -> Set[str]:
        """CSS classes on the element."""

    @property
    @abstractmethod
    def displayed(self) -> bool:
        """Whether the computed `display` style is not `none`."""

    @property
    @abstractmethod
    def computed_style(self) -> Mapping[str, str]:
        """Computed CSS style, keyed by property name."""

    @property
    @abstractmethod
    def is_focused(self) -> bool:
        """Whether the element is the document's active element."""

    @property
    @abstractmethod
    def inner_text(self) -> str:
        """Rendered text of the element."""

    @abstractmethod
    def create_element(
        self,
        finder: Any,
        indices: Sequence[int],
        filters: Sequence[Callable[[Any], Any]],
    ) -> "PageLoaderElement":
        """
        Create a new element scoped under this one.

        Args:
            finder: Finder (or raw selector string) locating the sub-element
            indices: Positions to narrow the match to, applied in order
            filters: Callables refining the match, applied in order
        """


# Function for PageObject constructor, typically `SomePO.create`
POFactory = Callable[[PageLoaderElement], T]


class PageUtils(ABC):
    """Convenience entry points that vary by environment."""

    @property
    @abstractmethod
    def root(self) -> PageLoaderElement:
        """Current root element of the DOM, used to create page objects."""

    @abstractmethod
    def by_tag(self, tag: str) -> PageLoaderElement:
        """Load an element from the root by tag name."""


def selector_of(finder: Any) -> str:
    """Resolve a Finder or raw selector string to a selector."""
    if isinstance(finder, str):
        return finder
    if isinstance(finder, Finder):
        return finder.selector
    raise TypeError(f"Unsupported finder: {finder!r}")


__all__ = [
    "ByCss",
    "ByTagName",
    "Finder",
    "PageLoaderElement",
    "PageObjectCollection",
    "PageUtils",
    "POFactory",
    "selector_of",
]
