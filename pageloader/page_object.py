"""
================================================================================
Page Object Base
================================================================================

Foundation classes for Page Object Model implementation.

Provides:
    - PageObject: wraps a root PageLoaderElement
    - PageObjectList: ordered group of page objects or elements

Usage:
    class ButtonPO(PageObject):
        @property
        def label(self) -> str:
            return get_inner_text(self)

    button = ButtonPO.create(page_utils.by_tag("material-button"))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Sequence, TypeVar, Union, overload

from .interfaces import PageLoaderElement


P = TypeVar("P")


class PageObject:
    """
    Base class for page objects.

    Subclasses expose sub-elements and actions; the utilities only need
    `root`. Any class with a `root` attribute works the same way, so
    inheriting from this class is optional.
    """

    def __init__(self, root: PageLoaderElement):
        """
        Initialize page object.

        Args:
            root: Element this page object is anchored to
        """
        self._root = root

    @property
    def root(self) -> PageLoaderElement:
        return self._root

    @classmethod
    def create(cls, context: PageLoaderElement) -> "PageObject":
        """Factory usable as a POFactory: `create_po(el, MyPO.create)`."""
        return cls(context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={self._root!r})"


class PageObjectList(Sequence[P]):
    """
    Ordered group of page objects (or elements).

    Only emptiness matters to `exists`: whether individual entries exist
    is not checked.
    """

    def __init__(self, items: Iterable[P] = ()):
        self._items: List[P] = list(items)

    @classmethod
    def of(
        cls,
        elements: Iterable[PageLoaderElement],
        factory: Callable[[PageLoaderElement], P],
    ) -> "PageObjectList[P]":
        """Build a list by applying `factory` to each element."""
        return cls(factory(element) for element in elements)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def is_not_empty(self) -> bool:
        return bool(self._items)

    @overload
    def __getitem__(self, index: int) -> P:
        ...

    @overload
    def __getitem__(self, index: slice) -> "PageObjectList[P]":
        ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[P]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


__all__ = [
    "PageObject",
    "PageObjectList",
]
