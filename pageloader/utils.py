"""
================================================================================
Element Utilities
================================================================================

Functions usable inside Page Objects to do simple common checks on
PageLoaderElements or PageObjects without requiring a passthrough for
those properties.

These are not assertions; use them for control flow inside page objects.

Usage:
    class FormPO(PageObject):
        @property
        def submit_button(self) -> ButtonPO:
            return create_po(self.root, ButtonPO.create, finder=ByCss("button"))

        def submit(self) -> None:
            # Only click on the button if it exists
            if exists(self.submit_button):
                self.submit_button.click()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

import allure
from loguru import logger

from .exceptions import PageLoaderArgumentError, PageLoaderException
from .interfaces import PageLoaderElement, PageObjectCollection, POFactory, T


_HIDDEN = ("hidden", "collapse")


def exists(item: Any) -> bool:
    """
    Check if a PageLoaderElement/PageObject exists.

    For a collection of page objects (anything exposing `is_not_empty`,
    such as PageObjectList), checks that it is not empty.
    """
    if isinstance(item, PageObjectCollection):
        return item.is_not_empty
    try:
        return root_element_of(item).exists
    except (PageLoaderException, PageLoaderArgumentError):
        raise
    except Exception as e:
        logger.debug(f"exists failed on {type(item).__name__}: {e}")
        raise PageLoaderArgumentError.on_wrong_type("exists/notExists") from e


def not_exists(item: Any) -> bool:
    """Check if a PageLoaderElement/PageObject does not exist."""
    return not exists(item)


def has_class(item: Any, class_name: str) -> bool:
    """Check if a PageLoaderElement/PageObject contains given class."""
    return class_name in _root_element_of_and_check(item, "hasClass").classes


def is_displayed(item: Any) -> bool:
    """Check if a PageLoaderElement/PageObject is displayed based on "display" style."""
    return _root_element_of_and_check(item, "isDisplayed/isNotDisplayed").displayed


def is_not_displayed(item: Any) -> bool:
    """Check if a PageLoaderElement/PageObject is not displayed based on "display" style."""
    return not is_displayed(item)


def is_hidden(item: Any) -> bool:
    """
    Check if a PageLoaderElement/PageObject is hidden based on "visibility" style.

    Hidden means `visibility` is either `hidden` or `collapse`.
    """
    style = _root_element_of_and_check(item, "isHidden/isNotHidden").computed_style
    return style.get("visibility") in _HIDDEN


def is_not_hidden(item: Any) -> bool:
    """Check if a PageLoaderElement/PageObject is not hidden based on "visibility" style."""
    return not is_hidden(item)


def is_focused(item: Any) -> bool:
    """Check if a PageLoaderElement/PageObject is focused."""
    return _root_element_of_and_check(item, "isFocused/isNotFocused").is_focused


def is_not_focused(item: Any) -> bool:
    """Check if a PageLoaderElement/PageObject is not focused."""
    return not is_focused(item)


def get_inner_text(item: Any) -> str:
    """Get the inner text of a PageLoaderElement/PageObject."""
    return _root_element_of_and_check(item, "getInnerText").inner_text


def create_po(
    source: PageLoaderElement,
    po_factory: POFactory[T],
    finder: Optional[Any] = None,
) -> T:
    """
    Build a page object using `source` as context.

    Args:
        source: Element the page object is created from
        po_factory: Page object constructor, e.g. `MyPO.create`
        finder: When given, the page object wraps the element found by
                `finder` under `source` instead of `source` itself

    Returns:
        Whatever `po_factory` returns

    Example:
        >>> my_po = create_po(some_element, MyPO.create, finder=ByCss("some-tag"))
    """
    factory_name = getattr(po_factory, "__qualname__", repr(po_factory))
    with allure.step(f"Create page object: {factory_name}"):
        element = source if finder is None else source.create_element(finder, [], [])
        return po_factory(element)


def root_element_of(item: Any) -> PageLoaderElement:
    """
    Get the root element of a PageObject.

    A PageLoaderElement is returned as is.
    """
    if isinstance(item, PageLoaderElement):
        return item
    try:
        root = item.root
    except Exception as e:
        raise PageLoaderArgumentError.on_wrong_type("rootElementOf") from e
    if not isinstance(root, PageLoaderElement):
        raise PageLoaderArgumentError.on_wrong_type("rootElementOf")
    return root


def _root_element_of_and_check(item: Any, operation: str) -> PageLoaderElement:
    """Resolve `item` to an element and make sure that element exists."""
    try:
        root = root_element_of(item)
    except Exception as e:
        logger.debug(f"'{operation}' called on {type(item).__name__}")
        raise PageLoaderArgumentError.on_wrong_type(operation) from e
    if not root.exists:
        raise PageLoaderArgumentError.on_non_existing(operation)
    return root


__all__ = [
    "create_po",
    "exists",
    "get_inner_text",
    "has_class",
    "is_displayed",
    "is_focused",
    "is_hidden",
    "is_not_displayed",
    "is_not_focused",
    "is_not_hidden",
    "not_exists",
    "root_element_of",
]
