"""
================================================================================
PageLoader Utilities
================================================================================

Convenience predicates for Page Objects built on PageLoaderElements.

Components:
    - utils: exists / has_class / is_displayed / is_hidden / is_focused ...
    - exceptions: PageLoaderArgumentError, PageLoaderException
    - interfaces: PageLoaderElement, PageUtils, finders
    - page_object: PageObject base, PageObjectList
    - playwright_element: Playwright-backed PageLoaderElement

Author: Automation Team
License: MIT
================================================================================
"""

from .exceptions import (
    ArgumentErrorKind,
    PageLoaderArgumentError,
    PageLoaderException,
    WrongTypeError,
)
from .interfaces import (
    ByCss,
    ByTagName,
    Finder,
    PageLoaderElement,
    PageObjectCollection,
    PageUtils,
    POFactory,
)
from .page_object import PageObject, PageObjectList
from .utils import (
    create_po,
    exists,
    get_inner_text,
    has_class,
    is_displayed,
    is_focused,
    is_hidden,
    is_not_displayed,
    is_not_focused,
    is_not_hidden,
    not_exists,
    root_element_of,
)

__version__ = "1.0.0"

__all__ = [
    "ArgumentErrorKind",
    "ByCss",
    "ByTagName",
    "Finder",
    "PageLoaderArgumentError",
    "PageLoaderElement",
    "PageLoaderException",
    "PageObject",
    "PageObjectCollection",
    "PageObjectList",
    "PageUtils",
    "POFactory",
    "WrongTypeError",
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
