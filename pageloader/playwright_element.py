"""
================================================================================
Playwright Element
================================================================================

PageLoaderElement implementation over Playwright's sync Locator API.

Components:
    - PlaywrightElement: element state queries and scoped element creation
    - ComputedStyle: lazy mapping over getComputedStyle()
    - PlaywrightPageUtils: root element and by_tag() for a Playwright page

Every Playwright failure (including timeouts) surfaces as PageLoaderException.

Usage:
    >>> utils = PlaywrightPageUtils(page)
    >>> button = utils.by_tag("button")
    >>> is_displayed(button)
    True

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Optional, Sequence, Set

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from .config_loader import get_config
from .exceptions import PageLoaderException
from .interfaces import ByTagName, PageLoaderElement, PageUtils, selector_of
from .page_object import PageObjectList


# Default timeout for element queries in milliseconds
DEFAULT_TIMEOUT = 5000

_CLASSES_JS = "e => Array.from(e.classList)"
_FOCUSED_JS = "e => e === document.activeElement"
_STYLE_VALUE_JS = "(e, name) => getComputedStyle(e).getPropertyValue(name)"
_STYLE_NAMES_JS = "e => Array.from(getComputedStyle(e))"


class ComputedStyle(Mapping[str, str]):
    """Read-only view of an element's computed style, queried per access."""

    def __init__(self, element: "PlaywrightElement"):
        self._element = element

    def __getitem__(self, name: str) -> str:
        value = self._element._evaluate(_STYLE_VALUE_JS, name)
        if not value:
            raise KeyError(name)
        return value

    def __iter__(self) -> Iterator[str]:
        return iter(self._element._evaluate(_STYLE_NAMES_JS))

    def __len__(self) -> int:
        return len(self._element._evaluate(_STYLE_NAMES_JS))


class PlaywrightElement(PageLoaderElement):
    """
    PageLoaderElement backed by a Playwright Locator.

    State queries act on the first match; `exists` is true when the
    locator matches at least one element.
    """

    def __init__(
        self,
        locator: Locator,
        timeout: Optional[int] = None,
        description: str = "",
    ):
        """
        Initialize element.

        Args:
            locator: Playwright Locator this element reads from
            timeout: Query timeout in milliseconds (defaults to element.timeout)
            description: Human-readable name for logs and errors
        """
        self._locator = locator
        if timeout is None:
            timeout = get_config("element.timeout", DEFAULT_TIMEOUT)
        self._timeout = timeout
        self._description = description or str(locator)

    @property
    def locator(self) -> Locator:
        return self._locator

    @property
    def timeout(self) -> int:
        return self._timeout

    @property
    def exists(self) -> bool:
        try:
            return self._locator.count() > 0
        except PlaywrightError as e:
            raise PageLoaderException(f"Failed to look up {self._description}: {e}") from e

    @property
    def classes(self) -> Set[str]:
        return set(self._evaluate(_CLASSES_JS))

    @property
    def displayed(self) -> bool:
        return self.computed_style.get("display") != "none"

    @property
    def computed_style(self) -> Mapping[str, str]:
        return ComputedStyle(self)

    @property
    def is_focused(self) -> bool:
        return bool(self._evaluate(_FOCUSED_JS))

    @property
    def inner_text(self) -> str:
        try:
            return self._locator.first.inner_text(timeout=self._timeout)
        except PlaywrightError as e:
            raise PageLoaderException(f"Failed to read text of {self._description}: {e}") from e

    def create_element(
        self,
        finder: Any,
        indices: Sequence[int],
        filters: Sequence[Callable[[Locator], Locator]],
    ) -> "PlaywrightElement":
        selector = selector_of(finder)
        locator = self._locator.locator(selector)
        for index in indices:
            locator = locator.nth(index)
        for locator_filter in filters:
            locator = locator_filter(locator)

        description = f"{self._description} >> {selector}"
        logger.debug(f"Created element: {description}")
        return PlaywrightElement(locator, timeout=self._timeout, description=description)

    def all(self) -> PageObjectList["PlaywrightElement"]:
        """One element per current match, in document order."""
        try:
            count = self._locator.count()
        except PlaywrightError as e:
            raise PageLoaderException(f"Failed to look up {self._description}: {e}") from e
        return PageObjectList(
            PlaywrightElement(
                self._locator.nth(i),
                timeout=self._timeout,
                description=f"{self._description} [{i}]",
            )
            for i in range(count)
        )

    def _evaluate(self, script: str, arg: Any = None) -> Any:
        try:
            return self._locator.first.evaluate(script, arg, timeout=self._timeout)
        except PlaywrightError as e:
            raise PageLoaderException(f"Failed to query {self._description}: {e}") from e

    def __repr__(self) -> str:
        return f"PlaywrightElement({self._description})"


class PlaywrightPageUtils(PageUtils):
    """PageUtils for a Playwright Page."""

    def __init__(self, page: Page, timeout: Optional[int] = None):
        self.page = page
        self._timeout = timeout

    @property
    def root(self) -> PlaywrightElement:
        return PlaywrightElement(
            self.page.locator(":root"),
            timeout=self._timeout,
            description=":root",
        )

    @allure.step("Find element by tag: {tag}")
    def by_tag(self, tag: str) -> PlaywrightElement:
        return self.root.create_element(ByTagName(tag), [], [])


__all__ = [
    "ComputedStyle",
    "DEFAULT_TIMEOUT",
    "PlaywrightElement",
    "PlaywrightPageUtils",
]
