"""
Unit test fixtures: in-memory PageLoaderElements, no browser required.
"""

from typing import Dict, Optional

import pytest

from pageloader.config_loader import ConfigLoader
from pageloader.interfaces import PageLoaderElement, selector_of


class FakeElement(PageLoaderElement):
    """PageLoaderElement with fixed state."""

    def __init__(
        self,
        exists: bool = True,
        classes=(),
        displayed: bool = True,
        style: Optional[Dict[str, str]] = None,
        focused: bool = False,
        text: str = "",
        children: Optional[Dict[str, "FakeElement"]] = None,
    ):
        self._exists = exists
        self._classes = set(classes)
        self._displayed = displayed
        self._style = style if style is not None else {"visibility": "visible"}
        self._focused = focused
        self._text = text
        self._children = children or {}
        self.created = []

    @property
    def exists(self) -> bool:
        return self._exists

    @property
    def classes(self):
        return self._classes

    @property
    def displayed(self) -> bool:
        return self._displayed

    @property
    def computed_style(self):
        return self._style

    @property
    def is_focused(self) -> bool:
        return self._focused

    @property
    def inner_text(self) -> str:
        return self._text

    def create_element(self, finder, indices, filters):
        self.created.append((finder, list(indices), list(filters)))
        return self._children.get(selector_of(finder), FakeElement(exists=False))


class FailingElement(FakeElement):
    """Element whose existence lookup raises `error`."""

    def __init__(self, error: Exception):
        super().__init__()
        self._error = error

    @property
    def exists(self) -> bool:
        raise self._error


class RootHolder:
    """Page object that does not inherit from PageObject."""

    def __init__(self, root):
        self.root = root


@pytest.fixture
def fake_element():
    return FakeElement


@pytest.fixture
def failing_element():
    return FailingElement


@pytest.fixture
def root_holder():
    return RootHolder


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Point ConfigLoader at an empty config so unit tests ignore local files."""
    monkeypatch.setenv("PAGELOADER_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("ELEMENT_TIMEOUT", raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
