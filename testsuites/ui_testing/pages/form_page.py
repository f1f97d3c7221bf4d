"""
================================================================================
Form Page Object
================================================================================

Page object for a small static form, rendered with `page.set_content`.

The page objects only expose sub-elements; state checks go through the
pageloader utilities (exists, has_class, is_hidden ...).

================================================================================
"""

from __future__ import annotations

from pageloader import ByCss, PageObject, PageObjectList, create_po, exists, get_inner_text
from pageloader.playwright_element import PlaywrightElement


FORM_HTML = """
<form id="signup">
  <input id="email" class="field required" autofocus>
  <span id="hint" style="visibility: hidden">Use your work email</span>
  <span id="note" style="visibility: collapse">Optional</span>
  <div id="banner" style="display: none">Saved</div>
  <button class="btn primary" type="button">Submit</button>
  <button class="btn" type="button">Cancel</button>
</form>
"""


class ButtonPO(PageObject):
    """A single button."""

    @property
    def label(self) -> str:
        return get_inner_text(self)


class FormPO(PageObject):
    """Signup form."""

    @property
    def email(self) -> PlaywrightElement:
        return self.root.create_element(ByCss("#email"), [], [])

    @property
    def hint(self) -> PlaywrightElement:
        return self.root.create_element(ByCss("#hint"), [], [])

    @property
    def note(self) -> PlaywrightElement:
        return self.root.create_element(ByCss("#note"), [], [])

    @property
    def banner(self) -> PlaywrightElement:
        return self.root.create_element(ByCss("#banner"), [], [])

    @property
    def submit_button(self) -> ButtonPO:
        return create_po(self.root, ButtonPO.create, finder=ByCss("button.primary"))

    @property
    def missing_button(self) -> ButtonPO:
        return create_po(self.root, ButtonPO.create, finder=ByCss("button.danger"))

    @property
    def buttons(self) -> PageObjectList[ButtonPO]:
        elements = self.root.create_element(ByCss("button"), [], []).all()
        return PageObjectList.of(elements, ButtonPO.create)

    @property
    def errors(self) -> PageObjectList[ButtonPO]:
        elements = self.root.create_element(ByCss(".error"), [], []).all()
        return PageObjectList.of(elements, ButtonPO.create)

    def submit_label(self) -> str:
        # Only read the label if the button is present
        return self.submit_button.label if exists(self.submit_button) else ""
