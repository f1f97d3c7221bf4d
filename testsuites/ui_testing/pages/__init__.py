"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations used by the UI suite.

Author: Automation Team
License: MIT
================================================================================
"""

from .form_page import FORM_HTML, ButtonPO, FormPO

__all__ = [
    "FORM_HTML",
    "ButtonPO",
    "FormPO",
]
