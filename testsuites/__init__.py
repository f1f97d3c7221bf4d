"""
Test suites package.

Kept importable so UI tests can share page objects
(`testsuites.ui_testing.pages`) and `run_tests.py` can address suites by path.
"""
