""".. Ignore pydocstyle D400.

========================
FieldShaper Test Helpers
========================

Models and views used by the test suite.

"""
