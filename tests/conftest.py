"""Root test configuration: isolate tests from the caller's environment"""

import os

import pytest


_ENV_PREFIX = "MDRENDER_"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDRENDER_* variables so settings come only from what a test sets."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
