"""Shared fixtures for core unit tests"""

import pytest

from mdrender.core.extract.literals import extract_literals
from mdrender.core.extract.structure import transform_structure


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and $E = mc^2$.

## Heading 2

- item one
- item two

```python
print("hello")
```

---

Footer paragraph.[^1]

[^1]: The footnote.
"""


@pytest.fixture(name="structure")
def structure_fixture():
    """Run phases 1-2 over a markdown string; returns (lines, footnotes, literals)."""
    def _run(md: str):
        text, literals = extract_literals(md)
        lines, footnotes = transform_structure(text, literals)
        return lines, footnotes, literals
    return _run


@pytest.fixture(name="no_typesetting")
def no_typesetting_fixture(monkeypatch):
    """Fail the test if the math typesetter is ever invoked."""
    def _fail(*args, **kwargs):
        raise AssertionError("render_math must not be called")
    monkeypatch.setattr("mdrender.core.restore.render_math", _fail)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
