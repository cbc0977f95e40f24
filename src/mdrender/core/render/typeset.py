"""Math typesetting: LaTeX formulas to MathML via latex2mathml"""

import re

import latex2mathml.converter


CHEMISTRY_RE = re.compile(r'\\(ce|pu)\s*\{')
ARROWS = (
    ('<=>', r' \rightleftharpoons '),
    ('<->', r' \leftrightarrow '),
    ('->', r' \rightarrow '),
    ('<-', r' \leftarrow '),
)


class MathRenderError(Exception):
    """A formula could not be typeset."""


def _group_end(text: str, start: int) -> int:
    """Index just past the brace group opening at text[start]."""
    depth = 0
    for i in range(start, len(text)):
        if text[i] == '{':
            depth += 1
        elif text[i] == '}':
            depth -= 1
            if depth == 0:
                return i + 1
    raise MathRenderError(f"Unbalanced braces in chemistry command at {start}")


def _chemistry(body: str) -> str:
    """Light mhchem rewrite: upright symbols, subscripted counts, charges, arrows."""
    body = re.sub(r'([A-Za-z)\]])(\d+)', r'\1_{\2}', body)
    body = re.sub(r'\^([0-9]*[+-])', r'^{\1}', body)
    for arrow, latex in ARROWS:
        body = body.replace(arrow, latex)
    return r'\mathrm{' + body + '}'


def expand_chemistry(formula: str) -> str:
    """Rewrite every \\ce{...} and \\pu{...} into plain LaTeX."""
    out = []
    pos = 0
    while m := CHEMISTRY_RE.search(formula, pos):
        brace = m.end() - 1
        end = _group_end(formula, brace)
        body = formula[brace + 1:end - 1]
        out.append(formula[pos:m.start()])
        out.append(_chemistry(body) if m.group(1) == 'ce' else r'\mathrm{' + body + '}')
        pos = end
    out.append(formula[pos:])
    return ''.join(out)


def render_math(formula: str, display_mode: bool, trust: bool) -> str:
    """Typeset formula as MathML. Chemistry commands require trust.

    Raises MathRenderError on any failure.
    """
    latex = formula
    if CHEMISTRY_RE.search(latex):
        if not trust:
            raise MathRenderError("Chemistry commands require trusted rendering")
        latex = expand_chemistry(latex)
    try:
        return latex2mathml.converter.convert(latex, display="block" if display_mode else "inline")
    except Exception as e:
        raise MathRenderError(str(e) or type(e).__name__) from e
