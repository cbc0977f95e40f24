"""Paragraph assembly over the typed line stream"""

from mdrender.core.models import PROSE_KINDS, Line, LineKind


def assemble_paragraphs(lines: list[Line]) -> str:
    """Wrap each run of prose lines in <p>, joined by single spaces.

    Blank and structural lines flush the current run; blank lines are then
    dropped. Never produces an empty paragraph.
    """
    out: list[str] = []
    run: list[str] = []

    def _flush() -> None:
        if run:
            out.append('<p>' + ' '.join(run) + '</p>')
            run.clear()

    for line in lines:
        if line.kind in PROSE_KINDS and line.text.strip():
            run.append(line.text)
            continue
        _flush()
        if line.kind != LineKind.blank and line.text.strip():
            out.append(line.text)
    _flush()

    return '\n'.join(out)
