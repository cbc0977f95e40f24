"""Render pipeline: ordered phases from markdown text to HTML, plus file-level orchestration"""

from pathlib import Path
from typing import Any, Optional, Union

from mdrender.core.export import build_document
from mdrender.core.extract.blocks import build_blocks
from mdrender.core.extract.literals import extract_literals
from mdrender.core.extract.structure import transform_structure
from mdrender.core.inline import rewrite_inline
from mdrender.core.models import ParseOptions
from mdrender.core.paragraphs import assemble_paragraphs
from mdrender.core.parse import discover_files, read_markdown
from mdrender.core.restore import restore


def _options(options: Union[ParseOptions, dict[str, Any], None]) -> ParseOptions:
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    return ParseOptions.model_validate(options)


def parse(markdown: str, options: Union[ParseOptions, dict[str, Any], None] = None) -> str:
    """Convert extended markdown to HTML.

    Phases run strictly in order: protect literals, structural lines, block
    state machine, inline spans, paragraphs, restore. Every registry is local
    to this call. Rendering failures degrade to escaped fallbacks, so this
    always returns a string.
    """
    opts = _options(options)
    text = markdown.replace('\r\n', '\n').replace('\r', '\n')

    text, literals = extract_literals(text)
    lines, footnotes = transform_structure(text, literals)
    lines = build_blocks(lines)
    lines = rewrite_inline(lines, footnotes)
    html = assemble_paragraphs(lines)
    return restore(html, literals, footnotes, opts)


def render_file(path: Path, options: Optional[ParseOptions] = None, standalone: bool = False) -> str:
    """Render one markdown file; standalone wraps it in a full HTML page.

    YAML frontmatter is stripped; its title (else the file stem) titles the page.
    """
    opts = _options(options)
    frontmatter, markdown = read_markdown(path)
    body = parse(markdown, opts)
    if not standalone:
        return body
    return build_document(body, str(frontmatter.get('title') or path.stem), opts.typography)


def run_build(
    path: str,
    output_dir: Path,
    options: Optional[ParseOptions] = None,
    standalone: bool = False,
    ) -> list[tuple[Path, Path]]:
    """Render every markdown file under path into output_dir. Returns (source, html_file) pairs.

    Output mirrors the source layout relative to path: a/b.md -> output_dir/a/b.html.
    """
    root = Path(path)
    base = root.parent if root.is_file() else root
    results = []
    for p in discover_files(root):
        try:
            html = render_file(p, options, standalone)
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        out_file = output_dir / p.relative_to(base).with_suffix('.html')
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(html, encoding='utf-8')
        results.append((p, out_file))
    return results
