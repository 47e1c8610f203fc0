"""Markdown transcript parsing stage."""

from __future__ import annotations

import re

try:  # pragma: no cover - allow usage as package or script
    from .schemas.documents import ParsedMarkdown
except ImportError:  # pragma: no cover
    from schemas.documents import ParsedMarkdown  # type: ignore

SUMMARY_MARKER = "## サマリー"
SUMMARY_LIMIT = 500
SECTION_PREFIX = "###"

_SECTION_MARKER_RE = re.compile(r"^###\s*")
_SECTION_GLYPH_RE = re.compile(r"◆\s*")
_QUOTE_RE = re.compile(r"^>\s*")


def _clean_section(line: str) -> str:
    heading = _SECTION_MARKER_RE.sub("", line, count=1)
    return _SECTION_GLYPH_RE.sub("", heading, count=1).strip()


def parse_markdown(content: str) -> ParsedMarkdown:
    """Split a transcript into its summary excerpt and level-3 section headings.

    Summary capture starts after the ``## サマリー`` line and stops at the next
    line opening with ``##`` (level 2 or 3). Captured lines are joined by single
    spaces, one leading quote marker is dropped and the text is capped at
    500 characters.
    """
    in_summary = False
    summary_lines: list[str] = []
    sections: list[str] = []

    for raw_line in content.split("\n"):
        line = raw_line.strip()

        if line.startswith(SUMMARY_MARKER):
            in_summary = True
            continue

        if in_summary:
            if line.startswith("##"):
                in_summary = False
            elif line:
                summary_lines.append(line)

        if line.startswith(SECTION_PREFIX):
            sections.append(_clean_section(line))

    summary = _QUOTE_RE.sub("", " ".join(summary_lines), count=1)[:SUMMARY_LIMIT]
    return ParsedMarkdown(summary=summary, sections=sections, raw_text=content)
