"""Paragraph segmentation for line-oriented plain text.

Responsibilities:
- Group a line stream into maximal runs of non-blank lines.
- Keep short standalone lines verbatim and reflow hard-wrapped prose.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

DEFAULT_HEADING_MAX_CHARS = 60


class ParagraphSegmenter:
    """Turn a line stream into normalized paragraph strings."""

    def __init__(self, heading_max_chars: int = DEFAULT_HEADING_MAX_CHARS) -> None:
        """Initialize the segmenter with the short-line (heading) threshold."""

        if heading_max_chars <= 0:
            raise ValueError("`heading_max_chars` must be a positive integer.")
        self.heading_max_chars = heading_max_chars

    def iter_paragraphs(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield one normalized paragraph per run of non-blank lines.

        Blank lines close the current paragraph; runs of blank lines never
        produce empty paragraphs. The input is consumed lazily, once.
        """

        pending: list[str] = []
        for line in lines:
            if line.strip():
                pending.append(line)
                continue
            if pending:
                yield self.normalize(pending)
                pending = []
        if pending:
            yield self.normalize(pending)

    def normalize(self, lines: Sequence[str]) -> str:
        """Normalize the raw lines of one paragraph.

        A single line shorter than `heading_max_chars` is kept as-is apart from
        trailing whitespace. Anything else is reflowed: each line is stripped and
        the lines are joined with single spaces.
        """

        if len(lines) == 1 and len(lines[0]) < self.heading_max_chars:
            return lines[0].rstrip()
        return " ".join(line.strip() for line in lines).rstrip()
