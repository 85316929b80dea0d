"""Plain string sequence source."""

from collections.abc import Iterable
from typing import TextIO

from chooser.sources.base import CandidateSource, write_lines


class SequenceSource(CandidateSource):
    """Offers strings in order; each selected line is its own result."""

    def __init__(self, items: Iterable[str]) -> None:
        self.items = list(items)

    def feed(self, stream: TextIO) -> None:
        write_lines(stream, self.items)

    def resolve(self, label: str) -> str | None:
        return label
