"""Base candidate source interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TextIO


class CandidateSource(ABC):
    """
    Abstract base class for candidate sources.

    A source knows how to write its candidates to a chooser's stdin and how
    to turn a selected line back into the value the caller wants.
    """

    @abstractmethod
    def feed(self, stream: TextIO) -> None:
        """Write candidate lines to the chooser's stdin."""
        ...

    @abstractmethod
    def resolve(self, label: str) -> str | None:
        """
        Map a selected, trimmed line back to a result value.

        Returns:
            The result value, or None to drop the line
        """
        ...


def write_lines(stream: TextIO, lines: Iterable[str]) -> None:
    """Write each line to the stream followed by a newline."""
    for line in lines:
        stream.write(f"{line}\n")


def get_source(candidates: Any) -> CandidateSource:
    """Get the appropriate source for the shape of the candidates."""
    from chooser.sources.mapping import MappingSource, ValueMappingSource
    from chooser.sources.sequence import SequenceSource
    from chooser.sources.writer import WriterSource

    if isinstance(candidates, CandidateSource):
        return candidates

    if isinstance(candidates, Mapping):
        if all(isinstance(value, str) for value in candidates.values()):
            return MappingSource(candidates)
        return ValueMappingSource(candidates)

    if callable(candidates):
        writer: Callable[[TextIO], None] = candidates
        return WriterSource(writer)

    if isinstance(candidates, Iterable) and not isinstance(candidates, (str, bytes)):
        return SequenceSource(candidates)

    raise TypeError(f"Unsupported candidates: {type(candidates).__name__}")
