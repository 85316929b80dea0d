"""Caller-driven streaming source."""

from collections.abc import Callable
from typing import TextIO

from chooser.sources.base import CandidateSource


class WriterSource(CandidateSource):
    """
    Lets the caller write arbitrary lines to the chooser's stdin.

    The writer must not close the stream; it is closed once the writer
    returns.
    """

    def __init__(self, writer: Callable[[TextIO], None]) -> None:
        self.writer = writer

    def feed(self, stream: TextIO) -> None:
        self.writer(stream)

    def resolve(self, label: str) -> str | None:
        return label
