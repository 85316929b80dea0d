"""Label-to-value mapping sources."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, TextIO

from chooser.errors import UnknownSelection
from chooser.sources.base import CandidateSource, write_lines

logger = logging.getLogger(__name__)


class UnknownLabel(Enum):
    """What to do when the chooser returns a label that was not offered."""

    SKIP = "skip"  # Drop the line
    ERROR = "error"  # Raise UnknownSelection
    EMPTY = "empty"  # Return an empty payload


class MappingSource(CandidateSource):
    """
    Offers the labels of a mapping and returns their payloads.

    Labels are fed in mapping order.
    """

    def __init__(
        self,
        mapping: Mapping[str, str],
        on_unknown: UnknownLabel = UnknownLabel.SKIP,
    ) -> None:
        self.mapping = mapping
        self.on_unknown = on_unknown

    def feed(self, stream: TextIO) -> None:
        write_lines(stream, self.mapping.keys())

    def resolve(self, label: str) -> str | None:
        if label in self.mapping:
            return self.mapping[label].strip()

        if self.on_unknown == UnknownLabel.ERROR:
            raise UnknownSelection(label)

        if self.on_unknown == UnknownLabel.EMPTY:
            logger.debug(f"Unknown label {label!r}, returning empty payload")
            return ""

        logger.warning(f"Ignoring unknown selection: {label!r}")
        return None


class ValueMappingSource(CandidateSource):
    """
    Offers the labels of a mapping with arbitrary values.

    Labels are fed in sorted order so the chooser shows the same list on
    every call. The selected label itself is returned.
    """

    def __init__(self, mapping: Mapping[str, Any]) -> None:
        self.mapping = mapping

    def feed(self, stream: TextIO) -> None:
        write_lines(stream, sorted(self.mapping))

    def resolve(self, label: str) -> str | None:
        return label
