"""Mapping of raw chooser output to result values."""

import logging

from chooser.sources.base import CandidateSource

logger = logging.getLogger(__name__)


def split_selection(output: str) -> list[str]:
    """Split chooser output into trimmed, non-blank lines in emitted order."""
    return [line.strip() for line in output.split("\n") if line.strip()]


def map_output(output: str, source: CandidateSource) -> list[str]:
    """
    Map chooser output back to the values the caller wants.

    Args:
        output: Captured stdout of the chooser
        source: The candidate source that was fed to the chooser

    Returns:
        Result values in the order the chooser emitted them
    """
    results: list[str] = []
    for label in split_selection(output):
        value = source.resolve(label)
        if value is not None:
            results.append(value)

    logger.debug(f"Mapped {len(results)} selection(s)")
    return results
