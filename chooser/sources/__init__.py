"""Candidate sources for the different input shapes."""

from chooser.sources.base import CandidateSource, get_source
from chooser.sources.mapping import MappingSource, UnknownLabel, ValueMappingSource
from chooser.sources.sequence import SequenceSource
from chooser.sources.writer import WriterSource

__all__ = [
    "CandidateSource",
    "MappingSource",
    "SequenceSource",
    "UnknownLabel",
    "ValueMappingSource",
    "WriterSource",
    "get_source",
]
