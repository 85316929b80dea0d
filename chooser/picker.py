"""Ask the user to pick from a list using whatever chooser is installed."""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TextIO

from chooser.mapper import map_output
from chooser.models import Invocation, Options
from chooser.session import PipeSession
from chooser.sources.base import CandidateSource
from chooser.sources.mapping import MappingSource, UnknownLabel, ValueMappingSource
from chooser.sources.sequence import SequenceSource
from chooser.sources.writer import WriterSource
from chooser.system.registry import ChooserRegistry
from chooser.system.selector import ChooserSelector

logger = logging.getLogger(__name__)


class Picker:
    """
    Runs one selection: resolve choosers, select one, run it, map the output.

    Every collaborator can be injected; by default choosers are probed on
    the search path and run through the shell named in the options.
    """

    def __init__(
        self,
        registry: ChooserRegistry | None = None,
        selector: ChooserSelector | None = None,
        session: PipeSession | None = None,
    ) -> None:
        self.registry = registry or ChooserRegistry()
        self.selector = selector or ChooserSelector()
        self.session = session

    def invocation_for(self, options: Options) -> Invocation:
        """Resolve and select the invocation the options lead to."""
        invocations = self.registry.resolve(options.invocations, options.context)
        return self.selector.select(invocations, options.context)

    def choose(self, options: Options, source: CandidateSource) -> list[str]:
        """
        Let the user pick from the source's candidates.

        Args:
            options: Invocations and selection context for this call
            source: Candidates to offer and how to map selections back

        Returns:
            Selected values in the order the chooser emitted them
        """
        invocation = self.invocation_for(options)
        session = self.session or PipeSession(shell=options.shell)

        output = session.run(invocation, source.feed)
        return map_output(output, source)


def choose(options: Options, source: CandidateSource) -> list[str]:
    """Convenience function to run a selection with default collaborators."""
    return Picker().choose(options, source)


def from_map(
    options: Options,
    mapping: Mapping[str, str],
    on_unknown: UnknownLabel = UnknownLabel.SKIP,
) -> list[str]:
    """Offer the mapping's labels and return the payloads of the selected ones."""
    return choose(options, MappingSource(mapping, on_unknown=on_unknown))


def from_sequence(options: Options, items: Iterable[str]) -> list[str]:
    """Offer the strings in order and return the selected ones."""
    return choose(options, SequenceSource(items))


def from_filter(options: Options, writer: Callable[[TextIO], None]) -> list[str]:
    """Let the writer stream candidate lines and return the selected lines."""
    return choose(options, WriterSource(writer))


def from_values(options: Options, mapping: Mapping[str, Any]) -> list[str]:
    """Offer the mapping's labels in sorted order and return the selected labels."""
    return choose(options, ValueMappingSource(mapping))
