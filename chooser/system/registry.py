"""Discovery of installed chooser programs."""

import logging
import shlex
import shutil
from collections.abc import Callable

from chooser.errors import NoExecutablesFound
from chooser.models import (
    KNOWN_PROGRAMS,
    Invocation,
    ProgramKind,
    ProgramSpec,
    SelectionContext,
)

logger = logging.getLogger(__name__)

# Multi-select, case-insensitive, and exit immediately on escape
FZF_BASE_ARGUMENTS = "-m -i --bind 'esc:become(exit)'"

ROFI_BASE_ARGUMENTS = "-dmenu -multi-select -matching fuzzy -i"


def is_executable(name: str) -> bool:
    """Check whether a program resolves to an executable on the search path."""
    return shutil.which(name) is not None


def build_arguments(spec: ProgramSpec, context: SelectionContext) -> str:
    """
    Build the shell argument string for a known program.

    Caller-supplied text is shell-quoted, since the argument string is
    interpreted by the shell.
    """
    if spec.kind == ProgramKind.FUZZY_FINDER:
        if context.preview_command:
            return f"{FZF_BASE_ARGUMENTS} --preview {shlex.quote(context.preview_command)}"
        return FZF_BASE_ARGUMENTS

    if spec.kind == ProgramKind.FUZZY_MENU:
        if context.description:
            return f"{ROFI_BASE_ARGUMENTS} -p {shlex.quote(context.description)}"
        return ROFI_BASE_ARGUMENTS

    return ""


def build_invocation(spec: ProgramSpec, context: SelectionContext) -> Invocation:
    """Build the invocation for a known program."""
    return Invocation(
        name=spec.name,
        arguments=build_arguments(spec, context),
        chooser_class=spec.chooser_class,
    )


class ChooserRegistry:
    """Resolves the list of invocations available for a call."""

    def __init__(
        self,
        lookup: Callable[[str], bool] | None = None,
        programs: list[ProgramSpec] | None = None,
    ) -> None:
        self.lookup = lookup or is_executable
        self.programs = programs if programs is not None else KNOWN_PROGRAMS

    def resolve(
        self,
        existing: list[Invocation],
        context: SelectionContext,
    ) -> list[Invocation]:
        """
        Resolve the invocations to choose from.

        Args:
            existing: Caller-supplied invocations; used as-is when non-empty
            context: Selection context used to build argument strings

        Returns:
            Non-empty list of invocations in priority order

        Raises:
            NoExecutablesFound: if nothing is configured and nothing is installed
        """
        if existing:
            logger.debug(f"Using {len(existing)} caller-supplied invocation(s)")
            return existing

        invocations = [
            build_invocation(spec, context) for spec in self.probe()
        ]

        if not invocations:
            raise NoExecutablesFound("No executables found in PATH")

        return invocations

    def probe(self) -> list[ProgramSpec]:
        """Return the known programs that are installed, in probe order."""
        found: list[ProgramSpec] = []
        for spec in self.programs:
            if self.lookup(spec.name):
                logger.debug(f"Found chooser: {spec.name}")
                found.append(spec)
            else:
                logger.debug(f"Chooser not installed: {spec.name}")
        return found
