"""Chooser program definitions and per-call data types."""

from dataclasses import dataclass, field
from enum import Enum


class ChooserClass(Enum):
    """Session type a chooser program is built for."""

    TERMINAL = "terminal"
    DESKTOP = "desktop"


class ProgramKind(Enum):
    """How a known program is invoked."""

    FUZZY_FINDER = "fuzzy_finder"  # fzf
    FUZZY_MENU = "fuzzy_menu"  # rofi
    MINIMAL_MENU = "minimal_menu"  # dmenu


@dataclass(frozen=True)
class Invocation:
    """A resolved chooser program and the argument string to launch it with."""

    name: str
    arguments: str = ""
    chooser_class: ChooserClass = ChooserClass.TERMINAL

    @property
    def is_desktop(self) -> bool:
        return self.chooser_class == ChooserClass.DESKTOP

    @property
    def command_line(self) -> str:
        """Shell command line: program name followed by its argument string."""
        if not self.arguments:
            return self.name
        return f"{self.name} {self.arguments}"

    def __str__(self) -> str:
        return f"{self.command_line} ({self.chooser_class.value})"


@dataclass(frozen=True)
class ProgramSpec:
    """Specification for a known chooser program."""

    name: str
    chooser_class: ChooserClass
    kind: ProgramKind
    description: str = ""


# Known programs in probe order (first match wins during selection)
KNOWN_PROGRAMS: list[ProgramSpec] = [
    ProgramSpec(
        name="/usr/local/bin/fzf",
        chooser_class=ChooserClass.TERMINAL,
        kind=ProgramKind.FUZZY_FINDER,
        description="fzf installed under /usr/local/bin",
    ),
    ProgramSpec(
        name="fzf",
        chooser_class=ChooserClass.TERMINAL,
        kind=ProgramKind.FUZZY_FINDER,
        description="fzf found on PATH",
    ),
    ProgramSpec(
        name="rofi",
        chooser_class=ChooserClass.DESKTOP,
        kind=ProgramKind.FUZZY_MENU,
        description="rofi in dmenu mode with fuzzy matching",
    ),
    ProgramSpec(
        name="dmenu",
        chooser_class=ChooserClass.DESKTOP,
        kind=ProgramKind.MINIMAL_MENU,
        description="plain dmenu",
    ),
]


def get_program_by_name(name: str) -> ProgramSpec | None:
    """Find a known program by its name."""
    for spec in KNOWN_PROGRAMS:
        if spec.name == name:
            return spec
    return None


@dataclass(frozen=True)
class SelectionContext:
    """Runtime facts that drive invocation building and selection."""

    running_in_terminal: bool
    force_desktop: bool = False
    description: str | None = None
    preview_command: str | None = None

    @property
    def effective_desktop(self) -> bool:
        """Desktop mode is forced whenever we are detached from a terminal."""
        return self.force_desktop or not self.running_in_terminal

    @property
    def chooser_class(self) -> ChooserClass:
        return ChooserClass.DESKTOP if self.effective_desktop else ChooserClass.TERMINAL


@dataclass
class Options:
    """Caller-owned invocations plus the selection context for one call."""

    context: SelectionContext
    invocations: list[Invocation] = field(default_factory=list)
    shell: str | None = None  # None means the default POSIX shell

    @classmethod
    def from_environment(
        cls,
        description: str | None = None,
        preview_command: str | None = None,
        force_desktop: bool = False,
        invocations: list[Invocation] | None = None,
    ) -> "Options":
        """Build options from the process environment."""
        from chooser.system.detector import SessionDetector

        session = SessionDetector().detect()
        return cls(
            context=session.to_context(
                description=description,
                preview_command=preview_command,
                force_desktop=force_desktop,
            ),
            invocations=list(invocations or []),
            shell=session.shell,
        )
