"""Session detection from the process environment."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

import psutil

from chooser.models import SelectionContext

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "sh"


@dataclass
class SessionInfo:
    """Environment facts relevant to launching a chooser."""

    term: str | None
    force_desktop: bool
    shell: str
    controlling_terminal: str | None = None

    @property
    def running_in_terminal(self) -> bool:
        """A non-empty TERM means a terminal session unless FORCE_DESKTOP=true."""
        return bool(self.term) and not self.force_desktop

    def to_context(
        self,
        description: str | None = None,
        preview_command: str | None = None,
        force_desktop: bool = False,
    ) -> SelectionContext:
        """Build a selection context for this session."""
        return SelectionContext(
            running_in_terminal=self.running_in_terminal,
            force_desktop=force_desktop,
            description=description or None,
            preview_command=preview_command or None,
        )

    def __str__(self) -> str:
        session = "terminal" if self.running_in_terminal else "desktop"
        tty = f", tty: {self.controlling_terminal}" if self.controlling_terminal else ""
        return f"Session: {session} (TERM={self.term or ''}), shell: {self.shell}{tty}"


class SessionDetector:
    """Reads TERM, FORCE_DESKTOP and SHELL into a SessionInfo."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self.environ = os.environ if environ is None else environ

    def detect(self) -> SessionInfo:
        """Detect the current session."""
        info = SessionInfo(
            term=self.environ.get("TERM") or None,
            force_desktop=self.environ.get("FORCE_DESKTOP") == "true",
            shell=self._get_shell(),
            controlling_terminal=self._get_controlling_terminal(),
        )
        logger.debug(f"Detected {info}")
        return info

    def _get_shell(self) -> str:
        """Get the shell used to run chooser commands."""
        return self.environ.get("SHELL") or DEFAULT_SHELL

    def _get_controlling_terminal(self) -> str | None:
        """Get the controlling tty of this process, if any."""
        try:
            return psutil.Process().terminal()
        except AttributeError:
            # Process.terminal() only exists on UNIX
            return None
        except psutil.Error as e:
            logger.warning(f"Failed to read controlling terminal: {e}")
            return None
