"""Errors raised while choosing, launching and reading a chooser program."""


class ChooserError(Exception):
    """Base class for all chooser errors."""


class NoExecutablesFound(ChooserError):
    """No chooser program is configured or installed."""


class NoSuitableExecutable(ChooserError):
    """Choosers exist, but none matches the terminal/desktop mode."""


class UnknownSelection(ChooserError):
    """The chooser returned a label that was not offered."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Chooser returned unknown label: {label!r}")
        self.label = label


class ProcessError(ChooserError):
    """Error while running the chooser process."""


class ProcessIOFailed(ProcessError):
    """The chooser's input pipe could not be opened or written."""


class ProcessStartFailed(ProcessError):
    """The chooser process could not be spawned."""


class ProcessExecutionFailed(ProcessError):
    """The chooser exited with a non-zero status or its output was unreadable."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
