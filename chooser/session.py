"""Pipe session: runs a chooser and exchanges data with it."""

import io
import logging
import subprocess
import threading
from collections.abc import Callable
from typing import TextIO

from chooser.errors import ProcessExecutionFailed, ProcessIOFailed, ProcessStartFailed
from chooser.models import Invocation
from chooser.system.detector import DEFAULT_SHELL

logger = logging.getLogger(__name__)

Feeder = Callable[[TextIO], None]


class PipeSession:
    """
    Runs one chooser invocation through the shell.

    The feeder writes candidates to the child's stdin on its own thread
    while the calling thread drains stdout, so neither side can fill a pipe
    buffer and block the other. The feeder thread is the only writer of
    stdin and closes it exactly once when the feeder returns.
    """

    def __init__(self, shell: str | None = None) -> None:
        self.shell = shell or DEFAULT_SHELL

    def run(self, invocation: Invocation, feeder: Feeder) -> str:
        """
        Run the invocation, feeding it input and capturing its output.

        Args:
            invocation: Chooser to launch
            feeder: Callback that writes candidate lines to the child's stdin

        Returns:
            Everything the chooser wrote to stdout

        Raises:
            ProcessStartFailed: if the shell could not be spawned
            ProcessIOFailed: if the input pipe is unavailable or writing failed
            ProcessExecutionFailed: if the chooser exited non-zero
        """
        cmd = [self.shell, "-c", invocation.command_line]
        logger.debug(f"Running: {cmd}")

        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=None,  # chooser diagnostics go straight to the user
            )
        except OSError as e:
            raise ProcessStartFailed(f"Failed to start {invocation.name}: {e}") from e

        if process.stdin is None or process.stdout is None:
            process.kill()
            process.wait()
            raise ProcessIOFailed(f"No pipe to {invocation.name}")

        # Only "\n" separates lines; a bare "\r" belongs to the candidate
        stdin = io.TextIOWrapper(process.stdin, encoding="utf-8", newline="\n")
        writer = _FeederThread(stdin, feeder)
        writer.start()

        try:
            output = process.stdout.read().decode("utf-8")
        except (OSError, ValueError) as e:
            process.kill()
            process.wait()
            writer.join()
            raise ProcessExecutionFailed(f"Failed to read from {invocation.name}: {e}") from e
        finally:
            process.stdout.close()

        returncode = process.wait()
        writer.join()

        if returncode != 0:
            raise ProcessExecutionFailed(
                f"{invocation.name} exited with status {returncode}",
                returncode=returncode,
            )

        if writer.error is not None:
            if isinstance(writer.error, OSError):
                raise ProcessIOFailed(
                    f"Failed to write to {invocation.name}: {writer.error}"
                ) from writer.error
            raise writer.error

        return output


class _FeederThread(threading.Thread):
    """Runs a feeder against a stdin pipe and closes the pipe afterwards."""

    def __init__(self, stdin: TextIO, feeder: Feeder) -> None:
        super().__init__(name="chooser-feeder", daemon=True)
        self.stdin = stdin
        self.feeder = feeder
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            self.feeder(self.stdin)
        except BrokenPipeError:
            logger.debug("Chooser closed its input early")
        except Exception as e:
            logger.debug(f"Feeder failed: {e}")
            self.error = e
        finally:
            self._close()

    def _close(self) -> None:
        try:
            self.stdin.close()
        except BrokenPipeError:
            # Flushing buffered input to a chooser that already exited
            pass
