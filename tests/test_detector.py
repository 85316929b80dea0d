"""Tests for session detection."""

import psutil
import pytest

from chooser.system import detector as detector_module
from chooser.system.detector import DEFAULT_SHELL, SessionDetector, SessionInfo


class TestSessionDetector:
    """Tests for SessionDetector."""

    def test_terminal_session(self):
        info = SessionDetector({"TERM": "xterm-256color", "SHELL": "/bin/zsh"}).detect()

        assert info.term == "xterm-256color"
        assert info.running_in_terminal is True
        assert info.shell == "/bin/zsh"

    def test_missing_term(self):
        info = SessionDetector({}).detect()
        assert info.term is None
        assert info.running_in_terminal is False

    def test_empty_term(self):
        info = SessionDetector({"TERM": ""}).detect()
        assert info.running_in_terminal is False

    def test_force_desktop(self):
        info = SessionDetector({"TERM": "xterm", "FORCE_DESKTOP": "true"}).detect()
        assert info.force_desktop is True
        assert info.running_in_terminal is False

    def test_force_desktop_requires_true(self):
        info = SessionDetector({"TERM": "xterm", "FORCE_DESKTOP": "1"}).detect()
        assert info.running_in_terminal is True

    def test_default_shell(self):
        info = SessionDetector({"TERM": "xterm"}).detect()
        assert info.shell == DEFAULT_SHELL

    def test_controlling_terminal_error(self, monkeypatch):
        class FailingProcess:
            def terminal(self):
                raise psutil.AccessDenied()

        monkeypatch.setattr(detector_module.psutil, "Process", FailingProcess)

        info = SessionDetector({"TERM": "xterm"}).detect()
        assert info.controlling_terminal is None

    def test_controlling_terminal(self, monkeypatch):
        class TtyProcess:
            def terminal(self):
                return "/dev/pts/3"

        monkeypatch.setattr(detector_module.psutil, "Process", TtyProcess)

        info = SessionDetector({"TERM": "xterm"}).detect()
        assert info.controlling_terminal == "/dev/pts/3"
        assert "/dev/pts/3" in str(info)


class TestSessionInfo:
    """Tests for SessionInfo."""

    def test_to_context(self):
        info = SessionInfo(term="xterm", force_desktop=False, shell="sh")

        context = info.to_context(description="Files", preview_command="cat {}")

        assert context.running_in_terminal is True
        assert context.force_desktop is False
        assert context.description == "Files"
        assert context.preview_command == "cat {}"

    def test_to_context_empty_strings(self):
        info = SessionInfo(term="xterm", force_desktop=False, shell="sh")

        context = info.to_context(description="", preview_command="")

        assert context.description is None
        assert context.preview_command is None

    @pytest.mark.parametrize("force_desktop", [True, False])
    def test_detached_session_forces_desktop(self, force_desktop):
        info = SessionInfo(term=None, force_desktop=False, shell="sh")
        context = info.to_context(force_desktop=force_desktop)
        assert context.effective_desktop is True
