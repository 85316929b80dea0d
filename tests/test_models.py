"""Tests for chooser model definitions."""

import pytest

from chooser.models import (
    KNOWN_PROGRAMS,
    ChooserClass,
    Invocation,
    Options,
    ProgramKind,
    SelectionContext,
    get_program_by_name,
)


class TestInvocation:
    """Tests for Invocation dataclass."""

    def test_command_line(self):
        invocation = Invocation(name="fzf", arguments="-m -i")
        assert invocation.command_line == "fzf -m -i"

    def test_command_line_without_arguments(self):
        invocation = Invocation(name="dmenu", chooser_class=ChooserClass.DESKTOP)
        assert invocation.command_line == "dmenu"
        assert invocation.is_desktop is True

    def test_immutable(self):
        invocation = Invocation(name="fzf")
        with pytest.raises(AttributeError):
            invocation.name = "rofi"


class TestKnownPrograms:
    """Tests for the known program table."""

    def test_probe_order(self):
        names = [spec.name for spec in KNOWN_PROGRAMS]
        assert names == ["/usr/local/bin/fzf", "fzf", "rofi", "dmenu"]

    def test_classes(self):
        assert get_program_by_name("fzf").chooser_class == ChooserClass.TERMINAL
        assert get_program_by_name("rofi").chooser_class == ChooserClass.DESKTOP
        assert get_program_by_name("dmenu").kind == ProgramKind.MINIMAL_MENU

    def test_unknown_program(self):
        assert get_program_by_name("wofi") is None


class TestSelectionContext:
    """Tests for SelectionContext."""

    def test_terminal_mode(self):
        context = SelectionContext(running_in_terminal=True)
        assert context.effective_desktop is False
        assert context.chooser_class == ChooserClass.TERMINAL

    def test_force_desktop_in_terminal(self):
        context = SelectionContext(running_in_terminal=True, force_desktop=True)
        assert context.effective_desktop is True

    @pytest.mark.parametrize("force_desktop", [True, False])
    def test_no_terminal_always_desktop(self, force_desktop):
        context = SelectionContext(running_in_terminal=False, force_desktop=force_desktop)
        assert context.effective_desktop is True
        assert context.chooser_class == ChooserClass.DESKTOP


class TestOptions:
    """Tests for Options."""

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TERM", "xterm")
        monkeypatch.setenv("SHELL", "/bin/bash")
        monkeypatch.delenv("FORCE_DESKTOP", raising=False)

        options = Options.from_environment(description="Files")

        assert options.context.running_in_terminal is True
        assert options.context.description == "Files"
        assert options.invocations == []
        assert options.shell == "/bin/bash"

    def test_from_environment_without_term(self, monkeypatch):
        monkeypatch.delenv("TERM", raising=False)
        monkeypatch.delenv("SHELL", raising=False)

        options = Options.from_environment()

        assert options.context.effective_desktop is True
        assert options.shell == "sh"
