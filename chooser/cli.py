"""Command-line interface for chooser."""

import argparse
import json
import logging
import sys
from pathlib import Path

from chooser.config import CONFIG_PATHS, Config
from chooser.errors import ChooserError, ProcessExecutionFailed
from chooser.models import KNOWN_PROGRAMS, Options, get_program_by_name
from chooser.picker import Picker
from chooser.sources.base import CandidateSource
from chooser.sources.mapping import MappingSource, ValueMappingSource
from chooser.sources.sequence import SequenceSource
from chooser.system.detector import SessionDetector, SessionInfo
from chooser.system.registry import ChooserRegistry, build_invocation, is_executable

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _load_options(args: argparse.Namespace, session: SessionInfo | None = None) -> Options:
    """Build call options from config, environment and arguments."""
    config = Config.load(Path(args.config) if args.config else None)
    session = session or SessionDetector().detect()
    return config.to_options(
        session,
        description=getattr(args, "description", None),
        preview_command=getattr(args, "preview", None),
        force_desktop=getattr(args, "force_desktop", False),
    )


def _build_source(lines: list[str], delimiter: str | None, sort: bool) -> CandidateSource:
    """Build a candidate source from input lines."""
    if delimiter:
        mapping: dict[str, str] = {}
        for line in lines:
            label, _, value = line.partition(delimiter)
            label, value = label.strip(), value.strip()
            mapping[label] = value if value else label
        if sort:
            mapping = dict(sorted(mapping.items()))
        return MappingSource(mapping)

    if sort:
        return ValueMappingSource(dict.fromkeys(lines))

    return SequenceSource(lines)


def cmd_pick(args: argparse.Namespace) -> int:
    """Handle the pick command."""
    lines = [line for line in sys.stdin.read().splitlines() if line.strip()]
    if not lines:
        logger.debug("No candidates on stdin")
        return 0

    options = _load_options(args)

    if args.program:
        # argparse restricts --program to known names
        spec = get_program_by_name(args.program)
        options.invocations = [build_invocation(spec, options.context)]

    source = _build_source(lines, args.delimiter, args.sort)

    try:
        selected = Picker().choose(options, source)
    except ProcessExecutionFailed as e:
        logger.debug(f"Chooser failed: {e}")
        return e.returncode or 1
    except ChooserError as e:
        logger.error(str(e))
        return 1

    for value in selected:
        print(value)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command."""
    session = SessionDetector().detect()
    options = _load_options(args, session)
    picker = Picker()

    try:
        invocations = picker.registry.resolve(options.invocations, options.context)
    except ChooserError as e:
        invocations = []
        error = str(e)
    else:
        error = None

    selected = None
    if invocations:
        try:
            selected = picker.selector.select(invocations, options.context)
        except ChooserError as e:
            error = str(e)

    if args.json:
        data = {
            "term": session.term,
            "force_desktop": session.force_desktop,
            "running_in_terminal": options.context.running_in_terminal,
            "desktop_mode": options.context.effective_desktop,
            "shell": options.shell,
            "controlling_terminal": session.controlling_terminal,
            "invocations": [
                {
                    "name": inv.name,
                    "arguments": inv.arguments,
                    "class": inv.chooser_class.value,
                }
                for inv in invocations
            ],
            "selected": selected.command_line if selected else None,
            "error": error,
        }
        print(json.dumps(data, indent=2))
    else:
        print(f"TERM:             {session.term or '(unset)'}")
        print(f"Terminal Session: {'Yes' if options.context.running_in_terminal else 'No'}")
        print(f"Mode:             {options.context.chooser_class.value}")
        print(f"Shell:            {options.shell}")
        if session.controlling_terminal:
            print(f"Controlling TTY:  {session.controlling_terminal}")

        print("\nInvocations:")
        for inv in invocations:
            print(f"  {inv}")
        if not invocations:
            print("  (none)")

        if selected:
            print(f"\nSelected: {selected.command_line}")
        if error:
            print(f"\nError: {error}")

    return 0 if selected else 1


def cmd_programs(args: argparse.Namespace) -> int:
    """Handle the programs command - list known choosers and availability."""
    registry = ChooserRegistry()
    installed = {spec.name for spec in registry.probe()}

    if args.json:
        data = [
            {
                "name": spec.name,
                "class": spec.chooser_class.value,
                "kind": spec.kind.value,
                "description": spec.description,
                "installed": spec.name in installed,
            }
            for spec in KNOWN_PROGRAMS
        ]
        print(json.dumps(data, indent=2))
        return 0

    print("Known Choosers (probe order)")
    print("=" * 60)
    for spec in KNOWN_PROGRAMS:
        marker = "✓" if spec.name in installed else "✗"
        print(f"{marker} {spec.name:<20} {spec.chooser_class.value:<9} {spec.description}")

    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the config command."""
    config = Config.load(Path(args.config) if args.config else None)

    if args.validate:
        issues = config.validate()
        for executable in config.executables:
            if not is_executable(executable.name):
                issues.append(f"Executable not found on PATH: {executable.name}")
        if issues:
            print("Configuration issues:")
            for issue in issues:
                print(f"  - {issue}")
            return 1
        print("Configuration is valid")
        return 0

    if args.show:
        print(json.dumps(config.to_dict(), indent=2))
        return 0

    if args.init:
        config_path = Path(args.config) if args.config else CONFIG_PATHS[0]
        if config_path.exists() and not args.force:
            print(f"Config already exists at {config_path}")
            print("Use --force to overwrite")
            return 1
        config.save(config_path)
        print(f"Config initialized at {config_path}")
        return 0

    # Default: show config path
    for path in CONFIG_PATHS:
        if path.exists():
            print(f"Config loaded from: {path}")
            return 0

    print("No config file found, using defaults")
    print(f"Create one at: {CONFIG_PATHS[0]}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="chooser",
        description="Pick from a list using fzf, rofi or dmenu",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--config",
        help="Path to a config file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # pick command
    pick_parser = subparsers.add_parser(
        "pick",
        help="Pick lines read from stdin",
    )
    pick_parser.add_argument(
        "-p", "--description",
        help="Prompt shown by desktop choosers",
    )
    pick_parser.add_argument(
        "--preview",
        help="Preview command for fzf",
    )
    pick_parser.add_argument(
        "--force-desktop",
        action="store_true",
        help="Use a desktop chooser even in a terminal",
    )
    pick_parser.add_argument(
        "-d", "--delimiter",
        help="Split lines into label and value; print the value",
    )
    pick_parser.add_argument(
        "--sort",
        action="store_true",
        help="Offer candidates in sorted order",
    )
    pick_parser.add_argument(
        "--program",
        choices=[spec.name for spec in KNOWN_PROGRAMS],
        help="Use this chooser instead of probing",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show the detected session and the chooser that would be used",
    )
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # programs command
    programs_parser = subparsers.add_parser(
        "programs",
        help="List known choosers and whether they are installed",
    )
    programs_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
    )
    config_parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the configuration",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize default configuration file",
    )
    config_parser.add_argument(
        "--force",
        action="store_true",
        help="Force overwrite existing config",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "pick": cmd_pick,
        "info": cmd_info,
        "programs": cmd_programs,
        "config": cmd_config,
    }

    cmd_func = commands.get(args.command)
    if cmd_func is None:
        parser.print_help()
        return 1

    return cmd_func(args)


if __name__ == "__main__":
    sys.exit(main())
