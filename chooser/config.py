"""Configuration management for chooser."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from chooser.models import ChooserClass, Invocation, Options
from chooser.system.detector import SessionInfo

logger = logging.getLogger(__name__)

# Default config locations
CONFIG_PATHS = [
    Path.home() / ".config" / "chooser" / "config.json",
    Path.home() / ".chooser.json",
]


@dataclass
class ExecutableConfig:
    """A user-defined chooser invocation."""

    name: str
    arguments: str = ""
    desktop: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExecutableConfig":
        return cls(
            name=data["name"],
            arguments=data.get("arguments", ""),
            desktop=data.get("desktop", False),
        )

    def to_invocation(self) -> Invocation:
        return Invocation(
            name=self.name,
            arguments=self.arguments,
            chooser_class=ChooserClass.DESKTOP if self.desktop else ChooserClass.TERMINAL,
        )


@dataclass
class Config:
    """Main configuration for chooser."""

    description: str | None = None
    preview_command: str | None = None
    force_desktop: bool = False
    shell: str | None = None  # None means $SHELL, then sh
    executables: list[ExecutableConfig] = field(default_factory=list)

    def to_options(
        self,
        session: SessionInfo,
        description: str | None = None,
        preview_command: str | None = None,
        force_desktop: bool = False,
    ) -> Options:
        """Build call options; explicit arguments override configured values."""
        return Options(
            context=session.to_context(
                description=description or self.description,
                preview_command=preview_command or self.preview_command,
                force_desktop=force_desktop or self.force_desktop,
            ),
            invocations=[e.to_invocation() for e in self.executables],
            shell=self.shell or session.shell,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from a dictionary."""
        executables: list[ExecutableConfig] = []
        for entry in data.get("executables", []):
            try:
                executables.append(ExecutableConfig.from_dict(entry))
            except (KeyError, TypeError):
                logger.warning(f"Ignoring invalid executable in config: {entry}")

        return cls(
            description=data.get("description"),
            preview_command=data.get("preview_command"),
            force_desktop=data.get("force_desktop", False),
            shell=data.get("shell"),
            executables=executables,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file or return defaults."""
        if path:
            paths_to_try = [path]
        else:
            paths_to_try = CONFIG_PATHS

        for config_path in paths_to_try:
            if config_path.exists():
                try:
                    with open(config_path) as f:
                        data = json.load(f)
                    logger.info(f"Loaded config from {config_path}")
                    return cls.from_dict(data)
                except (json.JSONDecodeError, OSError, AttributeError) as e:
                    logger.warning(f"Failed to load config from {config_path}: {e}")

        logger.info("Using default configuration")
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "description": self.description,
            "preview_command": self.preview_command,
            "force_desktop": self.force_desktop,
            "shell": self.shell,
            "executables": [
                {
                    "name": e.name,
                    "arguments": e.arguments,
                    "desktop": e.desktop,
                }
                for e in self.executables
            ],
        }

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        save_path = path or CONFIG_PATHS[0]
        save_path.parent.mkdir(parents=True, exist_ok=True)
        with open(save_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved config to {save_path}")

    def validate(self) -> list[str]:
        """Validate the configuration and return any issues."""
        issues: list[str] = []

        for index, executable in enumerate(self.executables):
            if not executable.name.strip():
                issues.append(f"Executable {index} has an empty name")

        if self.executables and not any(e.desktop for e in self.executables):
            issues.append("No desktop executable configured; picking outside a terminal will fail")

        if self.executables and all(e.desktop for e in self.executables):
            issues.append("No terminal executable configured; picking in a terminal will fail")

        if self.shell is not None and not self.shell.strip():
            issues.append("Shell must not be empty")

        return issues
