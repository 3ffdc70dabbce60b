"""
Appender configuration descriptor

One entry of the ``appenders`` section of a config file
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from journal_module.formatters import get_formatter

APPENDER_TYPES = ("console", "file")


@dataclass
class AppenderConfig:
    """
    Appender descriptor.

    Attributes:
        name: Appender name (required)
        type: "console" or "file" (required)
        level: Level name, or None to use the root level
        formatter: Formatter name, or None for SimpleFormatter
        file: Log file path, required for file appenders
        truncate: Truncate the log file instead of appending
        fd: "STDOUT" or "STDERR" for console appenders
        path: Directory relative file paths resolve against
    """

    name: str
    type: str
    level: Optional[str] = None
    formatter: Optional[str] = None
    file: Optional[str] = None
    truncate: bool = False
    fd: Optional[str] = None
    path: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.name:
            raise ValueError("appender name is required")
        if self.type not in APPENDER_TYPES:
            raise ValueError(f"Invalid appender type for '{self.name}': {self.type}")
        if self.type == "file" and not self.file:
            raise ValueError(f"file is required for file appender '{self.name}'")

        # Unknown level names are kept so filtering can fail open on them
        if isinstance(self.level, str):
            self.level = self.level.lower()

        if isinstance(self.path, str):
            self.path = Path(self.path)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: Optional[Path] = None) -> "AppenderConfig":
        """
        Create descriptor from a config file mapping.

        Args:
            data: Mapping with name, type and optional keys
            path: Config file directory (overrides data["path"])

        Returns:
            New AppenderConfig
        """
        return cls(
            name=data.get("name"),
            type=str(data.get("type", "")).lower(),
            level=data.get("level"),
            formatter=data.get("formatter"),
            file=data.get("file"),
            truncate=bool(data.get("truncate", False)),
            fd=data.get("fd"),
            path=path if path is not None else data.get("path"),
        )

    def resolve_file(self) -> Path:
        """Absolute log file path, relative to ``path`` when one is set."""
        file_path = Path(self.file).expanduser()
        if not file_path.is_absolute() and self.path is not None:
            file_path = Path(self.path).expanduser() / file_path
        return file_path.resolve()

    def create_formatter(self) -> Any:
        """New formatter instance, or None when no formatter is configured."""
        if not self.formatter:
            return None
        return get_formatter(self.formatter)
