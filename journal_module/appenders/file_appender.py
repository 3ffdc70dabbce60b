"""File appender"""

from pathlib import Path
from typing import Any, Mapping, Union

from journal_module.appenders.base_appender import AbstractAppender
from journal_module.core.appender_config import AppenderConfig


class FileAppender(AbstractAppender):
    """Write logs to a file opened once at construction."""

    def __init__(
        self,
        name: str,
        filepath: Union[str, Path],
        level: Any = None,
        truncate: bool = False,
        formatter: Any = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize file appender.

        Args:
            name: Appender name
            filepath: Path to log file
            level: Minimum level, or None to use the root level
            truncate: Truncate the file instead of appending to it
            formatter: Log formatter (default: SimpleFormatter)
            encoding: File encoding (default: 'utf-8')
        """
        super().__init__(name, level, formatter)
        self.filepath = Path(filepath)
        self.mode = "w" if truncate else "a"
        self.encoding = encoding
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.stream = open(self.filepath, self.mode, encoding=self.encoding)

    @classmethod
    def build(cls, config: Union[AppenderConfig, Mapping[str, Any]]) -> "FileAppender":
        """
        Create a file appender from a config descriptor.

        Relative ``file`` values resolve against ``path``, the directory of
        the config file the descriptor came from.

        Args:
            config: AppenderConfig or a mapping with the same keys

        Returns:
            New FileAppender
        """
        if not isinstance(config, AppenderConfig):
            config = AppenderConfig.from_dict(config)
        return cls(
            config.name,
            config.resolve_file(),
            config.level,
            config.truncate,
            config.create_formatter(),
        )

    def close(self):
        """Close file."""
        if self.stream and not self.stream.closed:
            self.stream.close()
