"""Console appender"""

import sys
from typing import Any, Mapping, Union

from journal_module.appenders.base_appender import AbstractAppender
from journal_module.core.appender_config import AppenderConfig


class ConsoleAppender(AbstractAppender):
    """Write logs to standard output or standard error."""

    def __init__(self, name: str = "console", level: Any = None, formatter: Any = None, stream=None):
        """
        Initialize console appender.

        Args:
            name: Appender name
            level: Minimum level, or None to use the root level
            formatter: Log formatter (default: SimpleFormatter)
            stream: Output stream (default: sys.stdout)
        """
        super().__init__(name, level, formatter)
        self.stream = stream if stream is not None else sys.stdout

    @classmethod
    def build(cls, config: Union[AppenderConfig, Mapping[str, Any]]) -> "ConsoleAppender":
        """
        Create a console appender from a config descriptor.

        Args:
            config: AppenderConfig or a mapping with the same keys

        Returns:
            New ConsoleAppender
        """
        if not isinstance(config, AppenderConfig):
            config = AppenderConfig.from_dict(config)
        return cls(
            config.name,
            config.level,
            config.create_formatter(),
            cls.stream_for(config.fd),
        )

    @staticmethod
    def stream_for(fd: Any):
        """Map an fd setting to a stream: "STDERR" selects stderr, anything else stdout."""
        if isinstance(fd, str) and fd.strip().upper() == "STDERR":
            return sys.stderr
        return sys.stdout
