"""
Formatter interface

Any object with a matching format() method can act as a formatter.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Formatter(Protocol):
    """
    Structural type for log formatters.

    Formatters turn a single log event into the line written to a sink.
    Implementations do not need to inherit from this class.
    """

    def format(self, logger_name: str, level: Any, message: Any) -> str:
        """
        Format a log event into a string.

        Args:
            logger_name: Name of the logger that emitted the message
            level: Level of the message
            message: The message itself

        Returns:
            Formatted line without a trailing newline
        """
        ...
