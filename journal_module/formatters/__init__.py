"""
Log formatters module

Provides the built-in formatters and name lookup used by config files.
"""

import importlib
from typing import Any, Dict

from journal_module.formatters.base_formatter import Formatter
from journal_module.formatters.simple_formatter import SimpleFormatter
from journal_module.formatters.ansi_formatter import AnsiFormatter

BUILTIN_FORMATTERS: Dict[str, type] = {
    "SimpleFormatter": SimpleFormatter,
    "AnsiFormatter": AnsiFormatter,
}


def get_formatter(name: str) -> Any:
    """
    Instantiate a formatter by name.

    Args:
        name: Built-in class name ("SimpleFormatter", "AnsiFormatter") or an
            import path such as "myapp.logs:JsonLine" or "myapp.logs.JsonLine"

    Returns:
        New formatter instance

    Raises:
        ValueError: If the name does not resolve to a formatter class
    """
    if name in BUILTIN_FORMATTERS:
        return BUILTIN_FORMATTERS[name]()

    if ":" in name:
        module_name, _, class_name = name.partition(":")
    else:
        module_name, _, class_name = name.rpartition(".")
    if not module_name or not class_name:
        raise ValueError(f"Unknown formatter: {name}")

    try:
        module = importlib.import_module(module_name)
        formatter_cls = getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Unknown formatter: {name}") from e

    formatter = formatter_cls()
    if not isinstance(formatter, Formatter):
        raise ValueError(f"{name} does not provide format(logger_name, level, message)")
    return formatter


__all__ = [
    "Formatter",
    "SimpleFormatter",
    "AnsiFormatter",
    "BUILTIN_FORMATTERS",
    "get_formatter",
]
