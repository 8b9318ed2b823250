from .formatters import ConsoleOutputFormatter, JSONOutputFormatter

__all__ = ["ConsoleOutputFormatter", "JSONOutputFormatter"]
