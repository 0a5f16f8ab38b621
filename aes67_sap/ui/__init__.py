from .logging import LogEntry, LogLevel, Logger, LoggerInstance

# When importing logging, you can just do `from aes67_sap.ui import logging`
__all__ = ["LogEntry", "LogLevel", "Logger", "LoggerInstance"]
