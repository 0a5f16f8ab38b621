from typing import Callable
from datetime import datetime
from dataclasses import dataclass
from enum import Enum
from rich.console import Console
from rich.markup import escape

LOG_TIMECHECK_MINUTES = 5
LOG_DEBUG = False
LOGGER_CODENAME = 'LOGGER '
LOGGER_PREFIX = f"[blue][{LOGGER_CODENAME}][/]"
LOG_DIRECTORY = "logs"
LOG_FILENAME = "announcer.log"

LOG_PRINT_DAYS = False
LOG_PRINT_DATETIME = True

console = Console(highlight=False)

class LogLevel(Enum):
  """
  Enum for different log levels, valued by their console marker.
  """
  DEBUG =      "[blue][     ][/]"
  INFO =      "[green][  -  ][/]"
  WARNING =  "[yellow][ /!\\ ][/]"
  ERROR =    "[red][ !!! ][/]"

@dataclass
class LogEntry:
  """
  A single stored log line.
  """
  timestamp: datetime
  level: LogLevel
  prefix: str
  message: str

  def __str__(self) -> str:
    """Renders the entry as rich markup.

    Returns:
        str: formatted string
    """
    datestr = "%Y-%m-%d " if LOG_PRINT_DAYS else ""
    timestr = f"[bright_black][{self.timestamp.strftime(f'{datestr}%H:%M:%S.%f')[:-3]}][/] " if LOG_PRINT_DATETIME else ""

    return f"{timestr}{self.prefix} {self.level.value} {escape(self.message)}"

  def to_dict(self) -> dict:
    return {
      'timestamp': self.timestamp.isoformat(),
      'level': self.level.name,
      'prefix': self.prefix,
      'message': self.message
    }

create_logger_entry: Callable[[LogLevel, str], 'LogEntry'] = lambda level, msg: LogEntry(datetime.now(), level, LOGGER_PREFIX, msg)

create_logger_info_entry:  Callable[[str], 'LogEntry'] = lambda msg : create_logger_entry(LogLevel.INFO, msg)

create_logger_error_entry: Callable[[str], 'LogEntry'] = lambda msg : create_logger_entry(LogLevel.ERROR, msg)

create_logger_debug_entry: Callable[[str], 'LogEntry'] = lambda msg : create_logger_entry(LogLevel.DEBUG, msg)
