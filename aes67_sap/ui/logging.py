from typing import List, Dict, Optional
from datetime import datetime, timedelta
import threading
import json
import os
from .log_data import *

def _debug_logger(msg: str):
  if LOG_DEBUG: console.print(f'{create_logger_debug_entry(msg)}')

class Logger:
  """
  Process-wide log store. Every component asks it for a prefixed
  `LoggerInstance`; entries are printed through rich and kept in memory until
  they are archived as JSON under `logs/`.
  """
  _instance: Optional['Logger'] = None
  _lock: threading.Lock = threading.Lock()

  def __new__(cls) -> 'Logger':
    if cls._instance is None:
      with cls._lock:
        if cls._instance is None:
          cls._instance = super(Logger, cls).__new__(cls)
    return cls._instance

  def __init__(self, max_logs: int = 200, archive_after_minutes: int = 10, log_file: str = LOG_FILENAME) -> None:
    if hasattr(self, '_initialized'):
      return

    self._logs: List[LogEntry] = []
    self._instances: Dict[str, LoggerInstance] = {}
    self._logs_lock = threading.Lock()
    self._instances_lock = threading.Lock()

    self._max_logs = max_logs
    self._archive_after = timedelta(minutes=archive_after_minutes)
    self._log_file = os.path.join(LOG_DIRECTORY, log_file)
    self._last_archive_check = datetime.now()

    self._initialized = True

  def get_logger(self, prefix: str, console_enabled: bool = True) -> 'LoggerInstance':
    """
    Get the logger instance for a prefix, creating it on first use.

    Args:
        prefix (str): rich markup prefix shown before each message, e.g. `[green][SAPANNC][/]`
        console_enabled (bool, optional): Prints to console or not. Defaults to True.
    """
    with self._instances_lock:
      if prefix not in self._instances:
        self._instances[prefix] = LoggerInstance(prefix, self, console_enabled)
      return self._instances[prefix]

  def record(self, entry: LogEntry, console_enabled: bool) -> None:
    with self._logs_lock:
      self._logs.append(entry)
      notice = self._archive_if_needed(datetime.now())

    if console_enabled:
      console.print(str(entry))
    if notice is not None:
      console.print(str(notice))

  def get_logs(self, level: Optional[LogLevel] = None, prefix: Optional[str] = None) -> List[LogEntry]:
    """Stored entries, optionally only those of one level and/or prefix."""
    with self._logs_lock:
      return [log for log in self._logs
              if (level is None or log.level == level) and (prefix is None or log.prefix == prefix)]

  def clear_logs(self) -> None:
    with self._logs_lock:
      self._logs.clear()

  def _archive_if_needed(self, now: datetime) -> Optional[LogEntry]:
    """Moves old entries to the archive file once there are too many or they are too old.

    Called with `_logs_lock` held. Returns an entry to print when archiving failed.
    """
    if len(self._logs) >= self._max_logs:
      # Keep the ten most recent in memory
      return self._archive(self._logs[:-10], self._logs[-10:], "max_logs_reached")

    if now - self._last_archive_check < timedelta(minutes=LOG_TIMECHECK_MINUTES):
      return None
    self._last_archive_check = now

    cutoff = now - self._archive_after
    old = [log for log in self._logs if log.timestamp <= cutoff]
    _debug_logger(f'{len(old)} entries older than {cutoff}')
    if not old:
      return None
    return self._archive(old, [log for log in self._logs if log.timestamp > cutoff], "time_limit_reached")

  def _archive(self, archived: List[LogEntry], kept: List[LogEntry], reason: str) -> Optional[LogEntry]:
    archive_entry = {
      'archived_at': datetime.now().isoformat(),
      'reason': reason,
      'log_count': len(archived),
      'logs': [log.to_dict() for log in archived]
    }

    try:
      os.makedirs(os.path.dirname(self._log_file) or ".", exist_ok=True)
      separator = '\n' if os.path.exists(self._log_file) else ''
      with open(self._log_file, 'a', encoding='utf-8') as f:
        f.write(separator + json.dumps(archive_entry, indent=2))
    except OSError as e:
      # Entries stay in memory when the archive cannot be written
      failure = create_logger_error_entry(f"Failed to archive logs: {e}")
      self._logs.append(failure)
      return failure

    self._logs = kept + [create_logger_info_entry(f"Archived {len(archived)} logs to {self._log_file} ({reason})")]
    return None


class LoggerInstance:
  """
  Prefixed view of the process Logger, one per component.
  """
  def __init__(self, prefix: str, parent: Logger, console_enabled: bool = True):
    self.prefix = prefix
    self.console_enabled = console_enabled
    self._parent = parent

  def _log(self, level: LogLevel, message: str) -> None:
    self._parent.record(LogEntry(datetime.now(), level, self.prefix, message), self.console_enabled)

  def debug(self, message: str) -> None:
    self._log(LogLevel.DEBUG, message)

  def info(self, message: str) -> None:
    self._log(LogLevel.INFO, message)

  def warning(self, message: str) -> None:
    self._log(LogLevel.WARNING, message)

  def error(self, message: str) -> None:
    self._log(LogLevel.ERROR, message)
