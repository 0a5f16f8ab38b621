import json
import os
from datetime import datetime, timedelta
from aes67_sap.ui.logging import LogLevel, LogEntry, Logger

def test_singleton():
  logger1 = Logger()
  logger2 = Logger()
  assert logger1 is logger2, "Logger does not work as a singleton"

def test_instances_are_shared_per_prefix():
  logger = Logger()
  assert logger.get_logger("[SAPTEST]") is logger.get_logger("[SAPTEST]")

def test_general_usage():
  logger = Logger()
  logger.clear_logs()

  announcer_logger = logger.get_logger("[ANNOUNCER]", console_enabled=True)
  resolver_logger = logger.get_logger("[RESOLVER]", console_enabled=False)

  announcer_logger.info("Announce SAP...")
  announcer_logger.warning("Hostname lookup failed")
  resolver_logger.error("No usable address")
  resolver_logger.debug("eth0 -> 10.0.5.200")

  assert len(logger.get_logs()) == 4
  assert [log.message for log in logger.get_logs(prefix="[ANNOUNCER]")] == ["Announce SAP...", "Hostname lookup failed"]
  assert [log.message for log in logger.get_logs(level=LogLevel.ERROR)] == ["No usable address"]
  # Stored even without console output
  assert [log.message for log in logger.get_logs(level=LogLevel.DEBUG, prefix="[RESOLVER]")] == ["eth0 -> 10.0.5.200"]

def test_message_markup_is_escaped():
  entry = LogEntry(datetime.now(), LogLevel.INFO, "[green][SAPANNC][/]", "[red]not a style")
  assert "\\[red]not a style" in str(entry)

def test_archive_when_store_is_full(tmp_path):
  logger = Logger()
  logger.clear_logs()
  saved_file, saved_max = logger._log_file, logger._max_logs
  logger._log_file = os.path.join(str(tmp_path), "announcer.log")
  logger._max_logs = 15
  try:
    archive_logger = logger.get_logger("[ARCHIVE]", console_enabled=False)
    for i in range(15):
      archive_logger.info(f"announcement {i}")

    with open(logger._log_file, encoding="utf-8") as f:
      archived = json.load(f)
    assert archived["reason"] == "max_logs_reached"
    assert archived["log_count"] == 5
    assert archived["logs"][0]["message"] == "announcement 0"
    # Ten most recent plus the archive notice
    remaining = logger.get_logs(prefix="[ARCHIVE]")
    assert [log.message for log in remaining] == [f"announcement {i}" for i in range(5, 15)]
    assert len(logger.get_logs()) == 11
  finally:
    logger._log_file, logger._max_logs = saved_file, saved_max
    logger.clear_logs()

def test_archive_old_entries(tmp_path):
  logger = Logger()
  logger.clear_logs()
  saved_file, saved_check = logger._log_file, logger._last_archive_check
  logger._log_file = os.path.join(str(tmp_path), "announcer.log")
  try:
    stale = LogEntry(datetime.now() - timedelta(hours=1), LogLevel.INFO, "[OLD]", "stale announcement")
    logger.record(stale, console_enabled=False)
    logger._last_archive_check = datetime.now() - timedelta(hours=1)

    logger.get_logger("[NEW]", console_enabled=False).info("fresh announcement")

    with open(logger._log_file, encoding="utf-8") as f:
      archived = json.load(f)
    assert archived["reason"] == "time_limit_reached"
    assert [log["message"] for log in archived["logs"]] == ["stale announcement"]
    assert logger.get_logs(prefix="[OLD]") == []
    assert [log.message for log in logger.get_logs(prefix="[NEW]")] == ["fresh announcement"]
  finally:
    logger._log_file, logger._last_archive_check = saved_file, saved_check
    logger.clear_logs()
