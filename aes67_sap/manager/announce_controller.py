import threading
from typing import Optional
from aes67_sap.config import SAP_MESSAGE_ID_HASH, SAP_REANNOUNCE_PERIOD_SECONDS, SDP_DIRECTION
from aes67_sap.network import AnnouncerError, InterfaceBinding, resolve_interface, format_group
from aes67_sap.network.announcer import announce_binding
from aes67_sap.protocol import AnnouncementPayload, make_announcement
from aes67_sap.ui import logging

logger = logging.Logger()

CONTROLLER_CODENAME = 'SAPCTRL'
CONTROLLER_PREFIX = f'[magenta][{CONTROLLER_CODENAME}][/]'


class SAPAnnouncer:
    """
    Owns the announcement of one interface's stream for an embedding application.

    The binding is resolved up front so a bad interface fails at construction;
    every `announce()` still resolves again, so an address change is picked up.
    """
    def __init__(self, interface_name: str, session_name: str | None = None, message_id_hash: int = SAP_MESSAGE_ID_HASH, direction: str = SDP_DIRECTION, verbose: bool = False):
      self.interface_name = interface_name
      self.session_name = session_name
      self.message_id_hash = message_id_hash
      self.direction = direction
      self.verbose = verbose

      self.sap_logger = logger.get_logger(CONTROLLER_PREFIX)
      self.binding: InterfaceBinding = resolve_interface(interface_name)
      # Bad hash or direction values raise here rather than inside the loop thread
      make_announcement(self.binding, self.session_name, self.message_id_hash, self.direction)
      self.sent_count = 0

      self._stop_event = threading.Event()
      self._thread: Optional[threading.Thread] = None

      if self.verbose:
        self.sap_logger.info(f"[INIT] {interface_name}: {self.binding.local_address} -> {format_group(self.binding.multicast_group)}")

    @property
    def running(self) -> bool:
      return self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set()

    def announce(self) -> AnnouncementPayload:
      self.binding = resolve_interface(self.interface_name)
      payload = announce_binding(self.binding, self.session_name, self.message_id_hash, self.direction)
      self.sent_count += 1
      return payload

    def _periodic_announce(self, period: float, stop_event: threading.Event):
      while not stop_event.is_set():
        try:
          self.announce()
        except AnnouncerError as e:
          self.sap_logger.error(f"[ANNOUNCE] FAILED: {e}")
        if stop_event.wait(period):
          break

    def start(self, period: float = SAP_REANNOUNCE_PERIOD_SECONDS) -> None:
      """Announces now and then every `period` seconds on a daemon thread.

      Raises:
          ValueError: period is not positive
          RuntimeError: a stopped loop has not exited yet
      """
      if period <= 0:
        raise ValueError(f"Announcement period must be positive: {period}")
      if self._thread is not None and self._thread.is_alive():
        if not self._stop_event.is_set():
          return
        raise RuntimeError("Previous announcement loop is still stopping")

      # One stop event per loop
      self._stop_event = threading.Event()
      self._thread = threading.Thread(target=self._periodic_announce, args=(period, self._stop_event), daemon=True)
      self._thread.start()
      if self.verbose:
        self.sap_logger.info(f"Periodic announcement started every {period}s")

    def stop(self, timeout: float | None = None) -> None:
      """Signals the loop to end and waits up to `timeout` for it."""
      self._stop_event.set()
      if self._thread is not None:
        self._thread.join(timeout)
        if self._thread.is_alive():
          self.sap_logger.warning("Announcement loop did not stop in time")
          return
        self._thread = None
      if self.verbose:
        self.sap_logger.info(f"Stopped after {self.sent_count} announcements")
