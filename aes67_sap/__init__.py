from .ui.logging import LogLevel, LogEntry, Logger, LoggerInstance
from .network import (
  AnnouncerError,
  InterfaceResolutionError,
  InterfaceNotFound,
  NoUsableAddress,
  TransmissionError,
  InterfaceBinding,
  resolve_local_address,
  derive_multicast_group,
  resolve_interface,
)
from .network.announcer import announce, announce_binding
from .protocol import AnnouncementPayload, SessionDescription, make_announcement, message_id_hash_for
from .manager import SAPAnnouncer

__all__ = ["LogLevel", "LogEntry", "Logger", "LoggerInstance",
           "AnnouncerError", "InterfaceResolutionError", "InterfaceNotFound", "NoUsableAddress", "TransmissionError",
           "InterfaceBinding", "resolve_local_address", "derive_multicast_group", "resolve_interface",
           "announce", "announce_binding", "AnnouncementPayload", "SessionDescription", "make_announcement", "message_id_hash_for",
           "SAPAnnouncer"]
