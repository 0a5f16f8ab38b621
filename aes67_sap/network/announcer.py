import socket
from aes67_sap.config import (
  SAP_ANNOUNCE_IP,
  SAP_ANNOUNCE_PORT,
  SAP_MULTICAST_TTL,
  SAP_MESSAGE_ID_HASH,
  SDP_DIRECTION,
)
from aes67_sap.protocol import AnnouncementPayload, make_announcement
from aes67_sap.ui.logging import Logger
from .errors import TransmissionError
from .interface_resolver import InterfaceBinding, resolve_interface

logger = Logger()

ANNOUNCER_CODENAME = 'SAPANNC'

announcer_logger = logger.get_logger(f'[green][{ANNOUNCER_CODENAME}][/]')

SAP_DESTINATION = (SAP_ANNOUNCE_IP, SAP_ANNOUNCE_PORT)


def send_announcement(binding: InterfaceBinding, payload: AnnouncementPayload) -> int:
  """Sends the payload as one datagram from the binding's local address.

  The socket lives only for this call and is closed on every path.

  Raises:
      TransmissionError: the socket could not be opened, bound, or sent on

  Returns:
      int: number of bytes sent
  """
  data = payload.to_bytes()
  local = str(binding.local_address)

  try:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
      sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
      sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, SAP_MULTICAST_TTL)
      sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_IF, binding.local_address.packed)
      sock.bind((local, SAP_ANNOUNCE_PORT))
      sent = sock.sendto(data, SAP_DESTINATION)
  except OSError as e:
    announcer_logger.error(f"SEND FAILED: {local} -> {SAP_ANNOUNCE_IP}:{SAP_ANNOUNCE_PORT} - {e}")
    raise TransmissionError(SAP_DESTINATION, str(e)) from e

  announcer_logger.debug(f"Sent {sent} bytes from {local}:{SAP_ANNOUNCE_PORT}")
  return sent


def announce_binding(binding: InterfaceBinding, session_name: str | None = None, message_id_hash: int = SAP_MESSAGE_ID_HASH, direction: str = SDP_DIRECTION) -> AnnouncementPayload:
  """Builds and sends the announcement for an already resolved binding."""
  payload = make_announcement(binding, session_name, message_id_hash, direction)

  announcer_logger.info("Announce SAP...")
  announcer_logger.info(f"Multicast Address: {binding.multicast_address}:{SAP_ANNOUNCE_PORT}")
  announcer_logger.info(f"Session description:\n{payload.session_description}")

  send_announcement(binding, payload)
  return payload


def announce(interface_name: str, session_name: str | None = None, message_id_hash: int = SAP_MESSAGE_ID_HASH, direction: str = SDP_DIRECTION) -> AnnouncementPayload:
  """Announces the interface's audio stream once.

  Resolves the interface, builds the SAP/SDP payload, and sends it to
  239.255.255.255:9875.

  Args:
      interface_name (str): interface to announce from
      session_name (str, optional): overrides the hostname as `s=` value
      message_id_hash (int, optional): SAP message identifier hash. Defaults to 0xFFFF.
      direction (str, optional): SDP direction attribute. Defaults to `recvonly`.

  Raises:
      InterfaceResolutionError: no usable IPv4 address on the interface
      TransmissionError: the datagram could not be sent

  Returns:
      AnnouncementPayload: what was sent
  """
  return announce_binding(resolve_interface(interface_name), session_name, message_id_hash, direction)
