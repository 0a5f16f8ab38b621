import socket
import struct
import hashlib
from dataclasses import dataclass
from aes67_sap.config import (
    SAP_FLAGS,
    SAP_MESSAGE_ID_HASH,
    SAP_PAYLOAD_TYPE,
    SDP_DIRECTION,
    FALLBACK_DEVICE_NAME,
)
from aes67_sap.network.interface_resolver import InterfaceBinding, format_group
from aes67_sap.ui.logging import Logger
from .session_description import SessionDescription

logger = Logger()

FORMAT_CODENAME = 'SAPFMT '

format_logger = logger.get_logger(f'[yellow][{FORMAT_CODENAME}][/]')

# flags, auth length, message id hash, originating source
SAP_HEADER_STRUCT = struct.Struct("!BBH4s")

@dataclass(frozen=True)
class AnnouncementPayload:
    header: bytes
    session_description: SessionDescription

    def to_bytes(self) -> bytes:
        return self.header + self.session_description.to_bytes()


def get_session_name() -> str:
    """Uses the machine hostname as session name, or a placeholder when it is unavailable."""
    try:
        hostname = socket.gethostname()
    except OSError as e:
        format_logger.warning(f"Hostname lookup failed ({e}), using '{FALLBACK_DEVICE_NAME}'")
        return FALLBACK_DEVICE_NAME

    if not hostname:
        format_logger.warning(f"Empty hostname, using '{FALLBACK_DEVICE_NAME}'")
        return FALLBACK_DEVICE_NAME
    return hostname


def message_id_hash_for(sdp_bytes: bytes) -> int:
    """Derives a 16-bit message identifier hash from the SDP content.

    Receivers use the hash with the originating source to tell a repeated
    announcement from a changed one, so it only changes when the body does.
    """
    return int.from_bytes(hashlib.sha1(sdp_bytes).digest()[:2], "big")


def make_sap_header(origin: InterfaceBinding, message_id_hash: int = SAP_MESSAGE_ID_HASH) -> bytes:
    """Builds the SAP header, payload type string and its NUL terminator.

    Args:
        origin (InterfaceBinding): binding whose local address is the originating source
        message_id_hash (int, optional): 16-bit hash. Defaults to 0xFFFF.

    Raises:
        ValueError: hash does not fit in 16 bits

    Returns:
        bytes: header ready to be followed by the SDP text
    """
    if not 0 <= message_id_hash <= 0xFFFF:
        raise ValueError(f"Message identifier hash out of range: {message_id_hash}")

    fixed = SAP_HEADER_STRUCT.pack(SAP_FLAGS, 0, message_id_hash, origin.local_address.packed)
    return fixed + SAP_PAYLOAD_TYPE.encode("ascii") + b"\x00"


def make_session_description(origin: InterfaceBinding, session_name: str | None = None, direction: str = SDP_DIRECTION) -> SessionDescription:
    return SessionDescription(
        origin_address=origin.local_address,
        session_name=session_name if session_name is not None else get_session_name(),
        connection=format_group(origin.multicast_group),
        multicast_address=origin.multicast_address,
        direction=direction,
    )


def make_announcement(origin: InterfaceBinding, session_name: str | None = None, message_id_hash: int = SAP_MESSAGE_ID_HASH, direction: str = SDP_DIRECTION) -> AnnouncementPayload:
    sdp = make_session_description(origin, session_name, direction)
    return AnnouncementPayload(make_sap_header(origin, message_id_hash), sdp)
