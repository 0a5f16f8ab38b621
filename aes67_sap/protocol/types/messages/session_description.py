import ipaddress
from dataclasses import dataclass
from typing import List, Tuple
from aes67_sap.config import (
    RTP_PORT,
    RTP_PAYLOAD_TYPE,
    AUDIO_ENCODING,
    AUDIO_SAMPLE_RATE,
    AUDIO_CHANNELS,
    FRAME_COUNT,
    PACKET_TIME_MS,
    SDP_DIRECTION,
)
from aes67_sap.utils import format_sdp_message

SDP_DIRECTIONS = ("sendonly", "recvonly", "sendrecv", "inactive")

@dataclass(frozen=True)
class SessionDescription:
    """
    The SDP body of one audio stream announcement.

    `connection` is the session-level group in `address/prefix` form, while the
    media-level connection line repeats the bare group address.
    """
    origin_address: ipaddress.IPv4Address
    session_name: str
    connection: str
    multicast_address: ipaddress.IPv4Address
    rtp_port: int = RTP_PORT
    payload_type: int = RTP_PAYLOAD_TYPE
    encoding: str = AUDIO_ENCODING
    sample_rate: int = AUDIO_SAMPLE_RATE
    channels: int = AUDIO_CHANNELS
    frame_count: int = FRAME_COUNT
    ptime: int = PACKET_TIME_MS
    direction: str = SDP_DIRECTION

    def __post_init__(self):
        if self.direction not in SDP_DIRECTIONS:
            raise ValueError(f"Unknown SDP direction attribute: {self.direction}")

    def fields(self) -> List[Tuple[str, str]]:
        return [
            ("v", "0"),
            ("o", f"- 4 0 IN IP4 {self.origin_address}"),
            ("s", self.session_name),
            ("c", f"IN IP4 {self.connection}"),
            ("t", "0 0"),
            ("m", f"audio {self.rtp_port} RTP/AVP {self.payload_type}"),
            ("c", f"IN IP4 {self.multicast_address}"),
            ("a", f"rtpmap:{self.payload_type} {self.encoding}/{self.sample_rate}/{self.channels}"),
            ("a", "sync-time:0"),
            ("a", f"framecount:{self.frame_count}"),
            ("a", f"ptime:{self.ptime}"),
            ("a", self.direction),
        ]

    def __str__(self) -> str:
        return format_sdp_message(self.fields())

    def to_bytes(self) -> bytes:
        return str(self).encode("utf-8")
