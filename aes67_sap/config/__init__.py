from .config import (
    SAP_ANNOUNCE_IP,
    SAP_ANNOUNCE_PORT,
    SAP_MULTICAST_TTL,
    SAP_FLAGS,
    SAP_MESSAGE_ID_HASH,
    SAP_PAYLOAD_TYPE,
    SAP_REANNOUNCE_PERIOD_SECONDS,
    MULTICAST_PREFIX,
    MULTICAST_NETMASK,
    RTP_PORT,
    RTP_PAYLOAD_TYPE,
    AUDIO_ENCODING,
    AUDIO_SAMPLE_RATE,
    AUDIO_CHANNELS,
    FRAME_COUNT,
    PACKET_TIME_MS,
    SDP_DIRECTION,
    FALLBACK_DEVICE_NAME,
)

__all__ = [
    "SAP_ANNOUNCE_IP",
    "SAP_ANNOUNCE_PORT",
    "SAP_MULTICAST_TTL",
    "SAP_FLAGS",
    "SAP_MESSAGE_ID_HASH",
    "SAP_PAYLOAD_TYPE",
    "SAP_REANNOUNCE_PERIOD_SECONDS",
    "MULTICAST_PREFIX",
    "MULTICAST_NETMASK",
    "RTP_PORT",
    "RTP_PAYLOAD_TYPE",
    "AUDIO_ENCODING",
    "AUDIO_SAMPLE_RATE",
    "AUDIO_CHANNELS",
    "FRAME_COUNT",
    "PACKET_TIME_MS",
    "SDP_DIRECTION",
    "FALLBACK_DEVICE_NAME",
]
