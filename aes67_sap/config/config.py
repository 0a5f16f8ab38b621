
# --- SAP ---
SAP_ANNOUNCE_IP = "239.255.255.255"
SAP_ANNOUNCE_PORT = 9875
SAP_MULTICAST_TTL = 1
SAP_FLAGS = 0x20                # SAPv1, IPv4 origin, announce, no encryption/compression
SAP_MESSAGE_ID_HASH = 0xFFFF
SAP_PAYLOAD_TYPE = "application/sdp"
SAP_REANNOUNCE_PERIOD_SECONDS = 30

# --- Stream ---
MULTICAST_PREFIX = (239, 69)
MULTICAST_NETMASK = "255.254.0.0"
RTP_PORT = 5004
RTP_PAYLOAD_TYPE = 97
AUDIO_ENCODING = "L24"
AUDIO_SAMPLE_RATE = 48000
AUDIO_CHANNELS = 2
FRAME_COUNT = 48
PACKET_TIME_MS = 1
SDP_DIRECTION = "recvonly"

FALLBACK_DEVICE_NAME = "AES67 Device"
