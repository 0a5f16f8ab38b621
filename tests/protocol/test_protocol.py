import ipaddress
import pytest
from unittest.mock import patch
from aes67_sap.network import InterfaceBinding, derive_multicast_group
from aes67_sap.protocol import (
    SAP_HEADER_STRUCT,
    SessionDescription,
    get_session_name,
    make_announcement,
    make_sap_header,
    message_id_hash_for,
)

LOCAL = ipaddress.IPv4Address("10.0.5.200")
BINDING = InterfaceBinding("eth0", LOCAL, derive_multicast_group(LOCAL))

EXPECTED_LINES = [
    "v=0",
    "o=- 4 0 IN IP4 10.0.5.200",
    "s=studio-rack",
    "c=IN IP4 239.69.5.200/15",
    "t=0 0",
    "m=audio 5004 RTP/AVP 97",
    "c=IN IP4 239.69.5.200",
    "a=rtpmap:97 L24/48000/2",
    "a=sync-time:0",
    "a=framecount:48",
    "a=ptime:1",
    "a=recvonly",
]

HOSTNAME_PATH = "aes67_sap.protocol.types.messages.message_formats.socket.gethostname"


def test_header_layout():
    header = make_sap_header(BINDING)

    assert header[0] == 0x20
    assert header[1] == 0x00
    assert header[2:4] == b"\xff\xff"
    assert header[4:8] == b"\x0a\x00\x05\xc8"
    assert header[8:] == b"application/sdp\x00"
    assert len(header) == SAP_HEADER_STRUCT.size + len("application/sdp") + 1


def test_payload_type_has_single_terminator():
    payload = make_announcement(BINDING, "studio-rack").to_bytes()
    marker = payload[8:]

    assert marker.startswith(b"application/sdp\x00v=0\r\n")
    assert marker.count(b"\x00") == 1


def test_session_description_lines():
    sdp = str(make_announcement(BINDING, "studio-rack").session_description)

    assert sdp.endswith("\r\n")
    lines = sdp[:-2].split("\r\n")
    assert lines == EXPECTED_LINES
    assert "" not in lines


def test_origin_matches_header_source():
    payload = make_announcement(BINDING, "studio-rack")
    source = ipaddress.IPv4Address(payload.header[4:8])
    lines = str(payload.session_description).split("\r\n")

    assert lines[1] == f"o=- 4 0 IN IP4 {source}"
    assert source == payload.session_description.origin_address == BINDING.local_address


def test_custom_message_id_hash():
    header = make_sap_header(BINDING, 0x1234)
    assert header[2:4] == b"\x12\x34"


@pytest.mark.parametrize("value", [-1, 0x10000])
def test_message_id_hash_out_of_range(value):
    with pytest.raises(ValueError):
        make_sap_header(BINDING, value)


def test_message_id_hash_follows_content():
    sdp = make_announcement(BINDING, "studio-rack").session_description.to_bytes()
    other = make_announcement(BINDING, "booth").session_description.to_bytes()

    assert 0 <= message_id_hash_for(sdp) <= 0xFFFF
    assert message_id_hash_for(sdp) == message_id_hash_for(sdp)
    assert message_id_hash_for(sdp) != message_id_hash_for(other)


def test_sendonly_direction():
    sdp = str(make_announcement(BINDING, "studio-rack", direction="sendonly").session_description)
    assert sdp.endswith("a=sendonly\r\n")


def test_unknown_direction():
    with pytest.raises(ValueError):
        SessionDescription(LOCAL, "x", "239.69.5.200/15", ipaddress.IPv4Address("239.69.5.200"), direction="listen")


def test_hostname_is_session_name():
    with patch(HOSTNAME_PATH, return_value="studio-rack"):
        payload = make_announcement(BINDING)
    assert payload.session_description.session_name == "studio-rack"
    assert "s=studio-rack\r\n" in str(payload.session_description)


def test_hostname_failure_falls_back():
    with patch(HOSTNAME_PATH, side_effect=OSError("no hostname")):
        assert get_session_name() == "AES67 Device"
        payload = make_announcement(BINDING)

    assert "s=AES67 Device\r\n" in str(payload.session_description)
    assert payload.to_bytes().startswith(payload.header)


def test_empty_hostname_falls_back():
    with patch(HOSTNAME_PATH, return_value=""):
        assert get_session_name() == "AES67 Device"


def test_payload_is_header_then_sdp():
    payload = make_announcement(BINDING, "studio-rack")
    data = payload.to_bytes()

    assert data == payload.header + "\r\n".join(EXPECTED_LINES).encode() + b"\r\n"
