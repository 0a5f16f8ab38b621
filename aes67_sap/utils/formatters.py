from typing import Iterable, Tuple

SDP_LINE_END = "\r\n"

def format_sdp_message(fields: Iterable[Tuple[str, str]]) -> str:
    """Formats ordered (type, value) pairs into SDP text, one `type=value` line each.

    Example:
    >>> format_sdp_message([("v", "0"), ("t", "0 0")])
    "v=0\\r\\nt=0 0\\r\\n"

    Args:
        fields (Iterable[Tuple[str, str]]): pairs in wire order; SDP types repeat, so no dict

    Returns:
        str: CRLF-terminated SDP text
    """
    return "".join(f"{key}={value}{SDP_LINE_END}" for key, value in fields)
