from .formatters import format_sdp_message, SDP_LINE_END

__all__ = ["format_sdp_message", "SDP_LINE_END"]
