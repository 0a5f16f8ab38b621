from .types.messages.message_formats import (
  make_sap_header,
  make_session_description,
  make_announcement,
  message_id_hash_for,
  get_session_name,
  AnnouncementPayload,
  SAP_HEADER_STRUCT,
  )
from .types.messages.session_description import SessionDescription, SDP_DIRECTIONS


__all__ = ["make_sap_header", "make_session_description", "make_announcement", "message_id_hash_for", "get_session_name", "AnnouncementPayload", "SAP_HEADER_STRUCT", "SessionDescription", "SDP_DIRECTIONS"]
