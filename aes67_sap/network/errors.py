from typing import Tuple


class AnnouncerError(Exception):
  """Base class for failures of a single announcement attempt."""


class InterfaceResolutionError(AnnouncerError):
  """The interface cannot give us a usable local IPv4 address."""

  def __init__(self, interface_name: str, message: str | None = None):
    self.interface_name = interface_name
    super().__init__(message or f"Cannot resolve an IPv4 address for interface '{interface_name}'")


class InterfaceNotFound(InterfaceResolutionError):
  def __init__(self, interface_name: str):
    super().__init__(interface_name, f"No network interface named '{interface_name}'")


class NoUsableAddress(InterfaceResolutionError):
  def __init__(self, interface_name: str):
    super().__init__(interface_name, f"Interface '{interface_name}' has no non-loopback IPv4 address")


class TransmissionError(AnnouncerError):
  """Opening, binding or sending on the announcement socket failed."""

  def __init__(self, destination: Tuple[str, int], reason: str):
    self.destination = destination
    super().__init__(f"Failed to send announcement to {destination[0]}:{destination[1]}: {reason}")
