from .errors import AnnouncerError, InterfaceResolutionError, InterfaceNotFound, NoUsableAddress, TransmissionError
from .interface_resolver import InterfaceBinding, resolve_local_address, derive_multicast_group, resolve_interface, format_group

# The announcer imports the protocol package, which imports this one; load it as `aes67_sap.network.announcer`
__all__ = ["AnnouncerError", "InterfaceResolutionError", "InterfaceNotFound", "NoUsableAddress", "TransmissionError",
           "InterfaceBinding", "resolve_local_address", "derive_multicast_group", "resolve_interface", "format_group"]
