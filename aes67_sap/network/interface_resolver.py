import socket
import ipaddress
from dataclasses import dataclass
from typing import Tuple
import psutil
from aes67_sap.config import MULTICAST_PREFIX, MULTICAST_NETMASK
from aes67_sap.ui.logging import Logger
from .errors import InterfaceResolutionError, InterfaceNotFound, NoUsableAddress

logger = Logger()

RESOLVER_CODENAME = 'IFRESLV'

resolver_logger = logger.get_logger(f'[cyan][{RESOLVER_CODENAME}][/]', console_enabled=False)

MulticastGroup = Tuple[ipaddress.IPv4Address, ipaddress.IPv4Address]


@dataclass(frozen=True)
class InterfaceBinding:
  interface_name: str
  local_address: ipaddress.IPv4Address
  multicast_group: MulticastGroup

  @property
  def multicast_address(self) -> ipaddress.IPv4Address:
    return self.multicast_group[0]

  @property
  def subnet_mask(self) -> ipaddress.IPv4Address:
    return self.multicast_group[1]


def resolve_local_address(interface_name: str) -> ipaddress.IPv4Address:
  """Finds the first non-loopback IPv4 address bound to an interface.

  Addresses are taken in the order the OS reports them; the first match wins.

  Args:
      interface_name (str): name of a local network interface, e.g. `eth0`

  Raises:
      InterfaceNotFound: no interface has that name
      NoUsableAddress: the interface has no non-loopback IPv4 address
      InterfaceResolutionError: the interfaces could not be enumerated

  Returns:
      IPv4Address: the local address
  """
  try:
    interfaces = psutil.net_if_addrs()
  except OSError as e:
    raise InterfaceResolutionError(interface_name, f"Cannot enumerate interfaces: {e}") from e

  if interface_name not in interfaces:
    raise InterfaceNotFound(interface_name)

  for addr in interfaces[interface_name]:
    if addr.family != socket.AF_INET:
      continue
    ip = ipaddress.IPv4Address(addr.address)
    if ip.is_loopback:
      continue
    resolver_logger.debug(f"{interface_name} -> {ip}")
    return ip

  raise NoUsableAddress(interface_name)


def derive_multicast_group(local_address: ipaddress.IPv4Address | str) -> MulticastGroup:
  """Maps a.b.c.d onto the administratively-scoped group 239.69.c.d/15."""
  octets = ipaddress.IPv4Address(local_address).packed
  group = ipaddress.IPv4Address(bytes(MULTICAST_PREFIX) + octets[2:])
  return group, ipaddress.IPv4Address(MULTICAST_NETMASK)


def format_group(group: MulticastGroup) -> str:
  """Renders a group as `address/prefix`, e.g. `239.69.5.200/15`."""
  address, mask = group
  prefix = ipaddress.IPv4Network(f"0.0.0.0/{mask}").prefixlen
  return f"{address}/{prefix}"


def resolve_interface(interface_name: str) -> InterfaceBinding:
  local_address = resolve_local_address(interface_name)
  return InterfaceBinding(interface_name, local_address, derive_multicast_group(local_address))
