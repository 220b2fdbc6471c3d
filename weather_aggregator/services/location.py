import ipaddress
from typing import Optional

AUTO_IP = "auto:ip"

_LOOPBACKS = (ipaddress.ip_address("127.0.0.1"), ipaddress.ip_address("::1"))


def is_ip_address(value: str) -> bool:
    """True for a dotted-quad IPv4 address (octets 0-255) or an IPv6 literal."""
    try:
        ipaddress.ip_address(value.strip())
    except ValueError:
        return False
    return True


def resolve(raw_input: Optional[str], default_location: str) -> str:
    """Turn caller input into the query used upstream and as the cache key suffix.

    Blank input and loopback addresses map to ``default_location``, any other
    IP address to the auto-detect sentinel, and everything else is a manual
    place-name query.
    """
    value = (raw_input or "").strip()
    if not value:
        return default_location

    if is_ip_address(value):
        if ipaddress.ip_address(value) in _LOOPBACKS:
            return default_location
        return AUTO_IP

    return value
