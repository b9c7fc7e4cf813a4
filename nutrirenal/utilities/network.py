"""Addresses printed by the startup banner in `nutrirenal.main`."""
import ipaddress
import logging
import socket
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# TEST-NET-1: a connected UDP socket picks the outbound interface, nothing is sent
ROUTE_TARGET: Tuple[str, int] = ("192.0.2.1", 9)


def lan_address(target: Tuple[str, int] = ROUTE_TARGET) -> Optional[str]:
    """LAN address other devices can reach this host on, or None.

    None when the OS has no route or only a loopback address would be used.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(target)
            address = sock.getsockname()[0]
    except OSError as exc:
        logger.debug("No LAN route: %s", exc)
        return None
    if ipaddress.ip_address(address).is_loopback:
        return None
    return address


def service_urls(port: int, lan_ip: Optional[str] = None) -> List[str]:
    urls = [f"http://localhost:{port}"]
    if lan_ip:
        urls.append(f"http://{lan_ip}:{port}")
    return urls
