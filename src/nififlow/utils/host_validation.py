# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from ipaddress import ip_address
from logging import info, warning
from typing import Optional, Tuple

from validators import domain

LOCALHOST = "localhost"
MAX_PORT = 65535


def split_host(host: str) -> Tuple[str, Optional[str]]:
    """Split 'name[:port]' or '[ipv6][:port]' into name and port (None when absent).

    A bare IPv6 address ('::1') carries multiple colons and is returned whole, without a port.
    """
    if host.startswith("["):
        name, bracket, rest = host[1:].partition("]")
        if not bracket or (rest and not rest.startswith(":")):
            raise ValueError(f"Malformed IPv6 literal in {host!r}.")
        return name, rest[1:] if rest else None
    if host.count(":") == 1:
        name, _, port = host.partition(":")
        return name, port
    return host, None


def is_ipv6(name: str) -> bool:
    try:
        return ip_address(name).version == 6
    except ValueError:
        return False


def url_host(host: str) -> str:
    """'host' as it should appear in a URL, bare IPv6 addresses get bracketed."""
    return f"[{host}]" if not host.startswith("[") and is_ipv6(host) else host


def validate_host(host: str) -> bool:
    """
    Validate the 'host' part of the service URL ('name', 'name:port', '[ipv6]' or '[ipv6]:port').

    Name should be either localhost, an IP address or a well-formed domain name. Port (if any) should be within the
    TCP port range.
    """
    if not host or "/" in host:
        warning(f"Host validation: {host!r} is not in 'name[:port]' form.")
        return False

    try:
        name, port = split_host(host)
    except ValueError as error:
        warning(f"Host validation: {error}")
        return False

    if port is not None and (not port.isdigit() or not 0 < int(port) <= MAX_PORT):
        warning(f"Host validation: invalid port {port!r} in {host!r}.")
        return False

    if host.startswith("["):
        if not is_ipv6(name):
            warning(f"Host validation: {name!r} within brackets is not an IPv6 address.")
            return False
        return True

    if name.lower() == LOCALHOST:
        return True

    try:
        ip_address(name)
        return True
    except ValueError:
        if domain(name):
            info("Host validation: domain in " + host + " is valid.")
            return True
        else:
            warning(f"Host validation: invalid domain name {name!r}.")
            return False
