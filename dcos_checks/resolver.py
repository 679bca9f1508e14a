from __future__ import annotations

import socket


def lookup_host(hostname: str) -> list[str]:
    infos = socket.getaddrinfo(hostname, None, proto=socket.IPPROTO_TCP)

    addrs: list[str] = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        addr = sockaddr[0]
        if addr not in addrs:
            addrs.append(addr)
    return addrs
