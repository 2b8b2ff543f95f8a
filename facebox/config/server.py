import os
from typing import Any, Dict, Tuple

DEFAULT_LISTEN = "127.0.0.1:8000"


def parse_listen_address(listen: str) -> Tuple[str, int]:
    """
    Split a ``host:port`` listen address.

    IPv6 hosts are written in brackets, e.g. ``[::1]:8000``.

    Raises:
        ValueError: if the address has no host, no port, or a bad port
    """
    host, sep, port_str = listen.strip().rpartition(":")
    if not sep or not host or not port_str:
        raise ValueError(f"Listen address must be host:port, got '{listen}'")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"IPv6 listen hosts must be bracketed, got '{listen}'")

    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"Invalid port in listen address '{listen}'") from None

    if not 0 < port < 65536:
        raise ValueError(f"Port out of range in listen address '{listen}'")

    return host, port


def get_server_config() -> Dict[str, Any]:
    host, port = parse_listen_address(os.getenv("FACEBOX_LISTEN", DEFAULT_LISTEN))
    return {
        "host": host,
        "port": port,
        "log_level": "info",
        "access_log": True,
    }


def get_worker_config() -> Dict[str, int]:
    return {
        "max_workers": int(
            os.getenv("FACEBOX_WORKERS", min(4, os.cpu_count() or 1))
        ),
        "max_queue": int(os.getenv("FACEBOX_MAX_QUEUE", 64)),
    }
