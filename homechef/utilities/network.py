"""LAN address helper used by `homechef.main` to print a reachable URL."""
import socket


def get_local_ip() -> str:
    """Return the address the OS would use to reach the outside world, or '127.0.0.1'.

    Connecting a UDP socket sends nothing on the wire.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(host: str, port: int) -> list:
    """URLs to announce at startup: localhost first, then the LAN address when the server binds all interfaces."""
    urls = [f"http://localhost:{port}"]
    if host in ("0.0.0.0", ""):
        local_ip = get_local_ip()
        if local_ip not in ("127.0.0.1", "localhost"):
            urls.append(f"http://{local_ip}:{port}")
    return urls
