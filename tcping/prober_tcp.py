"""Real TCP connect prober for TCPing using the socket module."""

import logging
import socket

logger = logging.getLogger(__name__)

UNKNOWN_ADDRESS = "неизвестный адрес"


def resolve_address(host: str) -> str:
    """Resolve host to a numeric address for display.

    Returns the first address the platform resolver yields. The lookup is
    bounded only by the system resolver timeout. Any failure yields
    ``UNKNOWN_ADDRESS`` instead of an exception, since the connect itself
    still goes through the host string.

    Args:
        host: Hostname or literal IP address

    Returns:
        Numeric address string, or UNKNOWN_ADDRESS

    Examples:
        >>> resolve_address("127.0.0.1")
        '127.0.0.1'
    """
    try:
        infos = socket.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    except (OSError, UnicodeError) as e:
        logger.debug("Resolution failed: host=%s, error=%s", host, e)
        return UNKNOWN_ADDRESS

    if not infos:
        logger.debug("Resolution returned no addresses: host=%s", host)
        return UNKNOWN_ADDRESS

    # sockaddr is (address, port) for IPv4 and (address, port, flow, scope) for IPv6
    address = infos[0][4][0]
    logger.debug("Resolved: host=%s, address=%s", host, address)
    return address


class TcpProber:
    """Prober that measures reachability with a plain TCP connect.

    Each probe opens a connection with a bounded timeout and closes it
    straight away. Refusals, unreachable networks, timeouts and bad host
    names all come back as ``False``; no network exception leaves
    :meth:`probe`.
    """

    def __init__(self, timeout_ms: int = 5000):
        """Initialize TCP prober with timeout.

        Args:
            timeout_ms: Maximum time to wait for the connection in milliseconds.
                       Default is 5000ms.
        """
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

        self.timeout_ms = timeout_ms
        self.timeout_seconds = timeout_ms / 1000.0

        logger.debug("TcpProber initialized: timeout_ms=%d", timeout_ms)

    def resolve(self, host: str) -> str:
        return resolve_address(host)

    def probe(self, host: str, port: int) -> bool:
        """Attempt a single TCP connection to host:port.

        Args:
            host: Target hostname or IP address, passed to the connect as is
            port: Target TCP port

        Returns:
            True if the connection was established within the timeout
        """
        try:
            with socket.create_connection((host, port), timeout=self.timeout_seconds):
                logger.debug("Connected: host=%s, port=%d", host, port)
                return True
        except TimeoutError:
            logger.debug("Connect timeout: host=%s, port=%d, timeout=%.1fs", host, port, self.timeout_seconds)
            return False
        except (OSError, UnicodeError) as e:
            logger.debug("Connect failed: host=%s, port=%d, error=%s", host, port, e)
            return False
