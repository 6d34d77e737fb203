import socket
import logging

logger = logging.getLogger("termmask")

PORT = 12014


class UDPHandler(logging.Handler):
    """Send log records to a listener on localhost.

    The prompt owns the terminal while it runs, so logs written to the
    terminal would mess up the masked line.
    """

    udp_address = ("127.0.0.1", PORT)

    def __init__(self):
        super().__init__()
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        msg = self.format(record)
        bb = msg.encode()
        size = 2**10
        while bb:
            bb1 = bb[:size]
            bb = bb[size:]
            self._socket.sendto(bb1, self.udp_address)

    def close(self):
        self._socket.close()
        super().close()


def enable_log_forwarding(level=logging.DEBUG):
    """Forward termmask's logs to ``termmask --listen``.

    Returns the handler, so it can be removed again. Typed characters are
    never logged, only what kind of key was pressed.
    """
    handler = UDPHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def listen_to_logs():
    """Called from ``termmask --listen``.

    This way we can see the logs from another process, so it does not get
    mixed up with the prompt.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", PORT))

    while True:
        data, addr = sock.recvfrom(2**20)
        print(data.decode())
