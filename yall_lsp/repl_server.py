from __future__ import annotations

"""
Simple TCP REPL server for yall.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(def x 1) (list x x)"}
- Response: {"ok": true, "result": <printed form>} or {"ok": false, "error": <message>}

A single Interpreter is shared by every connection so that definitions
persist across evaluations.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from yall.config import get_log_level, get_repl_address
from yall.interpreter import Interpreter
from yall.types.errors import YallError

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port or default_port
        self.interp = Interpreter()
        # Environment bindings are not synchronized; evaluate one request at a time
        self._lock = threading.Lock()

    def handle_line(self, line: bytes) -> dict:
        """Decode one request line and evaluate it; never raises for bad input."""
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}
        code = req.get("code", "")
        try:
            with self._lock:
                result = self.interp.eval_to_string(code)
        except (YallError, RecursionError) as ex:
            logger.warning("eval failed: %s", ex)
            return {"ok": False, "error": str(ex)}
        return {"ok": True, "result": result}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("yall REPL listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected from %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))


def main():
    logging.basicConfig(level=get_log_level())
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
