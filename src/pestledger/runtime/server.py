from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from ..config import load_settings
from ..core.registry import Ledger
from ..sdk.client import PestLedgerClient
from .app import create_app


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PestLedgerServer:
    host: str
    port: int
    url: str
    _server: uvicorn.Server | None = field(default=None, repr=False, compare=False)
    _thread: threading.Thread | None = field(default=None, repr=False, compare=False)

    def client(self, caller: str | None = None) -> PestLedgerClient:
        return PestLedgerClient(self.url.rstrip("/"), caller)

    def stop(self, *, timeout_s: float = 5.0) -> None:
        if self._server is None:
            return
        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout_s)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort check that a pestledger server is reachable."""
    return PestLedgerClient(base_url, timeout_s=timeout_s).is_alive()


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 5.0,
    ledger: Ledger | None = None,
) -> PestLedgerServer | PestLedgerClient:
    """Start a pestledger server in a background thread, or attach to a running one.

    Behavior:
    - If PESTLEDGER_URL is set, we attach to that server (client mode) unless
      `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at http://{host}:{port},
      we attach to it unless `new_server=True`.
    - Otherwise we start a new local server and return a `PestLedgerServer`. It serves
      `ledger`, or the process-wide LEDGER when none is given.
    """

    env_url = _normalize_base_url(load_settings().url)

    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to pestledger at %s", env_url)
            return PestLedgerClient(env_url)

    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to pestledger at %s", default_url)
            return PestLedgerClient(default_url)

    if port == 0:
        port = _find_free_port(host)

    config = uvicorn.Config(create_app(ledger), host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + startup_timeout_s
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.01)
    if not server.started:
        server.should_exit = True
        thread.join(5.0)
        raise RuntimeError(f"pestledger server failed to start on {host}:{port}")

    url = f"http://{host}:{port}/"
    logger.info("pestledger listening on %s", url)
    return PestLedgerServer(host=host, port=port, url=url, _server=server, _thread=thread)
