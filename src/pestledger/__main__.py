from __future__ import annotations

import argparse

from .config import configure_logging, load_settings
from .core.registry import Ledger
from .runtime.server import run


def main() -> None:
    settings = load_settings()

    p = argparse.ArgumentParser(prog="pestledger", description="pestledger: facility and technician registries")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--admin", default=settings.admin, help="initial admin identity")
    p.add_argument("--start-height", type=int, default=settings.start_height, help="initial logical height")
    p.add_argument("--log-level", default=settings.log_level)
    args = p.parse_args()

    configure_logging(args.log_level.upper())

    ledger = Ledger.create(admin=args.admin, start_height=args.start_height)
    srv = run(host=args.host, port=args.port, new_server=True, log_level=args.log_level.lower(), ledger=ledger)
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    import time

    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
