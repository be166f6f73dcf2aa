from __future__ import annotations

import argparse
from typing import List, Optional

import uvicorn


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the queen sweep solver over HTTP")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    args = parser.parse_args(argv)

    uvicorn.run(
        "queen_sweep.protocol.http.app:create_app", factory=True, host=args.host, port=args.port
    )


if __name__ == "__main__":
    main()
