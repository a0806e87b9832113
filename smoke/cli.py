from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="FooBar service smoke runner")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8080"))
    parser.add_argument("--timeout", type=float, default=20.0, help="seconds to wait for /healthz")
    parser.add_argument("--max-length", type=int, default=105, dest="max_length")
    return parser.parse_args(argv)
