#!/usr/bin/env python3
"""Smoke runner that checks a running FooBar service end to end.

Steps:
- wait for /healthz
- probe /foobar with valid and invalid lengths concurrently
- compare every answer with the locally generated sequence
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys

import httpx

from foobar_server.logging_conf import get_logger, setup_logging
from smoke.checks import build_probes, summarize
from smoke.cli import parse_args
from smoke.client import run_probes, wait_for_health

logger = get_logger("smoke")


async def run_smoke(
    *,
    base_url: str,
    max_length: int = 105,
    timeout_s: float = 20.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    probes = build_probes(max_length)
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0, transport=transport) as client:
        await wait_for_health(client, timeout_s=timeout_s)
        results = await run_probes(client, probes)
    summary, exit_code = summarize(results)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_args(argv if argv is not None else sys.argv[1:])
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            max_length=args.max_length,
            timeout_s=args.timeout,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
