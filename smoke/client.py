from __future__ import annotations

import asyncio
import time

import httpx

from foobar_server.logging_conf import get_logger
from foobar_server.main import HEALTHY_MESSAGE
from smoke.types import HealthTimeoutError, Probe, ProbeError, ProbeResult

logger = get_logger("smoke.client")


async def wait_for_health(
    client: httpx.AsyncClient, timeout_s: float = 20.0, poll_interval_s: float = 0.25
) -> None:
    """Poll /healthz until it answers 200 with the health message, or time out.

    Connection errors while the service is still starting are expected and
    retried until the deadline.
    """
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        try:
            r = await client.get("/healthz")
            if r.status_code == 200 and r.text == HEALTHY_MESSAGE:
                logger.info("health.ok", extra={"event": "health_ok"})
                return
        except httpx.TransportError as e:
            logger.debug("health.retry", extra={"event": "health_retry", "error": str(e)})
        await asyncio.sleep(poll_interval_s)
    raise HealthTimeoutError(f"/healthz did not pass within {timeout_s}s")


async def run_probe(client: httpx.AsyncClient, probe: Probe, *, retries: int = 2) -> ProbeResult:
    """Issue one probe against /foobar and record what came back.

    Only transport failures are retried; any HTTP answer is a result.
    """
    last_err: Exception | None = None
    for attempt in range(retries):
        start = time.perf_counter()
        try:
            r = await client.get("/foobar", params=probe.params)
        except httpx.TransportError as e:  # pragma: no cover - network flakiness
            last_err = e
            logger.warning(
                "probe.retry",
                extra={
                    "event": "probe_retry",
                    "probe": probe.name,
                    "attempt": attempt + 1,
                    "error": str(e),
                },
            )
            continue
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        result = ProbeResult(
            probe=probe,
            status_code=r.status_code,
            body=r.text,
            elapsed_ms=elapsed_ms,
        )
        logger.info(
            "probe.result",
            extra={
                "event": "probe_result",
                "probe": probe.name,
                "status_code": r.status_code,
                "passed": result.passed,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
        return result
    raise ProbeError(f"probe {probe.name} failed: {last_err}")


async def run_probes(client: httpx.AsyncClient, probes: list[Probe]) -> list[ProbeResult]:
    """Run all probes concurrently, preserving probe order in the results."""
    return list(await asyncio.gather(*(run_probe(client, p) for p in probes)))
