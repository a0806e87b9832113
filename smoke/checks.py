from __future__ import annotations

from foobar_server.api.params import INVALID_LENGTH, MISSING_LENGTH
from foobar_server.domain.sequence import generate, render_sequence
from smoke.types import Probe, ProbeResult

DEFAULT_LENGTHS = (0, 1, 7, 15, 21)


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation."""
    if not values:
        return 0.0
    s = sorted(values)
    k = (len(s) - 1) * p
    f = int(k)
    c = min(f + 1, len(s) - 1)
    if f == c:
        return s[f]
    return s[f] * (c - k) + s[c] * (k - f)


def build_probes(max_length: int = 105) -> list[Probe]:
    """Return the probes to run, with answers taken from the local generator."""
    if max_length < 0:
        raise ValueError("max_length must be >= 0")
    lengths = sorted(set(DEFAULT_LENGTHS) | {max_length})
    probes = [
        Probe(
            name=f"length_{n}",
            params={"length": str(n)},
            expected_status=200,
            expected_body=render_sequence(generate(n)),
        )
        for n in lengths
    ]
    probes += [
        Probe(name="missing", params={}, expected_status=400, expected_body=MISSING_LENGTH),
        Probe(
            name="not_an_int",
            params={"length": "abc"},
            expected_status=400,
            expected_body=INVALID_LENGTH,
        ),
        Probe(
            name="negative",
            params={"length": "-3"},
            expected_status=400,
            expected_body="failed to compute sequence: length is negative",
        ),
    ]
    return probes


def summarize(results: list[ProbeResult]) -> tuple[dict, int]:
    """Compute a summary dict and an exit code from the probe results."""
    durations_ms = [r.elapsed_ms for r in results]
    failures = [
        {
            "probe": r.probe.name,
            "expected_status": r.probe.expected_status,
            "status_code": r.status_code,
            "expected_body": r.probe.expected_body,
            "body": r.body,
        }
        for r in results
        if not r.passed
    ]
    passed = len(results) - len(failures)

    avg_ms = (sum(durations_ms) / len(durations_ms)) if durations_ms else 0.0
    summary = {
        "component": "smoke",
        "event": "summary",
        "probes": len(results),
        "passed": passed,
        "failed": len(failures),
        "timings": {
            "avg_ms": round(avg_ms, 2),
            "p95_ms": round(percentile(durations_ms, 0.95), 2),
            "max_ms": round(max(durations_ms) if durations_ms else 0.0, 2),
        },
        "failures": failures,
    }
    exit_code = 0 if (results and not failures) else 1
    return summary, exit_code
