from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Probe:
    """One request to issue against the service and the answer it must give."""

    name: str
    params: dict[str, str]
    expected_status: int
    expected_body: str


@dataclass
class ProbeResult:
    probe: Probe
    status_code: int
    body: str
    elapsed_ms: float

    @property
    def passed(self) -> bool:
        return (
            self.status_code == self.probe.expected_status
            and self.body == self.probe.expected_body
        )


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., health never ready)."""


class HealthTimeoutError(SmokeError):
    """Raised when /healthz does not answer correctly within the timeout."""


class ProbeError(SmokeError):
    """Raised when a probe request fails at the transport level after retries."""
