"""Probe configuration model.

See Also:
    [RelayPinger][pingmole.pinger.pinger.RelayPinger]: Reads these
        settings for every probe sequence.
    [RelaysPinger][pingmole.pinger.pinger.RelaysPinger]: Shares one
        instance across all concurrent probers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProbeConfig(BaseModel):
    """Immutable probe schedule shared read-only by all probers.

    Frozen after construction, so it is safe to share across concurrent
    tasks without locking.

    Note:
        Durations are in seconds. The CLI accepts milliseconds and converts
        before building this model.
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=4, ge=1, description="Probes per relay")
    timeout: float = Field(default=0.75, gt=0.0, description="Per-probe timeout in seconds")
    interval: float = Field(default=1.0, ge=0.0, description="Seconds between probes")
