"""
Folding probe outcomes into the per-service history.

The history is kept newest first: index 0 is always the latest sample and the
top level fields of a record mirror it.
"""

from typing import Optional, Sequence

from pingstatus.models import (
    ProbeOutcome,
    Sample,
    ServiceDescriptor,
    ServiceRecord,
    Status,
)


def default_record(descriptor: ServiceDescriptor) -> ServiceRecord:
    """
    Return the record of a service that has never been checked.
    """

    return ServiceRecord(name=descriptor.name, url=descriptor.url)


def uptime_percent(history: Sequence[Sample]) -> int:
    """
    Percentage of `up` samples in the history, rounded half up to an integer.

    An empty history has an uptime of 0.
    """

    total = len(history)
    if not total:
        return 0

    up = sum(1 for sample in history if sample.status == Status.UP)
    return (200 * up + total) // (2 * total)


def merge(
    prior: Optional[ServiceRecord],
    descriptor: ServiceDescriptor,
    outcome: ProbeOutcome,
    now: str,
) -> ServiceRecord:
    """
    Return the record of the service after adding the outcome checked at `now`.

    The new sample is prepended to the prior history which is then cut to the
    descriptor's `keep_history` newest samples. The prior record is left
    untouched.
    """

    if prior is None:
        prior = default_record(descriptor)

    sample = Sample(
        ts=now,
        status=outcome.status,
        status_code=outcome.status_code,
        response_time_ms=outcome.response_time_ms,
    )
    history = [sample, *prior.history][: descriptor.keep_history]

    return prior.model_copy(
        update={
            "name": descriptor.name or prior.name,
            "status": sample.status,
            "status_code": sample.status_code,
            "response_time_ms": sample.response_time_ms,
            "last_checked": now,
            "history": history,
            "uptime_percent": uptime_percent(history),
        }
    )
