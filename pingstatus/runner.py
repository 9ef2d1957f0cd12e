from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Sequence

import requests

from pingstatus.history import merge
from pingstatus.logging import get_logger
from pingstatus.models import (
    ProbeOutcome,
    ServiceDescriptor,
    ServiceRecord,
    StatusDocument,
)
from pingstatus.probe import probe
from pingstatus.settings import Settings
from pingstatus.store import load_services, load_status, save_status

logger = get_logger(__name__)

Prober = Callable[[str, int], ProbeOutcome]


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def index_by_url(document: StatusDocument) -> Dict[str, ServiceRecord]:
    return {record.url: record for record in document.services}


def check_services(
    services: Sequence[ServiceDescriptor],
    previous: StatusDocument,
    now: Optional[str] = None,
    prober: Prober = probe,
) -> StatusDocument:
    """
    Probe every service once and fold the outcomes into the previous document.

    The returned document lists the services in the given order. Records of
    services that are no longer configured are not carried over.
    """

    now = now or now_iso()
    prior_records = index_by_url(previous)
    records = []

    for descriptor in services:
        outcome = prober(descriptor.url, descriptor.timeout_ms)
        record = merge(prior_records.get(descriptor.url), descriptor, outcome, now)
        records.append(record)

    return StatusDocument(updated_at=now, services=records)


def run(settings: Settings) -> StatusDocument:
    """
    Run one round of checks and persist the resulting status document.

    Raises:
        StatusWriteError: the status document could not be written.
    """

    services = load_services(settings.services_file)
    previous = load_status(settings.status_file)

    with requests.Session() as session:

        def prober(url: str, timeout_ms: int) -> ProbeOutcome:
            return probe(url, timeout_ms, session=session)

        document = check_services(services, previous, prober=prober)

    save_status(settings.status_file, document)
    logger.info(
        "status written",
        path=str(settings.status_file),
        services=len(document.services),
    )

    return document
