import time
from typing import Optional
from urllib.parse import urljoin

import requests

from pingstatus.logging import get_logger
from pingstatus.models import ProbeOutcome, Status

logger = get_logger(__name__)


def is_available(status_code: int) -> bool:
    return 200 <= status_code < 400


def _fetch_status(session: requests.Session, url: str, deadline: float) -> int:
    """
    GET the URL, following redirects until a final response or the deadline.

    Every hop gets the time left until `deadline` as its timeout, so the whole
    chain shares one budget.
    """

    for _ in range(session.max_redirects + 1):
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise requests.Timeout(f"No final response from {url} in time")

        response = session.get(
            url, timeout=remaining, allow_redirects=False, stream=True
        )
        try:
            status_code = response.status_code
            target = session.get_redirect_target(response)
        finally:
            response.close()

        if target is None:
            return status_code

        url = urljoin(response.url, target)

    raise requests.TooManyRedirects(f"Exceeded {session.max_redirects} redirects")


def probe(
    url: str, timeout_ms: int, session: Optional[requests.Session] = None
) -> ProbeOutcome:
    """
    Send a single GET request to the URL to check its availability.

    Redirects are followed, and the response body is not read. Any failure
    to get a response within `timeout_ms`, redirects included, is reported as
    a `down` outcome without status code and response time instead of being
    raised.
    """

    if session is None:
        with requests.Session() as own_session:
            return probe(url, timeout_ms, session=own_session)

    start = time.monotonic()

    try:
        status_code = _fetch_status(session, url, start + timeout_ms / 1000)
    except Exception as exc:
        logger.warning("probe failed", url=url, error=str(exc))
        return ProbeOutcome(status=Status.DOWN)

    elapsed_ms = round((time.monotonic() - start) * 1000)

    # A slow final read can still push the attempt past the deadline.
    if elapsed_ms > timeout_ms:
        logger.warning("probe timed out", url=url, response_time_ms=elapsed_ms)
        return ProbeOutcome(status=Status.DOWN)

    status = Status.UP if is_available(status_code) else Status.DOWN
    logger.debug(
        "probe finished", url=url, status_code=status_code, response_time_ms=elapsed_ms
    )

    return ProbeOutcome(
        status=status, status_code=status_code, response_time_ms=elapsed_ms
    )
