"""
Reading the service list and reading/writing the status document.

Both inputs are read leniently: a missing or broken file is logged and
replaced with an empty value so a run always happens. Only failing to write
the status document is fatal.
"""

import json
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from pingstatus.errors import StatusWriteError
from pingstatus.logging import get_logger
from pingstatus.models import Sample, ServiceDescriptor, ServiceRecord, StatusDocument

logger = get_logger(__name__)


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError:
        logger.info("file not found", path=str(path))
    except (OSError, ValueError) as exc:
        logger.warning("cannot read file", path=str(path), error=str(exc))

    return None


def load_services(path: Path) -> List[ServiceDescriptor]:
    """
    Return the services to check, in the order they are listed.

    Entries that are not valid descriptors, such as a missing url or a
    non-positive `timeout` or `keepHistory`, are skipped, as are repeated urls.
    """

    data = _read_json(path)
    if not isinstance(data, list):
        if data is not None:
            logger.warning("services file is not a list", path=str(path))
        return []

    services: List[ServiceDescriptor] = []
    seen = set()

    for position, entry in enumerate(data):
        try:
            descriptor = ServiceDescriptor.model_validate(entry)
        except ValidationError as exc:
            logger.warning(
                "invalid service skipped", position=position, error=str(exc)
            )
            continue

        if descriptor.url in seen:
            logger.warning("duplicate service skipped", url=descriptor.url)
            continue

        seen.add(descriptor.url)
        services.append(descriptor)

    return services


def _without_bad_samples(entry: Any) -> Any:
    """
    Return the record entry with history samples that cannot be parsed left out.
    """

    if not isinstance(entry, dict):
        return entry

    history = entry.get("history")
    if history is None:
        return entry
    if not isinstance(history, list):
        logger.warning("history is not a list", url=entry.get("url"))
        return {**entry, "history": []}

    samples: List[Sample] = []
    for sample in history:
        try:
            samples.append(Sample.model_validate(sample))
        except ValidationError as exc:
            logger.warning("invalid sample skipped", url=entry.get("url"), error=str(exc))

    return {**entry, "history": samples}


def load_status(path: Path) -> StatusDocument:
    """
    Return the status document written by the previous run.

    Records that cannot be parsed are dropped, as are single history samples
    that cannot be parsed; an unreadable document is replaced by an empty one.
    """

    data = _read_json(path)
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("status document is not an object", path=str(path))
        return StatusDocument()

    updated_at = data.get("updatedAt")
    entries = data.get("services")
    if not isinstance(entries, list):
        entries = []

    records: List[ServiceRecord] = []
    for entry in entries:
        try:
            records.append(ServiceRecord.model_validate(_without_bad_samples(entry)))
        except ValidationError as exc:
            logger.warning("invalid status record skipped", error=str(exc))

    return StatusDocument(
        updated_at=updated_at if isinstance(updated_at, str) else None,
        services=records,
    )


def save_status(path: Path, document: StatusDocument) -> None:
    """
    Replace the status document at `path`, creating parent directories.

    Raises:
        StatusWriteError: the document could not be written.
    """

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(document.to_json(), handle, indent=2)
    except OSError as exc:
        raise StatusWriteError(path, str(exc)) from exc
