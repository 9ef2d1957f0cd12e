from typing import List

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from pingstatus.models import ServiceRecord, StatusDocument
from pingstatus.settings import settings
from pingstatus.store import load_status

app = FastAPI(
    title="Ping Status",
    description="This service gives back the status of the monitored URLs.",
    version="0.1.0",
    debug=settings.debug,
    docs_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_status_document() -> StatusDocument:
    return load_status(settings.status_file)


@app.get(path="/status", response_model=StatusDocument, tags=["Monitoring"])
async def get_status(document: StatusDocument = Depends(get_status_document)):
    """
    Return the status document written by the last run.
    """

    return document


@app.get(path="/services", response_model=List[ServiceRecord], tags=["Monitoring"])
async def get_services(
    limit: int = 60, document: StatusDocument = Depends(get_status_document)
):
    """
    Return the monitored services in their configured order.

    The history of each service is newest first, limited to `60` samples if
    `limit` not set.
    """

    limit = max(limit, 0)
    return [
        record.model_copy(update={"history": record.history[:limit]})
        for record in document.services
    ]


@app.get(path="/services/lookup", response_model=ServiceRecord, tags=["Monitoring"])
async def get_service(url: str, document: StatusDocument = Depends(get_status_document)):
    """
    Return the record of the service monitored at `url`.
    """

    for record in document.services:
        if record.url == url:
            return record

    raise HTTPException(status_code=404, detail=f"{url} is not monitored")
