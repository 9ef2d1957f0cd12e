from pingstatus.celery import celery_app
from pingstatus.runner import run
from pingstatus.settings import settings


@celery_app.task(name="pingstatus.tasks.monitor")
def monitor() -> int:
    """
    Check every configured service once and rewrite the status document.

    Unreachable services are recorded as down; only a failure to write the
    document makes the task fail. Returns the number of checked services.
    """

    document = run(settings)
    return len(document.services)
