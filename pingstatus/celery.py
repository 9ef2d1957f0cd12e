from celery import Celery
from celery.schedules import crontab
from celery.signals import setup_logging

from pingstatus.logging import configure_logging
from pingstatus.settings import settings

celery_app = Celery("pingstatus", broker=settings.celery_broker)

MONITORING_TASK = "pingstatus.tasks.monitor"

celery_app.conf.task_routes = {MONITORING_TASK: "main-queue"}
celery_app.conf.imports = ("pingstatus.tasks",)

# Schedule the monitoring task
celery_app.conf.beat_schedule = {
    "monitor": {
        "task": MONITORING_TASK,
        "schedule": crontab(
            minute=f"*/{settings.frequency}"  # Run the task every X minutes
        ),
    }
}


@setup_logging.connect
def configure_worker_logging(**kwargs) -> None:
    """
    Replace Celery's own logging setup in worker and beat processes.
    """

    configure_logging(settings.log_level, settings.environment)
