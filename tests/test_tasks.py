from __future__ import annotations

from celery.signals import setup_logging

from pingstatus import celery as celery_module
from pingstatus import tasks
from pingstatus.celery import MONITORING_TASK, celery_app
from pingstatus.models import ServiceRecord, StatusDocument


def test_monitor_is_scheduled() -> None:
    schedule = celery_app.conf.beat_schedule["monitor"]

    assert schedule["task"] == MONITORING_TASK
    assert tasks.monitor.name == MONITORING_TASK


def test_monitor_runs_checks(monkeypatch) -> None:
    received = []

    def _run(settings):
        received.append(settings)
        return StatusDocument(services=[ServiceRecord(url="https://a.test")])

    monkeypatch.setattr(tasks, "run", _run)

    assert tasks.monitor() == 1
    assert received == [tasks.settings]


def test_worker_logging_is_set_up_on_celery_signal(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(
        celery_module, "configure_logging", lambda *args: calls.append(args)
    )

    setup_logging.send(sender=None, loglevel="INFO", logfile=None, format="", colorize=False)

    assert calls == [(tasks.settings.log_level, tasks.settings.environment)]
