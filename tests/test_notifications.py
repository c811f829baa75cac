"""NotificationCenter: timers, early dismissal, no double removal."""

from types import SimpleNamespace

from prizebonds.models import Severity
from prizebonds.notifications import NotificationCenter


def test_notification_expires(scheduler):
    changes = []
    center = NotificationCenter(scheduler, on_change=lambda: changes.append(1))
    n = center.success("Added 1 bond.")
    assert [x.id for x in center.active()] == [n.id]
    assert list(scheduler.pending.values())[0][0] == 4000

    scheduler.fire_all()
    assert center.active() == []
    assert len(changes) == 2


def test_many_live_at_once(scheduler):
    center = NotificationCenter(scheduler)
    a = center.warning("a")
    b = center.error("b")
    assert [n.id for n in center.active()] == [a.id, b.id]
    assert a.id != b.id
    assert center.active()[1].severity is Severity.ERROR


def test_dismiss_cancels_timer(scheduler):
    center = NotificationCenter(scheduler)
    n = center.success("x")
    center.dismiss(n.id)
    assert center.active() == []
    assert scheduler.pending == {}
    assert len(scheduler.cancelled) == 1


def test_stale_timer_and_double_dismiss_are_noops(scheduler):
    changes = []
    center = NotificationCenter(scheduler, on_change=lambda: changes.append(1))
    n = center.success("x")
    handle = next(iter(scheduler.pending))
    _, callback = scheduler.pending[handle]
    center.dismiss(n.id)
    callback()
    center.dismiss(n.id)
    center.dismiss(12345)
    # one change for notify, one for dismiss
    assert len(changes) == 2


def test_system_notification_forwarded(scheduler, monkeypatch):
    sent = []
    monkeypatch.setattr(
        "prizebonds.notifications.system_notification",
        SimpleNamespace(notify=lambda **kwargs: sent.append(kwargs)),
    )
    center = NotificationCenter(scheduler, system_notify=True)
    center.success("Copied 3 bonds.")
    assert sent[0]["message"] == "Copied 3 bonds."
    assert sent[0]["timeout"] == 4


def test_system_notification_failure_is_logged(scheduler, monkeypatch, caplog):
    def boom(**kwargs):
        raise NotImplementedError("no backend")

    monkeypatch.setattr("prizebonds.notifications.system_notification", SimpleNamespace(notify=boom))
    center = NotificationCenter(scheduler, system_notify=True)
    center.error("x")
    assert len(center.active()) == 1
    assert "System notification failed" in caplog.text
