"""BondController: one notification per action, boundary failures turned into toasts."""

import pytest

from prizebonds.controller import BondController
from prizebonds.models import Severity
from prizebonds.notifications import NotificationCenter
from prizebonds.repository import BondRepo

from conftest import FakeClipboard, MemoryStore


@pytest.fixture
def make_controller(scheduler):
    def build(store=None, clipboard=None):
        repo = BondRepo(store or MemoryStore())
        notifier = NotificationCenter(scheduler)
        return BondController(repo, notifier, clipboard or FakeClipboard())

    return build


def last(controller):
    n = controller.notifier.active()[-1]
    return n.severity, n.message


def test_blank_input_warns(make_controller):
    c = make_controller()
    assert c.submit("   ") is False
    assert last(c) == (Severity.WARNING, "Please enter bond numbers to add.")


def test_submit_range_success(make_controller):
    c = make_controller()
    assert c.submit("0000001-0000003") is True
    assert c.visible() == ["0000003", "0000002", "0000001"]
    assert last(c) == (Severity.SUCCESS, "Added 3 bonds.")
    assert len(c.notifier.active()) == 1


def test_submit_pure_duplicate_clears_input(make_controller):
    c = make_controller()
    c.submit("0000001")
    assert c.submit("0000001") is True
    assert last(c) == (Severity.WARNING, "Duplicate bond found.")
    assert c.count == 1


def test_submit_duplicate_and_malformed_keeps_input(make_controller):
    c = make_controller()
    c.submit("0000001")
    assert c.submit("0000001 12345") is False
    assert last(c)[0] is Severity.WARNING
    assert c.count == 1


def test_submit_persistence_failure_reported(make_controller):
    c = make_controller(store=MemoryStore(fail_writes=True))
    assert c.submit("0000001") is True
    severity, message = last(c)
    assert severity is Severity.ERROR
    assert message.startswith("Added 1 bond.")
    assert c.count == 1
    assert len(c.notifier.active()) == 1


def test_delete(make_controller):
    c = make_controller()
    c.submit("0000001 0000002")
    c.delete("0000001")
    assert c.visible() == ["0000002"]
    assert last(c) == (Severity.SUCCESS, "Bond 0000001 deleted.")


def test_clear_all_requires_confirmation(make_controller):
    c = make_controller()
    c.submit("0000001 0000002")
    asked = []

    def refuse(count):
        asked.append(count)
        return False

    assert c.clear_all(refuse) is False
    assert asked == [2]
    assert c.count == 2

    assert c.clear_all(lambda count: True) is True
    assert c.count == 0
    assert last(c) == (Severity.SUCCESS, "Database cleared successfully.")


def test_clear_all_on_empty_is_silent_noop(make_controller):
    c = make_controller()

    def never(count):
        raise AssertionError("should not prompt")

    assert c.clear_all(never) is False
    assert c.notifier.active() == []


def test_copy_bond(make_controller):
    clip = FakeClipboard()
    c = make_controller(clipboard=clip)
    c.copy_bond("1234567")
    assert clip.text == "1234567"
    assert last(c) == (Severity.SUCCESS, "Copied 1234567")


def test_copy_visible_uses_filtered_view(make_controller):
    clip = FakeClipboard()
    c = make_controller(clipboard=clip)
    c.submit("0000001 1234567 1234568")
    c.copy_visible("1234")
    assert clip.text == "1234568, 1234567"
    assert last(c) == (Severity.SUCCESS, "Copied 2 bonds.")


def test_copy_visible_empty_view_warns(make_controller):
    clip = FakeClipboard()
    c = make_controller(clipboard=clip)
    c.submit("0000001")
    c.copy_visible("999")
    assert clip.text is None
    assert last(c) == (Severity.WARNING, "No bonds to copy.")


def test_clipboard_failure_reported(make_controller):
    c = make_controller(clipboard=FakeClipboard(fail=True))
    c.submit("0000001")
    c.copy_visible()
    assert last(c) == (Severity.ERROR, "Failed to copy")
    c.copy_bond("0000001")
    assert last(c) == (Severity.ERROR, "Failed to copy")
