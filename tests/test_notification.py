import pytest

from lifemanager.notification import Notification, NotificationStatus

SAMPLE = {
    "id": "n1",
    "actor": "Sam",
    "action": "completed",
    "module": "todo",
    "item_text": "Laundry",
    "created_at": 1700000000000,
}


def test_notification_from_dict():
    notif = Notification.from_dict(SAMPLE)
    assert notif == Notification(
        id="n1", actor="Sam", action="completed", module="todo",
        item_text="Laundry", created_at=1700000000000.0,
    )


def test_notification_missing_field():
    data = dict(SAMPLE)
    del data["module"]
    with pytest.raises(ValueError):
        Notification.from_dict(data)


def test_status_from_dict():
    status = NotificationStatus.from_dict(
        {"notifications": [SAMPLE, dict(SAMPLE, id="n2")], "unread_count": 2}
    )
    assert [n.id for n in status.notifications] == ["n1", "n2"]
    assert status.unread_count == 2


def test_status_empty():
    status = NotificationStatus.from_dict({"notifications": [], "unread_count": 0})
    assert status == NotificationStatus()


def test_status_rejects_negative_unread():
    with pytest.raises(ValueError):
        NotificationStatus.from_dict({"notifications": [], "unread_count": -1})


def test_status_missing_notifications():
    with pytest.raises(ValueError):
        NotificationStatus.from_dict({"unread_count": 0})