from __future__ import annotations

import pytest

from src.timeclock.timeclock.core.exceptions import ValidationError
from src.timeclock.timeclock.staff.service import StaffService


@pytest.fixture
def service(staff_repo):
    return StaffService(staff_repo)


def test_add_member_strips_input(service):
    member = service.add_member(name="  Ceeron ", pin=" ab12 ", card_id="3333333333")

    assert member.name == "Ceeron"
    assert member.pin == "ab12"
    assert service.list_members() == [member]


@pytest.mark.parametrize(
    "name,pin,card_id,message",
    [
        ("", "1234", "1234567890", "Name must not be empty"),
        ("Ceeron", "123", "1234567890", "PIN must consist of 4"),
        ("Ceeron", "12-4", "1234567890", "PIN must consist of 4"),
        ("Ceeron", "1234", "12345678a0", "Card ID must consist of 10"),
    ],
)
def test_add_member_validation(service, name, pin, card_id, message):
    with pytest.raises(ValidationError, match=message):
        service.add_member(name=name, pin=pin, card_id=card_id)


def test_pin_and_card_must_be_unique(service, aaron):
    with pytest.raises(ValidationError, match="already used by Aaron"):
        service.add_member(name="Ceeron", pin="1111", card_id="3333333333")
    with pytest.raises(ValidationError, match="already used by Aaron"):
        service.add_member(name="Ceeron", pin="3333", card_id="1111111111")


def test_edit_member_may_keep_own_pin(service, aaron):
    updated = service.edit_member(aaron.member_id, name="Aaron A.", pin="1111", card_id="1111111111")
    assert updated.name == "Aaron A."


def test_set_visibility(service, staff_repo, aaron):
    service.set_visibility(aaron.member_id, visible=False)
    assert staff_repo.get_by_id(aaron.member_id).is_visible is False


def test_find_by_ident(service, aaron, beeron):
    assert service.find_by_ident("2222") == beeron
    assert service.find_by_ident("1111111111") == aaron
    assert service.find_by_ident("9999") is None
    with pytest.raises(ValidationError):
        service.find_by_ident("12")


def test_deactivate_frees_pin_and_card(service, staff_repo, aaron):
    service.deactivate(aaron.member_id)

    assert service.list_members() == []
    stored = staff_repo.get_by_id(aaron.member_id)
    assert stored.is_active is False
    assert stored.pin is None and stored.card_id is None

    again = service.add_member(name="Aaron", pin="1111", card_id="1111111111")
    assert again.member_id != aaron.member_id

    with pytest.raises(ValidationError, match="does not exist"):
        service.deactivate(aaron.member_id)
