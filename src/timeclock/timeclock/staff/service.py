from __future__ import annotations

from typing import Optional

from ..common.logger import get_logger
from ..common.validators import require_card_id, require_non_empty, require_pin
from ..core.constants import CARD_ID_LENGTH, PIN_LENGTH
from ..core.exceptions import ValidationError
from .model import StaffMember
from .repository import StaffDirectory


class StaffService:
    """Use case: manage staff records (admin)."""

    def __init__(self, staff: StaffDirectory):
        self._staff = staff
        self._logger = get_logger("timeclock.staff")

    def list_members(self) -> list[StaffMember]:
        return list(self._staff.load_active_members())

    def find_by_ident(self, ident: str) -> Optional[StaffMember]:
        ident = (ident or "").strip()
        if len(ident) not in (PIN_LENGTH, CARD_ID_LENGTH):
            raise ValidationError(f'Malformed PIN or card ID: "{ident}"')
        for member in self._staff.load_active_members():
            if member.matches(ident):
                return member
        return None

    def _ensure_unique(self, *, pin: str, card_id: str, exclude_id: Optional[int] = None) -> None:
        for other in self._staff.load_active_members():
            if other.member_id == exclude_id:
                continue
            if pin in (other.pin, other.card_id):
                raise ValidationError(f'PIN "{pin}" is already used by {other.name}')
            if card_id in (other.pin, other.card_id):
                raise ValidationError(f'Card ID "{card_id}" is already used by {other.name}')

    def _get_active(self, member_id: int) -> StaffMember:
        member = self._staff.get_by_id(int(member_id))
        if not member or not member.is_active:
            raise ValidationError("Staff member does not exist")
        return member

    def add_member(self, *, name: str, pin: str, card_id: str) -> StaffMember:
        name = require_non_empty(name, "Name")
        pin = require_pin(pin)
        card_id = require_card_id(card_id)
        self._ensure_unique(pin=pin, card_id=card_id)

        member = self._staff.create(name=name, pin=pin, card_id=card_id)
        self._logger.info(f"Added staff member {member.name} (id={member.member_id})")
        return member

    def edit_member(self, member_id: int, *, name: str, pin: str, card_id: str) -> StaffMember:
        current = self._get_active(member_id)

        name = require_non_empty(name, "Name")
        pin = require_pin(pin)
        card_id = require_card_id(card_id)
        self._ensure_unique(pin=pin, card_id=card_id, exclude_id=current.member_id)

        updated = current.with_changes(name=name, pin=pin, card_id=card_id)
        self._staff.save(updated)
        self._logger.info(f"Edited staff member id={updated.member_id}")
        return updated

    def set_visibility(self, member_id: int, *, visible: bool) -> StaffMember:
        current = self._get_active(member_id)
        updated = current.with_changes(is_visible=bool(visible))
        self._staff.save(updated)
        return updated

    def deactivate(self, member_id: int) -> None:
        member = self._get_active(member_id)
        if not self._staff.deactivate(member.member_id):
            raise ValidationError("Deactivating staff member failed")
        self._logger.info(f"Deactivated staff member {member.name} (id={member.member_id})")
