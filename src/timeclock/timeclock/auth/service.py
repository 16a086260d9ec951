from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError
from .repository import PasswordRepository


class AuthService:
    """Use case: unlock the admin area (staff management, reports)."""

    def __init__(self, passwords: PasswordRepository):
        self._passwords = passwords

    def add_password(self, password: str) -> int:
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        return self._passwords.add_hash(generate_password_hash(password))

    def verify(self, password: str) -> bool:
        for phc in self._passwords.list_hashes():
            try:
                ok = check_password_hash(phc, password or "")
            except ValueError:
                # e.g. placeholder hashes or corrupted values
                ok = False
            if ok:
                return True
        return False

    def authenticate(self, password: str) -> None:
        if not self.verify(password):
            raise AuthenticationError("Wrong password")
