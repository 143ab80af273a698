"""Shopper account: the logged-in user and their delivery addresses.

Neither affects pricing; they only gate checkout.
"""

from __future__ import annotations

from dataclasses import dataclass

from quickbite.domain.exceptions import ValidationError


@dataclass(frozen=True)
class User:
    name: str
    email: str
    phone: str = ""

    @staticmethod
    def create(name: str, email: str, phone: str = "") -> User:
        name, email, phone = name.strip(), email.strip(), (phone or "").strip()
        if not name or not email:
            raise ValidationError("Please enter name and email.")
        return User(name=name, email=email, phone=phone)


_REQUIRED_ADDRESS_FIELDS = ("full_name", "phone", "line1", "city", "state", "pincode")


@dataclass(frozen=True)
class Address:
    id: str
    label: str
    full_name: str
    phone: str
    line1: str
    city: str
    state: str
    pincode: str
    line2: str = ""
    lat: float | None = None
    lon: float | None = None

    @staticmethod
    def create(address_id: str, **fields: object) -> Address:
        """Build a new address from form input, stripping whitespace.

        Raises ValidationError if any required field is blank.
        """
        cleaned = {
            key: value.strip() if isinstance(value, str) else value
            for key, value in fields.items()
        }
        missing = [name for name in _REQUIRED_ADDRESS_FIELDS if not cleaned.get(name)]
        if missing:
            raise ValidationError(
                f"Please fill all required fields (missing: {', '.join(missing)})"
            )
        if not cleaned.get("label"):
            cleaned["label"] = "Home"
        return Address(id=address_id, **cleaned)  # type: ignore[arg-type]

    def one_line(self) -> str:
        street = f"{self.line1}, {self.line2}" if self.line2 else self.line1
        return f"{street}, {self.city}, {self.state} - {self.pincode}"
