"""
Profile field descriptors.

A ProfileField[T, R] names one addressable attribute of a contact profile.
R is the value type carried on the wire, T the type callers work with;
`parse` turns R into T and `format` turns T back into R. The `single` flag
decides whether updates are sent as {"value": ...} or {"values": [...]}.

Fields are defined once below and shared; they hold no state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, Generic, List, TypeVar

from podio_client.errors import InvalidArgumentError

T = TypeVar("T")
R = TypeVar("R")


def _identity(value: Any) -> Any:
    return value


def _parse_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _format_date(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class ProfileField(Generic[T, R]):
    name: str
    single: bool
    parser: Callable[[R], T] = field(default=_identity, repr=False, compare=False)
    formatter: Callable[[T], R] = field(default=_identity, repr=False, compare=False)

    def is_single(self) -> bool:
        return self.single

    def parse(self, value: R) -> T:
        return self.parser(value)

    def format(self, value: T) -> R:
        return self.formatter(value)

    @classmethod
    def by_name(cls, name: str) -> "ProfileField[Any, Any]":
        return field_by_name(name)


NAME: ProfileField[str, str] = ProfileField("name", True)
AVATAR: ProfileField[int, int] = ProfileField("avatar", True, int, int)
BIRTHDATE: ProfileField[date, str] = ProfileField("birthdate", True, _parse_date, _format_date)
ORGANIZATION: ProfileField[str, str] = ProfileField("organization", True)
SKYPE: ProfileField[str, str] = ProfileField("skype", True)
ABOUT: ProfileField[str, str] = ProfileField("about", True)
ZIP: ProfileField[str, str] = ProfileField("zip", True)
CITY: ProfileField[str, str] = ProfileField("city", True)
STATE: ProfileField[str, str] = ProfileField("state", True)
COUNTRY: ProfileField[str, str] = ProfileField("country", True)
LINKEDIN: ProfileField[str, str] = ProfileField("linkedin", True)
TWITTER: ProfileField[str, str] = ProfileField("twitter", True)

TITLE: ProfileField[str, str] = ProfileField("title", False)
LOCATION: ProfileField[str, str] = ProfileField("location", False)
ADDRESS: ProfileField[str, str] = ProfileField("address", False)
PHONE: ProfileField[str, str] = ProfileField("phone", False)
MAIL: ProfileField[str, str] = ProfileField("mail", False)
URL: ProfileField[str, str] = ProfileField("url", False)
SKILL: ProfileField[str, str] = ProfileField("skill", False)

ALL_FIELDS: List[ProfileField[Any, Any]] = [
    NAME, AVATAR, BIRTHDATE, ORGANIZATION, SKYPE, ABOUT, ZIP, CITY, STATE,
    COUNTRY, LINKEDIN, TWITTER, TITLE, LOCATION, ADDRESS, PHONE, MAIL, URL,
    SKILL,
]

_FIELDS_BY_NAME: Dict[str, ProfileField[Any, Any]] = {f.name: f for f in ALL_FIELDS}


def field_by_name(name: str) -> ProfileField[Any, Any]:
    """Return the shared field descriptor for a wire name."""
    try:
        return _FIELDS_BY_NAME[name]
    except KeyError:
        raise InvalidArgumentError(f"Unknown profile field '{name}'") from None
