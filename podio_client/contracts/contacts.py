"""
Contact/profile contracts.

Profile and ProfileShort are two projections of the same profile entity
as returned by the service. ProfileUpdate replaces a whole profile (fields
left empty are cleared); ProfileFieldValues patches only the fields set on
it.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import Field

from podio_client.contracts.base import PodioModel
from podio_client.contracts.profile_fields import ProfileField
from podio_client.errors import InvalidArgumentError


class _EditableProfile(PodioModel):
    name: Optional[str] = None
    avatar: Optional[int] = None
    birthdate: Optional[date] = None
    organization: Optional[str] = None
    skype: Optional[str] = None
    about: Optional[str] = None
    zip: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    title: List[str] = Field(default_factory=list)
    location: List[str] = Field(default_factory=list)
    address: List[str] = Field(default_factory=list)
    phone: List[str] = Field(default_factory=list)
    mail: List[str] = Field(default_factory=list)
    url: List[str] = Field(default_factory=list)
    skill: List[str] = Field(default_factory=list)


class Profile(_EditableProfile):
    profile_id: int
    user_id: Optional[int] = None
    last_seen_on: Optional[datetime] = None


class ProfileShort(PodioModel):
    profile_id: int
    user_id: Optional[int] = None
    name: Optional[str] = None
    avatar: Optional[int] = None
    organization: Optional[str] = None
    title: List[str] = Field(default_factory=list)
    mail: List[str] = Field(default_factory=list)
    phone: List[str] = Field(default_factory=list)


class ProfileUpdate(_EditableProfile):
    """Full profile replacement; every field is sent, unset ones as null/[]."""


class ProfileFieldValues(PodioModel):
    """Sparse profile patch keyed by field wire name."""

    values: Dict[str, Any] = Field(default_factory=dict)

    def set_value(self, field: ProfileField[Any, Any], value: Any) -> "ProfileFieldValues":
        formatted = field.format(value)
        self.values[field.name] = formatted if field.is_single() else [formatted]
        return self

    def set_values(self, field: ProfileField[Any, Any], values: Iterable[Any]) -> "ProfileFieldValues":
        if field.is_single():
            raise InvalidArgumentError(f"Field '{field.name}' only accepts a single value")
        self.values[field.name] = [field.format(v) for v in values]
        return self

    def get_value(self, field: ProfileField[Any, Any]) -> Any:
        return self.values.get(field.name)

    def to_payload(self) -> Dict[str, Any]:
        return dict(self.values)
