"""
User API.

Operations on the active user: account data, status, own profile and
per-client boolean properties. Every method performs exactly one request
through ResourceClient.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, TypeVar, Union
from urllib.parse import quote

from podio_client.contracts.contacts import Profile, ProfileFieldValues, ProfileUpdate
from podio_client.contracts.profile_fields import ProfileField
from podio_client.contracts.users import (
    ProfileFieldMultiValue,
    ProfileFieldSingleValue,
    PropertyValue,
    User,
    UserStatus,
    UserUpdate,
)
from podio_client.errors import InvalidArgumentError, ResponseValidationError
from podio_client.transport import ResourceClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserAPI:
    def __init__(self, resource: ResourceClient) -> None:
        self.resource = resource

    def update_user(self, update: UserUpdate) -> None:
        """
        Update the active user. The old and new password can be left out, in
        which case the password is not changed. If the mail is changed, the old
        password has to be supplied as well.
        """
        self.resource.put("/user/", update)

    def get_status(self) -> UserStatus:
        """Current status for the user: user data, profile and notification data."""
        return self.resource.get("/user/status", UserStatus)

    def get_profile(self) -> Profile:
        return self.resource.get("/user/profile/", Profile)

    def get_profile_field(self, field: ProfileField[T, Any]) -> List[T]:
        """
        Return the values of one profile field of the active user.

        The service always answers with a list, also for single-valued fields.
        """
        values = self.resource.get(_profile_field_path(field))
        if values is None:
            return []
        if not isinstance(values, list):
            raise ResponseValidationError(
                f"Expected a list of values for profile field '{field.name}'",
                payload=values,
            )
        return [field.parse(value) for value in values]

    def update_profile(self, update: Union[ProfileUpdate, ProfileFieldValues]) -> None:
        """
        Update the profile of the active user.

        With a ProfileUpdate all fields are replaced and anything left out is
        cleared. With ProfileFieldValues only the fields set on it change.
        """
        if not isinstance(update, (ProfileUpdate, ProfileFieldValues)):
            raise InvalidArgumentError(
                f"Expected ProfileUpdate or ProfileFieldValues, got {type(update).__name__}"
            )
        self.resource.put("/user/profile/", update)

    def update_profile_field(self, field: ProfileField[T, Any], value: T) -> None:
        """Set one value on a profile field; multi-valued fields get a one-element list."""
        if isinstance(value, (list, tuple)):
            raise InvalidArgumentError(
                f"Field '{field.name}' takes one value here; use update_profile_field_values for many"
            )
        if field.is_single():
            body: Any = ProfileFieldSingleValue(value=field.format(value))
        else:
            body = ProfileFieldMultiValue(values=[field.format(value)])
        logger.debug("Updating profile field %s", field.name)
        self.resource.put(_profile_field_path(field), body)

    def update_profile_field_values(self, field: ProfileField[T, Any], values: Iterable[T]) -> None:
        """Replace all values of a multi-valued profile field."""
        if field.is_single():
            raise InvalidArgumentError(f"Field '{field.name}' is only valid for a single value")
        body = ProfileFieldMultiValue(values=[field.format(v) for v in values])
        logger.debug("Updating profile field %s with %d values", field.name, len(body.values))
        self.resource.put(_profile_field_path(field), body)

    def get_user(self) -> User:
        return self.resource.get("/user/", User)

    def get_user_by_mail(self, mail: str) -> User:
        return self.resource.get(f"/user/{quote(mail, safe='@')}", User)

    # -- properties --
    # Properties are scoped to the active user and the auth client in use.

    def get_property(self, key: str) -> bool:
        return self.resource.get(_property_path(key), PropertyValue).value

    def set_property(self, key: str, value: bool) -> None:
        self.resource.put(_property_path(key), PropertyValue(value=value))

    def delete_property(self, key: str) -> None:
        self.resource.delete(_property_path(key))


def _profile_field_path(field: ProfileField[Any, Any]) -> str:
    return f"/user/profile/{field.name}"


def _property_path(key: str) -> str:
    return f"/user/property/{quote(key, safe='')}"
