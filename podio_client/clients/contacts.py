"""
Contact API.

Reads other users' profiles, either whole or as one of the ProfileType
projections.
"""

from __future__ import annotations

from typing import Any, List, Optional, TypeVar

from podio_client.contracts.base import PodioModel
from podio_client.contracts.contacts import Profile
from podio_client.contracts.profile_fields import ProfileField
from podio_client.contracts.profile_type import ProfileType
from podio_client.errors import ResponseValidationError
from podio_client.transport import ResourceClient

T = TypeVar("T")


class ContactAPI:
    def __init__(self, resource: ResourceClient) -> None:
        self.resource = resource

    def get_contact(self, profile_id: int) -> Profile:
        return self.resource.get(f"/contact/{profile_id}/v2", Profile)

    def get_contact_field(self, profile_id: int, field: ProfileField[T, Any]) -> List[T]:
        values = self.resource.get(f"/contact/{profile_id}/{field.name}/v2")
        return [field.parse(value) for value in _as_list(values)]

    def get_contacts(
        self,
        profile_type: ProfileType = ProfileType.FULL,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[PodioModel]:
        """Return contacts of the active user parsed as `profile_type.model`."""
        params = {"type": profile_type.key, "limit": limit, "offset": offset}
        data = self.resource.get("/contact/", params=params)
        return [profile_type.parse(item) for item in _as_list(data)]


def _as_list(data: Any) -> List[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseValidationError("Expected a JSON array", payload=data)
    return data
