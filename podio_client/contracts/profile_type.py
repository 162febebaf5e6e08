from __future__ import annotations

from enum import Enum
from typing import Any, Type

from podio_client.contracts.base import PodioModel, parse_model
from podio_client.contracts.contacts import Profile, ProfileShort
from podio_client.contracts.users import UserMini


class ProfileType(Enum):
    """Projection of a profile the service can return.

    `key` is the discriminator the service expects in the `type` query
    parameter; `model` is the contract the response is parsed into.
    """

    FULL = ("full", Profile)
    SHORT = ("short", ProfileShort)
    MINI = ("mini", UserMini)

    def __init__(self, key: str, model: Type[PodioModel]) -> None:
        self.key = key
        self.model = model

    def parse(self, data: Any) -> PodioModel:
        return parse_model(self.model, data)
