"""
User contracts and the small request envelopes used by the user endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from podio_client.contracts.base import PodioModel
from podio_client.contracts.contacts import Profile


class UserMail(PodioModel):
    mail: str
    verified: bool = False
    primary: bool = False


class User(PodioModel):
    user_id: int
    mail: Optional[str] = None
    status: Optional[str] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    flags: List[str] = Field(default_factory=list)
    mails: List[UserMail] = Field(default_factory=list)
    created_on: Optional[datetime] = None


class UserMini(PodioModel):
    user_id: int
    name: Optional[str] = None
    avatar: Optional[int] = None
    link: Optional[str] = None


class UserStatus(PodioModel):
    user: User
    profile: Profile
    properties: Dict[str, Any] = Field(default_factory=dict)
    inbox_new: int = 0
    calendar_code: Optional[str] = None
    mailbox: Optional[str] = None
    task_mail: Optional[str] = None
    flags: List[str] = Field(default_factory=list)


class UserUpdate(PodioModel):
    """Changes to the active user.

    Passwords may be left out, in which case the password is unchanged.
    Changing the mail requires old_password; the service checks this.
    """

    mail: Optional[str] = None
    old_password: Optional[str] = None
    new_password: Optional[str] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class PropertyValue(PodioModel):
    value: bool


class ProfileFieldSingleValue(PodioModel):
    value: Any


class ProfileFieldMultiValue(PodioModel):
    values: List[Any]
