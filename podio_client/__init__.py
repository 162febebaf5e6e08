"""
Python client for the Podio user and contact APIs.

Layout:
- contracts/: request/response models and profile field descriptors
- clients/: API classes, one method per endpoint
- transport.py: the single place where HTTP requests are made
- config.py: ClientConfig loading (YAML + PODIO_* environment variables)

Build a PodioClient, or wire UserAPI/ContactAPI to your own ResourceClient.
"""

__version__ = "0.1.0"

from podio_client.client import PodioClient  # noqa: E402
from podio_client.clients.contacts import ContactAPI  # noqa: E402
from podio_client.clients.users import UserAPI  # noqa: E402
from podio_client.config import ClientConfig, load_client_config  # noqa: E402
from podio_client.contracts.contacts import (  # noqa: E402
    Profile,
    ProfileFieldValues,
    ProfileShort,
    ProfileUpdate,
)
from podio_client.contracts.profile_fields import ProfileField  # noqa: E402
from podio_client.contracts.profile_type import ProfileType  # noqa: E402
from podio_client.contracts.users import (  # noqa: E402
    PropertyValue,
    User,
    UserMini,
    UserStatus,
    UserUpdate,
)
from podio_client.errors import (  # noqa: E402
    InvalidArgumentError,
    NotFound,
    PodioError,
    RemoteError,
    ResponseValidationError,
    Unauthorized,
)
from podio_client.transport import ResourceClient  # noqa: E402

__all__ = [
    "PodioClient", "ResourceClient", "ClientConfig", "load_client_config",
    # apis
    "UserAPI", "ContactAPI",
    # contracts
    "Profile", "ProfileShort", "ProfileUpdate", "ProfileFieldValues",
    "ProfileField", "ProfileType",
    "User", "UserMini", "UserStatus", "UserUpdate", "PropertyValue",
    # errors
    "PodioError", "InvalidArgumentError", "RemoteError", "NotFound",
    "Unauthorized", "ResponseValidationError",
]
