from __future__ import annotations

from typing import Optional

import httpx

from podio_client.clients.contacts import ContactAPI
from podio_client.clients.users import UserAPI
from podio_client.config import ClientConfig, load_client_config
from podio_client.transport import ResourceClient


class PodioClient:
    """Entry point wiring the API classes to one transport.

    Usage:
        with PodioClient() as podio:
            profile = podio.users.get_profile()
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or load_client_config()
        self.resource = ResourceClient.from_config(self.config, http_client=http_client)
        self.users = UserAPI(self.resource)
        self.contacts = ContactAPI(self.resource)

    def close(self) -> None:
        self.resource.close()

    def __enter__(self) -> "PodioClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
