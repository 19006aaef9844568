from types import TracebackType
from typing import Type

import httpx

from port_provider.clients.port.authentication import PortAuthentication
from port_provider.clients.port.mixins.blueprints import BlueprintClientMixin
from port_provider.clients.port.mixins.entities import EntityClientMixin
from port_provider.clients.port.mixins.scorecards import ScorecardClientMixin
from port_provider.clients.port.utils import PORT_HTTP_TIMEOUT, PORT_HTTPX_LIMITS
from port_provider.config.settings import ProviderConfiguration
from port_provider.version import __version__


class PortClient(
    EntityClientMixin,
    BlueprintClientMixin,
    ScorecardClientMixin,
):
    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        timeout: float = PORT_HTTP_TIMEOUT,
    ):
        self.api_url = f"{base_url.rstrip('/')}/v1"
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), limits=PORT_HTTPX_LIMITS
        )
        self.auth = PortAuthentication(
            self.client,
            client_id,
            client_secret,
            self.api_url,
            __version__,
        )
        EntityClientMixin.__init__(self, self.auth, self.client)
        BlueprintClientMixin.__init__(self, self.auth, self.client)
        ScorecardClientMixin.__init__(self, self.auth, self.client)

    @classmethod
    def from_config(cls, config: ProviderConfiguration) -> "PortClient":
        return cls(
            str(config.port.base_url),
            config.port.client_id,
            config.port.client_secret,
            timeout=config.client_timeout,
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "PortClient":
        return self

    async def __aexit__(
        self,
        exc_type: Type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
