from typing import Literal

from pydantic import AnyHttpUrl, Extra, parse_obj_as
from pydantic.fields import Field

from port_provider.config.base import BaseProviderModel, BaseProviderSettings

LogLevelType = Literal["ERROR", "WARNING", "INFO", "DEBUG", "CRITICAL"]


class PortSettings(BaseProviderModel, extra=Extra.allow):
    client_id: str = Field(..., sensitive=True)
    client_secret: str = Field(..., sensitive=True)
    base_url: AnyHttpUrl = parse_obj_as(AnyHttpUrl, "https://api.getport.io")


class ProviderConfiguration(BaseProviderSettings, extra=Extra.allow):
    port: PortSettings
    log_level: LogLevelType = "INFO"
    client_timeout: int = 60
