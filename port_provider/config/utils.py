from pydantic import ValidationError

from port_provider.config.settings import ProviderConfiguration
from port_provider.exceptions.config import ConfigurationError


def load_provider_config() -> ProviderConfiguration:
    try:
        return ProviderConfiguration()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid provider configuration: {e}") from e
