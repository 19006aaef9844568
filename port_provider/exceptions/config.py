from port_provider.exceptions.base import BasePortProviderException


class ConfigurationError(BasePortProviderException):
    pass
