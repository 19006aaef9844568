class BasePortProviderException(Exception):
    pass
