from typing import TYPE_CHECKING

from port_provider.exceptions.base import BasePortProviderException

if TYPE_CHECKING:
    from port_provider.core.models import PortError


class PortClientError(BasePortProviderException):
    pass


class PortDecodingError(PortClientError):
    def __init__(self, action: str, raw_body: str):
        self.raw_body = raw_body
        super().__init__(f"failed to {action}, could not decode response: {raw_body}")


class PortApplicationError(PortClientError):
    """
    Raised when Port answers with `ok: false`, whatever the HTTP status code was.

    The raw response body is part of the message, the structured error detail is
    kept on `port_error` for callers that need to inspect it (e.g. a 404 on read).
    """

    def __init__(
        self,
        action: str,
        raw_body: str,
        port_error: "PortError",
        status_code: int,
    ):
        self.raw_body = raw_body
        self.port_error = port_error
        self.status_code = status_code
        super().__init__(f"failed to {action}, got: {raw_body}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
