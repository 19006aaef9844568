from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from port_provider.core.models import PortBody, PortError
from port_provider.exceptions.clients import PortApplicationError, PortDecodingError

PORT_HTTP_MAX_CONNECTIONS_LIMIT = 20
PORT_HTTP_MAX_KEEP_ALIVE_CONNECTIONS = 10
PORT_HTTP_TIMEOUT = 60.0

PORT_HTTPX_LIMITS = httpx.Limits(
    max_connections=PORT_HTTP_MAX_CONNECTIONS_LIMIT,
    max_keepalive_connections=PORT_HTTP_MAX_KEEP_ALIVE_CONNECTIONS,
)


def handle_port_status_code(
    response: httpx.Response, should_raise: bool = True, should_log: bool = True
) -> None:
    if should_log and response.is_error:
        error_message = f"Request failed with status code: {response.status_code}, Error: {response.text}"
        if response.status_code >= 500 and response.headers.get("x-trace-id"):
            logger.error(
                "{}", error_message, trace_id=response.headers.get("x-trace-id")
            )
        else:
            logger.error("{}", error_message)
    if should_raise:
        response.raise_for_status()


def decode_response(response: httpx.Response, action: str) -> dict[str, Any]:
    # Invalid JSON and bodies that are not utf-8 both raise ValueError
    try:
        data = response.json()
    except ValueError as e:
        raise PortDecodingError(action, response.text) from e
    if not isinstance(data, dict):
        raise PortDecodingError(action, response.text)
    return data


def parse_port_body(response: httpx.Response, action: str) -> PortBody:
    """
    Turn a Port response into its envelope.

    Transport errors never reach this point, they are raised by httpx itself.
    A body that is not a JSON envelope of the expected shape raises PortDecodingError,
    and `ok: false` raises PortApplicationError carrying the structured error detail,
    whatever the status code was.
    """
    handle_port_status_code(response, should_raise=False)
    data = decode_response(response, action)
    try:
        if data.get("ok"):
            return PortBody.parse_obj(data)
        port_error = PortError.parse_obj(data)
    except ValidationError as e:
        raise PortDecodingError(action, response.text) from e
    raise PortApplicationError(action, response.text, port_error, response.status_code)
