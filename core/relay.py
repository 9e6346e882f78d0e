# core/relay.py
import json
import logging
from typing import Any, Mapping
import httpx
from model.api import RelayResponse
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)

REDACTED = "***"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def redact_key(url: httpx.URL | str) -> str:
    """Render an upstream URL for logs with the `key` credential masked."""
    u = httpx.URL(str(url))
    if "key" not in u.params:
        return str(u)
    return str(u.copy_set_param("key", REDACTED))


def passthrough(
    status_code: int, text: str, *, empty_as_object: bool = False
) -> RelayResponse:
    """
    Relay the upstream body verbatim when it is JSON, otherwise wrap the raw
    text under `error`. Status is always the upstream status.
    """
    raw = (text or "{}") if empty_as_object else text
    try:
        body: Any = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        body = {"error": text}
    return RelayResponse(status_code=status_code, body=body)


async def send(
    method: str,
    url: str,
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    json_body: Any = None,
) -> httpx.Response:
    """Send one upstream request. Network failures become a 502 AppError."""
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(timeout, connect=5.0), transport=transport
    ) as client:
        request = client.build_request(
            method, url, params=params, headers=headers, json=json_body
        )
        logger.info("upstream %s %s", method, redact_key(request.url))
        try:
            res = await client.send(request)
        except httpx.HTTPError as e:
            logger.warning(
                "upstream %s failed: %s", redact_key(request.url), type(e).__name__
            )
            raise AppError.of(
                ErrorMessage.UPSTREAM_UNREACHABLE, str(e) or None
            ) from e
    logger.info("upstream %s -> %d", redact_key(request.url), res.status_code)
    return res
