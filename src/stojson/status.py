"""
Star Trek Online launcher server status check.

Fetches the launcher ``/server_status/`` endpoint, inflates the gzip
payload, and reads the ``server_status`` field: first with the cheap key
extractor, then with the full parser when the extractor cannot find it.
"""

import gzip
import logging
import os
import zlib
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

import httpx

from stojson import ParseError
from stojson import parse_bytes
from stojson.extract import ExtractError
from stojson.extract import extract_json_str

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b\x08"
STATUS_KEY = "server_status"
DEFAULT_HOST = "startreklauncher.crypticstudios.com"
DEFAULT_PATH = "/server_status/"
DEFAULT_TIMEOUT = 10.0
# Bodies reaching this many bytes are rejected while streaming
MAX_RESPONSE_BYTES = 16384

LAUNCHER_HEADERS: Mapping[str, str] = {
    "Accept": "application/json, text/javascript, */*, q=0.01",
    "User-Agent": "Mozilla/4.0 (compatible, CrypticLauncher)",
    "X-Accept-Language-Cryptic": "en-US",
    "X-Cryptic-Affiliate": "appid=9900",
    "X-Cryptic-Version": "3",
    "X-Requested-With": "XMLHttpRequest",
    "Origin": f"http://{DEFAULT_HOST}",
    "Referer": f"http://{DEFAULT_HOST}/launcher",
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-US,en,q=0.9",
}


class ServerStatus(Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StatusReport:
    """Classified status plus the raw ``server_status`` string it came from."""

    status: ServerStatus
    raw: str


class StatusError(Exception):
    """Base of status check failures."""


class StatusFetchError(StatusError):
    """Transport failure or non-success HTTP status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class NoData(StatusError):
    """The launcher answered with an empty body."""


class TooMuchData(StatusError):
    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"response reached {size} bytes, limit is {limit}")


class InvalidGzip(StatusError):
    """The payload carries the gzip magic but does not inflate."""


class StatusUnreadable(StatusError):
    """Neither the extractor nor the parser found a string status."""


@dataclass(frozen=True)
class StatusSettings:
    """
    Endpoint settings for the status check.

    ``from_env`` applies ``STOJSON_HOST`` and ``STOJSON_TIMEOUT`` overrides.
    """

    host: str = DEFAULT_HOST
    path: str = DEFAULT_PATH
    scheme: str = "http"
    timeout: float = DEFAULT_TIMEOUT
    max_response_bytes: int = MAX_RESPONSE_BYTES
    headers: Mapping[str, str] = field(
        default_factory=lambda: dict(LAUNCHER_HEADERS)
    )

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_response_bytes <= 0:
            raise ValueError("max_response_bytes must be positive")

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}{self.path}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StatusSettings":
        env = os.environ if environ is None else environ
        host = env.get("STOJSON_HOST") or DEFAULT_HOST
        raw_timeout = env.get("STOJSON_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(
                f"STOJSON_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from e
        return cls(host=host, timeout=timeout)


def inflate_payload(body: bytes) -> bytes:
    """
    Decompresses the gzip member embedded in ``body``.

    Everything before the gzip magic number is discarded. Bodies without the
    magic, such as ones httpx already decoded, are returned unchanged.
    """
    start = body.find(GZIP_MAGIC)
    if start < 0:
        return body

    try:
        return gzip.decompress(body[start:])
    except (OSError, EOFError, zlib.error) as e:
        raise InvalidGzip(f"cannot inflate gzip payload: {e}") from e


def classify(raw: str) -> ServerStatus:
    match raw.lower():
        case "up":
            return ServerStatus.ONLINE
        case "down":
            return ServerStatus.OFFLINE
        case _:
            return ServerStatus.UNKNOWN


def _status_from_tree(payload: bytes) -> str:
    try:
        document = parse_bytes(payload)
    except ParseError as e:
        raise StatusUnreadable(f"launcher payload is not valid JSON: {e}") from e

    members = document.as_object()
    if members is None:
        raise StatusUnreadable("launcher payload is not a JSON object")

    member = members.get(STATUS_KEY)
    raw = member.as_string() if member is not None else None
    if raw is None:
        raise StatusUnreadable(f"no string {STATUS_KEY!r} in launcher payload")
    return raw


def read_status(payload: bytes) -> StatusReport:
    """Reads and classifies ``server_status`` from an inflated payload."""
    try:
        raw = extract_json_str(payload, STATUS_KEY)
    except ExtractError as e:
        logger.debug("key extraction failed (%s), using full parser", e)
        raw = _status_from_tree(payload)

    return StatusReport(classify(raw), raw)


def _read_capped(response: httpx.Response, limit: int) -> bytes:
    """Reads the body chunk by chunk, stopping once ``limit`` is reached."""
    body = bytearray()
    for chunk in response.iter_bytes():
        body += chunk
        if len(body) >= limit:
            raise TooMuchData(len(body), limit)
    return bytes(body)


def _fetch(client: httpx.Client, settings: StatusSettings) -> StatusReport:
    logger.debug("GET %s", settings.url)
    try:
        with client.stream(
            "GET", settings.url, headers=dict(settings.headers)
        ) as response:
            response.raise_for_status()
            body = _read_capped(response, settings.max_response_bytes)
    except httpx.HTTPStatusError as e:
        code = e.response.status_code
        raise StatusFetchError(f"launcher returned HTTP {code}", code) from e
    except httpx.RequestError as e:
        raise StatusFetchError(f"network error contacting launcher: {e}") from e

    if not body:
        raise NoData("launcher returned an empty body")

    report = read_status(inflate_payload(body))
    logger.info("launcher status %s (%r)", report.status.value, report.raw)
    return report


def check_server_status(
    settings: StatusSettings | None = None, client: httpx.Client | None = None
) -> StatusReport:
    """
    Queries the launcher and classifies its server status.

    A client may be passed in for connection reuse or testing; otherwise a
    short-lived one is created with the configured timeout.

    Raises:
        StatusError: On any transport, size, decompression or format failure
    """
    settings = settings or StatusSettings.from_env()

    if client is None:
        with httpx.Client(timeout=settings.timeout) as owned:
            return _fetch(owned, settings)
    return _fetch(client, settings)
