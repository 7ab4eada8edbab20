"""sonar_sync/api.py

All Sonar HTTP calls live here.

Design goals:
  - Keep network I/O separated from traversal and aggregation.
  - The connection probe is a single, strict attempt (errors are raised).
  - Query endpoints treat 404 / undecodable bodies as "nothing found".
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, List, Optional, Union

import requests

from .errors import SonarServerConnectionError
from .queries import ResourceQuery, RuleQuery, ViolationQuery
from .types import Resource, Rule, ServerSettings, Violation

logger = logging.getLogger(__name__)

VERSION_URL = "/api/server/version"
CONNECT_TIMEOUT_SECONDS = 3.0
READ_TIMEOUT_SECONDS = 6.0
DEFAULT_TIMEOUT_SECONDS = 30
USER_AGENT = "SonarQube Community Plugin"

_INVALID_URL_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
)


def get_host_safe(host: Optional[str]) -> str:
    return (host or "").strip().rstrip("/")


def _pretty_cause(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def verify_sonar_connection(target: Union[str, ServerSettings]) -> str:
    """Probe ``<host>/api/server/version`` once and return the body on HTTP 200.

    Raises :class:`SonarServerConnectionError` for malformed URLs, I/O errors
    and any non-200 status. There is no retry.
    """
    host = target.host if isinstance(target, ServerSettings) else target
    url = get_host_safe(host) + VERSION_URL

    try:
        resp = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=(CONNECT_TIMEOUT_SECONDS, READ_TIMEOUT_SECONDS),
            allow_redirects=True,
        )
    except _INVALID_URL_ERRORS as e:
        raise SonarServerConnectionError(f"Invalid url: {host}", url=url, cause=e) from e
    except requests.ConnectionError as e:
        raise SonarServerConnectionError(f"Couldn't connect to url: {url}", url=url, cause=e) from e
    except requests.RequestException as e:
        raise SonarServerConnectionError(
            f"Cannot read data from url: {url}\n\n Cause: \n{_pretty_cause(e)}",
            url=url,
            cause=e,
        ) from e

    if resp.status_code != 200:
        raise SonarServerConnectionError(
            f"ResponseCode: {resp.status_code} Url: {resp.url}",
            url=resp.url,
            status_code=resp.status_code,
        )
    return resp.text


def _as_list(data: Any, key: str) -> List[Any]:
    # Older servers answer with a bare JSON array, newer ones wrap it.
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        return data.get(key) or []
    return []


class RequestsServerClient:
    """:class:`sonar_sync.client.ServerClient` backed by a ``requests.Session``.

    Bound to one host and (optionally) one user/password pair, sent as HTTP
    basic auth. With no user the client is anonymous.
    """

    def __init__(
        self,
        host: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.host = get_host_safe(host)
        self.user = user or None
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})
        if self.user:
            self._session.auth = (self.user, password or "")

    @property
    def is_anonymous(self) -> bool:
        return self.user is None

    def _get_json(self, path: str, params: Optional[dict] = None) -> Any:
        url = f"{self.host}{path}"
        logger.debug("GET %s params=%s", url, params)
        resp = self._session.get(url, params=params, timeout=self.timeout)

        if resp.status_code == 404:
            logger.warning("%s returned 404; treating as empty", url)
            return None
        resp.raise_for_status()

        try:
            return resp.json()
        except ValueError:
            logger.warning("Could not decode JSON from %s; treating as empty", url)
            return None

    def find_resources(self, query: ResourceQuery) -> List[Resource]:
        data = self._get_json(query.path, query.to_params())
        return [Resource.from_json(r) for r in _as_list(data, "resources") if isinstance(r, dict)]

    def find_rules(self, query: RuleQuery) -> List[Rule]:
        data = self._get_json(query.path, query.to_params())
        return [
            Rule.from_json(r, language=query.language)
            for r in _as_list(data, "rules")
            if isinstance(r, dict) and r.get("key")
        ]

    def find_violations(self, query: ViolationQuery) -> List[Violation]:
        data = self._get_json(query.path, query.to_params())
        return [Violation.from_json(v) for v in _as_list(data, "violations") if isinstance(v, dict)]

    def server_version(self) -> Optional[str]:
        url = f"{self.host}{VERSION_URL}"
        resp = self._session.get(url, timeout=self.timeout)
        if not resp.ok:
            logger.warning("Version request failed: HTTP %s %s", resp.status_code, resp.text[:120])
            return None
        return resp.text.strip()
