"""sonar_sync/client.py

The opaque server client capability and the factory that builds it.

Traversal, violation fetching and rule aggregation only talk to a
:class:`ServerClient`. Production code gets a
:class:`sonar_sync.api.RequestsServerClient`; tests hand in fakes that return
canned lists.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from .api import RequestsServerClient, get_host_safe
from .config import env_password_loader
from .queries import ResourceQuery, RuleQuery, ViolationQuery
from .types import Resource, Rule, ServerSettings, Violation

logger = logging.getLogger(__name__)

PasswordLoader = Callable[[ServerSettings], None]
ClientConstructor = Callable[[str, Optional[str], Optional[str]], "ServerClient"]


class ServerClient(Protocol):
    def find_resources(self, query: ResourceQuery) -> List[Resource]: ...

    def find_rules(self, query: RuleQuery) -> List[Rule]: ...

    def find_violations(self, query: ViolationQuery) -> List[Violation]: ...

    def server_version(self) -> Optional[str]: ...


def create_client(
    host: str,
    user: Optional[str] = None,
    password: Optional[str] = None,
) -> ServerClient:
    """Build a requests-backed client; a blank user means anonymous."""
    host = get_host_safe(host)
    if not (user or "").strip():
        return RequestsServerClient(host)
    return RequestsServerClient(host, user, password)


class ServerClientFactory:
    """Builds one client per operation from :class:`ServerSettings`.

    For non-anonymous settings the password loader fills ``settings.password``
    right before construction, and the field is reset to ``None`` as soon as
    the client exists (or construction failed). Callers must not expect the
    password to survive :meth:`build`.
    """

    def __init__(
        self,
        password_loader: Optional[PasswordLoader] = env_password_loader,
        constructor: ClientConstructor = create_client,
    ) -> None:
        self.password_loader = password_loader
        self.constructor = constructor

    def build(self, settings: ServerSettings) -> ServerClient:
        host = get_host_safe(settings.host)

        try:
            if settings.anonymous or not (settings.user or "").strip():
                logger.debug("Building anonymous client for %s", host)
                return self.constructor(host, None, None)

            if self.password_loader is not None:
                self.password_loader(settings)
            logger.debug("Building client for %s as %s", host, settings.user)
            return self.constructor(host, settings.user, settings.password)
        finally:
            settings.password = None
