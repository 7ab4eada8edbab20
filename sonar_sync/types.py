"""sonar_sync/types.py

Small shared data structures for the Sonar web-service API.

Wire types (Resource, Rule, Violation) are built from the server's JSON with
``from_json``. Missing fields become ``None`` rather than raising; the server
omits keys freely depending on version and query.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class SeverityLevel(str, Enum):
    BLOCKER = "BLOCKER"
    CRITICAL = "CRITICAL"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    INFO = "INFO"


ALL_SEVERITIES = tuple(s.value for s in SeverityLevel)


class HighlightType(str, Enum):
    """Local presentation category for a reported issue."""

    ERROR = "ERROR"
    GENERIC_ERROR_OR_WARNING = "GENERIC_ERROR_OR_WARNING"
    WEAK_WARNING = "WEAK_WARNING"


# Sonar qualifiers
QUALIFIER_PROJECT = "TRK"
QUALIFIER_MODULE = "BRC"


@dataclass
class ServerSettings:
    """Connection settings for one configured Sonar resource.

    ``password`` is only populated for the duration of client construction;
    :class:`sonar_sync.client.ServerClientFactory` clears it afterwards.
    """

    host: str
    user: Optional[str] = None
    password: Optional[str] = None
    anonymous: bool = False
    resource: str = ""

    def __repr__(self) -> str:
        # Never leak a live password through logs or tracebacks.
        pw = "***" if self.password else None
        return (
            f"ServerSettings(host={self.host!r}, user={self.user!r}, password={pw!r}, "
            f"anonymous={self.anonymous!r}, resource={self.resource!r})"
        )


@dataclass(frozen=True)
class Resource:
    id: Optional[int]
    key: Optional[str] = None
    name: Optional[str] = None
    qualifier: Optional[str] = None
    language: Optional[str] = None

    @property
    def is_project(self) -> bool:
        return self.qualifier == QUALIFIER_PROJECT

    @property
    def is_module(self) -> bool:
        return self.qualifier == QUALIFIER_MODULE

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Resource":
        return cls(
            id=data.get("id"),
            key=data.get("key"),
            name=data.get("name"),
            qualifier=data.get("qualifier"),
            language=data.get("lang") or data.get("language"),
        )


@dataclass(frozen=True)
class Rule:
    key: str
    language: Optional[str] = None
    title: Optional[str] = None
    plugin: Optional[str] = None
    description: Optional[str] = None
    severity: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any], language: Optional[str] = None) -> "Rule":
        # /api/rules does not echo the language back; the caller knows it.
        return cls(
            key=data.get("key") or "",
            language=data.get("language") or language,
            title=data.get("title") or data.get("name"),
            plugin=data.get("plugin"),
            description=data.get("description"),
            severity=data.get("priority") or data.get("severity"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "language": self.language,
            "title": self.title,
            "plugin": self.plugin,
            "description": self.description,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class Violation:
    id: Optional[int]
    message: Optional[str] = None
    line: Optional[int] = None
    severity: Optional[str] = None
    rule_key: Optional[str] = None
    rule_name: Optional[str] = None
    resource_key: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Violation":
        rule = data.get("rule") or {}
        resource = data.get("resource") or {}
        return cls(
            id=data.get("id"),
            message=data.get("message"),
            line=data.get("line"),
            severity=data.get("priority") or data.get("severity"),
            rule_key=rule.get("key"),
            rule_name=rule.get("name"),
            resource_key=resource.get("key"),
            created_at=data.get("createdAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "line": self.line,
            "severity": self.severity,
            "rule_key": self.rule_key,
            "rule_name": self.rule_name,
            "resource_key": self.resource_key,
            "created_at": self.created_at,
        }


@dataclass
class SyncResult:
    violations_count: int = 0
    rules_count: int = 0
