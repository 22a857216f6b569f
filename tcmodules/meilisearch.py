"""Meilisearch search engine image."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from tcmodules.core import ContainerPort, HttpWaitStrategy, Image, WaitFor

MEILISEARCH_PORT = ContainerPort.tcp(7700)
"""Port Meilisearch listens on inside the container."""


def _parse_member(enum_cls, value: str):
    for member in enum_cls:
        if member.value == value:
            return member
    raise ValueError(f"{value!r} is not a valid {enum_cls.__name__}")


class Environment(enum.Enum):
    """Environment a Meilisearch instance runs in."""

    PRODUCTION = "production"
    """Requires a master key and disables the dashboard."""
    DEVELOPMENT = "development"
    """Allows access without authentication and enables the dashboard."""

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, value: str) -> Environment:
        """Parse the exact text form of a member."""
        return _parse_member(cls, value)


class LogLevel(enum.Enum):
    """Log level of a Meilisearch instance."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"
    OFF = "OFF"

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, value: str) -> LogLevel:
        """Parse the exact text form of a member."""
        return _parse_member(cls, value)


@dataclass(frozen=True)
class Meilisearch(Image):
    """Meilisearch in development mode, with no master key and analytics off."""

    NAME = "getmeili/meilisearch"
    TAG = "v1.8.3"

    master_key: str | None = None
    analytics: bool = False
    environment: Environment | None = None
    log_level: LogLevel | None = None

    def with_master_key(self, master_key: str) -> Meilisearch:
        return replace(self, master_key=str(master_key))

    def with_analytics(self, enabled: bool) -> Meilisearch:
        return replace(self, analytics=bool(enabled))

    def with_environment(self, environment: Environment) -> Meilisearch:
        return replace(self, environment=Environment(environment))

    def with_log_level(self, level: LogLevel) -> Meilisearch:
        return replace(self, log_level=LogLevel(level))

    def ready_conditions(self) -> list[WaitFor]:
        # Logging can be switched off entirely, so poll the health endpoint.
        strategy = (
            HttpWaitStrategy("/health")
            .with_expected_status_code(200)
            .with_body(b'{ "status": "available" }')
        )
        return [WaitFor.http(strategy)]

    def env_vars(self) -> dict[str, str]:
        env: dict[str, str] = {}
        if not self.analytics:
            env["MEILI_NO_ANALYTICS"] = "true"
        if self.master_key is not None:
            env["MEILI_MASTER_KEY"] = self.master_key
        if self.environment is not None:
            env["MEILI_ENV"] = str(self.environment)
        if self.log_level is not None:
            env["MEILI_LOG_LEVEL"] = str(self.log_level)
        return env

    def expose_ports(self) -> list[ContainerPort]:
        return [MEILISEARCH_PORT]