"""ClickHouse analytics database image."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import ContainerPort, HttpWaitStrategy, Image, WaitFor

CLICKHOUSE_PORT = ContainerPort.tcp(8123)
"""HTTP port the ClickHouse container listens on internally."""


@dataclass(frozen=True)
class ClickHouse(Image):
    """The official ClickHouse server image, ready once its HTTP root answers."""

    NAME = "clickhouse/clickhouse-server"
    TAG = "23.3.8.21-alpine"

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.http(HttpWaitStrategy("/").with_expected_status_code(200))]

    def env_vars(self) -> dict[str, str]:
        return {}

    def expose_ports(self) -> list[ContainerPort]:
        return [CLICKHOUSE_PORT]