"""KWOK cluster image: Kubernetes without kubelets."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import ContainerPort, Image, WaitFor

DEFAULT_WAIT_MILLIS = 3000

KWOK_CLUSTER_PORT = ContainerPort.tcp(8080)
"""Port the KWOK cluster API server listens on inside the container."""


@dataclass(frozen=True)
class KwokCluster(Image):
    """A KWOK cluster, configured through environment variables such as KWOK_PROMETHEUS_PORT."""

    NAME = "registry.k8s.io/kwok/cluster"
    TAG = "v0.5.2-k8s.v1.29.2"

    def ready_conditions(self) -> list[WaitFor]:
        return [
            WaitFor.message_on_stdout("Starting to serve on [::]:8080"),
            WaitFor.millis(DEFAULT_WAIT_MILLIS),
        ]

    def expose_ports(self) -> list[ContainerPort]:
        return [KWOK_CLUSTER_PORT]