"""K3s lightweight Kubernetes image."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from pathlib import Path

from tcmodules.core import ContainerError, ContainerPort, Image, Mount, WaitFor

TRAEFIK_HTTP = ContainerPort.tcp(80)
"""Port of the bundled traefik ingress inside the container."""
KUBE_SECURE_PORT = ContainerPort.tcp(6443)
"""Port of the Kubernetes API inside the container."""
RANCHER_WEBHOOK_PORT = ContainerPort.tcp(8443)
"""Port of the Rancher webhook inside the container."""

_CONF_TARGET = "/etc/rancher/k3s/"
_KUBECONFIG_FILE = "k3s.yaml"


@dataclass(frozen=True)
class K3sCmd:
    """The k3s server command line."""

    snapshotter: str = "native"

    def with_snapshotter(self, snapshotter: str) -> K3sCmd:
        return replace(self, snapshotter=str(snapshotter))

    def __iter__(self) -> Iterator[str]:
        yield "server"
        yield f"--snapshotter={self.snapshotter}"


@dataclass(frozen=True)
class K3s(Image):
    """A single-node K3s cluster exposing the Kubernetes API on KUBE_SECURE_PORT."""

    NAME = "rancher/k3s"
    TAG = "v1.28.8-k3s1"

    conf_mount: Mount | None = None
    command: K3sCmd = field(default_factory=K3sCmd)

    def with_conf_mount(self, conf_mount_path: str | os.PathLike[str]) -> K3s:
        """Bind a host directory to the k3s config directory so the kubeconfig is readable."""
        return replace(
            self, conf_mount=Mount.bind_mount(os.fspath(conf_mount_path), _CONF_TARGET)
        )

    def read_kube_config(self) -> str:
        """Read the kubeconfig that k3s wrote into the mounted directory."""
        if self.conf_mount is None or self.conf_mount.source is None:
            raise ContainerError("K3s conf dir is not mounted")
        return (Path(self.conf_mount.source) / _KUBECONFIG_FILE).read_text()

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stderr("Node controller sync successful")]

    def env_vars(self) -> dict[str, str]:
        if self.conf_mount is None:
            return {}
        return {"K3S_KUBECONFIG_MODE": "644"}

    def mounts(self) -> list[Mount]:
        return [] if self.conf_mount is None else [self.conf_mount]

    def cmd(self) -> list[str]:
        return list(self.command)

    def expose_ports(self) -> list[ContainerPort]:
        return [KUBE_SECURE_PORT, RANCHER_WEBHOOK_PORT, TRAEFIK_HTTP]