"""Building blocks for describing container images and how to wait for them."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import ClassVar, Union

_MAX_PORT = 0xFFFF


class ContainerError(Exception):
    """Raised when a container or its state cannot satisfy a request."""


class Protocol(str, enum.Enum):
    """Transport protocol of a container port."""

    TCP = "tcp"
    UDP = "udp"


@dataclass(frozen=True, order=True)
class ContainerPort:
    """A port inside a container together with its protocol."""

    port: int
    protocol: Protocol = Protocol.TCP

    def __post_init__(self) -> None:
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise TypeError(f"port must be an int, got {self.port!r}")
        if not 0 <= self.port <= _MAX_PORT:
            raise ValueError(f"port {self.port} is outside 0..{_MAX_PORT}")

    @classmethod
    def tcp(cls, port: int) -> ContainerPort:
        return cls(port, Protocol.TCP)

    @classmethod
    def udp(cls, port: int) -> ContainerPort:
        return cls(port, Protocol.UDP)

    def __str__(self) -> str:
        return f"{self.port}/{self.protocol.value}"


PortLike = Union[int, ContainerPort]


def _as_port(port: PortLike) -> ContainerPort:
    """Treat a bare integer as a TCP port."""
    if isinstance(port, ContainerPort):
        return port
    if isinstance(port, int) and not isinstance(port, bool):
        return ContainerPort.tcp(port)
    raise TypeError(f"expected an int or ContainerPort, got {port!r}")


@dataclass(frozen=True)
class HttpWaitStrategy:
    """Readiness check that polls an HTTP path on the container."""

    path: str
    expected_status_code: int | None = None
    body: bytes | None = None

    def with_expected_status_code(self, code: int) -> HttpWaitStrategy:
        return replace(self, expected_status_code=code)

    def with_body(self, body: bytes | str) -> HttpWaitStrategy:
        if isinstance(body, str):
            body = body.encode("utf-8")
        return replace(self, body=bytes(body))


class WaitKind(enum.Enum):
    """What a readiness condition waits for."""

    STDOUT = "stdout"
    STDERR = "stderr"
    DURATION = "duration"
    HTTP = "http"


@dataclass(frozen=True)
class WaitFor:
    """A condition that must hold before a container counts as ready."""

    kind: WaitKind
    value: str | timedelta | HttpWaitStrategy

    @classmethod
    def message_on_stdout(cls, message: str) -> WaitFor:
        return cls(WaitKind.STDOUT, str(message))

    @classmethod
    def message_on_stderr(cls, message: str) -> WaitFor:
        return cls(WaitKind.STDERR, str(message))

    @classmethod
    def millis(cls, millis: int) -> WaitFor:
        if millis < 0:
            raise ValueError("a wait duration cannot be negative")
        return cls(WaitKind.DURATION, timedelta(milliseconds=millis))

    @classmethod
    def http(cls, strategy: HttpWaitStrategy) -> WaitFor:
        return cls(WaitKind.HTTP, strategy)


@dataclass(frozen=True)
class CmdWaitFor:
    """A condition on the output of a command executed in a container."""

    kind: WaitKind
    message: str

    @classmethod
    def message_on_stdout(cls, message: str) -> CmdWaitFor:
        return cls(WaitKind.STDOUT, str(message))

    @classmethod
    def message_on_stderr(cls, message: str) -> CmdWaitFor:
        return cls(WaitKind.STDERR, str(message))


@dataclass(frozen=True)
class ExecCommand:
    """A command to run inside a started container, with its readiness checks."""

    cmd: tuple[str, ...]
    cmd_ready_condition: CmdWaitFor | None = None
    container_ready_conditions: tuple[WaitFor, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "cmd", tuple(self.cmd))
        object.__setattr__(
            self, "container_ready_conditions", tuple(self.container_ready_conditions)
        )

    def with_cmd_ready_condition(self, condition: CmdWaitFor) -> ExecCommand:
        return replace(self, cmd_ready_condition=condition)

    def with_container_ready_conditions(
        self, conditions: Iterable[WaitFor]
    ) -> ExecCommand:
        return replace(self, container_ready_conditions=tuple(conditions))


class MountKind(enum.Enum):
    BIND = "bind"
    VOLUME = "volume"
    TMPFS = "tmpfs"


@dataclass(frozen=True)
class Mount:
    """A filesystem mount into a container."""

    kind: MountKind
    source: str | None
    target: str

    @classmethod
    def bind_mount(cls, source: str, target: str) -> Mount:
        return cls(MountKind.BIND, str(source), str(target))


@dataclass(frozen=True)
class ContainerState:
    """What is known about a running container: its host port bindings."""

    ports: Mapping[ContainerPort, int] = field(default_factory=dict)

    def host_port_ipv4(self, port: PortLike) -> int:
        container_port = _as_port(port)
        try:
            return self.ports[container_port]
        except KeyError:
            raise ContainerError(
                f"container port {container_port} is not mapped to a host port"
            ) from None


@dataclass(frozen=True)
class ContainerRequest:
    """An image together with the run options layered over it."""

    image: Image
    tag_override: str | None = None
    env_overrides: Mapping[str, str] = field(default_factory=dict)
    mapped_ports: tuple[tuple[int, ContainerPort], ...] = ()
    privileged: bool = False
    userns_mode: str | None = None

    @property
    def name(self) -> str:
        return self.image.name

    @property
    def tag(self) -> str:
        return self.tag_override if self.tag_override is not None else self.image.tag

    def with_env_var(self, name: str, value: str) -> ContainerRequest:
        return replace(self, env_overrides={**self.env_overrides, str(name): str(value)})

    def with_tag(self, tag: str) -> ContainerRequest:
        return replace(self, tag_override=str(tag))

    def with_mapped_port(
        self, host_port: int, container_port: PortLike
    ) -> ContainerRequest:
        if not 0 <= host_port <= _MAX_PORT:
            raise ValueError(f"host port {host_port} is outside 0..{_MAX_PORT}")
        mapping = (host_port, _as_port(container_port))
        return replace(self, mapped_ports=(*self.mapped_ports, mapping))

    def with_privileged(self, privileged: bool) -> ContainerRequest:
        return replace(self, privileged=bool(privileged))

    def with_userns_mode(self, mode: str) -> ContainerRequest:
        return replace(self, userns_mode=str(mode))

    def env_vars(self) -> dict[str, str]:
        """The image's environment with this request's variables applied on top."""
        return {**self.image.env_vars(), **self.env_overrides}


class Image:
    """Description of a container image; subclasses set NAME and TAG."""

    NAME: ClassVar[str]
    TAG: ClassVar[str]

    @property
    def name(self) -> str:
        return type(self).NAME

    @property
    def tag(self) -> str:
        return type(self).TAG

    def ready_conditions(self) -> list[WaitFor]:
        return []

    def env_vars(self) -> dict[str, str]:
        return {}

    def cmd(self) -> list[str]:
        return []

    def entrypoint(self) -> str | None:
        return None

    def expose_ports(self) -> list[ContainerPort]:
        return []

    def mounts(self) -> list[Mount]:
        return []

    def exec_after_start(self, state: ContainerState) -> list[ExecCommand]:
        return []

    def with_env_var(self, name: str, value: str) -> ContainerRequest:
        return ContainerRequest(self).with_env_var(name, value)

    def with_tag(self, tag: str) -> ContainerRequest:
        return ContainerRequest(self).with_tag(tag)

    def with_mapped_port(
        self, host_port: int, container_port: PortLike
    ) -> ContainerRequest:
        return ContainerRequest(self).with_mapped_port(host_port, container_port)

    def with_privileged(self, privileged: bool) -> ContainerRequest:
        return ContainerRequest(self).with_privileged(privileged)

    def with_userns_mode(self, mode: str) -> ContainerRequest:
        return ContainerRequest(self).with_userns_mode(mode)