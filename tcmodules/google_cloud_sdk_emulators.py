"""Google Cloud SDK emulator images: Bigtable, Datastore, Firestore, Pub/Sub, Spanner."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from tcmodules.core import ContainerPort, Image, WaitFor

HOST = "0.0.0.0"

BIGTABLE_PORT = 8086
"""Port the Bigtable emulator listens on inside the container."""
DATASTORE_PORT = 8081
"""Port the Datastore emulator listens on inside the container."""
FIRESTORE_PORT = 8080
"""Port the Firestore emulator listens on inside the container."""
PUBSUB_PORT = 8085
"""Port the Pub/Sub emulator listens on inside the container."""
SPANNER_PORT = 9010
"""gRPC port the Spanner emulator listens on inside the container."""


class Emulator(str, enum.Enum):
    """Which emulator the SDK image runs."""

    BIGTABLE = "bigtable"
    DATASTORE = "datastore"
    FIRESTORE = "firestore"
    PUBSUB = "pubsub"
    SPANNER = "spanner"


@dataclass(frozen=True)
class CloudSdkCmd:
    """The gcloud command line that starts one emulator.

    The Datastore emulator needs a project; the others take none.
    """

    host: str
    port: int
    emulator: Emulator
    project: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "emulator", Emulator(self.emulator))
        if self.emulator is Emulator.DATASTORE and self.project is None:
            raise ValueError("the datastore emulator needs a project")
        if self.emulator is not Emulator.DATASTORE and self.project is not None:
            raise ValueError(f"the {self.emulator.value} emulator takes no project")

    def __iter__(self) -> Iterator[str]:
        yield from ("gcloud", "beta", "emulators", self.emulator.value, "start")
        if self.project is not None:
            yield "--project"
            yield self.project
        yield "--host-port"
        yield f"{self.host}:{self.port}"


@dataclass(frozen=True)
class CloudSdk(Image):
    """The Google Cloud SDK image running a single emulator."""

    NAME = "google/cloud-sdk"
    TAG = "362.0.0-emulators"

    command: CloudSdkCmd
    ready_condition: WaitFor

    @classmethod
    def _create(
        cls,
        port: int,
        emulator: Emulator,
        ready_condition: WaitFor,
        project: str | None = None,
    ) -> CloudSdk:
        return cls(CloudSdkCmd(HOST, port, emulator, project), ready_condition)

    @classmethod
    def bigtable(cls) -> CloudSdk:
        return cls._create(
            BIGTABLE_PORT,
            Emulator.BIGTABLE,
            WaitFor.message_on_stderr("[bigtable] Cloud Bigtable emulator running on"),
        )

    @classmethod
    def firestore(cls) -> CloudSdk:
        return cls._create(
            FIRESTORE_PORT,
            Emulator.FIRESTORE,
            WaitFor.message_on_stderr("[firestore] Dev App Server is now running"),
        )

    @classmethod
    def datastore(cls, project: str) -> CloudSdk:
        return cls._create(
            DATASTORE_PORT,
            Emulator.DATASTORE,
            WaitFor.message_on_stderr("[datastore] Dev App Server is now running"),
            str(project),
        )

    @classmethod
    def pubsub(cls) -> CloudSdk:
        return cls._create(
            PUBSUB_PORT,
            Emulator.PUBSUB,
            WaitFor.message_on_stderr("[pubsub] INFO: Server started, listening on"),
        )

    @classmethod
    def spanner(cls) -> CloudSdk:
        return cls._create(
            SPANNER_PORT,
            Emulator.SPANNER,
            WaitFor.message_on_stderr("Cloud Spanner emulator running"),
        )

    def ready_conditions(self) -> list[WaitFor]:
        return [self.ready_condition]

    def cmd(self) -> list[str]:
        return list(self.command)

    def expose_ports(self) -> list[ContainerPort]:
        return [ContainerPort.tcp(self.command.port)]