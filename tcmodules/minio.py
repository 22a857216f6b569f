"""MinIO object storage image."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from tcmodules.core import Image, WaitFor

DIR = "/data"
CONSOLE_ADDRESS = ":9001"


@dataclass(frozen=True)
class MinIOServerCmd:
    """The ``minio server`` command line."""

    dir: str = DIR
    certs_dir: str | None = None
    json_log: bool = False

    def __iter__(self) -> Iterator[str]:
        yield "server"
        yield self.dir
        if self.certs_dir is not None:
            yield "--certs-dir"
            yield self.certs_dir
        if self.json_log:
            yield "--json"


@dataclass(frozen=True)
class MinIO(Image):
    """A MinIO server with its console on port 9001."""

    NAME = "minio/minio"
    TAG = "RELEASE.2022-02-07T08-17-33Z"

    command: MinIOServerCmd = field(default_factory=MinIOServerCmd)

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stdout("API:")]

    def env_vars(self) -> dict[str, str]:
        return {"MINIO_CONSOLE_ADDRESS": CONSOLE_ADDRESS}

    def cmd(self) -> list[str]:
        return list(self.command)