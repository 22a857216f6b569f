"""CockroachDB distributed database image."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from tcmodules.core import Image, WaitFor


@dataclass(frozen=True)
class CockroachDbCmd:
    """Start a single CockroachDB node, insecure by default."""

    insecure: bool = True

    def __iter__(self) -> Iterator[str]:
        yield "start-single-node"
        if self.insecure:
            yield "--insecure"


@dataclass(frozen=True)
class CockroachDb(Image):
    """The official CockroachDB image running a single node."""

    NAME = "cockroachdb/cockroach"
    TAG = "v23.2.3"

    command: CockroachDbCmd = field(default_factory=CockroachDbCmd)

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stdout("CockroachDB node starting at")]

    def cmd(self) -> list[str]:
        return list(self.command)