"""MongoDB document database image, standalone or as a single-node replica set."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from tcmodules.core import CmdWaitFor, ContainerState, ExecCommand, Image, WaitFor

REPLICA_SET_NAME = "rs"


class _InstanceKind(enum.Enum):
    STANDALONE = "standalone"
    REPL_SET = "repl_set"


@dataclass(frozen=True)
class Mongo(Image):
    """The official MongoDB image; standalone unless built with ``repl_set``."""

    NAME = "mongo"
    TAG = "5.0.6"

    kind: _InstanceKind = _InstanceKind.STANDALONE

    @classmethod
    def repl_set(cls) -> Mongo:
        """A single node that initiates a replica set, so transactions work."""
        return cls(_InstanceKind.REPL_SET)

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stdout("Waiting for connections")]

    def cmd(self) -> list[str]:
        if self.kind is _InstanceKind.REPL_SET:
            return ["--replSet", REPLICA_SET_NAME]
        return []

    def exec_after_start(self, state: ContainerState) -> list[ExecCommand]:
        """Initiate the replica set once the server is up; nothing for standalone."""
        if self.kind is not _InstanceKind.REPL_SET:
            return []
        command = (
            ExecCommand(("mongosh", "--quiet", "--eval", "'rs.initiate()'"))
            .with_cmd_ready_condition(
                CmdWaitFor.message_on_stdout(
                    "Using a default configuration for the set"
                )
            )
            .with_container_ready_conditions(
                [
                    WaitFor.message_on_stdout(
                        "Rebuilding PrimaryOnlyService due to stepUp"
                    )
                ]
            )
        )
        return [command]