"""LocalStack community edition image emulating AWS services."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import Image, WaitFor

DEFAULT_WAIT_MILLIS = 3000


@dataclass(frozen=True)
class LocalStack(Image):
    """LocalStack, configured through environment variables such as SERVICES."""

    NAME = "localstack/localstack"
    TAG = "3.0"

    def ready_conditions(self) -> list[WaitFor]:
        return [
            WaitFor.message_on_stdout("Ready."),
            WaitFor.millis(DEFAULT_WAIT_MILLIS),
        ]