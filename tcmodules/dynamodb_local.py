"""Amazon DynamoDB Local image."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import Image, WaitFor

DEFAULT_WAIT_MILLIS = 3000


@dataclass(frozen=True)
class DynamoDb(Image):
    """DynamoDB Local, given a short grace period after it reports startup."""

    NAME = "amazon/dynamodb-local"
    TAG = "2.0.0"

    def ready_conditions(self) -> list[WaitFor]:
        return [
            WaitFor.message_on_stdout(
                "Initializing DynamoDB Local with the following configuration"
            ),
            WaitFor.millis(DEFAULT_WAIT_MILLIS),
        ]