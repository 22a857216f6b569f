"""ElasticMQ message queue image with an SQS-compatible interface."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import Image, WaitFor


@dataclass(frozen=True)
class ElasticMq(Image):
    """ElasticMQ, ready once its SQS REST server has started."""

    NAME = "softwaremill/elasticmq"
    TAG = "1.5.2"

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stdout("Started SQS rest server")]