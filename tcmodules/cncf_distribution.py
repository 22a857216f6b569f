"""CNCF Distribution container registry image."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import Image, WaitFor


@dataclass(frozen=True)
class CncfDistribution(Image):
    """A plain container registry, listening on port 5000 inside the container."""

    NAME = "registry"
    TAG = "2"

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stderr("listening on [::]:5000")]