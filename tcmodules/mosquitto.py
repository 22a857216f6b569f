"""Eclipse Mosquitto MQTT broker image."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import Image, WaitFor


@dataclass(frozen=True)
class Mosquitto(Image):
    """An MQTT broker without authentication, listening on port 1883."""

    NAME = "eclipse-mosquitto"
    TAG = "2.0.18"

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stderr(f"mosquitto version {self.TAG} running")]

    def cmd(self) -> list[str]:
        return ["mosquitto", "-c", "/mosquitto-no-auth.conf"]