"""HashiCorp Consul image."""

from __future__ import annotations

from dataclasses import dataclass, replace

from tcmodules.core import Image, WaitFor

CONSUL_LOCAL_CONFIG = "CONSUL_LOCAL_CONFIG"


@dataclass(frozen=True)
class Consul(Image):
    """The official Consul image, optionally given a local JSON configuration."""

    NAME = "hashicorp/consul"
    TAG = "1.16.1"

    local_config: str | None = None

    def with_local_config(self, config: str) -> Consul:
        return replace(self, local_config=str(config))

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stdout("agent: Consul agent running!")]

    def env_vars(self) -> dict[str, str]:
        if self.local_config is None:
            return {}
        return {CONSUL_LOCAL_CONFIG: self.local_config}