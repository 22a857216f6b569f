"""Elasticsearch distributed search engine image."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import ContainerPort, Image, WaitFor

ELASTICSEARCH_API_PORT = ContainerPort.tcp(9200)
"""Port used for API calls over HTTP: search, aggregation, monitoring and so on."""

ELASTICSEARCH_INTER_NODE_PORT = ContainerPort.tcp(9300)
"""Port used by nodes to talk to each other about cluster membership and updates."""


@dataclass(frozen=True)
class ElasticSearch(Image):
    """A single-node Elasticsearch cluster, ready once its health turns green."""

    NAME = "docker.elastic.co/elasticsearch/elasticsearch"
    TAG = "7.16.1"

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stdout("[YELLOW] to [GREEN]")]

    def env_vars(self) -> dict[str, str]:
        return {"discovery.type": "single-node"}

    def expose_ports(self) -> list[ContainerPort]:
        return [ELASTICSEARCH_API_PORT, ELASTICSEARCH_INTER_NODE_PORT]