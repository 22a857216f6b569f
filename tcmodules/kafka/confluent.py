"""Confluent Kafka image with an embedded ZooKeeper."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import (
    ContainerPort,
    ContainerState,
    ExecCommand,
    Image,
    WaitFor,
)

KAFKA_PORT = ContainerPort.tcp(9093)
"""Port the Kafka broker accepts client connections on inside the container."""
ZOOKEEPER_PORT = ContainerPort.tcp(2181)
"""Port ZooKeeper listens on inside the container."""


@dataclass(frozen=True)
class Kafka(Image):
    """A Confluent Kafka broker that starts its own ZooKeeper."""

    NAME = "confluentinc/cp-kafka"
    TAG = "6.1.1"

    def ready_conditions(self) -> list[WaitFor]:
        return [WaitFor.message_on_stdout("Creating new log file")]

    def env_vars(self) -> dict[str, str]:
        port = KAFKA_PORT.port
        return {
            "KAFKA_ZOOKEEPER_CONNECT": f"localhost:{ZOOKEEPER_PORT.port}",
            "KAFKA_LISTENERS": f"PLAINTEXT://0.0.0.0:{port},BROKER://0.0.0.0:9092",
            "KAFKA_LISTENER_SECURITY_PROTOCOL_MAP": "BROKER:PLAINTEXT,PLAINTEXT:PLAINTEXT",
            "KAFKA_INTER_BROKER_LISTENER_NAME": "BROKER",
            "KAFKA_ADVERTISED_LISTENERS": (
                f"PLAINTEXT://localhost:{port},BROKER://localhost:9092"
            ),
            "KAFKA_BROKER_ID": "1",
            "KAFKA_OFFSETS_TOPIC_REPLICATION_FACTOR": "1",
        }

    def cmd(self) -> list[str]:
        script = "\n".join(
            [
                "",
                f"echo 'clientPort={ZOOKEEPER_PORT.port}' > zookeeper.properties;",
                "echo 'dataDir=/var/lib/zookeeper/data' >> zookeeper.properties;",
                "echo 'dataLogDir=/var/lib/zookeeper/log' >> zookeeper.properties;",
                "zookeeper-server-start zookeeper.properties &",
                ". /etc/confluent/docker/bash-config &&",
                "/etc/confluent/docker/configure &&",
                "/etc/confluent/docker/launch",
            ]
        )
        return ["/bin/bash", "-c", script]

    def expose_ports(self) -> list[ContainerPort]:
        return [KAFKA_PORT]

    def exec_after_start(self, state: ContainerState) -> list[ExecCommand]:
        """Reconfigure the broker to advertise the host port it is reachable on."""
        host_port = state.host_port_ipv4(KAFKA_PORT)
        command = ExecCommand(
            (
                "kafka-configs",
                "--alter",
                "--bootstrap-server",
                "0.0.0.0:9092",
                "--entity-type",
                "brokers",
                "--entity-name",
                "1",
                "--add-config",
                "advertised.listeners="
                f"[PLAINTEXT://127.0.0.1:{host_port},BROKER://localhost:9092]",
            )
        ).with_container_ready_conditions(
            [WaitFor.message_on_stdout("Checking need to trigger auto leader balancing")]
        )
        return [command]