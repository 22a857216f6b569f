"""Apache Kafka broker image running in KRaft mode."""

from __future__ import annotations

from dataclasses import dataclass, replace

from tcmodules.core import (
    ContainerPort,
    ContainerState,
    ExecCommand,
    Image,
    WaitFor,
)

KAFKA_NATIVE_IMAGE_NAME = "apache/kafka-native"
KAFKA_IMAGE_NAME = "apache/kafka"

KAFKA_PORT = ContainerPort.tcp(9092)
"""Port Apache Kafka accepts client connections on inside the container."""

START_SCRIPT = "/opt/kafka/testcontainers_start.sh"
DEFAULT_INTERNAL_TOPIC_RF = 1
DEFAULT_CLUSTER_ID = "5L6g3nShT-eMCtK--X86sw"
DEFAULT_BROKER_ID = 1


@dataclass(frozen=True)
class Kafka(Image):
    """An Apache Kafka broker with KRaft consensus.

    The GraalVM-based native image is the default for its faster startup;
    ``with_jvm_image`` switches to the JVM image.
    """

    NAME = KAFKA_NATIVE_IMAGE_NAME
    TAG = "3.8.0"

    image_name: str = KAFKA_NATIVE_IMAGE_NAME

    @property
    def name(self) -> str:
        return self.image_name

    def with_jvm_image(self) -> Kafka:
        """Use ``apache/kafka`` instead of ``apache/kafka-native``."""
        return replace(self, image_name=KAFKA_IMAGE_NAME)

    def ready_conditions(self) -> list[WaitFor]:
        # The container waits for a start script written after startup;
        # readiness is checked by the command from exec_after_start.
        return []

    def entrypoint(self) -> str | None:
        return "bash"

    def env_vars(self) -> dict[str, str]:
        port = KAFKA_PORT.port
        return {
            "KAFKA_LISTENERS": (
                f"PLAINTEXT://0.0.0.0:{port},"
                "BROKER://0.0.0.0:9093,CONTROLLER://0.0.0.0:9094"
            ),
            "CLUSTER_ID": DEFAULT_CLUSTER_ID,
            "KAFKA_PROCESS_ROLES": "broker,controller",
            "KAFKA_CONTROLLER_LISTENER_NAMES": "CONTROLLER",
            "KAFKA_LISTENER_SECURITY_PROTOCOL_MAP": (
                "BROKER:PLAINTEXT,PLAINTEXT:PLAINTEXT,CONTROLLER:PLAINTEXT"
            ),
            "KAFKA_INTER_BROKER_LISTENER_NAME": "BROKER",
            "KAFKA_ADVERTISED_LISTENERS": (
                f"PLAINTEXT://localhost:{port},BROKER://localhost:9092"
            ),
            "KAFKA_BROKER_ID": str(DEFAULT_BROKER_ID),
            "KAFKA_OFFSETS_TOPIC_REPLICATION_FACTOR": str(DEFAULT_INTERNAL_TOPIC_RF),
            "KAFKA_CONTROLLER_QUORUM_VOTERS": f"{DEFAULT_BROKER_ID}@localhost:9094",
        }

    def cmd(self) -> list[str]:
        # Loop until the start script exists, then run it; the script is only
        # written once the host port is known.
        return [
            "-c",
            f"while [ ! -f {START_SCRIPT}  ]; do sleep 0.1; done; "
            f"chmod 755 {START_SCRIPT} && {START_SCRIPT}",
        ]

    def expose_ports(self) -> list[ContainerPort]:
        return [KAFKA_PORT]

    def exec_after_start(self, state: ContainerState) -> list[ExecCommand]:
        """Write the start script advertising the host port the broker is reachable on."""
        host_port = state.host_port_ipv4(KAFKA_PORT)
        script = (
            "#!/usr/bin/env bash\n"
            f"export KAFKA_ADVERTISED_LISTENERS=PLAINTEXT://127.0.0.1:{host_port},"
            "BROKER://localhost:9093\n"
            "/etc/kafka/docker/run \n"
        )
        command = ExecCommand(
            ("sh", "-c", f"echo '{script}' > {START_SCRIPT}")
        ).with_container_ready_conditions(
            [WaitFor.message_on_stdout("Kafka Server started")]
        )
        return [command]