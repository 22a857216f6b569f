import pytest

from tcmodules.core import ContainerError, ContainerState, WaitFor
from tcmodules.kafka.confluent import KAFKA_PORT, ZOOKEEPER_PORT, Kafka


def test_name_and_tag():
    kafka = Kafka()
    assert kafka.name == "confluentinc/cp-kafka"
    assert kafka.tag == "6.1.1"


def test_ports():
    assert KAFKA_PORT.port == 9093
    assert ZOOKEEPER_PORT.port == 2181
    assert Kafka().expose_ports() == [KAFKA_PORT]


def test_ready_conditions():
    assert Kafka().ready_conditions() == [
        WaitFor.message_on_stdout("Creating new log file")
    ]


def test_env_vars():
    env = Kafka().env_vars()
    assert env["KAFKA_ZOOKEEPER_CONNECT"] == f"localhost:{ZOOKEEPER_PORT.port}"
    assert env["KAFKA_LISTENER_SECURITY_PROTOCOL_MAP"] == "BROKER:PLAINTEXT,PLAINTEXT:PLAINTEXT"
    assert env["KAFKA_INTER_BROKER_LISTENER_NAME"] == "BROKER"
    assert env["KAFKA_BROKER_ID"] == "1"
    assert env["KAFKA_OFFSETS_TOPIC_REPLICATION_FACTOR"] == "1"
    assert f"PLAINTEXT://0.0.0.0:{KAFKA_PORT.port}" in env["KAFKA_LISTENERS"]


def test_cmd_starts_zookeeper_then_broker():
    cmd = Kafka().cmd()
    assert cmd[:2] == ["/bin/bash", "-c"]
    script = cmd[2]
    assert script.startswith("\necho 'clientPort=2181' > zookeeper.properties;")
    assert "zookeeper-server-start zookeeper.properties &" in script
    assert script.endswith("/etc/confluent/docker/launch")
    assert script.index("zookeeper-server-start") < script.index("/etc/confluent/docker/launch")


def test_exec_after_start_advertises_host_port():
    state = ContainerState({KAFKA_PORT: 50001})
    commands = Kafka().exec_after_start(state)
    assert len(commands) == 1
    command = commands[0]
    assert command.cmd[0] == "kafka-configs"
    assert command.cmd[-2] == "--add-config"
    assert "PLAINTEXT://127.0.0.1:50001," in command.cmd[-1]
    assert command.container_ready_conditions == (
        WaitFor.message_on_stdout("Checking need to trigger auto leader balancing"),
    )


def test_exec_after_start_requires_mapped_port():
    state = ContainerState({ZOOKEEPER_PORT: 50002})
    with pytest.raises(ContainerError):
        Kafka().exec_after_start(state)