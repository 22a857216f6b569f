from tcmodules.core import WaitKind
from tcmodules.mosquitto import Mosquitto


def test_name_and_tag():
    image = Mosquitto()
    assert image.name == "eclipse-mosquitto"
    assert image.tag == "2.0.18"


def test_ready_condition_mentions_version_on_stderr():
    (condition,) = Mosquitto().ready_conditions()
    assert condition.kind is WaitKind.STDERR
    assert condition.value == "mosquitto version 2.0.18 running"


def test_ready_condition_contains_tag():
    image = Mosquitto()
    (condition,) = image.ready_conditions()
    assert image.tag in condition.value


def test_cmd_uses_no_auth_config():
    assert Mosquitto().cmd() == ["mosquitto", "-c", "/mosquitto-no-auth.conf"]


def test_no_environment_or_ports_by_default():
    image = Mosquitto()
    assert image.env_vars() == {}
    assert image.expose_ports() == []


def test_with_env_var_layers_over_image():
    request = Mosquitto().with_env_var("TZ", "UTC")
    assert request.env_vars() == {"TZ": "UTC"}
    assert request.tag == "2.0.18"