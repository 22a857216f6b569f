from tcmodules.consul import Consul
from tcmodules.core import WaitFor

CONFIG = '{"datacenter":"dc-rust"}'


def test_local_config_sets_env_var():
    image = Consul().with_local_config(CONFIG)
    assert image.env_vars() == {"CONSUL_LOCAL_CONFIG": CONFIG}


def test_with_local_config_leaves_original_untouched():
    base = Consul()
    base.with_local_config(CONFIG)
    assert base.env_vars() == {}


def test_local_config_replaced():
    image = Consul().with_local_config(CONFIG).with_local_config("{}")
    assert image.env_vars() == {"CONSUL_LOCAL_CONFIG": "{}"}


def test_image_identity_and_readiness():
    image = Consul()
    assert (image.name, image.tag) == ("hashicorp/consul", "1.16.1")
    assert image.ready_conditions() == [
        WaitFor.message_on_stdout("agent: Consul agent running!")
    ]