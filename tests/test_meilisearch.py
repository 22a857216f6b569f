import pytest

from tcmodules.core import WaitKind
from tcmodules.meilisearch import (
    MEILISEARCH_PORT,
    Environment,
    LogLevel,
    Meilisearch,
)


def test_default_disables_analytics_only():
    assert Meilisearch().env_vars() == {"MEILI_NO_ANALYTICS": "true"}


def test_enabling_analytics_removes_flag():
    image = Meilisearch().with_analytics(True)
    assert "MEILI_NO_ANALYTICS" not in image.env_vars()
    assert image.with_analytics(False).env_vars()["MEILI_NO_ANALYTICS"] == "true"


def test_master_key_is_set():
    master_key = "secret"
    env = Meilisearch().with_master_key(master_key).env_vars()
    assert env["MEILI_MASTER_KEY"] == master_key


def test_environment_and_log_level_env_vars():
    env = (
        Meilisearch()
        .with_environment(Environment.PRODUCTION)
        .with_log_level(LogLevel.OFF)
        .env_vars()
    )
    assert env["MEILI_ENV"] == "production"
    assert env["MEILI_LOG_LEVEL"] == "OFF"


def test_builders_do_not_mutate_original():
    base = Meilisearch()
    base.with_master_key("secret")
    assert "MEILI_MASTER_KEY" not in base.env_vars()


@pytest.mark.parametrize("member", list(Environment))
def test_environment_text_round_trip(member):
    text = str(member)
    assert text == text.lower()
    assert Environment.parse(text) is member


@pytest.mark.parametrize("member", list(LogLevel))
def test_log_level_text_round_trip(member):
    text = str(member)
    assert text == text.upper()
    assert LogLevel.parse(text) is member


def test_parse_rejects_unknown_text():
    with pytest.raises(ValueError):
        Environment.parse("staging")
    with pytest.raises(ValueError):
        LogLevel.parse("off")


def test_ready_condition_polls_health_endpoint():
    (condition,) = Meilisearch().ready_conditions()
    assert condition.kind is WaitKind.HTTP
    strategy = condition.value
    assert strategy.path == "/health"
    assert strategy.expected_status_code == 200
    assert strategy.body == b'{ "status": "available" }'


def test_exposes_port_and_image():
    image = Meilisearch()
    assert image.expose_ports() == [MEILISEARCH_PORT]
    assert MEILISEARCH_PORT.port == 7700
    assert (image.name, image.tag) == ("getmeili/meilisearch", "v1.8.3")


def test_custom_version_keeps_master_key():
    request = Meilisearch().with_master_key("secret").with_tag("v1.0")
    assert request.tag == "v1.0"
    assert request.env_vars()["MEILI_MASTER_KEY"] == "secret"