from tcmodules.core import ContainerRequest, WaitKind
from tcmodules.mariadb import Mariadb

EMPTY_ROOT_FLAG_ENV = "MARIADB_ALLOW_EMPTY_ROOT_PASSWORD"
FLAG_ON = "1"


def test_name_and_tag():
    image = Mariadb()
    assert image.name == "mariadb"
    assert image.tag == "11.3"


def test_env_vars_create_test_database_without_root_password():
    assert Mariadb().env_vars() == {
        "MARIADB_DATABASE": "test",
        EMPTY_ROOT_FLAG_ENV: FLAG_ON,
    }


def test_ready_conditions_wait_on_stderr():
    conditions = Mariadb().ready_conditions()
    assert [c.kind for c in conditions] == [WaitKind.STDERR, WaitKind.STDERR]
    assert [c.value for c in conditions] == [
        "mariadbd: ready for connections.",
        "port: 3306",
    ]


def test_custom_version_overrides_tag_only():
    request = Mariadb().with_tag("11.2.3")
    assert isinstance(request, ContainerRequest)
    assert request.tag == "11.2.3"
    assert request.name == "mariadb"
    assert request.env_vars() == Mariadb().env_vars()


def test_no_command_or_ports_by_default():
    image = Mariadb()
    assert image.cmd() == []
    assert image.expose_ports() == []