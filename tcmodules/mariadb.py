"""MariaDB relational database image."""

from __future__ import annotations

from dataclasses import dataclass

from tcmodules.core import Image, WaitFor

_DATABASE_ENV = "MARIADB_DATABASE"
_EMPTY_ROOT_FLAG_ENV = "MARIADB_ALLOW_EMPTY_ROOT_PASSWORD"
_FLAG_ON = "1"


@dataclass(frozen=True)
class Mariadb(Image):
    """MariaDB with an empty root password and a database named ``test``."""

    NAME = "mariadb"
    TAG = "11.3"

    def ready_conditions(self) -> list[WaitFor]:
        return [
            WaitFor.message_on_stderr("mariadbd: ready for connections."),
            WaitFor.message_on_stderr("port: 3306"),
        ]

    def env_vars(self) -> dict[str, str]:
        return {
            _DATABASE_ENV: "test",
            _EMPTY_ROOT_FLAG_ENV: _FLAG_ON,
        }