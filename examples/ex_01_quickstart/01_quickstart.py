"""Quickstart: generate generic-factory configuration from type hints.

Start with plain classes, point the dumper at the top-level service, and see
how wireconf records the full dependency chain and renders it as a module.
"""

from __future__ import annotations

from datetime import datetime

from wireconf import CONFIG_FACTORY, ConfigDumper


class Database:
    def __init__(self) -> None:
        self.host = "localhost"


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, repository: UserRepository, page_size: int = 20) -> None:
        self.repository = repository
        self.page_size = page_size


def main() -> None:
    dumper = ConfigDumper()
    config = dumper.create_dependency_config({}, UserService)
    config = dumper.create_factory_mappings_from_config(config)

    dependencies = config[CONFIG_FACTORY]
    print(f"classes={len(dependencies)}")  # => classes=3
    print(f"user_service={dependencies['__main__.UserService']}")  # => user_service=['__main__.UserRepository']
    print(f"database={dependencies['__main__.Database']}")  # => database=[]

    source = dumper.dump_config_file(config, generated_at=datetime(2024, 1, 1))  # noqa: DTZ001
    print(source.splitlines()[-4])  # =>             __main__.UserService: wireconf.factory.ConfigFactory,


if __name__ == "__main__":
    main()
