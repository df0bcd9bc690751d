from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.db.session import Base

MIGRATIONS_DIR = Path(__file__).parent.parent.parent / "alembic"


def _alembic_config(url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", url)
    return config


class TestMigrations:
    def test_upgrade_matches_models(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'migrated.db'}"

        command.upgrade(_alembic_config(url), "head")

        inspector = inspect(create_engine(url))
        for table in Base.metadata.sorted_tables:
            migrated = {column["name"] for column in inspector.get_columns(table.name)}
            assert migrated == {column.name for column in table.columns}, table.name

    def test_downgrade_removes_tables(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'migrated.db'}"
        config = _alembic_config(url)

        command.upgrade(config, "head")
        command.downgrade(config, "base")

        assert set(inspect(create_engine(url)).get_table_names()) == {"alembic_version"}
