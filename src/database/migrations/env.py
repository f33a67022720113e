"""Alembic environment for email-intel-api migrations."""
from alembic import context
from sqlalchemy import engine_from_config, pool

from src.config.config import get_postgres_dsn

config = context.config
# configparser treats % as interpolation, so escape percent-encoded characters
config.set_main_option("sqlalchemy.url", get_postgres_dsn("postgresql+psycopg2").replace("%", "%%"))


def run_migrations_offline() -> None:
	"""Emit SQL without a live connection."""
	context.configure(url=config.get_main_option("sqlalchemy.url"), literal_binds=True)
	with context.begin_transaction():
		context.run_migrations()


def run_migrations_online() -> None:
	connectable = engine_from_config(
		config.get_section(config.config_ini_section),
		prefix="sqlalchemy.",
		poolclass=pool.NullPool,
	)
	with connectable.connect() as connection:
		context.configure(connection=connection)
		with context.begin_transaction():
			context.run_migrations()


if context.is_offline_mode():
	run_migrations_offline()
else:
	run_migrations_online()
