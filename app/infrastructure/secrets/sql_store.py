"""
Adapter: SQL secret store.

Implements SecretStore port.
Persists secrets to a relational database through SQLAlchemy Core.
Database errors are left as SQLAlchemy exceptions; they are classified
by SqlAlchemyErrorClassifier.
"""

import logging

from sqlalchemy import (
    Column,
    LargeBinary,
    MetaData,
    String,
    Table,
    Text,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoResultFound

from app.domain.secrets.entities import SecretRecord
from app.domain.secrets.ports import SecretStore

logger = logging.getLogger(__name__)

NAME_MAX_LEN = 253

metadata = MetaData()

secrets_table = Table(
    "secrets",
    metadata,
    Column("namespace", String(NAME_MAX_LEN), primary_key=True),
    Column("name", String(NAME_MAX_LEN), primary_key=True),
    Column("value", Text, nullable=True),
    Column("raw_value", LargeBinary, nullable=True),
)


class SqlSecretStore(SecretStore):
    """Secret store backed by a ``secrets`` table.

    The (namespace, name) primary key rejects duplicate creates with
    an IntegrityError. Replace and delete of a missing row raise
    NoResultFound.

    Args:
        engine: SQLAlchemy engine for the target database.
        create_schema: Create the table if it does not exist.
    """

    def __init__(self, engine: Engine, create_schema: bool = True) -> None:
        self._engine = engine
        if create_schema:
            metadata.create_all(engine)

    def list(self, namespace: str) -> list[str]:
        query = (
            select(secrets_table.c.name)
            .where(secrets_table.c.namespace == namespace)
            .order_by(secrets_table.c.name)
        )
        with self._engine.connect() as conn:
            return [row.name for row in conn.execute(query)]

    def create(self, record: SecretRecord) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                insert(secrets_table).values(
                    namespace=record.namespace,
                    name=record.name,
                    value=record.value,
                    raw_value=record.raw_value,
                )
            )
        logger.debug("Inserted secret %s/%s", record.namespace, record.name)

    def replace(self, record: SecretRecord) -> None:
        statement = (
            update(secrets_table)
            .where(secrets_table.c.namespace == record.namespace)
            .where(secrets_table.c.name == record.name)
            .values(value=record.value, raw_value=record.raw_value)
        )
        with self._engine.begin() as conn:
            result = conn.execute(statement)
            if result.rowcount == 0:
                raise NoResultFound(
                    f"No secret {record.name} in namespace {record.namespace}"
                )

    def delete(self, namespace: str, name: str) -> None:
        statement = (
            delete(secrets_table)
            .where(secrets_table.c.namespace == namespace)
            .where(secrets_table.c.name == name)
        )
        with self._engine.begin() as conn:
            result = conn.execute(statement)
            if result.rowcount == 0:
                raise NoResultFound(f"No secret {name} in namespace {namespace}")
