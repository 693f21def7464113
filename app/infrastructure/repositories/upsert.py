"""Dialect-aware insert-or-update helper used by idempotent writes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

_INSERT_BUILDERS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def upsert_row(
    session: Session,
    model: type,
    values: Mapping[str, Any],
    *,
    conflict_column: str,
    preserve_on_update: Iterable[str] = ("created_at",),
) -> Any:
    """Insert ``values`` or update the row sharing ``conflict_column``.

    PostgreSQL and SQLite use ``INSERT ... ON CONFLICT DO UPDATE`` so concurrent
    writers rely on the database to pick a winner. Other dialects fall back to a
    select followed by an update or insert inside the same transaction.
    Returns the stored ORM instance.
    """

    table = model.__table__
    key_value = values[conflict_column]
    preserved = set(preserve_on_update) | {conflict_column}
    dialect = session.get_bind().dialect.name

    builder = _INSERT_BUILDERS.get(dialect)
    if builder is not None:
        statement = builder(table).values(**values)
        update_columns = {
            name: statement.excluded[name] for name in values if name not in preserved
        }
        statement = statement.on_conflict_do_update(
            index_elements=[table.c[conflict_column]],
            set_=update_columns,
        )
        session.execute(statement)
    else:  # pragma: no cover - exercised only against other databases
        instance = (
            session.query(model)
            .filter(getattr(model, conflict_column) == key_value)
            .with_for_update()
            .one_or_none()
        )
        if instance is None:
            session.add(model(**values))
        else:
            for name, value in values.items():
                if name not in preserved:
                    setattr(instance, name, value)
    session.commit()

    stored = (
        session.query(model)
        .filter(getattr(model, conflict_column) == key_value)
        .populate_existing()
        .one()
    )
    return stored


__all__ = ["upsert_row"]
