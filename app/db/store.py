"""
Data Store - generic table access used by every screen.

Contract:
    fetch_all(table, order_by, filters, columns)   -> rows        (FetchFailure)
    fetch_with_joins(table, relations, ...)        -> rows        (FetchFailure)
    insert(table, record)                          -> row         (WriteFailure)
    update(table, id, partial_record)              -> bool        (WriteFailure)
    delete(table, id)                              -> bool        (WriteFailure)
    count(table, filters)                          -> int         (FetchFailure)

Rows are plain dicts. Related rows from fetch_with_joins are embedded under
the relation name, e.g. applications -> {"students": {...}, "job_profiles": {...}}.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional

import structlog
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import FetchFailure, WriteFailure
from app.db.postgres import get_db_session, get_engine
from app.db.tables import RELATIONS, TABLES

logger = structlog.get_logger()


class DataStore(ABC):

    @abstractmethod
    def fetch_all(self, table: str, order_by: Optional[str] = None,
                  filters: Optional[Dict[str, Any]] = None,
                  columns: Optional[List[str]] = None) -> List[dict]:
        ...

    @abstractmethod
    def fetch_with_joins(self, table: str, relations: Iterable[str],
                         order_by: Optional[str] = None,
                         filters: Optional[Dict[str, Any]] = None) -> List[dict]:
        ...

    @abstractmethod
    def insert(self, table: str, record: Dict[str, Any], message: Optional[str] = None) -> dict:
        ...

    @abstractmethod
    def update(self, table: str, id: int, partial_record: Dict[str, Any],
               message: Optional[str] = None) -> bool:
        ...

    @abstractmethod
    def delete(self, table: str, id: int, message: Optional[str] = None) -> bool:
        ...

    @abstractmethod
    def count(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        ...

    def fetch_one(self, table: str, id: int) -> Optional[dict]:
        rows = self.fetch_all(table, filters={"id": id})
        return rows[0] if rows else None


def _relation_tree(relations: Iterable[str]) -> dict:
    """["students", "job_profiles.companies"] -> {"students": {}, "job_profiles": {"companies": {}}}"""
    tree = {}
    for path in relations:
        node = tree
        for part in path.split("."):
            node = node.setdefault(part, {})
    return tree


class SqlDataStore(DataStore):
    """DataStore over SQLAlchemy Core. Each call runs in its own session."""

    def __init__(self, engine: Engine = None):
        self.engine = engine

    # ------------------------------------------------------------
    # name validation - nothing unknown ever reaches SQL
    # ------------------------------------------------------------

    def _table(self, name: str, error_cls, action: str):
        table = TABLES.get(name)
        if table is None:
            raise error_cls(f"Unknown table '{name}'", action=action, table=name)
        return table

    def _column(self, table, name: str, error_cls, action: str):
        if name not in table.c:
            raise error_cls(f"Unknown column '{name}' on {table.name}", action=action, table=table.name)
        return table.c[name]

    def _where(self, stmt, table, filters, error_cls, action):
        for name, value in (filters or {}).items():
            column = self._column(table, name, error_cls, action)
            stmt = stmt.where(column.is_(None) if value is None else column == value)
        return stmt

    def _check_relations(self, table_name: str, tree: dict, action: str):
        for rel, subtree in tree.items():
            target = RELATIONS.get(table_name, {}).get(rel)
            if target is None:
                raise FetchFailure(f"Unknown relation '{rel}' on {table_name}", action=action, table=table_name)
            self._check_relations(target[1], subtree, action)

    # ------------------------------------------------------------
    # reads
    # ------------------------------------------------------------

    def fetch_all(self, table, order_by=None, filters=None, columns=None):
        action = f"fetching {table}"
        t = self._table(table, FetchFailure, action)

        if columns:
            stmt = select(*[self._column(t, c, FetchFailure, action) for c in columns])
        else:
            stmt = select(t)
        stmt = self._where(stmt, t, filters, FetchFailure, action)

        if order_by:
            descending = order_by.startswith("-")
            column = self._column(t, order_by.lstrip("-"), FetchFailure, action)
            # id breaks ties in the same direction so "newest first" holds within one second
            if descending:
                stmt = stmt.order_by(column.desc(), t.c.id.desc())
            else:
                stmt = stmt.order_by(column.asc(), t.c.id)
        else:
            stmt = stmt.order_by(t.c.id)

        return self._run_read(stmt, table, action)

    def fetch_with_joins(self, table, relations, order_by=None, filters=None):
        action = f"fetching {table}"
        tree = _relation_tree(relations)
        self._table(table, FetchFailure, action)
        self._check_relations(table, tree, action)

        rows = self.fetch_all(table, order_by=order_by, filters=filters)
        self._embed(table, rows, tree)
        return rows

    def _embed(self, table_name: str, rows: List[dict], tree: dict):
        for rel, subtree in tree.items():
            fk, target_name = RELATIONS[table_name][rel]
            ids = {r[fk] for r in rows if r.get(fk) is not None}
            related = {}
            if ids:
                target = TABLES[target_name]
                stmt = select(target).where(target.c.id.in_(ids))
                children = self._run_read(stmt, target_name, f"fetching {target_name}")
                self._embed(target_name, children, subtree)
                related = {c["id"]: c for c in children}
            for r in rows:
                r[rel] = related.get(r.get(fk))

    def count(self, table, filters=None):
        action = f"counting {table}"
        t = self._table(table, FetchFailure, action)
        stmt = self._where(select(func.count()).select_from(t), t, filters, FetchFailure, action)
        try:
            with get_db_session(self.engine or get_engine()) as db:
                return int(db.execute(stmt).scalar_one())
        except SQLAlchemyError as e:
            raise FetchFailure(f"Error fetching {table}", action=action, table=table) from e

    def _run_read(self, stmt, table: str, action: str) -> List[dict]:
        try:
            with get_db_session(self.engine or get_engine()) as db:
                return [dict(r) for r in db.execute(stmt).mappings().all()]
        except SQLAlchemyError as e:
            raise FetchFailure(f"Error fetching {table}", action=action, table=table) from e

    # ------------------------------------------------------------
    # writes
    # ------------------------------------------------------------

    def insert(self, table, record, message=None):
        action = f"creating {table}"
        t = self._table(table, WriteFailure, action)
        for name in record:
            self._column(t, name, WriteFailure, action)

        with self._writing(table, action, message) as db:
            result = db.execute(insert(t).values(**record))
            new_id = result.inserted_primary_key[0]
            row = db.execute(select(t).where(t.c.id == new_id)).mappings().one()
        logger.info("row_created", table=table, id=new_id)
        return dict(row)

    def update(self, table, id, partial_record, message=None):
        action = f"updating {table}"
        t = self._table(table, WriteFailure, action)
        if not partial_record:
            raise WriteFailure("No fields to update", action=action, table=table)
        for name in partial_record:
            self._column(t, name, WriteFailure, action)

        with self._writing(table, action, message) as db:
            result = db.execute(update(t).where(t.c.id == id).values(**partial_record))
            found = result.rowcount > 0
        if found:
            logger.info("row_updated", table=table, id=id, fields=sorted(partial_record))
        return found

    def delete(self, table, id, message=None):
        action = f"deleting {table}"
        t = self._table(table, WriteFailure, action)

        with self._writing(table, action, message) as db:
            result = db.execute(delete(t).where(t.c.id == id))
            found = result.rowcount > 0
        if found:
            logger.info("row_deleted", table=table, id=id)
        return found

    @contextmanager
    def _writing(self, table: str, action: str, message: Optional[str]):
        """Session scope that turns driver errors into WriteFailure."""
        message = message or f"Error {action}"
        try:
            with get_db_session(self.engine or get_engine()) as db:
                yield db
        except IntegrityError as e:
            raise WriteFailure(message, action=action, table=table, conflict=True) from e
        except SQLAlchemyError as e:
            raise WriteFailure(message, action=action, table=table) from e


def get_store() -> DataStore:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/students")
        def list_students(store: DataStore = Depends(get_store)):
            ...
    """
    return SqlDataStore(get_engine())
