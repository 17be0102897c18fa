"""
Database module - engine/session handling and the generic data store.
"""
from app.db.postgres import get_db_session, get_engine, create_tables, test_db_connection
from app.db.store import DataStore, SqlDataStore, get_store

__all__ = [
    "get_db_session",
    "get_engine",
    "create_tables",
    "test_db_connection",
    "DataStore",
    "SqlDataStore",
    "get_store"
]
