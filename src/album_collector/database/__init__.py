"""
Database module for Album Collector
"""

from .connection import Database, get_database, get_db_session

__all__ = ["Database", "get_database", "get_db_session"]
