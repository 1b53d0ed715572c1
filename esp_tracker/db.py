"""
数据库模块入口

此模块作为数据库相关功能的统一入口，实际功能在database包中实现
"""

from .database.connection import Base, Database, SessionLocal, database, engine, get_db, transaction

__all__ = ["Base", "Database", "SessionLocal", "database", "engine", "get_db", "transaction"]
