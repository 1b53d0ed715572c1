"""数据库连接模块

统一管理数据库引擎、会话和模型基类的创建。
Database 对象持有引擎和会话工厂，由应用显式创建并传递，不依赖隐式的全局连接池；
transaction() 为一次原子操作提供作用域：正常退出时提交，任何异常路径都会回滚。
"""

import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from ..config.settings import settings
from ..core.exceptions import translate_integrity_error

logger = logging.getLogger(__name__)

# 创建模型基类
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """数据库句柄：引擎 + 会话工厂"""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)
        self.url = url
        self.engine = create_engine(url, echo=echo, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            # sqlite 默认不检查外键，开启后与 MySQL 的引用完整性行为一致
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self):
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def get_db(self):
        """获取数据库会话的依赖函数"""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()


@contextmanager
def transaction(db: Session):
    """事务作用域：成功提交，失败回滚后再抛出类型化错误"""
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.error("Integrity error, transaction rolled back: %s", exc.orig)
        raise translate_integrity_error(exc) from exc
    except Exception:
        db.rollback()
        logger.exception("Transaction rolled back")
        raise


# 默认数据库句柄（按配置创建）
database = Database(settings.DATABASE_URL, echo=settings.ECHO_SQL)
engine = database.engine
SessionLocal = database.SessionLocal


def get_db():
    """获取数据库会话的依赖函数"""
    yield from database.get_db()
