"""应用模块入口

提供统一的模块导入接口
"""

from . import (
    auth,
    crud,
    db,
    models,
    schemas,
    security,
)

# 从子模块导入关键组件
from .config.settings import settings
from .db import get_db, engine, Base, database
from .auth import authenticate_admin, create_access_token, verify_token

__all__ = [
    "auth",
    "crud",
    "db",
    "models",
    "schemas",
    "security",
    "settings",
    "get_db",
    "engine",
    "Base",
    "database",
    "authenticate_admin",
    "create_access_token",
    "verify_token",
]
