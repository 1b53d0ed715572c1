"""管理员表模型

管理员账号仅用于事件日志的管理性更正
"""

from sqlalchemy import Column, Integer, String
from ..database.connection import Base


class Admin(Base):
    """管理员表"""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True)
    username = Column(String(64), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
