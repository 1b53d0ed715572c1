"""用户表模型

车间操作员目录（参考数据）
"""

from sqlalchemy import Column, Integer, String
from ..database.connection import Base


class User(Base):
    """用户表"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    id_code = Column(String(50), unique=True, nullable=False, index=True)  # 员工编码
    name = Column(String(255), nullable=False)
