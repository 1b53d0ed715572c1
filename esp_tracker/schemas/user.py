"""用户数据结构定义

定义用户目录与管理员认证相关的Pydantic模型
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional


class UserBase(BaseModel):
    """用户基础模型"""
    id_code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=255)


class UserCreate(UserBase):
    """创建用户时的模型"""
    pass


class UserUpdate(BaseModel):
    """更新用户时的模型"""
    id_code: Optional[str] = Field(default=None, min_length=1, max_length=50)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)

    @field_validator("id_code", "name", mode="before")
    @classmethod
    def reject_null(cls, value):
        # 省略表示不修改；显式 null 无法写入非空列
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value


class UserRead(UserBase):
    """读取用户时的模型"""
    id: int

    class Config:
        from_attributes = True


class Token(BaseModel):
    """管理员访问令牌"""
    access_token: str
    token_type: str = "bearer"
