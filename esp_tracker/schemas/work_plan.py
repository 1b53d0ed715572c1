"""工作计划数据结构定义

定义工作计划与操作员分配相关的Pydantic模型。
操作员引用是带标签的：user_id 与 id_code 必须且只能提供一个。
"""

from datetime import date, datetime, time
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from ..utils.helpers import normalize_production_date

MAX_OPERATORS = 4


class OperatorRef(BaseModel):
    """操作员引用：用户目录中的 id，或原始员工编码"""
    user_id: Optional[int] = Field(default=None, ge=1)
    id_code: Optional[str] = Field(default=None, min_length=1, max_length=50)

    @model_validator(mode="after")
    def check_exactly_one(self):
        if (self.user_id is None) == (self.id_code is None):
            raise ValueError("operator must reference exactly one of user_id or id_code")
        return self


class WorkPlanBase(BaseModel):
    """工作计划基础模型"""
    production_date: date
    job_code: str = Field(min_length=1, max_length=50)
    job_name: Optional[str] = None  # 未提供时从工序目录获取
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @field_validator("production_date", mode="before")
    @classmethod
    def strip_time_of_day(cls, value):
        return normalize_production_date(value)


class WorkPlanCreate(WorkPlanBase):
    """创建工作计划时的模型"""
    operators: List[OperatorRef] = Field(default_factory=list, max_length=MAX_OPERATORS)


class WorkPlanUpdate(WorkPlanBase):
    """更新工作计划时的模型

    operators 省略时保留现有分配；提供时（包括空列表）整体替换。
    显式的 null 会被拒绝，避免与“清空”混淆。
    """
    operators: Optional[List[OperatorRef]] = Field(default=None, max_length=MAX_OPERATORS)

    @field_validator("operators", mode="before")
    @classmethod
    def reject_null_operators(cls, value):
        if value is None:
            raise ValueError("operators must be a list; omit the field to keep the current operators")
        return value


class OperatorReplace(BaseModel):
    """操作员分配的完整替换集合"""
    operators: List[OperatorRef] = Field(max_length=MAX_OPERATORS)


class OperatorRead(BaseModel):
    id: int
    user_id: Optional[int] = None
    id_code: Optional[str] = None
    name: Optional[str] = None


class WorkPlanRead(BaseModel):
    """读取工作计划时的模型（附带操作员姓名/编码）"""
    id: int
    production_date: date
    job_code: str
    job_name: Optional[str] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    is_finished: bool = False
    finished_at: Optional[datetime] = None
    operators: List[OperatorRead] = []
    operator_names: List[str] = []
    operator_codes: List[str] = []
