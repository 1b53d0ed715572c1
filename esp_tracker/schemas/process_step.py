"""工序目录数据结构定义

定义工序相关的Pydantic模型
"""

from datetime import date
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class ProcessStepBase(BaseModel):
    """工序基础模型"""
    job_code: str = Field(min_length=1, max_length=50)
    job_name: str = Field(min_length=1, max_length=255)
    date_recorded: Optional[date] = None
    worker_count: Optional[int] = Field(default=None, ge=0)
    process_number: int
    process_description: Optional[str] = None


class ProcessStepCreate(ProcessStepBase):
    """创建工序时的模型"""
    pass


class ProcessStepUpdate(BaseModel):
    """更新工序时的模型"""
    job_code: Optional[str] = Field(default=None, min_length=1, max_length=50)
    job_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    date_recorded: Optional[date] = None
    worker_count: Optional[int] = Field(default=None, ge=0)
    process_number: Optional[int] = None
    process_description: Optional[str] = None

    @field_validator("job_code", "job_name", "process_number", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value


class ProcessStepRead(ProcessStepBase):
    """读取工序时的模型"""
    id: int

    class Config:
        from_attributes = True


class BulkStep(BaseModel):
    process_number: int
    process_description: Optional[str] = None
    worker_count: Optional[int] = Field(default=None, ge=0)


class ProcessStepBulkCreate(BaseModel):
    """批量导入某个作业的全部工序"""
    job_code: str = Field(min_length=1, max_length=50)
    job_name: str = Field(min_length=1, max_length=255)
    date_recorded: Optional[date] = None
    steps: List[BulkStep] = Field(min_length=1)


class JobCodeRead(BaseModel):
    job_code: str
    job_name: Optional[str] = None

    class Config:
        from_attributes = True
