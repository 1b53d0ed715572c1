"""事件日志数据结构定义

定义开始/停止事件、工序状态与生产汇总的Pydantic模型
"""

from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ..models.log import LogStatus


class LogCreate(BaseModel):
    """追加事件时的模型，timestamp 省略时使用服务器当前时间"""
    work_plan_id: int = Field(ge=1)
    process_number: int = Field(ge=1)
    status: LogStatus
    timestamp: Optional[datetime] = None


class LogUpdate(BaseModel):
    """管理性更正事件时的模型"""
    work_plan_id: int = Field(ge=1)
    process_number: int = Field(ge=1)
    status: LogStatus
    timestamp: datetime


class ProcessAction(BaseModel):
    """开始/停止工序的快捷请求，兼容 workPlanId/processNumber 字段名"""
    model_config = ConfigDict(populate_by_name=True)

    work_plan_id: int = Field(ge=1, alias="workPlanId")
    process_number: int = Field(ge=1, alias="processNumber")


class LogRead(BaseModel):
    id: int
    work_plan_id: int
    process_number: int
    status: LogStatus
    timestamp: datetime

    class Config:
        from_attributes = True


class LogDetail(LogRead):
    """附带工作计划和工序描述的事件"""
    job_code: Optional[str] = None
    job_name: Optional[str] = None
    production_date: Optional[date] = None
    process_description: Optional[str] = None


class ProcessStatusRead(BaseModel):
    """某个工序号的当前状态（最后追加的事件）"""
    process_number: int
    status: LogStatus
    timestamp: datetime
    process_description: Optional[str] = None


class ProductionSummaryRead(BaseModel):
    """某日按作业汇总的生产情况"""
    job_code: str
    job_name: Optional[str] = None
    processes_started: int
    total_starts: int
    total_stops: int
    first_start: datetime  # 当日最早的任意事件
    last_activity: datetime
