"""事件日志数据库模型

只追加的开始/停止事件。id 自增，分配顺序即到达顺序，是状态推导的唯一排序依据。
"""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, Integer
from ..database.connection import Base


class LogStatus(str, enum.Enum):
    start = "start"
    stop = "stop"


class Log(Base):
    """事件日志表"""
    __tablename__ = "logs"
    __table_args__ = (Index("ix_logs_work_plan_process", "work_plan_id", "process_number"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 删除工作计划时由数据库级联删除其事件
    work_plan_id = Column(Integer, ForeignKey("work_plans.id", ondelete="CASCADE"), nullable=False)
    process_number = Column(Integer, nullable=False)  # 不校验是否存在于工序目录
    status = Column(Enum(LogStatus, name="log_status"), nullable=False)
    timestamp = Column(DateTime, nullable=False, index=True)
