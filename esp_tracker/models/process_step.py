"""工序目录数据库模型

每个 job_code 下按 process_number 排列的工序步骤
"""

from sqlalchemy import Column, Date, Integer, String, Index
from ..database.connection import Base


class ProcessStep(Base):
    """工序表"""
    __tablename__ = "process_steps"
    __table_args__ = (Index("ix_process_steps_job_process", "job_code", "process_number"),)

    id = Column(Integer, primary_key=True)
    job_code = Column(String(50), nullable=False, index=True)  # 作业编码
    job_name = Column(String(255), nullable=False)  # 作业名称
    date_recorded = Column(Date, nullable=True)  # 录入日期
    worker_count = Column(Integer, nullable=True)  # 预计人数
    process_number = Column(Integer, nullable=False)  # 工序号，不要求连续
    process_description = Column(String(255), nullable=True)  # 工序描述
