"""工作计划数据库模型

工作计划、操作员分配以及完工标记
"""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Time
from sqlalchemy.orm import relationship
from ..database.connection import Base


class WorkPlan(Base):
    """工作计划表"""
    __tablename__ = "work_plans"

    id = Column(Integer, primary_key=True)
    production_date = Column(Date, nullable=False, index=True)  # 生产日期（无时间部分）
    job_code = Column(String(50), nullable=False, index=True)
    # 创建时从工序目录复制的作业名称，目录变更后不再同步
    job_name = Column(String(255), nullable=True)
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)

    operators = relationship("WorkPlanOperator", back_populates="work_plan", order_by="WorkPlanOperator.id")
    finished_flag = relationship("FinishedFlag", uselist=False, back_populates="work_plan")

    @property
    def is_finished(self) -> bool:
        return bool(self.finished_flag and self.finished_flag.is_finished)

    @property
    def finished_at(self):
        return self.finished_flag.updated_at if self.finished_flag else None


class WorkPlanOperator(Base):
    """工作计划操作员分配表

    user_id 与 id_code 二选一；id_code 允许引用尚未录入用户目录的员工。
    同一操作员允许重复分配。
    """
    __tablename__ = "work_plan_operators"

    id = Column(Integer, primary_key=True)
    work_plan_id = Column(Integer, ForeignKey("work_plans.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    id_code = Column(String(50), nullable=True, index=True)

    work_plan = relationship("WorkPlan", back_populates="operators")


class FinishedFlag(Base):
    """完工标记表（每个工作计划仅一行，不保留历史）"""
    __tablename__ = "finished_flags"

    work_plan_id = Column(Integer, ForeignKey("work_plans.id"), primary_key=True)
    is_finished = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime, nullable=False)

    work_plan = relationship("WorkPlan", back_populates="finished_flag")
