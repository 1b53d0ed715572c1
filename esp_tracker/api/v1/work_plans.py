"""工作计划API路由

校验请求（作业编码必须存在于工序目录，数字形式的操作员 id 必须存在于用户目录），
然后调用核心层并序列化结果。以员工编码引用的操作员允许尚未录入用户目录。
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...core.exceptions import NotFoundError
from ...crud import work_plan as work_plan_crud
from ...database.connection import get_db

router = APIRouter(tags=["work-plans"])


def _check_operators(db: Session, operators: List[schemas.OperatorRef]):
    for op in operators:
        if op.user_id is not None and crud.get_user(db, op.user_id) is None:
            raise NotFoundError("User", op.user_id)


def _validate_plan(db: Session, plan, current=None):
    """校验作业编码与操作员引用；未提供作业名称时补全

    作业名称只在创建（或更换作业编码）时从工序目录复制，之后目录改名不会同步到已有计划。
    """
    catalog_name = crud.get_job_name(db, plan.job_code)
    if catalog_name is None:
        raise NotFoundError("Job code", plan.job_code)
    if plan.operators:
        _check_operators(db, plan.operators)
    if not plan.job_name:
        if current is not None and current.job_code == plan.job_code:
            job_name = current.job_name
        else:
            job_name = catalog_name
        plan = plan.model_copy(update={"job_name": job_name})
    return plan


def _get_or_404(db: Session, work_plan_id: int):
    db_plan = crud.get_work_plan(db, work_plan_id)
    if not db_plan:
        raise HTTPException(status_code=404, detail="Work plan not found")
    return db_plan


@router.get("/work-plans", response_model=List[schemas.WorkPlanRead])
def list_work_plans(production_date: Optional[date] = Query(None, alias="date"), db: Session = Depends(get_db)):
    """获取工作计划列表，可按生产日期过滤"""
    plans = crud.list_work_plans(db, production_date)
    return work_plan_crud.to_read_models(db, plans)


@router.get("/work-plans/{work_plan_id}", response_model=schemas.WorkPlanRead)
def get_work_plan(work_plan_id: int, db: Session = Depends(get_db)):
    return work_plan_crud.to_read_model(db, _get_or_404(db, work_plan_id))


@router.post("/work-plans", response_model=schemas.WorkPlanRead, status_code=201)
def create_work_plan(plan: schemas.WorkPlanCreate, db: Session = Depends(get_db)):
    """创建工作计划"""
    db_plan = crud.create_work_plan(db, _validate_plan(db, plan))
    return work_plan_crud.to_read_model(db, db_plan)


@router.put("/work-plans/{work_plan_id}", response_model=schemas.WorkPlanRead)
def update_work_plan(work_plan_id: int, plan: schemas.WorkPlanUpdate, db: Session = Depends(get_db)):
    """更新工作计划；省略 operators 保留现有分配，提供时整体替换"""
    current = _get_or_404(db, work_plan_id)
    db_plan = crud.update_work_plan(db, work_plan_id, _validate_plan(db, plan, current))
    return work_plan_crud.to_read_model(db, db_plan)


@router.put("/work-plans/{work_plan_id}/operators", response_model=schemas.WorkPlanRead)
def replace_work_plan_operators(
    work_plan_id: int, payload: schemas.OperatorReplace, db: Session = Depends(get_db)
):
    """以完整集合替换操作员分配（空列表即清空）"""
    _get_or_404(db, work_plan_id)
    _check_operators(db, payload.operators)
    db_plan = crud.replace_operators(db, work_plan_id, payload.operators)
    return work_plan_crud.to_read_model(db, db_plan)


@router.delete("/work-plans/{work_plan_id}")
def delete_work_plan(work_plan_id: int, db: Session = Depends(get_db)):
    """删除工作计划及其完工标记、操作员分配"""
    if not crud.delete_work_plan(db, work_plan_id):
        raise HTTPException(status_code=404, detail="Work plan not found")
    return {"success": True, "message": "Work plan deleted successfully"}


@router.patch("/work-plans/{work_plan_id}/finish")
def finish_work_plan(work_plan_id: int, db: Session = Depends(get_db)):
    _get_or_404(db, work_plan_id)
    crud.mark_finished(db, work_plan_id)
    return {"success": True, "message": "Work plan marked as finished"}


@router.patch("/work-plans/{work_plan_id}/unfinish")
def unfinish_work_plan(work_plan_id: int, db: Session = Depends(get_db)):
    _get_or_404(db, work_plan_id)
    crud.mark_unfinished(db, work_plan_id)
    return {"success": True, "message": "Work plan marked as unfinished"}
