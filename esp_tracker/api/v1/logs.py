"""事件日志API路由

车间终端通过 POST /logs、/logs/start、/logs/stop 追加事件；
PUT/DELETE /logs/{id} 为管理员更正接口，需要管理员令牌。
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...auth import require_admin
from ...core import status as status_engine
from ...database.connection import get_db
from ...models import LogStatus

router = APIRouter(tags=["logs"])


@router.get("/logs", response_model=List[schemas.LogDetail])
def list_logs(
    work_plan_id: Optional[int] = None,
    day: Optional[date] = Query(None, alias="date"),
    status: Optional[LogStatus] = None,
    db: Session = Depends(get_db),
):
    """获取事件列表，可按工作计划、日期、状态过滤"""
    return crud.list_events(db, work_plan_id=work_plan_id, day=day, status=status)


@router.get("/logs/work-plan/{work_plan_id}", response_model=List[schemas.LogDetail])
def get_work_plan_logs(work_plan_id: int, db: Session = Depends(get_db)):
    return crud.get_events_for_work_plan(db, work_plan_id)


@router.get("/logs/work-plan/{work_plan_id}/status", response_model=List[schemas.ProcessStatusRead])
def get_process_status(work_plan_id: int, db: Session = Depends(get_db)):
    """每个工序号的当前状态（最后追加的事件）"""
    return status_engine.current_status(db, work_plan_id)


@router.get("/logs/summary/{day}", response_model=List[schemas.ProductionSummaryRead])
def get_production_summary(day: date, db: Session = Depends(get_db)):
    """某日按作业汇总的生产情况"""
    return status_engine.production_summary(db, day)


@router.get("/logs/{log_id}", response_model=schemas.LogDetail)
def get_log(log_id: int, db: Session = Depends(get_db)):
    log = crud.get_event(db, log_id)
    if not log:
        raise HTTPException(status_code=404, detail="Log not found")
    return log


@router.post("/logs", response_model=schemas.LogRead, status_code=201)
def create_log(log: schemas.LogCreate, db: Session = Depends(get_db)):
    """追加事件"""
    return crud.append_event(db, log.work_plan_id, log.process_number, log.status, log.timestamp)


@router.post("/logs/start", response_model=schemas.LogRead, status_code=201)
def start_process(action: schemas.ProcessAction, db: Session = Depends(get_db)):
    return crud.start_process(db, action.work_plan_id, action.process_number)


@router.post("/logs/stop", response_model=schemas.LogRead, status_code=201)
def stop_process(action: schemas.ProcessAction, db: Session = Depends(get_db)):
    return crud.stop_process(db, action.work_plan_id, action.process_number)


@router.put("/logs/{log_id}", response_model=schemas.LogRead)
def update_log(
    log_id: int,
    log_update: schemas.LogUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin),
):
    """管理员更正事件"""
    if crud.get_work_plan(db, log_update.work_plan_id) is None:
        raise HTTPException(status_code=404, detail="Work plan not found")
    return crud.update_event(db, log_id, log_update)


@router.delete("/logs/{log_id}")
def delete_log(log_id: int, db: Session = Depends(get_db), admin=Depends(require_admin)):
    """管理员删除事件"""
    if not crud.delete_event(db, log_id):
        raise HTTPException(status_code=404, detail="Log not found")
    return {"success": True, "message": "Log deleted successfully"}
