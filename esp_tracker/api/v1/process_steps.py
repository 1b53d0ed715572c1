"""工序目录API路由

工序目录是参考数据：按作业批量导入，供工作计划校验和状态查询关联
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...database.connection import get_db

router = APIRouter(tags=["process-steps"])


@router.get("/process-steps", response_model=List[schemas.ProcessStepRead])
def list_process_steps(
    job_code: Optional[str] = None,
    date_recorded: Optional[date] = None,
    db: Session = Depends(get_db),
):
    return crud.list_process_steps(db, job_code=job_code, date_recorded=date_recorded)


@router.get("/process-steps/search", response_model=List[schemas.JobCodeRead])
def search_jobs(query: str = "", db: Session = Depends(get_db)):
    """按作业编码或名称搜索作业"""
    return crud.search_jobs(db, query)


@router.get("/process-steps/job-codes", response_model=List[schemas.JobCodeRead])
def list_job_codes(db: Session = Depends(get_db)):
    return crud.list_job_codes(db)


@router.get("/process-steps/job/{job_code}", response_model=List[schemas.ProcessStepRead])
def get_steps_for_job(job_code: str, db: Session = Depends(get_db)):
    return crud.get_process_steps_by_job_code(db, job_code)


@router.get("/process-steps/job/{job_code}/{process_number}")
def get_step_description(job_code: str, process_number: int, db: Session = Depends(get_db)):
    """查询某作业某工序号的描述"""
    description = crud.get_process_description(db, job_code, process_number)
    if description is None:
        raise HTTPException(status_code=404, detail="Process step not found")
    return {"job_code": job_code, "process_number": process_number, "process_description": description}


@router.get("/process-steps/{step_id}", response_model=schemas.ProcessStepRead)
def get_process_step(step_id: int, db: Session = Depends(get_db)):
    step = crud.get_process_step(db, step_id)
    if not step:
        raise HTTPException(status_code=404, detail="Process step not found")
    return step


@router.post("/process-steps", response_model=schemas.ProcessStepRead, status_code=201)
def create_process_step(step: schemas.ProcessStepCreate, db: Session = Depends(get_db)):
    return crud.create_process_step(db, step)


@router.post("/process-steps/bulk", response_model=List[schemas.ProcessStepRead], status_code=201)
def create_process_steps_bulk(payload: schemas.ProcessStepBulkCreate, db: Session = Depends(get_db)):
    """批量导入某作业的工序"""
    return crud.create_process_steps_bulk(
        db, payload.job_code, payload.job_name, payload.date_recorded, payload.steps
    )


@router.put("/process-steps/{step_id}", response_model=schemas.ProcessStepRead)
def update_process_step(step_id: int, step_update: schemas.ProcessStepUpdate, db: Session = Depends(get_db)):
    return crud.update_process_step(db, step_id, step_update)


@router.delete("/process-steps/{step_id}")
def delete_process_step(step_id: int, db: Session = Depends(get_db)):
    if not crud.delete_process_step(db, step_id):
        raise HTTPException(status_code=404, detail="Process step not found")
    return {"success": True, "message": "Process step deleted successfully"}
