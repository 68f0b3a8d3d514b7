from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from goodjob.core.database import get_db
from . import schemas, service

router = APIRouter(prefix="/job", tags=["job"])


@router.get("", response_model=list[schemas.JobRead])
def list_jobs(sector: Optional[str] = None, db: Session = Depends(get_db)):
    return service.list_jobs(db, sector)


@router.get("/{job_id}", response_model=schemas.JobRead)
def get_job(job_id: int, db: Session = Depends(get_db)):
    return service.get_job(db, job_id)
