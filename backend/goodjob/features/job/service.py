from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from goodjob.common.exceptions import NotFoundError
from goodjob.models.job import Job
from .schemas import JobCreate


# 등록
def create_job(db: Session, payload: JobCreate) -> Job:
    job = Job(
        company=payload.company,
        subject=payload.subject,
        url=payload.url,
        sector=payload.sector,
        career=payload.career,
        dead_line=payload.dead_line,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


# 목록 :: 최신 공고 먼저, sector 지정 시 해당 분야만
def list_jobs(db: Session, sector: Optional[str] = None) -> list[Job]:
    stmt = select(Job)
    if sector:
        stmt = stmt.where(Job.sector == sector)
    stmt = stmt.order_by(Job.id.desc())
    return list(db.execute(stmt).scalars().all())


def get_job(db: Session, job_id: int) -> Job:
    job = db.get(Job, job_id)
    if job is None:
        raise NotFoundError("채용 공고가 존재하지 않습니다.")
    return job
