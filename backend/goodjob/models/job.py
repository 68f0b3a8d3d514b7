from sqlalchemy import Column, DateTime, Index, Integer, String
from sqlalchemy.sql import func

from goodjob.core.database import Base


class Job(Base):
    __tablename__ = "job"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company = Column(String(100), nullable=False)
    subject = Column(String(200), nullable=False)
    url = Column(String(500), nullable=False)
    sector = Column(String(50), nullable=False)  # 백엔드, 프론트엔드 ...
    career = Column(Integer, nullable=False, default=0)  # 경력 (년)
    create_date = Column(DateTime, nullable=False, server_default=func.now())
    dead_line = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_job_sector", "sector"),
    )
