import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String
from sqlalchemy.sql import func

from goodjob.core.database import Base


class Membership(str, enum.Enum):
    ORDINARY = "ORDINARY"
    MENTOR = "MENTOR"
    ADMIN = "ADMIN"


class Member(Base):
    __tablename__ = "member"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account = Column(String(20), nullable=False, unique=True)
    username = Column(String(20), nullable=False)
    password = Column(String(255), nullable=False)  # 해시 저장 전제
    email = Column(String(255), nullable=False, unique=True)
    phone = Column(String(20), nullable=True)
    membership = Column(Enum(Membership, native_enum=False, length=20), nullable=False, default=Membership.ORDINARY)
    is_deleted = Column(Boolean, nullable=False, default=False)
    create_date = Column(DateTime, nullable=False, server_default=func.now())
    modify_date = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
