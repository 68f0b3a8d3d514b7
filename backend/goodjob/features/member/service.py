import logging
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from goodjob.common.exceptions import ConflictError, ValidationError
from goodjob.core.security.password import hash_password
from goodjob.models.member import Member, Membership
from .schemas import JoinForm

logger = logging.getLogger(__name__)


# form 검증 :: 필드별 에러 메시지로 변환
def validate_join_form(raw: dict[str, Any]) -> JoinForm:
    try:
        return JoinForm.model_validate(raw)
    except PydanticValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            errors.setdefault(field, err["msg"])
        raise ValidationError(errors)


# 조회 :: 탈퇴(soft delete) 계정 제외
def find_by_account(db: Session, account: str) -> Optional[Member]:
    stmt = select(Member).where(Member.account == account, Member.is_deleted.is_(False))
    return db.execute(stmt).scalar_one_or_none()


def find_by_email(db: Session, email: str) -> Optional[Member]:
    stmt = select(Member).where(Member.email == email, Member.is_deleted.is_(False))
    return db.execute(stmt).scalar_one_or_none()


def find_by_id(db: Session, member_id: int) -> Optional[Member]:
    stmt = select(Member).where(Member.id == member_id, Member.is_deleted.is_(False))
    return db.execute(stmt).scalar_one_or_none()


# 가입 가능 여부 :: email / account 중복 체크
def can_join(db: Session, form: JoinForm) -> bool:
    if find_by_email(db, form.email) is not None:
        return False
    if find_by_account(db, form.account) is not None:
        return False
    return True


# 탈퇴 계정 포함 :: unique 제약과 같은 범위
def _is_taken(db: Session, form: JoinForm) -> bool:
    stmt = select(Member.id).where(or_(Member.account == form.account, Member.email == form.email))
    return db.execute(stmt).first() is not None


# 등록
def join(db: Session, form: JoinForm) -> Member:
    # 중복 체크 먼저 :: 실패할 요청에 hash 비용 쓰지 않음
    if not can_join(db, form) or _is_taken(db, form):
        raise ConflictError()

    return create_member(db, form)


# insert :: 중복 체크는 호출하는 쪽에서
def create_member(db: Session, form: JoinForm) -> Member:
    member = Member(
        account=form.account,
        password=hash_password(form.password),
        username=form.username,
        email=form.email,
        phone=form.phone,
        membership=Membership.ORDINARY,
        is_deleted=False,
    )
    db.add(member)

    try:
        db.commit()
    except IntegrityError:
        # 동시 가입 race :: unique 제약이 최종 판단
        db.rollback()
        raise ConflictError()

    db.refresh(member)
    logger.info("member joined: member_id=%s", member.id)
    return member


# 멘토 신청 :: 승인 절차 없이 바로 MENTOR
def apply_mentor(db: Session, member: Member, is_mentor: bool) -> Member:
    if is_mentor and member.membership != Membership.MENTOR:
        member.membership = Membership.MENTOR
        db.commit()
        db.refresh(member)
        logger.info("membership changed to MENTOR: member_id=%s", member.id)
    return member


# 멘토 목록
def find_mentors(db: Session) -> list[Member]:
    stmt = (
        select(Member)
        .where(Member.membership == Membership.MENTOR, Member.is_deleted.is_(False))
        .order_by(Member.id)
    )
    return list(db.execute(stmt).scalars().all())
