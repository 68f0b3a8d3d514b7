from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

from goodjob.common.schemas.base import ORMBase
from goodjob.models.member import Membership


# 회원가입 form (camelCase form field 그대로 받음)
class JoinForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account: str = Field(min_length=4, max_length=20)
    password: str = Field(min_length=4, max_length=30)
    confirm_password: str = Field(alias="confirmPassword")
    username: str = Field(min_length=2, max_length=20)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=20)

    # 비밀번호는 입력 그대로 (login 검증과 동일해야 함)
    @field_validator("account", "username", "email", "phone", mode="before")
    @classmethod
    def _strip(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def _blank_phone(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("confirm_password")
    @classmethod
    def _password_match(cls, v: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and v != password:
            raise ValueError("비밀번호가 일치하지 않습니다.")
        return v


class MemberRead(ORMBase):
    id: int
    account: str
    username: str
    email: str
    phone: Optional[str] = None
    membership: Membership
