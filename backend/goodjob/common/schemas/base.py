from pydantic import BaseModel, ConfigDict


# ORM 객체 -> response schema 변환용
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)
