from pydantic import BaseModel

# 공통 schema

# api 성공시 msg response
class ApiResponse(BaseModel):
    message: str
