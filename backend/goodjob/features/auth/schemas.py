from pydantic import BaseModel


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str
    access_max_age: int
    refresh_max_age: int
