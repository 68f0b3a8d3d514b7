from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# 비밀번호 hash :: 변환
def hash_password(plain_password: str) -> str:
    return _pwd_context.hash(plain_password)

# 비밀번호 verify :: 복원 없이 비교
def verify_password(plain_password: str, password_hash: str) -> bool:
    return _pwd_context.verify(plain_password, password_hash)

# 없는 계정도 verify 비용은 동일하게
def dummy_verify() -> None:
    _pwd_context.dummy_verify()
