"""Domain errors raised by services and translated to HTTP responses in
``goodjob.common.exception_handlers``."""

from typing import Optional


class GoodJobError(Exception):
    status_code = 500
    message = "요청을 처리할 수 없습니다."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(GoodJobError):
    """Malformed form input; carries field name -> message.

    The join handler renders these on the form itself.
    """

    status_code = 422
    message = "입력값을 확인해주세요."

    def __init__(self, errors: dict[str, str], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)


class ConflictError(GoodJobError):
    status_code = 409
    message = "이미 사용중인 아이디 또는 이메일입니다."


class AuthenticationError(GoodJobError):
    # 계정 유추 방지 :: 아이디 없음 / 비밀번호 틀림 동일 메시지
    status_code = 401
    message = "아이디 또는 비밀번호가 일치하지 않습니다."


class NotFoundError(GoodJobError):
    status_code = 404
    message = "요청한 데이터가 존재하지 않습니다."


class ConfigurationError(GoodJobError):
    status_code = 500
    message = "서버 설정 오류입니다."
