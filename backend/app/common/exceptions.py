import logging

from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    NotAuthenticated,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

logger = logging.getLogger(__name__)


class Rejected(APIException):
    """클라이언트가 고칠 수 있는 실패 (입력 형식, 비즈니스 규칙 위반 등)"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "REJECTED"
    default_detail = "request rejected"

    def __init__(self, code: str, message: str):
        super().__init__(detail=message, code=code)
        self.error_code = code
        self.message = message


class Unexpected(APIException):
    """
    예상하지 못한 저장소/외부 연동 실패.
    원인은 로그에만 남기고 응답에는 노출하지 않는다.
    """

    status_code = status.HTTP_409_CONFLICT
    default_code = "UNEXPECTED_ERROR"
    default_detail = "unexpected error occurred"

    def __init__(self, cause: Exception = None):
        super().__init__()
        self.cause = cause


def _envelope(code: str, message: str):
    return {
        "success": False,
        "data": None,
        "error": {"code": code, "message": message},
    }


def _first_validation_message(detail):
    # serializer 필드 선언 순서대로 첫 번째 에러만 노출
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_validation_message(value)
    if isinstance(detail, list) and detail:
        return _first_validation_message(detail[0])
    return str(detail)


def custom_exception_handler(exc, context):
    if isinstance(exc, Unexpected):
        view = context.get("view")
        logger.error(
            "unexpected failure in %s",
            view.__class__.__name__ if view else "-",
            exc_info=exc.cause or exc,
        )
    elif isinstance(exc, Rejected):
        logger.info("rejected code=%s message=%s", exc.error_code, exc.message)

    response = exception_handler(exc, context)
    if response is None:
        # DRF 가 모르는 예외도 envelope 로 (원인은 로그에만)
        wrapped = Unexpected(exc)
        view = context.get("view")
        logger.error(
            "unhandled failure in %s",
            view.__class__.__name__ if view else "-",
            exc_info=exc,
        )
        return Response(
            _envelope(wrapped.default_code, str(wrapped.default_detail)),
            status=wrapped.status_code,
        )

    if isinstance(exc, Rejected):
        response.data = _envelope(exc.error_code, exc.message)
    elif isinstance(exc, Unexpected):
        response.data = _envelope(exc.default_code, str(exc.default_detail))
    elif isinstance(exc, ValidationError):
        response.data = _envelope(
            "VALIDATION_ERROR", _first_validation_message(exc.detail)
        )
    elif isinstance(exc, NotAuthenticated):
        response.data = _envelope("UNAUTHORIZED", "Authorization header missing")
    elif isinstance(exc, PermissionDenied):
        response.data = _envelope("FORBIDDEN", "Permission denied")
    elif isinstance(exc, (InvalidToken, TokenError)):
        # 만료/위조를 더 정확히 나누려면 exc.detail 내용으로 분기
        response.data = _envelope("INVALID_TOKEN", "Invalid token")
    else:
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        response.data = _envelope(
            str(getattr(exc, "default_code", "error")).upper(), str(detail)
        )

    return response
