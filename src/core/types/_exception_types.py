"""설정 검증 예외 분류용 타입 정의 모듈.

광범위한 Exception 사용을 지양하고, 의도한 예외만 명시적으로 처리하기 위해 사용합니다.
"""

from enum import StrEnum
from typing import Final, TypeAlias

from jproperties import ParseError


class ErrorDomain(StrEnum):
    """에러 도메인 분류"""

    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ErrorCode(StrEnum):
    """에러 코드 분류"""

    MISSING_FIELD = "missing_field"
    MALFORMED_VALUE = "malformed_value"
    OUT_OF_DOMAIN = "out_of_domain"
    UNKNOWN_ERROR = "unknown_error"


# ----------------------------------------------------------------------------
# Exception Constants
# ----------------------------------------------------------------------------

# 1. 문자열 → 정수 파싱 실패
# - ValueError: 부호/숫자 외 문자, 타입 폭 초과
PARSE_EXCEPTIONS: Final[tuple[type[BaseException], ...]] = (ValueError,)

# 2. 프로퍼티 파일 읽기 실패
# - OSError: 파일 없음/권한
# - UnicodeDecodeError: 인코딩 불일치
# - ParseError: .properties 구문 오류 (jproperties)
SOURCE_EXCEPTIONS: Final[tuple[type[BaseException], ...]] = (
    OSError,
    UnicodeDecodeError,
    ParseError,
)


ErrorCategory: TypeAlias = tuple[ErrorDomain, ErrorCode]
