from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.core.types import ErrorCategory, ErrorCode, ErrorDomain


@dataclass(slots=True, eq=False)
class ConfigurationError(Exception):
    """프로듀서 설정 검증 기본 예외 클래스

    운영자가 코드를 보지 않고도 설정 원본을 고칠 수 있도록
    프로퍼티 키, 수신한 원본 값, 허용 도메인을 구조화 필드로 포함하며,
    `to_dict()`는 이벤트/로그 직렬화 시 일관된 스키마를 제공합니다.
    """

    key: str
    value: str | None
    allowed: str

    error_domain: ErrorDomain = ErrorDomain.CONFIGURATION
    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __post_init__(self) -> None:
        # slots 데이터클래스에서는 인자 없는 super()가 동작하지 않음
        # args를 필드 순서대로 채워야 pickle/copy 시 같은 인자로 재생성됨
        Exception.__init__(
            self, self.key, self.value, self.allowed, self.error_domain, self.error_code
        )

    @property
    def category(self) -> ErrorCategory:
        return (self.error_domain, self.error_code)

    @property
    def message(self) -> str:
        received = "<absent>" if self.value is None else repr(self.value)
        return f"{self.key}: got {received}, expected {self.allowed}"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 이벤트 데이터로 변환"""
        return {
            "key": self.key,
            "value": self.value,
            "allowed": self.allowed,
            "error": self.message,
            "error_type": self.__class__.__name__,
            "error_domain": self.error_domain.value,
            "error_code": self.error_code.value,
        }


@dataclass(slots=True, eq=False)
class MissingRequiredField(ConfigurationError):
    """필수 키(metadata.broker.list)가 없거나 빈 문자열"""

    error_code: ErrorCode = ErrorCode.MISSING_FIELD


@dataclass(slots=True, eq=False)
class MalformedValue(ConfigurationError):
    """대상 타입으로 파싱할 수 없는 값 (정수 형식/폭, host:port 형태)"""

    error_code: ErrorCode = ErrorCode.MALFORMED_VALUE


@dataclass(slots=True, eq=False)
class OutOfDomainValue(ConfigurationError):
    """파싱은 되었으나 범위/열거 제약을 벗어난 값"""

    error_code: ErrorCode = ErrorCode.OUT_OF_DOMAIN
