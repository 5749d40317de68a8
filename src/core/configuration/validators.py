"""필드 단위 검증기 모듈.

각 검증기는 `(key, raw) -> typed value` 형태의 호출 가능 객체이며,
`allowed`에 운영자에게 보여줄 허용 도메인 설명을 가집니다.

- 파싱 실패(형식, 타입 폭 초과, host:port 형태 불일치) → MalformedValue
- 범위/열거 제약 위반 → OutOfDomainValue
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Final, Protocol

from src.common.exceptions.base import MalformedValue, OutOfDomainValue
from src.core.types import (
    BROKER_ADDRESS_PATTERN,
    INT_BOUNDS,
    PARSE_EXCEPTIONS,
    CompressionCodec,
    IntWidth,
)

# 부호 + ASCII 숫자만 허용 (공백, 밑줄, 소수점 불가)
_INTEGER_PATTERN: Final = re.compile(r"[+-]?[0-9]+")
_BROKER_PATTERN: Final = re.compile(BROKER_ADDRESS_PATTERN)


class FieldValidator(Protocol):
    allowed: str

    def __call__(self, key: str, raw: str) -> Any: ...


def parse_fixed_width_int(raw: str, width: IntWidth) -> int:
    """문자열을 고정 폭 정수로 파싱합니다.

    Raises:
        ValueError: 정수 형식이 아니거나 폭을 벗어난 경우
    """
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ValueError(f"not an integer: {raw!r}")
    value = int(raw)
    low, high = INT_BOUNDS[width]
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in {width}")
    return value


@dataclass(slots=True, frozen=True)
class IntegerField:
    """정수 필드 검증기.

    Attributes:
        width: 파싱 폭 (int16/int32/int64)
        minimum: 하한 (포함)
        maximum: 상한 (포함)
        choices: 허용 값 집합 (지정 시 범위 대신 사용)
        sentinel: 하한 예외로 허용하는 특수 값과 그 의미
    """

    width: IntWidth
    minimum: int | None = None
    maximum: int | None = None
    choices: tuple[int, ...] | None = None
    sentinel: tuple[int, str] | None = None

    @property
    def allowed(self) -> str:
        if self.choices is not None:
            return "one of " + ", ".join(str(c) for c in self.choices)

        if self.minimum is not None and self.maximum is not None:
            bound = f"an integer in [{self.minimum}, {self.maximum}]"
        elif self.minimum is not None:
            bound = f"an integer >= {self.minimum}"
        elif self.maximum is not None:
            bound = f"an integer <= {self.maximum}"
        else:
            bound = f"an {self.width} integer"

        if self.sentinel is not None:
            value, meaning = self.sentinel
            return f"{value} ({meaning}) or {bound}"
        return bound

    def __call__(self, key: str, raw: str) -> int:
        try:
            value = parse_fixed_width_int(raw, self.width)
        except PARSE_EXCEPTIONS as e:
            raise MalformedValue(key=key, value=raw, allowed=self.allowed) from e

        if self.sentinel is not None and value == self.sentinel[0]:
            return value
        if self.choices is not None and value not in self.choices:
            raise OutOfDomainValue(key=key, value=raw, allowed=self.allowed)
        if self.minimum is not None and value < self.minimum:
            raise OutOfDomainValue(key=key, value=raw, allowed=self.allowed)
        if self.maximum is not None and value > self.maximum:
            raise OutOfDomainValue(key=key, value=raw, allowed=self.allowed)
        return value


@dataclass(slots=True, frozen=True)
class BrokerListField:
    """쉼표 구분 host:port 목록 검증기 (토큰마다 독립 검증, 빈 토큰 불가)"""

    allowed: str = "a comma-separated list of host:port (localhost:9092,192.168.1.1:9093)"

    def __call__(self, key: str, raw: str) -> tuple[str, ...]:
        brokers = tuple(raw.split(","))
        for broker in brokers:
            if not _BROKER_PATTERN.fullmatch(broker):
                raise MalformedValue(key=key, value=raw, allowed=self.allowed)
        return brokers


@dataclass(slots=True, frozen=True)
class CodecField:
    """압축 코덱 검증기 (대소문자 무시, 소문자로 정규화)"""

    allowed: str = "one of " + ", ".join(c.value for c in CompressionCodec)

    def __call__(self, key: str, raw: str) -> CompressionCodec:
        normalized = raw.lower()
        try:
            return CompressionCodec(normalized)
        except ValueError as e:
            raise OutOfDomainValue(key=key, value=raw, allowed=self.allowed) from e
