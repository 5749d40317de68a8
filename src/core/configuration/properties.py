"""프로듀서 프로퍼티 정의 테이블.

선언 순서가 곧 해석 순서입니다. send.buffer.size의 기본값은 message.buffer.size의
해석 결과에서 파생되므로 반드시 그 뒤에 위치해야 합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Final, TypeAlias

from src.core.configuration.validators import (
    BrokerListField,
    CodecField,
    FieldValidator,
    IntegerField,
)
from src.core.types import (
    DEFAULT_COMPRESSION_LEVEL,
    NO_ENQUEUE_TIMEOUT,
    ONE_MB,
    SEND_BUFFER_HEADROOM,
    VALID_REQUIRED_ACKS,
    CompressionCodec,
    IntWidth,
)

# 이미 해석된 필드(attr -> value)로부터 기본값 문자열을 계산
DefaultFactory: TypeAlias = Callable[[dict[str, Any]], str]


@dataclass(slots=True, frozen=True)
class PropertySpec:
    """단일 프로퍼티 정의.

    Attributes:
        key: 점 표기 프로퍼티 키 (metadata.broker.list)
        attr: ProducerConfiguration 속성 이름
        validator: 파싱 + 제약 검증기
        default: 기본값 문자열 또는 파생 기본값 팩토리 (None이면 필수)
        depends_on: 파생 기본값이 참조하는 속성들
        advisory_minimum: 검증하지 않지만 미만이면 경고를 남길 하한
    """

    key: str
    attr: str
    validator: FieldValidator
    default: str | DefaultFactory | None = None
    depends_on: tuple[str, ...] = field(default=())
    advisory_minimum: int | None = None

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def env_name(self) -> str:
        """PRODUCER_ 접두사 환경변수 이름 (metadata.broker.list → PRODUCER_METADATA_BROKER_LIST)"""
        return "PRODUCER_" + self.key.upper().replace(".", "_")

    def default_for(self, resolved: dict[str, Any]) -> str | None:
        if callable(self.default):
            return self.default(resolved)
        return self.default

    def render(self, value: Any) -> str:
        """해석된 값을 다시 프로퍼티 문자열로 변환"""
        match value:
            case tuple():
                return ",".join(value)
            case Enum():
                return str(value.value)
            case _:
                return str(value)


def _send_buffer_default(resolved: dict[str, Any]) -> str:
    return str(resolved["message_buffer_size"] + SEND_BUFFER_HEADROOM)


_NON_NEGATIVE_INT: Final = IntegerField(IntWidth.INT32, minimum=0)
_NON_NEGATIVE_LONG: Final = IntegerField(IntWidth.INT64, minimum=0)
_POSITIVE_INT: Final = IntegerField(IntWidth.INT32, minimum=1)


PRODUCER_PROPERTIES: Final[tuple[PropertySpec, ...]] = (
    PropertySpec("metadata.broker.list", "metadata_broker_list", BrokerListField()),
    PropertySpec(
        "request.required.acks",
        "request_required_acks",
        IntegerField(IntWidth.INT16, choices=VALID_REQUIRED_ACKS),
        default="1",
    ),
    PropertySpec("request.timeout.ms", "request_timeout_ms", _NON_NEGATIVE_INT, default="10000"),
    PropertySpec(
        "compression.codec",
        "compression_codec",
        CodecField(),
        default=CompressionCodec.NONE.value,
    ),
    PropertySpec(
        "message.send.max.retries", "message_send_max_retries", _NON_NEGATIVE_INT, default="3"
    ),
    PropertySpec("retry.backoff.ms", "retry_backoff_ms", _NON_NEGATIVE_INT, default="100"),
    # 하한 미검증: 음수는 경고만 남기고 통과 (send.buffer.bytes 동일)
    PropertySpec(
        "topic.metadata.refresh.interval.ms",
        "topic_metadata_refresh_interval_ms",
        IntegerField(IntWidth.INT64),
        default=str(600 * 1000),
        advisory_minimum=0,
    ),
    PropertySpec(
        "queue.buffering.max.ms", "queue_buffering_max_ms", _NON_NEGATIVE_LONG, default="5000"
    ),
    PropertySpec(
        "queue.enqueue.timeout.ms",
        "queue_enqueue_timeout_ms",
        IntegerField(IntWidth.INT64, minimum=0, sentinel=(NO_ENQUEUE_TIMEOUT, "no timeout")),
        default=str(NO_ENQUEUE_TIMEOUT),
    ),
    PropertySpec(
        "send.buffer.bytes",
        "send_buffer_bytes",
        IntegerField(IntWidth.INT32),
        default=str(100 * 1024),
        advisory_minimum=0,
    ),
    PropertySpec("message.buffer.size", "message_buffer_size", _POSITIVE_INT, default=str(ONE_MB)),
    PropertySpec(
        "send.buffer.size",
        "send_buffer_size",
        _POSITIVE_INT,
        default=_send_buffer_default,
        depends_on=("message_buffer_size",),
    ),
    PropertySpec("response.buffer.size", "response_buffer_size", _POSITIVE_INT, default="100"),
    PropertySpec(
        "gzip.compression.level",
        "compression_level",
        IntegerField(
            IntWidth.INT32,
            minimum=0,
            maximum=9,
            sentinel=(DEFAULT_COMPRESSION_LEVEL, "default compression"),
        ),
        default=str(DEFAULT_COMPRESSION_LEVEL),
    ),
)

PROPERTIES_BY_KEY: Final[dict[str, PropertySpec]] = {spec.key: spec for spec in PRODUCER_PROPERTIES}
