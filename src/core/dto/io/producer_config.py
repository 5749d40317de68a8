"""프로듀서 설정 레코드 (불변)

ConfigurationLoader가 한 번 생성하고, 프로듀서 세션이 끝날 때까지 읽기 전용으로 공유됩니다.
필드 제약은 로더의 검증 규칙과 동일하며, 로더를 거치지 않은 직접 생성/복사도 같은 범위로 막습니다.
에러 분류(MissingRequiredField 등)는 로더 책임이고, 여기서는 pydantic ValidationError가 발생합니다.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping

from pydantic import Field, StringConstraints

from src.core.configuration.properties import PRODUCER_PROPERTIES
from src.core.dto.io._base import BaseIOModelDTO
from src.core.types import (
    BROKER_ADDRESS_PATTERN,
    DEFAULT_COMPRESSION_LEVEL,
    NO_ENQUEUE_TIMEOUT,
    CompressionCodec,
)

BrokerAddress = Annotated[str, StringConstraints(pattern=rf"^{BROKER_ADDRESS_PATTERN}$")]
NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(ge=1)]


class ProducerConfiguration(BaseIOModelDTO):
    """검증 완료된 프로듀서 설정.

    모든 필드는 로더에서 기본값 적용과 도메인 검증을 거친 값입니다.
    변경이 필요하면 `replace()`로 새 레코드를 만듭니다.

    Example:
        >>> config = ConfigurationLoader().load({"metadata.broker.list": "a:1,b:2"})
        >>> config.metadata_broker_list
        ('a:1', 'b:2')
        >>> faster = config.replace({"queue.buffering.max.ms": "10"})
    """

    # 프로듀서 클라이언트 호환 옵션
    metadata_broker_list: tuple[BrokerAddress, ...] = Field(
        ..., min_length=1, description="host:port 브로커 목록"
    )
    request_required_acks: Literal[-1, 0, 1]
    request_timeout_ms: NonNegativeInt
    compression_codec: CompressionCodec
    message_send_max_retries: NonNegativeInt
    retry_backoff_ms: NonNegativeInt
    topic_metadata_refresh_interval_ms: int
    queue_buffering_max_ms: NonNegativeInt
    # -1 센티널 또는 0 이상
    queue_enqueue_timeout_ms: int = Field(..., ge=NO_ENQUEUE_TIMEOUT, description="-1 = 타임아웃 없음")
    send_buffer_bytes: int

    # 클라이언트 전용 옵션
    message_buffer_size: PositiveInt
    send_buffer_size: PositiveInt
    response_buffer_size: PositiveInt
    compression_level: int = Field(
        ..., ge=DEFAULT_COMPRESSION_LEVEL, le=9, description="-1 = zlib 기본 압축 레벨"
    )

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> ProducerConfiguration:
        """pydantic 기본 model_copy(update=...)는 검증을 건너뛰므로 다시 검증합니다."""
        copied = super().model_copy(update=update, deep=deep)
        if update:
            return type(self).model_validate(copied.model_dump())
        return copied

    def to_properties(self) -> dict[str, str]:
        """레코드를 점 표기 프로퍼티 맵으로 되돌립니다 (load 입력과 동일 형식)."""
        properties: dict[str, str] = {}
        for spec in PRODUCER_PROPERTIES:
            value = getattr(self, spec.attr)
            properties[spec.key] = spec.render(value)
        return properties

    def replace(self, overrides: Mapping[str, str]) -> ProducerConfiguration:
        """오버라이드를 적용한 새 레코드를 반환합니다 (자신은 변경되지 않음).

        send.buffer.size는 현재 값이 그대로 유지되므로, message.buffer.size만 바꿔도
        파생 기본값이 다시 계산되지 않습니다.

        Raises:
            ConfigurationError: 오버라이드 적용 결과가 유효하지 않을 때
        """
        # NOTE: 순환 참조 방지를 위해 지연 import
        from src.core.configuration.loader import ConfigurationLoader

        merged = self.to_properties()
        merged.update(overrides)
        return ConfigurationLoader().load(merged)
