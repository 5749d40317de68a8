"""
confluent-kafka 클라이언트 설정 변환

검증된 ProducerConfiguration을 confluent-kafka(librdkafka) 프로퍼티 이름으로 옮기는
순수 변환 함수입니다. 클라이언트 생성이나 브로커 연결은 하지 않습니다.
"""

from typing import Any

from src.core.dto.io.producer_config import ProducerConfiguration


def producer_config(configuration: ProducerConfiguration, **overrides: Any) -> dict:
    """ProducerConfiguration을 confluent-kafka Producer 설정 딕셔너리로 변환.

    - message.buffer.size / send.buffer.size / response.buffer.size 는 클라이언트 전용
      버퍼 옵션이라 librdkafka 대응 키가 없어 제외
    - queue.enqueue.timeout.ms 도 대응 키가 없어 제외

    Args:
        configuration: 검증 완료된 설정 레코드
        **overrides: 사용자 지정 설정으로 덮어쓸 값들

    Returns:
        confluent-kafka Producer 설정 딕셔너리
    """
    cfg = {
        # 필수
        "bootstrap.servers": ",".join(configuration.metadata_broker_list),
        # 안정성
        "acks": configuration.request_required_acks,
        "request.timeout.ms": configuration.request_timeout_ms,
        # 재시도
        "message.send.max.retries": configuration.message_send_max_retries,
        "retry.backoff.ms": configuration.retry_backoff_ms,
        "topic.metadata.refresh.interval.ms": configuration.topic_metadata_refresh_interval_ms,
        # 배칭
        "queue.buffering.max.ms": configuration.queue_buffering_max_ms,  # linger.ms 별칭
        "socket.send.buffer.bytes": configuration.send_buffer_bytes,
        # 압축
        "compression.type": configuration.compression_codec.value,
        "compression.level": configuration.compression_level,
    }

    cfg.update(overrides)  # 사용자 지정 값으로 덮어쓰기
    return cfg
