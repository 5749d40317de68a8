from __future__ import annotations

import logging

import pytest

from src.common.exceptions.base import (
    ConfigurationError,
    MalformedValue,
    MissingRequiredField,
    OutOfDomainValue,
)
from src.core.configuration.loader import ConfigurationLoader
from src.core.types import CompressionCodec
from tests.factory_builders import build_full_properties, build_loader, build_properties


def test_unspecified_fields_take_documented_defaults() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties())

    assert config.metadata_broker_list == ("h:1",)
    assert config.request_required_acks == 1
    assert config.request_timeout_ms == 10000
    assert config.compression_codec == CompressionCodec.NONE
    assert config.message_send_max_retries == 3
    assert config.retry_backoff_ms == 100
    assert config.topic_metadata_refresh_interval_ms == 600000
    assert config.queue_buffering_max_ms == 5000
    assert config.queue_enqueue_timeout_ms == -1
    assert config.send_buffer_bytes == 102400
    assert config.message_buffer_size == 1048576
    assert config.send_buffer_size == 1048576 + 200
    assert config.response_buffer_size == 100
    assert config.compression_level == -1


def test_every_supplied_field_is_parsed() -> None:
    loader, _ = build_loader()

    config = loader.load(build_full_properties())

    assert config.metadata_broker_list == ("kafka1:19092", "kafka2:29092")
    assert config.request_required_acks == -1
    assert config.request_timeout_ms == 30000
    assert config.compression_codec == "snappy"
    assert config.message_send_max_retries == 5
    assert config.retry_backoff_ms == 250
    assert config.topic_metadata_refresh_interval_ms == 300000
    assert config.queue_buffering_max_ms == 30
    assert config.queue_enqueue_timeout_ms == 0
    assert config.send_buffer_bytes == 131072
    assert config.message_buffer_size == 2048
    assert config.send_buffer_size == 4096
    assert config.response_buffer_size == 512
    assert config.compression_level == 6


@pytest.mark.parametrize("properties", [{}, {"metadata.broker.list": ""}])
def test_missing_or_empty_broker_list_is_missing_required_field(
    properties: dict[str, str],
) -> None:
    loader, _ = build_loader()

    with pytest.raises(MissingRequiredField) as exc_info:
        loader.load(properties)

    assert exc_info.value.key == "metadata.broker.list"


def test_broker_list_is_split_in_order() -> None:
    loader, _ = build_loader()

    config = loader.load({"metadata.broker.list": "a:1,b:2"})

    assert config.metadata_broker_list == ("a:1", "b:2")


@pytest.mark.parametrize(
    "brokers",
    ["bad-host", "a:1,bad-host", "a:1,,b:2", "a:1,", " a:1", "a:port", "host_name:1", ":9092"],
)
def test_malformed_broker_entry_is_malformed_value(brokers: str) -> None:
    loader, _ = build_loader()

    with pytest.raises(MalformedValue) as exc_info:
        loader.load({"metadata.broker.list": brokers})

    assert exc_info.value.key == "metadata.broker.list"
    assert exc_info.value.value == brokers


def test_broker_hosts_accept_dots_hyphens_and_ips() -> None:
    loader, _ = build_loader()

    config = loader.load({"metadata.broker.list": "kafka-1.example.com:9092,192.168.1.1:456"})

    assert config.metadata_broker_list == ("kafka-1.example.com:9092", "192.168.1.1:456")


@pytest.mark.parametrize("acks", ["-1", "0", "1"])
def test_valid_required_acks(acks: str) -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(request_required_acks=acks))

    assert config.request_required_acks == int(acks)


def test_required_acks_outside_set_is_out_of_domain() -> None:
    loader, _ = build_loader()

    with pytest.raises(OutOfDomainValue) as exc_info:
        loader.load(build_properties(request_required_acks="2"))

    assert exc_info.value.key == "request.required.acks"
    assert exc_info.value.value == "2"
    assert "-1, 0, 1" in str(exc_info.value)


def test_required_acks_beyond_int16_is_malformed() -> None:
    loader, _ = build_loader()

    with pytest.raises(MalformedValue):
        loader.load(build_properties(request_required_acks="40000"))


def test_compression_codec_is_normalized_to_lowercase() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(compression_codec="GZIP"))

    assert config.compression_codec == "gzip"
    assert config.compression_codec is CompressionCodec.GZIP


def test_unknown_compression_codec_reports_raw_value() -> None:
    loader, _ = build_loader()

    with pytest.raises(OutOfDomainValue) as exc_info:
        loader.load(build_properties(compression_codec="LZ4"))

    assert exc_info.value.value == "LZ4"
    assert "none, gzip, snappy" in exc_info.value.allowed


def test_send_buffer_size_defaults_from_message_buffer_size() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(message_buffer_size="2000"))

    assert config.send_buffer_size == 2200


def test_explicit_send_buffer_size_is_independent_of_message_buffer_size() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(message_buffer_size="2000", send_buffer_size="10"))

    assert config.message_buffer_size == 2000
    assert config.send_buffer_size == 10


def test_derived_send_buffer_size_overflowing_int32_is_malformed() -> None:
    loader, _ = build_loader()

    with pytest.raises(MalformedValue) as exc_info:
        loader.load(build_properties(message_buffer_size=str(2**31 - 1)))

    assert exc_info.value.key == "send.buffer.size"


@pytest.mark.parametrize(
    ("key", "raw"),
    [
        ("message.buffer.size", "0"),
        ("send.buffer.size", "0"),
        ("response.buffer.size", "0"),
        ("request.timeout.ms", "-1"),
        ("message.send.max.retries", "-1"),
        ("retry.backoff.ms", "-5"),
        ("queue.buffering.max.ms", "-1"),
    ],
)
def test_range_violations_are_out_of_domain(key: str, raw: str) -> None:
    loader, _ = build_loader()
    properties = build_properties()
    properties[key] = raw

    with pytest.raises(OutOfDomainValue) as exc_info:
        loader.load(properties)

    assert exc_info.value.key == key


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "1_000", " 10", "10 ", "0x10"])
def test_unparseable_integers_are_malformed(raw: str) -> None:
    loader, _ = build_loader()

    with pytest.raises(MalformedValue) as exc_info:
        loader.load(build_properties(request_timeout_ms=raw))

    assert exc_info.value.key == "request.timeout.ms"
    assert exc_info.value.value == raw


def test_explicit_plus_sign_is_accepted() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(retry_backoff_ms="+250"))

    assert config.retry_backoff_ms == 250


def test_enqueue_timeout_sentinel_is_accepted() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(queue_enqueue_timeout_ms="-1"))

    assert config.queue_enqueue_timeout_ms == -1


def test_enqueue_timeout_below_sentinel_is_out_of_domain() -> None:
    loader, _ = build_loader()

    with pytest.raises(OutOfDomainValue) as exc_info:
        loader.load(build_properties(queue_enqueue_timeout_ms="-2"))

    assert "-1 (no timeout)" in exc_info.value.allowed


def test_enqueue_timeout_accepts_int64_values() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(queue_enqueue_timeout_ms=str(2**40)))

    assert config.queue_enqueue_timeout_ms == 2**40


@pytest.mark.parametrize("level", ["-1", "0", "1", "9"])
def test_compression_level_range(level: str) -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(gzip_compression_level=level))

    assert config.compression_level == int(level)


@pytest.mark.parametrize("level", ["10", "-2"])
def test_compression_level_outside_range_is_out_of_domain(level: str) -> None:
    loader, _ = build_loader()

    with pytest.raises(OutOfDomainValue) as exc_info:
        loader.load(build_properties(gzip_compression_level=level))

    assert exc_info.value.key == "gzip.compression.level"


def test_unbounded_fields_accept_negative_values_with_warning() -> None:
    loader, sink = build_loader()

    config = loader.load(
        build_properties(topic_metadata_refresh_interval_ms="-1", send_buffer_bytes="-10")
    )

    assert config.topic_metadata_refresh_interval_ms == -1
    assert config.send_buffer_bytes == -10
    warnings = sink.messages("warning")
    assert len(warnings) == 2
    assert warnings[0].startswith("topic.metadata.refresh.interval.ms")
    assert warnings[1].startswith("send.buffer.bytes")


def test_first_invalid_field_in_resolution_order_wins() -> None:
    loader, _ = build_loader()
    properties = build_properties(
        request_required_acks="7", gzip_compression_level="42", message_buffer_size="0"
    )

    with pytest.raises(OutOfDomainValue) as exc_info:
        loader.load(properties)

    assert exc_info.value.key == "request.required.acks"


def test_every_resolved_field_is_logged() -> None:
    loader, sink = build_loader()

    loader.load(build_properties(compression_codec="Snappy"))

    infos = sink.messages("info")
    assert infos[0] == "Building producer configuration."
    assert "metadata.broker.list = h:1" in infos
    assert "compression.codec = snappy" in infos
    assert "send.buffer.size = 1048776" in infos
    assert len(infos) == 1 + 14


def test_nothing_is_logged_for_fields_after_failure() -> None:
    loader, sink = build_loader()

    with pytest.raises(ConfigurationError):
        loader.load(build_properties(request_timeout_ms="-1"))

    logged_keys = [extra["key"] for _, _, extra in sink.records if "key" in extra]
    assert logged_keys == ["metadata.broker.list", "request.required.acks"]


def test_loading_same_map_twice_yields_equal_records() -> None:
    loader, _ = build_loader()
    properties = build_full_properties()

    first = loader.load(properties)
    second = loader.load(properties)

    assert first == second
    assert first is not second


def test_unrecognised_keys_are_ignored() -> None:
    loader, _ = build_loader()

    config = loader.load(build_properties(**{"client_id": "producer-1"}))

    assert config == loader.load(build_properties())


def test_collect_violations_reports_every_invalid_field() -> None:
    loader, _ = build_loader()
    properties = {
        "metadata.broker.list": "bad-host",
        "request.required.acks": "7",
        "gzip.compression.level": "42",
        "retry.backoff.ms": "soon",
    }

    violations = loader.collect_violations(properties)

    assert [(type(v), v.key) for v in violations] == [
        (MalformedValue, "metadata.broker.list"),
        (OutOfDomainValue, "request.required.acks"),
        (MalformedValue, "retry.backoff.ms"),
        (OutOfDomainValue, "gzip.compression.level"),
    ]


def test_collect_violations_skips_derived_default_of_failed_dependency() -> None:
    loader, _ = build_loader()

    violations = loader.collect_violations(build_properties(message_buffer_size="0"))

    assert [v.key for v in violations] == ["message.buffer.size"]


def test_collect_violations_is_empty_for_valid_map() -> None:
    loader, _ = build_loader()

    assert loader.collect_violations(build_full_properties()) == []


def test_default_logger_emits_structured_records(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="src.core.configuration.loader.config"):
        ConfigurationLoader().load(
            build_properties(compression_codec="GZIP", send_buffer_bytes="-1")
        )

    records = [r for r in caplog.records if r.name == "src.core.configuration.loader.config"]
    assert records[0].getMessage() == "Building producer configuration."

    codec = next(r for r in records if getattr(r, "key", None) == "compression.codec")
    assert codec.levelno == logging.INFO
    assert codec.getMessage() == "compression.codec = gzip"
    assert codec.value == "gzip"
    assert codec.component == "config"

    warning = next(r for r in records if r.levelno == logging.WARNING)
    assert warning.key == "send.buffer.bytes"
    assert warning.value == "-1"
