"""프로듀서 설정 로더.

문자열 프로퍼티 맵 → 검증된 ProducerConfiguration 단방향 변환.

정책:
    - fail-fast: 해석 순서상 처음 만난 위반에서 즉시 ConfigurationError 발생
    - 부분 결과 없음: 실패 시 레코드는 만들어지지 않음
    - collect_violations()는 진단 전용이며 load()의 계약을 바꾸지 않음
"""

from __future__ import annotations

from typing import Any, Final, Protocol

from src.common.exceptions.base import ConfigurationError, MissingRequiredField
from src.common.logger import PipelineLogger
from src.core.configuration.properties import PRODUCER_PROPERTIES, PropertySpec
from src.core.dto.io.producer_config import ProducerConfiguration
from src.core.types import RawProperties


class LogSink(Protocol):
    """로더가 사용하는 최소 로깅 인터페이스 (PipelineLogger 호환)"""

    def info(self, msg: str, **kwargs: Any) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...


logger: Final = PipelineLogger.get_logger(__name__, "config")


class ConfigurationLoader:
    """프로퍼티 맵을 필드별로 해석/검증해 ProducerConfiguration을 만듭니다.

    각 필드마다:
        1. 키 조회, 없으면 기본값 문자열 사용 (필수 키는 MissingRequiredField)
        2. 대상 타입으로 파싱 (실패 시 MalformedValue)
        3. 도메인 제약 적용 (위반 시 OutOfDomainValue)
        4. 해석된 값 기록 및 `key = value` 로깅
    """

    def __init__(
        self,
        log: LogSink | None = None,
        specs: tuple[PropertySpec, ...] = PRODUCER_PROPERTIES,
    ) -> None:
        self._logger: LogSink = log or logger
        self._specs = specs

    def load(self, properties: RawProperties) -> ProducerConfiguration:
        """프로퍼티 맵을 검증된 설정 레코드로 변환합니다.

        Raises:
            ConfigurationError: 처음 발견된 위반 (MissingRequiredField,
                MalformedValue, OutOfDomainValue 중 하나)
        """
        self._logger.info("Building producer configuration.")
        resolved: dict[str, Any] = {}
        for spec in self._specs:
            value = self._resolve(spec, properties, resolved)
            resolved[spec.attr] = value
            rendered = spec.render(value)
            self._logger.info(f"{spec.key} = {rendered}", extra={"key": spec.key, "value": rendered})
        return ProducerConfiguration(**resolved)

    def collect_violations(self, properties: RawProperties) -> list[ConfigurationError]:
        """모든 필드를 평가해 위반 목록을 반환합니다 (유효하면 빈 리스트).

        파생 기본값이 참조하는 필드가 실패한 경우, 그 파생 필드는 평가하지 않습니다.
        """
        resolved: dict[str, Any] = {}
        violations: list[ConfigurationError] = []
        for spec in self._specs:
            if any(dep not in resolved for dep in spec.depends_on) and spec.key not in properties:
                continue
            try:
                resolved[spec.attr] = self._resolve(spec, properties, resolved)
            except ConfigurationError as e:
                violations.append(e)
        return violations

    def _resolve(
        self, spec: PropertySpec, properties: RawProperties, resolved: dict[str, Any]
    ) -> Any:
        raw = properties.get(spec.key)

        if spec.required:
            if not raw:
                raise MissingRequiredField(key=spec.key, value=raw, allowed=spec.validator.allowed)
        elif raw is None:
            raw = spec.default_for(resolved)

        value = spec.validator(spec.key, raw)

        if spec.advisory_minimum is not None and value < spec.advisory_minimum:
            self._logger.warning(
                f"{spec.key} = {value} is below {spec.advisory_minimum}; accepted without bound check",
                extra={"key": spec.key, "value": raw},
            )
        return value


def load(properties: RawProperties) -> ProducerConfiguration:
    """기본 로거를 사용하는 ConfigurationLoader().load() 단축 함수"""
    return ConfigurationLoader().load(properties)
