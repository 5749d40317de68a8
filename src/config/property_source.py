"""프로듀서 프로퍼티 원본 수집

원본 형식(파일/환경변수)은 호출 측 관심사이며, 이 모듈은 문자열 맵만 만들어 줍니다.
검증은 하지 않습니다 (ConfigurationLoader 책임).

우선순위:
    1. 환경변수 PRODUCER_<KEY> (예: PRODUCER_METADATA_BROKER_LIST)
    2. .properties 파일
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from jproperties import Properties

from src.config.settings import property_source_settings
from src.core.configuration.properties import PRODUCER_PROPERTIES


def read_properties_file(path: str | Path) -> dict[str, str]:
    """Java 스타일 .properties 파일을 읽어 문자열 맵으로 반환합니다.

    - `key=value`, `key: value`, `key value` 모두 허용
    - 줄 앞 공백 무시, `\\` 줄 끝은 다음 줄과 이어붙임
    - `#`, `!` 로 시작하는 줄은 주석
    - 값 없는 키는 빈 문자열
    - 중복 키는 마지막 값 사용

    Raises:
        OSError: 파일을 열 수 없을 때
        jproperties.ParseError: 구문 오류
    """
    parser = Properties()
    with open(path, "rb") as f:
        parser.load(f, encoding="utf-8")
    return {key: prop.data for key, prop in parser.items()}


def properties_from_env(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """인식 가능한 키에 대해서만 PRODUCER_<KEY> 환경변수 값을 수집합니다."""
    env = os.environ if environ is None else environ
    return {spec.key: env[spec.env_name] for spec in PRODUCER_PROPERTIES if spec.env_name in env}


def resolve_raw_properties(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """파일 값 위에 환경변수 값을 덮어쓴 최종 프로퍼티 맵.

    Args:
        path: .properties 경로 (기본: PRODUCER_PROPERTIES_FILE)
        environ: 환경변수 맵 (기본: os.environ)
    """
    source = path or property_source_settings.properties_file

    properties: dict[str, str] = {}
    if source is not None:
        properties.update(read_properties_file(source))
    if property_source_settings.env_overrides:
        properties.update(properties_from_env(environ))
    return properties
