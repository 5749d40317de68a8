"""통합 Settings 모듈 - 환경변수 기반

이 모듈의 역할:
    1. 설정 로더 도구 자체의 합리적인 기본값 제공
    2. 환경변수로 오버라이드 (우선순위 높음)
    3. 타입 안전성 보장 (Pydantic 자동 검증)

프로듀서 설정(metadata.broker.list 등)은 여기서 다루지 않습니다.
그 값들은 문자열 프로퍼티 맵으로 수집되어 ConfigurationLoader가 검증합니다.

설정 우선순위:
    1. 환경변수 (최우선) - export LOG_LEVEL=DEBUG
    2. .env 파일 - src/config/.env
    3. 코드 기본값 (settings.py 내부)

사용 예시:
    # 개발 환경 (기본값 사용)
    python main.py --properties producer.properties

    # 프로퍼티 파일 경로를 환경변수로 지정
    export PRODUCER_PROPERTIES_FILE=/etc/producer/producer.properties
    python main.py
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# 설정 파일 경로
config_dir = Path(__file__).parent


def env_settings(prefix: str) -> SettingsConfigDict:
    """.env + 환경변수 통합 설정

    Args:
        prefix: 환경변수 접두사 (예: LOG_, PRODUCER_)

    Returns:
        Pydantic 설정 딕셔너리
    """
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=config_dir / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """애플리케이션 일반 설정

    환경변수 오버라이드:
        APP_ENVIRONMENT: 실행 환경 (dev, prod, test) (기본: dev)
    """

    environment: str = "dev"
    debug: bool = False

    model_config = env_settings("APP_")


class LoggingSettings(BaseSettings):
    """로깅 설정

    환경변수 오버라이드:
        LOG_LEVEL: 로깅 레벨 (기본: INFO)
        LOG_TO_FILE: 파일 로깅 여부 (기본: false)
        LOG_DIR: 로그 디렉토리 (기본: logs)
    """

    level: str = "INFO"
    to_file: bool = False
    dir: str = "logs"

    model_config = env_settings("LOG_")


class PropertySourceSettings(BaseSettings):
    """프로듀서 프로퍼티 원본 설정

    환경변수 오버라이드:
        PRODUCER_PROPERTIES_FILE: .properties 파일 경로 (기본: 없음)
        PRODUCER_ENV_OVERRIDES: PRODUCER_<KEY> 환경변수 오버라이드 허용 (기본: true)
    """

    properties_file: Path | None = None
    env_overrides: bool = True

    model_config = env_settings("PRODUCER_")


# ========================================
# 설정 인스턴스 (싱글톤)
# ========================================

app_settings = AppSettings()
logging_settings = LoggingSettings()
property_source_settings = PropertySourceSettings()
