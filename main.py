"""애플리케이션 진입점

프로듀서 설정 검증 도구
- .properties 파일 + PRODUCER_<KEY> 환경변수에서 프로퍼티 수집
- ConfigurationLoader로 검증 (fail-fast)
- 해석된 설정을 JSON으로 출력

Usage:
    python main.py --properties producer.properties
    python main.py --properties producer.properties --check
    PRODUCER_METADATA_BROKER_LIST=localhost:9092 python main.py
"""

from __future__ import annotations

import argparse
import sys

import orjson

from src.common.exceptions.base import ConfigurationError
from src.common.logger import PipelineLogger
from src.config.property_source import resolve_raw_properties
from src.config.settings import app_settings
from src.core.configuration.loader import ConfigurationLoader
from src.core.configuration.loader import logger as configuration_logger
from src.core.types import SOURCE_EXCEPTIONS

logger = PipelineLogger.get_logger("main", "app")

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_INVALID = 2


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate producer configuration properties")
    parser.add_argument(
        "--properties",
        help=".properties 파일 경로 (기본: PRODUCER_PROPERTIES_FILE)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="모든 위반을 출력하고 위반이 있으면 1로 종료",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logger.info(f"환경: {app_settings.environment}")

    try:
        properties = resolve_raw_properties(args.properties)
    except SOURCE_EXCEPTIONS as e:
        logger.error(f"프로퍼티 원본 읽기 실패: {e}")
        print(f"error: cannot read properties: {e}", file=sys.stderr)
        return EXIT_INVALID

    loader = ConfigurationLoader()

    if args.check:
        violations = loader.collect_violations(properties)
        for violation in violations:
            print(f"{violation.error_code.value}: {violation}", file=sys.stderr)
        return EXIT_VIOLATIONS if violations else EXIT_OK

    try:
        configuration = loader.load(properties)
    except ConfigurationError as e:
        logger.error(f"설정 검증 실패: {e}", extra=e.to_dict())
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    sys.stdout.write(
        orjson.dumps(configuration.model_dump(mode="json"), option=orjson.OPT_INDENT_2).decode()
    )
    sys.stdout.write("\n")
    return EXIT_OK


def main() -> None:
    try:
        code = run()
    finally:
        configuration_logger.close()
        logger.close()
    sys.exit(code)


if __name__ == "__main__":
    main()
