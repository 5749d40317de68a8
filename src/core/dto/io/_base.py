"""I/O 경계 DTO 기반 클래스 모듈"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# ========================================
# ConfigDict (전역 설정)
# ========================================

FROZEN_CONFIG = ConfigDict(
    # 런타임 검증
    extra="forbid",  # 알 수 없는 필드 금지
    strict=True,  # 문자열 → 정수 자동 변환 금지 (파싱은 로더 책임)
    # 불변성
    frozen=True,  # 불변 객체 (해시 가능, 스레드 간 공유 안전)
    arbitrary_types_allowed=False,
)


class BaseIOModelDTO(BaseModel):
    """I/O 경계용 공통 Pydantic v2 베이스 모델.

    특징:
    - 불변 객체 (frozen=True)
    - 알 수 없는 필드 금지 (extra="forbid")
    - strict 모드: 이미 파싱된 타입만 허용
    """

    model_config = FROZEN_CONFIG
