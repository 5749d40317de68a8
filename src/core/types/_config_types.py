from __future__ import annotations

import zlib
from enum import StrEnum
from typing import Final, Mapping, TypeAlias


class CompressionCodec(StrEnum):
    """프로듀서 압축 코덱 (저장 형태는 항상 소문자)"""

    NONE = "none"
    GZIP = "gzip"
    SNAPPY = "snappy"


class IntWidth(StrEnum):
    """고정 폭 정수 타입 (파싱 범위 결정용)"""

    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"


INT_BOUNDS: Final[dict[IntWidth, tuple[int, int]]] = {
    IntWidth.INT16: (-(2**15), 2**15 - 1),
    IntWidth.INT32: (-(2**31), 2**31 - 1),
    IntWidth.INT64: (-(2**63), 2**63 - 1),
}

ONE_MB: Final[int] = 1024 * 1024

# 센티널 값
NO_ENQUEUE_TIMEOUT: Final[int] = -1
DEFAULT_COMPRESSION_LEVEL: Final[int] = zlib.Z_DEFAULT_COMPRESSION

VALID_REQUIRED_ACKS: Final[tuple[int, ...]] = (-1, 0, 1)
SEND_BUFFER_HEADROOM: Final[int] = 200

# host:port (호스트는 영숫자, 점, 하이픈)
BROKER_ADDRESS_PATTERN: Final[str] = r"[.a-zA-Z0-9-]+:[0-9]+"

RawProperties: TypeAlias = Mapping[str, str]
