from src.core.types._config_types import (
    BROKER_ADDRESS_PATTERN,
    DEFAULT_COMPRESSION_LEVEL,
    INT_BOUNDS,
    NO_ENQUEUE_TIMEOUT,
    ONE_MB,
    SEND_BUFFER_HEADROOM,
    VALID_REQUIRED_ACKS,
    CompressionCodec,
    IntWidth,
    RawProperties,
)
from src.core.types._exception_types import (
    PARSE_EXCEPTIONS,
    SOURCE_EXCEPTIONS,
    ErrorCategory,
    ErrorCode,
    ErrorDomain,
)

__all__ = [
    "BROKER_ADDRESS_PATTERN",
    "DEFAULT_COMPRESSION_LEVEL",
    "INT_BOUNDS",
    "NO_ENQUEUE_TIMEOUT",
    "ONE_MB",
    "SEND_BUFFER_HEADROOM",
    "VALID_REQUIRED_ACKS",
    "CompressionCodec",
    "IntWidth",
    "RawProperties",
    "PARSE_EXCEPTIONS",
    "SOURCE_EXCEPTIONS",
    "ErrorCategory",
    "ErrorCode",
    "ErrorDomain",
]
