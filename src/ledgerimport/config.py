"""Runtime settings read from environment variables."""

import os
from typing import Optional

from ledgerimport.domain.errors import ValidationError

MAX_STATEMENT_BYTES_ENV_VAR = "LEDGERIMPORT_MAX_STATEMENT_BYTES"
DEFAULT_MAX_STATEMENT_BYTES = 5 * 1024 * 1024


def get_max_statement_bytes(value: Optional[str] = None) -> int:
    """Resolve the statement size ceiling in bytes.

    Args:
        value: Explicit setting. If None, checks LEDGERIMPORT_MAX_STATEMENT_BYTES
            environment variable, then falls back to 5 MiB

    Returns:
        Positive byte limit

    Raises:
        ValidationError: If the setting is not a positive integer
    """
    if value is None:
        value = os.environ.get(MAX_STATEMENT_BYTES_ENV_VAR)

    if value is None or not str(value).strip():
        return DEFAULT_MAX_STATEMENT_BYTES

    try:
        limit = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid statement size limit '{value}': must be an integer")

    if limit <= 0:
        raise ValidationError(f"Invalid statement size limit '{value}': must be positive")
    return limit
