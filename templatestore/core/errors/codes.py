# templatestore/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
CONFIG_INVALID: Final[str] = "CONFIG_INVALID"

# per-template failures
TEMPLATE_READ_FAILED: Final[str] = "TEMPLATE_READ_FAILED"
TEMPLATE_DECODE_FAILED: Final[str] = "TEMPLATE_DECODE_FAILED"
TEMPLATE_INVALID: Final[str] = "TEMPLATE_INVALID"
TEMPLATE_COMPILE_FAILED: Final[str] = "TEMPLATE_COMPILE_FAILED"

