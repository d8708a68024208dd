"""Objects whose import location depends on the running Python version."""

__all__ = ["StrEnum"]

import sys

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum
