"""Utility modules for pipefmt.

Provides:
- logger: get_logger for logging
"""

from pipefmt.utils.logger import get_logger

__all__ = ["get_logger"]
