"""Utility modules for ucf.

Provides:
- logger: get_logger for namespaced logging
"""

from ucf.utils.logger import get_logger

__all__ = ["get_logger"]
