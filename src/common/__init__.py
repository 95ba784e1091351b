# Common utilities and shared modules
"""
Shared components used by the Livefyre client:
- Project configuration (YAML + environment)
- Logging configuration
"""

from .config import PROJECT_ROOT, Settings
from .logging import setup_logging

__all__ = [
    "PROJECT_ROOT",
    "Settings",
    "setup_logging",
]
