"""ISP demo package exports."""

from .config import Settings, get_settings
from .demo import main, run_demo

__all__ = [
    "Settings",
    "get_settings",
    "main",
    "run_demo",
]
