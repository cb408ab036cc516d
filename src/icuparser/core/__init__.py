"""Core infrastructure shared by the syntax, validation and runtime packages.

Python 3.13+.
"""

from .babel_compat import is_babel_available, require_babel
from .depth_guard import DepthGuard, depth_clamp

__all__ = ["DepthGuard", "depth_clamp", "is_babel_available", "require_babel"]
