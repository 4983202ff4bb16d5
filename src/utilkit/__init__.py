"""
utilkit

A general-purpose utility toolkit: temporal function combinators
(debounce, throttle, memoize, retry, once, curry, compose, pipe) plus
helpers for sequences, dicts, strings, numbers, dates and input validation.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .core.models import DebounceOptions, ThrottleOptions, PasswordStrengthOptions
from .utils import *  # noqa: F401,F403
from .utils import __all__ as _utils_all

__all__ = [
    "DebounceOptions",
    "ThrottleOptions",
    "PasswordStrengthOptions",
    *_utils_all,
]
