"""Callbacks, a millisecond clock and a periodic/one-shot event scheduler."""

__version__ = "0.1.0"
__all__ = ["callback", "timing", "events"]