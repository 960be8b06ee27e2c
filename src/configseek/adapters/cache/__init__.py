"""Cache adapters."""

from configseek.adapters.cache.memo_cache import MemoCache


__all__ = ["MemoCache"]
