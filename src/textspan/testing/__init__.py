from __future__ import annotations

from .corpus import describe_pair, generate_spans

__all__ = ["describe_pair", "generate_spans"]
