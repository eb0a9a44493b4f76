#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2markup."""

from md2markup.options.base import CloneFrozenMixin
from md2markup.options.markup import CodeTheme, RenderOptions

__all__ = ["CloneFrozenMixin", "CodeTheme", "RenderOptions"]
