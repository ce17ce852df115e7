"""Two-operand addition with a small CLI."""

from .math_ops import add

__all__ = ["add"]
