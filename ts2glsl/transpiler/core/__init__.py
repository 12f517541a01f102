"""Core abstractions shared by the transpiler components."""

from ts2glsl.transpiler.core.interfaces import SourceParser

__all__ = ["SourceParser"]
