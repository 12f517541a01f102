"""Syntax tree model produced by the source parser."""

from ts2glsl.ast.nodes import *  # noqa: F401,F403
from ts2glsl.ast.visitor import Visitor  # noqa: F401
