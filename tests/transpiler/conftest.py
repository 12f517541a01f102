"""
Pytest configuration and shared fixtures for transpiler tests.

This module contains fixtures that are shared across multiple test modules.
"""

import pytest

from ts2glsl.ast.nodes import (
    BlockStatement,
    FunctionDeclaration,
    Identifier,
    ReturnStatement,
    TSTypeReference,
    VariableDeclaration,
    VariableDeclarator,
)
from ts2glsl.transpiler.models import TranspilerConfig


def _type_ref(name: str, *arguments: str) -> TSTypeReference:
    """Build a type reference such as ``Uniform<float>``."""
    args = [_type_ref(arg) for arg in arguments] if arguments else None
    return TSTypeReference(Identifier(name), args)


def _declaration(name: str, annotation=None) -> VariableDeclaration:
    """Build a single-declarator ambient ``let`` declaration."""
    return VariableDeclaration(
        [VariableDeclarator(Identifier(name, annotation))], declare=True
    )


@pytest.fixture
def config():
    """Fixture providing the default configuration."""
    return TranspilerConfig()


@pytest.fixture
def uniform_time():
    """Fixture providing ``declare let time: Uniform<float>``."""
    return _declaration("time", _type_ref("Uniform", "float"))


@pytest.fixture
def identity_function():
    """Fixture providing ``function identity(x: float): float { return x; }``."""
    return FunctionDeclaration(
        id=Identifier("identity"),
        params=[Identifier("x", _type_ref("float"))],
        body=BlockStatement([ReturnStatement(Identifier("x"))]),
        return_type=_type_ref("float"),
    )


@pytest.fixture
def type_ref():
    """Fixture providing a builder for type reference nodes."""
    return _type_ref


@pytest.fixture
def declaration():
    """Fixture providing a builder for single-declarator declarations."""
    return _declaration
