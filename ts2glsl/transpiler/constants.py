"""
Constants and predefined values for the shader transpiler.

This module contains the closed catalog of shader types the transpiler may emit,
the host-language prelude that makes those names parseable, and the operator
precedence table used for optional parenthesization.
"""

from enum import Enum


class GLSLType(str, Enum):
    """Shader types and storage qualifiers the type resolver may produce.

    Member names are the host-language spellings; values are the emitted text.
    """

    float = "float"
    vec2 = "vec2"
    vec3 = "vec3"
    vec4 = "vec4"
    int = "int"
    matrix4 = "matrix4"
    sampler2D = "sampler2D"
    samplerCube = "samplerCube"
    sampler2DArray = "sampler2DArray"
    sampler2DShadow = "sampler2DShadow"
    void = "void"
    bool = "bool"
    Attribute = "attribute"
    Uniform = "uniform"

    def __str__(self) -> str:
        return self.value


# Host-language aliases for every catalog name; ``void`` is a host keyword
DEFAULT_TYPES: list[tuple[str, str]] = [
    ("vec2", "{ x: number, y: number }"),
    ("vec3", "{ x: number, y: number, z: number }"),
    ("vec4", "{ x: number, y: number, z: number, w: number }"),
    (
        "matrix4",
        "{ m11: number, m12: number, m13: number, m14: number, "
        "m21: number, m22: number, m23: number, m24: number, "
        "m31: number, m32: number, m33: number, m34: number, "
        "m41: number, m42: number, m43: number, m44: number }",
    ),
    ("int", "number"),
    ("float", "number"),
    ("bool", "boolean"),
    ("sampler2D", "WebGLTexture"),
    ("samplerCube", "WebGLTexture"),
    ("sampler2DArray", "WebGLTexture"),
    ("sampler2DShadow", "WebGLTexture"),
    # Storage qualifiers
    ("Uniform<X>", "X"),
    ("Attribute<X>", "X"),
]

PRELUDE: str = ";".join(f"type {name} = {alias}" for name, alias in DEFAULT_TYPES)


# Operator precedence for parenthesizing nested binary expressions
OPERATOR_PRECEDENCE: dict[str, int] = {
    # Logical operators
    "||": 2,
    "&&": 3,
    # Equality operators
    "==": 4,
    "!=": 4,
    "===": 4,
    "!==": 4,
    # Relational operators
    "<": 5,
    ">": 5,
    "<=": 5,
    ">=": 5,
    # Additive operators
    "+": 6,
    "-": 6,
    # Multiplicative operators
    "*": 7,
    "/": 7,
    "%": 7,
}
