from ts2glsl.transpiler import (
    PRELUDE,
    GLSLType,
    TranspilerConfig,
    TranspilerError,
    transpile,
)

__version__ = "0.1.0"


__all__ = [
    "PRELUDE",
    "GLSLType",
    "TranspilerConfig",
    "TranspilerError",
    "transpile",
]
