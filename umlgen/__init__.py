"""
umlgen: generate cloud-function model classes from UML class models.
"""

from .codegen import (
    DartServerEmitter,
    EmitResult,
    EmitterConfig,
    ModelSnapshot,
    __version__,
    convert_mdj_document,
    generate_from_document,
    generate_model,
)

__all__ = [
    "DartServerEmitter",
    "EmitResult",
    "EmitterConfig",
    "ModelSnapshot",
    "__version__",
    "convert_mdj_document",
    "generate_from_document",
    "generate_model",
]
