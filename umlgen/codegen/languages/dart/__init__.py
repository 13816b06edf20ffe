"""
Dart server code generator module.

Generates persistence-backed model classes for cloud functions.
"""

from .generator import DartServerEmitter, PLACEHOLDER_STATEMENT, create_dart_emitter

__all__ = [
    "DartServerEmitter",
    "PLACEHOLDER_STATEMENT",
    "create_dart_emitter",
]
