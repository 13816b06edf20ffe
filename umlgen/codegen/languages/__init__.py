"""
Language-specific emitters.
"""

from .dart import DartServerEmitter, create_dart_emitter

__all__ = ["DartServerEmitter", "create_dart_emitter"]
