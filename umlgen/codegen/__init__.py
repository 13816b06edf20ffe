"""
UML Code Generation Module

Generates source files from UML class models.
"""

from pathlib import Path
from typing import Optional, Union

from .core.generator import ModelEmitter, EmitResult, EmitFailure, emit_model
from .core.errors import (
    GeneratorError,
    DirectoryCreateError,
    FileWriteError,
    UnresolvedRelationshipError,
)
from .core.model import ModelSnapshot, convert_mdj_document
from .core.config import (
    EmitterConfig,
    ConfigManager,
    InvalidConfigurationError,
    load_config,
)
from .core.sink import FileSink, LocalFileSink, MemoryFileSink
from .languages.dart import DartServerEmitter, create_dart_emitter


# Convenience functions
def generate_model(
    snapshot: ModelSnapshot,
    output_dir: Union[str, Path],
    config: Optional[EmitterConfig] = None,
    sink: Optional[FileSink] = None,
) -> EmitResult:
    """
    Generate code for a whole model.

    Args:
        snapshot: Model to emit; its base element is the root package
        output_dir: Existing directory receiving the root package directory
        config: Emitter configuration
        sink: Output destination (defaults to the local file system)

    Returns:
        EmitResult listing written paths and every failed subtree

    Raises:
        InvalidConfigurationError: If the configuration cannot be used
    """
    emitter = create_dart_emitter(snapshot, config, sink)
    return emit_model(emitter, output_dir)


def generate_from_document(
    document: dict,
    output_dir: Union[str, Path],
    package: Optional[str] = None,
    config: Optional[EmitterConfig] = None,
    sink: Optional[FileSink] = None,
) -> EmitResult:
    """
    Generate code from a parsed .mdj document.

    Args:
        document: Parsed project JSON
        output_dir: Existing directory receiving the root package directory
        package: Name or id of the package to generate (default: first model)
        config: Emitter configuration
        sink: Output destination

    Returns:
        EmitResult for the selected package
    """
    snapshot = convert_mdj_document(document)
    return generate_model(select_package(snapshot, package), output_dir, config, sink)


def select_package(snapshot: ModelSnapshot, package: Optional[str] = None) -> ModelSnapshot:
    """
    Re-root a snapshot on the package to generate.

    Without a name the first package below the document root is used, which
    for a project document is its first model.

    Raises:
        GeneratorError: If no matching package exists
    """
    if package:
        selected = snapshot.find_package(package)
        if selected is None:
            raise GeneratorError(f"Package not found: {package}")
        return snapshot.with_base(selected)

    packages = [p for p in snapshot.packages() if p is not snapshot.root]
    if not packages:
        return snapshot
    return snapshot.with_base(packages[0])


# Version info
__version__ = "0.1.0"

# Export main interfaces
__all__ = [
    "ModelEmitter",
    "DartServerEmitter",
    "EmitResult",
    "EmitFailure",
    "GeneratorError",
    "DirectoryCreateError",
    "FileWriteError",
    "UnresolvedRelationshipError",
    "InvalidConfigurationError",
    "ModelSnapshot",
    "EmitterConfig",
    "ConfigManager",
    "FileSink",
    "LocalFileSink",
    "MemoryFileSink",
    "convert_mdj_document",
    "emit_model",
    "generate_model",
    "generate_from_document",
    "select_package",
    "load_config",
]
