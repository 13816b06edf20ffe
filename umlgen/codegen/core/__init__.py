"""
Core code generation components.

Provides the model, traversal and output utilities used by emitters.
"""

from .errors import (
    GeneratorError,
    DirectoryCreateError,
    FileWriteError,
    UnresolvedRelationshipError,
)
from .generator import ModelEmitter, EmitResult, EmitFailure, emit_model
from .model import (
    NodeKind,
    RelationshipKind,
    ModelNode,
    PackageNode,
    ClassNode,
    InterfaceNode,
    EnumNode,
    EnumLiteralNode,
    AttributeNode,
    OperationNode,
    ParameterNode,
    OtherNode,
    RelationshipEdge,
    TargetRef,
    ModelSnapshot,
    inheritance_targets_of,
    convert_mdj_document,
)
from .naming import NameFormatter, format_type_name, indent_unit
from .config import (
    EmitterConfig,
    ConfigManager,
    ConfigError,
    InvalidConfigurationError,
    load_config,
)
from .sink import FileSink, LocalFileSink, MemoryFileSink
from .templates import TemplateEngine, TemplateError, create_template_engine
from .writer import CodeWriter

__all__ = [
    # Errors
    "GeneratorError",
    "DirectoryCreateError",
    "FileWriteError",
    "UnresolvedRelationshipError",
    # Traversal
    "ModelEmitter",
    "EmitResult",
    "EmitFailure",
    "emit_model",
    # Model
    "NodeKind",
    "RelationshipKind",
    "ModelNode",
    "PackageNode",
    "ClassNode",
    "InterfaceNode",
    "EnumNode",
    "EnumLiteralNode",
    "AttributeNode",
    "OperationNode",
    "ParameterNode",
    "OtherNode",
    "RelationshipEdge",
    "TargetRef",
    "ModelSnapshot",
    "inheritance_targets_of",
    "convert_mdj_document",
    # Naming
    "NameFormatter",
    "format_type_name",
    "indent_unit",
    # Configuration
    "EmitterConfig",
    "ConfigManager",
    "ConfigError",
    "InvalidConfigurationError",
    "load_config",
    # Output
    "FileSink",
    "LocalFileSink",
    "MemoryFileSink",
    "CodeWriter",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
