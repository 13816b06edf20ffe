"""
Base emitter for all code generation targets.

Walks a model tree depth-first, creating one directory per package and one
file per class, interface and enumeration. Subclasses decide what the file
contents look like.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union
from pathlib import Path

from umlgen.logging_config import get_logger
from .config import EmitterConfig
from .errors import GeneratorError
from .model import ModelNode, ModelSnapshot, NodeKind, TargetRef
from .naming import NameFormatter, indent_unit
from .sink import FileSink, LocalFileSink
from .templates import TemplateEngine, create_template_engine
from .writer import CodeWriter

logger = get_logger(__name__)


@dataclass
class EmitFailure:
    """A subtree that could not be emitted."""

    node_path: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.node_path}: {self.error}"


class EmitResult:
    """Container for emission results."""

    def __init__(
        self,
        generated: Optional[List[Path]] = None,
        directories: Optional[List[Path]] = None,
        failures: Optional[List[EmitFailure]] = None,
    ):
        """
        Initialize emission result.

        Args:
            generated: Files written, in emission order
            directories: Directories created, in emission order
            failures: Subtrees that failed, in the order they were attempted
        """
        self.generated = generated or []
        self.directories = directories or []
        self.failures = failures or []

    @property
    def success(self) -> bool:
        """True when no subtree failed."""
        return not self.failures

    def merge(self, other: "EmitResult") -> "EmitResult":
        """Append another result to this one."""
        self.generated.extend(other.generated)
        self.directories.extend(other.directories)
        self.failures.extend(other.failures)
        return self

    def add_failure(self, node_path: str, error: Exception):
        """Record a failed subtree."""
        self.failures.append(EmitFailure(node_path, error))

    def summary(self) -> Dict[str, Any]:
        """Counts used by the command line report."""
        return {
            "files": len(self.generated),
            "directories": len(self.directories),
            "failures": len(self.failures),
        }


class ModelEmitter(ABC):
    """Abstract base class for model emitters."""

    def __init__(
        self,
        snapshot: ModelSnapshot,
        config: Optional[EmitterConfig] = None,
        sink: Optional[FileSink] = None,
    ):
        """
        Initialize emitter.

        Args:
            snapshot: Model being emitted
            config: Emitter configuration
            sink: Destination for directories and files

        Raises:
            InvalidConfigurationError: If the indentation settings are invalid
        """
        self.snapshot = snapshot
        self.config = config or EmitterConfig()
        self.sink = sink or LocalFileSink()
        self.indent_string = indent_unit(self.config)
        self.names = NameFormatter(self.config.name_prefix)
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory holding the built-in templates.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine; user templates shadow built-in ones."""
        if self._template_engine is None:
            user_dir = Path(self.config.template_dir) if self.config.template_dir else None
            self._template_engine = create_template_engine(
                user_dir, self.get_template_directory()
            )
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with the common context added."""
        full_context = {
            "indent": self.indent_string,
            "config": self.config,
            "custom": self.config.custom,
            **context,
        }
        return self.template_engine.render_template(template_name, full_context)

    def write_template(self, writer: CodeWriter, template_name: str, **context):
        """Render a template and write its lines at the writer's indentation."""
        writer.write_lines(self.render_template(template_name, context))

    def output_file_name(self, node: ModelNode) -> str:
        """File name for a class, interface or enumeration."""
        return f"{self.names.type_name(node.name)}{self.config.file_extension}"

    def inheritance_targets(self, node: ModelNode) -> List[TargetRef]:
        """Inheritance targets of a class or interface."""
        return self.snapshot.inheritance_targets(node)

    def emit(self, node: ModelNode, output_base_path: Union[str, Path]) -> EmitResult:
        """
        Emit a node and everything it owns.

        Args:
            node: Element to emit
            output_base_path: Existing directory receiving the output

        Returns:
            EmitResult with written paths and failures of owned subtrees

        Raises:
            GeneratorError: If the node's own directory or file cannot be produced
        """
        base_path = Path(output_base_path)
        kind = node.kind

        if kind == NodeKind.PACKAGE:
            return self._emit_package(node, base_path)
        elif kind in (NodeKind.CLASS, NodeKind.INTERFACE):
            return self._emit_file(node, base_path, self.write_class)
        elif kind == NodeKind.ENUMERATION:
            return self._emit_file(node, base_path, self.write_enum)
        elif kind == NodeKind.OTHER:
            logger.debug("Nothing to generate for %s", node.name)
            return EmitResult()
        else:
            raise GeneratorError(f"Unsupported node kind: {kind}")

    def _emit_package(self, node: ModelNode, base_path: Path) -> EmitResult:
        full_path = base_path / node.name
        self.sink.make_directory(full_path)
        self.sink.write_file(full_path / self.config.init_file_name, "")

        result = EmitResult(
            generated=[full_path / self.config.init_file_name], directories=[full_path]
        )
        for child in node.children():
            try:
                result.merge(self.emit(child, full_path))
            except GeneratorError as e:
                node_path = self.snapshot.display_path(child)
                logger.error("Failed to generate %s: %s", node_path, e)
                result.add_failure(node_path, e)
        return result

    def _emit_file(
        self,
        node: ModelNode,
        base_path: Path,
        write: Callable[[CodeWriter, ModelNode], None],
    ) -> EmitResult:
        writer = CodeWriter(self.indent_string)
        write(writer, node)
        full_path = base_path / self.output_file_name(node)
        self.sink.write_file(full_path, writer.get_data())
        return EmitResult(generated=[full_path])

    @abstractmethod
    def write_class(self, writer: CodeWriter, node: ModelNode):
        """Compose the file for a class or interface."""
        pass

    @abstractmethod
    def write_enum(self, writer: CodeWriter, node: ModelNode):
        """Compose the file for an enumeration."""
        pass


def emit_model(
    emitter: ModelEmitter, output_dir: Union[str, Path], node: Optional[ModelNode] = None
) -> EmitResult:
    """
    Run an emitter over a model, reporting every failure in the result.

    Args:
        emitter: Configured emitter
        output_dir: Existing directory receiving the root package directory
        node: Element to start from (defaults to the snapshot base)

    Returns:
        EmitResult; a failure of the start node itself is recorded, not raised
    """
    start = node or emitter.snapshot.base
    try:
        result = emitter.emit(start, output_dir)
    except GeneratorError as e:
        node_path = emitter.snapshot.display_path(start)
        logger.error("Failed to generate %s: %s", node_path, e)
        result = EmitResult()
        result.add_failure(node_path, e)

    logger.info(
        "Generated %d %s file(s) in %d director(ies), %d failure(s)",
        len(result.generated),
        emitter.language_name,
        len(result.directories),
        len(result.failures),
    )
    return result
