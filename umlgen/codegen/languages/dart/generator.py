"""
Dart server code generator implementation.

Generates one persistence-backed class per model class or interface, and one
enum file per enumeration, using the templates next to this module.
"""

from typing import Optional
from pathlib import Path

from umlgen.logging_config import get_logger
from ...core.config import EmitterConfig
from ...core.generator import ModelEmitter
from ...core.model import ClassNode, EnumNode, ModelSnapshot, OperationNode
from ...core.sink import FileSink
from ...core.writer import CodeWriter

logger = get_logger(__name__)

# Body of empty classes, enums and operation stubs
PLACEHOLDER_STATEMENT = "pass"


class DartServerEmitter(ModelEmitter):
    """Emitter for cloud-function model classes built on a persistence base class."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "dart"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Dart templates directory."""
        return Path(__file__).parent / "templates"

    def write_doc(self, writer: CodeWriter, text: str):
        """
        Write a documentation comment.

        Nothing is written when documentation output is disabled or the
        text is blank. Lines are written verbatim.
        """
        if not self.config.doc_string:
            return
        text = (text or "").strip()
        if not text:
            return
        self.write_template(writer, "doc.dart.j2", lines=text.splitlines())

    def write_setters(self, writer: CodeWriter, node: ClassNode):
        """One mutator per non-static attribute."""
        for attr in node.attributes:
            if attr.is_static:
                continue
            self.write_template(
                writer,
                "setter.dart.j2",
                name=attr.name,
                type=attr.type,
                fragment=self.names.accessor_fragment(attr.name),
            )
        writer.write_line()

    def write_getters(self, writer: CodeWriter, node: ClassNode):
        """One accessor per non-static attribute."""
        for attr in node.attributes:
            if attr.is_static:
                continue
            self.write_template(
                writer,
                "getter.dart.j2",
                name=attr.name,
                type=attr.type,
                fragment=self.names.accessor_fragment(attr.name),
            )
        writer.write_line()

    def write_method(self, writer: CodeWriter, op: OperationNode):
        """Write an unimplemented stub for an operation."""
        if not op.name:
            logger.debug("Skipping unnamed operation")
            return

        self.write_template(
            writer,
            "method.dart.j2",
            name=op.name,
            params=[p.name for p in op.non_return_parameters()],
            is_static=op.is_static,
        )
        writer.indent()
        self.write_doc(writer, op.documentation)
        writer.write_line(PLACEHOLDER_STATEMENT)
        writer.outdent()
        writer.write_line()

    def write_class(self, writer: CodeWriter, node: ClassNode):
        """Compose the file for a class or interface."""
        targets = self.inheritance_targets(node)
        class_name = self.names.type_name(node.name)

        self.write_template(writer, "class_file_header.dart.j2")
        writer.write_line()

        if targets:
            for target in targets:
                self.write_template(
                    writer, "import.dart.j2", path=list(target.path), name=target.name
                )
            writer.write_line()

        self.write_template(
            writer,
            "class_declaration.dart.j2",
            class_name=class_name,
            base_class=self.config.base_class,
            inherits=[target.name for target in targets],
        )
        writer.write_line()

        writer.indent()
        self.write_template(
            writer, "constructors.dart.j2", class_name=class_name, raw_name=node.name
        )
        self.write_doc(writer, node.documentation)

        if not node.attributes and not node.operations:
            writer.write_line(PLACEHOLDER_STATEMENT)
        else:
            self.write_template(writer, "put.dart.j2")
            writer.write_line()

            self.write_setters(writer, node)
            self.write_getters(writer, node)
            writer.write_line()

            self.write_template(writer, "save.dart.j2", class_name=class_name)
            writer.write_line()

            for op in node.operations:
                self.write_method(writer, op)

        writer.outdent()
        writer.write_line()
        writer.write_line("}")
        writer.write_line()

    def write_enum(self, writer: CodeWriter, node: EnumNode):
        """Compose the file for an enumeration; literals are numbered from 1."""
        self.write_template(writer, "enum_file_header.dart.j2")
        writer.write_line()

        self.write_template(writer, "enum_declaration.dart.j2", name=node.name)
        writer.indent()
        self.write_doc(writer, node.documentation)

        if not node.literals:
            writer.write_line(PLACEHOLDER_STATEMENT)
        else:
            for value, literal in enumerate(node.literals, start=1):
                writer.write_line(f"{literal.name} = {value}")

        writer.outdent()
        writer.write_line()


def create_dart_emitter(
    snapshot: ModelSnapshot,
    config: Optional[EmitterConfig] = None,
    sink: Optional[FileSink] = None,
) -> DartServerEmitter:
    """Create a Dart emitter with default configuration."""
    return DartServerEmitter(snapshot, config or EmitterConfig(), sink)
