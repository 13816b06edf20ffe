"""
Core model representation for code generation.

Converts a modelling-tool project document (.mdj JSON) into a normalized,
read-only snapshot that emitters can query without any live host.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Optional, Tuple
from enum import Enum

from umlgen.logging_config import get_logger
from .errors import UnresolvedRelationshipError

logger = get_logger(__name__)


class NodeKind(Enum):
    """Kinds of model elements the emitter distinguishes."""

    PACKAGE = "package"
    CLASS = "class"
    INTERFACE = "interface"
    ENUMERATION = "enumeration"
    OTHER = "other"


class RelationshipKind(Enum):
    """Relationships that make a class inherit from another element."""

    GENERALIZATION = "generalization"
    INTERFACE_REALIZATION = "interface_realization"


INHERITANCE_KINDS = frozenset(
    {RelationshipKind.GENERALIZATION, RelationshipKind.INTERFACE_REALIZATION}
)


@dataclass
class ParameterNode:
    """Operation parameter."""

    name: str
    type: str = ""
    direction: str = "in"  # in, out, inout, return


@dataclass
class AttributeNode:
    """Class or interface attribute."""

    name: str
    type: str = ""
    is_static: bool = False


@dataclass
class OperationNode:
    """Class or interface operation."""

    name: str
    documentation: str = ""
    is_static: bool = False
    parameters: List[ParameterNode] = field(default_factory=list)

    def non_return_parameters(self) -> List[ParameterNode]:
        """Parameters in declaration order, without the return parameter."""
        return [p for p in self.parameters if p.direction != "return"]


@dataclass
class EnumLiteralNode:
    """Enumeration literal."""

    name: str


@dataclass
class ModelNode:
    """Common fields of every model element."""

    id: str
    name: str
    documentation: str = ""

    kind: ClassVar[NodeKind] = NodeKind.OTHER

    def children(self) -> List["ModelNode"]:
        """Owned elements that take part in the tree walk."""
        return []

    def indexed_children(self) -> List["ModelNode"]:
        """Owned elements that can be looked up by id."""
        return self.children()


@dataclass
class PackageNode(ModelNode):
    """Package (or model) owning other elements."""

    owned_elements: List[ModelNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.PACKAGE

    def children(self) -> List[ModelNode]:
        return self.owned_elements


@dataclass
class ClassNode(ModelNode):
    """Class with attributes and operations."""

    attributes: List[AttributeNode] = field(default_factory=list)
    operations: List[OperationNode] = field(default_factory=list)
    nested_elements: List[ModelNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.CLASS

    def indexed_children(self) -> List[ModelNode]:
        # Nested elements are resolvable but never emitted
        return self.nested_elements


@dataclass
class InterfaceNode(ClassNode):
    """Interface; emitted exactly like a class."""

    kind: ClassVar[NodeKind] = NodeKind.INTERFACE


@dataclass
class EnumNode(ModelNode):
    """Enumeration with ordered literals."""

    literals: List[EnumLiteralNode] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.ENUMERATION


@dataclass
class OtherNode(ModelNode):
    """Any element the emitter ignores (diagrams, actors, notes...)."""

    type_name: str = ""
    nested_elements: List[ModelNode] = field(default_factory=list)

    def indexed_children(self) -> List[ModelNode]:
        return self.nested_elements


@dataclass(frozen=True)
class RelationshipEdge:
    """Directed relationship between two elements, referenced by id."""

    source_id: str
    target_id: str
    kind: RelationshipKind


@dataclass(frozen=True)
class TargetRef:
    """Resolved inheritance target."""

    node: ModelNode
    path: Tuple[str, ...]  # qualified path, target name included

    @property
    def name(self) -> str:
        return self.node.name


def inheritance_targets_of(
    node: ModelNode,
    edges: List[RelationshipEdge],
    resolve: Callable[[str], Optional[ModelNode]],
    path_of: Callable[[ModelNode], Tuple[str, ...]],
) -> List[TargetRef]:
    """
    Resolve the elements a node inherits from.

    Only edges whose source is ``node`` and whose kind is a generalization or
    an interface realization count. Order follows ``edges`` and duplicates
    are preserved.

    Args:
        node: Class or interface being emitted
        edges: All relationships of the model in declaration order
        resolve: Lookup from element id to node
        path_of: Qualified path of a resolved node

    Raises:
        UnresolvedRelationshipError: If a target id cannot be resolved
    """
    targets = []
    for edge in edges:
        if edge.source_id != node.id or edge.kind not in INHERITANCE_KINDS:
            continue
        target = resolve(edge.target_id)
        if target is None:
            raise UnresolvedRelationshipError(node.name, edge.target_id)
        targets.append(TargetRef(target, path_of(target)))
    return targets


class ModelSnapshot:
    """Read-only view over a model tree and its relationships."""

    def __init__(
        self,
        root: PackageNode,
        edges: Optional[List[RelationshipEdge]] = None,
        base: Optional[ModelNode] = None,
    ):
        """
        Initialize snapshot.

        Args:
            root: Top-level element of the document
            edges: Relationships in declaration order
            base: Element qualified paths are relative to (defaults to root)
        """
        self.root = root
        self.edges = list(edges or [])
        self.base = base or root
        self._index: Dict[str, ModelNode] = {}
        self._parents: Dict[str, ModelNode] = {}
        self._build_index(root, None)

    def _build_index(self, node: ModelNode, parent: Optional[ModelNode]):
        # Iterative walk; models from real tools can nest deeply
        stack = [(node, parent)]
        while stack:
            current, owner = stack.pop()
            if current.id in self._index:
                logger.warning("Duplicate element id %s (%s)", current.id, current.name)
            self._index[current.id] = current
            if owner is not None:
                self._parents[current.id] = owner
            for child in reversed(current.indexed_children()):
                stack.append((child, current))

    def with_base(self, base: ModelNode) -> "ModelSnapshot":
        """Return a snapshot sharing this model, with paths relative to ``base``."""
        return ModelSnapshot(self.root, self.edges, base)

    def find(self, element_id: str) -> Optional[ModelNode]:
        """Look up an element by id."""
        return self._index.get(element_id)

    def parent_of(self, node: ModelNode) -> Optional[ModelNode]:
        """Owner of an element, or None for the root."""
        return self._parents.get(node.id)

    def ancestors(self, node: ModelNode) -> List[ModelNode]:
        """Owners of an element, outermost first."""
        chain = []
        parent = self.parent_of(node)
        while parent is not None:
            chain.append(parent)
            parent = self.parent_of(parent)
        chain.reverse()
        return chain

    def qualified_path(self, node: ModelNode) -> Tuple[str, ...]:
        """Names from just below the base element down to ``node`` inclusive."""
        names = [node.name]
        parent = self.parent_of(node)
        while parent is not None and parent is not self.base:
            names.append(parent.name)
            parent = self.parent_of(parent)
        names.reverse()
        return tuple(names)

    def display_path(self, node: ModelNode) -> str:
        """Human readable location used in failure reports."""
        return "/".join([a.name for a in self.ancestors(node)] + [node.name])

    def inheritance_targets(self, node: ModelNode) -> List[TargetRef]:
        """Inheritance targets of ``node``; see inheritance_targets_of."""
        return inheritance_targets_of(node, self.edges, self.find, self.qualified_path)

    def iter_nodes(self) -> Iterator[ModelNode]:
        """Every indexed element, in depth-first document order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def packages(self) -> List[PackageNode]:
        """Every package of the document in depth-first order."""
        return [n for n in self.iter_nodes() if n.kind == NodeKind.PACKAGE]

    def find_package(self, name_or_id: str) -> Optional[PackageNode]:
        """First package whose id or name matches."""
        by_id = self.find(name_or_id)
        if by_id is not None and by_id.kind == NodeKind.PACKAGE:
            return by_id
        for package in self.packages():
            if package.name == name_or_id:
                return package
        return None


# Element types of the .mdj project format
MDJ_PACKAGE_TYPES = {"Project", "UMLModel", "UMLPackage", "UMLSubsystem"}
MDJ_RELATIONSHIP_TYPES = {
    "UMLGeneralization": RelationshipKind.GENERALIZATION,
    "UMLInterfaceRealization": RelationshipKind.INTERFACE_REALIZATION,
}


class _MdjConverter:
    """Builds model nodes from a parsed .mdj document."""

    def __init__(self, document: Dict[str, Any]):
        self.document = document
        self.edges: List[RelationshipEdge] = []
        self._names: Dict[str, str] = {}
        self._pending_types: List[Tuple[Any, Any]] = []
        self._counter = 0

    def convert(self) -> ModelSnapshot:
        self._collect_names(self.document)
        root = self._convert_element(self.document)
        if not isinstance(root, PackageNode):
            root = PackageNode(id=root.id, name=root.name, owned_elements=[root])
        for holder, raw_type in self._pending_types:
            holder.type = self._type_name(raw_type)
        return ModelSnapshot(root, self.edges)

    def _collect_names(self, data: Dict[str, Any]):
        stack = [data]
        while stack:
            element = stack.pop()
            if not isinstance(element, dict):
                continue
            if "_id" in element:
                self._names[element["_id"]] = element.get("name", "")
            for key in ("ownedElements", "attributes", "operations", "literals"):
                stack.extend(element.get(key) or [])

    def _element_id(self, data: Dict[str, Any]) -> str:
        element_id = data.get("_id")
        if element_id:
            return element_id
        self._counter += 1
        return f"_generated_{self._counter}"

    def _type_name(self, raw_type: Any) -> str:
        if isinstance(raw_type, dict):
            ref = raw_type.get("$ref")
            return self._names.get(ref, "") if ref else ""
        return str(raw_type or "")

    def _ref(self, value: Any) -> str:
        if isinstance(value, dict):
            return value.get("$ref", "")
        return str(value or "")

    def _convert_element(self, data: Dict[str, Any]) -> ModelNode:
        element_type = data.get("_type", "")
        element_id = self._element_id(data)
        name = data.get("name", "")
        documentation = data.get("documentation", "") or ""

        if element_type in MDJ_PACKAGE_TYPES:
            children = []
            for child in data.get("ownedElements") or []:
                converted = self._convert_owned(child)
                if converted is not None:
                    children.append(converted)
            return PackageNode(element_id, name, documentation, children)

        if element_type in ("UMLClass", "UMLInterface"):
            node_cls = InterfaceNode if element_type == "UMLInterface" else ClassNode
            return node_cls(
                element_id,
                name,
                documentation,
                attributes=[self._convert_attribute(a) for a in data.get("attributes") or []],
                operations=[self._convert_operation(o) for o in data.get("operations") or []],
                nested_elements=self._convert_nested(data),
            )

        if element_type == "UMLEnumeration":
            literals = [
                EnumLiteralNode(literal.get("name", ""))
                for literal in data.get("literals") or []
            ]
            return EnumNode(element_id, name, documentation, literals)

        return OtherNode(
            element_id,
            name,
            documentation,
            type_name=element_type,
            nested_elements=self._convert_nested(data),
        )

    def _convert_nested(self, data: Dict[str, Any]) -> List[ModelNode]:
        # Relationships live under their source element
        nested = []
        for child in data.get("ownedElements") or []:
            converted = self._convert_owned(child)
            if converted is not None:
                nested.append(converted)
        return nested

    def _convert_owned(self, data: Dict[str, Any]) -> Optional[ModelNode]:
        relationship = MDJ_RELATIONSHIP_TYPES.get(data.get("_type", ""))
        if relationship is not None:
            self.edges.append(
                RelationshipEdge(
                    self._ref(data.get("source")), self._ref(data.get("target")), relationship
                )
            )
            return None
        return self._convert_element(data)

    def _convert_attribute(self, data: Dict[str, Any]) -> AttributeNode:
        attribute = AttributeNode(
            name=data.get("name", ""), is_static=bool(data.get("isStatic", False))
        )
        self._pending_types.append((attribute, data.get("type", "")))
        return attribute

    def _convert_operation(self, data: Dict[str, Any]) -> OperationNode:
        parameters = []
        for raw in data.get("parameters") or []:
            parameter = ParameterNode(
                name=raw.get("name", ""), direction=raw.get("direction", "in") or "in"
            )
            self._pending_types.append((parameter, raw.get("type", "")))
            parameters.append(parameter)
        return OperationNode(
            name=data.get("name", ""),
            documentation=data.get("documentation", "") or "",
            is_static=bool(data.get("isStatic", False)),
            parameters=parameters,
        )


def convert_mdj_document(document: Dict[str, Any]) -> ModelSnapshot:
    """
    Convert a parsed .mdj project document into a model snapshot.

    Packages, models and the project itself become PackageNode, classes,
    interfaces and enumerations their matching nodes, and generalization /
    interface-realization elements become edges. Everything else is kept
    as OtherNode so the walk can skip it.

    Args:
        document: Parsed JSON of the project (or of a single element)

    Returns:
        Snapshot rooted at the document's top element
    """
    if not isinstance(document, dict):
        raise ValueError("Model document must be a JSON object")
    return _MdjConverter(document).convert()
