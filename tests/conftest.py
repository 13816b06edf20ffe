from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from umlgen.codegen.core.model import (
    AttributeNode,
    ClassNode,
    EnumLiteralNode,
    EnumNode,
    InterfaceNode,
    ModelSnapshot,
    OperationNode,
    OtherNode,
    PackageNode,
    ParameterNode,
    RelationshipEdge,
    RelationshipKind,
)


@pytest.fixture(autouse=True)
def reset_umlgen_logger():
    """Undo handlers installed by setup_logging so caplog keeps working."""
    yield
    logger = logging.getLogger("umlgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def order_class() -> ClassNode:
    return ClassNode(
        id="c-order",
        name="order",
        documentation="An order.",
        attributes=[
            AttributeNode("count", "int"),
            AttributeNode("total", "double"),
            AttributeNode("registry", "Map", is_static=True),
        ],
        operations=[
            OperationNode(
                "checkout",
                documentation="Pays.",
                parameters=[
                    ParameterNode("card", "String"),
                    ParameterNode("", "bool", direction="return"),
                ],
            ),
            OperationNode("find", is_static=True, parameters=[ParameterNode("id", "String")]),
        ],
    )


@pytest.fixture
def shop_snapshot(order_class: ClassNode) -> ModelSnapshot:
    """Package 'shop' with a nested package, an enum and two inheritance edges."""
    root = PackageNode(
        id="pkg-shop",
        name="shop",
        owned_elements=[
            ClassNode(id="c-entity", name="Entity"),
            InterfaceNode(id="i-audit", name="Auditable"),
            PackageNode(id="pkg-orders", name="orders", owned_elements=[order_class]),
            EnumNode(
                id="e-status",
                name="Status",
                literals=[EnumLiteralNode("NEW"), EnumLiteralNode("PAID"), EnumLiteralNode("SHIPPED")],
            ),
            OtherNode(id="d-main", name="Main", type_name="UMLClassDiagram"),
        ],
    )
    edges = [
        RelationshipEdge("c-order", "c-entity", RelationshipKind.GENERALIZATION),
        RelationshipEdge("c-order", "i-audit", RelationshipKind.INTERFACE_REALIZATION),
    ]
    return ModelSnapshot(root, edges)


@pytest.fixture
def mdj_document() -> dict:
    """Small project document in the modelling tool's format."""
    return {
        "_type": "Project",
        "_id": "p",
        "name": "Demo",
        "ownedElements": [
            {
                "_type": "UMLModel",
                "_id": "m",
                "name": "Model",
                "ownedElements": [
                    {"_type": "UMLClassDiagram", "_id": "d", "name": "Main"},
                    {
                        "_type": "UMLClass",
                        "_id": "c1",
                        "name": "user",
                        "documentation": "A user.",
                        "ownedElements": [
                            {
                                "_type": "UMLGeneralization",
                                "_id": "g1",
                                "source": {"$ref": "c1"},
                                "target": {"$ref": "c2"},
                            }
                        ],
                        "attributes": [
                            {"_type": "UMLAttribute", "_id": "a1", "name": "age", "type": "int"},
                            {"_type": "UMLAttribute", "_id": "a2", "name": "status", "type": {"$ref": "e1"}},
                            {
                                "_type": "UMLAttribute",
                                "_id": "a3",
                                "name": "count",
                                "type": "int",
                                "isStatic": True,
                            },
                        ],
                        "operations": [
                            {
                                "_type": "UMLOperation",
                                "_id": "o1",
                                "name": "login",
                                "parameters": [
                                    {"_type": "UMLParameter", "_id": "pp1", "name": "password", "type": "String"},
                                    {
                                        "_type": "UMLParameter",
                                        "_id": "pp2",
                                        "name": "",
                                        "type": "bool",
                                        "direction": "return",
                                    },
                                ],
                            }
                        ],
                    },
                    {"_type": "UMLClass", "_id": "c2", "name": "Person"},
                    {
                        "_type": "UMLEnumeration",
                        "_id": "e1",
                        "name": "Status",
                        "literals": [
                            {"_type": "UMLEnumerationLiteral", "_id": "l1", "name": "ACTIVE"},
                            {"_type": "UMLEnumerationLiteral", "_id": "l2", "name": "BANNED"},
                        ],
                    },
                    {
                        "_type": "UMLPackage",
                        "_id": "sub",
                        "name": "auth",
                        "ownedElements": [{"_type": "UMLInterface", "_id": "i1", "name": "Token"}],
                    },
                ],
            }
        ],
    }


@pytest.fixture
def mdj_file(tmp_path: Path, mdj_document: dict) -> Path:
    path = tmp_path / "model.mdj"
    path.write_text(json.dumps(mdj_document), encoding="utf-8")
    return path


@pytest.fixture
def nested_mdj_document() -> dict:
    """Inheritance targets owned by a class and by a collaboration."""
    return {
        "_type": "Project",
        "_id": "p",
        "name": "Demo",
        "ownedElements": [
            {
                "_type": "UMLModel",
                "_id": "m",
                "name": "Model",
                "ownedElements": [
                    {
                        "_type": "UMLClass",
                        "_id": "outer",
                        "name": "Outer",
                        "ownedElements": [{"_type": "UMLClass", "_id": "inner", "name": "Inner"}],
                    },
                    {
                        "_type": "UMLCollaboration",
                        "_id": "collab",
                        "name": "Collab",
                        "ownedElements": [{"_type": "UMLInterface", "_id": "role", "name": "Role"}],
                    },
                    {
                        "_type": "UMLClass",
                        "_id": "child",
                        "name": "Child",
                        "ownedElements": [
                            {
                                "_type": "UMLGeneralization",
                                "_id": "g1",
                                "source": {"$ref": "child"},
                                "target": {"$ref": "inner"},
                            },
                            {
                                "_type": "UMLInterfaceRealization",
                                "_id": "r1",
                                "source": {"$ref": "child"},
                                "target": {"$ref": "role"},
                            },
                        ],
                    },
                ],
            }
        ],
    }
