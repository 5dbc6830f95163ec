"""
Build script definitions from JSON documents.

Converts a plain dictionary (usually parsed from a JSON file) into a
ScriptBuilder with its types and members. Example document:

    {
      "namespace": "Game",
      "usings": ["UnityEngine"],
      "types": [
        {
          "access": "public",
          "kind": "class",
          "name": "Player",
          "base": "MonoBehaviour",
          "fields": [{"access": "private", "type": "int", "name": "health"}],
          "methods": [{"name": "Heal", "body": ["health = 100;"]}]
        }
      ]
    }

Keyword values are matched case-insensitively, with or without
underscores ("abstract_class", "AbstractClass").
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from .builder import ScriptBuilder
from .core.config import BuilderConfig
from .core.errors import ScriptBuilderError
from .core.keywords import Access, ClassKind, MethodKind, parse_keyword
from .definitions import (
    ConstructorDefinition,
    FieldDefinition,
    IndexerDefinition,
    MethodDefinition,
    ParameterDefinition,
    PropertyDefinition,
    TypeDefinition,
)
from .logging_config import get_logger

logger = get_logger(__name__)


class DocumentError(ScriptBuilderError):
    """Exception raised when a document cannot be converted to definitions."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path or '<document>'}: {message}")
        self.path = path
        self.message = message


def _child(path: str, key: Union[str, int]) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


def _expect_mapping(node: Any, path: str) -> Dict[str, Any]:
    if not isinstance(node, dict):
        raise DocumentError(path, f"expected an object, got {type(node).__name__}")
    return node


def _list(node: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DocumentError(_child(path, key), "expected a list")
    return value


def _convert(path: str, factory: Callable[[], Any]) -> Any:
    """Run a definition factory, reporting failures with the document path."""
    try:
        return factory()
    except DocumentError:
        raise
    except KeyError as e:
        raise DocumentError(path, f"missing required key {e}") from e
    except ScriptBuilderError as e:
        raise DocumentError(path, str(e)) from e


def _parameter(node: Any, path: str) -> ParameterDefinition:
    node = _expect_mapping(node, path)
    return _convert(path, lambda: ParameterDefinition(node["type"], node["name"]))


def _parameters(node: Dict[str, Any], path: str) -> Optional[List[ParameterDefinition]]:
    if node.get("parameters") is None:
        return None
    params_path = _child(path, "parameters")
    return [
        _parameter(item, _child(params_path, i))
        for i, item in enumerate(_list(node, "parameters", path))
    ]


def _field(node: Dict[str, Any], path: str) -> FieldDefinition:
    return FieldDefinition(
        parse_keyword(Access, node.get("access", "private")),
        node["type"],
        node["name"],
        node.get("attributes"),
    )


def _property(node: Dict[str, Any], path: str) -> PropertyDefinition:
    return PropertyDefinition(
        parse_keyword(Access, node.get("access", "public")),
        node["type"],
        node["name"],
        backing_field=node.get("backing_field"),
        read_only=node.get("read_only", False),
    )


def _constructor(node: Dict[str, Any], path: str) -> ConstructorDefinition:
    return ConstructorDefinition(
        parse_keyword(Access, node.get("access", "public")),
        parameters=_parameters(node, path),
        base_arguments=node.get("base_arguments"),
        body_lines=node.get("body"),
    )


def _method(node: Dict[str, Any], path: str) -> MethodDefinition:
    return MethodDefinition(
        parse_keyword(Access, node.get("access", "public")),
        parse_keyword(MethodKind, node.get("kind", "none")),
        node.get("return_type"),
        node["name"],
        parameters=_parameters(node, path),
        body_lines=node.get("body"),
    )


def _indexer(node: Dict[str, Any], path: str) -> IndexerDefinition:
    if node.get("index") is None:
        raise DocumentError(_child(path, "index"), "indexer needs an index parameter")
    return IndexerDefinition(
        parse_keyword(Access, node.get("access", "public")),
        node["return_type"],
        _parameter(node["index"], _child(path, "index")),
        node["getter"],
        node.get("setter"),
    )


_MEMBER_CONVERTERS = (
    ("fields", _field, "add_field"),
    ("properties", _property, "add_property"),
    ("constructors", _constructor, "add_constructor"),
    ("methods", _method, "add_method"),
    ("indexers", _indexer, "add_indexer"),
)


def convert_type(node: Any, path: str = "type") -> TypeDefinition:
    """
    Convert one type entry to a TypeDefinition with its members.

    Args:
        node: Type entry of a document
        path: Location of the entry, used in error messages

    Returns:
        Populated TypeDefinition
    """
    node = _expect_mapping(node, path)
    type_def = _convert(
        path,
        lambda: TypeDefinition(
            parse_keyword(Access, node.get("access", "public")),
            parse_keyword(ClassKind, node.get("kind", "class")),
            node["name"],
            base_type=node.get("base"),
            interfaces=node.get("interfaces"),
            attributes=node.get("attributes"),
        ),
    )

    for key, converter, add in _MEMBER_CONVERTERS:
        for i, item in enumerate(_list(node, key, path)):
            item_path = _child(_child(path, key), i)
            member_node = _expect_mapping(item, item_path)
            member = _convert(item_path, lambda: converter(member_node, item_path))
            getattr(type_def, add)(member)

    return type_def


def load_document(
    data: Dict[str, Any], config: Optional[BuilderConfig] = None
) -> ScriptBuilder:
    """
    Convert a document to a ScriptBuilder.

    Args:
        data: Parsed document
        config: Rendering configuration for the builder

    Returns:
        ScriptBuilder holding all types of the document

    Raises:
        DocumentError: If the document is malformed or a definition is invalid
    """
    data = _expect_mapping(data, "")
    if "namespace" not in data:
        raise DocumentError("namespace", "missing required key 'namespace'")

    if not isinstance(data["namespace"], str):
        raise DocumentError("namespace", "expected a string")

    usings = _list(data, "usings", "")
    script = _convert("usings", lambda: ScriptBuilder(data["namespace"], usings, config=config))

    for i, node in enumerate(_list(data, "types", "")):
        script.add_type(convert_type(node, _child("types", i)))

    logger.info(
        "Loaded namespace %s with %d types", data["namespace"], len(script.types)
    )
    return script


def load_document_file(
    path: Union[str, Path], config: Optional[BuilderConfig] = None
) -> ScriptBuilder:
    """
    Load a JSON document from disk and convert it.

    Raises:
        DocumentError: If the file cannot be read or parsed
    """
    path = Path(path)
    logger.debug("Loading document %s", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DocumentError(str(path), "file not found") from e
    except json.JSONDecodeError as e:
        raise DocumentError(str(path), f"invalid JSON: {e}") from e
    except OSError as e:
        raise DocumentError(str(path), f"cannot read file: {e}") from e

    return load_document(data, config)
