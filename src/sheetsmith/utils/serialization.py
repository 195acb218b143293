"""
Style table serialization utilities.

Provides JSON serialization and deserialization for the style table of a
StyleManager. The serialized format includes versioning for forward
compatibility and lists every canonical style in ordinal order, so a
deserialized manager reproduces the same ordinals.
"""

import json
from typing import Any, Dict

from ..exceptions import FormatError, StyleError
from ..style.manager import StyleManager
from ..style.style import Style


# Current serialization format version
SERIALIZATION_VERSION = "1.0"


def serialize(manager: StyleManager) -> Dict[str, Any]:
    """Serialize a style manager to a JSON-serializable dictionary.

    The serialized format includes:
    - version: Format version string for forward compatibility
    - styles: Every canonical style (built-in ones included) in ordinal order

    Args:
        manager: The style manager to serialize

    Returns:
        Dictionary that can be serialized to JSON

    Raises:
        TypeError: If manager is not a StyleManager instance
    """
    if not isinstance(manager, StyleManager):
        raise TypeError(f"Expected StyleManager, got {type(manager)}")

    styles = []
    for style in manager:
        entry = style.to_dict()
        entry["ordinal"] = style.ordinal
        styles.append(entry)
    return {"version": SERIALIZATION_VERSION, "styles": styles}


def deserialize(data: Dict[str, Any]) -> StyleManager:
    """Rebuild a style manager from a dictionary.

    The built-in block is recreated by the new manager itself; the remaining
    styles are registered in their serialized order.

    Raises:
        ValueError: If data is missing required fields, has an unsupported
            version, or does not reproduce the serialized ordinals
        TypeError: If data is not a dictionary
    """
    if not isinstance(data, dict):
        raise TypeError(f"Expected dict, got {type(data)}")

    if "version" not in data:
        raise ValueError("Serialized style table must have 'version' field")
    if "styles" not in data:
        raise ValueError("Serialized style table must have 'styles' field")

    version = data["version"]
    if version != SERIALIZATION_VERSION:
        raise ValueError(
            f"Unsupported serialization version: {version}. "
            f"Expected {SERIALIZATION_VERSION}"
        )

    manager = StyleManager()
    for entry in data["styles"]:
        try:
            style = manager.add_style(Style.from_dict(entry))
        except (FormatError, StyleError) as e:
            raise ValueError(f"Failed to deserialize style: {e}") from e
        except KeyError as e:
            raise ValueError(f"Missing required field in style: {e}") from e
        expected = entry.get("ordinal")
        if expected is not None and style.ordinal != expected:
            raise ValueError(
                f"Style {style.name!r} resolved to ordinal {style.ordinal}, expected {expected}"
            )
    return manager


def to_json(manager: StyleManager, **kwargs) -> str:
    """Serialize a style manager to a JSON string.

    Args:
        manager: The style manager to serialize
        **kwargs: Additional arguments to pass to json.dumps (e.g., indent=2)
    """
    return json.dumps(serialize(manager), **kwargs)


def from_json(json_str: str) -> StyleManager:
    """Deserialize a style manager from a JSON string.

    Raises:
        ValueError: If JSON is invalid or the style table is invalid
    """
    if not isinstance(json_str, str):
        raise TypeError(f"Expected str, got {type(json_str)}")

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    return deserialize(data)
