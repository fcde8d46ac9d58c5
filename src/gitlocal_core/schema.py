"""Attribute schema declarations for the provider and its data sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .diagnostics import Diagnostics
from .values import is_unknown

TYPE_STRING = "string"
TYPE_LIST_STRING = "list(string)"
TYPE_LIST_OBJECT = "list(object)"


@dataclass(frozen=True)
class Attribute:
    """One schema attribute."""
    type: str
    description: str = ""
    required: bool = False
    computed: bool = False
    optional: bool = False
    nested: Optional[Dict[str, "Attribute"]] = None  # element attributes for list(object)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type,
            "description": self.description,
            "required": self.required,
            "optional": self.optional,
            "computed": self.computed,
        }
        if self.nested is not None:
            data["nested"] = {name: attr.to_dict() for name, attr in self.nested.items()}
        return data


def string_attribute(
    description: str,
    *,
    required: bool = False,
    optional: bool = False,
    computed: bool = False,
) -> Attribute:
    return Attribute(TYPE_STRING, description, required=required, optional=optional, computed=computed)


def list_attribute(description: str, *, computed: bool = True) -> Attribute:
    return Attribute(TYPE_LIST_STRING, description, computed=computed)


def list_nested_attribute(description: str, nested: Dict[str, Attribute]) -> Attribute:
    return Attribute(TYPE_LIST_OBJECT, description, computed=True, nested=nested)


@dataclass(frozen=True)
class Schema:
    """Attributes of a provider or data source, keyed by name."""
    attributes: Dict[str, Attribute] = field(default_factory=dict)
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "attributes": {name: attr.to_dict() for name, attr in self.attributes.items()},
        }

    def validate_config(self, config: Dict[str, Any], diagnostics: Diagnostics) -> None:
        """Check a request config against the schema, host-side.

        Adds one attribute error per offending attribute. Unknown values pass
        type checks; the host resolves them before the read.
        """
        for name in config:
            if name not in self.attributes:
                diagnostics.add_attribute_error(
                    name,
                    "Unsupported argument",
                    f'An argument named "{name}" is not expected here.',
                )

        for name, attr in self.attributes.items():
            value = config.get(name)
            settable = attr.required or attr.optional
            if value is None:
                if attr.required:
                    diagnostics.add_attribute_error(
                        name,
                        "Missing required argument",
                        f'The argument "{name}" is required, but no definition was found.',
                    )
                continue
            if not settable:
                diagnostics.add_attribute_error(
                    name,
                    "Invalid Configuration for Read-Only Attribute",
                    f'Cannot set value for attribute "{name}" as it is computed only.',
                )
                continue
            if attr.type == TYPE_STRING and not is_unknown(value) and not isinstance(value, str):
                diagnostics.add_attribute_error(
                    name,
                    "Incorrect attribute value type",
                    f'Inappropriate value for attribute "{name}": string required, got {type(value).__name__}.',
                )


def remote_attributes(single: bool) -> Dict[str, Attribute]:
    """``name``/``urls`` pair shared by the remote and remotes data sources.

    ``name`` is the lookup key (required) for a single remote and computed
    inside the remotes list.
    """
    return {
        "name": Attribute(
            TYPE_STRING,
            "Name of the remote",
            required=single,
            computed=not single,
        ),
        "urls": list_attribute("List of remote URLs"),
    }
