# credgraph/api/type_set.py
"""
Declarative GraphQL type definitions.

Types are described as plain Python data (so tests and validators can inspect
fields, arguments and metadata directly) and rendered to SDL for ariadne.
Resolvers are attached through ariadne bindables built from the same data.

A TypeSet bundles one object type with the auxiliary definitions (enums) it
needs in order to be registered in a schema.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ariadne import EnumType, ObjectType


@dataclass(frozen=True)
class ArgumentDefinition:
    type: str
    description: str = ""
    # GraphQL literal, e.g. an enum value name
    default_value: Optional[str] = None


@dataclass(frozen=True)
class FieldDefinition:
    type: str
    description: str = ""
    args: Dict[str, ArgumentDefinition] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)
    resolve: Optional[Callable] = None


@dataclass(frozen=True)
class EnumValueDefinition:
    description: str = ""


@dataclass(frozen=True)
class EnumTypeDefinition:
    name: str
    description: str = ""
    values: Dict[str, EnumValueDefinition] = field(default_factory=dict)


@dataclass(frozen=True)
class ObjectTypeDefinition:
    name: str
    description: str = ""
    fields: Dict[str, FieldDefinition] = field(default_factory=dict)


def _description(text: str, indent: str = "") -> str:
    if not text:
        return ""
    escaped = text.replace('"""', '\\"""')
    return f'{indent}"""{escaped}"""\n'


def _render_args(args: Dict[str, ArgumentDefinition]) -> str:
    if not args:
        return ""
    lines = []
    for name, arg in args.items():
        line = f"{name}: {arg.type}"
        if arg.default_value is not None:
            line += f" = {arg.default_value}"
        lines.append(_description(arg.description, "    ") + "    " + line + "\n")
    return "(\n" + "".join(lines) + "  )"


def render_object_type(definition: ObjectTypeDefinition) -> str:
    body = "".join(
        _description(f.description, "  ") + f"  {name}{_render_args(f.args)}: {f.type}\n"
        for name, f in definition.fields.items()
    )
    return _description(definition.description) + f"type {definition.name} {{\n{body}}}\n"


def render_enum_type(definition: EnumTypeDefinition) -> str:
    body = "".join(
        _description(v.description, "  ") + f"  {name}\n"
        for name, v in definition.values.items()
    )
    return _description(definition.description) + f"enum {definition.name} {{\n{body}}}\n"


@dataclass(frozen=True)
class TypeSet:
    type: ObjectTypeDefinition
    enums: List[EnumTypeDefinition] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.type.name

    @property
    def type_defs(self) -> str:
        parts = [render_enum_type(e) for e in self.enums]
        parts.append(render_object_type(self.type))
        return "\n".join(parts)

    @property
    def bindables(self) -> list:
        object_type = ObjectType(self.type.name)
        for name, f in self.type.fields.items():
            if f.resolve is not None:
                object_type.set_field(name, f.resolve)
        # enum values resolve to their own names
        enum_types = [EnumType(e.name, {value: value for value in e.values}) for e in self.enums]
        return [object_type, *enum_types]
