"""
Data classes describing a resolved GraphQL type graph.

Instances are frozen and hold tuples, so a definition can be shared between
an input schema and a merge result without either side being able to
mutate the other.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidArgumentError


class TypeKind(Enum):
    """Kinds of GraphQL types."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    # Wrapper kinds, only ever found on a TypeRef
    LIST = "LIST"
    NON_NULL = "NON_NULL"


NAMED_KINDS = frozenset({
    TypeKind.SCALAR, TypeKind.OBJECT, TypeKind.INTERFACE,
    TypeKind.UNION, TypeKind.ENUM, TypeKind.INPUT_OBJECT,
})
OBJECT_LIKE_KINDS = frozenset({TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.INPUT_OBJECT})
WRAPPER_KINDS = frozenset({TypeKind.LIST, TypeKind.NON_NULL})


@dataclass(frozen=True)
class TypeRef:
    """A named type reference, optionally wrapped in list / non-null modifiers."""
    name: Optional[str] = None
    kind: Optional[TypeKind] = None  # None for a bare named reference
    of_type: Optional["TypeRef"] = None

    def __post_init__(self):
        if self.kind is None:
            if not self.name or self.of_type is not None:
                raise InvalidArgumentError("A named TypeRef needs a name and no wrapped type")
        elif self.kind in WRAPPER_KINDS:
            if self.of_type is None or self.name is not None:
                raise InvalidArgumentError(f"A {self.kind.value} TypeRef needs a wrapped type")
        else:
            raise InvalidArgumentError(f"{self.kind.value} is not a wrapper kind")

    @classmethod
    def named(cls, name: str) -> "TypeRef":
        return cls(name=name)

    @classmethod
    def list_of(cls, of_type: "TypeRef") -> "TypeRef":
        return cls(kind=TypeKind.LIST, of_type=of_type)

    @classmethod
    def non_null(cls, of_type: "TypeRef") -> "TypeRef":
        return cls(kind=TypeKind.NON_NULL, of_type=of_type)

    @property
    def named_type(self) -> str:
        """Name of the innermost named type."""
        ref = self
        while ref.of_type is not None:
            ref = ref.of_type
        return ref.name


@dataclass(frozen=True)
class ArgumentDefinition:
    """A field argument. ``default_value`` is GraphQL literal text, None when absent."""
    name: str
    type: TypeRef
    description: Optional[str] = None
    default_value: Optional[str] = None


@dataclass(frozen=True)
class FieldDefinition:
    """A field of an object, interface or input object type."""
    name: str
    type: TypeRef
    description: Optional[str] = None
    args: Tuple[ArgumentDefinition, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def arg_map(self) -> dict[str, ArgumentDefinition]:
        return {arg.name: arg for arg in self.args}


@dataclass(frozen=True)
class EnumValueDefinition:
    """A single value of an enum type."""
    name: str
    value: Any = None
    description: Optional[str] = None
    is_deprecated: bool = False
    deprecation_reason: Optional[str] = None


@dataclass(frozen=True)
class TypeDefinition:
    """A named type in a schema; which collections are populated depends on ``kind``."""
    name: str
    kind: TypeKind
    description: Optional[str] = None
    fields: Tuple[FieldDefinition, ...] = ()
    interfaces: Tuple[str, ...] = ()  # OBJECT only, interface names
    values: Tuple[EnumValueDefinition, ...] = ()  # ENUM only
    members: Tuple[str, ...] = ()  # UNION only, object type names

    def __post_init__(self):
        if self.kind not in NAMED_KINDS:
            raise InvalidArgumentError(
                f"Type '{self.name}' cannot have wrapper kind {self.kind}", self.name
            )
        for attr in ("fields", "interfaces", "values", "members"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

    @property
    def field_map(self) -> dict[str, FieldDefinition]:
        return {f.name: f for f in self.fields}

    @property
    def value_map(self) -> dict[str, EnumValueDefinition]:
        return {v.name: v for v in self.values}

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        return self.field_map.get(name)


class Schema:
    """
    Read-only mapping from type name to ``TypeDefinition``.

    Declaration order is kept for iteration but plays no part in equality.
    """

    def __init__(self, types: Union[Mapping[str, TypeDefinition], Iterable[TypeDefinition]] = ()):
        if isinstance(types, Mapping):
            items = dict(types)
        else:
            items = {type_def.name: type_def for type_def in types}
        for name, type_def in items.items():
            if not isinstance(type_def, TypeDefinition):
                raise InvalidArgumentError(
                    f"Schema entry '{name}' is not a TypeDefinition", name
                )
        self._type_map = MappingProxyType(items)

    @property
    def type_map(self) -> Mapping[str, TypeDefinition]:
        return self._type_map

    def get_type(self, name: str) -> Optional[TypeDefinition]:
        return self._type_map.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._type_map

    def __iter__(self) -> Iterator[str]:
        return iter(self._type_map)

    def __len__(self) -> int:
        return len(self._type_map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return dict(self._type_map) == dict(other._type_map)

    def __repr__(self) -> str:
        return f"Schema({len(self)} types)"
