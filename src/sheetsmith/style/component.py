"""
Base class of the five style facets.

Every facet is a plain value record. Field assignments go through a per-field
check (a ``_check_<field>`` static method on the subclass), so invalid values
raise FormatError at the point of assignment. A StyleManager freezes the
facets of the styles it registers; frozen facets reject every assignment.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Type, TypeVar

from sheetsmith.exceptions import FormatError, StyleError

C = TypeVar("C", bound="StyleComponent")
E = TypeVar("E", bound=Enum)


def coerce_enum(enum_type: Type[E], value: Any, field_name: str) -> E:
    """Accept an enum member or its value, raise FormatError otherwise."""
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(repr(member.value) for member in enum_type)
        raise FormatError(f"Invalid {field_name} {value!r}; expected one of {allowed}") from e


def coerce_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise FormatError(f"{field_name} must be a boolean, got {value!r}")
    return value


@dataclass
class StyleComponent:
    """Common behaviour of Border, CellXf, Fill, Font and NumberFormat."""

    TAG: ClassVar[str] = "component"

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen", False):
            raise StyleError(
                f"{type(self).__name__} belongs to a registered style and is read-only; "
                "derive a variant with Style.copy() or Style.with_*()"
            )
        check = getattr(type(self), f"_check_{name}", None)
        if check is not None:
            value = check(value)
        object.__setattr__(self, name, value)

    @property
    def is_frozen(self) -> bool:
        return self.__dict__.get("_frozen", False)

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def validate(self) -> None:
        """Check cross-field consistency; single fields are checked on assignment."""

    def calculate_hash(self) -> str:
        """Deterministic string over every field in declaration order."""
        parts = [f"{f.name}={_token(getattr(self, f.name))}" for f in fields(self)]
        return f"{self.TAG}[{'|'.join(parts)}]"

    def copy(self: C) -> C:
        """Independent, unfrozen clone (all field values are immutable)."""
        return type(self)(**{f.name: getattr(self, f.name) for f in fields(self)})

    def to_dict(self) -> Dict[str, Any]:
        return {
            f.name: _plain(getattr(self, f.name)) for f in fields(self)
        }

    @classmethod
    def from_dict(cls: Type[C], data: Dict[str, Any]) -> C:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise FormatError(
                f"Unknown {cls.__name__} field(s): {', '.join(sorted(unknown))}"
            )
        return cls(**data)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _token(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        # Length prefix keeps free text from imitating field separators
        return f"{len(value)}:{value}"
    return str(value)
