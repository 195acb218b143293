"""
Style model.

A Style is a plain aggregate of exactly five facets: Border, CellXf, Fill,
Font and NumberFormat. Its content hash concatenates the facet hashes in a
fixed order, so two styles with the same facets hash identically no matter
in which order the facets were assigned.

A Style is either *free* (freshly constructed or copied, freely mutable) or
*registered* with a StyleManager, which makes it the canonical, shared
instance for its hash. Registered styles are never edited in place: the
``with_*`` methods return a new value that is resolved through the owning
manager, so every cell still pointing at the old canonical instance keeps
seeing it unchanged.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Type

from sheetsmith.conf import STYLE_PREFIX
from sheetsmith.exceptions import MissingReferenceError, StyleError
from sheetsmith.style.border import Border
from sheetsmith.style.cell_xf import CellXf
from sheetsmith.style.component import StyleComponent
from sheetsmith.style.fill import Fill
from sheetsmith.style.font import Font
from sheetsmith.style.number_format import NumberFormat

if TYPE_CHECKING:
    from sheetsmith.style.manager import StyleManager

# Canonical hashing order; never the assignment order
FACET_ORDER = ("border", "cell_xf", "fill", "font", "number_format")

FACET_TYPES: Dict[str, Type[StyleComponent]] = {
    "border": Border,
    "cell_xf": CellXf,
    "fill": Fill,
    "font": Font,
    "number_format": NumberFormat,
}


def _facet_property(attr: str) -> property:
    facet_type = FACET_TYPES[attr]
    slot = f"_{attr}"

    def getter(self: "Style") -> Optional[StyleComponent]:
        return getattr(self, slot)

    def setter(self: "Style", value: Optional[StyleComponent]) -> None:
        self._ensure_free(f"with_{attr}()")
        if value is not None and not isinstance(value, facet_type):
            raise TypeError(
                f"{attr} must be a {facet_type.__name__}, got {type(value).__name__}"
            )
        setattr(self, slot, value)

    return property(getter, setter, doc=f"The {facet_type.__name__} facet of the style.")


class Style:
    """A cell format composed of border, cellXf, fill, font and number format.

    Attributes:
        border, cell_xf, fill, font, number_format: The five facets
        name: Explicit name if one was assigned, otherwise the live hash
        manager: Owning StyleManager (None while the style is free)
        ordinal: Position in the owning manager (None while free)
        internal_id: Fixed order of a built-in style (None for user styles)
    """

    border = _facet_property("border")
    cell_xf = _facet_property("cell_xf")
    fill = _facet_property("fill")
    font = _facet_property("font")
    number_format = _facet_property("number_format")

    def __init__(
        self,
        name: Optional[str] = None,
        *,
        border: Optional[Border] = None,
        cell_xf: Optional[CellXf] = None,
        fill: Optional[Fill] = None,
        font: Optional[Font] = None,
        number_format: Optional[NumberFormat] = None,
    ) -> None:
        """Initialize a free Style.

        Args:
            name: Optional explicit (permanent) name
            border, cell_xf, fill, font, number_format: Facets to use; a
                default facet is created for each one not given
        """
        self._manager: Optional["StyleManager"] = None
        self._ordinal: Optional[int] = None
        self._hash: Optional[str] = None
        self._internal_id: Optional[int] = None
        self._name = name
        self.border = Border() if border is None else border
        self.cell_xf = CellXf() if cell_xf is None else cell_xf
        self.fill = Fill() if fill is None else fill
        self.font = Font() if font is None else font
        self.number_format = NumberFormat() if number_format is None else number_format

    @classmethod
    def builtin(cls, name: str, internal_id: int) -> "Style":
        """Create a built-in style whose hash carries its fixed internal id."""
        style = cls(name)
        style._internal_id = internal_id
        return style

    @property
    def manager(self) -> Optional["StyleManager"]:
        return self._manager

    @property
    def ordinal(self) -> Optional[int]:
        return self._ordinal

    @property
    def internal_id(self) -> Optional[int]:
        return self._internal_id

    @property
    def is_registered(self) -> bool:
        return self._manager is not None

    @property
    def is_internal(self) -> bool:
        return self._internal_id is not None

    @property
    def has_explicit_name(self) -> bool:
        return self._name is not None

    @property
    def name(self) -> str:
        if self._name is not None:
            return self._name
        return self.calculate_hash()

    @name.setter
    def name(self, value: str) -> None:
        self._ensure_free("copy()")
        if not isinstance(value, str) or not value:
            raise StyleError("A style name must be a non-empty string")
        self._name = value

    @property
    def hash(self) -> str:
        return self.calculate_hash()

    def calculate_hash(self) -> str:
        """Content hash: prefix, optional internal id, facets in canonical order.

        Raises:
            MissingReferenceError: If any facet is missing
        """
        if self._hash is not None:
            return self._hash
        self._require_facets("The hash of the style could not be created")
        parts = [STYLE_PREFIX]
        if self._internal_id is not None:
            parts.append(f"{self._internal_id}:")
        parts.extend(getattr(self, attr).calculate_hash() for attr in FACET_ORDER)
        return "".join(parts)

    def copy(self) -> "Style":
        """Deep copy into a free style without manager, ordinal, internal id or name.

        Raises:
            MissingReferenceError: If any facet is missing
        """
        self._require_facets("The style could not be copied")
        return Style(**{attr: getattr(self, attr).copy() for attr in FACET_ORDER})

    def with_changes(self, **facets: Optional[StyleComponent]) -> "Style":
        """Return a variant with some facets replaced.

        A free style yields a new free style. A registered style yields the
        canonical style of its manager for the edited content (an existing
        one if the content is already known, else the newly registered
        variant); the style itself is left untouched.

        An explicit name carries over to the variant. The internal id does
        not, so an edited built-in style becomes a user style.
        """
        unknown = set(facets) - set(FACET_ORDER)
        if unknown:
            raise TypeError(f"Unknown style facet(s): {', '.join(sorted(unknown))}")
        variant = self.copy()
        variant._name = self._name
        for attr, facet in facets.items():
            setattr(variant, attr, facet.copy() if facet is not None else None)
        if self._manager is not None:
            return self._manager.add_style(variant)
        return variant

    def with_border(self, border: Border) -> "Style":
        return self.with_changes(border=border)

    def with_cell_xf(self, cell_xf: CellXf) -> "Style":
        return self.with_changes(cell_xf=cell_xf)

    def with_fill(self, fill: Fill) -> "Style":
        return self.with_changes(fill=fill)

    def with_font(self, font: Font) -> "Style":
        return self.with_changes(font=font)

    def with_number_format(self, number_format: NumberFormat) -> "Style":
        return self.with_changes(number_format=number_format)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self._name,
            "internal_id": self._internal_id,
        }
        self._require_facets("The style could not be serialized")
        for attr in FACET_ORDER:
            data[attr] = getattr(self, attr).to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Style":
        style = cls(
            data.get("name"),
            **{
                attr: FACET_TYPES[attr].from_dict(data[attr])
                for attr in FACET_ORDER
                if attr in data
            },
        )
        style._internal_id = data.get("internal_id")
        return style

    def _detached(self) -> "Style":
        """Free clone keeping internal id and explicit name (for other managers)."""
        clone = self.copy()
        clone._internal_id = self._internal_id
        clone._name = self._name
        return clone

    def _register(self, manager: "StyleManager", ordinal: int, key: str) -> None:
        for attr in FACET_ORDER:
            frozen = getattr(self, attr).copy()
            frozen._freeze()
            setattr(self, f"_{attr}", frozen)
        self._manager = manager
        self._ordinal = ordinal
        self._hash = key

    def _require_facets(self, message: str) -> None:
        missing = [attr for attr in FACET_ORDER if getattr(self, attr) is None]
        if missing:
            raise MissingReferenceError(
                f"{message} because one or more components are missing: {', '.join(missing)}"
            )

    def _ensure_free(self, alternative: str) -> None:
        if self._manager is not None:
            raise StyleError(
                f"Style {self.name!r} is registered and shared; use {alternative} instead"
            )

    def __repr__(self) -> str:
        if self._manager is not None:
            return f"Style(name={self.name!r}, ordinal={self._ordinal})"
        return f"Style(name={self._name!r}, free)"
