"""
Workbook-scoped style registry.

The StyleManager interns styles by content hash: for each distinct hash it
keeps exactly one canonical Style, and hands out that same instance whenever
an equal style is offered again. Registered styles receive dense ordinals
(starting after the built-in block) that are never reused; a document writer
emits the style table in ordinal order and writes each cell's ordinal as its
style index.

A manager belongs to exactly one workbook and is passed by handle; there is
no process-wide instance.
"""

import logging
from typing import Dict, Iterator, List, Optional

from sheetsmith.exceptions import StyleError
from sheetsmith.style.basic_styles import BASIC_STYLES
from sheetsmith.style.border import Border
from sheetsmith.style.cell_xf import CellXf
from sheetsmith.style.component import StyleComponent
from sheetsmith.style.fill import Fill
from sheetsmith.style.font import Font
from sheetsmith.style.number_format import NumberFormat
from sheetsmith.style.style import FACET_ORDER, Style

logger = logging.getLogger(__name__)


class StyleManager:
    """Registry mapping content hash to canonical Style, with stable ordinals."""

    def __init__(self) -> None:
        self._styles: Dict[str, Style] = {}
        self._ordered: List[Style] = []
        for factory in BASIC_STYLES:
            style = self.add_style(factory())
            if style.ordinal != style.internal_id:
                raise StyleError(
                    f"Built-in style {style.name!r} got ordinal {style.ordinal}, "
                    f"expected {style.internal_id}"
                )

    @property
    def basic_style_count(self) -> int:
        return len(BASIC_STYLES)

    @property
    def styles(self) -> tuple:
        """All canonical styles in ordinal order."""
        return tuple(self._ordered)

    def add_style(self, candidate: Style) -> Style:
        """Resolve a style to its canonical instance, registering it if new.

        Args:
            candidate: Style to resolve. A style registered with another
                manager is resolved by a detached clone.

        Returns:
            The canonical Style for the candidate's hash. If one already
            exists the candidate is discarded; otherwise the candidate itself
            becomes canonical (its facets are replaced by frozen copies).

        Raises:
            MissingReferenceError: If the candidate lacks a facet
            FormatError: If a facet is internally inconsistent
        """
        if not isinstance(candidate, Style):
            raise TypeError(f"Expected Style, got {type(candidate).__name__}")
        if candidate.manager is self:
            return candidate
        if candidate.manager is not None:
            candidate = candidate._detached()

        key = candidate.calculate_hash()
        for attr in FACET_ORDER:
            getattr(candidate, attr).validate()

        existing = self._styles.get(key)
        if existing is not None:
            logger.debug("Style resolved to existing ordinal %d", existing.ordinal)
            return existing

        ordinal = len(self._ordered)
        candidate._register(self, ordinal, key)
        self._styles[key] = candidate
        self._ordered.append(candidate)
        logger.debug("Registered style %r with ordinal %d", candidate.name, ordinal)
        return candidate

    resolve = add_style

    def get_style(self, ordinal: int) -> Style:
        if not 0 <= ordinal < len(self._ordered):
            raise StyleError(f"No style with ordinal {ordinal}")
        return self._ordered[ordinal]

    def get_style_by_hash(self, key: str) -> Optional[Style]:
        return self._styles.get(key)

    def get_style_by_name(self, name: str) -> Optional[Style]:
        for style in self._ordered:
            if style.name == name:
                return style
        return None

    def get_borders(self) -> List[Border]:
        return self._distinct("border")

    def get_cell_xfs(self) -> List[CellXf]:
        return self._distinct("cell_xf")

    def get_fills(self) -> List[Fill]:
        return self._distinct("fill")

    def get_fonts(self) -> List[Font]:
        return self._distinct("font")

    def get_number_formats(self) -> List[NumberFormat]:
        return self._distinct("number_format")

    def component_indices(self, style: Style) -> Dict[str, int]:
        """Map a canonical style onto the positions of its facets in the facet tables."""
        if style.manager is not self:
            raise StyleError(f"Style {style.name!r} is not registered with this manager")
        indices = {}
        for attr in FACET_ORDER:
            hashes = [facet.calculate_hash() for facet in self._distinct(attr)]
            indices[attr] = hashes.index(getattr(style, attr).calculate_hash())
        return indices

    def _distinct(self, attr: str) -> list:
        table: Dict[str, StyleComponent] = {}
        for style in self._ordered:
            facet = getattr(style, attr)
            table.setdefault(facet.calculate_hash(), facet)
        return list(table.values())

    def __contains__(self, style: object) -> bool:
        if not isinstance(style, Style):
            return False
        return style.manager is self or style.calculate_hash() in self._styles

    def __iter__(self) -> Iterator[Style]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"StyleManager(styles={len(self._ordered)})"
