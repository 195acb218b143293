"""Number format facet of a style."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sheetsmith.conf import FIRST_CUSTOM_NUMBER_FORMAT_ID
from sheetsmith.exceptions import FormatError
from sheetsmith.style.component import StyleComponent, coerce_enum


class FormatNumber(Enum):
    """Predefined number formats (values are the built-in format ids)."""

    NONE = 0
    FORMAT_1 = 1    # 0
    FORMAT_2 = 2    # 0.00
    FORMAT_3 = 3    # #,##0
    FORMAT_4 = 4    # #,##0.00
    FORMAT_5 = 5
    FORMAT_6 = 6
    FORMAT_7 = 7
    FORMAT_8 = 8
    FORMAT_9 = 9    # 0%
    FORMAT_10 = 10  # 0.00%
    FORMAT_11 = 11  # 0.00E+00
    FORMAT_12 = 12  # # ?/?
    FORMAT_13 = 13  # # ??/??
    FORMAT_14 = 14  # m/d/yyyy
    FORMAT_15 = 15  # d-mmm-yy
    FORMAT_16 = 16  # d-mmm
    FORMAT_17 = 17  # mmm-yy
    FORMAT_18 = 18  # mm AM/PM
    FORMAT_19 = 19  # h:mm:ss AM/PM
    FORMAT_20 = 20  # h:mm
    FORMAT_21 = 21  # h:mm:ss
    FORMAT_22 = 22  # m/d/yyyy h:mm
    FORMAT_37 = 37
    FORMAT_38 = 38
    FORMAT_39 = 39
    FORMAT_40 = 40
    FORMAT_45 = 45  # mm:ss
    FORMAT_46 = 46  # [h]:mm:ss
    FORMAT_47 = 47  # mm:ss.0
    FORMAT_48 = 48  # ##0.0E+0
    FORMAT_49 = 49  # @
    CUSTOM = 164


_DATE_FORMATS = frozenset(
    {FormatNumber.FORMAT_14, FormatNumber.FORMAT_15, FormatNumber.FORMAT_16,
     FormatNumber.FORMAT_17, FormatNumber.FORMAT_22}
)
_TIME_FORMATS = frozenset(
    {FormatNumber.FORMAT_18, FormatNumber.FORMAT_19, FormatNumber.FORMAT_20,
     FormatNumber.FORMAT_21, FormatNumber.FORMAT_45, FormatNumber.FORMAT_46,
     FormatNumber.FORMAT_47}
)


@dataclass
class NumberFormat(StyleComponent):
    """Either a predefined format id or a custom format code.

    A custom format needs ``number=FormatNumber.CUSTOM``, a non-empty
    ``custom_format_code`` and an id of at least 164.
    """

    TAG = "numfmt"

    number: FormatNumber = FormatNumber.NONE
    custom_format_code: str = ""
    custom_format_id: int = FIRST_CUSTOM_NUMBER_FORMAT_ID

    @staticmethod
    def _check_number(value: Any) -> FormatNumber:
        return coerce_enum(FormatNumber, value, "number format")

    @staticmethod
    def _check_custom_format_code(value: Any) -> str:
        if not isinstance(value, str):
            raise FormatError(f"Custom format code must be a string, got {value!r}")
        return value

    @staticmethod
    def _check_custom_format_id(value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise FormatError(f"Custom format id must be an integer, got {value!r}")
        if value < FIRST_CUSTOM_NUMBER_FORMAT_ID:
            raise FormatError(
                f"Custom format id {value} is invalid; "
                f"ids start at {FIRST_CUSTOM_NUMBER_FORMAT_ID}"
            )
        return value

    @classmethod
    def custom(cls, code: str, format_id: int = FIRST_CUSTOM_NUMBER_FORMAT_ID) -> "NumberFormat":
        fmt = cls(FormatNumber.CUSTOM, code, format_id)
        fmt.validate()
        return fmt

    @property
    def is_custom_format(self) -> bool:
        return self.number is FormatNumber.CUSTOM

    @property
    def is_date_format(self) -> bool:
        return self.number in _DATE_FORMATS

    @property
    def is_time_format(self) -> bool:
        return self.number in _TIME_FORMATS

    def validate(self) -> None:
        if self.is_custom_format and not self.custom_format_code.strip():
            raise FormatError("A custom number format requires a non-empty format code")
