# Limits and default values shared by the addressing, style and worksheet modules.

from types import MappingProxyType

MIN_COLUMN = 0
MAX_COLUMN = 16383
MIN_ROW = 0
MAX_ROW = 1048575

MAX_WORKSHEET_NAME_LENGTH = 31
FORBIDDEN_WORKSHEET_NAME_CHARS = frozenset("[]*?/\\:")

DEFAULT_COLUMN_WIDTH = 10.0
DEFAULT_ROW_HEIGHT = 15.0
MAX_COLUMN_WIDTH = 255.0
MAX_ROW_HEIGHT = 409.5

STYLE_PREFIX = "StyleRegister="
DEFAULT_COLOR = "FF000000"
DEFAULT_INDEXED_COLOR = 64
FIRST_CUSTOM_NUMBER_FORMAT_ID = 164
MIN_FONT_SIZE = 1.0
MAX_FONT_SIZE = 409.0

DEFAULT_FONT = MappingProxyType(
    {
        "name": "Calibri",
        "size": 11.0,
        "family": "2",
        "color_theme": 1,
    }
)
