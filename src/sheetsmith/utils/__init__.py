"""
Utility functions for sheetsmith.

This module provides utilities for working with style tables and worksheets:
- visualization: Text rendering of style tables and cell grids
- serialization: JSON serialization/deserialization of style tables
"""

from .visualization import visualize_styles, visualize_worksheet
from .serialization import (
    serialize,
    deserialize,
    to_json,
    from_json,
    SERIALIZATION_VERSION
)

__all__ = [
    'visualize_styles',
    'visualize_worksheet',
    'serialize',
    'deserialize',
    'to_json',
    'from_json',
    'SERIALIZATION_VERSION'
]
