"""Shared pytest fixtures for sheetsmith tests."""

import pandas as pd
import pytest

from sheetsmith import StyleManager, Workbook


@pytest.fixture
def manager() -> StyleManager:
    return StyleManager()


@pytest.fixture
def workbook() -> Workbook:
    return Workbook("Sheet1")


@pytest.fixture
def worksheet(workbook):
    return workbook.current_worksheet


@pytest.fixture
def sales() -> pd.DataFrame:
    return pd.DataFrame({
        "region": ["north", "south", "east"],
        "units": [120, 85, 42],
        "revenue": [1500.5, 990.0, 410.25],
    })
