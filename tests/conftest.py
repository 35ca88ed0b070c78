"""Pytest configuration for fieldcheck tests."""

import sys
from enum import Enum, IntEnum
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


class MockEnum(IntEnum):
    A = 0
    B = 1
    C = 2


class StringEnum(Enum):
    A = "a"
    B = "b"
    C = "c"


@pytest.fixture
def mock_enum():
    return MockEnum


@pytest.fixture
def string_enum():
    return StringEnum
