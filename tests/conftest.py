# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from marc_codec.core.domain.record import Record
from marc_codec.infrastructure.config import _loader
from tests.fixtures.records import TWO_FIELD_UTF8
from tests.fixtures.records import RecordBuilder


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation(monkeypatch):
    """Reset logging and the cached default configuration between tests"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    monkeypatch.setattr(_loader, "_default_config", None)

    yield


@pytest.fixture
def two_field_record() -> Record:
    """UTF-8 record with a control number and a title statement"""
    return RecordBuilder.two_field_record()


@pytest.fixture
def two_field_bytes() -> bytes:
    """ISO 2709 serialization of ``two_field_record``"""
    return TWO_FIELD_UTF8


@pytest.fixture
def sample_records() -> list[Record]:
    """Three small records with different field mixes"""
    return [
        RecordBuilder.two_field_record(),
        RecordBuilder.book(control_number="rec-2", title="Second book", author="Doe, Jane"),
        RecordBuilder.book(control_number="rec-3", title="Third book", subjects=["Cats", "Dogs"]),
    ]


@pytest.fixture
def marc_file(tmp_path, sample_records) -> str:
    """Binary MARC21 file holding ``sample_records``"""
    # Local imports
    from marc_codec.adapters.api import write

    path = tmp_path / "records.mrc"
    path.write_bytes(write(sample_records))
    return str(path)
