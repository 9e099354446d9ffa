"""Pytest configuration and shared fixtures for climb areas tests."""

import pytest

from climb_areas.data import fetch_records, read_dataset


SAMPLE_CSV = """lat,lng,num,escuela
40.4,-3.7,12,Pedriza
-4.1,40.8,30,La Pedriza Norte
-0.8,42.3,120,Riglos
2.6,41.6,85,Montserrat
-5.3,36.1,40,El Chorro
"""


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def records():
    """Parsed LocationRecords for SAMPLE_CSV."""
    return read_dataset(SAMPLE_CSV)


@pytest.fixture
def session_state():
    """Plain dict standing in for st.session_state."""
    return {}


@pytest.fixture(autouse=True)
def clear_dataset_cache():
    """Reset the st.cache_data cache of fetch_records around each test."""
    fetch_records.clear()
    yield
    fetch_records.clear()
