import pytest


@pytest.fixture
def sample_payload():
    return [
        {"_id": "a", "title": "DevFest", "date": "2024-01-10T00:00:00.000Z", "status": "past"},
        {"_id": "b", "title": "I/O Extended", "date": "2024-06-01T00:00:00.000Z", "status": "upcoming"},
        {"_id": "c", "title": "Study Jam", "date": "2024-03-05T00:00:00.000Z", "status": "ongoing"},
    ]
