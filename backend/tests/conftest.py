import pytest
from fastapi.testclient import TestClient

from timetabler.main import app
from timetabler.schemas.catalog import AvailabilityWindow


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def weekday_availability():
    return [AvailabilityWindow(day_of_week=day, start_time="08:00", end_time="17:00") for day in range(1, 6)]
