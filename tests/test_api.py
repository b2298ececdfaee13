"""HTTP API tests (FastAPI TestClient)."""
import pytest
from fastapi.testclient import TestClient

from api import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


SCENARIO_B = {
    'internationalTrip': True,
    'seniorityYears': 10,
    'tafb': 20,
    'hourlyRate': 60,
    'credit': 30,
    'position': 'Purser',
    'aircraft': 'B757',
    'isRegionalDestination': True,
    'nightPayHours': 0,
}


def test_calculate_returns_breakdown(client):
    resp = client.post("/api/calculate", json=SCENARIO_B)
    assert resp.status_code == 200
    data = resp.json()
    assert data['position'] == 'Purser'
    assert data['perdiem'] == pytest.approx(2.95)
    assert data['perdiemValue'] == pytest.approx(59.0)
    assert data['positionCredit'] == pytest.approx(90.0)
    assert data['internationalCredit'] == pytest.approx(60.0)
    assert data['nightPayCredit'] == 0
    assert data['baseValue'] == pytest.approx(1800.0)
    assert data['seniorityFactor'] == 5
    assert data['totalTripValue'] == pytest.approx(2009.0)
    assert data['totalTripValueFormatted'] == "$2,009.00"
    assert {'label': 'International Credit', 'value': '$60.00'} in data['breakdown']


def test_calculate_galley_ignores_credit_for_position(client):
    body = dict(SCENARIO_B, position='Galley', hoursInWidebody=12)
    resp = client.post("/api/calculate", json=body)
    assert resp.status_code == 200
    assert resp.json()['positionCredit'] == 12


def test_calculate_rejects_with_all_field_errors(client):
    body = dict(SCENARIO_B, seniorityYears=-1, tafb=-5)
    resp = client.post("/api/calculate", json=body)
    assert resp.status_code == 400
    detail = resp.json()['detail']
    assert detail['errors'] == [
        {'field': 'seniorityYears', 'message': 'Seniority years must be a positive number'},
        {'field': 'tafb', 'message': 'TAFB must be a positive number'},
    ]


def test_calculate_rejects_bad_position(client):
    resp = client.post("/api/calculate", json=dict(SCENARIO_B, position='Captain'))
    assert resp.status_code == 400
    assert resp.json()['detail']['errors'][0]['field'] == 'position'


def test_calculate_rejects_non_object_body(client):
    resp = client.post("/api/calculate", json=[1, 2, 3])
    assert resp.status_code == 400


def test_options(client):
    data = client.get("/api/options").json()
    assert data['positions'] == ['Speaker', 'Galley', 'Purser']
    assert {'value': 'widebody', 'label': 'Widebody'} in data['aircraft']
    assert data['positionInputs']['Galley'] == ['hoursInWidebody']
    assert data['defaults']['position'] == 'Speaker'


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()['status'] == 'ok'


def test_index_without_pwa(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.json()['message']


def test_calculate_empty_body_is_bad_request(client):
    resp = client.post("/api/calculate")
    assert resp.status_code == 400
    assert resp.json()['detail']['errors'] == [
        {'field': 'input', 'message': 'Trip details must be an object'},
    ]


def test_calculate_unreadable_json_is_bad_request(client):
    resp = client.post(
        "/api/calculate",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    detail = resp.json()['detail']
    assert detail['message'] == 'Invalid trip details'
    assert detail['errors'] == [
        {'field': 'input', 'message': 'Trip details must be an object'},
    ]


def test_calculate_overflow_is_reported_not_crashed(client):
    """Finite inputs whose product overflows still get a 200"""
    body = {
        'internationalTrip': False,
        'seniorityYears': 0,
        'tafb': 0,
        'hourlyRate': 1e200,
        'credit': 1e200,
        'position': 'Speaker',
        'isRegionalDestination': False,
        'nightPayHours': 0,
    }
    resp = client.post("/api/calculate", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data['overflow'] is True
    assert data['baseValue'] is None
    assert data['totalTripValue'] is None
    assert data['positionCredit'] == pytest.approx(2.5e200)
    assert data['perdiem'] == pytest.approx(2.20)


def test_calculate_normal_result_has_no_overflow(client):
    resp = client.post("/api/calculate", json=SCENARIO_B)
    assert resp.json()['overflow'] is False
