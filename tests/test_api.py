import pytest
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def fresh_world():
    client.post("/world/reset", json={})


def test_derived():
    resp = client.post("/derived", json={"mass": 8.54e36})
    assert resp.status_code == 200
    body = resp.json()
    assert body["schwarzschild_radius"] == pytest.approx(1.268e10, rel=1e-3)
    assert body["photon_sphere_radius"] == pytest.approx(1.5 * body["schwarzschild_radius"])


def test_derived_rejects_non_positive_mass():
    resp = client.post("/derived", json={"mass": 0})
    assert resp.status_code == 400
    assert "mass" in resp.json()["detail"]


def test_integrate():
    resp = client.post("/integrate", json={"mass": 8.54e36, "x": 200.0, "y": 300.0, "steps": 300})
    assert resp.status_code == 200
    body = resp.json()
    assert body["absorbed"] is True
    assert body["path"][0] == [200.0, 300.0]


def test_integrate_validates_request():
    assert client.post("/integrate", json={"mass": 8.54e36, "x": 0.0, "y": 0.0, "dt": 0}).status_code == 422
    resp = client.post("/integrate", json={"mass": 8.54e36, "x": 0.0, "y": 0.0, "integrator": "nope"})
    assert resp.status_code == 400


def test_world_step_and_state():
    resp = client.post("/world/step", json={"ticks": 5})
    assert resp.status_code == 200
    assert resp.json()["ticks"] == 5
    state = client.get("/world").json()
    assert state["ticks"] == 5
    assert len(state["photons"][0]["path"]) == 6


def test_world_reset_with_scenario():
    resp = client.post("/world/reset", json={"width": 1000, "height": 700, "scenario": "parallel_beam", "integrator": "rk4"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["black_hole"]["position"] == [500.0, 350.0]
    assert body["integrator"] == "rk4"
    assert len(body["photons"]) == 9
    assert client.post("/world/reset", json={"scenario": "binary"}).status_code == 400


def test_world_step_rejects_bad_dt():
    assert client.post("/world/step", json={"dt": -1}).status_code == 422
    assert client.get("/world").json()["ticks"] == 0
