import httpx
import respx
from fastapi.testclient import TestClient

from puppy_bowl.config import API_URL
from puppy_bowl.main import app

PLAYERS = [
    {"id": 1, "name": "Rex", "breed": "Beagle", "imageUrl": "http://img.test/rex.png"},
]


def test_health():
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert "X-Request-ID" in response.headers


@respx.mock
def test_list_view_through_the_whole_stack():
    route = respx.get(f"{API_URL.rstrip('/')}/players").mock(
        return_value=httpx.Response(200, json={"data": {"players": PLAYERS}})
    )

    with TestClient(app) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert "<h2>Rex</h2>" in response.text
    assert route.call_count == 1


@respx.mock
def test_app_can_be_started_twice_in_one_process():
    respx.get(f"{API_URL.rstrip('/')}/players").mock(
        return_value=httpx.Response(200, json={"data": {"players": PLAYERS}})
    )

    for _ in range(2):
        with TestClient(app) as client:
            response = client.get("/")
            assert response.status_code == 200
            assert "<h2>Rex</h2>" in response.text
