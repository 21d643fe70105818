import pytest
from fastapi.testclient import TestClient

from vocabulary_api.app.api.deps import get_list_service, get_word_service
from vocabulary_api.app.core.security import create_access_token
from vocabulary_api.app.main import app

BASE = "/api/v1"


def auth(sub):
    return {"Authorization": f"Bearer {create_access_token({'sub': sub})}"}


@pytest.fixture
def client(list_service, word_service):
    app.dependency_overrides[get_list_service] = lambda: list_service
    app.dependency_overrides[get_word_service] = lambda: word_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def spanish(client):
    response = client.post(f"{BASE}/lists/", json={"name": "Spanish"}, headers=auth("alice"))
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_requests_without_token_are_rejected(client):
    assert client.get(f"{BASE}/lists/").status_code == 401
    response = client.get(f"{BASE}/words/", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 401


def test_create_list(spanish):
    assert spanish["name"] == "Spanish"
    assert spanish["creator"] == "alice"
    assert spanish["words"] == []
    assert spanish["updated_at"] is None


def test_create_list_with_empty_name(client):
    response = client.post(f"{BASE}/lists/", json={"name": ""}, headers=auth("alice"))
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


@pytest.mark.parametrize("kwargs", [{"json": ["Spanish"]}, {"json": "Spanish"}, {}])
def test_create_list_with_non_object_or_missing_body(client, kwargs):
    response = client.post(f"{BASE}/lists/", headers=auth("alice"), **kwargs)
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_malformed_json_body_is_invalid_input(client):
    response = client.post(
        f"{BASE}/lists/",
        content=b"{not json",
        headers={**auth("alice"), "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_add_word_without_body_to_missing_list(client):
    response = client.post(f"{BASE}/lists/ghost/words", headers=auth("alice"))
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


@pytest.mark.parametrize("kwargs", [{"json": ["hola", "hello", 1]}, {}])
def test_add_word_with_non_object_or_missing_body(client, spanish, kwargs):
    response = client.post(f"{BASE}/lists/{spanish['id']}/words", headers=auth("alice"), **kwargs)
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_change_difficulty_without_body(client, spanish):
    word = client.post(
        f"{BASE}/lists/{spanish['id']}/words",
        json={"word": "hola", "meaning": "hello", "difficulty": 1},
        headers=auth("alice"),
    ).json()
    response = client.patch(f"{BASE}/words/{word['id']}/difficulty", headers=auth("alice"))
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_non_integer_difficulty_in_path(client):
    response = client.get(f"{BASE}/words/difficulty/abc", headers=auth("alice"))
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"
    assert "difficulty" in response.json()["detail"]


def test_get_list_by_other_caller(client, spanish):
    response = client.get(f"{BASE}/lists/{spanish['id']}", headers=auth("bob"))
    assert response.status_code == 403
    assert response.json()["error"] == "unauthorized"
    assert spanish["id"] in response.json()["detail"]


def test_update_list(client, spanish):
    response = client.put(f"{BASE}/lists/{spanish['id']}", json={"name": "Español"}, headers=auth("alice"))
    assert response.status_code == 200
    assert response.json()["name"] == "Español"
    assert response.json()["updated_at"] is not None


def test_add_word_to_missing_list(client):
    response = client.post(
        f"{BASE}/lists/ghost/words",
        json={"word": "hola", "meaning": "hello", "difficulty": 1},
        headers=auth("alice"),
    )
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_add_word_with_bad_payload(client, spanish):
    response = client.post(
        f"{BASE}/lists/{spanish['id']}/words",
        json={"word": "hola", "meaning": "hello", "difficulty": -3},
        headers=auth("alice"),
    )
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_word_lifecycle(client, spanish):
    list_url = f"{BASE}/lists/{spanish['id']}"
    added = client.post(
        f"{list_url}/words",
        json={"word": "hola", "meaning": "hello", "difficulty": 1},
        headers=auth("alice"),
    )
    assert added.status_code == 201
    word = added.json()
    assert word["creator"] == "alice"

    fetched = client.get(f"{list_url}/words/{word['id']}", headers=auth("alice"))
    assert fetched.json() == word

    changed = client.patch(
        f"{BASE}/words/{word['id']}/difficulty", json={"difficulty": 3}, headers=auth("alice")
    )
    assert changed.status_code == 200
    assert changed.json()["difficulty"] == 3
    embedded = client.get(f"{list_url}/words/{word['id']}", headers=auth("alice")).json()
    assert embedded["difficulty"] == 3

    forbidden = client.patch(
        f"{BASE}/words/{word['id']}/difficulty", json={"difficulty": 0}, headers=auth("bob")
    )
    assert forbidden.status_code == 403

    updated = client.put(
        f"{list_url}/words/{word['id']}",
        json={"word": "hola", "meaning": "hi", "difficulty": 2},
        headers=auth("alice"),
    )
    assert updated.status_code == 200
    assert updated.json()["meaning"] == "hi"
    assert updated.json()["created_at"] == word["created_at"]

    count = client.get(f"{list_url}/count", headers=auth("alice"))
    assert count.json() == {"list_id": spanish["id"], "count": 1}

    by_difficulty = client.get(f"{BASE}/words/difficulty/2", headers=auth("bob"))
    assert [w["id"] for w in by_difficulty.json()] == [word["id"]]
    assert client.get(f"{BASE}/words/difficulty/1", headers=auth("bob")).json() == []
    assert len(client.get(f"{BASE}/words/initial", headers=auth("bob")).json()) == 1
    assert len(client.get(f"{BASE}/words/", headers=auth("bob")).json()) == 1

    deleted = client.delete(f"{list_url}/words/{word['id']}", headers=auth("alice"))
    assert deleted.status_code == 200
    assert deleted.json()["id"] == word["id"]
    missing = client.get(f"{list_url}/words/{word['id']}", headers=auth("alice"))
    assert missing.status_code == 404


def test_list_all_and_delete_list(client, spanish):
    client.post(f"{BASE}/lists/", json={"name": "German"}, headers=auth("bob"))
    client.post(
        f"{BASE}/lists/{spanish['id']}/words",
        json={"word": "hola", "meaning": "hello", "difficulty": 1},
        headers=auth("alice"),
    )
    everything = client.get(f"{BASE}/lists/", headers=auth("bob")).json()
    assert {item["name"] for item in everything} == {"Spanish", "German"}

    assert client.delete(f"{BASE}/lists/{spanish['id']}", headers=auth("bob")).status_code == 403
    response = client.delete(f"{BASE}/lists/{spanish['id']}", headers=auth("alice"))
    assert response.status_code == 200
    assert response.json()["deleted_words"] == 1
    assert client.get(f"{BASE}/words/", headers=auth("alice")).json() == []
    assert client.get(f"{BASE}/lists/{spanish['id']}", headers=auth("alice")).status_code == 404
