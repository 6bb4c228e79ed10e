"""
测试 /v1/students 接口的状态码与返回结构
"""
from unittest.mock import MagicMock

import pytest

from app.api.dependencies import get_student_service
from app.main import app

BASE = "/v1/students"

NEW_STUDENT = {"name": "Maria", "email": "maria@email.com", "ra": "456", "cpf": "222.222.222-22"}


def test_create_returns_201_with_location(client):
    response = client.post(BASE, json=NEW_STUDENT)

    assert response.status_code == 201
    body = response.json()
    assert body == {"id": body["id"], **NEW_STUDENT}
    assert response.headers["location"].endswith(f"{BASE}/{body['id']}")

    fetched = client.get(response.headers["location"])
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_duplicate_ra_returns_400(client):
    client.post(BASE, json=NEW_STUDENT)

    response = client.post(BASE, json={**NEW_STUDENT, "name": "Outra", "cpf": "1"})

    assert response.status_code == 400
    assert response.json()["code"] == 400
    assert response.json()["msg"] == "Invalid data or RA already exists."
    assert client.get(f"{BASE}/paged").json()["totalItems"] == 1


def test_create_missing_field_returns_400(client):
    response = client.post(BASE, json={"name": "Maria", "email": "maria@email.com"})

    assert response.status_code == 400
    assert response.json()["msg"] == "Invalid data"


def test_get_missing_returns_404(client):
    response = client.get(f"{BASE}/999")

    assert response.status_code == 404
    assert response.json() == {"code": 404, "data": None, "msg": "Student not found"}


def test_update_returns_204_and_keeps_ra_and_cpf(client):
    created = client.post(BASE, json=NEW_STUDENT).json()

    response = client.put(
        f"{BASE}/{created['id']}",
        json={"name": "Maria Atualizada", "email": "nova@email.com", "ra": "999", "cpf": "000"},
    )

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"{BASE}/{created['id']}").json() == {
        "id": created["id"],
        "name": "Maria Atualizada",
        "email": "nova@email.com",
        "ra": "456",
        "cpf": "222.222.222-22",
    }


def test_update_missing_returns_404(client):
    response = client.put(f"{BASE}/999", json={"name": "X", "email": "x@email.com"})

    assert response.status_code == 404


def test_delete_then_get_returns_404(client):
    created = client.post(BASE, json=NEW_STUDENT).json()

    assert client.delete(f"{BASE}/{created['id']}").status_code == 204
    assert client.get(f"{BASE}/{created['id']}").status_code == 404
    assert client.delete(f"{BASE}/{created['id']}").status_code == 404


def test_paged_defaults(client, add_students):
    add_students(25)

    body = client.get(f"{BASE}/paged").json()

    assert body["pageNumber"] == 1
    assert body["pageSize"] == 10
    assert body["totalItems"] == 25
    assert [s["name"] for s in body["items"]] == [f"Aluno {i}" for i in range(1, 11)]
    assert set(body["items"][0]) == {"id", "name", "email", "ra", "cpf"}


def test_paged_with_query_parameters(client, add_students):
    add_students(25)

    body = client.get(
        f"{BASE}/paged",
        params={"pageNumber": 1, "pageSize": 5, "search": "ALUNO2", "sortBy": "name", "sortDesc": "true"},
    ).json()

    # aluno2@, aluno20@ .. aluno25@ 共7条
    assert body["totalItems"] == 7
    assert [s["name"] for s in body["items"]] == ["Aluno 25", "Aluno 24", "Aluno 23", "Aluno 22", "Aluno 21"]


def test_paged_out_of_range_page_is_empty(client, add_students):
    add_students(3)

    body = client.get(f"{BASE}/paged", params={"pageNumber": 5, "pageSize": 10}).json()

    assert body["items"] == []
    assert body["totalItems"] == 3


@pytest.fixture
def failing_service():
    service = MagicMock()
    for name in ("get_paged", "get_by_id", "create", "update", "delete"):
        getattr(service, name).side_effect = RuntimeError("database is down")
    app.dependency_overrides[get_student_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_student_service, None)


@pytest.mark.parametrize("method, path, payload", [
    ("GET", f"{BASE}/paged", None),
    ("GET", f"{BASE}/1", None),
    ("POST", BASE, NEW_STUDENT),
    ("PUT", f"{BASE}/1", {"name": "X", "email": "x@email.com"}),
    ("DELETE", f"{BASE}/1", None),
])
def test_unexpected_errors_return_500_without_detail(client, failing_service, method, path, payload):
    response = client.request(method, path, json=payload)

    assert response.status_code == 500
    assert response.json() == {"code": 500, "data": None, "msg": "Internal server error"}
    assert "database is down" not in response.text


def test_healthz(client):
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "Healthy"}


def test_paged_largest_page_number_is_empty(client, add_students):
    add_students(3)

    response = client.get(f"{BASE}/paged", params={"pageNumber": 2 ** 31 - 1, "pageSize": 2 ** 31 - 1})

    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["totalItems"] == 3


@pytest.mark.parametrize("params", [
    {"pageNumber": 10 ** 12, "pageSize": 10 ** 12},
    {"pageNumber": 1, "pageSize": 2 ** 63},
])
def test_paged_parameters_beyond_int32_return_400(client, add_students, params):
    add_students(3)

    response = client.get(f"{BASE}/paged", params=params)

    assert response.status_code == 400
    assert response.json()["msg"] == "Invalid data"
