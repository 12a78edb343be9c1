from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app
from core.domain.models.task import Task
from infrastructure.container import get_task_repository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository

BASE = "/api/tasks"
MISSING_ID = "3f2b8c1e-5a4d-4e6f-9b7a-0c1d2e3f4a5b"


@pytest.fixture
def repo():
    repository = InMemoryTaskRepository()
    app.dependency_overrides[task_repository] = lambda: repository
    yield repository
    app.dependency_overrides.clear()


@pytest.fixture
def client(repo):
    # Sin context manager: no se ejecuta el lifespan ni la carga de ejemplo.
    return TestClient(app)


def _create(client, **payload):
    body = {"title": "Tarea"}
    body.update(payload)
    response = client.post(BASE, json=body)
    assert response.status_code == 201, response.text
    return response.json()


# ── crear ─────────────────────────────────────────────────────────────────────


def test_create_task_returns_camel_case_fields(client):
    response = client.post(
        BASE,
        json={
            "title": "Review case documents",
            "description": "Case ABC123",
            "dueDate": "2030-05-01T09:30:00Z",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Review case documents"
    assert data["description"] == "Case ABC123"
    assert data["status"] == "PENDING"
    assert data["dueDate"].startswith("2030-05-01T09:30:00")
    assert data["createdDate"] == data["updatedDate"]
    assert len(data["id"]) == 36


def test_create_task_with_explicit_status(client):
    data = _create(client, status="IN_PROGRESS")

    assert data["status"] == "IN_PROGRESS"


@pytest.mark.parametrize(
    "body",
    [
        {"title": ""},
        {"title": "   "},
        {"description": "sin título"},
        {"title": "x" * 256},
        {"title": "Estado raro", "status": "DONE"},
        {"title": "Fecha rara", "dueDate": "mañana"},
    ],
)
def test_create_task_rejects_invalid_body(client, repo, body):
    response = client.post(BASE, json=body)

    assert response.status_code == 400
    assert repo.count() == 0


# ── consultar ─────────────────────────────────────────────────────────────────


def test_list_tasks_ordered_by_due_date(client):
    late = _create(client, title="D3", dueDate="2030-01-03T00:00:00")
    undated = _create(client, title="Sin fecha")
    early = _create(client, title="D1", dueDate="2030-01-01T00:00:00")

    response = client.get(BASE)

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [early["id"], late["id"], undated["id"]]


def test_list_tasks_filtered_by_status(client):
    _create(client, title="Pendiente")
    done = _create(client, title="Hecha", status="COMPLETED")

    response = client.get(BASE, params={"status": "COMPLETED"})

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [done["id"]]


def test_list_tasks_with_unknown_status_is_bad_request(client):
    assert client.get(BASE, params={"status": "DONE"}).status_code == 400


def test_get_task_by_id(client):
    created = _create(client, title="Obtener")

    response = client.get(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.parametrize("task_id", ["99999", MISSING_ID])
def test_get_unknown_task_is_not_found(client, task_id):
    response = client.get(f"{BASE}/{task_id}")

    assert response.status_code == 404
    assert task_id in response.json()["detail"]


def test_list_statuses(client):
    response = client.get(f"{BASE}/statuses")

    assert response.status_code == 200
    assert response.json() == ["PENDING", "IN_PROGRESS", "COMPLETED", "CANCELLED"]


# ── actualizar ────────────────────────────────────────────────────────────────


def test_update_status_refreshes_updated_date(client):
    created = _create(client)

    response = client.put(f"{BASE}/{created['id']}/status", json={"status": "IN_PROGRESS"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "IN_PROGRESS"
    assert data["createdDate"] == created["createdDate"]
    assert data["updatedDate"] != created["updatedDate"]


def test_update_status_without_status_is_bad_request(client):
    created = _create(client)

    response = client.put(f"{BASE}/{created['id']}/status", json={"status": None})

    assert response.status_code == 400


def test_update_status_of_unknown_task_is_not_found(client):
    response = client.put(f"{BASE}/{MISSING_ID}/status", json={"status": "COMPLETED"})

    assert response.status_code == 404


def test_update_task_overwrites_fields(client):
    created = _create(client, title="Inicial", description="d1", status="IN_PROGRESS")

    response = client.put(
        f"{BASE}/{created['id']}",
        json={"title": "Editada", "dueDate": "2031-02-03T04:05:06"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Editada"
    assert data["description"] is None
    assert data["status"] == "IN_PROGRESS"
    assert data["dueDate"].startswith("2031-02-03T04:05:06")
    assert client.get(f"{BASE}/{created['id']}").json() == data


def test_update_task_with_blank_title_is_bad_request(client):
    created = _create(client)

    response = client.put(f"{BASE}/{created['id']}", json={"title": ""})

    assert response.status_code == 400


def test_update_unknown_task_is_not_found(client):
    response = client.put(f"{BASE}/{MISSING_ID}", json={"title": "x"})

    assert response.status_code == 404


# ── eliminar ──────────────────────────────────────────────────────────────────


def test_delete_task_then_not_found(client):
    created = _create(client)

    response = client.delete(f"{BASE}/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"{BASE}/{created['id']}").status_code == 404
    assert client.delete(f"{BASE}/{created['id']}").status_code == 404


# ── vencidas / estadísticas / búsqueda / intervalo ────────────────────────────


def test_overdue_excludes_closed_and_future_tasks(client):
    overdue = _create(client, title="Vencida", dueDate="2020-01-01T00:00:00Z")
    _create(client, title="Completada", status="COMPLETED", dueDate="2020-01-01T00:00:00Z")
    _create(client, title="Futura", dueDate="2100-01-01T00:00:00Z")
    _create(client, title="Sin fecha")

    response = client.get(f"{BASE}/overdue")

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [overdue["id"]]


def test_statistics(client):
    _create(client, title="Vencida", dueDate="2020-01-01T00:00:00Z")
    _create(client, title="En curso", status="IN_PROGRESS")
    _create(client, title="Hecha", status="COMPLETED", dueDate="2020-01-01T00:00:00Z")
    _create(client, title="Cancelada", status="CANCELLED")

    response = client.get(f"{BASE}/statistics")

    assert response.status_code == 200
    assert response.json() == {
        "total": 4,
        "pending": 1,
        "inProgress": 1,
        "completed": 1,
        "cancelled": 1,
        "overdue": 1,
    }


def test_search_matches_title_or_description(client):
    by_title = _create(client, title="Schedule hearing", dueDate="2030-01-01T00:00:00")
    by_description = _create(
        client, title="Otra", description="HEARING room", dueDate="2030-01-02T00:00:00"
    )
    _create(client, title="Nada")

    response = client.get(f"{BASE}/search", params={"q": "hearing"})

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [by_title["id"], by_description["id"]]


def test_search_without_term_returns_everything(client):
    _create(client, title="A")
    _create(client, title="B")

    assert len(client.get(f"{BASE}/search").json()) == 2
    assert len(client.get(f"{BASE}/search", params={"q": "  "}).json()) == 2


def test_due_between_is_inclusive(client):
    start = _create(client, title="Inicio", dueDate="2030-01-01T00:00:00")
    end = _create(client, title="Fin", dueDate="2030-01-31T00:00:00")
    _create(client, title="Fuera", dueDate="2030-02-01T00:00:00")

    response = client.get(
        f"{BASE}/due",
        params={"start": "2030-01-01T00:00:00", "end": "2030-01-31T00:00:00"},
    )

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [start["id"], end["id"]]


@pytest.mark.parametrize(
    "params",
    [
        {"start": "2030-01-01T00:00:00"},
        {"start": "2030-02-01T00:00:00", "end": "2030-01-01T00:00:00"},
    ],
)
def test_due_between_with_invalid_range_is_bad_request(client, params):
    assert client.get(f"{BASE}/due", params=params).status_code == 400


# ── transversal ───────────────────────────────────────────────────────────────


def test_cors_preflight(client):
    response = client.options(
        BASE,
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers


class _BrokenRepository(InMemoryTaskRepository):
    def find_all(self) -> list[Task]:
        raise RuntimeError("conexión perdida con secreto interno")


def test_unexpected_error_returns_generic_500():
    broken = _BrokenRepository()
    app.dependency_overrides[task_repository] = lambda: broken
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get(BASE)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "secreto" not in response.text


def test_startup_seeds_sample_data(monkeypatch):
    monkeypatch.setenv("SEED_SAMPLE_DATA", "true")
    get_task_repository.cache_clear()
    try:
        with TestClient(app) as client:
            tasks = client.get(BASE).json()
            overdue = client.get(f"{BASE}/overdue").json()
    finally:
        get_task_repository.cache_clear()

    assert len(tasks) == 4
    assert [t["title"] for t in overdue] == ["File legal documents"]


def test_startup_without_seeding_leaves_store_empty(monkeypatch):
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    get_task_repository.cache_clear()
    try:
        with TestClient(app) as client:
            tasks = client.get(BASE).json()
    finally:
        get_task_repository.cache_clear()

    assert tasks == []


def test_create_then_start_task_scenario(client):
    due = (datetime.now(timezone.utc) + timedelta(days=1)).isoformat()
    created = client.post(
        BASE,
        json={"title": "Integration Test Task", "status": "PENDING", "dueDate": due},
    )

    assert created.status_code == 201
    task = created.json()
    assert task["id"] is not None
    assert task["status"] == "PENDING"
    assert task["createdDate"] is not None
    assert task["updatedDate"] is not None

    started = client.put(f"{BASE}/{task['id']}/status", json={"status": "IN_PROGRESS"})

    assert started.status_code == 200
    assert started.json()["status"] == "IN_PROGRESS"
    assert started.json()["updatedDate"] != task["updatedDate"]
