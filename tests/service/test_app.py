"""Tests for the viewer-facing HTTP service."""

from __future__ import annotations

import inspect
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from joborg.models import WorkRecord
from joborg.service import create_app
from joborg.stores import RecordStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    path = tmp_path / "works.json"
    store = RecordStore(path)
    store.put(
        "/w/acme.txt",
        WorkRecord(
            file="/w/acme.txt",
            language="java",
            quality="good",
            national=False,
            content_length=1500,
        ),
    )
    store.flush()
    return path


@pytest.fixture
def client(store_path: Path) -> TestClient:
    return TestClient(create_app(lambda: RecordStore(store_path)))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_works(client: TestClient) -> None:
    response = client.get("/works")
    assert response.status_code == 200
    [work] = response.json()
    assert work["id"] == "/w/acme.txt"
    assert work["title"] == "acme.txt"
    assert work["company"] == "Good quality works"
    assert work["applied"] is False


def test_set_applied_persists(client: TestClient, store_path: Path) -> None:
    response = client.post("/works/applied", json={"id": "/w/acme.txt", "applied": True})

    assert response.status_code == 200
    assert response.json()["applied"] is True
    assert RecordStore(store_path).get("/w/acme.txt").applied is True
    assert client.get("/works").json()[0]["applied"] is True


def test_set_applied_unknown_id_returns_404(client: TestClient) -> None:
    response = client.post("/works/applied", json={"id": "/w/missing.txt", "applied": True})
    assert response.status_code == 404


def test_corrupt_store_returns_500(tmp_path: Path) -> None:
    path = tmp_path / "works.json"
    path.write_text("not json", encoding="utf-8")
    client = TestClient(create_app(lambda: RecordStore(path)), raise_server_exceptions=False)

    response = client.get("/works")

    assert response.status_code == 500


def test_concurrent_set_applied_keeps_every_update(tmp_path: Path) -> None:
    path = tmp_path / "works.json"
    store = RecordStore(path)
    ids = [f"/w/job-{index:02d}.txt" for index in range(40)]
    for work_id in ids:
        store.put(
            work_id,
            WorkRecord(file=work_id, language="other", quality="low", national=False, content_length=1),
        )
    store.flush()
    client = TestClient(create_app(lambda: RecordStore(path)))

    def _mark(work_id: str) -> int:
        return client.post("/works/applied", json={"id": work_id, "applied": True}).status_code

    with ThreadPoolExecutor(max_workers=8) as pool:
        statuses = list(pool.map(_mark, ids))

    assert set(statuses) == {200}
    reloaded = RecordStore(path)
    assert all(reloaded.get(work_id).applied for work_id in ids)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["works.json"]


def test_store_dependency_runs_off_the_event_loop(client: TestClient) -> None:
    route = next(route for route in client.app.routes if getattr(route, "path", None) == "/works")
    [dependency] = route.dependant.dependencies

    assert not inspect.iscoroutinefunction(dependency.call)
