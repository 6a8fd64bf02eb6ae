from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from reservas_api.infrastructure.repositories.reservation_repository_json_impl import JsonReservationRepositoryImpl
from reservas_api.main import create_app
from reservas_api.presentation import routers


def make_record(id: int, **overrides: Any) -> dict[str, Any]:
    base = {
        "id": id,
        "nombre": f"Huésped {id}",
        "habitacion": str(100 + id),
        "hotel": "Hotel Paraíso",
        "tipo_habitacion": "SUITE",
        "fecha_inicio": "2024-10-15",
        "fecha_fin": "2024-10-20",
        "estado": "CONFIRMADA",
        "num_huespedes": 2,
    }
    base.update(overrides)
    return base


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "reservas.json"


@pytest.fixture()
def write_store(store_path: Path):
    """Seed the temporary reservations file with the given records."""

    def _write(records: list[dict[str, Any]]) -> None:
        store_path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")

    return _write


@pytest.fixture()
def read_store(store_path: Path):
    def _read() -> Any:
        return json.loads(store_path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture()
def repo(store_path: Path) -> JsonReservationRepositoryImpl:
    return JsonReservationRepositoryImpl(file_path=store_path)


@pytest.fixture()
def app(repo: JsonReservationRepositoryImpl) -> FastAPI:
    """
    Full application with the repository pointed at a temporary JSON file,
    so tests never touch the packaged data file.
    """
    test_app = create_app()
    test_app.dependency_overrides[routers.get_repository] = lambda: repo
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
