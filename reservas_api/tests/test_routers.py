from __future__ import annotations

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

import reservas_api.presentation.routers as routers
from conftest import make_record


class _DummyRepo:
    """Stand-in repository; the stubbed services below never call it."""


@pytest.fixture()
def app() -> FastAPI:
    """
    Tiny FastAPI app with ONLY the router under test and the repository dependency stubbed out.
    """
    test_app = FastAPI()
    test_app.include_router(routers.router)
    test_app.dependency_overrides[routers.get_repository] = lambda: _DummyRepo()
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def test_list_passes_query_filters_as_criteria(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def _fake_list_reservations_service(criteria, repo):
        seen["criteria"] = criteria
        return {"mensaje": "Reservas encontradas:", "reservas": [make_record(1)]}

    monkeypatch.setattr(routers, "list_reservations_service", _fake_list_reservations_service)

    r = client.get("/api/reservas", params={"hotel": "Hotel Paraíso", "estado": "pendiente", "num_huespedes": "2"})
    assert r.status_code == 200
    assert r.json()["reservas"][0]["id"] == 1
    assert seen["criteria"].hotel == "Hotel Paraíso"
    assert seen["criteria"].estado == "pendiente"
    assert seen["criteria"].num_huespedes == "2"
    assert seen["criteria"].fecha_inicio is None


def test_list_not_found_maps_to_404(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_list_reservations_service(criteria, repo):
        raise routers.NotFoundError("No se encontraron reservas con estado X.")

    monkeypatch.setattr(routers, "list_reservations_service", _fake_list_reservations_service)

    r = client.get("/api/reservas", params={"estado": "X"})
    assert r.status_code == 404
    assert r.json()["detail"] == "No se encontraron reservas con estado X."


def test_list_invalid_input_maps_to_400(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_list_reservations_service(criteria, repo):
        raise routers.InvalidInputError("Fechas inválidas. Utilice el formato YYYY-MM-DD.")

    monkeypatch.setattr(routers, "list_reservations_service", _fake_list_reservations_service)

    r = client.get("/api/reservas", params={"fecha_inicio": "x", "fecha_fin": "y"})
    assert r.status_code == 400


def test_create_returns_201(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_create_reservation_service(body, repo):
        return {"id": 3, **body.model_dump()}

    monkeypatch.setattr(routers, "create_reservation_service", _fake_create_reservation_service)

    payload = make_record(0)
    payload.pop("id")
    r = client.post("/api/reservas", json=payload)
    assert r.status_code == 201
    assert r.json()["id"] == 3


def test_create_storage_failure_maps_to_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_create_reservation_service(body, repo):
        raise routers.StorageFailure("Error al guardar las reservas")

    monkeypatch.setattr(routers, "create_reservation_service", _fake_create_reservation_service)

    payload = make_record(0)
    payload.pop("id")
    r = client.post("/api/reservas", json=payload)
    assert r.status_code == 500
    assert r.json()["detail"] == "Error al guardar las reservas"


def test_summary_unexpected_error_maps_to_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_get_reservation_summary_service(repo):
        raise RuntimeError("boom")

    monkeypatch.setattr(routers, "get_reservation_summary_service", _fake_get_reservation_summary_service)

    r = client.get("/api/reservas/resumen")
    assert r.status_code == 500
    assert r.json()["detail"] == "Error al obtener el resumen de reservas"


def test_summary_is_not_routed_as_an_id(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(routers, "get_reservation_summary_service", lambda repo: {"totalReservas": 4})

    r = client.get("/api/reservas/resumen")
    assert r.status_code == 200
    assert r.json() == {"totalReservas": 4}


def test_get_by_id_not_found_maps_to_404(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_get_reservation_service(reservation_id, repo):
        raise routers.NotFoundError("Reserva no encontrada")

    monkeypatch.setattr(routers, "get_reservation_service", _fake_get_reservation_service)

    r = client.get("/api/reservas/99")
    assert r.status_code == 404
    assert r.json()["detail"] == "Reserva no encontrada"


def test_non_integer_id_is_rejected(client: TestClient) -> None:
    r = client.get("/api/reservas/abc")
    assert r.status_code == 422


def test_update_storage_failure_maps_to_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_update_reservation_service(reservation_id, body, repo):
        raise routers.StorageFailure("Error al guardar las reservas")

    monkeypatch.setattr(routers, "update_reservation_service", _fake_update_reservation_service)

    r = client.put("/api/reservas/1", json={"estado": "CONFIRMADA"})
    assert r.status_code == 500


def test_delete_returns_204_without_body(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(routers, "delete_reservation_service", lambda reservation_id, repo: None)

    r = client.delete("/api/reservas/1")
    assert r.status_code == 204
    assert r.content == b""


def test_delete_not_found_maps_to_404(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_delete_reservation_service(reservation_id, repo):
        raise routers.NotFoundError(f"No se encontró ninguna reserva con el ID {reservation_id}")

    monkeypatch.setattr(routers, "delete_reservation_service", _fake_delete_reservation_service)

    r = client.delete("/api/reservas/5")
    assert r.status_code == 404
    assert r.json()["detail"] == "No se encontró ninguna reserva con el ID 5"
