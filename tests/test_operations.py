"""Tests for creating and listing operations."""

from __future__ import annotations

import re
import sqlite3

from tests.conftest import auth_header

OPERATION = {"value": 150.5, "description": "Salario", "type": "entrada"}


def test_list_without_authorization_header(client):
    response = client.get("/operations")

    assert response.status_code == 401
    assert response.text == "nao tem autorizacao para acessar"


def test_list_with_unknown_token(client):
    response = client.get("/operations", headers=auth_header("never-issued"))

    assert response.status_code == 401
    assert response.text == "Nao encontrou token no banco de sessoes"


def test_list_with_malformed_header(client, token):
    response = client.get("/operations", headers={"Authorization": token})

    assert response.status_code == 401


def test_list_empty(client, token):
    response = client.get("/operations", headers=auth_header(token))

    assert response.status_code == 200
    assert response.json() == []


def test_create_then_list(client, token):
    created = client.post("/operations", json=OPERATION, headers=auth_header(token))

    assert created.status_code == 201
    assert created.text == "Operação criada"

    operations = client.get("/operations", headers=auth_header(token)).json()
    assert len(operations) == 1
    operation = operations[0]
    assert operation["value"] == OPERATION["value"]
    assert operation["description"] == OPERATION["description"]
    assert operation["type"] == OPERATION["type"]
    assert re.fullmatch(r"\d{2}/\d{2}", operation["date"])
    assert "_id" in operation
    assert "idUser" in operation


def test_invalid_type_wins_over_missing_token(client):
    response = client.post("/operations", json={**OPERATION, "type": "outro"})

    assert response.status_code == 422
    assert any('"type"' in m for m in response.json())


def test_invalid_type_wins_over_unknown_token(client):
    response = client.post(
        "/operations",
        json={**OPERATION, "type": "outro"},
        headers=auth_header("never-issued"),
    )

    assert response.status_code == 422


def test_create_without_token(client):
    response = client.post("/operations", json=OPERATION)

    assert response.status_code == 401
    assert response.text == "nao tem autorizacao para acessar"


def test_create_with_unknown_token(client):
    response = client.post("/operations", json=OPERATION, headers=auth_header("never-issued"))

    assert response.status_code == 401
    assert response.text == "Esse token n existe"


def test_create_rejects_empty_description_and_non_numeric_value(client, token):
    response = client.post(
        "/operations",
        json={"value": "muito", "description": "", "type": "saida"},
        headers=auth_header(token),
    )

    assert response.status_code == 422
    assert len(response.json()) == 2


def test_operations_are_scoped_to_their_owner(client, register, token):
    client.post("/operations", json=OPERATION, headers=auth_header(token))
    register({"name": "Joao", "email": "joao@example.com", "password": "xyz789"})
    other = client.post("/user", json={"email": "joao@example.com", "password": "xyz789"}).json()["token"]
    client.post(
        "/operations",
        json={"value": 20, "description": "Padaria", "type": "saida"},
        headers=auth_header(other),
    )

    mine = client.get("/operations", headers=auth_header(token)).json()
    theirs = client.get("/operations", headers=auth_header(other)).json()

    assert [op["description"] for op in mine] == ["Salario"]
    assert [op["description"] for op in theirs] == ["Padaria"]
    assert mine[0]["idUser"] != theirs[0]["idUser"]


def test_store_failure_is_reported_as_500(client, token, monkeypatch):
    from mywallet_api.app.services import operation_service

    def broken_connection():
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(operation_service, "get_connection", broken_connection)

    response = client.get("/operations", headers=auth_header(token))

    assert response.status_code == 500
    assert response.text == "database is locked"


def test_non_finite_values_are_rejected(client, token):
    overflow = client.post(
        "/operations",
        content='{"value": 1e400, "description": "Infinito", "type": "entrada"}',
        headers={**auth_header(token), "Content-Type": "application/json"},
    )
    not_a_number = client.post(
        "/operations",
        json={**OPERATION, "value": "nan"},
        headers=auth_header(token),
    )

    assert overflow.status_code == 422
    assert overflow.json() == ['"value" must be a finite number']
    assert not_a_number.status_code == 422
    assert client.get("/operations", headers=auth_header(token)).json() == []


def test_whole_number_value_is_listed_as_submitted(client, token):
    client.post(
        "/operations",
        json={"value": 20, "description": "Padaria", "type": "saida"},
        headers=auth_header(token),
    )
    client.post(
        "/operations",
        json={"value": 20.75, "description": "Feira", "type": "saida"},
        headers=auth_header(token),
    )

    values = {op["description"]: op["value"] for op in client.get("/operations", headers=auth_header(token)).json()}

    assert values["Padaria"] == 20
    assert isinstance(values["Padaria"], int)
    assert values["Feira"] == 20.75


def test_cors_headers_are_sent(client):
    response = client.get("/operations", headers={"Origin": "http://localhost:3000"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client):
    response = client.options(
        "/operations",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization",
        },
    )

    assert response.status_code == 200
    assert "POST" in response.headers["access-control-allow-methods"]
