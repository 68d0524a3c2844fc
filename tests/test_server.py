"""Tests for the HTTP query server."""

import pytest
from fastapi.testclient import TestClient

from qsee import __version__
from qsee.config import settings
from qsee.engine.core import InputFileError
from qsee.server import create_app


@pytest.fixture
def client(sample_input):
    with TestClient(create_app(inp=sample_input)) as c:
        yield c


class TestHealth:
    def test_health(self, client, sample_input):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["entries"] == len(sample_input)


class TestData:
    def test_string_value(self, client):
        response = client.get("/v1/data/QM.REFERENCE")
        assert response.status_code == 200
        assert response.json() == {"key": "QM.REFERENCE", "type": "string", "value": "RHF"}

    def test_key_is_normalized(self, client):
        response = client.get("/v1/data/scf.maxiter", params={"type": "int"})
        assert response.json()["value"] == 128

    def test_bool_value(self, client):
        assert client.get("/v1/data/SCF.DIIS", params={"type": "bool"}).json()["value"] is True

    def test_float_value(self, client):
        value = client.get("/v1/data/SCF.CONV", params={"type": "float"}).json()["value"]
        assert value == pytest.approx(1e-8)

    def test_list_element(self, client):
        assert client.get("/v1/data/SCF.ITEMS[2]").json()["value"] == "C"

    def test_missing_key(self, client):
        response = client.get("/v1/data/SCF.NOPE")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Data SCF.NOPE Not Found"}

    def test_conversion_failure(self, client):
        response = client.get("/v1/data/QM.REFERENCE", params={"type": "int"})
        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_invalid_boolean(self, client):
        response = client.get("/v1/data/QM.JOB", params={"type": "bool"})
        assert response.status_code == 422
        assert response.json()["error"] == "Invalid Boolean Input: SCF"

    def test_unknown_type_rejected(self, client):
        assert client.get("/v1/data/SCF.MAXITER", params={"type": "complex"}).status_code == 422


class TestSectionsAndLists:
    def test_section(self, client):
        data = client.get("/v1/sections/scf").json()
        assert data["section"] == "SCF"
        assert data["exists"] is True
        assert "MAXITER" in data["keys"]
        assert data["data"]["DIIS.NKEEP"] == "8"

    def test_missing_section(self, client):
        data = client.get("/v1/sections/NOPE").json()
        assert data == {"section": "NOPE", "exists": False, "keys": [], "data": {}}

    def test_list(self, client):
        assert client.get("/v1/lists/SCF.ITEMS").json() == {
            "key": "SCF.ITEMS",
            "exists": True,
            "size": 3,
        }

    def test_not_a_list(self, client):
        data = client.get("/v1/lists/SCF.MAXITER").json()
        assert data["exists"] is False
        assert data["size"] == 0


def test_summary(client):
    data = client.get("/v1/summary").json()
    assert data["formula"] == "H2"
    assert data["title"] == "Hydrogen molecule, RHF/cc-pVDZ"
    assert len(data["atoms"]) == 2


def test_loads_input_file_at_startup(sample_file):
    with TestClient(create_app(input_file=str(sample_file))) as c:
        assert c.get("/v1/data/MOLECULE.MULT", params={"type": "int"}).json()["value"] == 1
        assert c.get("/health").json()["source"] == str(sample_file)


def test_unreadable_input_file_aborts_startup(tmp_path):
    app = create_app(input_file=str(tmp_path / "missing.inp"))
    with pytest.raises(InputFileError):
        with TestClient(app):
            pass


def test_no_input_configured(monkeypatch):
    monkeypatch.setattr(settings, "input_file", None)
    with TestClient(create_app()) as c:
        response = c.get("/v1/data/SCF.MAXITER")
        assert response.status_code == 503
        assert response.json() == {"success": False, "error": "No input file loaded"}
        assert c.get("/health").json()["entries"] == 0
