import pandas as pd
import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    assert client.get("/").json() == {"message": "Legal document drafting API is running."}


def test_process_grammar(client):
    resp = client.post("/process", json={"text": "i went. he said.", "kind": "grammar"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["suggestion"] == "I went. He said."
    assert body["confidence"] == 0.8


def test_process_unknown_kind_is_not_an_error(client):
    resp = client.post("/process", json={"text": "as is", "kind": "poetry"})
    assert resp.status_code == 200
    assert resp.json() == {
        "original": "as is",
        "suggestion": "as is",
        "explanation": "No processing applied",
        "confidence": 1.0,
        "changes": [],
    }


def test_suggestions(client):
    resp = client.post("/suggestions", json={"text": "It is alleged that i was there."})
    assert resp.status_code == 200
    assert len(resp.json()) == 4


def test_validate(client):
    resp = client.post("/validate", json={"text": "Nothing to see here.", "title": "Draft", "document_type": "fir"})
    body = resp.json()
    assert body["completeness"] == 0
    assert body["document_type"] == "fir"
    assert len(body["results"]) == 5


def test_templates(client):
    assert [t["id"] for t in client.get("/templates").json()] == ["fir", "charge-sheet", "investigation-report"]
    assert [t["id"] for t in client.get("/templates", params={"category": "Police"}).json()] == ["fir"]


def test_template_detail_and_404(client):
    body = client.get("/templates/fir").json()
    assert body["fields"][0]["id"] == "fir_number"
    assert client.get("/templates/nope").status_code == 404


def test_render_reports_missing_fields(client):
    resp = client.post("/templates/charge-sheet/render", json={"form_data": {"case_number": "CC/1"}})
    assert resp.status_code == 422
    assert resp.json()["detail"]["court_name"] == "Court Name is required"


def test_render_unknown_template(client):
    resp = client.post("/templates/nope/render", json={})
    assert resp.status_code == 404


def test_render_ok(client):
    form = {
        "case_number": "CC/1", "court_name": "Sessions Court", "accused_name": "A",
        "accused_address": "Chennai", "charges": "Section 379 IPC", "incident_date": "1/1/2025",
        "incident_summary": "s", "evidence_summary": "e", "investigation_summary": "i",
        "public_prosecutor": "P",
    }
    resp = client.post("/templates/charge-sheet/render", json={"form_data": form, "title": "State v. A"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "State v. A"
    assert "**Court:** Sessions Court" in body["content"]


def test_register_validation(client, tmp_path):
    src = tmp_path / "docs.csv"
    pd.DataFrame([{"title": "Title", "content": "dated 12/05/2024", "document_type": ""}]).to_csv(src, index=False)
    out = tmp_path / "out" / "validated.csv"
    body = client.post("/registers/validate", json={"input_path": str(src), "output_path": str(out)}).json()
    assert body["documents"] == 1
    assert body["incomplete"] == 0
    assert out.exists()


def test_register_missing_input(client, tmp_path):
    body = client.post(
        "/registers/validate",
        json={"input_path": str(tmp_path / "absent.csv"), "output_path": str(tmp_path / "o.csv")},
    ).json()
    assert "error" in body
