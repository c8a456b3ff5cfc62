# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import pytest

from app.main import _normalize_cors


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "env": "test"}


def test_pdf_served_when_present(client, docs_dir):
    (docs_dir / "manual_en.pdf").write_bytes(b"%PDF-1.4 en")
    resp = client.get("/docs/manual_en.pdf")
    assert resp.status_code == 200
    assert resp.content == b"%PDF-1.4 en"
    assert resp.headers["content-type"] == "application/pdf"


def test_missing_pdf_is_404(client, docs_dir):
    resp = client.get("/docs/manual_de.pdf")
    assert resp.status_code == 404


def test_openapi_ui_moved_off_docs(client):
    assert client.get("/api/docs").status_code == 200
    assert client.get("/api/openapi.json").status_code == 200


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", []),
        (None, []),
        ("http://a, http://b,", ["http://a", "http://b"]),
        ('["http://a", " http://b "]', ["http://a", "http://b"]),
        (["http://a", " ", "http://b"], ["http://a", "http://b"]),
        (42, []),
    ],
)
def test_normalize_cors(value, expected):
    assert _normalize_cors(value) == expected
