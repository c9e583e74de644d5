"""
Test document endpoints
"""
import base64
from unittest.mock import patch

from app.core.config import settings

PASSPORT = {
    "document_type": "Passport",
    "additional_info": "Expires 2031",
    "file_name": "passport.pdf",
    "file_data": base64.b64encode(b"%PDF-1.4 fake").decode(),
    "tags": ["id", "travel"]
}


def test_upload_document(test_client, auth_headers):
    response = test_client.post("/api/v1/documents", json=PASSPORT, headers=auth_headers)
    assert response.status_code == 201
    document = response.json()
    assert document["file_data"] == PASSPORT["file_data"]
    assert document["custom_type"] is None
    assert document["created_at"] == document["updated_at"]


def test_other_document_needs_custom_type(test_client, auth_headers):
    response = test_client.post(
        "/api/v1/documents",
        json={**PASSPORT, "document_type": "Other"},
        headers=auth_headers
    )
    assert response.status_code == 422

    response = test_client.post(
        "/api/v1/documents",
        json={**PASSPORT, "document_type": "Other", "custom_type": "Birth Certificate"},
        headers=auth_headers
    )
    assert response.status_code == 201
    assert response.json()["custom_type"] == "Birth Certificate"


def test_replace_document_keeps_created_at(test_client, auth_headers):
    document = test_client.post("/api/v1/documents", json=PASSPORT, headers=auth_headers).json()

    response = test_client.patch(
        f"/api/v1/documents/{document['id']}",
        json={**PASSPORT, "file_name": "passport-renewed.pdf"},
        headers=auth_headers
    )
    assert response.status_code == 200
    replaced = response.json()
    assert replaced["created_at"] == document["created_at"]
    assert replaced["file_name"] == "passport-renewed.pdf"


def test_document_size_limit(test_client, auth_headers):
    with patch.object(settings, "MAX_FILE_SIZE", 4):
        response = test_client.post("/api/v1/documents", json=PASSPORT, headers=auth_headers)
    assert response.status_code == 422


def test_invalid_base64(test_client, auth_headers):
    response = test_client.post(
        "/api/v1/documents",
        json={**PASSPORT, "file_data": "%%%"},
        headers=auth_headers
    )
    assert response.status_code == 422


def test_documents_are_private(test_client, auth_headers, other_headers):
    document = test_client.post("/api/v1/documents", json=PASSPORT, headers=auth_headers).json()
    url = f"/api/v1/documents/{document['id']}"

    assert test_client.get(url, headers=other_headers).status_code == 404
    assert test_client.delete(url, headers=other_headers).status_code == 404
    assert test_client.delete(url, headers=auth_headers).status_code == 204
    assert test_client.get(url, headers=auth_headers).status_code == 404
