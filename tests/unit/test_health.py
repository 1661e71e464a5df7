"""Unit tests for health and root endpoints."""

import pytest


@pytest.mark.unit
class TestHealthCheck:
    """Test health check endpoint"""

    def test_health_returns_ok(self, client):
        """Happy path: health check reports the service and its store"""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "fm-document-service"
        assert body["document_count"] == 0

    def test_health_counts_deleted_documents(self, client, store):
        doc = store.create("ws", "Title", "", "user").document
        store.delete(doc.id)

        assert client.get("/health").json()["document_count"] == 1

    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "running"
