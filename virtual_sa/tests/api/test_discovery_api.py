"""
API tests for the Discovery Accelerator endpoints.
"""
import httpx
import pytest
from fastapi import status

from virtual_sa.services.prompts import EXAMPLE_PROMPTS

from fixtures.discovery_test_data import SAMPLE_ARCHITECTURE, completion

USE_CASE = "I want a customer support agent that can search our knowledge base and escalate to humans when needed"


class TestGuardAndCatalog:
    """Test the endpoints that never call the LLM."""

    def test_examples(self, client):
        response = client.get("/api/v1/discovery/examples")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == EXAMPLE_PROMPTS
        assert len(response.json()) == 6

    @pytest.mark.parametrize("prompt,accepted,reason", [
        ("hi", False, "too_short"),
        ("Build a fraud detection pipeline for card transactions", True, None),
        ("Create a recipe recommendation app", False, "off_topic"),
    ])
    def test_guard(self, client, upstream, prompt, accepted, reason):
        response = client.post("/api/v1/discovery/guard", json={"prompt": prompt})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["accepted"] is accepted
        assert data["reason"] == reason
        assert upstream.requests == []

    def test_list_blueprints(self, client):
        response = client.get("/api/v1/discovery/blueprints")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[0]["id"] == "enterprise-rag"

    def test_recommend_blueprints(self, client):
        response = client.post("/api/v1/discovery/blueprints", json={
            "use_case_title": "RAG chatbot for internal HR knowledge base",
            "overview": ["Grounded answers via retrieval over policy docs"],
        })

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) <= 3
        assert "enterprise-rag" in [b["id"] for b in data]

    def test_cost_estimate(self, client):
        response = client.post("/api/v1/discovery/cost-estimate", json={
            "variant": SAMPLE_ARCHITECTURE["variants"][0],
            "multiplier": 1.5,
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "variant_name": "Cloud-Optimized RAG",
            "multiplier": 1.5,
            "monthly_cost": 5250,
            "queries_per_day_label": "75K/day",
        }

    def test_cost_estimate_out_of_range(self, client):
        response = client.post("/api/v1/discovery/cost-estimate", json={
            "variant": SAMPLE_ARCHITECTURE["variants"][0],
            "multiplier": 5,
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGenerate:
    """Test POST /api/v1/discovery/generate."""

    def test_generate_success(self, client, upstream):
        response = client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["architecture"]["use_case_title"] == "HR Policy RAG Assistant"
        assert data["architecture"]["sad"]["capex_notes"] == []
        assert data["stale"] is False
        assert data["generation_token"] is None
        assert "enterprise-rag" in [b["id"] for b in data["blueprints"]]
        assert len(upstream.requests) == 1

    def test_generate_with_session(self, client):
        first = client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE, "session_id": "tab-1"})
        second = client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE, "session_id": "tab-1"})

        assert first.json()["generation_token"] == 1
        assert second.json()["generation_token"] == 2
        assert second.json()["stale"] is False

    def test_rejected_prompt(self, client, upstream):
        response = client.post("/api/v1/discovery/generate", json={"prompt": "Who won the football match?"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "technology or business use case" in response.json()["error"]["message"]
        assert upstream.requests == []

    def test_missing_key(self, keyless_client):
        response = keyless_client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["error"]["message"].startswith("Missing or invalid NVIDIA API key")

    def test_upstream_unauthorized(self, client, upstream):
        upstream.status_code = 401
        upstream.body = {"title": "Unauthorized"}

        response = client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["error"]["message"].startswith("Missing or invalid NVIDIA API key")

    def test_upstream_error(self, client, upstream):
        upstream.status_code = 503
        upstream.body = "overloaded"

        response = client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE})

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["error"]["message"] == "NVIDIA API error (503): overloaded"

    def test_unparseable_reply(self, client, upstream):
        upstream.body = completion("I cannot help with that.")

        response = client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE})

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["error"]["message"].startswith("Architecture generation failed:")

    def test_network_failure(self, client, upstream):
        upstream.error = httpx.ConnectError("connection refused")

        response = client.post("/api/v1/discovery/generate", json={"prompt": USE_CASE})

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert "connection refused" in response.json()["error"]["message"]


class TestChat:
    """Test POST /api/v1/discovery/chat."""

    def test_chat(self, client, upstream):
        upstream.body = completion("NIM runs on your own GPUs.")

        response = client.post("/api/v1/discovery/chat", json={
            "sad_context": SAMPLE_ARCHITECTURE,
            "messages": [{"role": "user", "content": "Can this run on-prem?"}],
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["reply"] == "NIM runs on your own GPUs."

    def test_chat_requires_messages(self, client):
        response = client.post("/api/v1/discovery/chat", json={"sad_context": SAMPLE_ARCHITECTURE, "messages": []})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_chat_upstream_error(self, client, upstream):
        upstream.status_code = 500
        upstream.body = "internal"

        response = client.post("/api/v1/discovery/chat", json={
            "sad_context": SAMPLE_ARCHITECTURE,
            "messages": [{"role": "user", "content": "Hello?"}],
        })

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["error"]["message"] == "Chat API error (500)"
