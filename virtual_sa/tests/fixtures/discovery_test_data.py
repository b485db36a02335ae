"""
Sample LLM payloads and a recording upstream stub for discovery tests.
"""
import json

import httpx


SAMPLE_ARCHITECTURE = {
    "use_case_title": "HR Policy RAG Assistant",
    "variants": [
        {
            "variant_name": "Cloud-Optimized RAG",
            "variant_rationale": "Lowest time to value on hosted endpoints",
            "nodes": [
                {"id": "ui", "label": "Employee Portal", "subtitle": "Question Entry Point", "type": "input", "product": "React"},
                {"id": "embed", "label": "NV-Embed", "subtitle": "Vector Similarity Search", "type": "process", "product": "NeMo Retriever"},
                {"id": "llm", "label": "Llama-3.3-70B", "subtitle": "Answer Generation", "type": "process", "product": "NIM"},
                {"id": "out", "label": "Answer Panel", "subtitle": "Cited Response", "type": "output", "product": "React"},
            ],
            "estimated_monthly_cost": 3500,
            "deployment_model": "cloud-api",
            "estimated_capex": 0,
        }
    ],
    "sad": {
        "overview": ["Retrieval over internal documents for HR policy questions", "NIM hosted inference"],
        "assumptions": ["~5K queries/day"],
        "nfrs": ["P95 latency < 3s"],
        "data_flow": ["1. Employee asks a question"],
        "security": ["PII redaction on output"],
        "operations": ["RTO ~15min: stateless LLM"],
        "cost_notes": ["NIM API: ~$2,100/mo"],
    },
    "next_steps": [
        {"title": "Index the policy corpus", "description": "Chunk and embed the HR handbook."},
    ],
    "sa_questions": ["Should we fine-tune or rely on retrieval alone?"],
}


def completion(content):
    """Minimal chat-completions body carrying one assistant message"""
    return {
        "id": "cmpl-test",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


class UpstreamStub:
    """
    Stand-in for the NVIDIA API behind an httpx.MockTransport.

    Replies with ``status_code`` and ``body`` (a dict sent as JSON, or a raw
    string) and records every request it receives.
    """

    def __init__(self, status_code=200, body=None, error=None):
        self.status_code = status_code
        self.body = body if body is not None else completion(json.dumps(SAMPLE_ARCHITECTURE))
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)
