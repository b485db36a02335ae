"""
NVIDIA AI Blueprint catalog used for SAD recommendations.

Keywords are matched as lowercase substrings, so keep them lowercase and
specific enough that two hits mean something.
"""
from typing import List

from pydantic import BaseModel, ConfigDict


class Blueprint(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    summary: str
    keywords: List[str]


BLUEPRINTS = [
    Blueprint(
        id="enterprise-rag",
        title="Build an Enterprise RAG Pipeline Blueprint",
        summary="Multimodal document ingestion, NeMo Retriever embedding and reranking, and a NIM LLM for grounded answers.",
        keywords=["rag", "retrieval", "knowledge base", "document", "search", "q&a", "question answering", "embedding"],
    ),
    Blueprint(
        id="customer-service-assistant",
        title="AI Virtual Assistant for Customer Service",
        summary="Context-aware support agent with conversation memory, retrieval over product data, and human escalation.",
        keywords=["customer service", "customer support", "support agent", "virtual assistant", "ticket", "call center", "escalat", "chatbot"],
    ),
    Blueprint(
        id="pdf-extraction",
        title="Multimodal PDF Data Extraction",
        summary="Extract text, tables, charts and images from large PDF collections for downstream retrieval.",
        keywords=["pdf", "extraction", "ocr", "table", "chart", "invoice", "scan", "filing"],
    ),
    Blueprint(
        id="video-search-summarization",
        title="Video Search and Summarization Agent",
        summary="Vision-language models that ingest camera or video streams to answer questions and summarize events.",
        keywords=["video", "camera", "footage", "surveillance", "visual", "image", "defect", "inspection"],
    ),
    Blueprint(
        id="container-vulnerability",
        title="Vulnerability Analysis for Container Security",
        summary="Agentic CVE triage that checks SBOMs and code paths to decide whether a vulnerability is exploitable.",
        keywords=["cve", "vulnerabilit", "container", "sbom", "cybersecurity", "exploit", "patch", "security scan"],
    ),
    Blueprint(
        id="digital-human",
        title="Digital Human for Customer Service",
        summary="Speech, animation and LLM services combined into a lifelike interactive avatar.",
        keywords=["avatar", "digital human", "speech", "voice", "kiosk", "animation", "asr", "text-to-speech"],
    ),
    Blueprint(
        id="drug-discovery",
        title="Generative Virtual Screening for Drug Discovery",
        summary="Protein structure prediction, molecule generation and docking for early-stage discovery.",
        keywords=["drug", "molecule", "protein", "docking", "screening", "pharma", "biolog", "chemistry"],
    ),
    Blueprint(
        id="ai-research-agent",
        title="AI-Q Research Assistant for Enterprise Research",
        summary="Multi-agent reasoning over enterprise data and the web to produce cited research reports.",
        keywords=["research", "report", "analyst", "multi-agent", "reasoning", "web search", "10-k", "sec filing"],
    ),
    Blueprint(
        id="data-flywheel",
        title="Build a Data Flywheel",
        summary="Continuously distill and fine-tune smaller models from production traffic to cut inference cost.",
        keywords=["fine-tun", "distill", "flywheel", "customiz", "evaluation", "lora", "cost reduction", "smaller model"],
    ),
    Blueprint(
        id="agentic-safety",
        title="Safety for Agentic AI",
        summary="Guardrail evaluation and hardening for agents: jailbreak resistance, content safety, topic control.",
        keywords=["guardrail", "safety", "jailbreak", "prompt injection", "content moderation", "compliance", "pii", "hipaa"],
    ),
    Blueprint(
        id="retail-shopping-assistant",
        title="Retail Shopping Assistant",
        summary="Multimodal product search and recommendation agent over a retail catalog with cart actions.",
        keywords=["retail", "shopping", "product catalog", "recommendation", "e-commerce", "ecommerce", "cart", "merchandis"],
    ),
]
