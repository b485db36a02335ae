"""
Built-in ROI simulator scenarios
"""
from ..models.domain import (
    Alternative,
    DiagramNode,
    Metric,
    NodeType,
    Scenario,
    Solution,
)


HEALTHCARE = Scenario(
    id="healthcare",
    title="Patient Triage Agent",
    industry="Healthcare",
    accent="#ff4d6a",
    problem_statement=(
        "Your hospital's AI triage agent responds in 8.5s, costs $15 per 1K requests, "
        "hallucinates unsafe diagnoses (45% safety), and only triages 120 patients/hour. "
        "Apply NVIDIA solutions to meet enterprise healthcare SLAs."
    ),
    base_annual_cost=540000,
    metrics=[
        Metric(key="latency", label="Avg Latency", unit="s", baseline=8.5, target=2.0, higher_is_better=False),
        Metric(key="cost", label="Cost / 1K Reqs", unit="$", baseline=15.0, target=5.0, higher_is_better=False),
        Metric(key="safety", label="Safety Score", unit="%", baseline=45, target=95, higher_is_better=True),
        Metric(key="throughput", label="Patients / Hour", unit="", baseline=120, target=500, higher_is_better=True),
    ],
    solutions=[
        Solution(
            key="qlora",
            title="Llama-3 NIM + QLoRA Fine-Tune",
            product="NIM + NeMo Customizer",
            description=(
                "Replace the 400B monolith with a fine-tuned 70B NIM specialized for medical "
                "triage, deployed via LangGraph routing."
            ),
            impacts={"latency": -6.5, "cost": -12.0, "safety": 5, "throughput": 320},
            annual_cost_savings=320000,
            default_alt="openai_gpt4",
            alternatives=[
                Alternative(
                    key="openai_gpt4",
                    title="OpenAI GPT-4o API",
                    product="OpenAI",
                    impacts={"latency": 0, "cost": 0, "safety": 0, "throughput": 0},
                    annual_cost_savings=0,
                    tradeoff=(
                        "Current stack. No self-hosting: patient data leaves your VPC. "
                        "No fine-tuning for medical terminology."
                    ),
                ),
                Alternative(
                    key="self_hosted_llama",
                    title="Self-Hosted Llama (no NIM)",
                    product="Meta Llama + vLLM",
                    impacts={"latency": -3.0, "cost": -8.0, "safety": 3, "throughput": 150},
                    annual_cost_savings=100000,
                    tradeoff="No enterprise SLA, manual GPU infra management, no built-in scaling.",
                ),
            ],
        ),
        Solution(
            key="guardrails",
            title="NeMo Guardrails (HIPAA)",
            product="NeMo Guardrails",
            description=(
                "Inject programmable input/output rails for PII redaction, diagnosis "
                "hallucination prevention, and HIPAA-compliant audit logging."
            ),
            impacts={"latency": 0.2, "cost": 0.5, "safety": 48, "throughput": -5},
            annual_cost_savings=45000,
        ),
        Solution(
            key="mcp",
            title="MCP Tool Server (EHR)",
            product="Model Context Protocol",
            description=(
                "Standardized MCP server for secure, real-time retrieval from Epic/Cerner EHR "
                "systems, replacing fragile REST wrappers."
            ),
            impacts={"latency": -1.0, "cost": 0, "safety": 4, "throughput": 80},
            annual_cost_savings=28000,
        ),
        Solution(
            key="evaluator",
            title="NeMo Evaluator (Weekly)",
            product="NeMo Evaluator",
            description=(
                "Automated weekly evaluation of faithfulness, safety, and clinical accuracy via "
                "RAGAS metrics and custom medical benchmarks."
            ),
            impacts={"latency": 0, "cost": 0.2, "safety": 3, "throughput": 0},
            annual_cost_savings=15000,
        ),
    ],
    diagram_nodes=[
        DiagramNode(id="intake", label="Patient Intake Portal", type=NodeType.BASELINE),
        DiagramNode(id="gateway", label="API Gateway", type=NodeType.EXTERNAL),
        DiagramNode(id="guardrails", label="NeMo Guardrails", type=NodeType.NVIDIA, added_by_solution="guardrails"),
        DiagramNode(id="llm_nim", label="Llama-3 70B NIM (QLoRA)", type=NodeType.NVIDIA, added_by_solution="qlora"),
        DiagramNode(
            id="llm_openai", label="OpenAI GPT-4o", type=NodeType.ALTERNATIVE,
            added_by_solution="qlora", added_by_alt="openai_gpt4",
        ),
        DiagramNode(
            id="llm_vllm", label="Llama + vLLM", type=NodeType.ALTERNATIVE,
            added_by_solution="qlora", added_by_alt="self_hosted_llama",
        ),
        DiagramNode(id="mcp", label="MCP Server (Epic/Cerner)", type=NodeType.NVIDIA, added_by_solution="mcp"),
        DiagramNode(id="ehr", label="EHR System", type=NodeType.EXTERNAL),
        DiagramNode(id="evaluator", label="NeMo Evaluator", type=NodeType.NVIDIA, added_by_solution="evaluator"),
        DiagramNode(id="dashboard", label="Triage Dashboard", type=NodeType.BASELINE),
    ],
    success_message=(
        "SA Recommendation: By migrating to a fine-tuned NIM with QLoRA and deploying NeMo "
        "Guardrails for HIPAA compliance, you achieved sub-2s latency and 95%+ safety, ready "
        "for production rollout across all hospital departments."
    ),
)


FINTECH = Scenario(
    id="fintech",
    title="Fraud Detection Pipeline",
    industry="FinTech",
    accent="#ffa726",
    problem_statement=(
        "Your real-time fraud detection pipeline processes 2K transactions/sec with an 8% "
        "false-positive rate, 340ms detection latency, and fails 60% of SOX audit checks. "
        "NVIDIA solutions can fix all four bottlenecks."
    ),
    base_annual_cost=890000,
    metrics=[
        Metric(key="throughput", label="Txns / Second", unit="", baseline=2000, target=15000, higher_is_better=True),
        Metric(key="falsePositive", label="False Positive Rate", unit="%", baseline=8.0, target=1.0, higher_is_better=False),
        Metric(key="latency", label="Detection Latency", unit="ms", baseline=340, target=50, higher_is_better=False),
        Metric(key="compliance", label="SOX Compliance", unit="%", baseline=40, target=95, higher_is_better=True),
    ],
    solutions=[
        Solution(
            key="morpheus",
            title="NVIDIA Morpheus Pipeline",
            product="NVIDIA Morpheus",
            description=(
                "GPU-accelerated cybersecurity framework: real-time digital fingerprinting, "
                "anomaly detection, and deep packet inspection for transaction streams."
            ),
            impacts={"throughput": 10000, "falsePositive": -5.5, "latency": -250, "compliance": 15},
            annual_cost_savings=420000,
            default_alt="datadog_siem",
            alternatives=[
                Alternative(
                    key="datadog_siem",
                    title="Datadog SIEM + ML",
                    product="Datadog",
                    impacts={"throughput": 0, "falsePositive": 0, "latency": 0, "compliance": 0},
                    annual_cost_savings=0,
                    tradeoff=(
                        "Current stack. CPU-based ML pipeline, 3x slower at scale. "
                        "High per-GB ingestion costs."
                    ),
                ),
                Alternative(
                    key="aws_fraud",
                    title="AWS Fraud Detector",
                    product="AWS",
                    impacts={"throughput": 4000, "falsePositive": -3.0, "latency": -120, "compliance": 5},
                    annual_cost_savings=180000,
                    tradeoff="Cloud-only, vendor lock-in. Limited to AWS-native data sources. Lower throughput.",
                ),
            ],
        ),
        Solution(
            key="tensorrt",
            title="TensorRT-LLM Optimization",
            product="TensorRT-LLM",
            description=(
                "INT8/FP8 quantization with continuous batching for the fraud classification "
                "model. 6x throughput improvement at identical accuracy."
            ),
            impacts={"throughput": 3500, "falsePositive": -0.8, "latency": -45, "compliance": 0},
            annual_cost_savings=180000,
        ),
        Solution(
            key="guardrails",
            title="NeMo Guardrails (SOX)",
            product="NeMo Guardrails",
            description=(
                "Audit trail rails ensuring every fraud decision is logged with reasoning, "
                "supporting SOX Section 404 compliance requirements."
            ),
            impacts={"throughput": -200, "falsePositive": -0.5, "latency": 5, "compliance": 40},
            annual_cost_savings=95000,
        ),
        Solution(
            key="curator",
            title="NeMo Data Curator",
            product="NeMo Curator",
            description=(
                "GPU-accelerated data pipeline: dedup, quality scoring, and PII removal across "
                "historical transaction datasets for model retraining."
            ),
            impacts={"throughput": 0, "falsePositive": -1.0, "latency": 0, "compliance": 5},
            annual_cost_savings=65000,
        ),
    ],
    diagram_nodes=[
        DiagramNode(id="txn_stream", label="Card Transaction Stream", type=NodeType.BASELINE),
        DiagramNode(id="kafka", label="Kafka", type=NodeType.EXTERNAL),
        DiagramNode(id="morpheus", label="Morpheus Pipeline", type=NodeType.NVIDIA, added_by_solution="morpheus"),
        DiagramNode(
            id="datadog", label="Datadog SIEM", type=NodeType.ALTERNATIVE,
            added_by_solution="morpheus", added_by_alt="datadog_siem",
        ),
        DiagramNode(
            id="aws_fraud", label="AWS Fraud Detector", type=NodeType.ALTERNATIVE,
            added_by_solution="morpheus", added_by_alt="aws_fraud",
        ),
        DiagramNode(id="tensorrt", label="TensorRT-LLM Classifier", type=NodeType.NVIDIA, added_by_solution="tensorrt"),
        DiagramNode(id="guardrails", label="NeMo Guardrails (Audit)", type=NodeType.NVIDIA, added_by_solution="guardrails"),
        DiagramNode(id="curator", label="NeMo Curator", type=NodeType.NVIDIA, added_by_solution="curator"),
        DiagramNode(id="case_mgmt", label="Fraud Case Management", type=NodeType.BASELINE),
    ],
    success_message=(
        "SA Recommendation: Morpheus provides the backbone for real-time fraud detection at "
        "15K+ TPS, while TensorRT-LLM optimizes inference throughput. NeMo Guardrails close the "
        "SOX compliance gap with immutable audit trails."
    ),
)


RETAIL = Scenario(
    id="retail",
    title="Customer Support Copilot",
    industry="Retail / SaaS",
    accent="#42a5f5",
    problem_statement=(
        "Your AI support copilot costs $4.20 per interaction, resolves only 35% of tickets "
        "autonomously, takes 12s to respond, and customer satisfaction sits at 3.1/5. NVIDIA "
        "solutions can transform these economics."
    ),
    base_annual_cost=1260000,
    metrics=[
        Metric(key="costPerTicket", label="Cost / Interaction", unit="$", baseline=4.20, target=0.80, higher_is_better=False),
        Metric(key="resolution", label="Auto-Resolution", unit="%", baseline=35, target=75, higher_is_better=True),
        Metric(key="latency", label="Response Time", unit="s", baseline=12.0, target=3.0, higher_is_better=False),
        Metric(key="csat", label="CSAT Score", unit="/5", baseline=3.1, target=4.5, higher_is_better=True),
    ],
    solutions=[
        Solution(
            key="nim_routing",
            title="NIM Multi-Model Routing",
            product="NIM + LangGraph",
            description=(
                "Route simple queries to Mistral-7B NIM ($0.02/1K tokens), escalate complex issues "
                "to Llama-3.3-70B. LangGraph handles conditional routing."
            ),
            impacts={"costPerTicket": -3.10, "resolution": 15, "latency": -8.0, "csat": 0.4},
            annual_cost_savings=580000,
            default_alt="openai_assistants",
            alternatives=[
                Alternative(
                    key="openai_assistants",
                    title="OpenAI Assistants API",
                    product="OpenAI",
                    impacts={"costPerTicket": 0, "resolution": 0, "latency": 0, "csat": 0},
                    annual_cost_savings=0,
                    tradeoff="Current stack. Higher per-token cost, no multi-model routing, limited customization.",
                ),
            ],
        ),
        Solution(
            key="retriever",
            title="NeMo Retriever + Knowledge Base",
            product="NeMo Retriever",
            description=(
                "End-to-end retrieval with hybrid search and reranking over your product docs, "
                "FAQs, and past ticket resolutions."
            ),
            impacts={"costPerTicket": -0.30, "resolution": 22, "latency": -1.5, "csat": 0.6},
            annual_cost_savings=210000,
        ),
        Solution(
            key="customizer",
            title="NeMo Customizer (Domain Tune)",
            product="NeMo Customizer",
            description=(
                "QLoRA fine-tune Mistral-7B on 50K historical resolved tickets. Boosts "
                "first-contact resolution and tone quality."
            ),
            impacts={"costPerTicket": -0.15, "resolution": 8, "latency": 0, "csat": 0.5},
            annual_cost_savings=120000,
        ),
        Solution(
            key="guardrails",
            title="NeMo Guardrails (Brand Safety)",
            product="NeMo Guardrails",
            description=(
                "Topic control, competitor mention blocking, refund policy enforcement, and "
                "sentiment-aware escalation triggers."
            ),
            impacts={"costPerTicket": 0.05, "resolution": -2, "latency": 0.3, "csat": 0.3},
            annual_cost_savings=45000,
        ),
    ],
    diagram_nodes=[
        DiagramNode(id="widget", label="Customer Chat Widget", type=NodeType.BASELINE),
        DiagramNode(id="zendesk", label="Zendesk Ticketing", type=NodeType.EXTERNAL),
        DiagramNode(id="guardrails", label="NeMo Guardrails", type=NodeType.NVIDIA, added_by_solution="guardrails"),
        DiagramNode(id="router", label="NIM Router (Mistral-7B / Llama-70B)", type=NodeType.NVIDIA, added_by_solution="nim_routing"),
        DiagramNode(
            id="assistants", label="OpenAI Assistants", type=NodeType.ALTERNATIVE,
            added_by_solution="nim_routing", added_by_alt="openai_assistants",
        ),
        DiagramNode(id="retriever", label="NeMo Retriever", type=NodeType.NVIDIA, added_by_solution="retriever"),
        DiagramNode(id="kb", label="Product Docs & FAQs", type=NodeType.BASELINE),
        DiagramNode(id="customizer", label="NeMo Customizer", type=NodeType.NVIDIA, added_by_solution="customizer"),
        DiagramNode(id="escalation", label="Human Agent Escalation", type=NodeType.BASELINE),
    ],
    success_message=(
        "SA Recommendation: NIM multi-model routing with LangGraph slashed cost by 80% by routing "
        "to Mistral-7B for L1 queries. NeMo Retriever brought auto-resolution to 75%+, while "
        "domain fine-tuning pushed CSAT above 4.5."
    ),
)


DEVOPS = Scenario(
    id="devops",
    title="Code Review Agent",
    industry="DevOps / Platform",
    accent="#ab47bc",
    problem_statement=(
        "Your AI code review agent takes 45 min per PR, catches only 40% of security "
        "vulnerabilities, has 15% developer adoption, and costs $8.50 per review. "
        "NVIDIA-accelerated solutions can 10x this workflow."
    ),
    base_annual_cost=720000,
    metrics=[
        Metric(key="prTime", label="PR Review Time", unit="min", baseline=45, target=5, higher_is_better=False),
        Metric(key="vulnDetection", label="Vuln Detection", unit="%", baseline=40, target=90, higher_is_better=True),
        Metric(key="adoption", label="Dev Adoption", unit="%", baseline=15, target=80, higher_is_better=True),
        Metric(key="costPerReview", label="Cost / Review", unit="$", baseline=8.50, target=1.50, higher_is_better=False),
    ],
    solutions=[
        Solution(
            key="code_nim",
            title="Nemotron-70B Code NIM",
            product="NIM (Nemotron-70B)",
            description=(
                "NVIDIA-tuned model optimized for code review, bug detection, and automated inline "
                "suggestions with 92% acceptance rate."
            ),
            impacts={"prTime": -32, "vulnDetection": 25, "adoption": 35, "costPerReview": -5.70},
            annual_cost_savings=340000,
            default_alt="github_copilot",
            alternatives=[
                Alternative(
                    key="github_copilot",
                    title="GitHub Copilot Enterprise",
                    product="GitHub / Microsoft",
                    impacts={"prTime": 0, "vulnDetection": 0, "adoption": 0, "costPerReview": 0},
                    annual_cost_savings=0,
                    tradeoff=(
                        "Current stack. GitHub-native adoption, but weaker vuln detection and no "
                        "self-hosting option."
                    ),
                ),
                Alternative(
                    key="sonarqube_ai",
                    title="SonarQube AI Code Review",
                    product="SonarSource",
                    impacts={"prTime": -10, "vulnDetection": 30, "adoption": 10, "costPerReview": -2.00},
                    annual_cost_savings=120000,
                    tradeoff=(
                        "Strong security scanning but slow: rule-based, not LLM-native. "
                        "Low developer adoption."
                    ),
                ),
            ],
        ),
        Solution(
            key="tensorrt",
            title="TensorRT-LLM Serving",
            product="TensorRT-LLM + Triton",
            description=(
                "FP8 quantized serving with continuous batching via Triton Inference Server. "
                "Sub-second code analysis for files up to 10K LOC."
            ),
            impacts={"prTime": -6, "vulnDetection": 0, "adoption": 10, "costPerReview": -1.20},
            annual_cost_savings=95000,
        ),
        Solution(
            key="guardrails",
            title="NeMo Guardrails (Security)",
            product="NeMo Guardrails",
            description=(
                "Enforce OWASP Top 10 scanning rails, secrets detection, and license compliance "
                "checks on every PR review output."
            ),
            impacts={"prTime": 1, "vulnDetection": 28, "adoption": 5, "costPerReview": 0.10},
            annual_cost_savings=80000,
        ),
        Solution(
            key="mcp",
            title="MCP Server (Git + JIRA)",
            product="Model Context Protocol",
            description=(
                "Standardized tool connections to GitHub, GitLab, JIRA, and Confluence, giving the "
                "agent full context on related issues and docs."
            ),
            impacts={"prTime": -3, "vulnDetection": 5, "adoption": 15, "costPerReview": -0.30},
            annual_cost_savings=55000,
        ),
    ],
    diagram_nodes=[
        DiagramNode(id="webhook", label="Pull Request Webhook", type=NodeType.BASELINE),
        DiagramNode(id="scm", label="GitHub / GitLab", type=NodeType.EXTERNAL),
        DiagramNode(id="code_nim", label="Nemotron-70B Code NIM", type=NodeType.NVIDIA, added_by_solution="code_nim"),
        DiagramNode(
            id="copilot", label="GitHub Copilot Enterprise", type=NodeType.ALTERNATIVE,
            added_by_solution="code_nim", added_by_alt="github_copilot",
        ),
        DiagramNode(
            id="sonarqube", label="SonarQube AI", type=NodeType.ALTERNATIVE,
            added_by_solution="code_nim", added_by_alt="sonarqube_ai",
        ),
        DiagramNode(id="triton", label="Triton + TensorRT-LLM", type=NodeType.NVIDIA, added_by_solution="tensorrt"),
        DiagramNode(id="guardrails", label="NeMo Guardrails", type=NodeType.NVIDIA, added_by_solution="guardrails"),
        DiagramNode(id="mcp", label="MCP Server (Git + JIRA)", type=NodeType.NVIDIA, added_by_solution="mcp"),
        DiagramNode(id="jira", label="JIRA / Confluence", type=NodeType.EXTERNAL),
        DiagramNode(id="comments", label="Inline Review Comments", type=NodeType.BASELINE),
    ],
    success_message=(
        "SA Recommendation: Nemotron-70B delivers best-in-class code understanding, while "
        "TensorRT-LLM brings review latency under 5 minutes. MCP integration gave the agent full "
        "repo and JIRA context, driving developer adoption above 80%."
    ),
)


LEGAL = Scenario(
    id="legal",
    title="Document Intelligence",
    industry="Legal / Insurance",
    accent="#26a69a",
    problem_statement=(
        "Your document processing pipeline handles 200 docs/day with 78% extraction accuracy, "
        "takes 6 minutes per document, and fails 70% of redaction compliance audits. NVIDIA AI "
        "can achieve 10x throughput at 98% accuracy."
    ),
    base_annual_cost=960000,
    metrics=[
        Metric(key="throughput", label="Docs / Day", unit="", baseline=200, target=2000, higher_is_better=True),
        Metric(key="accuracy", label="Extraction Accuracy", unit="%", baseline=78, target=96, higher_is_better=True),
        Metric(key="procTime", label="Time / Document", unit="min", baseline=6.0, target=0.5, higher_is_better=False),
        Metric(key="compliance", label="Redaction Compliance", unit="%", baseline=30, target=95, higher_is_better=True),
    ],
    solutions=[
        Solution(
            key="nim_embed",
            title="NV-Embed-v2 + NeMo Retriever",
            product="NIM + NeMo Retriever",
            description=(
                "State-of-the-art 1024-dim embeddings (#1 MTEB) with hybrid search and reranking "
                "for semantic document understanding."
            ),
            impacts={"throughput": 1200, "accuracy": 12, "procTime": -4.0, "compliance": 5},
            annual_cost_savings=310000,
            default_alt="pinecone_openai",
            alternatives=[
                Alternative(
                    key="pinecone_openai",
                    title="OpenAI Embeddings + Pinecone",
                    product="OpenAI + Pinecone",
                    impacts={"throughput": 0, "accuracy": 0, "procTime": 0, "compliance": 0},
                    annual_cost_savings=0,
                    tradeoff=(
                        "Current stack. Lower embedding quality (#28 MTEB vs #1), cloud-only, "
                        "higher per-query cost."
                    ),
                ),
            ],
        ),
        Solution(
            key="curator",
            title="NeMo Data Curator",
            product="NeMo Curator",
            description=(
                "GPU-accelerated document pipeline: OCR cleaning, dedup, quality scoring, and "
                "structured extraction from PDFs, images, and scans."
            ),
            impacts={"throughput": 600, "accuracy": 5, "procTime": -1.5, "compliance": 10},
            annual_cost_savings=190000,
        ),
        Solution(
            key="guardrails",
            title="NeMo Guardrails (PII/Redaction)",
            product="NeMo Guardrails",
            description=(
                "Automated PII detection and redaction rails with configurable entity types (SSN, "
                "DOB, medical records, financial data)."
            ),
            impacts={"throughput": -50, "accuracy": 1, "procTime": 0.2, "compliance": 52},
            annual_cost_savings=125000,
        ),
        Solution(
            key="customizer",
            title="NeMo Customizer (Legal Tune)",
            product="NeMo Customizer",
            description=(
                "Fine-tune extraction models on your specific document formats: contracts, claims, "
                "policies, court filings."
            ),
            impacts={"throughput": 100, "accuracy": 4, "procTime": -0.3, "compliance": 3},
            annual_cost_savings=85000,
        ),
    ],
    diagram_nodes=[
        DiagramNode(id="intake", label="Document Intake (PDF/Scans)", type=NodeType.BASELINE),
        DiagramNode(id="storage", label="Object Storage (S3)", type=NodeType.EXTERNAL),
        DiagramNode(id="curator", label="NeMo Curator", type=NodeType.NVIDIA, added_by_solution="curator"),
        DiagramNode(id="embed", label="NV-Embed-v2 + NeMo Retriever", type=NodeType.NVIDIA, added_by_solution="nim_embed"),
        DiagramNode(
            id="pinecone", label="OpenAI Embeddings + Pinecone", type=NodeType.ALTERNATIVE,
            added_by_solution="nim_embed", added_by_alt="pinecone_openai",
        ),
        DiagramNode(id="customizer", label="NeMo Customizer", type=NodeType.NVIDIA, added_by_solution="customizer"),
        DiagramNode(id="guardrails", label="NeMo Guardrails (PII)", type=NodeType.NVIDIA, added_by_solution="guardrails"),
        DiagramNode(id="review", label="Case Review Workspace", type=NodeType.BASELINE),
    ],
    success_message=(
        "SA Recommendation: NV-Embed-v2 with NeMo Retriever provides state-of-the-art document "
        "understanding at 10x throughput. NeMo Data Curator automates the ingestion pipeline, "
        "while Guardrails ensure 95%+ PII redaction compliance for regulated industries."
    ),
)


SCENARIOS = [HEALTHCARE, FINTECH, RETAIL, DEVOPS, LEGAL]
