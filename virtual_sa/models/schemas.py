"""
Pydantic models for request/response schemas
"""
from typing import List, Dict, Optional, Literal
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator

from .domain import DeploymentConfig, DeploymentMode, DiagramNode


# LLM response contract

class ArchNode(BaseModel):
    """A node in a generated architecture variant"""
    id: str
    label: str
    subtitle: str = ""
    type: str = "process"
    product: str = ""


class ArchVariant(BaseModel):
    """One architecture variant proposed by the LLM"""
    variant_name: str
    variant_rationale: str = ""
    nodes: List[ArchNode] = Field(default_factory=list)
    estimated_monthly_cost: Optional[float] = None
    deployment_model: Optional[str] = None
    estimated_capex: Optional[float] = None


class NvidiaVsMarket(BaseModel):
    nvidia_product: str
    market_alternative: str
    nvidia_usp: str


class SADDocument(BaseModel):
    """Solution Architecture Document sections"""
    overview: List[str] = Field(default_factory=list)
    assumptions: List[str] = Field(default_factory=list)
    nfrs: List[str] = Field(default_factory=list)
    data_flow: List[str] = Field(default_factory=list)
    security: List[str] = Field(default_factory=list)
    operations: List[str] = Field(default_factory=list)
    cost_notes: List[str] = Field(default_factory=list)
    capex_notes: List[str] = Field(default_factory=list)
    nvidia_vs_market: List[NvidiaVsMarket] = Field(default_factory=list)

    @field_validator(
        'overview', 'assumptions', 'nfrs', 'data_flow', 'security',
        'operations', 'cost_notes', 'capex_notes', 'nvidia_vs_market',
        mode='before',
    )
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v


class NextStep(BaseModel):
    title: str
    description: str = ""


class ArchitectureResponse(BaseModel):
    """Structured architecture draft returned by the LLM"""
    use_case_title: str
    variants: List[ArchVariant]
    sad: SADDocument
    next_steps: List[NextStep] = Field(default_factory=list)
    sa_questions: List[str] = Field(default_factory=list)

    @field_validator('next_steps', 'sa_questions', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v


# Discovery schemas

class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class GuardRequest(BaseModel):
    prompt: str


class GuardResponse(BaseModel):
    accepted: bool
    reason: Optional[str] = None
    message: Optional[str] = None
    matched: Optional[str] = None


class GenerateRequest(BaseModel):
    """Architecture generation request"""
    prompt: str = Field(..., description="Free-text AI use case")
    session_id: Optional[str] = Field(None, description="Browser session for stale-response tracking")


class BlueprintRecommendation(BaseModel):
    id: str
    title: str
    summary: str
    score: int
    matched_keywords: List[str]


class GenerateResponse(BaseModel):
    architecture: ArchitectureResponse
    blueprints: List[BlueprintRecommendation] = Field(default_factory=list)
    generation_token: Optional[int] = None
    stale: bool = False
    created_at: datetime


class ChatRequest(BaseModel):
    sad_context: ArchitectureResponse
    messages: List[ChatMessage] = Field(..., min_length=1)
    session_id: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str
    generation_token: Optional[int] = None
    stale: bool = False


class BlueprintMatchRequest(BaseModel):
    use_case_title: str
    overview: List[str] = Field(default_factory=list)


class BlueprintInfo(BaseModel):
    id: str
    title: str
    summary: str
    keywords: List[str]


class CostEstimateRequest(BaseModel):
    variant: ArchVariant
    multiplier: float = Field(default=1.0, description="Query-volume multiplier (0.25-3.0 in 0.25 steps)")


class CostEstimateResponse(BaseModel):
    variant_name: str
    multiplier: float
    monthly_cost: int
    queries_per_day_label: str


# ROI simulator schemas

class SimulatorStateModel(BaseModel):
    """Client-held simulator state"""
    scenario_id: str
    active: Dict[str, bool] = Field(default_factory=dict)
    chosen: Dict[str, Optional[str]] = Field(default_factory=dict)
    deployment_mode: DeploymentMode = DeploymentMode.CLOUD_API


class SimulatorAction(BaseModel):
    """A single simulator transition"""
    type: Literal["select_scenario", "toggle_solution", "select_alternative", "select_deployment"]
    scenario_id: Optional[str] = None
    solution_key: Optional[str] = None
    alternative_key: Optional[str] = None
    deployment_mode: Optional[DeploymentMode] = None


class ActionRequest(BaseModel):
    state: SimulatorStateModel
    action: SimulatorAction


class ScenarioSummary(BaseModel):
    id: str
    title: str
    industry: str
    accent: str
    solution_count: int
    metric_count: int


class MetricReadingModel(BaseModel):
    key: str
    label: str
    unit: str
    baseline: float
    target: float
    higher_is_better: bool
    current: float
    good: bool
    progress: float = Field(..., ge=0, le=100)
    status: str
    color: str
    display_value: str
    display_target: str


class CostSummaryModel(BaseModel):
    total_savings: float
    annual_infra_opex: float
    net_annual_savings: float
    capex_total: float
    payback_months: int = Field(..., ge=0)
    payback_basis: str
    payback_display: str
    savings_display: str
    cost_reduction_pct: int
    nvidia_only_active: int


class SimulationResponse(BaseModel):
    state: SimulatorStateModel
    metrics: List[MetricReadingModel]
    all_targets_hit: bool
    success_message: Optional[str] = None
    costs: CostSummaryModel
    deployment: DeploymentConfig
    diagram_nodes: List[DiagramNode]
    active_count: int
    solution_count: int


# Error schemas
class ErrorDetail(BaseModel):
    """Error detail"""
    code: str
    message: str
    timestamp: datetime
    path: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response"""
    error: ErrorDetail
