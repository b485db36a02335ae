"""
ROI simulator domain model: scenarios, solutions, alternatives, deployments
"""
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeType(str, Enum):
    """Diagram node kinds"""
    BASELINE = "baseline"
    NVIDIA = "nvidia"
    EXTERNAL = "external"
    ALTERNATIVE = "alternative"


class DeploymentMode(str, Enum):
    """Deployment configurations"""
    CLOUD_API = "cloud-api"
    CLOUD_GPU = "cloud-gpu"
    ON_PREM = "on-prem"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Metric(FrozenModel):
    """A unit-tagged business metric with a baseline and a target"""
    key: str
    label: str
    unit: str = ""
    baseline: float
    target: float
    higher_is_better: bool


class Alternative(FrozenModel):
    """A competing or incumbent option in the same slot as a solution"""
    key: str
    title: str
    product: str
    impacts: Dict[str, float] = Field(default_factory=dict)
    annual_cost_savings: float = 0
    tradeoff: str = ""


class Solution(FrozenModel):
    """A togglable upgrade bundle"""
    key: str
    title: str
    product: str
    description: str = ""
    impacts: Dict[str, float] = Field(default_factory=dict)
    annual_cost_savings: float = 0
    alternatives: List[Alternative] = Field(default_factory=list)
    default_alt: Optional[str] = None

    def alternative(self, key: Optional[str]) -> Optional[Alternative]:
        if key is None:
            return None
        for alt in self.alternatives:
            if alt.key == key:
                return alt
        return None

    @property
    def alternative_keys(self) -> List[str]:
        return [alt.key for alt in self.alternatives]


class DiagramNode(FrozenModel):
    """A node in the live architecture diagram"""
    id: str
    label: str
    type: NodeType
    added_by_solution: Optional[str] = None
    added_by_alt: Optional[str] = None


class Scenario(FrozenModel):
    """An industry vignette with metrics, solutions and a diagram"""
    id: str
    title: str
    industry: str
    accent: str = "#76b900"
    problem_statement: str = ""
    base_annual_cost: float
    metrics: List[Metric]
    solutions: List[Solution]
    diagram_nodes: List[DiagramNode] = Field(default_factory=list)
    success_message: str = ""

    def metric(self, key: str) -> Optional[Metric]:
        return self.metrics_by_key.get(key)

    def solution(self, key: str) -> Optional[Solution]:
        return self.solutions_by_key.get(key)

    @property
    def metrics_by_key(self) -> Dict[str, Metric]:
        return {m.key: m for m in self.metrics}

    @property
    def solutions_by_key(self) -> Dict[str, Solution]:
        return {s.key: s for s in self.solutions}


class DeploymentConfig(FrozenModel):
    """GPU cost parameters for one deployment mode"""
    mode: DeploymentMode
    label: str
    description: str = ""
    capex_per_gpu: float = 0
    opex_per_gpu_per_month: float = 0
    gpus_required: int = 0
    enterprise_license_per_gpu_per_year: float = 0
    self_hosted: bool = False
    data_residency: bool = False
