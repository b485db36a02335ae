"""
Exception hierarchy for the Virtual SA service
"""
from typing import List, Optional


class VirtualSAError(Exception):
    """Base class for all service errors"""


# ROI simulator

class ScenarioValidationError(VirtualSAError):
    """Raised when a scenario definition is internally inconsistent"""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("Invalid scenario catalog: " + "; ".join(problems))


class UnknownScenarioError(VirtualSAError):
    def __init__(self, scenario_id: str):
        self.scenario_id = scenario_id
        super().__init__(f"Unknown scenario: {scenario_id}")


class UnknownSolutionError(VirtualSAError):
    def __init__(self, scenario_id: str, solution_key: str):
        self.scenario_id = scenario_id
        self.solution_key = solution_key
        super().__init__(f"Scenario '{scenario_id}' has no solution '{solution_key}'")


class InvalidAlternativeError(VirtualSAError):
    def __init__(self, solution_key: str, alternative_key: str):
        self.solution_key = solution_key
        self.alternative_key = alternative_key
        super().__init__(
            f"Solution '{solution_key}' has no alternative '{alternative_key}'"
        )


class UnknownDeploymentModeError(VirtualSAError):
    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"Unknown deployment mode: {mode}")


# Discovery accelerator

class PromptRejectedError(VirtualSAError):
    """Raised when the off-topic guard rejects a prompt before any LLM call"""

    def __init__(self, reason: str, message: str):
        self.reason = reason
        self.message = message
        super().__init__(message)


class LLMError(VirtualSAError):
    """Base class for upstream LLM failures"""


class MissingCredentialError(LLMError):
    def __init__(self):
        super().__init__("NVIDIA API key not configured")


class UpstreamAPIError(LLMError):
    def __init__(self, status_code: int, body: str, label: str = "NVIDIA API error"):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{label} ({status_code}): {body}" if body else f"{label} ({status_code})")


class ArchitectureParseError(LLMError):
    """The LLM reply could not be decoded into an architecture document"""

    def __init__(self, message: str, raw_content: Optional[str] = None):
        self.raw_content = raw_content
        super().__init__(message)
