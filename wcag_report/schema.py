from pydantic import BaseModel, ConfigDict, field_validator
from typing import List, Optional, Dict, Tuple, Union


class AxeNode(BaseModel):
    html: Optional[str] = None
    # Frame / shadow DOM paths arrive as nested lists
    target: List[Union[str, List[str]]] = []
    failureSummary: Optional[str] = None
    impact: Optional[str] = None

    @field_validator("target", mode="before")
    @classmethod
    def default_empty_lists(cls, value):
        return [] if value is None else value


class AxeCheckResult(BaseModel):
    """One rule evaluated against the page (violation, pass or incomplete)."""
    id: str
    impact: Optional[str] = None
    description: str = ""
    help: str = ""
    helpUrl: Optional[str] = None
    tags: List[str] = []
    nodes: List[AxeNode] = []

    @field_validator("tags", "nodes", mode="before")
    @classmethod
    def default_empty_lists(cls, value):
        return [] if value is None else value


class AxeResults(BaseModel):
    violations: List[AxeCheckResult] = []
    passes: List[AxeCheckResult] = []
    incomplete: List[AxeCheckResult] = []

    @field_validator("violations", "passes", "incomplete", mode="before")
    @classmethod
    def default_empty_lists(cls, value):
        return [] if value is None else value


class Remediation(BaseModel):
    model_config = ConfigDict(frozen=True)

    issue: str
    steps: Tuple[str, ...]
    element: Optional[str] = None
    selector: str = ""


class ProcessedNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: Optional[str]
    target: Tuple[Union[str, Tuple[str, ...]], ...]
    failureSummary: Optional[str]
    impact: Optional[str]
    wcagCriteria: Tuple[str, ...]
    remediation: Remediation


class ProcessedViolation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    impact: Optional[str]  # as reported; bucket placement uses the normalized severity
    description: str
    help: str
    helpUrl: Optional[str]
    tags: Tuple[str, ...]
    nodes: Tuple[ProcessedNode, ...]


class RuleSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    help: str
    nodeCount: int


class SeverityCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    critical: int = 0
    serious: int = 0
    moderate: int = 0
    minor: int = 0


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    totalIssues: int
    totalPasses: int
    totalTests: int
    violationTypes: int
    issuesBySeverity: SeverityCounts


class Report(BaseModel):
    """One scan's report. Sequences are tuples; the bucket mappings are plain dicts keyed by
    ``SEVERITIES`` / ``CATEGORIES`` and should be treated as read-only."""
    model_config = ConfigDict(frozen=True)

    url: str
    timestamp: str
    summary: Summary
    violations: Dict[str, Tuple[ProcessedViolation, ...]]
    categories: Dict[str, Tuple[ProcessedViolation, ...]]
    passes: Tuple[RuleSummary, ...]
    incomplete: Tuple[RuleSummary, ...]


class ErrorEnvelope(BaseModel):
    error: str
    message: Optional[str] = None
