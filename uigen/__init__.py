"""uigen — prompt-to-UI generation with a whitelisted component library.

Usage:
    from uigen import Studio, PipelineBackend, UIPipeline
    from uigen.llm.client import LLMClient
    from uigen.config import config

    pipeline = UIPipeline(LLMClient(), config)
    studio = Studio(PipelineBackend(pipeline), config.allowed_components)
    update = await studio.generate("add a login card")
"""

from uigen.types import (
    DiffKind, DiffLine, GenerationRequest, GenerationResult, HistoryEntry, Plan,
)
from uigen.exceptions import (
    UIGenError, ConfigurationError, GenerationError, UpstreamCallError,
    PlanParseError, WhitelistViolation, EmptyPromptError, RequestInProgressError,
)
from uigen.core.diff import diff_lines
from uigen.core.fences import unwrap_code_block
from uigen.core.history import HistoryStack
from uigen.core.session import SessionState, SessionUpdate
from uigen.core.validator import validate
from uigen.pipeline import UIPipeline
from uigen.studio import PipelineBackend, RemoteBackend, Studio
from uigen.version import __version__

__all__ = [
    "DiffKind", "DiffLine", "GenerationRequest", "GenerationResult", "HistoryEntry", "Plan",
    "UIGenError", "ConfigurationError", "GenerationError", "UpstreamCallError",
    "PlanParseError", "WhitelistViolation", "EmptyPromptError", "RequestInProgressError",
    "diff_lines", "unwrap_code_block", "HistoryStack", "SessionState", "SessionUpdate",
    "validate", "UIPipeline", "PipelineBackend", "RemoteBackend", "Studio",
    "__version__",
]
