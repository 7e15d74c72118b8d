"""Typed exception hierarchy. Every error uigen can raise."""


class UIGenError(Exception):
    """Base exception for all uigen errors."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(UIGenError):
    """Required configuration is missing. Fatal at startup."""
    pass


# ── Pipeline ──────────────────────────────────────────────────────────────────


class GenerationError(UIGenError):
    """Base exception for every failure inside the plan/generate/explain pipeline."""
    pass


class UpstreamCallError(GenerationError):
    """The completion service call failed, timed out, or returned a malformed response."""
    def __init__(self, message: str, stage: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.stage = stage


class PlanParseError(GenerationError):
    """Plan stage output is not a JSON object after fence stripping."""
    def __init__(self, message: str, raw: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.raw = raw


# ── Client-side gates ─────────────────────────────────────────────────────────


class WhitelistViolation(UIGenError):
    """Generated markup references a component outside the allowed set."""
    def __init__(self, message: str, component: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.component = component


class EmptyPromptError(UIGenError):
    """A blank prompt never starts a request."""
    pass


class RequestInProgressError(UIGenError):
    """A generation is already in flight for this session."""
    pass
