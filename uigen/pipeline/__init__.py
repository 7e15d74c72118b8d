from uigen.pipeline.orchestrator import UIPipeline

__all__ = ["UIPipeline"]
