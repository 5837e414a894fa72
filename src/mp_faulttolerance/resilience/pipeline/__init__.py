"""Resilience – timeout, retry, circuit breaker and fallback composed for one operation."""
from mp_faulttolerance.resilience.pipeline.config import PolicyConfig
from mp_faulttolerance.resilience.pipeline.composer import PipelineComposer

__all__ = ["PipelineComposer", "PolicyConfig"]
