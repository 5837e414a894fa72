"""
mp_faulttolerance – resilient invocation pipelines for remote calls.

Import path convention::

    from mp_faulttolerance.resilience import PipelineComposer, PolicyConfig
    from mp_faulttolerance.resilience.circuit_breaker import CircuitBreakerRegistry
    from mp_faulttolerance.adapters.http import ResilientHttpClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
