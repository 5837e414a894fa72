"""HTTP adapter – httpx invoker and resilient client."""
from mp_faulttolerance.adapters.http.invoker import HttpxInvoker
from mp_faulttolerance.adapters.http.client import ResilientHttpClient

__all__ = ["HttpxInvoker", "ResilientHttpClient"]
