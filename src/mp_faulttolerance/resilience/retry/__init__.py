"""Resilience – bounded retry with a fixed (or pluggable) inter-attempt delay."""
from mp_faulttolerance.resilience.retry.backoff import BackoffStrategy, ConstantBackoff, ExponentialBackoff
from mp_faulttolerance.resilience.retry.jitter import FullJitter, JitterStrategy, NoJitter
from mp_faulttolerance.resilience.retry.policy import RetryContext, RetryExecutor, RetryPolicy

__all__ = [
    "BackoffStrategy", "ConstantBackoff", "ExponentialBackoff",
    "FullJitter", "JitterStrategy", "NoJitter",
    "RetryContext", "RetryExecutor", "RetryPolicy",
]
