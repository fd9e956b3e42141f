# schemas/__init__.py

from .policy import BackoffPolicy, default_policy

__all__ = [
    "BackoffPolicy",
    "default_policy",
]
