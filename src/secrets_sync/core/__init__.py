"""Core infrastructure subpackage.

This package contains the Secrets Manager gateway and the reconciler
that drives it.
"""

from secrets_sync.core.reconciler import Reconciler
from secrets_sync.core.store import SecretStore, create_session, tags_as_pairs

__all__ = [
    "Reconciler",
    "SecretStore",
    "create_session",
    "tags_as_pairs",
]
