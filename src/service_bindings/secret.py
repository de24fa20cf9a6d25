"""Kubernetes Secret key validation.

Reference: https://kubernetes.io/docs/concepts/configuration/secret/#overview-of-secrets

Every store-backed binding checks a key with :func:`is_valid_secret_key`
before touching its backing store, so a malformed key (path separators,
control characters, ...) is simply never found.
"""

from __future__ import annotations

import re

VALID_SECRET_KEY: re.Pattern[str] = re.compile(r"[A-Za-z0-9\-_.]+")


def is_valid_secret_key(key: str) -> bool:
    """Test whether a string is a valid Kubernetes Secret key.

    Args:
        key: The key to check.

    Returns:
        True if the whole key consists of letters, digits, ``-``, ``_``
        and ``.``, and is not empty.
    """
    return VALID_SECRET_KEY.fullmatch(key) is not None
