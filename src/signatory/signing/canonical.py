"""Canonical query-string serialisation for request signing."""

from __future__ import annotations

from signatory.errors import EmptyInputError
from signatory.values import ParameterSet, ValueKind, kind_of

__all__ = ["SIGN_FIELD", "canonicalise"]

SIGN_FIELD = "sign"


def canonicalise(params: ParameterSet) -> str:
    """Produce the canonical string: sorted ``key=value`` pairs joined by ``&``.

    Args:
        params: The parameter set to serialise. Never mutated.

    Returns:
        Deterministic string suitable for digesting. Only string-valued
        entries are emitted; the ``sign`` entry is always dropped. May be
        empty when no entry holds a string.

    Raises:
        EmptyInputError: If ``params`` has no entries.
    """
    if not params:
        raise EmptyInputError()

    pairs: list[str] = []
    for key in sorted(k for k in params if k != SIGN_FIELD):
        value = params[key]
        # Numbers, booleans, nulls, arrays and objects are not signed.
        if kind_of(value) is not ValueKind.STRING:
            continue
        pairs.append(f"{key}={value}")
    return "&".join(pairs)
