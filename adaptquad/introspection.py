"""Discover predicate functions and apply them to values.

A predicate here is any public callable whose name starts with a prefix
("is" by default), e.g. math.isfinite, math.isnan, builtins.isinstance.
"""

from __future__ import annotations

import builtins
import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)


def _members(namespace: Any) -> Mapping[str, Any]:
    if isinstance(namespace, Mapping):
        return namespace
    return {name: getattr(namespace, name) for name in dir(namespace)}


def find_predicates(namespace: Any = builtins, prefix: str = "is") -> dict[str, Callable[..., Any]]:
    """Public callables in namespace whose names start with prefix.

    Args:
        namespace: A module, class, object or mapping of names to values.
        prefix: Name prefix that marks a predicate.

    Returns:
        Dict of name -> callable, ordered by name.
    """
    members = _members(namespace)
    found = {
        name: member
        for name, member in members.items()
        if name.startswith(prefix) and not name.startswith("_") and callable(member)
    }
    return dict(sorted(found.items()))


def true_predicates(value: Any, namespace: Any = math, prefix: str = "is") -> list[str]:
    """Names of the single-argument predicates in namespace that hold for value.

    Predicates that reject the value (TypeError/ValueError), e.g. because they
    need more arguments or a different type, are skipped.
    """
    matched = []
    for name, predicate in find_predicates(namespace, prefix).items():
        try:
            if predicate(value):
                matched.append(name)
        except (TypeError, ValueError) as e:
            logger.debug("Skipping predicate %s for %r: %s", name, value, e)
    return matched
