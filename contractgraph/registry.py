"""Name -> algorithm class table filled by :func:`contractgraph.algorithms.base.register`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

if TYPE_CHECKING:
    from .algorithms.base import GraphAlgorithm

available_algorithms: Dict[str, Type["GraphAlgorithm"]] = {}
