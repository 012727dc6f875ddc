"""Explicit dependency graph between roles.

Roles resolve their backgrounds recursively, so a background cycle would
recurse forever. The catalog builds this graph once from light and dark sample
schemes and checks it before any role is resolved.

Nodes are role names; an edge ``a -> b`` means "a is drawn on b" (``b`` is
a's background or second background in at least one mode).
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set, Tuple

from ..errors import RoleGraphCycleError
from ..hct import Hct
from ..palettes import TonalPalette
from .dynamic_color import DynamicColor
from .dynamic_scheme import DynamicScheme
from .variant import Variant

__all__ = ["RoleGraph", "sample_schemes"]

_logger = logging.getLogger(__name__)


def sample_schemes() -> Tuple[DynamicScheme, DynamicScheme]:
    """Cheap light and dark schemes used only to read background wiring."""
    grey = TonalPalette.from_hue_and_chroma(0.0, 0.0)
    source = Hct.from_int(0xFF808080)
    light = DynamicScheme(source, Variant.TONAL_SPOT, False, 0.0, grey, grey, grey, grey, grey)
    dark = DynamicScheme(source, Variant.TONAL_SPOT, True, 0.0, grey, grey, grey, grey, grey)
    return light, dark


class RoleGraph:
    def __init__(self) -> None:
        self._edges: Dict[str, Set[str]] = {}

    @classmethod
    def from_roles(
        cls, roles: Iterable[DynamicColor], schemes: Iterable[DynamicScheme] = ()
    ) -> "RoleGraph":
        schemes = list(schemes) or list(sample_schemes())
        graph = cls()
        for role in roles:
            graph.add_node(role.name)
            for scheme in schemes:
                for ref in (role.background, role.second_background):
                    if ref is not None:
                        graph.add_edge(role.name, ref(scheme).name)
        return graph

    def add_node(self, name: str) -> None:
        self._edges.setdefault(name, set())

    def add_edge(self, role: str, background: str) -> None:
        self.add_node(role)
        self.add_node(background)
        self._edges[role].add(background)

    @property
    def nodes(self) -> List[str]:
        return list(self._edges)

    def backgrounds_of(self, name: str) -> List[str]:
        return sorted(self._edges[name])

    def edge_count(self) -> int:
        return sum(len(v) for v in self._edges.values())

    def validate_acyclic(self) -> None:
        """Raise ``RoleGraphCycleError`` naming the first cycle found."""
        white, grey, black = 0, 1, 2
        state = {name: white for name in self._edges}
        for start in self._edges:
            if state[start] != white:
                continue
            # Iterative DFS; ``path`` mirrors the grey nodes on the stack.
            path: List[str] = [start]
            stack = [iter(sorted(self._edges[start]))]
            state[start] = grey
            while stack:
                nxt = next(stack[-1], None)
                if nxt is None:
                    stack.pop()
                    state[path.pop()] = black
                    continue
                if state[nxt] == grey:
                    cycle = path[path.index(nxt):] + [nxt]
                    raise RoleGraphCycleError(cycle)
                if state[nxt] == white:
                    state[nxt] = grey
                    path.append(nxt)
                    stack.append(iter(sorted(self._edges[nxt])))
        _logger.debug(
            "Role graph acyclic: %d roles, %d edges", len(self._edges), self.edge_count()
        )

    def resolution_order(self) -> List[str]:
        """Roles ordered so every background comes before the roles drawn on it."""
        self.validate_acyclic()
        order: List[str] = []
        seen: Set[str] = set()

        def visit(name: str) -> None:
            if name in seen:
                return
            seen.add(name)
            for bg in sorted(self._edges[name]):
                visit(bg)
            order.append(name)

        for name in self._edges:
            visit(name)
        return order
