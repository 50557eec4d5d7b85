from dataclasses import dataclass, field
from typing import Dict, List
from edgecon.core.errors import DecodeError
from edgecon.core.logging import get_logger
from edgecon.graph.edgecon_graph import EdgeConGraph, Edge
from edgecon.reduction.variables import TranslatorKey, ParentKey, LevelKey
from edgecon.solver.boolean_solver import BooleanSolver
from edgecon.solver.types import SatResult

logger = get_logger(__name__)

@dataclass
class ComponentTree:
    """Parent and level of each component, as read from a model."""
    parents: Dict[int, int] = field(default_factory=dict)
    levels: Dict[int, List[int]] = field(default_factory=dict)

def _require_sat(result: SatResult):
    if result is None or not result.is_sat:
        status = "missing" if result is None else result.status.value
        raise DecodeError(f"Cannot decode without a satisfying model (result is {status})")

def is_the_ith_translator(result: SatResult, n1: int, n2: int, i: int) -> bool:
    return BooleanSolver.model_value(result, TranslatorKey.of(n1, n2, i))

def translator_edges_from_model(result: SatResult, graph: EdgeConGraph) -> List[Edge]:
    """Edges whose translator variable is true for some translator id."""
    _require_sat(result)
    N = graph.num_homogeneous_components() - 1
    return [
        (n1, n2) for n1, n2 in graph.edges()
        if any(is_the_ith_translator(result, n1, n2, i) for i in range(N))
    ]

def decode_translator_assignment(result: SatResult, graph: EdgeConGraph) -> List[Edge]:
    """
    Records every edge carrying a translator in result on graph, then
    recomputes the homogeneous components. Returns the edges added.

    result must come from a SAT solve of the formula built for graph.
    """
    edges = translator_edges_from_model(result, graph)
    for n1, n2 in edges:
        graph.add_translator_edge(n1, n2)

    graph.recompute_homogeneous_components()
    logger.info(f"Decoded {len(edges)} translator edges")
    return edges

def decode_component_tree(result: SatResult, graph: EdgeConGraph) -> ComponentTree:
    """Reads the parent and level propositions set in result."""
    _require_sat(result)
    C_H = graph.num_homogeneous_components()
    N = C_H - 1
    tree = ComponentTree()

    for j in range(C_H):
        tree.levels[j] = [h for h in range(N) if BooleanSolver.model_value(result, LevelKey(component=j, level=h))]
        for j1 in range(C_H):
            if j1 != j and BooleanSolver.model_value(result, ParentKey(child=j, parent=j1)):
                tree.parents[j] = j1

    return tree
