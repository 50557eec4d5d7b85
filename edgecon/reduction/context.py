from dataclasses import dataclass
from typing import List
from edgecon.core.config import ROOT_COMPONENT
from edgecon.core.errors import ReductionError, ValidationError
from edgecon.graph.edgecon_graph import EdgeConGraph
from edgecon.solver.boolean_solver import BooleanSolver

@dataclass(frozen=True)
class ReductionContext:
    """Stores all data used to build the reduction formulas."""
    n: int                    # number of nodes
    m: int                    # number of edges
    C_H: int                  # number of homogeneous components
    N: int                    # number of translators, C_H - 1
    k: int                    # depth bound
    root: int                 # component exempt from having a parent
    graph: EdgeConGraph
    solver: BooleanSolver

    def non_root_components(self) -> List[int]:
        return [j for j in range(self.C_H) if j != self.root]

def init_context(solver: BooleanSolver, graph: EdgeConGraph, depth_bound: int,
                 root_component: int = ROOT_COMPONENT) -> ReductionContext:
    if depth_bound < 0:
        raise ValidationError(f"Depth bound must be non-negative, got {depth_bound}")

    C_H = graph.num_homogeneous_components()
    if C_H == 0:
        raise ValidationError("Graph has no homogeneous components")
    if not (0 <= root_component < C_H):
        raise ValidationError(f"Root component {root_component} out of range [0, {C_H})")

    try:
        return ReductionContext(
            n=graph.num_nodes,
            m=graph.num_edges,
            C_H=C_H,
            N=C_H - 1,
            k=depth_bound,
            root=root_component,
            graph=graph,
            solver=solver,
        )
    except MemoryError as e:
        raise ReductionError("Out of memory while allocating the reduction context") from e
