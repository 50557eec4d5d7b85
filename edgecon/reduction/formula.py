from edgecon.core.config import ROOT_COMPONENT
from edgecon.core.errors import ReductionError
from edgecon.core.logging import get_logger
from edgecon.graph.edgecon_graph import EdgeConGraph
from edgecon.ir.ir_types import BoolExpr
from edgecon.reduction.context import init_context
from edgecon.reduction.constraints import (
    build_phi_2, build_phi_3, build_phi_4, build_phi_5, build_phi_8
)
from edgecon.solver.boolean_solver import BooleanSolver

logger = get_logger(__name__)

def build_reduction_formula(solver: BooleanSolver, graph: EdgeConGraph, depth_bound: int,
                            root_component: int = ROOT_COMPONENT) -> BoolExpr:
    """
    Builds phi_2 /\\ phi_3 /\\ phi_4 /\\ phi_5 /\\ phi_8 for graph and depth bound.

    The formula is satisfiable iff the homogeneous components can be arranged
    in a tree rooted at root_component, of depth greater than depth_bound,
    whose parent links are each bridged by an edge carrying one of the
    N = C_H - 1 translators.
    """
    ctx = init_context(solver, graph, depth_bound, root_component)
    logger.debug(f"Reduction: n={ctx.n}, m={ctx.m}, C_H={ctx.C_H}, N={ctx.N}, k={ctx.k}")

    try:
        formula = solver.and_([
            build_phi_2(ctx),
            build_phi_3(ctx),
            build_phi_4(ctx),
            build_phi_5(ctx),
            build_phi_8(ctx),
        ])
    except MemoryError as e:
        raise ReductionError("Out of memory while building the reduction formula") from e

    logger.debug(f"Reduction declared {solver.var_manager.max_id} variables")
    return formula
