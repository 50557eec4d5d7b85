from typing import Optional
from edgecon.core.config import ReductionConfig
from edgecon.core.logging import get_logger
from edgecon.graph.edgecon_graph import EdgeConGraph
from edgecon.reduction.decode import decode_translator_assignment
from edgecon.reduction.formula import build_reduction_formula
from edgecon.solver.boolean_solver import BooleanSolver
from edgecon.solver.types import SatResult

logger = get_logger(__name__)

def reduce_and_solve(graph: EdgeConGraph, depth_bound: int,
                     config: Optional[ReductionConfig] = None) -> SatResult:
    """
    Builds the reduction for a fixed depth bound, solves it and, when it is
    satisfiable, decodes the translator edges onto graph.
    """
    config = config if config else ReductionConfig.from_env_or_file()
    solver = BooleanSolver(config)

    formula = build_reduction_formula(solver, graph, depth_bound, config.root_component)
    result = solver.solve(formula)
    logger.info(
        f"k={depth_bound}: {result.status.value} "
        f"({result.stats.get('clauses', 0)} clauses, {result.time_taken:.3f}s)"
    )

    if result.is_sat:
        decode_translator_assignment(result, graph)
    return result
