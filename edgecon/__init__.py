"""
EdgeCon: reduction of the translator placement problem to SAT.
"""
from edgecon.graph import EdgeConGraph
from edgecon.solver import BooleanSolver, SatResult, SatStatus
from edgecon.reduction import (
    build_reduction_formula, decode_translator_assignment, reduce_and_solve
)

__all__ = [
    "EdgeConGraph", "BooleanSolver", "SatResult", "SatStatus",
    "build_reduction_formula", "decode_translator_assignment", "reduce_and_solve"
]
