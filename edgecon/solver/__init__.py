from edgecon.solver.types import SatStatus, SatResult
from edgecon.solver.boolean_solver import BooleanSolver

__all__ = ["SatStatus", "SatResult", "BooleanSolver"]
