import time
from itertools import islice
from typing import Hashable, Iterable, List, Optional
from pysat.solvers import Solver
from edgecon.core.config import ReductionConfig
from edgecon.core.errors import SolverError
from edgecon.core.logging import get_logger
from edgecon.ir.ir_compile import CNFEncoding, compile_ir
from edgecon.ir.ir_types import BoolExpr, Lit, Not, And, Or, TRUE, FALSE
from edgecon.solver.types import SatResult, SatStatus
from edgecon.vars import VarManager

logger = get_logger(__name__)

class BooleanSolver:
    """
    Adapter between formula builders and a pysat backend.

    Owns the variable table: equal keys passed to create_variable always
    map to the same solver variable. Expressions are built as IR trees and
    compiled to CNF only when solved.
    """
    def __init__(self, config: Optional[ReductionConfig] = None):
        self.config = config if config else ReductionConfig()
        self.var_manager = VarManager()

    # --- Expression construction ---

    def create_variable(self, key: Hashable) -> Lit:
        return Lit(var=self.var_manager.declare(key))

    def not_(self, expr: BoolExpr) -> BoolExpr:
        return Not(term=expr)

    def and_(self, terms: Iterable[BoolExpr]) -> BoolExpr:
        terms = list(terms)
        if not terms:
            return TRUE
        if len(terms) == 1:
            return terms[0]
        return And(terms=terms)

    def or_(self, terms: Iterable[BoolExpr]) -> BoolExpr:
        terms = list(terms)
        if not terms:
            return FALSE
        if len(terms) == 1:
            return terms[0]
        return Or(terms=terms)

    def constant_false(self) -> BoolExpr:
        return FALSE

    # --- Solving ---

    def compile(self, formula: BoolExpr) -> CNFEncoding:
        return compile_ir(formula, self.var_manager)

    def _open(self, clauses: CNFEncoding) -> Solver:
        try:
            return Solver(name=self.config.solver_name, bootstrap_with=clauses)
        except NotImplementedError as e:
            raise SolverError(f"Unsupported solver '{self.config.solver_name}': {e}") from e

    def _to_result(self, model: List[int], start_time: float, num_clauses: int) -> SatResult:
        true_vars = {lit for lit in model if lit > 0}
        values = {key: vid in true_vars for key, vid in self.var_manager.declared().items()}
        return SatResult(
            status=SatStatus.SAT,
            model=values,
            time_taken=time.time() - start_time,
            stats={"clauses": num_clauses, "vars": self.var_manager.max_id}
        )

    def solve(self, formula: BoolExpr) -> SatResult:
        """Solves formula, returning SAT with a model or UNSAT."""
        start_time = time.time()
        clauses = self.compile(formula)
        logger.debug(f"Solving {len(clauses)} clauses over {self.var_manager.max_id} vars with {self.config.solver_name}")

        with self._open(clauses) as solver:
            is_sat = solver.solve()
            if is_sat:
                return self._to_result(solver.get_model() or [], start_time, len(clauses))

        return SatResult(
            status=SatStatus.UNSAT,
            time_taken=time.time() - start_time,
            stats={"clauses": len(clauses), "vars": self.var_manager.max_id}
        )

    def iter_models(self, formula: BoolExpr, limit: Optional[int] = None) -> List[SatResult]:
        """
        Enumerates up to limit distinct models of formula. The backend is
        closed before returning and never searches past the limit-th model.
        """
        start_time = time.time()
        clauses = self.compile(formula)

        with self._open(clauses) as solver:
            models = list(islice(solver.enum_models(), limit))

        logger.debug(f"Enumerated {len(models)} models (limit {limit})")
        return [self._to_result(model, start_time, len(clauses)) for model in models]

    @staticmethod
    def model_value(result: SatResult, key: Hashable) -> bool:
        """Truth value of key in a SAT result; unconstrained keys read as False."""
        if not result.is_sat:
            raise SolverError(f"No model available (status {result.status.value})")
        return result.model.get(key, False)
