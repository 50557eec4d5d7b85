import pytest
from edgecon.core.config import ReductionConfig
from edgecon.core.errors import SolverError
from edgecon.ir.ir_types import Lit, And, Or, TRUE, FALSE
from edgecon.solver import BooleanSolver, SatStatus

@pytest.fixture
def solver():
    return BooleanSolver(ReductionConfig(solver_name="m22"))

def test_constructors_collapse_small_lists(solver):
    a = solver.create_variable("a")
    assert solver.and_([]) == TRUE
    assert solver.or_([]) == FALSE
    assert solver.and_([a]) == a
    assert solver.or_([a]) == a
    assert isinstance(solver.and_([a, a]), And)
    assert isinstance(solver.or_(iter([a, a])), Or)
    assert solver.constant_false() == FALSE

def test_create_variable_is_memoized(solver):
    assert solver.create_variable("a") == solver.create_variable("a")
    assert solver.create_variable("a") == Lit(var=1)

def test_solve_sat_model_uses_keys(solver):
    a = solver.create_variable("a")
    b = solver.create_variable("b")
    result = solver.solve(solver.and_([a, solver.not_(b)]))
    assert result.status == SatStatus.SAT
    assert solver.model_value(result, "a") is True
    assert solver.model_value(result, "b") is False
    # keys never mentioned in the formula read as false
    assert solver.model_value(result, "missing") is False

def test_solve_unsat(solver):
    a = solver.create_variable("a")
    result = solver.solve(solver.and_([a, solver.not_(a)]))
    assert result.status == SatStatus.UNSAT
    assert result.model is None
    with pytest.raises(SolverError):
        solver.model_value(result, "a")

def test_solve_constants(solver):
    assert solver.solve(TRUE).status == SatStatus.SAT
    assert solver.solve(FALSE).status == SatStatus.UNSAT

def test_aux_variables_stay_out_of_model(solver):
    a, b, c = (solver.create_variable(n) for n in "abc")
    formula = solver.or_([solver.and_([a, b]), c])
    result = solver.solve(formula)
    assert set(result.model) == {"a", "b", "c"}

def test_iter_models_enumerates_all(solver):
    a, b = solver.create_variable("a"), solver.create_variable("b")
    models = list(solver.iter_models(solver.or_([a, b])))
    assignments = {(m.model["a"], m.model["b"]) for m in models}
    assert assignments == {(True, False), (False, True), (True, True)}

def test_iter_models_limit(solver):
    a, b = solver.create_variable("a"), solver.create_variable("b")
    assert len(list(solver.iter_models(solver.or_([a, b]), limit=2))) == 2

class _Recorder:
    """Wraps a pysat solver, counting models pulled and tracking close."""
    def __init__(self, backend):
        self.backend = backend
        self.pulled = 0
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        self.backend.delete()

    def enum_models(self):
        for model in self.backend.enum_models():
            self.pulled += 1
            yield model

def test_iter_models_stops_at_limit_and_closes(solver, monkeypatch):
    opened = []
    real_open = BooleanSolver._open

    def recording_open(self, clauses):
        opened.append(_Recorder(real_open(self, clauses)))
        return opened[-1]

    monkeypatch.setattr(BooleanSolver, "_open", recording_open)
    a, b = solver.create_variable("a"), solver.create_variable("b")

    models = solver.iter_models(solver.or_([a, b]), limit=1)
    assert len(models) == 1
    assert opened[0].pulled == 1
    assert opened[0].closed

    assert solver.iter_models(solver.or_([a, b]), limit=0) == []
    assert opened[1].pulled == 0

def test_unknown_solver_name():
    solver = BooleanSolver(ReductionConfig(solver_name="no-such-solver"))
    with pytest.raises(SolverError):
        solver.solve(solver.create_variable("a"))
