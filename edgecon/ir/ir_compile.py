from typing import List
from edgecon.ir.ir_types import BoolExpr, Lit, Const, Not, And, Or
from edgecon.ir.ir_normalize import normalize_ir
from edgecon.vars import VarManager

CNFEncoding = List[List[int]]

class CompilationContext:
    def __init__(self, var_manager: VarManager):
        # Variables referenced by Lit nodes are already declared in var_manager
        self.var_manager = var_manager
        self.clauses: CNFEncoding = []

    def allocate_aux(self) -> int:
        return self.var_manager.fresh(prefix="tseitin", namespace="ir")

    def add_clause(self, clause: List[int]):
        self.clauses.append(clause)

def tseitin(expr: BoolExpr, ctx: CompilationContext) -> int:
    """Tseitin transformation: returns the literal representing the expression."""
    if isinstance(expr, Lit):
        return -expr.var if expr.neg else expr.var

    if isinstance(expr, Const):
        out = ctx.allocate_aux()
        ctx.add_clause([out] if expr.value else [-out])
        return out

    if isinstance(expr, Not):
        target = tseitin(expr.term, ctx)
        return -target

    if isinstance(expr, And):
        out = ctx.allocate_aux()
        inputs = [tseitin(t, ctx) for t in expr.terms]
        # out <-> (i1 /\ i2 /\ ...)
        for i in inputs:
            ctx.add_clause([-out, i])
        ctx.add_clause([-i for i in inputs] + [out])
        return out

    if isinstance(expr, Or):
        out = ctx.allocate_aux()
        inputs = [tseitin(t, ctx) for t in expr.terms]
        # out <-> (i1 \/ i2 \/ ...)
        for i in inputs:
            ctx.add_clause([-i, out])
        ctx.add_clause([-out] + inputs)
        return out

    raise ValueError(f"Unsupported expression for Tseitin: {type(expr)}")

def _emit_top_level(expr: BoolExpr, ctx: CompilationContext):
    """Asserts a conjunct, writing disjunctions directly as clauses."""
    if isinstance(expr, Or):
        ctx.add_clause([tseitin(t, ctx) for t in expr.terms])
    else:
        ctx.add_clause([tseitin(expr, ctx)])

def compile_ir(expr: BoolExpr, var_manager: VarManager) -> CNFEncoding:
    """Compiles a Boolean expression to CNF asserting it is true."""
    ctx = CompilationContext(var_manager)
    norm_expr = normalize_ir(expr)

    if isinstance(norm_expr, Const):
        if not norm_expr.value:
            aux = ctx.allocate_aux()
            ctx.add_clause([aux])
            ctx.add_clause([-aux])
    elif isinstance(norm_expr, And):
        for term in norm_expr.terms:
            _emit_top_level(term, ctx)
    else:
        _emit_top_level(norm_expr, ctx)

    # Deterministic clause ordering
    ctx.clauses.sort(key=lambda c: (len(c), sorted([abs(l) for l in c]), c))
    return ctx.clauses
