"""
Constraint builders phi_2 .. phi_8 of the EdgeCon reduction.

Notation, for a reduction context with C_H components and N = C_H - 1
translators:

* X(e, i): edge e carries translator i.
* P(j, j'): component j' is the parent of component j.
* L(j, h): component j sits at level h of the component tree.

Every builder collects its clauses in a list and checks the final count
against the closed-form count of its loops before conjoining.
"""
from itertools import combinations
from math import comb
from typing import List
from edgecon.core.errors import ReductionError
from edgecon.core.logging import get_logger
from edgecon.ir.ir_types import BoolExpr
from edgecon.reduction.context import ReductionContext
from edgecon.reduction.variables import is_ith_translator, parent, level_in_spanning_tree

logger = get_logger(__name__)

def _X(ctx: ReductionContext, n1: int, n2: int, i: int) -> BoolExpr:
    return is_ith_translator(ctx.solver, n1, n2, i)

def _P(ctx: ReductionContext, child: int, parent_: int) -> BoolExpr:
    return parent(ctx.solver, child, parent_)

def _L(ctx: ReductionContext, component: int, level: int) -> BoolExpr:
    return level_in_spanning_tree(ctx.solver, level, component)

def _check_count(name: str, terms: List[BoolExpr], expected: int):
    if len(terms) != expected:
        raise ReductionError(f"{name}: built {len(terms)} terms, expected {expected}")
    logger.debug(f"{name}: {len(terms)} terms")

def build_phi_2_1(ctx: ReductionContext) -> BoolExpr:
    """Each translator is carried by at most one edge."""
    s = ctx.solver
    edges = ctx.graph.edges()
    clauses = []
    for i in range(ctx.N):
        for (e1, e2), (f1, f2) in combinations(edges, 2):
            clauses.append(s.or_([s.not_(_X(ctx, e1, e2, i)), s.not_(_X(ctx, f1, f2, i))]))

    _check_count("phi_2_1", clauses, ctx.N * comb(ctx.m, 2))
    return s.and_(clauses)

def build_phi_2_2(ctx: ReductionContext) -> BoolExpr:
    """Each edge carries at most one translator."""
    s = ctx.solver
    clauses = []
    for e1, e2 in ctx.graph.edges():
        for i, j in combinations(range(ctx.N), 2):
            clauses.append(s.or_([s.not_(_X(ctx, e1, e2, i)), s.not_(_X(ctx, e1, e2, j))]))

    _check_count("phi_2_2", clauses, ctx.m * comb(ctx.N, 2))
    return s.and_(clauses)

def build_phi_2(ctx: ReductionContext) -> BoolExpr:
    return ctx.solver.and_([build_phi_2_1(ctx), build_phi_2_2(ctx)])

def build_phi_3_1(ctx: ReductionContext) -> BoolExpr:
    """Every component except the root has at least one parent."""
    s = ctx.solver
    clauses = []
    for j in ctx.non_root_components():
        clauses.append(s.or_([_P(ctx, j, j1) for j1 in range(ctx.C_H) if j1 != j]))

    _check_count("phi_3_1", clauses, ctx.C_H - 1)
    return s.and_(clauses)

def build_phi_3_2(ctx: ReductionContext) -> BoolExpr:
    """Every component except the root has at most one parent."""
    s = ctx.solver
    clauses = []
    for j in ctx.non_root_components():
        others = [j1 for j1 in range(ctx.C_H) if j1 != j]
        for j1, j2 in combinations(others, 2):
            clauses.append(s.or_([s.not_(_P(ctx, j, j1)), s.not_(_P(ctx, j, j2))]))

    _check_count("phi_3_2", clauses, (ctx.C_H - 1) * comb(ctx.C_H - 1, 2))
    return s.and_(clauses)

def build_phi_3(ctx: ReductionContext) -> BoolExpr:
    return ctx.solver.and_([build_phi_3_1(ctx), build_phi_3_2(ctx)])

def build_phi_4_1(ctx: ReductionContext) -> BoolExpr:
    """Every component has at least one level."""
    s = ctx.solver
    clauses = []
    for i in range(ctx.C_H):
        clauses.append(s.or_([_L(ctx, i, n) for n in range(ctx.N)]))

    _check_count("phi_4_1", clauses, ctx.C_H)
    return s.and_(clauses)

def build_phi_4_2(ctx: ReductionContext) -> BoolExpr:
    """Every component has at most one level."""
    s = ctx.solver
    clauses = []
    for i in range(ctx.C_H):
        for n, n_prime in combinations(range(ctx.N), 2):
            clauses.append(s.or_([s.not_(_L(ctx, i, n)), s.not_(_L(ctx, i, n_prime))]))

    _check_count("phi_4_2", clauses, ctx.C_H * comb(ctx.N, 2))
    return s.and_(clauses)

def build_phi_4(ctx: ReductionContext) -> BoolExpr:
    return ctx.solver.and_([build_phi_4_1(ctx), build_phi_4_2(ctx)])

def build_phi_5(ctx: ReductionContext) -> BoolExpr:
    """
    The tree has a depth strictly greater than k: some component sits at a
    level in [k, N). An empty range yields the false constant.
    """
    s = ctx.solver
    disjuncts = []
    for i in range(ctx.C_H):
        for n in range(ctx.k, ctx.N):
            disjuncts.append(_L(ctx, i, n))

    _check_count("phi_5", disjuncts, ctx.C_H * max(0, ctx.N - ctx.k))
    if not disjuncts:
        logger.debug(f"phi_5 is empty for k={ctx.k}, N={ctx.N}")
    return s.or_(disjuncts)

def build_phi_6(ctx: ReductionContext, j1: int, j2: int) -> BoolExpr:
    """
    Some edge (u, v), u < v, with v in child j1 and u in parent j2 carries a
    translator. False when no such edge exists.
    """
    s = ctx.solver
    g = ctx.graph
    disjuncts = []
    for u, v in g.edges():
        if g.is_node_in_component(v, j1) and g.is_node_in_component(u, j2):
            for i in range(ctx.N):
                disjuncts.append(_X(ctx, u, v, i))

    if not disjuncts:
        return s.constant_false()
    return s.or_(disjuncts)

def build_phi_7(ctx: ReductionContext, j1: int, j2: int) -> BoolExpr:
    """If j1 is at level h then j2 is at level h - 1."""
    s = ctx.solver
    clauses = []
    for h in range(1, ctx.N):
        clauses.append(s.or_([s.not_(_L(ctx, j1, h)), _L(ctx, j2, h - 1)]))

    _check_count("phi_7", clauses, max(0, ctx.N - 1))
    return s.and_(clauses)

def build_phi_8(ctx: ReductionContext) -> BoolExpr:
    """
    Whenever j2 is the parent of j1, phi_6 and phi_7 hold for (j1, j2).
    The root is never a child, so pairs with j1 == root are skipped.
    """
    s = ctx.solver
    clauses = []
    for j1 in ctx.non_root_components():
        for j2 in range(ctx.C_H):
            if j1 == j2:
                continue
            not_p_j1_j2 = s.not_(_P(ctx, j1, j2))
            clauses.append(s.and_([
                s.or_([not_p_j1_j2, build_phi_6(ctx, j1, j2)]),
                s.or_([not_p_j1_j2, build_phi_7(ctx, j1, j2)]),
            ]))

    _check_count("phi_8", clauses, (ctx.C_H - 1) ** 2)
    return s.and_(clauses)
