from edgecon.ir.ir_types import BoolExpr, Lit, Const, Not, And, Or, TRUE, FALSE

def build_stable_key(expr: BoolExpr) -> str:
    """Generates a stable key for structural comparison and sorting."""
    if isinstance(expr, Lit):
        return f"L:{'!' if expr.neg else ''}{expr.var}"
    elif isinstance(expr, Const):
        return "T" if expr.value else "F"
    elif isinstance(expr, Not):
        return f"N({build_stable_key(expr.term)})"
    elif isinstance(expr, (And, Or)):
        tag = "A" if isinstance(expr, And) else "O"
        sub_keys = sorted([build_stable_key(t) for t in expr.terms])
        return f"{tag}({','.join(sub_keys)})"
    return "???"

def push_not_inward(expr: BoolExpr) -> BoolExpr:
    """Pushes Not inward using DeMorgan and double negation removal."""
    if not isinstance(expr, Not):
        if isinstance(expr, And):
            return And(terms=[push_not_inward(t) for t in expr.terms])
        if isinstance(expr, Or):
            return Or(terms=[push_not_inward(t) for t in expr.terms])
        return expr

    term = expr.term

    if isinstance(term, Not):
        # !!a => a
        return push_not_inward(term.term)

    if isinstance(term, And):
        # !(a /\ b) => !a \/ !b
        return Or(terms=[push_not_inward(Not(term=t)) for t in term.terms])

    if isinstance(term, Or):
        # !(a \/ b) => !a /\ !b
        return And(terms=[push_not_inward(Not(term=t)) for t in term.terms])

    if isinstance(term, Lit):
        return Lit(var=term.var, neg=not term.neg)

    if isinstance(term, Const):
        return FALSE if term.value else TRUE

    return expr

def _join(cls, terms):
    """Rebuilds an And/Or from already simplified terms, absorbing constants."""
    absorbing = FALSE if cls is And else TRUE
    flattened_terms = []
    for t in terms:
        if isinstance(t, Const):
            if t.value == absorbing.value:
                return absorbing
            continue
        if isinstance(t, cls):
            flattened_terms.extend(t.terms)
        else:
            flattened_terms.append(t)

    if not flattened_terms:
        # Empty conjunction is true, empty disjunction is false
        return TRUE if cls is And else FALSE
    if len(flattened_terms) == 1:
        return flattened_terms[0]

    # Sort for determinism
    flattened_terms.sort(key=build_stable_key)
    return cls(terms=flattened_terms)

def flatten(expr: BoolExpr) -> BoolExpr:
    """Flattens nested And/Or and folds constants away."""
    if isinstance(expr, (And, Or)):
        return _join(type(expr), [flatten(t) for t in expr.terms])
    if isinstance(expr, Not):
        inner = flatten(expr.term)
        if isinstance(inner, Const):
            return FALSE if inner.value else TRUE
        return Not(term=inner)
    return expr

def normalize_ir(expr: BoolExpr) -> BoolExpr:
    """Full normalization pipeline: push not -> flatten."""
    expr = push_not_inward(expr)
    expr = flatten(expr)
    return expr
