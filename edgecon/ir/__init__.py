from edgecon.ir.ir_types import BoolExpr, Lit, Const, Not, And, Or, TRUE, FALSE
from edgecon.ir.ir_compile import compile_ir, CNFEncoding
from edgecon.ir.ir_normalize import normalize_ir

__all__ = [
    "BoolExpr", "Lit", "Const", "Not", "And", "Or", "TRUE", "FALSE",
    "compile_ir", "CNFEncoding", "normalize_ir"
]
