from edgecon.reduction.variables import (
    TranslatorKey, ParentKey, LevelKey, PropositionKey,
    is_ith_translator, parent, level_in_spanning_tree
)
from edgecon.reduction.context import ReductionContext, init_context
from edgecon.reduction.constraints import (
    build_phi_2_1, build_phi_2_2, build_phi_2,
    build_phi_3_1, build_phi_3_2, build_phi_3,
    build_phi_4_1, build_phi_4_2, build_phi_4,
    build_phi_5, build_phi_6, build_phi_7, build_phi_8
)
from edgecon.reduction.formula import build_reduction_formula
from edgecon.reduction.decode import (
    ComponentTree, decode_translator_assignment, decode_component_tree,
    translator_edges_from_model
)
from edgecon.reduction.pipeline import reduce_and_solve

__all__ = [
    "TranslatorKey", "ParentKey", "LevelKey", "PropositionKey",
    "is_ith_translator", "parent", "level_in_spanning_tree",
    "ReductionContext", "init_context",
    "build_phi_2_1", "build_phi_2_2", "build_phi_2",
    "build_phi_3_1", "build_phi_3_2", "build_phi_3",
    "build_phi_4_1", "build_phi_4_2", "build_phi_4",
    "build_phi_5", "build_phi_6", "build_phi_7", "build_phi_8",
    "build_reduction_formula",
    "ComponentTree", "decode_translator_assignment", "decode_component_tree",
    "translator_edges_from_model",
    "reduce_and_solve"
]
