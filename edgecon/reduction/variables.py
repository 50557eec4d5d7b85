"""
Proposition keys for the three variable families of the reduction.

Keys are frozen pydantic models, so equal propositions hash equal and
resolve to the same solver variable through BooleanSolver.create_variable.
"""
from typing import Literal, Union
from pydantic import BaseModel, ConfigDict, Field
from edgecon.ir.ir_types import Lit
from edgecon.solver.boolean_solver import BooleanSolver

class TranslatorKey(BaseModel):
    """Edge (u, v) carries translator i; always stored with u <= v."""
    model_config = ConfigDict(frozen=True)
    family: Literal["x"] = "x"
    u: int = Field(ge=0)
    v: int = Field(ge=0)
    i: int = Field(ge=0)

    @classmethod
    def of(cls, n1: int, n2: int, i: int) -> "TranslatorKey":
        if n1 > n2:
            n1, n2 = n2, n1
        return cls(u=n1, v=n2, i=i)

    @property
    def name(self) -> str:
        return f"x_[({self.u},{self.v}),{self.i}]"

class ParentKey(BaseModel):
    """Component parent is the parent of component child."""
    model_config = ConfigDict(frozen=True)
    family: Literal["p"] = "p"
    child: int = Field(ge=0)
    parent: int = Field(ge=0)

    @property
    def name(self) -> str:
        return f"p_[{self.child},{self.parent}]"

class LevelKey(BaseModel):
    """Component sits at depth level in the component tree."""
    model_config = ConfigDict(frozen=True)
    family: Literal["l"] = "l"
    component: int = Field(ge=0)
    level: int = Field(ge=0)

    @property
    def name(self) -> str:
        return f"l_[{self.component},{self.level}]"

PropositionKey = Union[TranslatorKey, ParentKey, LevelKey]

def is_ith_translator(solver: BooleanSolver, n1: int, n2: int, i: int) -> Lit:
    return solver.create_variable(TranslatorKey.of(n1, n2, i))

def parent(solver: BooleanSolver, child: int, parent: int) -> Lit:
    return solver.create_variable(ParentKey(child=child, parent=parent))

def level_in_spanning_tree(solver: BooleanSolver, level: int, component: int) -> Lit:
    return solver.create_variable(LevelKey(component=component, level=level))
