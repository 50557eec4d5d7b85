from typing import Annotated, Any, List, Literal, Union
from pydantic import BaseModel, Field, field_validator

# --- BoolExpr ---

class BoolExprBase(BaseModel):
    pass

class Lit(BoolExprBase):
    """A solver variable (by id), possibly negated."""
    kind: Literal["lit"] = "lit"
    var: int = Field(gt=0)
    neg: bool = False

class Const(BoolExprBase):
    kind: Literal["const"] = "const"
    value: bool

class Not(BoolExprBase):
    kind: Literal["not"] = "not"
    term: "BoolExpr"

class And(BoolExprBase):
    kind: Literal["and"] = "and"
    terms: List["BoolExpr"]

    @field_validator('terms')
    @classmethod
    def validate_len(cls, v: List[Any]) -> List[Any]:
        if len(v) < 2:
            raise ValueError("And requires at least 2 terms")
        return v

class Or(BoolExprBase):
    kind: Literal["or"] = "or"
    terms: List["BoolExpr"]

    @field_validator('terms')
    @classmethod
    def validate_len(cls, v: List[Any]) -> List[Any]:
        if len(v) < 2:
            raise ValueError("Or requires at least 2 terms")
        return v

BoolExpr = Annotated[
    Union[Lit, Const, Not, And, Or],
    Field(discriminator="kind")
]

# Required for recursive models in Pydantic v2
Not.model_rebuild()
And.model_rebuild()
Or.model_rebuild()

TRUE = Const(value=True)
FALSE = Const(value=False)
