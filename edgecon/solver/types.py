from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Any, Hashable, Optional

class SatStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"
    UNKNOWN = "UNKNOWN"

@dataclass
class SatResult:
    """
    Raw result from the SAT solver backend.
    """
    status: SatStatus
    # Declared proposition key -> truth value; auxiliary variables are left out
    model: Optional[Dict[Hashable, bool]] = None

    # Perf
    time_taken: float = 0.0
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_sat(self) -> bool:
        return self.status == SatStatus.SAT and self.model is not None
