from typing import Dict, Hashable, Set

class VarManager:
    """
    Centralized manager for SAT variable allocation.
    Maps hashable proposition keys to deterministic ids and keeps
    backend-generated auxiliary variables apart from declared ones.
    """
    def __init__(self):
        self._var_map: Dict[Hashable, int] = {}
        self._next_id: int = 1
        self._aux_vars: Set[int] = set()

    @property
    def max_id(self) -> int:
        return self._next_id - 1

    def declare(self, key: Hashable) -> int:
        """
        Declare a variable for key. Returns existing ID if already declared.
        """
        if key in self._var_map:
            return self._var_map[key]

        vid = self._next_id
        self._var_map[key] = vid
        self._next_id += 1
        return vid

    def fresh(self, prefix: str = "aux", namespace: str = "default") -> int:
        """
        Allocate a fresh auxiliary variable.
        """
        name = f"::{namespace}::{prefix}_{self._next_id}"
        vid = self._next_id
        self._var_map[name] = vid
        self._aux_vars.add(vid)
        self._next_id += 1
        return vid

    def is_aux(self, vid: int) -> bool:
        return vid in self._aux_vars

    def declared(self) -> Dict[Hashable, int]:
        """Declared (non-auxiliary) keys and their ids."""
        return {key: vid for key, vid in self._var_map.items() if not self.is_aux(vid)}
