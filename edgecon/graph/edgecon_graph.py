import networkx as nx
from typing import Dict, Hashable, Iterable, List, Sequence, Set, Tuple
from edgecon.core.errors import GraphError
from edgecon.core.logging import get_logger

logger = get_logger(__name__)

Edge = Tuple[int, int]

def canonical_edge(u: int, v: int) -> Edge:
    return (u, v) if u <= v else (v, u)

class EdgeConGraph:
    """
    Undirected graph whose nodes carry labels, with translator edges.

    Nodes are 0..n-1. An edge is homogeneous when both endpoints share a
    label; the homogeneous components are the connected components of the
    homogeneous edges, numbered by their smallest node so that the
    component of node 0 is component 0.
    """
    def __init__(self, num_nodes: int, edges: Iterable[Edge], labels: Sequence[Hashable]):
        if num_nodes < 0:
            raise GraphError(f"Negative node count: {num_nodes}")
        if len(labels) != num_nodes:
            raise GraphError(f"Expected {num_nodes} labels, got {len(labels)}")

        self._graph = nx.Graph()
        for node in range(num_nodes):
            self._graph.add_node(node, label=labels[node])

        for u, v in edges:
            if u == v:
                raise GraphError(f"Self loop on node {u}")
            if not (0 <= u < num_nodes and 0 <= v < num_nodes):
                raise GraphError(f"Edge ({u}, {v}) references unknown node")
            self._graph.add_edge(u, v)

        self._translators: Set[Edge] = set()
        self._component_of: Dict[int, int] = {}
        self._components: List[List[int]] = []
        self._component_graph = nx.Graph()
        self.recompute_homogeneous_components()

    @classmethod
    def from_networkx(cls, graph: nx.Graph, label_attr: str = "label") -> "EdgeConGraph":
        """Builds an EdgeConGraph from a networkx graph with nodes 0..n-1."""
        n = graph.number_of_nodes()
        if set(graph.nodes) != set(range(n)):
            raise GraphError("Nodes must be the integers 0..n-1")
        try:
            labels = [graph.nodes[node][label_attr] for node in range(n)]
        except KeyError as e:
            raise GraphError(f"Node without '{label_attr}' attribute: {e}") from e
        return cls(n, graph.edges(), labels)

    # --- Graph queries ---

    @property
    def num_nodes(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def num_edges(self) -> int:
        return self._graph.number_of_edges()

    def is_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def edges(self) -> List[Edge]:
        """All edges as (smaller, larger) pairs, sorted."""
        return sorted(canonical_edge(u, v) for u, v in self._graph.edges())

    def label(self, node: int) -> Hashable:
        self._check_node(node)
        return self._graph.nodes[node]["label"]

    def is_homogeneous_edge(self, u: int, v: int) -> bool:
        return self.is_edge(u, v) and self.label(u) == self.label(v)

    # --- Homogeneous components ---

    def num_homogeneous_components(self) -> int:
        return len(self._components)

    def component_of(self, node: int) -> int:
        self._check_node(node)
        return self._component_of[node]

    def component_nodes(self, component: int) -> List[int]:
        return list(self._components[component])

    def is_node_in_component(self, node: int, component: int) -> bool:
        return self.component_of(node) == component

    def recompute_homogeneous_components(self):
        """Rebuilds the component partition and the translator component graph."""
        homogeneous = nx.Graph()
        homogeneous.add_nodes_from(self._graph.nodes)
        homogeneous.add_edges_from(
            (u, v) for u, v in self._graph.edges() if self.label(u) == self.label(v)
        )

        self._components = sorted(
            (sorted(c) for c in nx.connected_components(homogeneous)),
            key=lambda c: c[0]
        )
        self._component_of = {
            node: idx for idx, nodes in enumerate(self._components) for node in nodes
        }

        self._component_graph = nx.Graph()
        self._component_graph.add_nodes_from(range(len(self._components)))
        for u, v in sorted(self._translators):
            cu, cv = self._component_of[u], self._component_of[v]
            if cu == cv:
                continue
            if self._component_graph.has_edge(cu, cv):
                self._component_graph.edges[cu, cv]["translators"].append((u, v))
            else:
                self._component_graph.add_edge(cu, cv, translators=[(u, v)])

        logger.debug(
            f"{len(self._components)} homogeneous components, "
            f"{len(self._translators)} translator edges"
        )

    def component_graph(self) -> nx.Graph:
        """Components as nodes, joined wherever a translator edge crosses them."""
        return self._component_graph.copy()

    # --- Translators ---

    def add_translator_edge(self, u: int, v: int):
        if not self.is_edge(u, v):
            raise GraphError(f"Cannot place a translator on missing edge ({u}, {v})")
        self._translators.add(canonical_edge(u, v))

    @property
    def translator_edges(self) -> List[Edge]:
        return sorted(self._translators)

    def reset_translators(self):
        self._translators.clear()
        self.recompute_homogeneous_components()

    def _check_node(self, node: int):
        if not self._graph.has_node(node):
            raise GraphError(f"Unknown node {node}")
