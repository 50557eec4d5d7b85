from edgecon.graph.edgecon_graph import EdgeConGraph, Edge, canonical_edge

__all__ = ["EdgeConGraph", "Edge", "canonical_edge"]
