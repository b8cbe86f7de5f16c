from .tree import (
    BinomialTree,
    Node,
    american_call_price,
    backward_induction,
    build_american_call_tree,
    build_price_lattice,
)

__all__ = [
    "Node",
    "BinomialTree",
    "build_price_lattice",
    "backward_induction",
    "build_american_call_tree",
    "american_call_price",
]
