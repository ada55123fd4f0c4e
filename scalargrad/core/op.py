# scalargrad/core/op.py
from enum import Enum


class Op(Enum):
    """
    Closed set of operator tags a Node can carry.

    Each member stores (tag, arity). The tag is what `render` prints, the arity
    is the exact number of operands a node with this tag must reference.
    """
    NONE = ("", 0)
    ADD = ("+", 2)
    MUL = ("*", 2)
    POW = ("pow", 2)
    TANH = ("tanh", 1)
    EXP = ("exp", 1)

    def __init__(self, tag: str, arity: int):
        self.tag = tag
        self.arity = arity

    @property
    def is_leaf(self) -> bool:
        return self is Op.NONE
