# scalar_autodiff/core/node.py
from enum import Enum


class OpTag(str, Enum):
    """
    Tag of the primitive that produced a node.

    The engine dispatches backward rules on this tag; printers and graph
    statistics use its string value for display.
    """
    LEAF = "leaf"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    SIGMOID = "sigmoid"
    LOG = "log"
    POW = "pow"

    def __str__(self):
        return self.value


# number of parents each primitive records
ARITY = {
    OpTag.LEAF: 0,
    OpTag.ADD: 2,
    OpTag.SUB: 2,
    OpTag.MUL: 2,
    OpTag.SIGMOID: 1,
    OpTag.LOG: 1,
    OpTag.POW: 1,
}
