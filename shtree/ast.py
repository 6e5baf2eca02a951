# --------------------------------------------------------------------
import dataclasses as dc

# ====================================================================
# Positions and the node base
#
# every node answers two questions:
# pprint()  -> str, canonical shell text (see printer.py)
# pos()     -> Pos, where the node starts in the source
# positions are stored when the tree is built and only projected here

@dc.dataclass(frozen = True, order = True)
class Pos:
    line    : int = 0
    column  : int = 0
    offset  : int = 0

    def is_valid(self):
        return self.line > 0

    def __str__(self):
        return f'{self.line}:{self.column}'

# zero value, "no position"
DEFAULT_POS = Pos()

# --------------------------------------------------------------------
class Node:
    def pos(self) -> Pos:
        return DEFAULT_POS

    def pprint(self) -> str:
        from .printer import pprint
        return pprint(self)

    def __str__(self):
        return self.pprint()

# --------------------------------------------------------------------
def node_first_pos(nodes) -> Pos:
    if not nodes:
        return DEFAULT_POS
    return nodes[0].pos()

def word_first_pos(words) -> Pos:
    if not words:
        return DEFAULT_POS
    return words[0].pos()

def opt_pos(node) -> Pos:
    if node is None:
        return DEFAULT_POS
    return node.pos()
