# --------------------------------------------------------------------
import dataclasses as dc

from typing import Optional as Opt, Union

from .ast    import Node, Pos, DEFAULT_POS, opt_pos
from .tokens import Token
from .word   import Word

# ====================================================================
# Arithmetic expressions
#
# the small grammar shared by $((...)), ((...)) conditions and
# C-style for loops; operands are Words

@dc.dataclass(frozen = True)
class UnaryExpr(Node):
    op          : Token
    x           : Opt['ArithmNode'] = None
    post        : bool              = False
    op_pos      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.op_pos

@dc.dataclass(frozen = True)
class BinaryExpr(Node):
    op          : Token
    x           : Opt['ArithmNode'] = None
    y           : Opt['ArithmNode'] = None
    op_pos      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    # a binary expression starts where its left operand does
    def pos(self):
        return opt_pos(self.x)

@dc.dataclass(frozen = True)
class ParenExpr(Node):
    x           : Opt['ArithmNode'] = None
    lparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.lparen

@dc.dataclass(frozen = True)
class CStyleLoop(Node):
    """
    ((init; cond; post)) header of a C-style for loop, any part may be absent
    """
    init        : Opt['ArithmNode'] = None
    cond        : Opt['ArithmNode'] = None
    post        : Opt['ArithmNode'] = None
    lparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.lparen

# --------------------------------------------------------------------
ArithmNode = Union[Word, UnaryExpr, BinaryExpr, ParenExpr]
