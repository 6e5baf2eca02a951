# --------------------------------------------------------------------
import dataclasses as dc

from typing import Optional as Opt, Union

from .ast    import Node, Pos, DEFAULT_POS, node_first_pos
from .tokens import Token

# ====================================================================
# Words and expansions
#
# a Word is a concatenation of parts, rendered with no separator
# parts: Lit, SglQuoted, Quoted, ParamExp, CmdSubst, ArithmExpr,
#        ArrayExpr, CmdInput
# quote delimiters are not stored, the printer adds them back

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Lit(Node):
    value       : str   = ''
    value_pos   : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.value_pos

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Word(Node):
    parts       : tuple['WordPart', ...] = ()

    def pos(self):
        return node_first_pos(self.parts)

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class SglQuoted(Node):
    value       : str   = ''
    quote_pos   : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.quote_pos

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Quoted(Node):
    """
    "...", $'...' or $"..."; the closing delimiter follows the opening one
    """
    quote       : Token                 = Token.DQUOTE
    parts       : tuple['WordPart', ...] = ()
    quote_pos   : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.quote_pos

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Index(Node):
    word        : Word  = Word()

    def pos(self):
        return self.word.pos()

@dc.dataclass(frozen = True)
class Replace(Node):
    orig        : Word  = Word()
    with_       : Word  = Word()
    all         : bool  = False

    def pos(self):
        return self.orig.pos()

@dc.dataclass(frozen = True)
class Expansion(Node):
    op          : Token = Token.CSUB
    word        : Word  = Word()

    def pos(self):
        return self.word.pos()

@dc.dataclass(frozen = True)
class ParamExp(Node):
    """
    $name, or ${[#]name[index][/orig/with][op word]}
    """
    param       : Lit           = Lit()
    short       : bool          = False
    length      : bool          = False
    ind         : Opt[Index]    = None
    repl        : Opt[Replace]  = None
    exp         : Opt[Expansion] = None
    dollar      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.dollar

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class CmdSubst(Node):
    stmts       : tuple['Stmt', ...] = ()
    backquotes  : bool  = False
    left        : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    right       : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.left

@dc.dataclass(frozen = True)
class ArithmExpr(Node):
    x           : Opt['ArithmNode'] = None
    dollar      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.dollar

@dc.dataclass(frozen = True)
class ArrayExpr(Node):
    items       : tuple[Word, ...] = ()
    lparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.lparen

@dc.dataclass(frozen = True)
class CmdInput(Node):
    stmts       : tuple['Stmt', ...] = ()
    lss         : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.lss

# --------------------------------------------------------------------
WordPart = Union[
    Lit, SglQuoted, Quoted, ParamExp, CmdSubst, ArithmExpr, ArrayExpr, CmdInput,
]

# --------------------------------------------------------------------
# shorthands for building trees by hand

def lit(value: str, pos: Pos = DEFAULT_POS) -> Word:
    return Word((Lit(value, value_pos = pos),))

def lits(*values: str) -> tuple[Word, ...]:
    return tuple(lit(value) for value in values)
