# --------------------------------------------------------------------
import dataclasses as dc

from typing import Optional as Opt, Union

from .ast        import Node, Pos, DEFAULT_POS, node_first_pos, word_first_pos
from .tokens     import Token, HEREDOCS
from .word       import Word, Lit
from .expression import CStyleLoop

### STATEMENTS ###

# a Stmt wraps one command node with its modifiers:
# negation, leading assignments, redirections, background flag
# compound commands hold statement lists, which the printer joins
# with "; " or a line break (after a heredoc)
# position anchors:
#   compound commands  -> their opening keyword/delimiter
#   Block              -> its closing brace
#   Command, Word...   -> first child, DEFAULT_POS when empty

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Assign(Node):
    value       : Word          = Word()
    name        : Opt[Lit]      = None      # None: bare word, e.g. array element
    append      : bool          = False     # += instead of =

    def pos(self):
        if self.name is not None:
            return self.name.pos()
        return self.value.pos()

@dc.dataclass(frozen = True)
class Redirect(Node):
    op          : Token
    word        : Word          = Word()
    n           : Opt[Lit]      = None      # file descriptor number
    op_pos      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        if self.n is not None:
            return self.n.pos()
        return self.op_pos

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Stmt(Node):
    node        : Opt['CommandNode'] = None    # None: empty statement
    negated     : bool                  = False
    assigns     : tuple[Assign, ...]    = ()
    redirs      : tuple[Redirect, ...]  = ()
    background  : bool                  = False
    position    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.position

    def newline_after(self):
        return any(redir.op in HEREDOCS for redir in self.redirs)

@dc.dataclass(frozen = True)
class File(Node):
    stmts       : tuple[Stmt, ...]  = ()
    name        : str               = ''

    def pos(self):
        return node_first_pos(self.stmts)

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Command(Node):
    args        : tuple[Word, ...]  = ()

    def pos(self):
        return word_first_pos(self.args)

@dc.dataclass(frozen = True)
class Subshell(Node):
    stmts       : tuple[Stmt, ...]  = ()
    lparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.lparen

@dc.dataclass(frozen = True)
class Block(Node):
    stmts       : tuple[Stmt, ...]  = ()
    lbrace      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rbrace      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    # anchored on the closing brace
    def pos(self):
        return self.rbrace

# --------------------------------------------------------------------
# conditions

@dc.dataclass(frozen = True)
class StmtCond(Node):
    stmts       : tuple[Stmt, ...]  = ()

    def pos(self):
        return node_first_pos(self.stmts)

@dc.dataclass(frozen = True)
class CStyleCond(Node):
    cond        : Opt[Node]         = None
    lparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    rparen      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.lparen

Cond = Union[StmtCond, CStyleCond]

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Elif(Node):
    cond        : Opt[Cond]         = None
    then_stmts  : tuple[Stmt, ...]  = ()
    elif_pos    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.elif_pos

@dc.dataclass(frozen = True)
class IfStmt(Node):
    cond        : Opt[Cond]         = None
    then_stmts  : tuple[Stmt, ...]  = ()
    elifs       : tuple[Elif, ...]  = ()
    else_stmts  : tuple[Stmt, ...]  = ()
    if_pos      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    fi_pos      : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.if_pos

@dc.dataclass(frozen = True)
class WhileStmt(Node):
    cond        : Opt[Cond]         = None
    do_stmts    : tuple[Stmt, ...]  = ()
    while_pos   : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    done_pos    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.while_pos

@dc.dataclass(frozen = True)
class UntilStmt(Node):
    cond        : Opt[Cond]         = None
    do_stmts    : tuple[Stmt, ...]  = ()
    until_pos   : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    done_pos    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.until_pos

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class WordIter(Node):
    name        : Lit               = Lit()
    items       : tuple[Word, ...]  = ()

    def pos(self):
        return self.name.pos()

@dc.dataclass(frozen = True)
class ForStmt(Node):
    cond        : Opt[Union[WordIter, CStyleLoop]] = None
    do_stmts    : tuple[Stmt, ...]  = ()
    for_pos     : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    done_pos    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.for_pos

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class PatternList(Node):
    patterns    : tuple[Word, ...]  = ()
    stmts       : tuple[Stmt, ...]  = ()

    def pos(self):
        return word_first_pos(self.patterns)

@dc.dataclass(frozen = True)
class CaseStmt(Node):
    word        : Word                      = Word()
    items       : tuple[PatternList, ...]   = ()
    case_pos    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)
    esac_pos    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.case_pos

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class FuncDecl(Node):
    name        : Lit   = Lit()
    body        : Stmt  = Stmt()
    bash_style  : bool  = False     # "function name()" form
    position    : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.position

@dc.dataclass(frozen = True)
class DeclStmt(Node):
    assigns     : tuple[Assign, ...]    = ()
    opts        : tuple[Word, ...]      = ()
    local       : bool                  = False     # local instead of declare
    declare_pos : Pos   = dc.field(kw_only = True, default = DEFAULT_POS)

    def pos(self):
        return self.declare_pos

# --------------------------------------------------------------------
CommandNode = Union[
    Command, Subshell, Block, IfStmt, WhileStmt, UntilStmt, ForStmt,
    CaseStmt, FuncDecl, DeclStmt,
]
