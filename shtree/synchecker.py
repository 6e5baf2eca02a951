#--------------------------------------------------------------------
import re

from .tokens     import REDIRECTS, QUOTES, EXPANSIONS, POSTFIX
from .word       import *
from .expression import *
from .statement  import *
from .reporter   import Reporter, Error, Errors
from .walk       import walk

# ====================================================================
# Structural checker
#
# the printer trusts its input; whoever builds a tree runs this first.
# every violation becomes an Error carrying the node's position

NAME_RE = re.compile(r'[a-zA-Z_][a-zA-Z0-9_]*')

class SynChecker:
    def __init__(self, reporter: Reporter):
        self.reporter = reporter
        self.errors   = Errors()

    def report(self, msg, node, position = None):
        self.errors.add(Error(
            msg,
            this     = type(node).__name__,
            position = node.pos() if position is None else position,
        ))

    def for_param(self, p: ParamExp):
        if not p.param.value:
            self.report("parameter expansion without a parameter name", p)

        if p.short and (p.length or p.ind or p.repl or p.exp):
            self.report(
                f"short parameter expansion ${p.param.value} "
                "cannot carry a length, index, replace or operator",
                p,
            )

    def for_assign(self, a: Assign):
        if a.name is None:
            if a.append:
                self.report("appending assignment without a name", a)
            return

        if not NAME_RE.fullmatch(a.name.value):
            self.report(f"invalid variable name `{a.name.value}'", a)

    def for_redirect(self, r: Redirect):
        if r.op not in REDIRECTS:
            self.report(f"`{r.op}' is not a redirection operator", r)

        if not r.word.parts:
            self.report(f"redirection `{r.op}' without a target", r)

    def for_node(self, node):
        match node:
            case Stmt(None, True):
                self.report("negated statement without a command", node)

            case ParamExp():
                self.for_param(node)

            case Quoted(quote) if quote not in QUOTES:
                self.report(f"`{quote}' does not open a quoted string", node)

            case Expansion(op) if op not in EXPANSIONS:
                self.report(f"`{op}' is not a parameter expansion operator", node)

            case Assign():
                self.for_assign(node)

            case Redirect():
                self.for_redirect(node)

            case CaseStmt(word) if not word.parts:
                self.report("case statement without a word", node)

            case PatternList(()):
                self.report("case pattern list without patterns", node)

            case FuncDecl(name) if not name.value:
                self.report("function declaration without a name", node)

            case WordIter(name) if not name.value:
                self.report("for loop without a variable name", node)

            case UnaryExpr(op, None):
                self.report(f"unary `{op}' without an operand", node)

            case UnaryExpr(op, _, True) if op not in POSTFIX:
                self.report(f"`{op}' cannot be a postfix operator", node)

            case BinaryExpr(op, x, y) if x is None or y is None:
                self.report(f"binary `{op}' with a missing operand", node,
                            position = node.op_pos)

    def check(self, node) -> bool:
        for current in walk(node):
            self.for_node(current)

        if self.errors:
            self.reporter.log(self.errors)
            return False
        return True

# --------------------------------------------------------------------
def check(node, reporter: Reporter) -> bool:
    return SynChecker(reporter).check(node)
