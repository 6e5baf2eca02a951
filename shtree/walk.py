# --------------------------------------------------------------------
from .word       import *
from .expression import *
from .statement  import *

# ====================================================================
# Tree traversal
#
# children() lists direct children in rendering order
# walk() and depth() use an explicit stack, so deeply nested trees
# never hit the interpreter's recursion limit

def present(*nodes):
    return tuple(node for node in nodes if node is not None)

def children(node) -> tuple:
    match node:
        case Word(parts):
            return tuple(parts)
        case Lit() | SglQuoted():
            return ()
        case Quoted(_, parts):
            return tuple(parts)
        case ParamExp(param, _, _, ind, repl, exp):
            return present(param, ind, repl, exp)
        case Index(word):
            return (word,)
        case Replace(orig, with_):
            return (orig, with_)
        case Expansion(_, word):
            return (word,)
        case CmdSubst(stmts) | CmdInput(stmts):
            return tuple(stmts)
        case ArithmExpr(x):
            return present(x)
        case ArrayExpr(items):
            return tuple(items)

        case UnaryExpr(_, x) | ParenExpr(x):
            return present(x)
        case BinaryExpr(_, x, y):
            return present(x, y)
        case CStyleLoop(init, cond, post):
            return present(init, cond, post)

        case File(stmts):
            return tuple(stmts)
        case Stmt(cmd, _, assigns, redirs):
            return (*assigns, *present(cmd), *redirs)
        case Assign(value, name):
            return (*present(name), value)
        case Redirect(_, word, n):
            return (*present(n), word)
        case Command(args):
            return tuple(args)
        case Subshell(stmts) | Block(stmts) | StmtCond(stmts):
            return tuple(stmts)
        case CStyleCond(cond):
            return present(cond)
        case IfStmt(cond, then_stmts, elifs, else_stmts):
            return (*present(cond), *then_stmts, *elifs, *else_stmts)
        case Elif(cond, then_stmts):
            return (*present(cond), *then_stmts)
        case WhileStmt(cond, do_stmts) | UntilStmt(cond, do_stmts) | ForStmt(cond, do_stmts):
            return (*present(cond), *do_stmts)
        case WordIter(name, items):
            return (name, *items)
        case CaseStmt(word, items):
            return (word, *items)
        case PatternList(patterns, stmts):
            return (*patterns, *stmts)
        case FuncDecl(name, body):
            return (name, body)
        case DeclStmt(assigns, opts):
            return (*opts, *assigns)

    raise TypeError(f'not a syntax tree node: {node!r}')

# --------------------------------------------------------------------
def walk(node):
    """
    yield node and all its descendants, depth-first, parents first
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))

def depth(node) -> int:
    deepest = 0
    stack   = [(node, 1)]
    while stack:
        current, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in children(current))
    return deepest
