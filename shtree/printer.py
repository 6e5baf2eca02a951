# --------------------------------------------------------------------
from .tokens     import Token
from .word       import *
from .expression import *
from .statement  import *

# ====================================================================
# Canonical printer
#
# pprint(node) -> str is total over well-formed trees: it never
# reports, never fails on empty sequences and never mutates the tree.
# the output reparses to a tree that prints the same text again

# --------------------------------------------------------------------
# join helpers

def node_join(nodes, sep: str) -> str:
    return sep.join(pprint(node) for node in nodes)

def word_join(words, sep: str = ' ') -> str:
    return node_join(words, sep)

def opt_join(*parts) -> str:
    """
    space-join the parts that are present, skipping None and ''
    """
    return ' '.join(part for part in parts if part)

def stmt_join(stmts, end: bool = True) -> str:
    """
    statements are separated by "; ", except that a statement with a
    heredoc redirect is followed by a line break instead; with end, a
    heredoc on the last statement gets its line break too
    """
    out     = []
    newline = False

    for i, stmt in enumerate(stmts):
        if newline:
            newline = False
            out.append('\n')
        elif i > 0:
            out.append('; ')
        out.append(pprint(stmt))
        newline = stmt.newline_after()

    if newline and end:
        out.append('\n')

    return ''.join(out)

def stmt_list(stmts) -> str:
    """
    body of a keyword or brace construct, e.g. the " a; b; " in
    "{ a; b; }"; an empty body still needs its "; "
    """
    if not stmts:
        return f'{Token.SEMICOLON} '

    s = stmt_join(stmts)
    if s.endswith('\n'):
        return ' ' + s
    return f' {s}{Token.SEMICOLON} '

def semicolon_if_none(cond) -> str:
    if cond is None:
        return f'{Token.SEMICOLON} '
    return pprint(cond)

def opt_print(node) -> str:
    if node is None:
        return ''
    return pprint(node)

# --------------------------------------------------------------------
# words

def pprint_param(p: ParamExp) -> str:
    if p.short:
        return f'{Token.DOLLAR}{pprint(p.param)}'

    out = ['${']
    if p.length:
        out.append(Token.HASH.value)
    out.append(pprint(p.param))
    if p.ind is not None:
        out.append(pprint(p.ind))
    if p.repl is not None:
        out.append(pprint(p.repl))
    if p.exp is not None:
        out.append(pprint(p.exp))
    out.append('}')
    return ''.join(out)

def closing_quote(quote: Token) -> Token:
    match quote:
        case Token.DOLLSQ:
            return Token.SQUOTE
        case Token.DOLLDQ:
            return Token.DQUOTE
        case _:
            return quote

# --------------------------------------------------------------------
# arithmetic

SIGNS  = ('+', '-')
SIGNED = frozenset({Token.ADD, Token.SUB, Token.INC, Token.DEC})

def pprint_unary(u: UnaryExpr) -> str:
    x = opt_print(u.x)
    # "- -a" must not turn into the decrement "--a"
    if u.post:
        sep = ' ' if x.endswith(SIGNS) else ''
        return f'{x}{sep}{u.op}'
    sep = ' ' if u.op in SIGNED and x.startswith(SIGNS) else ''
    return f'{u.op}{sep}{x}'

# --------------------------------------------------------------------
# statements

def pprint_stmt(s: Stmt) -> str:
    parts = []
    if s.negated:
        parts.append(Token.NOT.value)
    parts += [pprint(a) for a in s.assigns]
    if s.node is not None:
        parts.append(pprint(s.node))
    parts += [pprint(r) for r in s.redirs]
    if s.background:
        parts.append(Token.AND.value)
    return opt_join(*parts)

def pprint_redirect(r: Redirect) -> str:
    word = pprint(r.word)
    # keep "< <(cmd)"-like targets from gluing onto the operator
    sep  = ' ' if word.startswith('<') else ''
    return f'{opt_print(r.n)}{r.op}{sep}{word}'

def pprint_if(s: IfStmt) -> str:
    out = [
        Token.IF.value, semicolon_if_none(s.cond),
        Token.THEN.value, stmt_list(s.then_stmts),
    ]
    out += [pprint(elif_) for elif_ in s.elifs]
    if s.else_stmts:
        out += [Token.ELSE.value, stmt_list(s.else_stmts)]
    out.append(Token.FI.value)
    return ''.join(out)

def pprint_case(c: CaseStmt) -> str:
    items = ';;'.join(pprint(plist) for plist in c.items)
    return f'{Token.CASE} {pprint(c.word)} {Token.IN}{items}; {Token.ESAC}'

def pprint_decl(d: DeclStmt) -> str:
    keyword = Token.LOCAL if d.local else Token.DECLARE
    return opt_join(
        keyword.value,
        *(pprint(w) for w in d.opts),
        *(pprint(a) for a in d.assigns),
    )

# ====================================================================
# dispatch over the closed set of node variants

def pprint(node) -> str:
    match node:
        # words
        case Word(parts):
            return node_join(parts, '')
        case Lit(value):
            return value
        case SglQuoted(value):
            return f"{Token.SQUOTE}{value}{Token.SQUOTE}"
        case Quoted(quote, parts):
            return f'{quote}{node_join(parts, "")}{closing_quote(quote)}'
        case ParamExp():
            return pprint_param(node)
        case Index(word):
            return f'[{pprint(word)}]'
        case Replace(orig, with_, every):
            sep = '//' if every else '/'
            return f'{sep}{pprint(orig)}/{pprint(with_)}'
        case Expansion(op, word):
            return f'{op}{pprint(word)}'
        case CmdSubst(stmts, backquotes):
            if backquotes:
                return f'{Token.BQUOTE}{stmt_join(stmts)}{Token.BQUOTE}'
            return f'{Token.DOLLAR}{Token.LPAREN}{stmt_join(stmts)}{Token.RPAREN}'
        case ArithmExpr(None):
            return '$(())'
        case ArithmExpr(x):
            return f'$(({pprint(x)}))'
        case ArrayExpr(items):
            if not items:
                return f'{Token.LPAREN} {Token.RPAREN}'
            return f'{Token.LPAREN}{word_join(items)}{Token.RPAREN}'
        case CmdInput(stmts):
            return f'{Token.LSS}{Token.LPAREN}{stmt_join(stmts)}{Token.RPAREN}'

        # arithmetic
        case UnaryExpr():
            return pprint_unary(node)
        case BinaryExpr(Token.COMMA, x, y):
            return f'{opt_print(x)}{Token.COMMA} {opt_print(y)}'
        case BinaryExpr(op, x, y):
            return f'{opt_print(x)} {op} {opt_print(y)}'
        case ParenExpr(x):
            return f'({opt_print(x)})'
        case CStyleLoop(init, cond, post):
            return f'(({opt_print(init)}; {opt_print(cond)}; {opt_print(post)}))'

        # statements
        case File(stmts):
            return stmt_join(stmts, end = True)
        case Stmt():
            return pprint_stmt(node)
        case Assign(value, None):
            return pprint(value)
        case Assign(value, name, append):
            op = '+=' if append else '='
            return f'{pprint(name)}{op}{pprint(value)}'
        case Redirect():
            return pprint_redirect(node)
        case Command(args):
            return word_join(args)
        case Subshell(stmts):
            if not stmts:
                # a space in between to avoid confusion with ()
                return f'{Token.LPAREN} {Token.RPAREN}'
            return f'{Token.LPAREN}{stmt_join(stmts)}{Token.RPAREN}'
        case Block(stmts):
            return f'{Token.LBRACE}{stmt_list(stmts)}{Token.RBRACE}'
        case IfStmt():
            return pprint_if(node)
        case Elif(cond, then_stmts):
            return (f'{Token.ELIF}{semicolon_if_none(cond)}'
                    f'{Token.THEN}{stmt_list(then_stmts)}')
        case StmtCond(stmts):
            return stmt_list(stmts)
        case CStyleCond(cond):
            return f' (({opt_print(cond)})); '
        case WhileStmt(cond, do_stmts):
            return (f'{Token.WHILE}{semicolon_if_none(cond)}'
                    f'{Token.DO}{stmt_list(do_stmts)}{Token.DONE}')
        case UntilStmt(cond, do_stmts):
            return (f'{Token.UNTIL}{semicolon_if_none(cond)}'
                    f'{Token.DO}{stmt_list(do_stmts)}{Token.DONE}')
        case ForStmt(cond, do_stmts):
            return (f'{Token.FOR} {opt_print(cond)}; '
                    f'{Token.DO}{stmt_list(do_stmts)}{Token.DONE}')
        case WordIter(name, ()):
            return pprint(name)
        case WordIter(name, items):
            return f'{pprint(name)} {Token.IN} {word_join(items)}'
        case CaseStmt():
            return pprint_case(node)
        case PatternList(patterns, stmts):
            return f' {word_join(patterns, " | ")}) {stmt_join(stmts)}'
        case FuncDecl(name, body, True):
            return f'{Token.FUNCTION} {pprint(name)}() {pprint(body)}'
        case FuncDecl(name, body):
            return f'{pprint(name)}() {pprint(body)}'
        case DeclStmt():
            return pprint_decl(node)

    raise TypeError(f'not a syntax tree node: {node!r}')
