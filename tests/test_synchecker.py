import io

import pytest

from shtree.ast        import Pos
from shtree.tokens     import Token
from shtree.word       import *
from shtree.expression import *
from shtree.statement  import *
from shtree.reporter   import Reporter
from shtree.synchecker import SynChecker, check

def cmd(*args):
    return Stmt(Command(lits(*args)))

@pytest.fixture
def reporter():
    return Reporter(stream = io.StringIO())

def test_well_formed_tree_passes(reporter):
    tree = File((
        Stmt(
            Command((lit("echo"), Word((ParamExp(Lit("x"), exp = Expansion(Token.CSUB, lit("d"))),)))),
            negated = True,
            assigns = (Assign(lit("1"), name = Lit("a")),),
            redirs  = (Redirect(Token.GTR, lit("&1"), n = Lit("2")),),
        ),
        Stmt(CaseStmt(lit("x"), (PatternList(lits("a"), (cmd("b"),)),))),
        Stmt(ForStmt(WordIter(Lit("i"), lits("1", "2")), (cmd("a"),))),
        Stmt(FuncDecl(Lit("f"), Stmt(Block((cmd("a"),))))),
        cmd("x"),
    ))
    assert check(tree, reporter)
    assert reporter.errors == []

INVALID = [
    pytest.param(Stmt(negated = True), "negated statement without a command", id="negated-empty"),
    pytest.param(
        Stmt(CaseStmt(lit("x"), (PatternList((), (cmd("a"),)),))),
        "case pattern list without patterns", id="case-no-patterns",
    ),
    pytest.param(Stmt(CaseStmt()), "case statement without a word", id="case-no-word"),
    pytest.param(ParamExp(), "without a parameter name", id="param-no-name"),
    pytest.param(
        ParamExp(Lit("x"), short = True, length = True),
        "short parameter expansion", id="param-short-length",
    ),
    pytest.param(
        ParamExp(Lit("x"), short = True, ind = Index(lit("0"))),
        "short parameter expansion", id="param-short-index",
    ),
    pytest.param(
        Quoted(Token.SQUOTE, (Lit("a"),)),
        "does not open a quoted string", id="quoted-bad-token",
    ),
    pytest.param(
        ParamExp(Lit("x"), exp = Expansion(Token.MUL, lit("a"))),
        "not a parameter expansion operator", id="expansion-bad-op",
    ),
    pytest.param(Redirect(Token.IF, lit("f")), "not a redirection operator", id="redirect-bad-op"),
    pytest.param(Redirect(Token.GTR), "without a target", id="redirect-no-target"),
    pytest.param(Assign(lit("1"), append = True), "appending assignment without a name", id="assign-append"),
    pytest.param(Assign(lit("1"), name = Lit("1a")), "invalid variable name", id="assign-bad-name"),
    pytest.param(Stmt(FuncDecl(body = cmd("a"))), "function declaration without a name", id="func-no-name"),
    pytest.param(Stmt(ForStmt(WordIter())), "for loop without a variable name", id="for-no-name"),
    pytest.param(UnaryExpr(Token.SUB), "without an operand", id="unary-no-operand"),
    pytest.param(
        UnaryExpr(Token.SUB, lit("x"), post = True),
        "cannot be a postfix operator", id="unary-bad-postfix",
    ),
    pytest.param(BinaryExpr(Token.ADD, lit("a")), "with a missing operand", id="binary-missing"),
]

@pytest.mark.parametrize("node, message", INVALID)
def test_invalid_trees_are_reported(reporter, node, message):
    assert not check(node, reporter)
    assert any(message in err for err in reporter.errors)

def test_errors_carry_positions(reporter):
    stmt = Stmt(negated = True, position = Pos(3, 1, 20))
    check(File((cmd("a"), stmt)), reporter)
    assert len(reporter.errors) == 1
    assert "at 3:1" in reporter.errors[0]
    assert "{Stmt}" in reporter.errors[0]

def test_every_violation_is_collected(reporter):
    tree = File((
        Stmt(negated = True),
        Stmt(CaseStmt(lit("x"), (PatternList(),))),
    ))
    checker = SynChecker(reporter)
    assert not checker.check(tree)
    assert len(checker.errors) == 2
    assert len(reporter.errors) == 2

def test_binary_error_points_at_operator(reporter):
    check(BinaryExpr(Token.ADD, lit("a"), op_pos = Pos(1, 3, 2)), reporter)
    assert "at 1:3" in reporter.errors[0]
