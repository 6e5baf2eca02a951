import io

import pytest

from shtree.ast      import Pos, DEFAULT_POS
from shtree.reporter import Reporter, Error, Errors

def test_error_text():
    assert str(Error("boom")) == "boom"
    assert str(Error("boom", this = "Stmt", context = "$.a")) == "boom in {Stmt} in context {$.a}"
    assert str(Error("boom", position = Pos(2, 7, 9))) == "boom at 2:7"
    assert str(Error("boom", position = DEFAULT_POS)) == "boom"

def test_errors_collection():
    errors = Errors()
    assert not errors
    errors.add(Error("a")).add(Error("b"))
    assert len(errors) == 2
    assert [err.errstr for err in errors] == ["a", "b"]
    assert str(errors) == "a; b"

def test_log_tags_section():
    reporter = Reporter(stream = io.StringIO())
    reporter.section = "checking"
    reporter.log(Errors([Error("a"), Error("b")]))
    reporter.log("plain")
    assert reporter.errors == [
        "{checking} \t| a",
        "{checking} \t| b",
        "{checking} \t| plain",
    ]

def test_checkpoint_without_errors_moves_on():
    reporter = Reporter(stream = io.StringIO())
    reporter.checkpoint("loading")
    assert reporter.section == "loading"

def test_checkpoint_with_errors_crashes():
    stream   = io.StringIO()
    reporter = Reporter(stream = stream)
    reporter.checkpoint("loading")
    reporter.log(Error("bad tree"))

    with pytest.raises(SystemExit) as exit:
        reporter.checkpoint("printing")

    assert exit.value.code == 1
    out = stream.getvalue()
    assert "[ Error ] {loading} \t| bad tree" in out
    assert "[ Fatal Error ] | {printing} \t| error backlog at checkpoint" in out

def test_info_only_when_verbose():
    quiet = Reporter(stream = io.StringIO())
    quiet.info("hello")
    assert quiet.stream.getvalue() == ""

    loud = Reporter(verbose = True, stream = io.StringIO())
    loud.section = "x"
    loud.info("hello")
    assert "[ Info ] {x} \t| hello" in loud.stream.getvalue()

@pytest.mark.parametrize("answer, expected", [
    ("", True), ("y", True), ("Yes", True), ("n", False), ("no", False),
])
def test_confirm(monkeypatch, answer, expected):
    monkeypatch.setattr("builtins.input", lambda prompt: answer)
    assert Reporter(stream = io.StringIO()).confirm("sure? ") is expected

def test_confirm_on_closed_input(monkeypatch):
    def closed(prompt):
        raise EOFError
    monkeypatch.setattr("builtins.input", closed)
    assert Reporter(stream = io.StringIO()).confirm("sure? ") is False
