import json

import pytest

import shpp

from shtree.tokens     import Token
from shtree.word       import *
from shtree.statement  import *
from shtree.codec      import tojson

def cmd(*args):
    return Stmt(Command(lits(*args)))

def write_tree(path, tree):
    path.write_text(json.dumps(tojson(tree)))
    return str(path)

def test_prints_tree(tmp_path, capsys):
    tree = File((cmd("echo", "hi"), Stmt(Block((cmd("a"),)))))
    shpp.main([write_tree(tmp_path / "t.json", tree)])
    assert capsys.readouterr().out == "echo hi; { a; }\n"

def test_heredoc_output_is_not_doubled(tmp_path, capsys):
    tree = File((Stmt(Command(lits("cat")), redirs = (Redirect(Token.SHL, lit("EOF")),)),))
    shpp.main([write_tree(tmp_path / "t.json", tree)])
    assert capsys.readouterr().out == "cat <<EOF\n"

def test_arith_mode(capsys):
    shpp.main(["--arith", "a+b*(c-1)"])
    assert capsys.readouterr().out == "a + b * (c - 1)\n"

def test_arith_mode_error(capsys):
    with pytest.raises(SystemExit) as exit:
        shpp.main(["--arith", "a +"])
    assert exit.value.code == 1
    assert "syntax error" in capsys.readouterr().err

def test_writes_output_file(tmp_path):
    out = tmp_path / "out.sh"
    out.write_text("old")
    shpp.main([write_tree(tmp_path / "t.json", File((cmd("a"),))), "-o", str(out), "-y"])
    assert out.read_text() == "a\n"

def test_keeps_output_file_when_refused(tmp_path, monkeypatch):
    out = tmp_path / "out.sh"
    out.write_text("old")
    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    shpp.main([write_tree(tmp_path / "t.json", File((cmd("a"),))), "-o", str(out)])
    assert out.read_text() == "old"

def test_invalid_tree_is_refused(tmp_path, capsys):
    path = write_tree(tmp_path / "t.json", File((Stmt(negated = True),)))
    with pytest.raises(SystemExit) as exit:
        shpp.main([path])
    assert exit.value.code == 1
    captured = capsys.readouterr()
    assert "negated statement without a command" in captured.err
    assert captured.out == ""

def test_no_check_prints_anyway(tmp_path, capsys):
    path = write_tree(tmp_path / "t.json", File((Stmt(negated = True),)))
    shpp.main([path, "--no-check"])
    assert capsys.readouterr().out == "!\n"

def test_depth_guard(tmp_path, capsys):
    path = write_tree(tmp_path / "t.json", File((cmd("a"),)))
    with pytest.raises(SystemExit):
        shpp.main([path, "--max-depth", "3"])
    assert "nested deeper than 3" in capsys.readouterr().err

def test_bad_json(tmp_path, capsys):
    path = tmp_path / "t.json"
    path.write_text("{not json")
    with pytest.raises(SystemExit) as exit:
        shpp.main([str(path)])
    assert exit.value.code == 1
    assert "cannot read JSON file" in capsys.readouterr().err

def test_requires_json_extension(tmp_path):
    with pytest.raises(SystemExit) as exit:
        shpp.main([str(tmp_path / "t.txt")])
    assert exit.value.code == 2

def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "t.json"
    path.write_bytes(b'{"type": "Lit", "value": "\xff"}')
    with pytest.raises(SystemExit) as exit:
        shpp.main([str(path)])
    assert exit.value.code == 1
    assert "cannot read JSON file" in capsys.readouterr().err

@pytest.mark.parametrize("data", [
    pytest.param("x", id="string"),
    pytest.param([1], id="list"),
    pytest.param({"type": "Lit", "value": 5}, id="int-value"),
    pytest.param({"type": "Word", "parts": "ab"}, id="string-parts"),
    pytest.param({"type": ["Lit"]}, id="list-type"),
])
def test_malformed_tree_is_reported(tmp_path, capsys, data):
    path = tmp_path / "t.json"
    path.write_text(json.dumps(data))
    with pytest.raises(SystemExit) as exit:
        shpp.main([str(path)])
    assert exit.value.code == 1
    captured = capsys.readouterr()
    assert "[ Fatal Error ]" in captured.err
    assert captured.out == ""

def test_closed_input_keeps_output_file(tmp_path, monkeypatch):
    out = tmp_path / "out.sh"
    out.write_text("old")
    def closed(prompt):
        raise EOFError
    monkeypatch.setattr("builtins.input", closed)
    shpp.main([write_tree(tmp_path / "t.json", File((cmd("a"),))), "-o", str(out)])
    assert out.read_text() == "old"

def test_verbose_reports_every_section(capsys):
    shpp.main(["--arith", "a", "-v"])
    err = capsys.readouterr().err
    for section in ("parsing", "loading", "checking", "printing", "writing", "end"):
        assert f"[ Info ] {{{section}}} \t| start" in err
