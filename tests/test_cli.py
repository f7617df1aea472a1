from schemelet.__main__ import main


def test_runs_files_in_one_interpreter(tmp_path, capsys):
    defs = tmp_path / "defs.scm"
    defs.write_text("(define square (lambda (x) (* x x)))\n", encoding="utf-8")
    prog = tmp_path / "prog.scm"
    prog.write_text('(display "hi")\n(square 12)\n', encoding="utf-8")

    assert main([str(defs), str(prog)]) == 0
    assert capsys.readouterr().out == "hi\n144\n"


def test_quiet_suppresses_results(tmp_path, capsys):
    prog = tmp_path / "prog.scm"
    prog.write_text("(+ 1 2)", encoding="utf-8")
    assert main(["-q", str(prog)]) == 0
    assert capsys.readouterr().out == ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.scm")]) == 1
    assert "nope.scm" in capsys.readouterr().err
