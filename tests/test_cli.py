from pathlib import Path

import ezdxf

from transformers2d.cli import main


def test_render(capsys) -> None:
    assert main(["render", "translate(10,10)"]) == 0
    assert capsys.readouterr().out == "matrix(1,0,0,1,10,10)\n"


def test_render_inverse(capsys) -> None:
    assert main(["render", "translate(10,10)", "--inverse"]) == 0
    assert capsys.readouterr().out == "matrix(1,0,0,1,-10,-10)\n"


def test_point(capsys) -> None:
    assert main(["point", "translate(10, 15)", "8", "5"]) == 0
    assert capsys.readouterr().out == "18 20\n"


def test_explain(capsys) -> None:
    assert main(["explain", "translate(10,15) foo(1) scale(2)"]) == 0
    assert capsys.readouterr().out == "translate(10,15)\nscale(2)\n"


def test_strict_failures(capsys) -> None:
    assert main(["--strict", "render", "foo(1)"]) == 1
    assert "Command failed" in capsys.readouterr().err

    assert main(["--strict", "render", "scale(0)", "--inverse"]) == 1
    assert "not invertible" in capsys.readouterr().err


def test_dxf_command(tmp_path: Path, capsys) -> None:
    src = tmp_path / "in.dxf"
    dst = tmp_path / "out.dxf"
    doc = ezdxf.new("R2018")
    doc.modelspace().add_line((0.0, 0.0), (1.0, 0.0))
    doc.saveas(str(src))

    assert main(["dxf", "scale(2)", str(src), str(dst)]) == 0
    assert "Transformed 1 entities" in capsys.readouterr().out
    line = ezdxf.readfile(str(dst)).modelspace().query("LINE")[0]
    assert abs(line.dxf.end.x - 2.0) < 1e-9


def test_explain_strict_prints_nothing_on_unknown_name(capsys) -> None:
    assert main(["--strict", "explain", "translate(1) foo(2)"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unsupported transform" in captured.err
