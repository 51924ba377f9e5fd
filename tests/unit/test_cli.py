import pytest

from c4_gen.cli import main

MODEL = """\
diagram:
  title: CLI
elements:
  - {kind: person, id: p, name: P}
  - {kind: system, id: s, name: S}
relations:
  - {from: p, to: s, description: uses, direction: Right}
"""


def test_renders_model_to_stdout(tmp_path, capsys):
    path = tmp_path / "model.yaml"
    path.write_text(MODEL, encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert out.startswith("@startuml CLI\n")
    assert 'Rel_Right(p, s, "uses", "")\n' in out


def test_writes_markdown_output(tmp_path):
    path = tmp_path / "model.yaml"
    path.write_text(MODEL, encoding="utf-8")
    out = tmp_path / "out" / "cli.md"
    main([str(path), "--out", str(out), "--title", "Renamed"])
    text = out.read_text(encoding="utf-8")
    assert text.startswith("# Renamed\n\n```plantuml\n@startuml Renamed\n")
    assert text.endswith("@enduml\n```\n")


def test_sample_with_sketch(capsys):
    main(["--sample", "gallery", "--sketch"])
    out = capsys.readouterr().out
    assert out.startswith("@startuml Sketch\n")
    assert "LAYOUT_AS_SKETCH()" in out


def test_all_samples(tmp_path):
    main(["--all-samples", "--out-dir", str(tmp_path)])
    assert (tmp_path / "deployment.puml").read_text(encoding="utf-8").startswith("@startuml Deployment Diagram\n")
    assert len(list(tmp_path.glob("*.puml"))) == 8


def test_list_samples(capsys):
    main(["--list-samples"])
    assert "dynamic\t" in capsys.readouterr().out


def test_validation_errors_exit_2(tmp_path, capsys):
    path = tmp_path / "dup.yaml"
    path.write_text(
        "elements:\n  - {kind: system, id: s}\n  - {kind: person, id: s}\n",
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert captured.out == ""


def test_strict_fails_on_warnings(tmp_path, capsys):
    path = tmp_path / "self.yaml"
    path.write_text(
        "elements:\n  - {kind: system, id: s}\nrelations:\n  - {from: s, to: s}\n",
        encoding="utf-8",
    )
    main([str(path)])
    assert "warning:" in capsys.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        main([str(path), "--strict"])
    assert excinfo.value.code == 2


def test_requires_model_or_sample(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
