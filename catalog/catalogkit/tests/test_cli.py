import json
import pytest
from catalog.catalogkit.cli.main import main
from catalog.catalogkit.tests._catalog_fixtures import add_artifact, make_layout, seed_roadmap, write_descriptor

@pytest.fixture
def project(tmp_path):
    config = make_layout(tmp_path)
    write_descriptor(config, "foo", "component", "camel-foo")
    write_descriptor(config, "bar", "component", "camel-bar", deprecated="true")
    write_descriptor(config, "csv", "dataformat", "camel-csv")
    add_artifact(config, "camel-foo")
    seed_roadmap(config, "component", "[planned]\nbar\n")
    return config

def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "catalogkit" in capsys.readouterr().out

def test_build_writes_outputs(project, capsys):
    ret = main(["build", "--basedir", str(project.basedir)])

    assert ret == 0
    out = capsys.readouterr().out
    assert "component" in out
    assert (project.properties_dir / "components.properties").read_text(encoding="utf-8") == "foo\n"

def test_verify_detects_stale_then_passes_after_build(project, capsys):
    assert main(["verify", "--basedir", str(project.basedir)]) == 1
    assert "stale" in capsys.readouterr().out

    assert main(["build", "--basedir", str(project.basedir)]) == 0
    capsys.readouterr()

    assert main(["verify", "--basedir", str(project.basedir)]) == 0
    assert "up-to-date" in capsys.readouterr().out

def test_verify_does_not_copy_descriptors(project):
    main(["verify", "--basedir", str(project.basedir)])
    assert not project.namespace_dir.exists()

def test_basedir_from_environment(project, monkeypatch):
    monkeypatch.setenv("CATALOG_BASEDIR", str(project.basedir))
    assert main(["build"]) == 0
    assert (project.properties_dir / "components.properties").exists()

def test_build_fails_without_seed_roadmap(project, capsys):
    (project.resdir / "other.roadmap").unlink()

    assert main(["build", "--basedir", str(project.basedir)]) == 1
    assert "Error:" in capsys.readouterr().err

def test_build_fails_without_artifact_id(project, capsys):
    write_descriptor(project, "broken", "language", artifact_id=None)

    assert main(["build", "--basedir", str(project.basedir)]) == 1
    err = capsys.readouterr().err
    assert "artifactId" in err

def test_show_json(project, capsys):
    ret = main(["show", "--basedir", str(project.basedir), "--emit", "json"])

    assert ret == 0
    listing = json.loads(capsys.readouterr().out)
    assert listing["component"]["supported"] == ["foo"]
    assert listing["component"]["planned"] == ["bar"]
    assert listing["dataformat"]["undecided"] == ["csv"]
    assert list(listing) == ["component", "dataformat", "language", "other"]

def test_show_filtered_text(project, capsys):
    ret = main(["show", "--basedir", str(project.basedir), "--kind", "component", "--state", "planned"])

    assert ret == 0
    out = capsys.readouterr().out
    assert "component (2 items)" in out
    assert "bar (deprecated)" in out
    assert "dataformat" not in out
    assert "[supported]" not in out

def test_build_prints_overall_summary(project, capsys):
    assert main(["build", "--basedir", str(project.basedir)]) == 0

    lines = capsys.readouterr().out.splitlines()
    summary = [line for line in lines if line.strip().startswith("all ")]
    assert len(summary) == 1
    assert "1 supported /" in summary[0]
    assert summary[0].endswith("3 total")

def test_verify_fails_when_copied_descriptor_deleted(project, capsys):
    assert main(["build", "--basedir", str(project.basedir)]) == 0
    copied = project.namespace_dir / "camel" / "catalog" / "components" / "foo.json"
    copied.unlink()
    capsys.readouterr()

    assert main(["verify", "--basedir", str(project.basedir)]) == 1
    out = capsys.readouterr().out
    assert str(copied) in out
    assert not copied.exists()
