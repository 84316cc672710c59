import json
import subprocess
from pathlib import Path

from rustlings.project import Crate, RustAnalyzerProject


def test_rs_path_adds_crate():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/intro/intro1.rs")
    assert project.crates == [Crate(root_module="exercises/intro/intro1.rs")]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


def test_non_rs_path_is_ignored():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/README.md")
    project.path_to_json("exercises/intro")
    assert project.crates == []


def test_extension_is_everything_after_first_dot():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/a.b.rs")
    assert project.crates == []


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/sysroot")
    project.path_to_json("exercises/x.rs")
    data = json.loads(project.to_json())
    assert list(data) == ["sysroot_src", "crates"]
    assert data["sysroot_src"] == "/sysroot"
    assert data["crates"] == [
        {"root_module": "exercises/x.rs", "edition": "2021", "deps": [], "cfg": ["test"]}
    ]


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(sysroot_src="src")
    project.path_to_json("exercises/y.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()


def test_exercises_to_json_finds_rs_files(tmp_path):
    root = tmp_path / "exercises"
    (root / "intro").mkdir(parents=True)
    (root / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (root / "intro" / "README.md").write_text("notes\n")
    (root / "quiz1.rs").write_text("fn main() {}\n")

    project = RustAnalyzerProject()
    project.exercises_to_json(Path("exercises") if False else root.relative_to(tmp_path))  # noqa: SIM108
    assert project.crates == []  # relative to cwd, which is not tmp_path

    project.exercises_to_json(root)
    modules = sorted(Path(crate.root_module).name for crate in project.crates)
    assert modules == ["intro1.rs", "quiz1.rs"]


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)

    def fake_run(args, **kwargs):
        assert args == ["rustc", "--print", "sysroot"]
        return subprocess.CompletedProcess(args, 0, stdout=b"/opt/toolchain\n", stderr=b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    expected = Path("/opt/toolchain") / "lib" / "rustlib" / "src" / "rust" / "library"
    assert project.sysroot_src == str(expected)
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out