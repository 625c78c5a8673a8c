from pathlib import Path

from gaugefiles.core.discovery.walker import find_files


def _tree(base: Path):
    for rel_path in ("b/two.spec", "a/one.spec", "a/skip/three.spec", "root.spec", "root.txt", "a/ignored.spec"):
        target = base / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("#")


def is_spec(path: Path) -> bool:
    return path.suffix == ".spec"


def test_find_files_walks_in_sorted_order(tmp_path: Path):
    _tree(tmp_path)
    found = find_files(tmp_path, is_spec)
    assert [p.relative_to(tmp_path).as_posix() for p in found] == [
        "root.spec", "a/ignored.spec", "a/one.spec", "a/skip/three.spec", "b/two.spec",
    ]
    assert found == find_files(tmp_path, is_spec)


def test_find_files_prunes_directories_and_skips_files(tmp_path: Path):
    _tree(tmp_path)
    seen_dirs = []

    def should_skip(path: Path, is_dir: bool) -> bool:
        if is_dir:
            seen_dirs.append(path.name)
            return path.name == "skip"
        return path.name == "ignored.spec"

    found = find_files(tmp_path, is_spec, should_skip)
    assert [p.relative_to(tmp_path).as_posix() for p in found] == ["root.spec", "a/one.spec", "b/two.spec"]
    assert "skip" in seen_dirs


def test_find_files_accepts_a_file_root(tmp_path: Path):
    _tree(tmp_path)
    assert find_files(tmp_path / "root.spec", is_spec) == [tmp_path / "root.spec"]
    assert find_files(tmp_path / "root.txt", is_spec) == []


def test_find_files_resolves_relative_root(tmp_path: Path, monkeypatch):
    _tree(tmp_path)
    monkeypatch.chdir(tmp_path)
    found = find_files("b", is_spec)
    assert found == [tmp_path / "b" / "two.spec"]


def test_find_files_skipped_root_yields_nothing(tmp_path: Path):
    _tree(tmp_path)
    found = find_files(tmp_path / "a", is_spec, lambda path, is_dir: is_dir and path.name == "a")
    assert found == []
