import pytest

from gaugefiles.core.discovery.classifier import (
    gauge_file_extensions,
    is_concept,
    is_gauge_file,
    is_spec,
    is_valid_concept_extension,
    is_valid_spec_extension,
    normalize_extensions,
)

SPEC_EXTENSIONS = (".spec", ".md")


@pytest.mark.parametrize("path", ["specs/login.spec", "specs/LOGIN.SPEC", "README.Md", "/abs/path/x.md"])
def test_spec_extension_is_case_insensitive(path):
    assert is_valid_spec_extension(path, SPEC_EXTENSIONS)
    assert is_spec(path, SPEC_EXTENSIONS)
    assert not is_valid_concept_extension(path)


@pytest.mark.parametrize("path", ["concepts/login.cpt", "concepts/Login.CPT", "a.Cpt"])
def test_concept_extension_is_case_insensitive(path):
    assert is_valid_concept_extension(path)
    assert is_concept(path)
    assert not is_valid_spec_extension(path, SPEC_EXTENSIONS)


@pytest.mark.parametrize("path", ["Makefile", "specs/.spec", "specs/notes.txt", "dir.spec/file"])
def test_paths_without_a_known_extension_are_neither(path):
    assert not is_gauge_file(path, SPEC_EXTENSIONS)


def test_is_gauge_file_accepts_both_kinds():
    assert is_gauge_file("a.spec", SPEC_EXTENSIONS)
    assert is_gauge_file("a.cpt", SPEC_EXTENSIONS)


def test_gauge_file_extensions_appends_concept_extension():
    configured = [".spec"]
    assert gauge_file_extensions(configured) == [".spec", ".cpt"]
    assert configured == [".spec"]


def test_normalize_extensions():
    assert normalize_extensions([" SPEC", ".md", "", "spec", ".Feature "]) == [".spec", ".md", ".feature"]
