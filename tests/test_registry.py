from pathlib import Path

import pytest

from cloudnotify.classifiers.generic import GenericClassifier
from cloudnotify.classifiers.registry import build_chain, import_target, load_classifier_chain
from cloudnotify.errors import ClassifierChainError

CHAIN_YAML = """
classifiers:
  - name: declining
    target: helpers:DecliningClassifier
  - name: generic
"""


def test_default_chain_is_catch_all_only() -> None:
    chain = load_classifier_chain()
    assert [d.name for d in chain] == ["generic"]
    assert chain[0].factory is GenericClassifier


def test_build_chain_appends_catch_all() -> None:
    chain = build_chain([("rds", dict)])
    assert [d.name for d in chain] == ["rds", "generic"]


def test_build_chain_rejects_duplicates() -> None:
    with pytest.raises(ClassifierChainError):
        build_chain([("rds", dict), ("rds", dict)])


def test_build_chain_requires_catch_all_last() -> None:
    with pytest.raises(ClassifierChainError):
        build_chain([("generic", GenericClassifier), ("rds", dict)])


def test_import_target_resolves_callable() -> None:
    assert import_target("cloudnotify.classifiers.generic:GenericClassifier") is GenericClassifier


@pytest.mark.parametrize("target", ["no-colon", "missing.module:Thing", "cloudnotify.classifiers.generic:GENERIC_COLOR"])
def test_import_target_rejects_bad_targets(target: str) -> None:
    with pytest.raises(ClassifierChainError):
        import_target(target)


def test_load_chain_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "chain.yaml"
    path.write_text(CHAIN_YAML, encoding="utf-8")

    chain = load_classifier_chain(path)

    assert [d.name for d in chain] == ["declining", "generic"]


def test_load_chain_from_settings(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "chain.yaml"
    path.write_text("classifiers:\n  - name: other\n    target: cloudnotify.classifiers.generic:GenericClassifier\n", encoding="utf-8")
    monkeypatch.setenv("CLASSIFIER_CHAIN_PATH", str(path))

    chain = load_classifier_chain()

    assert [d.name for d in chain] == ["other", "generic"]


def test_load_chain_rejects_entry_without_target(tmp_path: Path) -> None:
    path = tmp_path / "chain.yaml"
    path.write_text("classifiers:\n  - name: rds\n", encoding="utf-8")

    with pytest.raises(ClassifierChainError):
        load_classifier_chain(path)


def test_load_chain_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ClassifierChainError):
        load_classifier_chain(tmp_path / "absent.yaml")
