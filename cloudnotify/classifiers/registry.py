"""Ordered classifier chain, built once at startup."""

import importlib
import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import yaml

from cloudnotify.classifiers.generic import GenericClassifier
from cloudnotify.config import get_settings, project_root
from cloudnotify.domain.models import ClassifierDescriptor
from cloudnotify.errors import ClassifierChainError

logger = logging.getLogger(__name__)

CATCH_ALL_NAME = "generic"


def import_target(target: str) -> Callable[[], Any]:
    """Resolve ``package.module:attr`` into a classifier factory."""

    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ClassifierChainError(f"invalid classifier target {target!r}, expected 'module:attr'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ClassifierChainError(f"cannot import classifier module {module_name!r}: {exc}") from exc
    factory = getattr(module, attr, None)
    if not callable(factory):
        raise ClassifierChainError(f"classifier target {target!r} is not callable")
    return factory


def build_chain(entries: Iterable[tuple[str, Callable[[], Any]]]) -> tuple[ClassifierDescriptor, ...]:
    """Freeze ``(name, factory)`` pairs, appending the catch-all when missing."""

    descriptors: list[ClassifierDescriptor] = []
    seen: set[str] = set()
    for name, factory in entries:
        name = name.strip()
        if not name:
            raise ClassifierChainError("classifier name must not be empty")
        if name in seen:
            raise ClassifierChainError(f"duplicate classifier name {name!r}")
        seen.add(name)
        descriptors.append(ClassifierDescriptor(name=name, factory=factory))

    if CATCH_ALL_NAME in seen and descriptors[-1].name != CATCH_ALL_NAME:
        raise ClassifierChainError(f"{CATCH_ALL_NAME!r} must be the last classifier in the chain")
    if not descriptors or descriptors[-1].name != CATCH_ALL_NAME:
        descriptors.append(ClassifierDescriptor(name=CATCH_ALL_NAME, factory=GenericClassifier))
    return tuple(descriptors)


def _resolve_path(path: str | Path) -> Path:
    candidate = Path(path)
    if not candidate.is_absolute() and not candidate.exists():
        candidate = project_root() / candidate
    return candidate


def load_classifier_chain(path: str | Path | None = None) -> tuple[ClassifierDescriptor, ...]:
    """Build the chain from a YAML file, or the default chain when none is configured."""

    if path is None:
        path = get_settings().classifier_chain_path
    if not path:
        return build_chain([])

    resolved = _resolve_path(path)
    try:
        text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        raise ClassifierChainError(f"cannot read classifier chain {resolved}: {exc}") from exc
    data = yaml.safe_load(os.path.expandvars(text)) or {}

    raw_entries = data.get("classifiers", []) if isinstance(data, dict) else None
    if not isinstance(raw_entries, list):
        raise ClassifierChainError(f"{resolved}: 'classifiers' must be a list")

    entries: list[tuple[str, Callable[[], Any]]] = []
    for item in raw_entries:
        if not isinstance(item, dict) or "name" not in item:
            raise ClassifierChainError(f"{resolved}: invalid classifier entry {item!r}")
        name = str(item["name"])
        if name == CATCH_ALL_NAME and "target" not in item:
            entries.append((name, GenericClassifier))
            continue
        if "target" not in item:
            raise ClassifierChainError(f"{resolved}: classifier {name!r} has no target")
        entries.append((name, import_target(str(item["target"]))))

    chain = build_chain(entries)
    logger.info("Loaded classifier chain from %s: %s", resolved, ", ".join(d.name for d in chain))
    return chain
