"""Sanity tests ensuring the package modules import correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "pokerduel",
        "pokerduel.cards",
        "pokerduel.state",
        "pokerduel.rules",
        "pokerduel.actions",
        "pokerduel.agents",
        "pokerduel.engine",
        "pokerduel.scoreboard",
        "pokerduel.cli.main",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)
