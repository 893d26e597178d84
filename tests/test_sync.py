"""Tests for locale synchronization.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest
from hypothesis import given

from i18nlexengine.localization import SyncResult, iter_leaves, join_key, sync_tree
from tests.strategies import locale_trees

_DEFAULT: dict[str, Any] = {
    "App": {
        "text": {"hi": "Hi", "bye": "Bye"},
        "button": {"save": "Save"},
    }
}


class TestSyncTree:
    """Test sync_tree."""

    def test_adds_missing_keys(self) -> None:
        """Missing paths are filled with the default text."""
        result = sync_tree(_DEFAULT, {"App": {"text": {"hi": "Salut"}}})

        assert result.added == ("App.text.bye", "App.button.save")
        assert result.tree == {
            "App": {"button": {"save": "Save"}, "text": {"bye": "Bye", "hi": "Salut"}}
        }
        assert result.changed

    def test_existing_translations_kept(self) -> None:
        """Values already present in the target are never overwritten."""
        result = sync_tree(_DEFAULT, {"App": {"text": {"hi": "Salut", "bye": "Au revoir"}}})

        assert result.tree["App"]["text"] == {"bye": "Au revoir", "hi": "Salut"}

    def test_in_sync(self) -> None:
        """A complete target reports no change."""
        result = sync_tree(_DEFAULT, _DEFAULT)

        assert result == SyncResult(result.tree)
        assert not result.changed

    def test_target_not_mutated(self) -> None:
        """The target tree is copied."""
        target: dict[str, Any] = {"App": {"text": {"hi": "Salut"}}}
        sync_tree(_DEFAULT, target)

        assert target == {"App": {"text": {"hi": "Salut"}}}

    def test_keys_filter(self) -> None:
        """Only the requested keys are added."""
        result = sync_tree(_DEFAULT, {}, keys=["App.button.save", "App.unknown.key"])

        assert result.added == ("App.button.save",)
        assert result.tree == {"App": {"button": {"save": "Save"}}}

    def test_fill_callback(self) -> None:
        """The fill callback supplies added values."""
        result = sync_tree(_DEFAULT, {}, fill=lambda key, value: f"[{key}] {value}")

        assert result.tree["App"]["button"]["save"] == "[App.button.save] Save"

    def test_prune(self) -> None:
        """Prune removes keys the default tree lacks."""
        target = {"App": {"text": {"hi": "Salut", "old": "Vieux"}}, "Gone": {"text": {"x": "X"}}}
        result = sync_tree(_DEFAULT, target, prune=True)

        assert result.removed == ("App.text.old", "Gone.text.x")
        assert "Gone" not in result.tree
        assert "old" not in result.tree["App"]["text"]

    def test_no_prune_by_default(self) -> None:
        """Extra target keys survive without prune."""
        result = sync_tree(_DEFAULT, {"Extra": {"text": {"x": "X"}}})

        assert result.removed == ()
        assert result.tree["Extra"] == {"text": {"x": "X"}}

    def test_logs_changes(self, caplog: pytest.LogCaptureFixture) -> None:
        """Changes are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="i18nlexengine.localization.sync"):
            sync_tree(_DEFAULT, {})

        assert "Sync added 3 keys, removed 0 keys" in caplog.text

    @given(default=locale_trees(), target=locale_trees())
    def test_target_covers_default(self, default: dict[str, Any], target: dict[str, Any]) -> None:
        """After a pruning sync the key sets are equal."""
        result = sync_tree(default, target, prune=True)

        default_keys = {join_key(p) for p, _ in iter_leaves(default)}
        synced_keys = {join_key(p) for p, _ in iter_leaves(result.tree)}
        assert synced_keys == default_keys
