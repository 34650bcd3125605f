"""
Tests for the label store, selection set and import parsing
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils_labels import LabelStore, NoValidLabelsError, SelectionSet, parse_label_text


class TestParseLabelText:
    """Tests for parse_label_text."""

    def test_commas_and_newlines(self):
        assert parse_label_text("mucha,monet\nhokusai") == ["mucha", "monet", "hokusai"]

    def test_consecutive_delimiters_collapse(self):
        assert parse_label_text("mucha,,,\n\n,monet") == ["mucha", "monet"]

    def test_pieces_are_trimmed(self):
        assert parse_label_text("  mucha ,\tmonet\r\n") == ["mucha", "monet"]

    def test_whitespace_only_pieces_dropped(self):
        assert parse_label_text(" , \n  ,") == []

    def test_empty_and_none(self):
        assert parse_label_text("") == []
        assert parse_label_text(None) == []

    def test_inner_spaces_kept(self):
        assert parse_label_text("van gogh, ask (askzy)") == ["van gogh", "ask (askzy)"]


class TestLabelStoreAdd:
    """Tests for LabelStore.add."""

    def test_add_sorts(self):
        store = LabelStore(["picasso"])
        assert store.add("monet") is True
        assert store.labels == ["monet", "picasso"]

    def test_add_trims(self):
        store = LabelStore()
        assert store.add("  mucha  ") is True
        assert store.labels == ["mucha"]

    def test_add_empty_is_noop(self):
        store = LabelStore(["mucha"])
        assert store.add("   ") is False
        assert store.add("") is False
        assert store.add(None) is False
        assert len(store) == 1

    def test_add_duplicate_is_noop(self):
        store = LabelStore()
        store.add("mucha")
        assert store.add("mucha") is False
        assert store.add(" mucha ") is False
        assert len(store) == 1

    def test_identity_is_case_sensitive(self):
        store = LabelStore(["Mucha"])
        assert store.add("mucha") is True
        assert store.labels == ["Mucha", "mucha"]

    def test_constructor_dedupes_and_sorts(self):
        store = LabelStore(["b", "a", "b", " a ", ""])
        assert store.labels == ["a", "b"]


class TestLabelStoreImport:
    """Tests for LabelStore.import_bulk."""

    def test_import_counts_only_new_labels(self):
        store = LabelStore(["monet"])
        added = store.import_bulk("mucha, monet\nhokusai")
        assert added == 2
        assert store.labels == ["hokusai", "monet", "mucha"]

    def test_duplicates_within_batch_counted_once(self):
        store = LabelStore()
        assert store.import_bulk("mucha,mucha\nmucha") == 1
        assert len(store) == 1

    def test_reimport_is_idempotent(self):
        store = LabelStore()
        store.import_bulk("a,b,c")
        assert store.import_bulk("c\nb\na") == 0
        assert len(store) == 3

    def test_no_valid_labels_raises_and_leaves_store(self):
        store = LabelStore(["mucha"])
        with pytest.raises(NoValidLabelsError):
            store.import_bulk(" ,\n, ")
        assert store.labels == ["mucha"]

    def test_all_duplicates_is_not_an_error(self):
        store = LabelStore(["mucha"])
        assert store.import_bulk("mucha") == 0


class TestLabelStoreSearch:
    """Tests for LabelStore.search."""

    def test_case_insensitive_substring(self):
        store = LabelStore(["Alphonse Mucha", "monet", "hokusai"])
        assert list(store.search("MU")) == ["Alphonse Mucha"]

    def test_empty_query_matches_everything(self):
        store = LabelStore(["b", "a"])
        assert list(store.search("")) == ["a", "b"]

    def test_search_is_restartable(self):
        store = LabelStore(["mucha", "monet", "hokusai"])
        results = store.search("m")
        assert list(results) == ["monet", "mucha"]
        assert list(results) == ["monet", "mucha"]

    def test_search_does_not_mutate(self):
        store = LabelStore(["mucha", "monet"])
        list(store.search("zzz"))
        assert store.labels == ["monet", "mucha"]


class TestLabelStoreReplaceAndExport:
    """Tests for replace_all and export_text."""

    def test_replace_all(self):
        store = LabelStore(["a", "b"])
        store.replace_all(["c", "a"])
        assert store.labels == ["a", "c"]

    def test_export_one_per_line(self):
        store = LabelStore(["monet", "hokusai"])
        assert store.export_text() == "hokusai\nmonet"

    def test_export_empty_store(self):
        assert LabelStore().export_text() == ""


class TestSelectionSet:
    """Tests for SelectionSet."""

    def test_toggle(self):
        selection = SelectionSet()
        selection.toggle("mucha")
        assert "mucha" in selection
        selection.toggle("mucha")
        assert "mucha" not in selection

    def test_select_all_replaces(self):
        selection = SelectionSet(["old"])
        selection.select_all(["a", "b"])
        assert selection.labels == ["a", "b"]

    def test_select_all_accepts_search_view(self):
        store = LabelStore(["mucha", "monet", "hokusai"])
        selection = SelectionSet()
        selection.select_all(store.search("mo"))
        assert selection.labels == ["monet"]

    def test_deselect_all(self):
        selection = SelectionSet(["a", "b"])
        selection.deselect_all()
        assert len(selection) == 0

    def test_retain_drops_stale_labels(self):
        selection = SelectionSet(["a", "b", "c"])
        assert selection.retain(LabelStore(["a", "c"])) == 1
        assert selection.labels == ["a", "c"]
