"""ExclusionLedger tests: normalization, idempotent record, scope isolation."""

import pytest

from intentguard.domain.exclusion_ledger import ExclusionLedger, normalize_exclusion_text, normalize_term


class TestNormalization:
    """Exclusion keys drop one exact-match bracket pair; query keys keep brackets."""

    @pytest.mark.parametrize(
        "raw, key",
        [
            ("[cheap tours]", "cheap tours"),
            ("[Cheap Tours]", "cheap tours"),
            ("Cheap Tours", "cheap tours"),
            ("  [bus tours]  ", "bus tours"),
            ("[unclosed", "[unclosed"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, raw, key):
        assert normalize_exclusion_text(raw) == key

    def test_double_bracket_exclusion_strips_one_pair(self):
        assert normalize_exclusion_text("[[Cheap Tours]]") == "[cheap tours]"

    @pytest.mark.parametrize(
        "raw, key",
        [
            ("  Cheap Tours ", "cheap tours"),
            ("[cheap tours]", "[cheap tours]"),
            (None, ""),
        ],
    )
    def test_query_key_keeps_brackets(self, raw, key):
        assert normalize_term(raw) == key


class TestLedger:
    def test_loaded_exclusion_covers_raw_term(self):
        ledger = ExclusionLedger()
        ledger.load("C1", ["[cheap tours]"])
        assert ledger.has("C1", "cheap tours") is True
        assert ledger.has("C1", "Cheap Tours") is True

    def test_record_is_idempotent(self):
        ledger = ExclusionLedger()
        assert ledger.record("C1", "bus tours naples") is True
        assert ledger.record("C1", "bus tours naples") is False
        assert ledger.size("C1") == 1
        assert ledger.has("C1", "bus tours naples") is True

    def test_bracketed_query_matches_double_bracket_exclusion(self):
        ledger = ExclusionLedger()
        ledger.load("C1", ["[[cheap tours]]"])
        assert ledger.has("C1", "[cheap tours]") is True
        assert ledger.has("C1", "cheap tours") is False

    def test_record_keeps_query_brackets(self):
        ledger = ExclusionLedger()
        ledger.record("C1", "[cheap tours]")
        assert ledger.keys("C1") == ["[cheap tours]"]

    def test_scopes_are_isolated(self):
        ledger = ExclusionLedger()
        ledger.load("C1", ["[bus tours]"])
        assert ledger.has("C2", "bus tours") is False

    def test_unknown_scope_has_nothing(self):
        assert ExclusionLedger().has("missing", "anything") is False

    def test_load_skips_blank_entries_and_counts(self):
        ledger = ExclusionLedger()
        assert ledger.load("C1", ["[a]", "", None, "[]", "[A]"]) == 1
        assert ledger.keys("C1") == ["a"]

    def test_load_twice_merges(self):
        ledger = ExclusionLedger()
        ledger.load("C1", ["[a]"])
        ledger.load("C1", ["[b]"])
        assert ledger.keys("C1") == ["a", "b"]
        assert ledger.scopes() == ["C1"]
