"""Tests for whole-sequence scan helpers."""

from seqdfa.automaton import DFA, contains, count_matches, find_first, iter_match_spans


class TestIterMatchSpans:
    """Tests for iter_match_spans."""

    def test_reports_half_open_spans(self):
        spans = list(iter_match_spans(DFA("ABABAC"), "AABACAABABACAA"))
        assert spans == [(6, 12)]

    def test_matches_do_not_overlap(self):
        assert list(iter_match_spans(DFA("aa"), "aaaaa")) == [(0, 2), (2, 4)]

    def test_resets_stale_state_first(self):
        """A DFA left mid-match by an earlier input starts over."""
        dfa = DFA("seashells")
        for ch in "she ejoys sunsets by the sea":
            dfa.update_state(ch)
        assert dfa.state == 3

        assert list(iter_match_spans(dfa, "shells are explosives")) == []

    def test_empty_pattern(self):
        assert list(iter_match_spans(DFA(""), "anything")) == []

    def test_leaves_dfa_reset_after_final_match(self):
        dfa = DFA("ab")
        list(iter_match_spans(dfa, "xab"))
        assert dfa.is_at_initial_state

    def test_non_string_sequence(self):
        pattern = [1, 2, 1]
        text = [0, 1, 2, 1, 2, 1, 2, 1]
        assert list(iter_match_spans(DFA(pattern), text)) == [(1, 4), (5, 8)]


class TestHelpers:
    """Tests for count_matches, find_first and contains."""

    def test_count_matches(self):
        assert count_matches(DFA("sea"), "sea shells by the sea shore") == 2
        assert count_matches(DFA("sky"), "sea shells by the sea shore") == 0

    def test_find_first(self):
        assert find_first(DFA("ABABAC"), "AABACAABABACAA") == 6
        assert find_first(DFA("ABABAC"), "ABABAB") is None
        assert find_first(DFA(""), "ABABAB") is None

    def test_find_first_stops_consuming(self):
        consumed = []

        def tracked(text):
            for ch in text:
                consumed.append(ch)
                yield ch

        assert find_first(DFA("ab"), tracked("xxabyyy")) == 2
        assert "".join(consumed) == "xxab"

    def test_contains(self):
        assert contains(DFA("shells"), "shells are explosives")
        assert not contains(DFA("seashells"), "shells are explosives")
