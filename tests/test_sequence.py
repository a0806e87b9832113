"""Tests for the FooBar sequence generator."""

import pytest

from foobar_server.domain.sequence import (
    InvalidLength,
    generate,
    render_sequence,
    token_for,
)


class TestGenerate:
    def test_length_seven(self):
        assert generate(7) == ["1", "2", "foo", "4", "5", "foo", "bar"]

    def test_length_fifteen(self):
        assert generate(15) == [
            "1", "2", "foo", "4", "5", "foo", "bar", "8",
            "foo", "10", "11", "foo", "13", "bar", "foobar",
        ]

    def test_zero_is_empty(self):
        assert generate(0) == []

    def test_negative_raises(self):
        with pytest.raises(InvalidLength, match="length is negative"):
            generate(-3)

    def test_invalid_length_is_value_error(self):
        with pytest.raises(ValueError):
            generate(-1)

    @pytest.mark.parametrize("n", [0, 1, 2, 14, 15, 100, 1000])
    def test_length_matches_input(self, n):
        assert len(generate(n)) == n

    def test_idempotent(self):
        assert generate(210) == generate(210)

    def test_results_are_independent_lists(self):
        first = generate(5)
        first.append("x")
        assert generate(5) == ["1", "2", "foo", "4", "5"]


class TestRules:
    def test_multiples_of_fifteen(self):
        seq = generate(315)
        for i in range(15, 316, 15):
            assert seq[i - 1] == "foobar"

    def test_seven_beats_three(self):
        assert token_for(21) == "bar"
        assert token_for(63) == "bar"

    def test_fifteen_beats_seven(self):
        assert token_for(105) == "foobar"

    def test_plain_multiples_of_five_stay_numbers(self):
        assert token_for(5) == "5"
        assert token_for(10) == "10"
        assert token_for(25) == "25"

    def test_five_and_seven(self):
        assert token_for(35) == "bar"

    def test_every_position_follows_rule_order(self):
        for i, token in enumerate(generate(500), start=1):
            if i % 15 == 0:
                assert token == "foobar"
            elif i % 7 == 0:
                assert token == "bar"
            elif i % 3 == 0:
                assert token == "foo"
            else:
                assert token == str(i)

    def test_position_must_be_positive(self):
        with pytest.raises(ValueError):
            token_for(0)


class TestRender:
    def test_render(self):
        assert render_sequence(generate(7)) == "[1 2 foo 4 5 foo bar]"

    def test_render_empty(self):
        assert render_sequence([]) == "[]"
