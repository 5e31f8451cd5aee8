import random

import pytest
from codebreaker.engine import (
    Feedback, InvalidParameters, Observation, filter_candidates, filter_history,
    generate_codes, iter_codes, random_code, score, symbols_of,
)


def test_generate_codes_lexicographic_in_alphabet_order():
    assert generate_codes("GR", 2) == ["GG", "GR", "RG", "RR"]
    assert generate_codes("RG", 2) == ["RR", "RG", "GR", "GG"]


def test_generate_codes_default_board_size_and_uniqueness():
    codes = generate_codes("GRBYOP", 4)
    assert len(codes) == 6 ** 4 == 1296
    assert len(set(codes)) == len(codes)
    assert codes[0] == "GGGG" and codes[1] == "GGGR" and codes[-1] == "PPPP"


def test_generate_codes_single_peg_and_single_colour():
    assert generate_codes("GRB", 1) == ["G", "R", "B"]
    assert generate_codes("G", 3) == ["GGG"]


@pytest.mark.parametrize("alphabet,length", [("", 4), ("GRBYOP", 0), ("GRBYOP", -1), ("GG", 2), ("GRBG", 4)])
def test_generate_codes_rejects_bad_parameters(alphabet, length):
    with pytest.raises(InvalidParameters):
        generate_codes(alphabet, length)
    with pytest.raises(InvalidParameters):
        list(iter_codes(alphabet, length))


def test_filter_candidates_keeps_consistent_codes_in_order():
    words = generate_codes("GRBYOP", 4)
    obs = Observation("GGRR", score("GRBY", "GGRR"))
    cand = filter_candidates(words, obs)
    assert "GRBY" in cand
    assert "GGRR" not in cand
    assert cand == [w for w in words if w in set(cand)]


def test_filter_candidates_never_grows_and_is_pure():
    words = generate_codes("GRB", 3)
    snapshot = list(words)
    for guess in words:
        for secret in words[::5]:
            obs = Observation(guess, score(secret, guess))
            out = filter_candidates(words, obs)
            assert set(out) <= set(words)
            assert secret in out
    assert words == snapshot


def test_filter_candidates_impossible_feedback_empties_pool():
    words = generate_codes("GRBYOP", 4)
    assert filter_candidates(words, Observation("GRBY", Feedback(3, 1))) == []


def test_filter_history_applies_every_observation():
    words = generate_codes("GRBYOP", 4)
    secret = "OPGG"
    history = [Observation(g, score(secret, g)) for g in ("GGRR", "BBYY", "OPOP")]
    step = words
    for obs in history:
        step = filter_candidates(step, obs)
    assert filter_history(words, history) == step
    assert secret in step


def test_random_code_is_seeded_and_on_the_board():
    a = [random_code("GRBYOP", 4, random.Random(17)) for _ in range(3)]
    b = [random_code("GRBYOP", 4, random.Random(17)) for _ in range(3)]
    assert a == b
    rng = random.Random(3)
    draws = [random_code("GRBYOP", 4, rng) for _ in range(200)]
    assert all(len(c) == 4 and set(c) <= set("GRBYOP") for c in draws)
    assert len(set(draws)) > 1


@pytest.mark.parametrize("alphabet,length", [("", 4), ("GG", 2), ("GR", 0)])
def test_random_code_rejects_bad_board(alphabet, length):
    with pytest.raises(InvalidParameters):
        random_code(alphabet, length, random.Random(0))


def test_symbols_of_first_appearance_order():
    assert symbols_of(["BBRG", "GYBB"]) == "BRGY"
    assert symbols_of(generate_codes("GRBYOP", 2)) == "GRBYOP"
    assert symbols_of([]) == ""
