import pytest

from property_formatter.modules.area_matcher import (
    char_similarity,
    jaccard,
    match_area,
    split_area_lines,
)


def test_glued_locality_is_split_onto_its_own_line(vocab):
    text = "Baner Pan card club road\nWakad\n2 BHK"
    assert split_area_lines(text, vocab) == "Baner\nPan card club road\nWakad\n2 BHK"


def test_split_keeps_source_casing(vocab):
    assert split_area_lines("baner near church", vocab) == "baner\nnear church"


def test_split_follows_gazetteer_order(vocab):
    # "Baner" precedes "Baner Mahalunge Rd" in the gazetteer
    assert split_area_lines("Baner Mahalunge Rd", vocab) == "Baner\nMahalunge Rd"
    assert split_area_lines("Pimpri Chinchwad Station road", vocab) == "Pimpri Chinchwad\nStation road"
    assert split_area_lines("Pimpri Chinchwad", vocab) == "Pimpri\nChinchwad"


def test_lines_not_starting_with_a_locality_are_untouched(vocab):
    text = "Near Baner road\nBanerjee house"
    assert split_area_lines(text, vocab) == text


def test_exact_match_is_case_insensitive(vocab):
    assert match_area("koregaon park", vocab) == "Koregaon Park"
    assert match_area("  NIBM ROAD ", vocab) == "NIBM Road"


def test_fuzzy_match_one_character_short(vocab):
    assert char_similarity("Kharad", "Kharadi") == pytest.approx(5 / 6)
    assert match_area("Kharad", vocab) == "Kharadi"


def test_no_match_below_threshold(vocab):
    assert match_area("Mumbai Central", vocab) is None
    assert match_area("", vocab) is None


def test_similarity_ignores_order_and_repeats():
    assert char_similarity("abc", "cba") == 1.0
    assert char_similarity("aabbcc", "ABC") == 1.0
    assert jaccard("", "") == 0.0
