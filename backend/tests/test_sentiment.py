import pytest
from feedback_api.services.sentiment import score_sentiment


def test_neutral_text_scores_baseline():
    assert score_sentiment("The room had a bed") == 0.5

def test_positive_words_raise_score():
    assert score_sentiment("The room was great and clean") == pytest.approx(0.7)

def test_negative_words_lower_score():
    assert score_sentiment("bad and dirty") == pytest.approx(0.3)

def test_matching_is_case_insensitive():
    assert score_sentiment("GREAT stay") == pytest.approx(0.6)

def test_substring_match_counts():
    # "good" inside "goodbye"
    assert score_sentiment("we said goodbye") == pytest.approx(0.6)

def test_repeated_word_counts_once():
    assert score_sentiment("great great great") == pytest.approx(0.6)

def test_score_clamped_to_one():
    text = "great excellent wonderful amazing fantastic good clean friendly"
    assert score_sentiment(text) == 1.0

def test_score_clamped_to_zero():
    text = "bad terrible awful horrible dirty noisy poor disappointed"
    assert score_sentiment(text) == 0.0

def test_empty_text():
    assert score_sentiment("") == 0.5
