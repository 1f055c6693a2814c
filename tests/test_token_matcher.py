"""Token matcher tests: substring containment, not whole words."""

from intentguard.domain.token_matcher import contains_any, matching_tokens


def test_contains_single_word_token():
    assert contains_any("vip transfer naples", ["private", "vip"]) is True


def test_contains_multi_word_token():
    assert contains_any("naples group tours from port", ["group tour"]) is True


def test_substring_not_whole_word():
    # "excursion" is contained in "excursions"
    assert contains_any("shore excursions", ["excursion"]) is True


def test_case_insensitive():
    assert contains_any("Private Driver", ["private"]) is True
    assert contains_any("private driver", ["PRIVATE"]) is True


def test_no_match():
    assert contains_any("best gift ideas", ["private", "cheap"]) is False


def test_empty_text_and_tokens():
    assert contains_any("", ["private"]) is False
    assert contains_any("private", []) is False
    assert contains_any(None, ["private"]) is False


def test_blank_token_never_matches():
    assert contains_any("anything", [""]) is False


def test_matching_tokens_keeps_token_order():
    tokens = ["bus tour", "bus tours", "cheap"]
    assert matching_tokens("cheap bus tours", tokens) == ("bus tour", "bus tours", "cheap")
