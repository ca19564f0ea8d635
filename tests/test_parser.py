import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from phrasebreak.parser import Parser, load_parser
from phrasebreak.types import FeatureGroup


def test_parse_breaks_before_weighted_unigram():
    parser = Parser({"UW4": {"a": 100}})

    assert parser.parse("xyzabc") == ["xyz", "abc"]


def test_parse_empty_sentence_returns_empty_list():
    assert Parser({"UW4": {"a": 100}}).parse("") == []


def test_empty_model_never_breaks():
    parser = Parser({})

    assert parser.total_weight == 0
    assert parser.parse("今日は天気です。") == ["今日は天気です。"]


def test_single_character_sentence():
    assert Parser({"UW4": {"a": 100}, "UW3": {"a": 100}}).parse("a") == ["a"]


def test_parse_japanese_sentence():
    parser = Parser({"UW4": {"天": 100}})

    assert parser.parse("今日は天気です。") == ["今日は", "天気です。"]


@pytest.mark.parametrize(
    "group, key",
    [
        ("UW1", "a"),
        ("UW2", "b"),
        ("UW3", "c"),
        ("UW4", "d"),
        ("UW5", "e"),
        ("UW6", "f"),
        ("BW1", "bc"),
        ("BW2", "cd"),
        ("BW3", "de"),
        ("TW1", "abc"),
        ("TW2", "bcd"),
        ("TW3", "cde"),
        ("TW4", "def"),
    ],
)
def test_each_feature_group_is_probed_at_its_window(group, key):
    parser = Parser({group: {key: 100}})

    assert parser.parse("abcdef") == ["abc", "def"]


def test_uw1_is_not_probed_at_the_first_boundary():
    # Without the guard, sentence[-2:-1] would read "b" at boundary 1.
    parser = Parser({"UW1": {"b": 100}})

    assert parser.parse("ba") == ["ba"]


def test_uw1_fires_once_the_window_is_inside_the_sentence():
    parser = Parser({"UW1": {"a": 100}})

    assert parser.parse("abcd") == ["abc", "d"]
    assert parser.parse("ab") == ["ab"]


@pytest.mark.parametrize("group", ["UW1", "UW2", "UW5", "UW6", "BW1", "TW1", "TW2"])
def test_guarded_probes_never_look_up_out_of_range_windows(group):
    # Out-of-range slices collapse to "" in Python, so a key of "" only
    # matches when a guard is missing.
    parser = Parser({group: {"": 100}})

    assert parser.parse("abc") == ["abc"]
    assert parser.parse("abcdef") == ["abcdef"]


@pytest.mark.parametrize("group, key", [("BW3", "c"), ("TW3", "bc"), ("TW4", "bc"), ("TW4", "c")])
def test_trailing_windows_are_not_truncated_at_the_end(group, key):
    # Without the guards these windows run past the end and read "c" or "bc".
    parser = Parser({group: {key: 100}})

    assert parser.parse("abc") == ["abc"]


def test_total_weight_includes_unused_groups():
    assert Parser({"UW4": {"a": 100}, "XX9": {"z": 50}}).parse("xa") == ["x", "a"]
    assert Parser({"UW4": {"a": 100}, "XX9": {"z": 100}}).parse("xa") == ["xa"]


def test_zero_score_is_not_a_break():
    parser = Parser({"UW4": {"a": 100}, "UW3": {"q": -100}})

    assert parser.total_weight == 0
    assert parser.boundary_scores("qab") == [0, 0]
    assert parser.parse("qab") == ["qab"]


def test_boundary_scores_match_phrase_count():
    parser = Parser({"UW4": {"a": 100}})

    scores = parser.boundary_scores("xyzabc")

    assert scores == [-100, -100, 100, -100, -100]
    assert len(parser.parse("xyzabc")) == 1 + sum(1 for s in scores if s > 0)


def test_score_rejects_out_of_range_boundaries():
    parser = Parser({"UW4": {"a": 100}})

    assert parser.score("xa", 1) == 100
    with pytest.raises(IndexError):
        parser.score("xa", 0)
    with pytest.raises(IndexError):
        parser.score("xa", 2)


def test_non_bmp_characters_count_as_one_character():
    parser = Parser({"BW2": {"家𠮷": 100}, "TW4": {"𠮷野家": 0}})

    assert parser.parse("野家𠮷野家") == ["野家", "𠮷野家"]
    assert parser.boundary_scores("𠮷𠮷") == [-100]


def test_model_is_copied_and_read_only():
    model = {"UW4": {"a": 100}}
    parser = Parser(model)

    model["UW4"]["b"] = 100
    model["UW3"] = {"x": 100}

    assert parser.parse("xb") == ["xb"]
    assert parser.total_weight == 100
    with pytest.raises(TypeError):
        parser.model["UW4"]["c"] = 1


def test_get_weight_tolerates_missing_groups():
    parser = Parser({"UW4": {"a": 7}})

    assert parser._get_weight(FeatureGroup.UW4, "a") == 7
    assert parser._get_weight(FeatureGroup.UW4, "b") == 0
    assert parser._get_weight(FeatureGroup.TW1, "abc") == 0


def test_parse_is_lossless_and_deterministic_on_random_input():
    rng = random.Random(1234)
    alphabet = "あいうえおかきくけこ日本語𠮷ab"
    groups = [g.value for g in FeatureGroup]

    for _ in range(50):
        model = {}
        for group in rng.sample(groups, 5):
            size = 1 if group.startswith("UW") else 2 if group.startswith("BW") else 3
            model[group] = {
                "".join(rng.choice(alphabet) for _ in range(size)): rng.randint(-50, 200)
                for _ in range(6)
            }
        parser = Parser(model)
        sentence = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 25)))

        phrases = parser.parse(sentence)

        assert "".join(phrases) == sentence
        assert all(phrases)
        assert phrases == parser.parse(sentence)
        assert len(phrases) == (1 + sum(1 for s in parser.boundary_scores(sentence) if s > 0) if sentence else 0)


def test_parser_can_be_shared_between_threads():
    parser = Parser({"UW4": {"a": 100}, "BW2": {"cx": 50}})
    sentences = ["xyzabc" * n for n in range(1, 40)]

    with ThreadPoolExecutor(max_workers=4) as pool:
        threaded = list(pool.map(parser.parse, sentences))

    assert threaded == [parser.parse(s) for s in sentences]


def test_load_parser_reads_model_file(write_model):
    path = write_model({"UW4": {"a": 100}})

    assert load_parser(path).parse("xyzabc") == ["xyz", "abc"]
    assert Parser.from_file(str(path)).parse("xyzabc") == ["xyz", "abc"]
