from app.utils.accept_language import (
    DEFAULT_WEIGHT,
    NegotiatedLanguage,
    negotiate_language_code,
    normalize_language_code,
    parse_accept_language,
    select_preferred_language,
)


def test_highest_weight_wins_regardless_of_order():
    assert select_preferred_language("a;q=0.5,b;q=0.9") == "b"
    assert select_preferred_language("b;q=0.9,a;q=0.5") == "b"


def test_missing_q_value_defaults_to_one():
    languages = parse_accept_language("en-US, fr")
    assert languages == [
        NegotiatedLanguage(code="en-US", weight=DEFAULT_WEIGHT),
        NegotiatedLanguage(code="fr", weight=DEFAULT_WEIGHT),
    ]


def test_browser_style_header():
    header = "zh-CN,zh;q=0.9,en;q=0.8,en-GB;q=0.7,en-US;q=0.6"
    languages = parse_accept_language(header)
    assert [lang.code for lang in languages] == ["zh-CN", "zh", "en", "en-GB", "en-US"]
    assert [lang.weight for lang in languages] == [1.0, 0.9, 0.8, 0.7, 0.6]


def test_ties_keep_first_occurrence():
    assert select_preferred_language("de;q=0.8,fr;q=0.8,it;q=0.8") == "de"
    assert select_preferred_language("ja;q=0.3,ko,zh") == "ko"


def test_malformed_weight_defaults_to_one():
    languages = parse_accept_language("fr;q=abc,de;q=0.9")
    assert languages[0] == NegotiatedLanguage(code="fr", weight=1.0)
    assert select_preferred_language("fr;q=nan,de;q=0.9") == "fr"


def test_non_q_parameter_is_ignored():
    assert parse_accept_language("fr;level=1") == [NegotiatedLanguage(code="fr", weight=1.0)]


def test_whitespace_around_tags_and_weights():
    languages = parse_accept_language("  fr ; q = 0.5 ,  de ;q=0.7 ")
    assert languages == [
        NegotiatedLanguage(code="de", weight=0.7),
        NegotiatedLanguage(code="fr", weight=0.5),
    ]


def test_empty_or_absent_header_yields_nothing():
    assert parse_accept_language(None) == []
    assert parse_accept_language("") == []
    assert parse_accept_language(" , ,") == []
    assert select_preferred_language(None) is None
    assert select_preferred_language(",") is None


def test_normalize_preserves_case():
    assert normalize_language_code("  zh-CN ") == "zh-CN"
    assert normalize_language_code("en-us") == "en-us"
    assert normalize_language_code("de;q=0.9") == "de"


def test_explicit_code_skips_header():
    assert negotiate_language_code("zh-CN", "en;q=1.0,fr;q=0.5") == "zh-CN"
    assert negotiate_language_code(" ja ", None) == "ja"


def test_header_used_when_explicit_code_missing():
    assert negotiate_language_code(None, "fr;q=0.5,de;q=0.9") == "de"
    assert negotiate_language_code("", "fr") == "fr"


def test_no_code_available():
    assert negotiate_language_code(None, None) is None
    assert negotiate_language_code("", "") is None
