from varna.models import Script
from varna.scripts import validate


def test_empty_input_is_reported_not_raised() -> None:
    result = validate("")

    assert result.is_valid is False
    assert result.error_type == "empty_input"
    assert result.error
    assert validate("   ").error_type == "empty_input"


def test_non_string_input() -> None:
    result = validate(None)

    assert result.is_valid is False
    assert result.error_type == "type_error"


def test_valid_words() -> None:
    devanagari = validate("संस्कृतम्")
    iast = validate("rāmaḥ")

    assert devanagari.is_valid is True
    assert devanagari.script is Script.DEVANAGARI
    assert devanagari.error is None
    assert iast.is_valid is True
    assert iast.script is Script.IAST
    assert validate("rāma-putra").is_valid
    assert validate("ra\u0304ma").is_valid


def test_mixed_scripts() -> None:
    result = validate("रामa")

    assert result.is_valid is False
    assert result.error_type == "mixed_script"


def test_unrecognized_characters() -> None:
    result = validate("xyz")

    assert result.is_valid is False
    assert result.error_type == "unrecognized_character"
    assert "'x'" in result.error
    assert validate("rāma!").error_type == "unrecognized_character"


def test_letterless_input_has_unknown_script() -> None:
    result = validate("123")

    assert result.is_valid is False
    assert result.error_type == "unknown_script"


def test_malformed_combining_sequences() -> None:
    assert validate("ि").error_type == "malformed_sequence"
    assert validate("किि").error_type == "malformed_sequence"
    assert validate("्क").error_type == "malformed_sequence"
    assert validate("ंक").error_type == "malformed_sequence"
    assert validate("क्ं").error_type == "malformed_sequence"


def test_marks_after_syllables_are_well_formed() -> None:
    assert validate("रामः").is_valid
    assert validate("अं").is_valid
    assert validate("कँ").is_valid


def test_iast_candrabindu_must_follow_m() -> None:
    assert validate("sam\u0310skṛtam").is_valid
    assert validate("\u0310ka").error_type == "malformed_sequence"
    assert validate("k\u0310").error_type == "malformed_sequence"
    assert validate("ka -\u0310").error_type == "malformed_sequence"
    assert validate("k\u0310").script is Script.IAST
