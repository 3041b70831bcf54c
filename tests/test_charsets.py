import pytest

from passgen import ALL_CLASSES, CHARACTER_SETS, CLASS_ORDER, CharacterClass
from passgen.charsets import alphabet_for, class_of, coerce_class
from passgen.errors import ValidationError, ValidationErrorKind


def test_character_sets_have_expected_members():
    assert CHARACTER_SETS[CharacterClass.UPPER] == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert CHARACTER_SETS[CharacterClass.LOWER] == "abcdefghijklmnopqrstuvwxyz"
    assert CHARACTER_SETS[CharacterClass.DIGITS] == "0123456789"
    assert sorted(CHARACTER_SETS[CharacterClass.SPECIAL]) == sorted("!#$%@=^*+-")


def test_character_sets_are_disjoint_and_printable():
    seen = set()
    for cls in CLASS_ORDER:
        chars = set(CHARACTER_SETS[cls])
        assert not (chars & seen)
        assert all(33 <= ord(c) <= 126 for c in chars)
        seen |= chars
    assert len(seen) == 26 + 26 + 10 + 10


def test_character_sets_are_read_only():
    with pytest.raises(TypeError):
        CHARACTER_SETS[CharacterClass.DIGITS] = "01"  # type: ignore[index]


def test_class_order_and_all_classes():
    assert CLASS_ORDER == (
        CharacterClass.UPPER,
        CharacterClass.LOWER,
        CharacterClass.DIGITS,
        CharacterClass.SPECIAL,
    )
    assert ALL_CLASSES == frozenset(CLASS_ORDER)


@pytest.mark.parametrize(
    "char, expected",
    [
        ("Q", CharacterClass.UPPER),
        ("q", CharacterClass.LOWER),
        ("7", CharacterClass.DIGITS),
        ("@", CharacterClass.SPECIAL),
        ("~", None),
        ("&", None),
    ],
)
def test_class_of(char, expected):
    assert class_of(char) is expected


def test_class_of_respects_enabled_classes():
    assert class_of("Q", frozenset({CharacterClass.DIGITS})) is None
    assert class_of("5", frozenset({CharacterClass.DIGITS})) is CharacterClass.DIGITS


@pytest.mark.parametrize("value", ["digits", "DIGITS", " Digits ", CharacterClass.DIGITS])
def test_coerce_class_accepts_names_and_members(value):
    assert coerce_class(value) is CharacterClass.DIGITS


@pytest.mark.parametrize("value", ["symbols", 3, None])
def test_coerce_class_rejects_unknown(value):
    with pytest.raises(ValidationError) as excinfo:
        coerce_class(value)
    assert excinfo.value.kind is ValidationErrorKind.INVALID_CLASS


def test_alphabet_for_follows_class_order():
    classes = frozenset({CharacterClass.SPECIAL, CharacterClass.UPPER})
    assert alphabet_for(classes) == CHARACTER_SETS[CharacterClass.UPPER] + CHARACTER_SETS[CharacterClass.SPECIAL]
