import pytest

from passgen import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    CompositionRules,
    InvalidRulesError,
)


def test_zero_lengths_use_defaults():
    rules = CompositionRules(min_length=0, max_length=0)
    assert rules.min_length == DEFAULT_MIN_LENGTH == 8
    assert rules.max_length == DEFAULT_MAX_LENGTH == 15


def test_explicit_lengths_are_kept():
    rules = CompositionRules(min_length=10, max_length=20)
    assert (rules.min_length, rules.max_length) == (10, 20)


def test_max_below_min_is_coerced():
    rules = CompositionRules(min_length=20, max_length=10)
    assert rules.max_length == 21


def test_max_equal_to_min_is_coerced():
    rules = CompositionRules(min_length=12, max_length=12)
    assert rules.max_length == 13


def test_default_max_below_explicit_min():
    rules = CompositionRules(min_length=30)
    assert (rules.min_length, rules.max_length) == (30, 31)


def test_normalisation_is_idempotent():
    rules = CompositionRules(min_length=20, max_length=10)
    assert CompositionRules(**vars(rules)) == rules


@pytest.mark.parametrize(
    'field', ['min_uppercase', 'min_lowercase', 'min_number',
              'min_special_char', 'min_length', 'max_length'],
)
def test_negative_values_rejected(field):
    with pytest.raises(InvalidRulesError, match=field):
        CompositionRules(**{field: -1})


def test_invalid_rules_error_is_value_error():
    with pytest.raises(ValueError):
        CompositionRules(min_number=-3)


def test_required_length():
    rules = CompositionRules(
        min_uppercase=2, min_lowercase=3, min_number=4, min_special_char=1
    )
    assert rules.required_length == 10


def test_from_mapping():
    rules = CompositionRules.from_mapping(
        {'min_uppercase': '2', 'min_special_char': 1, 'max_length': 30}
    )
    assert rules == CompositionRules(
        min_uppercase=2, min_special_char=1, max_length=30
    )


def test_from_mapping_unknown_key():
    with pytest.raises(InvalidRulesError, match='upper_case'):
        CompositionRules.from_mapping({'upper_case': True})


def test_from_mapping_bad_value():
    with pytest.raises(InvalidRulesError, match='min_number'):
        CompositionRules.from_mapping({'min_number': 'two'})
