import pytest

from eth_vanity.constraints import (
    ConstraintPair,
    ConstraintSet,
    from_pairs,
    normalize,
    parse_token_list,
)
from eth_vanity.errors import (
    InvalidConstraint,
    MismatchedConstraintLengths,
    NoConstraintsProvided,
    VanityError,
)


def test_prefixes_only_synthesizes_empty_suffixes():
    constraints = normalize(["ab"], None)
    assert constraints.pairs == (ConstraintPair(prefix="ab", suffix=""),)


def test_suffixes_only_synthesizes_empty_prefixes():
    constraints = normalize(None, ["12", "345"])
    assert constraints.prefixes == ["", ""]
    assert constraints.suffixes == ["12", "345"]


def test_pairs_are_index_aligned():
    constraints = normalize("12,13,14", "89,678,56")
    assert [(p.prefix, p.suffix) for p in constraints] == [
        ("12", "89"),
        ("13", "678"),
        ("14", "56"),
    ]
    assert len(constraints) == 3
    assert constraints[1] == ConstraintPair("13", "678")


def test_uppercase_is_case_folded():
    assert normalize(["AB12"]) == normalize(["ab12"])
    assert normalize(None, ["DeAd"]).suffixes == ["dead"]


def test_prefix_may_carry_0x():
    assert normalize(["0xCAFE"]).prefixes == ["cafe"]


def test_whitespace_around_tokens_is_ignored():
    assert parse_token_list(" 12 , 13") == ["12", "13"]
    assert normalize(" 12 , 13").prefixes == ["12", "13"]


@pytest.mark.parametrize("token", ["xy", "12g4", "0x", "ab-cd"])
def test_non_hex_token_is_rejected(token):
    with pytest.raises(InvalidConstraint):
        normalize([token])


def test_41_nibble_token_is_rejected():
    with pytest.raises(InvalidConstraint):
        normalize(["a" * 41])
    with pytest.raises(InvalidConstraint):
        normalize(None, ["1" * 41])


def test_40_nibble_token_is_accepted():
    assert normalize(["f" * 40]).prefixes == ["f" * 40]


def test_pair_longer_than_an_address_is_rejected():
    with pytest.raises(InvalidConstraint):
        normalize(["a" * 30], ["b" * 11])


def test_pair_with_both_sides_empty_is_rejected():
    with pytest.raises(InvalidConstraint):
        normalize("ab,", "12,")


def test_empty_token_allowed_when_other_side_is_set():
    constraints = normalize("ab,", "12,34")
    assert constraints.pairs[1] == ConstraintPair("", "34")


def test_mismatched_lengths():
    with pytest.raises(MismatchedConstraintLengths) as excinfo:
        normalize(["12", "13"], ["89"])
    assert excinfo.value.prefixes == ["12", "13"]
    assert excinfo.value.suffixes == ["89"]


def test_nothing_supplied():
    with pytest.raises(NoConstraintsProvided):
        normalize(None, None)


def test_errors_share_a_base_class():
    for exc in (InvalidConstraint, MismatchedConstraintLengths, NoConstraintsProvided):
        assert issubclass(exc, VanityError)


def test_constraint_set_is_immutable():
    constraints = normalize(["ab"])
    with pytest.raises(AttributeError):
        constraints.pairs = ()
    with pytest.raises(AttributeError):
        constraints.pairs[0].prefix = "cd"


def test_empty_constraint_set_is_refused():
    with pytest.raises(NoConstraintsProvided):
        ConstraintSet(())
    with pytest.raises(NoConstraintsProvided):
        from_pairs([])


def test_from_pairs():
    assert from_pairs([("AB", ""), ("", "cd")]).pairs == (
        ConstraintPair("ab", ""),
        ConstraintPair("", "cd"),
    )


def test_describe():
    assert normalize(["ab"]).describe() == (
        "Finding matches with prefixes = ['ab'] and suffixes = ['']"
    )
