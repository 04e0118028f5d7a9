import pytest

from diligent.keyspec import (
    DEFAULT_DELIM,
    LeveledKey,
    LeveledKeyGenSpec,
    new_leveled_keygen_spec,
    new_random_leveled_keygen_spec,
)


def test_leveled_str_keys():
    k1 = LeveledKey(["A"], "_")
    assert k1.num_levels() == 1
    assert str(k1) == "A"
    assert k1.prefix(0) == "A"

    k2 = LeveledKey(["A", "B"], "_")
    assert k2.num_levels() == 2
    assert str(k2) == "A_B"
    assert k2.prefix(0) == "A"
    assert k2.prefix(1) == "A_B"

    k3 = LeveledKey(["A", "B", "C"], "_")
    assert k3.num_levels() == 3
    assert str(k3) == "A_B_C"
    assert k3.prefix(0) == "A"
    assert k3.prefix(1) == "A_B"
    assert k3.prefix(2) == "A_B_C"


def test_prefix_out_of_range_raises():
    with pytest.raises(IndexError):
        LeveledKey(["A", "B"]).prefix(2)


def test_basic_spec_params_1_level():
    sub_key_sets = [["A"]]
    spec = new_leveled_keygen_spec(sub_key_sets)
    assert spec.num_levels() == 1
    assert spec.num_keys() == 1
    assert spec.key_length() == 1
    assert spec.length_of_key_prefix_at_level(0) == 1
    assert spec.sub_key_sets == sub_key_sets


def test_basic_spec_params_2_level():
    sub_key_sets = [["A", "B"], ["1", "2", "3"]]
    spec = new_leveled_keygen_spec(sub_key_sets)
    assert spec.num_levels() == 2
    assert spec.num_keys() == 6
    assert spec.key_length() == 3
    assert spec.length_of_key_prefix_at_level(0) == 1
    assert spec.length_of_key_prefix_at_level(1) == 3
    assert spec.sub_key_sets == sub_key_sets


def test_basic_spec_params_3_level():
    sub_key_sets = [["A", "B"], ["1", "2", "3"], ["W", "X", "Y", "Z"]]
    spec = new_leveled_keygen_spec(sub_key_sets)
    assert spec.num_levels() == 3
    assert spec.num_keys() == 24
    assert spec.key_length() == 5
    assert spec.length_of_key_prefix_at_level(0) == 1
    assert spec.length_of_key_prefix_at_level(1) == 3
    assert spec.length_of_key_prefix_at_level(2) == 5
    assert spec.sub_key_sets == sub_key_sets


def test_prefix_length_bad_level_raises():
    spec = new_leveled_keygen_spec([["A"]])
    with pytest.raises(IndexError):
        spec.length_of_key_prefix_at_level(1)


@pytest.mark.parametrize("num_sub_keys_by_level", [[1], [1, 1, 1], [10, 20, 30]])
def test_create_random(num_sub_keys_by_level):
    spec = new_random_leveled_keygen_spec(num_sub_keys_by_level, 10)
    assert [len(s) for s in spec.sub_key_sets] == num_sub_keys_by_level
    for subset in spec.sub_key_sets:
        assert len(set(subset)) == len(subset)
        assert all(len(s) == 10 for s in subset)
    assert spec.is_valid() is True


def test_validation():
    assert LeveledKeyGenSpec(sub_key_sets=[], delim=DEFAULT_DELIM).is_valid() is False
    assert LeveledKeyGenSpec(sub_key_sets=[["A"], [], ["C"]], delim=DEFAULT_DELIM).is_valid() is False
    assert LeveledKeyGenSpec(sub_key_sets=[["A"], ["B", "CD"]], delim=DEFAULT_DELIM).is_valid() is False


def test_new_spec_rejects_invalid():
    with pytest.raises(ValueError):
        new_leveled_keygen_spec([["A"], ["B", "CD"]])


def test_error_on_bad_spec_create():
    with pytest.raises(ValueError):
        new_random_leveled_keygen_spec([], 10)
    with pytest.raises(ValueError):
        new_random_leveled_keygen_spec([5, 0, 5], 10)
    with pytest.raises(ValueError):
        new_random_leveled_keygen_spec([5], 0)