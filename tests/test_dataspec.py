import json

import pytest

from diligent.dataspec import (
    CURRENT_SPEC_VERSION,
    SPEC_TYPE,
    compute_num_sub_keys_per_level,
    load_spec_from_file,
    new_spec,
)


@pytest.mark.parametrize(
    "count, expected",
    [(5, 5), (55, 50), (105, 100), (1005, 1000), (10005, 10000), (1000005, 1000000)],
)
def test_new_spec(count, expected):
    spec = new_spec(count, 1024)
    assert spec.spec_type == SPEC_TYPE
    assert spec.version == CURRENT_SPEC_VERSION
    assert spec.record_size == 1024
    assert spec.key_gen_spec.is_valid()
    assert spec.key_gen_spec.num_levels() == 3
    assert spec.key_gen_spec.num_keys() == expected
    assert spec.uniq_tr_spec.is_valid()
    assert spec.small_grp_tr_spec.is_valid()
    assert spec.large_grp_tr_spec.is_valid()
    assert spec.key_gen_spec.key_length() == len(spec.fixed_value)
    assert spec.is_valid()


def _break_spec_type(spec):
    spec.spec_type = "boo"


def _break_version(spec):
    spec.version = 1000


def _break_record_size(spec):
    spec.record_size = -999


def _break_key_gen(spec):
    spec.key_gen_spec.sub_key_sets = []


def _break_uniq(spec):
    spec.uniq_tr_spec.replacements = "AA"


def _break_small(spec):
    spec.small_grp_tr_spec.replacements = "AA"


def _break_large(spec):
    spec.large_grp_tr_spec.replacements = "AA"


def _break_fixed(spec):
    spec.fixed_value = ""


@pytest.mark.parametrize(
    "breaker",
    [
        _break_spec_type,
        _break_version,
        _break_record_size,
        _break_key_gen,
        _break_uniq,
        _break_small,
        _break_large,
        _break_fixed,
    ],
)
def test_validation(breaker):
    spec = new_spec(1000, 1024)
    assert spec.is_valid()
    breaker(spec)
    assert not spec.is_valid()


def test_save_and_restore(tmp_path):
    spec1 = new_spec(1000, 1024)
    path = tmp_path / "spec.json"
    spec1.save_to_file(str(path))
    assert path.exists()
    spec2 = load_spec_from_file(str(path))
    assert spec1 == spec2


def test_save_refuses_existing_file(tmp_path):
    path = tmp_path / "spec.json"
    path.write_text("{}")
    with pytest.raises(FileExistsError):
        new_spec(10, 100).save_to_file(str(path))


def test_json_field_names():
    spec = new_spec(100, 512)
    data = json.loads(spec.to_json())
    assert data["SpecType"] == "diligent/schema-a"
    assert data["Version"] == 1
    assert data["RecordSize"] == 512
    assert data["KeyGenSpec"]["SubKeySets"] == spec.key_gen_spec.sub_key_sets
    assert data["UniqTrSpec"]["Replacements"] == spec.uniq_tr_spec.replacements
    assert data["FixedValue"] == spec.fixed_value


def test_load_invalid_spec_raises(tmp_path):
    path = tmp_path / "bad.json"
    spec = new_spec(100, 512)
    spec.version = 7
    path.write_text(spec.to_json())
    with pytest.raises(ValueError):
        load_spec_from_file(str(path))


def test_load_empty_object_raises(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("{}")
    with pytest.raises(ValueError):
        load_spec_from_file(str(path))


def test_compute_levels_rejects_zero():
    with pytest.raises(ValueError):
        compute_num_sub_keys_per_level(0)


def test_compute_levels_small_count():
    assert compute_num_sub_keys_per_level(7) == [1, 1, 7]