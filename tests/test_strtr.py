import pytest

from diligent.charset import ALPHA_UP
from diligent.strtr import Tr, TrSpec, new_random_tr_spec, new_tr_spec


def test_spec_validation():
    assert TrSpec(inputs="ABC", replacements="XYZ").is_valid() is True
    assert TrSpec(inputs="ABC", replacements="XY").is_valid() is False


def test_new_tr_spec_rejects_invalid():
    with pytest.raises(ValueError):
        new_tr_spec("ABC", "XY")


def test_specific_tr1():
    replacements = "QWERTYUIOPLKJHGFDSAZXCVBNM"
    tr = Tr(new_tr_spec(ALPHA_UP, replacements))
    assert tr.apply(ALPHA_UP) == replacements


def test_specific_tr2():
    tr = Tr(new_tr_spec("ABCD", "WXYZ"))
    assert tr.apply("CD_AB!!?") == "YZ_WX!!?"


def test_random_tr():
    trs = new_random_tr_spec(ALPHA_UP)
    assert trs.inputs != trs.replacements
    assert sorted(trs.replacements) == sorted(ALPHA_UP)
    tr = Tr(trs)
    assert tr.apply(ALPHA_UP) == trs.replacements


def test_random_tr_needs_distinct_chars():
    with pytest.raises(ValueError):
        new_random_tr_spec("A")


def test_tr_rejects_invalid_spec():
    with pytest.raises(ValueError):
        Tr(TrSpec("AB", "X"))