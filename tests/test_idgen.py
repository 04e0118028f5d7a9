import string
from unittest import mock

from diligent.idgen import generate_id16


def test_id_has_sixteen_uppercase_hex_chars():
    ident = generate_id16()
    assert len(ident) == 16
    assert set(ident) <= set(string.hexdigits.upper())


def test_same_instant_gives_same_id():
    with mock.patch("diligent.idgen.time.time_ns", return_value=1_000_000):
        first = generate_id16()
        second = generate_id16()
    assert first == second


def test_different_instants_give_different_ids():
    with mock.patch("diligent.idgen.time.time_ns", return_value=1_000_000):
        first = generate_id16()
    with mock.patch("diligent.idgen.time.time_ns", return_value=2_000_000):
        second = generate_id16()
    assert first != second
    assert len(first) == len(second) == 16