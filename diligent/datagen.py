"""Deterministic record generation from a data spec."""

from __future__ import annotations

import itertools
import threading
import time
from dataclasses import dataclass

from .charset import ALPHA_UP
from .dataspec import DataSpec
from .keygen import LeveledKeyGen
from .strgen import StrGen
from .strtr import Tr


@dataclass
class Record:
    """One row of the benchmark schema."""

    pk: str
    uniq: str
    small_grp: str
    large_grp: str
    fixed_value: str
    seq_num: int
    time_stamp: int
    payload: str


class DataGen:
    """Generates the records described by a DataSpec."""

    def __init__(self, spec: DataSpec) -> None:
        if not spec.is_valid():
            raise ValueError("Invalid spec for DataGen")
        kg_spec = spec.key_gen_spec
        non_payload_size = (
            kg_spec.key_length() * 2
            + kg_spec.length_of_key_prefix_at_level(1)
            + kg_spec.length_of_key_prefix_at_level(0)
            + len(spec.fixed_value)
            + 4
            + 8
        )
        self.record_size = spec.record_size
        self.payload_size = max(spec.record_size - non_payload_size, 1)
        self._key_gen = LeveledKeyGen(kg_spec)
        self._uniq_tr = Tr(spec.uniq_tr_spec)
        self._small_grp_tr = Tr(spec.small_grp_tr_spec)
        self._large_grp_tr = Tr(spec.large_grp_tr_spec)
        self._fixed_value = spec.fixed_value
        self._seq = itertools.count(1)
        self._seq_lock = threading.Lock()
        self._payload_gen = StrGen(ALPHA_UP)

    def num_records(self) -> int:
        return self._key_gen.num_keys()

    def key(self, n: int) -> str:
        return str(self._key_gen.key(n))

    def uniq(self, n: int) -> str:
        return self._uniq_tr.apply(str(self._key_gen.key(n)))

    def small_grp(self, n: int) -> str:
        return self._small_grp_tr.apply(self._key_gen.key(n).prefix(1))

    def large_grp(self, n: int) -> str:
        return self._large_grp_tr.apply(self._key_gen.key(n).prefix(0))

    def fixed_value(self) -> str:
        return self._fixed_value

    def random_payload(self) -> str:
        return self._payload_gen.random_string(self.payload_size)

    def _next_seq(self) -> int:
        with self._seq_lock:
            return next(self._seq)

    def record(self, n: int) -> Record:
        """Build record ``n``, assigning it the next sequence number."""
        key = self._key_gen.key(n)
        pk = str(key)
        return Record(
            pk=pk,
            uniq=self._uniq_tr.apply(pk),
            small_grp=self._small_grp_tr.apply(key.prefix(1)),
            large_grp=self._large_grp_tr.apply(key.prefix(0)),
            fixed_value=self._fixed_value,
            seq_num=self._next_seq(),
            time_stamp=int(time.time()),
            payload=self.random_payload(),
        )