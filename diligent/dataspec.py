"""Specification of the data generated for the benchmark schema."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .charset import ALPHA_UP
from .keyspec import LeveledKeyGenSpec, new_random_leveled_keygen_spec
from .strgen import StrGen
from .strtr import TrSpec, new_random_tr_spec

SPEC_TYPE = "diligent/schema-a"
CURRENT_SPEC_VERSION = 1


@dataclass
class DataSpec:
    """Describes how to generate records for the schema:

    pk, uniq, small_grp, large_grp, same (all varchar), seq_num int,
    ts timestamp, payload varchar.
    """

    spec_type: str = ""
    version: int = 0
    record_size: int = 0
    key_gen_spec: LeveledKeyGenSpec | None = None
    uniq_tr_spec: TrSpec | None = None
    small_grp_tr_spec: TrSpec | None = None
    large_grp_tr_spec: TrSpec | None = None
    fixed_value: str = ""

    def is_valid(self) -> bool:
        if self.spec_type != SPEC_TYPE:
            return False
        if self.version != CURRENT_SPEC_VERSION:
            return False
        if self.record_size <= 0:
            return False
        if self.key_gen_spec is None or not self.key_gen_spec.is_valid():
            return False
        for tr_spec in (self.uniq_tr_spec, self.small_grp_tr_spec, self.large_grp_tr_spec):
            if tr_spec is None or not tr_spec.is_valid():
                return False
        return len(self.fixed_value) == self.key_gen_spec.key_length()

    def _to_dict(self) -> dict[str, Any]:
        def tr_dict(spec: TrSpec | None) -> dict[str, str] | None:
            if spec is None:
                return None
            return {"Inputs": spec.inputs, "Replacements": spec.replacements}

        key_gen = None
        if self.key_gen_spec is not None:
            key_gen = {
                "SubKeySets": self.key_gen_spec.sub_key_sets,
                "Delim": self.key_gen_spec.delim,
            }
        return {
            "SpecType": self.spec_type,
            "Version": self.version,
            "RecordSize": self.record_size,
            "KeyGenSpec": key_gen,
            "UniqTrSpec": tr_dict(self.uniq_tr_spec),
            "SmallGrpTrSpec": tr_dict(self.small_grp_tr_spec),
            "LargeGrpTrSpec": tr_dict(self.large_grp_tr_spec),
            "FixedValue": self.fixed_value,
        }

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> DataSpec:
        def tr_spec(raw: dict[str, str] | None) -> TrSpec | None:
            if raw is None:
                return None
            return TrSpec(raw.get("Inputs", ""), raw.get("Replacements", ""))

        raw_kg = data.get("KeyGenSpec")
        key_gen = None
        if raw_kg is not None:
            key_gen = LeveledKeyGenSpec(
                sub_key_sets=[list(s) for s in (raw_kg.get("SubKeySets") or [])],
                delim=raw_kg.get("Delim", ""),
            )
        return cls(
            spec_type=data.get("SpecType", ""),
            version=data.get("Version", 0),
            record_size=data.get("RecordSize", 0),
            key_gen_spec=key_gen,
            uniq_tr_spec=tr_spec(data.get("UniqTrSpec")),
            small_grp_tr_spec=tr_spec(data.get("SmallGrpTrSpec")),
            large_grp_tr_spec=tr_spec(data.get("LargeGrpTrSpec")),
            fixed_value=data.get("FixedValue", ""),
        )

    def to_json(self) -> str:
        """Serialise the spec as indented JSON."""
        return json.dumps(self._to_dict(), indent=4)

    def save_to_file(self, file_name: str) -> None:
        """Write the spec to a new file; raises FileExistsError if it already exists."""
        with open(file_name, "x", encoding="utf-8") as handle:
            handle.write(self.to_json())


def load_spec_from_file(file_name: str) -> DataSpec:
    """Read a spec from a JSON file, raising ValueError if it is not a valid spec."""
    with open(file_name, encoding="utf-8") as handle:
        data = json.load(handle)
    try:
        spec = DataSpec._from_dict(data)
        valid = spec.is_valid()
    except (AttributeError, TypeError, IndexError) as exc:
        raise ValueError("file did not contain a valid spec") from exc
    if not valid:
        raise ValueError("file did not contain a valid spec")
    return spec


def compute_num_sub_keys_per_level(record_count: int) -> list[int]:
    """Sizes of three key levels whose product is ``record_count`` rounded down."""
    if record_count < 1:
        raise ValueError(f"Invalid record count: {record_count}")
    if record_count < 10:
        levels = [1, 1, record_count]
    elif record_count < 100:
        record_count -= record_count % 10
        levels = [1, record_count // 10, 10]
    elif record_count < 1000:
        record_count -= record_count % 100
        levels = [record_count // 100, 10, 10]
    elif record_count < 10_000:
        record_count -= record_count % 1000
        levels = [record_count // 1000, 100, 10]
    else:
        record_count -= record_count % 10_000
        levels = [record_count // 10_000, 1000, 10]

    if not levels or any(n < 1 for n in levels):
        raise RuntimeError(f"Invalid subKeysPerLevel spec generated: {levels}")
    total = 1
    for n in levels:
        total *= n
    if total != record_count:
        raise RuntimeError(
            f"KeySet size mismatch. Expected {record_count}, Got {total}, "
            f"numSubKeysPerLevel={levels}"
        )
    return levels


def new_spec(record_count: int, record_size: int) -> DataSpec:
    """Build a random spec for about ``record_count`` records of ``record_size`` bytes."""
    kg_spec = new_random_leveled_keygen_spec(compute_num_sub_keys_per_level(record_count), 5)
    gen = StrGen(ALPHA_UP)
    return DataSpec(
        spec_type=SPEC_TYPE,
        version=CURRENT_SPEC_VERSION,
        record_size=record_size,
        key_gen_spec=kg_spec,
        uniq_tr_spec=new_random_tr_spec(ALPHA_UP),
        small_grp_tr_spec=new_random_tr_spec(ALPHA_UP),
        large_grp_tr_spec=new_random_tr_spec(ALPHA_UP),
        fixed_value=gen.random_string(kg_spec.key_length()),
    )