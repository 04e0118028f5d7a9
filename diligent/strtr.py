"""Character-for-character string translation."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class TrSpec:
    """Pairs each input character with the replacement at the same position."""

    inputs: str
    replacements: str

    def is_valid(self) -> bool:
        return len(self.inputs) == len(self.replacements)


def new_tr_spec(inputs: str, replacements: str) -> TrSpec:
    """Build a spec, raising ValueError if the two strings differ in length."""
    spec = TrSpec(inputs, replacements)
    if not spec.is_valid():
        raise ValueError(f"Invalid translation spec: {inputs}->{replacements}")
    return spec


def new_random_tr_spec(inputs: str) -> TrSpec:
    """Build a spec whose replacements are a shuffle of ``inputs`` differing from it."""
    if len(set(inputs)) < 2:
        raise ValueError("inputs need at least two distinct characters to shuffle")
    chars = list(inputs)
    replacements = inputs
    while replacements == inputs:
        random.shuffle(chars)
        replacements = "".join(chars)
    return new_tr_spec(inputs, replacements)


class Tr:
    """Applies a translation spec to strings; unmapped characters pass through."""

    def __init__(self, spec: TrSpec) -> None:
        if not spec.is_valid():
            raise ValueError(f"Invalid translation spec: {spec.inputs}->{spec.replacements}")
        self._table = {ord(src): dst for src, dst in zip(spec.inputs, spec.replacements)}

    def apply(self, text: str) -> str:
        return text.translate(self._table)