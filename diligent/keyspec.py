"""Leveled keys and the specification of a leveled key set."""

from __future__ import annotations

from dataclasses import dataclass, field

from .charset import ALPHA_UP
from .strgen import StrGen

DEFAULT_DELIM = "_"


@dataclass(frozen=True)
class LeveledKey:
    """A key built by joining one subkey from each level with a delimiter."""

    sub_keys: tuple[str, ...]
    delim: str = DEFAULT_DELIM

    def __post_init__(self) -> None:
        object.__setattr__(self, "sub_keys", tuple(self.sub_keys))

    @property
    def key(self) -> str:
        return self.delim.join(self.sub_keys)

    def num_levels(self) -> int:
        return len(self.sub_keys)

    def prefix(self, level: int) -> str:
        """Return the key made of the subkeys at levels 0 through ``level``."""
        if not 0 <= level < len(self.sub_keys):
            raise IndexError(f"Invalid level: {level}")
        return self.delim.join(self.sub_keys[: level + 1])

    def __str__(self) -> str:
        return self.key


@dataclass
class LeveledKeyGenSpec:
    """The subkey sets, one per level, from which a leveled key set is built."""

    sub_key_sets: list[list[str]] = field(default_factory=list)
    delim: str = DEFAULT_DELIM

    def is_valid(self) -> bool:
        sets = self.sub_key_sets
        if not sets or not sets[0]:
            return False
        sub_key_len = len(sets[0][0])
        return all(
            subset and all(len(sub_key) == sub_key_len for sub_key in subset)
            for subset in sets
        )

    def num_levels(self) -> int:
        return len(self.sub_key_sets) if self.sub_key_sets else 0

    def num_keys(self) -> int:
        if not self.sub_key_sets:
            return 0
        count = 1
        for subset in self.sub_key_sets:
            count *= len(subset)
        return count

    def key_length(self) -> int:
        if not self.sub_key_sets:
            return 0
        return self.length_of_key_prefix_at_level(self.num_levels() - 1)

    def length_of_key_prefix_at_level(self, n: int) -> int:
        """Length of a key prefix holding the subkeys of levels 0 through ``n``."""
        if not self.sub_key_sets:
            return 0
        if not 0 <= n < self.num_levels():
            raise IndexError(f"Invalid level: {n}")
        sub_key_len = len(self.sub_key_sets[0][0])
        return sub_key_len * (n + 1) + n


def new_leveled_keygen_spec(sub_key_sets: list[list[str]]) -> LeveledKeyGenSpec:
    """Build a spec from given subkey sets, raising ValueError if invalid."""
    spec = LeveledKeyGenSpec(sub_key_sets=sub_key_sets, delim=DEFAULT_DELIM)
    if not spec.is_valid():
        raise ValueError("Spec is not valid")
    return spec


def new_random_leveled_keygen_spec(
    num_sub_keys_per_level: list[int], sub_key_len: int
) -> LeveledKeyGenSpec:
    """Build a spec of unique random upper-case subkeys with the given level sizes."""
    if len(num_sub_keys_per_level) < 1:
        raise ValueError(
            f"Number of levels must be at least 1. Got {len(num_sub_keys_per_level)}"
        )
    if sub_key_len < 1:
        raise ValueError(f"subKeyLen cannot be < 1. Got {sub_key_len}")
    for level, count in enumerate(num_sub_keys_per_level):
        if count < 1:
            raise ValueError(
                f"Each level must have at least 1 key. At level {level} got {count} keys"
            )
    gen = StrGen(ALPHA_UP)
    sub_key_sets = [
        gen.random_strings_unique(sub_key_len, count) for count in num_sub_keys_per_level
    ]
    return LeveledKeyGenSpec(sub_key_sets=sub_key_sets, delim=DEFAULT_DELIM)