"""Generation of the keys that make up a leveled key set."""

from __future__ import annotations

from itertools import product

from .keyspec import DEFAULT_DELIM, LeveledKey, LeveledKeyGenSpec


def _block_sizes(sub_key_sets: list[list[str]]) -> list[int]:
    """For each level, the number of keys sharing any one prefix at that level."""
    sizes = []
    block = 1
    for subset in reversed(sub_key_sets):
        sizes.append(block)
        block *= len(subset)
    sizes.reverse()
    return sizes


class LeveledKeyGen:
    """Produces the keys of a leveled key set in a fixed logical order."""

    def __init__(self, spec: LeveledKeyGenSpec | None) -> None:
        if spec is None:
            raise ValueError("Spec must not be None")
        if not spec.is_valid():
            raise ValueError("Spec validation failed")
        self._sub_key_sets = spec.sub_key_sets
        self._sub_key_len = len(self._sub_key_sets[0][0])
        self._num_keys = spec.num_keys()
        self._block_sizes = _block_sizes(self._sub_key_sets)
        self._delim = DEFAULT_DELIM

    def _check_level(self, n: int) -> None:
        if not 0 <= n < self.num_levels():
            raise IndexError(f"Invalid level: {n}")

    def num_levels(self) -> int:
        return len(self._sub_key_sets)

    def num_keys(self) -> int:
        return self._num_keys

    def key_length(self) -> int:
        """Length of every generated key."""
        return self.length_of_key_prefix_at_level(self.num_levels() - 1)

    def length_of_key_prefix_at_level(self, n: int) -> int:
        """Length of a key prefix holding the subkeys of levels 0 through ``n``."""
        self._check_level(n)
        return self._sub_key_len * (n + 1) + n

    def block_size_at_level(self, n: int) -> int:
        """Number of keys that start with any one prefix ending at level ``n``."""
        self._check_level(n)
        return self._block_sizes[n]

    def sub_key_sets(self) -> list[list[str]]:
        return self._sub_key_sets

    def sub_key_set(self, n: int) -> list[str]:
        self._check_level(n)
        return self._sub_key_sets[n]

    def key(self, n: int) -> LeveledKey:
        """Return the ``n``-th key in generation order."""
        if not 0 <= n < self._num_keys:
            raise IndexError(
                f"Attempt to access key at index {n} in keyset with {self._num_keys} keys"
            )
        sub_keys = []
        for subset, block in zip(self._sub_key_sets, self._block_sizes):
            index, n = divmod(n, block)
            sub_keys.append(subset[index])
        return LeveledKey(tuple(sub_keys), self._delim)

    def all_keys(self) -> list[LeveledKey]:
        """Return every key of the set, in generation order."""
        return [LeveledKey(combo, self._delim) for combo in product(*self._sub_key_sets)]