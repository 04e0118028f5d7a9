"""Random string generation over a fixed character set."""

from __future__ import annotations

import random


class StrGen:
    """Generates random strings drawn from a character set."""

    def __init__(self, charset: str, rng: random.Random | None = None) -> None:
        if not charset:
            raise ValueError("charset cannot be empty")
        self._charset = charset
        self._rng = rng if rng is not None else random.Random()

    @property
    def charset(self) -> str:
        return self._charset

    def random_string(self, length: int) -> str:
        """Return a random string of exactly ``length`` characters."""
        if length < 0:
            raise ValueError("length of strings cannot be negative")
        return "".join(self._rng.choices(self._charset, k=length))

    def random_strings_unique(self, length: int, num: int) -> list[str]:
        """Return ``num`` distinct random strings, each of ``length`` characters."""
        if length < 0:
            raise ValueError("length of strings cannot be negative")
        if num < 0:
            raise ValueError("number of strings cannot be negative")
        universe = len(self._charset) ** length
        if num > universe:
            raise ValueError(
                f"not possible to generate {num} unique fixed length strings of length {length}"
            )
        found: set[str] = set()
        while len(found) < num:
            found.add(self.random_string(length))
        return list(found)