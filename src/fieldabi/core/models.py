"""Word-level primitives.

This module defines:
- `FixedWord4`: an exact four-word container for every 256-bit quantity
   (addresses, hashes, u256 payloads and event topics).

Word order
----------
Word 0 is the most significant. `from_bytes` reads four 8-byte big-endian
chunks in order, so a Keccak-256 digest maps to the same words whether it is
viewed as bytes or as a 256-bit integer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from fieldabi.constants import DIGEST_BYTES, FIXED_WORD4_LEN, U256_MAX, WORD_BITS, WORD_BYTES, WORD_MAX
from fieldabi.errors import CodecError


def check_word(word: int) -> int:
    """Return `word` if it is an int in the 64-bit word range, else raise CodecError."""
    if isinstance(word, bool) or not isinstance(word, int):
        raise CodecError(f"word must be an int, got {type(word).__name__}")
    if word < 0 or word > WORD_MAX:
        raise CodecError(f"word {word} out of range [0, {WORD_MAX}]")
    return word


@dataclass(slots=True, frozen=True)
class FixedWord4:
    """Exactly four 64-bit words."""

    words: tuple[int, int, int, int]

    def __init__(self, words: Iterable[int]) -> None:
        ws = tuple(check_word(w) for w in words)
        if len(ws) != FIXED_WORD4_LEN:
            raise CodecError(f"FixedWord4 needs {FIXED_WORD4_LEN} words, got {len(ws)}")
        object.__setattr__(self, "words", ws)

    @classmethod
    def from_bytes(cls, raw: bytes) -> FixedWord4:
        """Pack a 32-byte digest into four big-endian words."""
        if len(raw) != DIGEST_BYTES:
            raise CodecError(f"expected {DIGEST_BYTES} bytes, got {len(raw)}")
        return cls(
            int.from_bytes(raw[i : i + WORD_BYTES], "big")
            for i in range(0, DIGEST_BYTES, WORD_BYTES)
        )

    @classmethod
    def from_int(cls, value: int) -> FixedWord4:
        """Split a 256-bit unsigned integer, most significant word first."""
        if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value > U256_MAX:
            raise CodecError(f"{value!r} is not a 256-bit unsigned integer")
        return cls((value >> (WORD_BITS * i)) & WORD_MAX for i in reversed(range(FIXED_WORD4_LEN)))

    def to_bytes(self) -> bytes:
        return b"".join(w.to_bytes(WORD_BYTES, "big") for w in self.words)

    def to_int(self) -> int:
        out = 0
        for w in self.words:
            out = (out << WORD_BITS) | w
        return out

    def hex(self) -> str:
        return "0x" + self.to_bytes().hex()

    def __iter__(self) -> Iterator[int]:
        return iter(self.words)

    def __len__(self) -> int:
        return FIXED_WORD4_LEN

    def __getitem__(self, i: int) -> int:
        return self.words[i]
