"""Parameters for arithmetic on integers in Montgomery representation."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field

SUPPORTED_BITSIZES = (16, 32, 64, 128)


def _mask(bits: int) -> int:
    return (1 << bits) - 1


def montgomery_inverses(modulus: int, bitsize: int) -> tuple[int, int]:
    """Return ``(inv_r, inv_modulus)`` with ``2**bitsize * inv_r - modulus * inv_modulus == 1``.

    The modulus must be odd. Both values are truncated to ``bitsize`` bits.
    """
    modulus = operator.index(modulus)
    if modulus % 2 == 0:
        raise ValueError("The modulus should be odd.")
    r = 1 << bitsize
    # Invariant: x * 2^w - y * modulus is a power of two that halves each
    # round, going from 2^w down to 1. y stays even throughout.
    x, y = 1, 0
    for _ in range(bitsize):
        if x & 1:
            x += modulus
            y += r
        x >>= 1
        y >>= 1
    int_mask = _mask(bitsize)
    return x & int_mask, y & int_mask


@dataclass(frozen=True)
class MontgomeryParams:
    """Precomputed constants for Montgomery arithmetic modulo an odd modulus.

    ``bitsize`` is the width of the machine word being modelled; products are
    held in words twice as wide. The modulus must be odd and below
    ``2**(bitsize - 2)``.
    """

    modulus: int
    bitsize: int = 64
    bitsize_bigint: int = field(init=False)
    r: int = field(init=False)
    log_modulus: int = field(init=False)
    r_mod_modulus: int = field(init=False)
    r_mod_modulus_barrett: int = field(init=False)
    inv_modulus: int = field(init=False)
    inv_r: int = field(init=False)
    inv_r_barrett: int = field(init=False)
    barrett_numerator: int = field(init=False)
    barrett_numerator_bigint: int = field(init=False)

    def __post_init__(self) -> None:
        modulus = operator.index(self.modulus)
        bitsize = operator.index(self.bitsize)
        if bitsize not in SUPPORTED_BITSIZES:
            raise ValueError(
                f"Unsupported integer size {bitsize}; expected one of "
                f"{', '.join(map(str, SUPPORTED_BITSIZES))}."
            )
        if modulus < 0 or modulus >> (bitsize - 2) != 0:
            raise ValueError(f"The modulus should be less than 2^{bitsize - 2}.")
        if modulus % 2 == 0:
            raise ValueError("The modulus should be odd.")

        r = 1 << bitsize
        r_mod_modulus = r % modulus
        inv_r, inv_modulus = montgomery_inverses(modulus, bitsize)
        values = {
            "modulus": modulus,
            "bitsize": bitsize,
            "bitsize_bigint": 2 * bitsize,
            "r": r,
            "log_modulus": modulus.bit_length(),
            "r_mod_modulus": r_mod_modulus,
            "r_mod_modulus_barrett": (r_mod_modulus << bitsize) // modulus,
            "inv_modulus": inv_modulus,
            "inv_r": inv_r,
            "inv_r_barrett": (inv_r << bitsize) // modulus,
            "barrett_numerator": r // modulus,
            "barrett_numerator_bigint": (1 << (2 * bitsize - 1)) // modulus,
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)

    @property
    def _int_mask(self) -> int:
        return _mask(self.bitsize)

    def _reduce_once(self, value: int) -> int:
        return value - self.modulus if value >= self.modulus else value

    def barrett_reduce(self, value: int) -> int:
        """Reduce a word-sized value modulo the modulus with Barrett reduction."""
        value = operator.index(value) & self._int_mask
        quotient = ((self.barrett_numerator * value) >> self.bitsize) & self._int_mask
        out = (value - quotient * self.modulus) & self._int_mask
        return self._reduce_once(out)

    def barrett_reduce_big(self, value: int) -> int:
        """Reduce a double-word value modulo the modulus.

        The value is expected to be at most a product of two reduced words.
        """
        value = operator.index(value) & _mask(self.bitsize_bigint)
        if self.bitsize == 128:
            return value % self.modulus
        shift = self.bitsize_bigint - 1
        quotient = ((self.barrett_numerator_bigint * value) >> shift) & self._int_mask
        out = ((value & self._int_mask) - quotient * self.modulus) & self._int_mask
        return self._reduce_once(out)

    def export_int(self, value: int) -> int:
        """Multiply by the inverse of R, leaving Montgomery representation."""
        value = operator.index(value) & self._int_mask
        quotient = ((self.inv_r_barrett * value) >> self.bitsize) & self._int_mask
        out = (value * self.inv_r - quotient * self.modulus) & self._int_mask
        return self._reduce_once(out)

    def serialized_size(self) -> int:
        """Number of bytes needed to serialize one reduced integer."""
        return (self.log_modulus + 7) // 8

    def does_log_n_fit(self, log_n: int) -> bool:
        """Whether ``1 << log_n`` fits in the word type."""
        return operator.index(log_n) < self.bitsize - 1