"""Integers modulo an odd modulus, held in Montgomery representation."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Protocol

from ringlwe.params import MontgomeryParams


class RandomSource(Protocol):
    """A source of random bits as used by :meth:`MontgomeryInt.random`."""

    def rand8(self) -> int:
        """Return 8 random bits."""

    def rand64(self) -> int:
        """Return 64 random bits."""


def _word_mask(params: MontgomeryParams) -> int:
    return (1 << params.bitsize) - 1


def _bigword_mask(params: MontgomeryParams) -> int:
    return (1 << params.bitsize_bigint) - 1


def _reduce_once(value: int, params: MontgomeryParams) -> int:
    return value - params.modulus if value >= params.modulus else value


def _random_word(log_modulus: int, prng: RandomSource, params: MontgomeryParams) -> int:
    """Draw ``log_modulus`` random bits, at most 64 per call to the source."""
    mask = _word_mask(params)
    max_bits_per_step = min(params.bitsize, 64)
    bits_required = log_modulus
    result = 0
    while bits_required > 0:
        if bits_required <= 8:
            rand_bits = operator.index(prng.rand8()) & mask
            needed = rand_bits & ((1 << bits_required) - 1)
            result = ((result << bits_required) + needed) & mask
            break
        rand_bits = operator.index(prng.rand64()) & mask
        bits_to_extract = min(bits_required, max_bits_per_step)
        needed = rand_bits & ((1 << bits_to_extract) - 1)
        result = ((result << bits_to_extract) + needed) & mask
        bits_required -= bits_to_extract
    return result


@dataclass(frozen=True)
class MontgomeryInt:
    """An integer ``a`` stored as ``a * R mod modulus`` with ``R = 2**bitsize``.

    ``value`` is the Montgomery representation itself; use :meth:`import_int`
    to convert an ordinary integer. Instances are immutable and every
    operation returns a new instance.
    """

    value: int

    @classmethod
    def import_int(cls, n: int, params: MontgomeryParams) -> MontgomeryInt:
        """Convert an ordinary word-sized integer into Montgomery representation."""
        mask = _word_mask(params)
        n = operator.index(n) & mask
        quotient = ((params.r_mod_modulus_barrett * n) >> params.bitsize) & mask
        result = (n * params.r_mod_modulus - quotient * params.modulus) & mask
        return cls(_reduce_once(result, params))

    @classmethod
    def zero(cls, params: MontgomeryParams) -> MontgomeryInt:
        """The value 0."""
        return cls(0)

    @classmethod
    def one(cls, params: MontgomeryParams) -> MontgomeryInt:
        """The value 1, whose representation is ``R mod modulus``."""
        return cls(params.r_mod_modulus)

    @classmethod
    def random(cls, prng: RandomSource, params: MontgomeryParams) -> MontgomeryInt:
        """A uniformly random value drawn by rejection sampling from ``prng``."""
        candidate = _random_word(params.log_modulus, prng, params)
        while candidate >= params.modulus:
            candidate = _random_word(params.log_modulus, prng, params)
        return cls(candidate)

    def export_int(self, params: MontgomeryParams) -> int:
        """Convert back to an ordinary integer in ``[0, modulus)``."""
        return params.export_int(self.value)

    def get_constant(self, params: MontgomeryParams) -> tuple[int, int]:
        """Return ``(constant, constant_barrett)`` for :meth:`mul_constant`."""
        constant = self.export_int(params)
        constant_barrett = ((constant << params.bitsize) // params.modulus) & _word_mask(
            params
        )
        return constant, constant_barrett

    def mul(self, other: MontgomeryInt, params: MontgomeryParams) -> MontgomeryInt:
        """Modular multiplication by Montgomery reduction."""
        mask = _word_mask(params)
        product = self.value * other.value
        u = ((product & mask) * params.inv_modulus) & mask
        t = (product + params.modulus * u) & _bigword_mask(params)
        t_msb = (t >> params.bitsize) & mask
        return MontgomeryInt(_reduce_once(t_msb, params))

    def mul_constant(
        self, constant: int, constant_barrett: int, params: MontgomeryParams
    ) -> MontgomeryInt:
        """Multiply by a constant precomputed with :meth:`get_constant`."""
        mask = _word_mask(params)
        quotient = ((constant_barrett * self.value) >> params.bitsize) & mask
        result = (self.value * constant - quotient * params.modulus) & mask
        return MontgomeryInt(_reduce_once(result, params))

    def add(self, other: MontgomeryInt, params: MontgomeryParams) -> MontgomeryInt:
        """Modular addition."""
        return MontgomeryInt(params.barrett_reduce(self.value + other.value))

    def sub(self, other: MontgomeryInt, params: MontgomeryParams) -> MontgomeryInt:
        """Modular subtraction."""
        complement = (params.modulus - other.value) & _word_mask(params)
        return MontgomeryInt(params.barrett_reduce(self.value + complement))

    def negate(self, params: MontgomeryParams) -> MontgomeryInt:
        """Modular negation, ``modulus - value``."""
        return MontgomeryInt((params.modulus - self.value) & _word_mask(params))

    def lazy_add(self, other: MontgomeryInt, params: MontgomeryParams) -> MontgomeryInt:
        """Add without reducing; the result must be Barrett-reduced before use."""
        return MontgomeryInt((self.value + other.value) & _word_mask(params))

    def lazy_sub(self, other: MontgomeryInt, params: MontgomeryParams) -> MontgomeryInt:
        """Subtract without reducing; the result must be Barrett-reduced before use."""
        mask = _word_mask(params)
        return MontgomeryInt((self.value + ((params.modulus - other.value) & mask)) & mask)

    def fused_mul_add(
        self, a: MontgomeryInt, b: MontgomeryInt, params: MontgomeryParams
    ) -> MontgomeryInt:
        """Return ``self + a * b`` with a single Montgomery reduction."""
        mask = _word_mask(params)
        big_mask = _bigword_mask(params)
        t = (params.r_mod_modulus * self.value + a.value * b.value) & big_mask
        u = ((t & mask) * params.inv_modulus) & mask
        t = (t + params.modulus * u) & big_mask
        t_msb = (t >> params.bitsize) & mask
        return MontgomeryInt(_reduce_once(t_msb, params))

    def fused_mul_constant_add(
        self,
        a: MontgomeryInt,
        constant: int,
        constant_barrett: int,
        params: MontgomeryParams,
    ) -> MontgomeryInt:
        """Return ``self + a * c`` where ``c`` was precomputed with :meth:`get_constant`."""
        mask = _word_mask(params)
        big_mask = _bigword_mask(params)
        estimate = (
            constant_barrett * a.value + params.barrett_numerator * self.value
        ) & big_mask
        quotient = (estimate >> params.bitsize) & mask
        result = (self.value + a.value * constant - quotient * params.modulus) & mask
        return MontgomeryInt(_reduce_once(result, params))

    def mod_exp(self, exponent: int, params: MontgomeryParams) -> MontgomeryInt:
        """Raise to a non-negative power by square-and-multiply."""
        exponent = operator.index(exponent)
        if exponent < 0:
            raise ValueError("The exponent must be non-negative.")
        result = MontgomeryInt.one(params)
        base = self
        while exponent > 0:
            if exponent & 1:
                result = result.mul(base, params)
            base = base.mul(base, params)
            exponent >>= 1
        return result

    def multiplicative_inverse(self, params: MontgomeryParams) -> MontgomeryInt:
        """The inverse modulo a prime modulus, via Fermat's little theorem."""
        return self.mod_exp(params.modulus - 2, params)