"""Element-wise operations over lists of Montgomery integers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Union

from ringlwe.montgomery import MontgomeryInt
from ringlwe.params import MontgomeryParams

Operand = Union[MontgomeryInt, Sequence[MontgomeryInt]]
Constant = Union[int, Sequence[int]]

_SIZE_ERROR = "Input vectors are not of same size"


def _check_sizes(*sequences: Sequence[object]) -> None:
    first = len(sequences[0])
    if any(len(seq) != first for seq in sequences[1:]):
        raise ValueError(_SIZE_ERROR)


def _pairwise(values: Sequence[MontgomeryInt], other: Operand) -> list[MontgomeryInt]:
    """Return ``other`` as a list matching ``values``, broadcasting a scalar."""
    if isinstance(other, MontgomeryInt):
        return [other] * len(values)
    _check_sizes(values, other)
    return list(other)


def _constants(
    values: Sequence[MontgomeryInt], constant: Constant, constant_barrett: Constant
) -> list[tuple[int, int]]:
    scalar_constant = isinstance(constant, int)
    scalar_barrett = isinstance(constant_barrett, int)
    if scalar_constant != scalar_barrett:
        raise TypeError("constant and constant_barrett must both be scalars or both sequences")
    if scalar_constant:
        return [(constant, constant_barrett)] * len(values)
    _check_sizes(values, constant, constant_barrett)
    return list(zip(constant, constant_barrett))


def batch_add_in_place(
    values: MutableSequence[MontgomeryInt], other: Operand, params: MontgomeryParams
) -> None:
    """Add ``other`` (a list or a scalar) to every element of ``values``."""
    operands = _pairwise(values, other)
    values[:] = [a.add(b, params) for a, b in zip(values, operands)]


def batch_add(
    in1: Sequence[MontgomeryInt], in2: Operand, params: MontgomeryParams
) -> list[MontgomeryInt]:
    """Element-wise sum of ``in1`` and ``in2`` (a list or a scalar)."""
    out = list(in1)
    batch_add_in_place(out, in2, params)
    return out


def batch_sub_in_place(
    values: MutableSequence[MontgomeryInt], other: Operand, params: MontgomeryParams
) -> None:
    """Subtract ``other`` (a list or a scalar) from every element of ``values``."""
    operands = _pairwise(values, other)
    values[:] = [a.sub(b, params) for a, b in zip(values, operands)]


def batch_sub(
    in1: Sequence[MontgomeryInt], in2: Operand, params: MontgomeryParams
) -> list[MontgomeryInt]:
    """Element-wise difference of ``in1`` and ``in2`` (a list or a scalar)."""
    out = list(in1)
    batch_sub_in_place(out, in2, params)
    return out


def batch_mul_in_place(
    values: MutableSequence[MontgomeryInt], other: Operand, params: MontgomeryParams
) -> None:
    """Multiply every element of ``values`` by ``other`` (a list or a scalar)."""
    operands = _pairwise(values, other)
    values[:] = [a.mul(b, params) for a, b in zip(values, operands)]


def batch_mul(
    in1: Sequence[MontgomeryInt], in2: Operand, params: MontgomeryParams
) -> list[MontgomeryInt]:
    """Element-wise product of ``in1`` and ``in2`` (a list or a scalar)."""
    out = list(in1)
    batch_mul_in_place(out, in2, params)
    return out


def batch_mul_constant_in_place(
    values: MutableSequence[MontgomeryInt],
    constant: Constant,
    constant_barrett: Constant,
    params: MontgomeryParams,
) -> None:
    """Multiply ``values`` by precomputed constants (lists or scalars)."""
    pairs = _constants(values, constant, constant_barrett)
    values[:] = [a.mul_constant(c, cb, params) for a, (c, cb) in zip(values, pairs)]


def batch_mul_constant(
    in1: Sequence[MontgomeryInt],
    constant: Constant,
    constant_barrett: Constant,
    params: MontgomeryParams,
) -> list[MontgomeryInt]:
    """Element-wise product of ``in1`` with precomputed constants."""
    out = list(in1)
    batch_mul_constant_in_place(out, constant, constant_barrett, params)
    return out


def batch_fused_mul_add_in_place(
    values: MutableSequence[MontgomeryInt],
    in2: Sequence[MontgomeryInt],
    in3: Sequence[MontgomeryInt],
    params: MontgomeryParams,
) -> None:
    """Replace each ``values[i]`` by ``values[i] + in2[i] * in3[i]``."""
    _check_sizes(values, in2, in3)
    values[:] = [c.fused_mul_add(a, b, params) for c, a, b in zip(values, in2, in3)]


def batch_fused_mul_add(
    in1: Sequence[MontgomeryInt],
    in2: Sequence[MontgomeryInt],
    in3: Sequence[MontgomeryInt],
    params: MontgomeryParams,
) -> list[MontgomeryInt]:
    """Element-wise ``in1 + in2 * in3``."""
    out = list(in1)
    batch_fused_mul_add_in_place(out, in2, in3, params)
    return out


def batch_fused_mul_constant_add_in_place(
    values: MutableSequence[MontgomeryInt],
    in2: Sequence[MontgomeryInt],
    constant: Sequence[int],
    constant_barrett: Sequence[int],
    params: MontgomeryParams,
) -> None:
    """Replace each ``values[i]`` by ``values[i] + in2[i] * constant[i]``."""
    _check_sizes(values, in2, constant, constant_barrett)
    values[:] = [
        c.fused_mul_constant_add(a, k, kb, params)
        for c, a, k, kb in zip(values, in2, constant, constant_barrett)
    ]


def batch_fused_mul_constant_add(
    in1: Sequence[MontgomeryInt],
    in2: Sequence[MontgomeryInt],
    constant: Sequence[int],
    constant_barrett: Sequence[int],
    params: MontgomeryParams,
) -> list[MontgomeryInt]:
    """Element-wise ``in1 + in2 * constant`` with precomputed constants."""
    out = list(in1)
    batch_fused_mul_constant_add_in_place(out, in2, constant, constant_barrett, params)
    return out