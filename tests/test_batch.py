import random

import pytest

from ringlwe.batch import (
    batch_add,
    batch_add_in_place,
    batch_fused_mul_add,
    batch_fused_mul_add_in_place,
    batch_fused_mul_constant_add,
    batch_fused_mul_constant_add_in_place,
    batch_mul,
    batch_mul_constant,
    batch_mul_constant_in_place,
    batch_mul_in_place,
    batch_sub,
    batch_sub_in_place,
)
from ringlwe.montgomery import MontgomeryInt
from ringlwe.params import MontgomeryParams

PARAM_CASES = [
    (12289, 16),
    (3329, 32),
    ((1 << 59) - 55, 64),
    ((1 << 100) - 15, 128),
]

LENGTHS = [1, 2, 7, 32, 500]


class _SeededSource:
    def __init__(self, seed):
        self._rng = random.Random(seed)

    def rand8(self):
        return self._rng.getrandbits(8)

    def rand64(self):
        return self._rng.getrandbits(64)


@pytest.fixture(params=PARAM_CASES, ids=lambda case: f"{case[1]}bit")
def params(request):
    modulus, bitsize = request.param
    return MontgomeryParams(modulus, bitsize)


def _random_list(source, params, length):
    return [MontgomeryInt.random(source, params) for _ in range(length)]


def _exported(values, params):
    return [v.export_int(params) for v in values]


@pytest.mark.parametrize("length", LENGTHS)
def test_batch_operations_match_elementwise(params, length):
    source = _SeededSource(length)
    a = _random_list(source, params, length)
    b = _random_list(source, params, length)
    c = _random_list(source, params, length)
    scalar = MontgomeryInt.random(source, params)
    scalar_constant, scalar_barrett = scalar.get_constant(params)
    b_constants = [x.get_constant(params) for x in b]
    b_constant = [k for k, _ in b_constants]
    b_barrett = [kb for _, kb in b_constants]

    expected_add = [x.add(y, params) for x, y in zip(a, b)]
    expected_sub = [x.sub(y, params) for x, y in zip(a, b)]
    expected_mul = [x.mul(y, params) for x, y in zip(a, b)]
    expected_fma = [z.add(x.mul(y, params), params) for x, y, z in zip(a, b, c)]
    expected_add_scalar = [x.add(scalar, params) for x in a]
    expected_sub_scalar = [x.sub(scalar, params) for x in a]
    expected_mul_scalar = [x.mul(scalar, params) for x in a]

    pairs = [
        (batch_add(a, b, params), expected_add),
        (batch_sub(a, b, params), expected_sub),
        (batch_mul(a, b, params), expected_mul),
        (batch_fused_mul_add(c, a, b, params), expected_fma),
        (batch_fused_mul_constant_add(c, a, b_constant, b_barrett, params), expected_fma),
        (batch_mul_constant(a, b_constant, b_barrett, params), expected_mul),
        (batch_add(a, scalar, params), expected_add_scalar),
        (batch_sub(a, scalar, params), expected_sub_scalar),
        (batch_mul(a, scalar, params), expected_mul_scalar),
        (
            batch_mul_constant(a, scalar_constant, scalar_barrett, params),
            expected_mul_scalar,
        ),
    ]
    for actual, expected in pairs:
        assert len(actual) == len(expected)
        assert _exported(actual, params) == _exported(expected, params)


def test_batch_results_against_plain_arithmetic(params):
    modulus = params.modulus
    xs = [0, 1, 5, modulus - 1, modulus // 2]
    ys = [3, modulus - 2, 7, modulus - 1, 11]
    zs = [2, 4, 6, 8, 10]
    a = [MontgomeryInt.import_int(x, params) for x in xs]
    b = [MontgomeryInt.import_int(y, params) for y in ys]
    c = [MontgomeryInt.import_int(z, params) for z in zs]
    assert _exported(batch_add(a, b, params), params) == [
        (x + y) % modulus for x, y in zip(xs, ys)
    ]
    assert _exported(batch_sub(a, b, params), params) == [
        (x - y) % modulus for x, y in zip(xs, ys)
    ]
    assert _exported(batch_mul(a, b, params), params) == [
        (x * y) % modulus for x, y in zip(xs, ys)
    ]
    assert _exported(batch_fused_mul_add(c, a, b, params), params) == [
        (z + x * y) % modulus for x, y, z in zip(xs, ys, zs)
    ]


def test_batch_does_not_modify_inputs(params):
    source = _SeededSource(3)
    a = _random_list(source, params, 5)
    b = _random_list(source, params, 5)
    a_copy = list(a)
    batch_mul(a, b, params)
    assert a == a_copy


def test_in_place_variants_update_list(params):
    source = _SeededSource(4)
    a = _random_list(source, params, 6)
    b = _random_list(source, params, 6)
    c = _random_list(source, params, 6)
    scalar = MontgomeryInt.random(source, params)
    constants = [x.get_constant(params) for x in b]
    b_constant = [k for k, _ in constants]
    b_barrett = [kb for _, kb in constants]

    values = list(a)
    batch_add_in_place(values, b, params)
    assert values == batch_add(a, b, params)

    values = list(a)
    batch_sub_in_place(values, scalar, params)
    assert values == batch_sub(a, scalar, params)

    values = list(a)
    batch_mul_in_place(values, b, params)
    assert values == batch_mul(a, b, params)

    values = list(a)
    batch_mul_constant_in_place(values, b_constant, b_barrett, params)
    assert _exported(values, params) == _exported(batch_mul(a, b, params), params)

    values = list(c)
    batch_fused_mul_add_in_place(values, a, b, params)
    assert values == batch_fused_mul_add(c, a, b, params)

    values = list(c)
    batch_fused_mul_constant_add_in_place(values, a, b_constant, b_barrett, params)
    assert _exported(values, params) == _exported(
        batch_fused_mul_add(c, a, b, params), params
    )


@pytest.mark.parametrize("length_a, length_b", [(1, 2), (7, 32), (500, 2), (32, 1)])
def test_mismatched_sizes_raise(params, length_a, length_b):
    zero = MontgomeryInt.zero(params)
    a = [zero] * length_a
    b = [zero] * length_b
    a_constant = [0] * length_a
    b_constant = [0] * length_b
    calls = [
        lambda: batch_add(a, b, params),
        lambda: batch_add_in_place(list(a), b, params),
        lambda: batch_sub(a, b, params),
        lambda: batch_sub_in_place(list(a), b, params),
        lambda: batch_mul(a, b, params),
        lambda: batch_mul_in_place(list(a), b, params),
        lambda: batch_mul_constant(a, b_constant, b_constant, params),
        lambda: batch_mul_constant_in_place(list(a), b_constant, b_constant, params),
        lambda: batch_mul_constant_in_place(list(a), a_constant, b_constant, params),
    ]
    for call in calls:
        with pytest.raises(ValueError, match="Input vectors are not of same size"):
            call()


@pytest.mark.parametrize(
    "length_a, length_b, length_c", [(1, 1, 2), (2, 7, 7), (7, 7, 32), (1, 2, 7)]
)
def test_mismatched_fused_sizes_raise(params, length_a, length_b, length_c):
    zero = MontgomeryInt.zero(params)
    a = [zero] * length_a
    b = [zero] * length_b
    b_constant = [0] * length_b
    c = [zero] * length_c
    with pytest.raises(ValueError, match="Input vectors are not of same size"):
        batch_fused_mul_add_in_place(c, a, b, params)
    with pytest.raises(ValueError, match="Input vectors are not of same size"):
        batch_fused_mul_constant_add_in_place(c, a, b_constant, b_constant, params)


def test_failed_in_place_leaves_values_untouched(params):
    one = MontgomeryInt.one(params)
    values = [one, one, one]
    with pytest.raises(ValueError):
        batch_add_in_place(values, [one, one], params)
    assert values == [one, one, one]


def test_mixed_scalar_and_list_constants_rejected(params):
    one = MontgomeryInt.one(params)
    with pytest.raises(TypeError):
        batch_mul_constant([one], 1, [1], params)