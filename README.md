# ringlwe

Integer arithmetic building blocks for ring learning-with-errors (RLWE)
cryptography:

- `ringlwe.uint256.Uint256`: an immutable unsigned 256-bit integer that wraps
  around modulo 2^256, with arithmetic, bitwise, shift and comparison
  operators. `uint256_max()` returns 2^256 - 1.
- `ringlwe.params.MontgomeryParams`: precomputed constants for one odd modulus
  (Montgomery inverses and Barrett numerators) for a word size of 16, 32, 64
  or 128 bits, with Barrett reduction helpers.
- `ringlwe.montgomery.MontgomeryInt`: an integer held in Montgomery form, with
  modular addition, subtraction, multiplication (plain and by precomputed
  constants), negation, fused multiply-add, exponentiation and inversion.
- `ringlwe.batch`: element-wise operations over lists of `MontgomeryInt`.
- `ringlwe.formatting.format_uint256`: renders a 256-bit value in decimal,
  octal or hexadecimal, with optional base prefix, padding and alignment.

## Installation

```
pip install ringlwe
```

The package uses only the standard library. Install the test tools with
`pip install "ringlwe[test]"`.

## Usage

### 256-bit integers

```python
from ringlwe.uint256 import Uint256, uint256_max

a = Uint256.from_parts(2000, 2)   # high 128 bits, low 128 bits
one = Uint256(1)

assert a.high() == 2000 and a.low() == 2
assert Uint256(0) - one == uint256_max()    # arithmetic wraps modulo 2**256
assert Uint256(-1) == uint256_max()         # negative ints wrap too
assert (a << 10) >> 10 == a
assert a << 256 == 0                        # shifts of 256 or more give zero
q, r = divmod(a, Uint256(7))
assert q * 7 + r == a
```

Division or modulo by zero raises `ZeroDivisionError`; a negative shift
count raises `ValueError`.

### Formatting

```python
from ringlwe.formatting import format_uint256
from ringlwe.uint256 import Uint256

format_uint256(Uint256(255), base=16, show_base=True)           # '0xff'
format_uint256(Uint256(255), base=16, uppercase=True)           # 'FF'
format_uint256(Uint256(1), base=8, show_base=True)              # '01'
format_uint256(Uint256(9), width=6, fill="_")                   # '_____9'
format_uint256(Uint256(9), width=6, fill="_", align_left=True)  # '9_____'
```

Zero never gets a base prefix. Bases other than 8, 10 and 16, or a fill that
is not a single character, raise `ValueError`.

### Montgomery arithmetic

```python
from ringlwe.params import MontgomeryParams
from ringlwe.montgomery import MontgomeryInt

params = MontgomeryParams(modulus=12289, bitsize=32)

a = MontgomeryInt.import_int(1234, params)
b = MontgomeryInt.import_int(5678, params)

assert a.mul(b, params).export_int(params) == (1234 * 5678) % 12289
assert a.add(b, params).export_int(params) == (1234 + 5678) % 12289
assert a.mod_exp(3, params).export_int(params) == pow(1234, 3, 12289)
assert a.mul(a.multiplicative_inverse(params), params).export_int(params) == 1
```

The modulus must be odd and smaller than 2^(bitsize - 2); otherwise
`MontgomeryParams` raises `ValueError`. `multiplicative_inverse` assumes a
prime modulus.

Multiplication by a fixed value can use precomputed Barrett constants:

```python
constant, constant_barrett = b.get_constant(params)
c = a.mul_constant(constant, constant_barrett, params)
assert c == a.mul(b, params)
```

`MontgomeryInt.random(prng, params)` draws a uniform value by rejection
sampling from any object with `rand8()` and `rand64()` methods returning
random bits.

### Batch operations

```python
from ringlwe import batch

xs = [MontgomeryInt.import_int(i, params) for i in range(4)]
ys = [MontgomeryInt.import_int(10 * i, params) for i in range(4)]

sums = batch.batch_add(xs, ys, params)
scaled = batch.batch_mul(xs, b, params)   # a single value applies to every element
batch.batch_sub_in_place(xs, ys, params)  # the *_in_place forms modify the list
```

Lists of different lengths raise `ValueError`.

## What this package does not do

It provides arithmetic only. There is no random number generator, no
serialization of `MontgomeryInt` values, and no keys, encryption, decryption,
polynomials or number-theoretic transforms.

## Running the tests

```
pytest
```