# cfsolve

Small solvers for classic programming-contest puzzles: lucky numbers, primes,
string transforms, sequence checks and name registries. Each solver is a plain
function that takes Python values and returns the answer. It does not read or
print anything. A small command-line tool runs four of the solvers on standard
input.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library overview

### `cfsolve.numbers`

- `lucky_digit_sum(n)` gives the smallest number, as a string, made only of
  the digits 4 and 7 whose digits add up to `n`. It returns `None` when there
  is no such number and raises `ValueError` for a negative `n`.
- `is_almost_lucky(n)` tells whether `n` is divisible by one of 4, 7, 44, 47,
  77, 444, 447, 474, 477, 744 or 777.
- `least_super_lucky(n)` gives the smallest number not below `n` that has as
  many 4s as 7s and no other digits. It returns `0` for `n <= 0`. It only
  looks at numbers of up to twelve digits and raises `ValueError` beyond that.
- `survives_zero_removal(a, b)` tells whether `a + b` still equals the sum
  once every zero digit is erased from `a`, `b` and the sum. It raises
  `ValueError` for negative operands.
- `can_split_watermelon(w)` tells whether `w` splits into two positive even
  parts.
- `flagstones_needed(n, m, a)` counts the `a × a` stones needed to cover an
  `n × m` rectangle. It raises `ValueError` when `a` is not positive.

### `cfsolve.primes`

- `sieve(limit)` lists the primes below `limit`.
- `noldbach(n, k)` tells whether at least `k` primes up to `n` equal one plus
  the sum of two neighbouring primes.
- `count_almost_primes(n)` counts the numbers from 1 to `n` with exactly two
  distinct prime divisors.
- `is_next_prime(n, m)` tells whether `m` is the prime right after the prime
  `n`. It raises `ValueError` when `n` is not prime.

### `cfsolve.strings`

- `lucky_string(n)` gives the lexicographically smallest lucky string of
  length `n`, which is `abcd` repeated and cut to length.
- `compare_ignore_case(first, second)` compares two strings without regard
  to ASCII letter case and returns -1, 0 or 1.
- `string_task(s)` drops the vowels (`aeiouy`, either case), lower-cases the
  other characters and puts a dot before each of them.
- `says_hello(s)` tells whether `hello` can be read from `s` by deleting
  characters.
- `fix_word_case(word)` puts the word wholly in the case most of its letters
  already have. A tie goes to lower case.
- `abbreviate(word)` shortens a word longer than ten characters to its first
  letter, the count of letters in between and its last letter.

### `cfsolve.sequences`

- `odd_one_out(numbers)` gives the 1-based position of the number whose
  parity differs from the rest.
- `towers(lengths)` gives the height of the tallest tower and the number of
  towers, where bars of equal length stack into one tower. Empty input gives
  `(-1, 0)`.
- `study_schedule(total, bounds)` chooses hours for each day within its
  `(minimum, maximum)` so that they add up to `total`, or returns `None` when
  that cannot be done.
- `find_reversal(permutation)` gives the 1-based `(left, right)` segment
  whose reversal sorts a permutation of `1..n`. It gives `(0, 0)` when the
  permutation is already sorted or when no single reversal sorts it. It
  raises `ValueError` when the input is not a permutation.
- `count_magical_subarrays(values)` counts the non-empty subarrays whose
  minimum equals their maximum.
- `is_equilibrium(forces)` tells whether a collection of `(x, y, z)` force
  vectors sums to zero.

### `cfsolve.registry`

- `Registration` hands out user names. `register(name)` returns `"OK"` for a
  new name. For a name already taken it returns the name followed by a
  counter, such as `alice1`, then `alice2`.
- `winner(rounds)` gives the winner of a game from its `(name, score)`
  rounds. Among the players with the highest final score, the winner is the
  one who first reached at least that score. It raises `ValueError` when no
  rounds were played.

```python
from cfsolve.registry import Registration
from cfsolve.strings import abbreviate

registry = Registration()
registry.register("alice")       # "OK"
registry.register("alice")       # "alice1"

abbreviate("internationalization")   # "i18n"
```

## Command line

The `cfsolve` command reads whitespace-separated input from standard input and
prints the answer:

```
cfsolve --help
```

| Command          | Input                                   | Output                          |
|------------------|-----------------------------------------|---------------------------------|
| `watermelon`     | a weight `w`                            | `YES` or `NO`                   |
| `theatre-square` | `n m a`                                 | number of flagstones            |
| `registration`   | a count, then that many names           | one line per name, as `register` returns it |
| `winner`         | a count, then that many `name score` pairs | the winner's name            |

```
echo 8 | cfsolve watermelon
YES
echo "6 6 4" | cfsolve theatre-square
4
```

When the input is malformed or runs out early, the command prints an error
message and exits with status 2.

## Limits

Only the four commands above can be run from the command line. Every other
solver can only be called from Python.