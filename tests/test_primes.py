import pytest

from cfsolve.primes import count_almost_primes, is_next_prime, noldbach, sieve


def test_sieve_small_limits():
    assert sieve(0) == []
    assert sieve(2) == []
    assert sieve(3) == [2]


@pytest.mark.parametrize("limit", [10, 100, 500, 1001])
def test_sieve_lists_exactly_the_primes(limit):
    primes = sieve(limit)
    assert primes == sorted(primes)
    assert all(p < limit for p in primes)
    listed = set(primes)
    for value in range(2, limit):
        has_divisor = any(value % d == 0 for d in range(2, int(value ** 0.5) + 1))
        assert (value in listed) == (not has_divisor)


def test_noldbach_worked_examples():
    assert noldbach(27, 2)
    assert not noldbach(45, 7)


def test_noldbach_zero_needed_always_holds():
    assert all(noldbach(n, 0) for n in range(2, 1001, 50))


def test_noldbach_monotonic_in_n():
    for k in range(0, 20):
        answers = [noldbach(n, k) for n in range(2, 1001, 11)]
        assert answers == sorted(answers)


def test_noldbach_monotonic_in_k():
    answers = [noldbach(1000, k) for k in range(0, 200)]
    assert answers == sorted(answers, reverse=True)


def test_count_almost_primes_worked_examples():
    assert count_almost_primes(10) == 2
    assert count_almost_primes(21) == 8


def test_count_almost_primes_small():
    assert count_almost_primes(1) == 0
    assert count_almost_primes(5) == 0


def test_count_almost_primes_steps():
    counts = [count_almost_primes(n) for n in range(1, 300)]
    for before, after in zip(counts, counts[1:]):
        assert after - before in (0, 1)


def test_next_prime_worked_examples():
    assert is_next_prime(3, 5)
    assert is_next_prime(7, 11)
    assert not is_next_prime(7, 9)


def test_next_prime_follows_sieve():
    primes = sieve(500)
    for p, q in zip(primes, primes[1:]):
        assert is_next_prime(p, q)
        assert not is_next_prime(p, q + 1)


def test_next_prime_after_last_sieved_prime():
    assert is_next_prime(499, 503)


def test_next_prime_rejects_composite():
    with pytest.raises(ValueError):
        is_next_prime(9, 11)