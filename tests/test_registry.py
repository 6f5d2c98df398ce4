import pytest

from cfsolve.registry import Registration, winner


def test_first_registration_is_ok():
    registry = Registration()
    assert registry.register("abacaba") == "OK"
    assert registry.register("acaba") == "OK"


def test_repeat_registration_gets_suffix():
    registry = Registration()
    registry.register("abacaba")
    assert registry.register("abacaba") == "abacaba" + "1"
    assert registry.register("abacaba") == "abacaba" + "2"


def test_registrations_are_unique():
    registry = Registration()
    names = ["first", "first", "second", "second", "third", "first"]
    given = [registry.register(n) for n in names]
    assigned = [n if g == "OK" else g for n, g in zip(names, given)]
    assert len(set(assigned)) == len(assigned)


def test_separate_registries_are_independent():
    one = Registration()
    two = Registration()
    one.register("name")
    assert two.register("name") == "OK"


def test_winner_by_highest_total():
    assert winner([("mike", 3), ("andrew", 5), ("mike", 2)]) == "andrew"


def test_winner_tie_goes_to_first_to_reach():
    assert winner([("andrew", 3), ("andrew", 2), ("mike", 5)]) == "andrew"


def test_winner_ignores_early_lead_of_loser():
    assert winner([("kate", 10), ("kate", -8), ("bob", 4)]) == "bob"


def test_winner_no_rounds():
    with pytest.raises(ValueError):
        winner([])