import io
from collections import Counter

import pytest

from dsalgos.sorting_searching import (
    User,
    binary_search,
    format_users,
    heapsort,
    linear_search,
    main,
    mergesort,
    quicksort_descending,
)

USERS = [
    User(42, "bob", 12.5),
    User(7, "alice", 3.0),
    User(19, "carol", 40.25),
    User(3, "dan", 0.5),
    User(88, "erin", 7.75),
    User(19, "frank", 1.0),
]

SAMPLES = [
    [],
    [User(5, "solo", 1.0)],
    USERS,
    list(reversed(USERS)),
    [User(n, f"u{n}", float(n)) for n in (9, 8, 7, 6, 5, 4, 3, 2, 1)],
]


@pytest.mark.parametrize("users", SAMPLES)
def test_quicksort_descending_orders(users):
    result = quicksort_descending(users)
    numbers = [u.number for u in result]
    assert numbers == sorted(numbers, reverse=True)
    assert Counter(result) == Counter(users)


@pytest.mark.parametrize("sorter", [mergesort, heapsort])
@pytest.mark.parametrize("users", SAMPLES)
def test_ascending_sorts(sorter, users):
    result = sorter(users)
    numbers = [u.number for u in result]
    assert numbers == sorted(numbers)
    assert Counter(result) == Counter(users)


@pytest.mark.parametrize("sorter", [quicksort_descending, mergesort, heapsort])
def test_input_not_mutated(sorter):
    original = list(USERS)
    sorter(USERS)
    assert USERS == original


def test_linear_search_returns_first_match():
    assert linear_search(USERS, 19).name == "carol"
    assert linear_search(USERS, 1000) is None


def test_binary_search_finds_every_number():
    ordered = mergesort(USERS)
    for user in USERS:
        assert binary_search(ordered, user.number).number == user.number


@pytest.mark.parametrize("number", [0, 4, 50, 100])
def test_binary_search_missing(number):
    assert binary_search(mergesort(USERS), number) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


def test_format_users():
    text = format_users([User(42, "bob", 12.5)])
    assert text.splitlines() == [" number \t name \t bill amount ", "42\tbob\t12.5"]


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n42 bob 12.5\n7 alice 3\n7\n99\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Data sorted in descending order of mobile no." in out
    assert "Name: alice" in out
    assert "User with mobile number 99 not found." in out


def test_main_rejects_too_many_users(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("11\n"))
    assert main([]) == 1