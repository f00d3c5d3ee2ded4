import pytest

from homeworkrunner.lessons.containers import (
    Fruit,
    add_twice,
    array_and_vec,
    drain_optionals,
    fill_fruit_basket,
    fill_vec,
    fruit_basket,
    get_char,
    option_numbers,
    string_uppercase,
    vec_loop,
)


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v


def test_vec_loop():
    v = [2, 4, 6, 8, 10]
    assert vec_loop(v) == [4, 8, 12, 16, 20]
    assert v == [2, 4, 6, 8, 10]


def test_fill_vec_leaves_input_untouched():
    original = []
    filled = fill_vec(original)
    assert original == []
    assert filled == [22, 44, 66]


def test_fill_vec_without_argument():
    assert fill_vec() == [22, 44, 66]


def test_fill_vec_keeps_existing_values():
    assert fill_vec([1]) == [1, 22, 44, 66]


def test_add_twice():
    assert add_twice(100) == 1200


def test_get_char():
    assert get_char("Rust is great!") == "!"


def test_get_char_empty():
    with pytest.raises(ValueError):
        get_char("")


def test_string_uppercase():
    assert string_uppercase("Rust is great!") == "RUST IS GREAT!"


def test_option_numbers():
    numbers = option_numbers()
    assert len(numbers) == 5
    assert numbers == [0, 19, 38, 57, 77]


def test_drain_optionals_all():
    assert drain_optionals(list(range(1, 10))) == [9, 8, 7, 6, 5, 4, 3, 2, 1]


def test_drain_optionals_stops_at_none():
    assert drain_optionals([1, None, 2, 3]) == [3, 2]


def test_drain_optionals_empty():
    assert drain_optionals([]) == []