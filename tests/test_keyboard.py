import pytest

from vampire_hunters.keyboard import Key, Keyboard


def test_counts_start_at_zero():
    kb = Keyboard()
    assert kb.get_pressing_count(Key.LEFT) == 0
    assert kb.get_releasing_count(Key.LEFT) == 0


def test_pressing_count_grows_while_held():
    kb = Keyboard()
    kb.update({Key.LEFT})
    assert kb.get_pressing_count(Key.LEFT) == 1
    kb.update({Key.LEFT})
    assert kb.get_pressing_count(Key.LEFT) == 2
    assert kb.get_releasing_count(Key.LEFT) == 0


def test_other_keys_count_release():
    kb = Keyboard()
    kb.update([Key.LEFT])
    assert kb.get_releasing_count(Key.RIGHT) == 1
    assert kb.get_pressing_count(Key.RIGHT) == 0


def test_release_resets_pressing():
    kb = Keyboard()
    kb.update([Key.RETURN])
    kb.update([Key.RETURN])
    kb.update([])
    assert kb.get_pressing_count(Key.RETURN) == 0
    assert kb.get_releasing_count(Key.RETURN) == 1
    kb.update([Key.RETURN])
    assert kb.get_releasing_count(Key.RETURN) == 0
    assert kb.get_pressing_count(Key.RETURN) == 1


def test_update_returns_true():
    assert Keyboard().update([]) is True


@pytest.mark.parametrize("code,expected", [(0, True), (255, True), (256, False), (-1, False)])
def test_is_available_code(code, expected):
    assert Keyboard().is_available_code(code) is expected


@pytest.mark.parametrize("code", [256, -1])
def test_invalid_code_raises(code):
    kb = Keyboard()
    with pytest.raises(ValueError):
        kb.get_pressing_count(code)
    with pytest.raises(ValueError):
        kb.get_releasing_count(code)


def test_update_rejects_invalid_code():
    with pytest.raises(ValueError):
        Keyboard().update([300])