import pytest

from lifesim.core.rules import next_state, should_toggle


@pytest.mark.parametrize(
    "alive,neighbors,expected",
    [
        (True, 0, False),
        (True, 1, False),
        (True, 2, True),
        (True, 3, True),
        (True, 4, False),
        (True, 5, False),
        (True, 8, False),
        (False, 0, False),
        (False, 2, False),
        (False, 3, True),
        (False, 4, False),
        (False, 8, False),
    ],
)
def test_rule_table(alive, neighbors, expected):
    assert next_state(alive, neighbors) is expected


def test_should_toggle_only_on_change():
    assert should_toggle(True, 1)
    assert not should_toggle(True, 2)
    assert should_toggle(False, 3)
    assert not should_toggle(False, 2)
