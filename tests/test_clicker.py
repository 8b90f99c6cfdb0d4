from minigames.clicker import GOLD_POS, HELP_POS, HELP_TEXT, POWER_POS, Clicker


def test_initial_state():
    clicker = Clicker()
    assert (clicker.gold, clicker.power) == (0, 1)


def test_mine_adds_power():
    clicker = Clicker()
    for expected in range(1, 4):
        assert clicker.mine() == expected
    assert clicker.gold == 3


def test_upgrade_without_gold_fails():
    clicker = Clicker()
    assert clicker.upgrade() is False
    assert (clicker.gold, clicker.power) == (0, 1)


def test_upgrade_spends_power_worth_of_gold():
    clicker = Clicker()
    clicker.mine()
    clicker.mine()
    assert clicker.upgrade() is True
    assert (clicker.gold, clicker.power) == (1, 2)
    assert clicker.upgrade() is False
    assert clicker.mine() == 1 + clicker.power


def test_large_values_do_not_overflow():
    clicker = Clicker()
    clicker.power = 10**30
    clicker.mine()
    assert clicker.gold == 10**30
    assert clicker.upgrade() is True
    assert clicker.power == 10**30 + 1


def test_status_lines():
    clicker = Clicker()
    clicker.mine()
    lines = clicker.status_lines()
    assert lines[0] == (HELP_TEXT, HELP_POS)
    assert lines[1] == ("Сила нажатия: 1 (= цене апгрейда)", POWER_POS)
    assert lines[2] == ("Золота: 1", GOLD_POS)