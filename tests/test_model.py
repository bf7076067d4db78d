import pytest

from wolfcast.model import GameMap, Player, Weapon


def _armed(count):
    player = Player()
    for weapon_id in range(count):
        player.add_weapon(Weapon(id=weapon_id, ammo=10))
    return player


def test_player_defaults():
    player = Player()
    assert player.hp == 100
    assert player.max_hp == 150
    assert player.min_hp == 0
    assert player.dir_x == -1
    assert player.plane_y == pytest.approx(0.66)
    assert player.flashlight_on is False
    assert player.weapon is None
    assert not player.is_placed()


def test_game_map_dimensions_and_cells():
    game_map = GameMap(["WWWWW", "WS DW", "WWWWW"])
    assert game_map.height == 3
    assert game_map.length == 5
    assert game_map.cell(1, 1) == "S"
    assert game_map.cell(0, 0) == "W"
    assert game_map.cell(2, 1) == " "


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 3)])
def test_game_map_cell_out_of_range(x, y):
    game_map = GameMap(["WWWWW", "WS DW", "WWWWW"])
    with pytest.raises(IndexError):
        game_map.cell(x, y)


def test_locate_in_finds_spawn_and_exit():
    player = Player()
    player.locate_in(GameMap(["WWWWW", "WS DW", "WWWWW"]))
    assert (player.pos_x, player.pos_y) == (1.5, 1.5)
    assert (player.end_x, player.end_y) == (3.5, 1.5)
    assert player.is_placed()


def test_locate_in_without_exit_is_not_placed():
    player = Player()
    player.locate_in(GameMap(["WWW", "WSW", "WWW"]))
    assert player.end_x == -1
    assert not player.is_placed()


def test_locate_in_resets_previous_position():
    player = Player()
    player.locate_in(GameMap(["WWWWW", "WS DW", "WWWWW"]))
    player.locate_in(GameMap(["WWW", "W W", "WWW"]))
    assert player.pos_x == -1
    assert player.pos_y == -1
    assert not player.is_placed()


def test_first_weapon_added_is_held():
    player = _armed(3)
    assert player.weapon.id == 0
    assert [w.id for w in player.weapons] == [0, 1, 2]


def test_select_weapon_forward_and_back():
    player = _armed(3)
    assert player.select_weapon(2).id == 2
    assert player.weapon.id == 2
    assert player.select_weapon(0).id == 0
    assert player.weapon.id == 0


def test_select_unknown_weapon_goes_to_last():
    player = _armed(3)
    assert player.select_weapon(42).id == 2


def test_select_weapon_without_weapons():
    player = Player()
    assert player.select_weapon(0) is None
    assert player.scroll_weapon(1) is None
    assert player.select_weapon_slot(1) is None


def test_select_weapon_slot():
    player = _armed(3)
    assert player.select_weapon_slot(2).id == 1
    assert player.select_weapon_slot(1).id == 0


def test_slot_one_past_count_selects_last():
    player = _armed(2)
    assert player.select_weapon_slot(3).id == 1


def test_slot_beyond_count_is_ignored():
    player = _armed(2)
    assert player.select_weapon_slot(4).id == 0
    assert player.select_weapon_slot(6).id == 0


def test_scroll_up_and_stop_at_end():
    player = _armed(2)
    assert player.scroll_weapon(1).id == 1
    assert player.scroll_weapon(1).id == 1


def test_scroll_down_from_first_wraps_to_last():
    player = _armed(3)
    assert player.scroll_weapon(-1).id == 2
    assert player.scroll_weapon(-1).id == 1


def test_scroll_zero_keeps_weapon():
    player = _armed(3)
    player.select_weapon(1)
    assert player.scroll_weapon(0).id == 1