"""Core game state: weapons, maps and the player."""

from __future__ import annotations

from dataclasses import dataclass, field

UNSET = -1.0
WEAPON_SLOTS = 5


@dataclass
class Weapon:
    """A weapon the player can carry."""

    id: int
    damage: int = 0
    firerate: int = 0
    max_ammo: int = 0
    ammo: int = 0
    fire_distance: int = 0
    sprite: str | None = None
    sound: str | None = None


@dataclass
class GameMap:
    """A level laid out as rows of tiles ('W' wall, 'S' spawn, 'D' exit)."""

    rows: list[str]
    id: int = 0
    music: str | None = None

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def length(self) -> int:
        """Width of the first row."""
        return len(self.rows[0]) if self.rows else 0

    def cell(self, x: int, y: int) -> str:
        """Return the tile at column *x* of row *y*."""
        if not 0 <= y < len(self.rows) or not 0 <= x < len(self.rows[y]):
            raise IndexError(f"cell ({x}, {y}) lies outside the map")
        return self.rows[y][x]


@dataclass
class Player:
    """The player's position, view, health and arsenal."""

    hp: int = 100
    max_hp: int = 150
    min_hp: int = 0
    money: int = 0
    pos_x: float = UNSET
    pos_y: float = UNSET
    end_x: float = UNSET
    end_y: float = UNSET
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66
    angle: float = 0.0
    flashlight_on: bool = False
    weapons: list[Weapon] = field(default_factory=list)
    _current: int = field(default=0, init=False, repr=False)

    def locate_in(self, game_map: GameMap) -> None:
        """Place the player on the map's spawn and record its exit."""
        self.pos_x = self.pos_y = self.end_x = self.end_y = UNSET
        for y, row in enumerate(game_map.rows):
            for x, tile in enumerate(row):
                if tile == "S":
                    self.pos_x, self.pos_y = x + 0.5, y + 0.5
                elif tile == "D":
                    self.end_x, self.end_y = x + 0.5, y + 0.5

    def is_placed(self) -> bool:
        """Whether both a spawn and an exit were found."""
        return UNSET not in (self.pos_x, self.pos_y, self.end_x, self.end_y)

    @property
    def weapon(self) -> Weapon | None:
        """The weapon currently in hand, if any."""
        if not self.weapons:
            return None
        return self.weapons[self._current]

    def add_weapon(self, weapon: Weapon) -> None:
        """Append a weapon; the first one added is held."""
        self.weapons.append(weapon)

    def select_weapon(self, weapon_id: int) -> Weapon | None:
        """Switch to the weapon with *weapon_id*.

        When no weapon carries that id, the last weapon is selected.
        """
        if not self.weapons:
            return None
        found = next(
            (i for i in reversed(range(self._current + 1))
             if self.weapons[i].id == weapon_id),
            None,
        )
        if found is None:
            found = next(
                (i for i, weapon in enumerate(self.weapons)
                 if weapon.id == weapon_id),
                len(self.weapons) - 1,
            )
        self._current = found
        return self.weapons[found]

    def select_weapon_slot(self, slot: int) -> Weapon | None:
        """Switch weapon by number key 1 to 5."""
        if not self.weapons or not 1 <= slot <= WEAPON_SLOTS:
            return self.weapon
        if slot - 1 <= len(self.weapons):
            return self.select_weapon(slot - 1)
        return self.weapon

    def scroll_weapon(self, delta: float) -> Weapon | None:
        """Switch weapon from a mouse wheel movement."""
        current = self.weapon
        if current is None:
            return None
        if delta > 0 and current.id + 1 < len(self.weapons):
            return self.select_weapon(current.id + 1)
        if delta < 0 and current.id - 1 < len(self.weapons):
            return self.select_weapon(current.id - 1)
        return current