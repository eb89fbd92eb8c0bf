"""Tile maps, portals and the NPCs placed on them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from textrpg.actors import Direction, Player
from textrpg.console import Console
from textrpg.npc import NPC, NPCType


class TileType(Enum):
    EMPTY = 0
    WALL = 1
    BUSH = 2
    NPC_HEALER = 3
    NPC_ITEM_SHOP = 4
    NPC_SKILL_SHOP = 5
    PORTAL = 8
    BOSS = 9


@dataclass(frozen=True)
class Portal:
    """Where stepping on a portal tile leads."""

    dest_map_id: int
    dest_x: int
    dest_y: int


_WALL_ROW = "1" * 30
_OPEN_ROW = "1" + "0" * 28 + "1"

_MAPS: dict[int, tuple[list[str], dict[tuple[int, int], Portal]]] = {
    0: (  # village
        [
            _WALL_ROW,
            _OPEN_ROW,
            "101111000110000000111111111001",
            "101001000110000000100000001001",
            "101000000000000000100000501001",
            "101001000000000000111000001001",
            "101101111001101100001000001001",
            "100100001001000100001000001001",
            "100104000001030100001110011001",
            "100100001001000100000000000001",
            "100111111001111100000000000008",
            "100000000000000000000000000008",
            _OPEN_ROW,
            _WALL_ROW,
        ],
        {(29, 10): Portal(1, 1, 3), (29, 11): Portal(1, 1, 4)},
    ),
    1: (  # hunting ground 1
        [
            _WALL_ROW,
            _OPEN_ROW,
            "101111000111000011100022201101",
            "801001000101000010000022201001",
            "800000000101222010000000000001",
            "100000000001222011111011110001",
            "101100000000000000001000010001",
            "100100000000000000001000010001",
            "100100111001111100111110010001",
            "100100100001000100000000000001",
            "100000100001000100000000000001",
            "122220000000000000000000001111",
            "122220000000000000000000000001",
            "111111111111111111111111881111",
        ],
        {
            (0, 3): Portal(0, 28, 10),
            (0, 4): Portal(0, 28, 11),
            (24, 13): Portal(2, 3, 1),
            (25, 13): Portal(2, 4, 1),
        },
    ),
    2: (  # hunting ground 2
        [
            "111881111111111111111111111111",
            "100000000000000022000000000001",
            "100000000000000022000000000001",
            "102222000110000000000000022001",
            "122222211110000000000000022211",
            "122222110000000001111012222211",
            "122222110000000000001022221111",
            "122222110000000000001022211111",
            "122222111221111100111110111111",
            "122222111221222100000000111111",
            "122222111221222100000000000111",
            "800000000000000000002220000111",
            "800000000000000000002220000011",
            _WALL_ROW,
        ],
        {
            (3, 0): Portal(1, 24, 12),
            (4, 0): Portal(1, 25, 12),
            (0, 11): Portal(3, 28, 6),
            (0, 12): Portal(3, 28, 7),
        },
    ),
    3: (  # hunting ground 3
        [
            _WALL_ROW,
            "100011111111111111111111110001",
            "100000111111111111111111000001",
            "100000001111111111111000000001",
            "100000000222222222200000000001",
            "100000002222222222220000000001",
            "800000022222222222222000000008",
            "800000022222222222222000000008",
            "100000002222222222220000000001",
            "100000000222222222200000000001",
            "100000001111111111111000000001",
            "100000111111111111111111000001",
            "100011111111111111111111110001",
            _WALL_ROW,
        ],
        {
            (29, 6): Portal(2, 1, 11),
            (29, 7): Portal(2, 1, 12),
            (0, 6): Portal(4, 14, 11),
            (0, 7): Portal(4, 14, 11),
        },
    ),
    4: (  # boss room
        [
            _WALL_ROW,
            "1" * 9 + "0" * 12 + "1" * 9,
            "1" * 8 + "0" * 14 + "1" * 8,
            "1" * 7 + "0" * 7 + "9" + "0" * 8 + "1" * 7,
            "1" * 6 + "0" * 18 + "1" * 6,
            "1" * 5 + "0" * 20 + "1" * 5,
            "1" * 4 + "0" * 22 + "1" * 4,
            "1" * 3 + "0" * 24 + "1" * 3,
            "1" * 2 + "0" * 26 + "1" * 2,
            _OPEN_ROW,
            _OPEN_ROW,
            _OPEN_ROW,
            _OPEN_ROW,
            "1" * 13 + "8" * 3 + "1" * 14,
        ],
        {
            (13, 13): Portal(3, 1, 6),
            (14, 13): Portal(3, 1, 7),
            (15, 13): Portal(3, 1, 7),
        },
    ),
}

_NPC_TILES = {
    TileType.NPC_HEALER: ("† 간호사", NPCType.HEALER),
    TileType.NPC_ITEM_SHOP: ("● 상점주인", NPCType.SHOP_ITEM),
    TileType.NPC_SKILL_SHOP: ("◈ 스킬마스터", NPCType.SHOP_SKILL),
    TileType.BOSS: ("▼ 보스", NPCType.BOSS),
}

_TILE_GLYPHS = {
    TileType.EMPTY: "· ",
    TileType.WALL: "▒",
    TileType.BUSH: "∗∗",
    TileType.NPC_HEALER: "· ",
    TileType.NPC_ITEM_SHOP: "· ",
    TileType.NPC_SKILL_SHOP: "· ",
    TileType.BOSS: "· ",
    TileType.PORTAL: "回 ",
}

_NPC_GLYPHS = {
    NPCType.HEALER: "† ",
    NPCType.SHOP_ITEM: "● ",
    NPCType.SHOP_SKILL: "◈ ",
}

_PLAYER_GLYPHS = {
    Direction.UP: "▲ ",
    Direction.DOWN: "▼ ",
    Direction.LEFT: "◀ ",
    Direction.RIGHT: "▶ ",
}


class Field:
    """The currently loaded map with its tiles, portals and NPCs."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self.tiles: list[list[TileType]] = []
        self.npcs: list[NPC] = []
        self.portals: dict[tuple[int, int], Portal] = {}

    def load_map(self, map_id: int) -> None:
        """Replace the current map; an unknown id leaves the field empty."""
        self.npcs = []
        self.portals = {}
        self.tiles = []
        self.width = 0
        self.height = 0

        if map_id not in _MAPS:
            return
        rows, portals = _MAPS[map_id]
        self.portals = dict(portals)
        self.tiles = [[TileType(int(cell)) for cell in row] for row in rows]
        self.height = len(self.tiles)
        self.width = len(self.tiles[0])

        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                if tile in _NPC_TILES:
                    name, npc_type = _NPC_TILES[tile]
                    self.npcs.append(NPC(name, npc_type, x, y))

    def draw(self, player: Player, console: Console) -> None:
        """Render tiles, then NPCs, then the player facing its direction."""
        console.clear()
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                console.move_to(x * 2, y)
                console.write(_TILE_GLYPHS.get(tile, "  "))

        for npc in self.npcs:
            console.move_to(npc.x * 2, npc.y)
            if npc.npc_type is NPCType.BOSS:
                console.write_highlighted("▼ ")
            else:
                console.write(_NPC_GLYPHS[npc.npc_type])

        console.move_to(player.x * 2, player.y)
        console.write(_PLAYER_GLYPHS[player.direction])

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        """Inside the map, not a wall and not occupied by an NPC."""
        if not self._inside(x, y):
            return False
        if self.tiles[y][x] is TileType.WALL:
            return False
        return self.npc_at(x, y) is None

    def portal_at(self, x: int, y: int) -> Portal | None:
        return self.portals.get((x, y))

    def npc_at(self, x: int, y: int) -> NPC | None:
        return next((npc for npc in self.npcs if npc.x == x and npc.y == y), None)

    def tile_type(self, x: int, y: int) -> TileType:
        """The tile at a position; anything outside the map counts as a wall."""
        if not self._inside(x, y):
            return TileType.WALL
        return self.tiles[y][x]