import pytest

from emojiquest.engine.actions.base import TileContext
from emojiquest.engine.actions.blocked import BlockedHandler
from emojiquest.engine.actions.castle import CastleHandler
from emojiquest.engine.actions.chest import ChestHandler
from emojiquest.engine.actions.ground import GroundHandler
from emojiquest.engine.actions.tree import TreeHandler
from emojiquest.engine.actions.water import WaterHandler
from emojiquest.engine.actions.web import SpiderWebHandler
from emojiquest.models.common import ItemType, Npc, NpcType, OutcomeKind, TileType

DST = (4, 4)


def ctx(tile, items=(), npc=None, chest_found=False, rng=None):
    return TileContext(
        destination=DST,
        tile=tile,
        inventory=frozenset(items),
        npc=Npc(kind=npc, pos=DST) if npc else None,
        chest_found=chest_found,
        rng=rng,
    )


@pytest.mark.parametrize("tile", [TileType.GRASS, TileType.SAND])
def test_ground_is_walkable(tile):
    res = GroundHandler().resolve(ctx(tile))
    assert res.result == OutcomeKind.APPLIED
    assert res.move_to == DST
    assert not res.remove_npc and not res.items_gained


def test_troll_with_sword_drops_axe():
    res = GroundHandler().resolve(ctx(TileType.GRASS, [ItemType.SWORD], NpcType.TROLL))
    assert res.move_to == DST
    assert res.remove_npc
    assert res.items_gained == [ItemType.AXE]
    assert "defeated the troll" in res.status and "axe" in res.status


def test_troll_with_sword_and_axe_drops_nothing():
    res = GroundHandler().resolve(
        ctx(TileType.GRASS, [ItemType.SWORD, ItemType.AXE], NpcType.TROLL)
    )
    assert res.remove_npc
    assert res.items_gained == []
    assert "defeated the troll" in res.status
    assert "found an axe" not in res.status


def test_troll_without_sword_still_lets_player_step_in():
    res = GroundHandler().resolve(ctx(TileType.GRASS, [], NpcType.TROLL))
    assert res.move_to == DST
    assert not res.remove_npc
    assert "sword" in res.status


def test_spider_always_loses_and_drops_snorkel():
    res = GroundHandler().resolve(ctx(TileType.GRASS, [], NpcType.SPIDER))
    assert res.remove_npc
    assert res.items_gained == [ItemType.SNORKEL]
    assert res.move_to == DST


def test_water_without_snorkel_refused():
    res = WaterHandler().resolve(ctx(TileType.WATER))
    assert res.result == OutcomeKind.REFUSED
    assert res.move_to is None
    assert "can't enter the water" in res.status


def test_water_with_snorkel_swims():
    res = WaterHandler().resolve(ctx(TileType.WATER, [ItemType.SNORKEL]))
    assert res.move_to == DST


def test_fish_needs_harpoon():
    res = WaterHandler().resolve(ctx(TileType.WATER, [ItemType.SNORKEL], NpcType.FISH))
    assert res.result == OutcomeKind.REFUSED
    assert "harpoon" in res.status


def test_fish_caught_gives_key_without_moving():
    res = WaterHandler().resolve(ctx(TileType.WATER, [ItemType.HARPOON], NpcType.FISH))
    assert res.items_gained == [ItemType.KEY]
    assert res.remove_npc
    assert res.move_to is None


def test_fish_ignores_player_holding_key():
    res = WaterHandler().resolve(
        ctx(TileType.WATER, [ItemType.HARPOON, ItemType.KEY], NpcType.FISH)
    )
    assert res.result == OutcomeKind.REFUSED
    assert not res.remove_npc
    assert "no longer interested" in res.status


def test_tree_needs_axe():
    res = TreeHandler().resolve(ctx(TileType.TREE))
    assert res.result == OutcomeKind.REFUSED
    assert res.new_tile is None


@pytest.mark.parametrize("roll,tile", [(0, TileType.CHEST), (14, TileType.CHEST), (15, TileType.GRASS), (99, TileType.GRASS)])
def test_chop_rolls_for_chest(scripted, roll, tile):
    res = TreeHandler().resolve(ctx(TileType.TREE, [ItemType.AXE], rng=scripted(ints=[roll])))
    assert res.new_tile == tile
    assert res.chest_found == (tile == TileType.CHEST)
    assert res.move_to is None


def test_chop_after_chest_found_never_rolls(scripted):
    # an empty script fails on any draw
    res = TreeHandler().resolve(
        ctx(TileType.TREE, [ItemType.AXE], chest_found=True, rng=scripted())
    )
    assert res.new_tile == TileType.GRASS


def test_chest_gives_harpoon_once():
    first = ChestHandler().resolve(ctx(TileType.CHEST))
    assert first.items_gained == [ItemType.HARPOON]
    assert first.move_to == DST
    again = ChestHandler().resolve(ctx(TileType.CHEST, [ItemType.HARPOON]))
    assert again.items_gained == []
    assert "empty" in again.status
    assert again.new_tile is None


def test_castle_needs_key():
    res = CastleHandler().resolve(ctx(TileType.CASTLE))
    assert res.result == OutcomeKind.REFUSED
    res = CastleHandler().resolve(ctx(TileType.CASTLE, [ItemType.KEY]))
    assert res.new_tile == TileType.HEART
    assert res.move_to is None
    assert "quit" in res.status


def test_web_kills():
    res = SpiderWebHandler().resolve(ctx(TileType.SPIDER_WEB, [ItemType.SWORD]))
    assert res.player_dies
    assert res.move_to == DST


@pytest.mark.parametrize("tile", [TileType.MOUNTAIN, TileType.HEART])
def test_blocked_tiles(tile):
    res = BlockedHandler().resolve(ctx(tile, list(ItemType)))
    assert res.result == OutcomeKind.REFUSED
    assert res.move_to is None
