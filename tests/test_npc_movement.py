import pytest

from emojiquest.engine.systems.npc_movement import move_npcs, step_npc
from emojiquest.models.common import NpcType, TileType

LEFT, RIGHT, UP, DOWN = (-1, 0), (1, 0), (0, -1), (0, 1)


def test_idle_roll_skips_the_npc(layout, scripted):
    w = layout(["@.t."])
    rng = scripted(ints=[9])
    assert not step_npc(w, w.npcs[0], rng)
    assert w.npcs[0].pos == (2, 0)
    assert rng.ints == []


def test_fish_only_swims_in_water(layout, scripted):
    w = layout(["@...", "..f~", "...."])
    rng = scripted(ints=[50], shuffles=[[LEFT, UP, DOWN, RIGHT]])
    assert step_npc(w, w.npcs[0], rng)
    assert w.npcs[0].pos == (3, 1)


def test_npc_never_steps_on_player(layout, scripted):
    w = layout(["@t"])
    rng = scripted(ints=[50], shuffles=[[LEFT, UP, RIGHT, DOWN]])
    # left is the player, the rest are off the map
    assert not step_npc(w, w.npcs[0], rng)
    assert w.npcs[0].pos == (1, 0)


def test_boxed_in_npc_stays(layout, scripted):
    w = layout(["MMM", "MtM", "MMM", "..@"])
    rng = scripted(ints=[50])
    assert not step_npc(w, w.npcs[0], rng)
    assert w.npcs[0].pos == (1, 1)


def test_spider_spins_web_before_moving(layout, scripted):
    w = layout(["@.s."])
    rng = scripted(ints=[50, 14], shuffles=[[LEFT, RIGHT, UP, DOWN]])
    assert step_npc(w, w.npcs[0], rng)
    assert w.terrain.tile((2, 0)) == TileType.SPIDER_WEB
    assert w.npcs[0].pos == (1, 0)


def test_spider_without_web(layout, scripted):
    w = layout(["@.s."])
    rng = scripted(ints=[50, 15], shuffles=[[RIGHT, LEFT, UP, DOWN]])
    step_npc(w, w.npcs[0], rng)
    assert w.terrain.count(TileType.SPIDER_WEB) == 0
    assert w.npcs[0].pos == (3, 0)


CORRIDOR = ["MMMMMMM", "M@.st.M", "MMMMMMM"]


def test_npcs_move_sequentially_in_list_order(layout, scripted):
    w = layout(CORRIDOR)
    spider, troll = w.npcs
    assert (spider.kind, troll.kind) == (NpcType.SPIDER, NpcType.TROLL)
    rng = scripted(
        ints=[50, 0, 50],
        shuffles=[[LEFT, RIGHT, UP, DOWN], [LEFT, RIGHT, UP, DOWN]],
    )
    assert move_npcs(w, rng) == 2
    # the web left behind by the spider turns the troll away
    assert spider.pos == (2, 1)
    assert w.terrain.tile((3, 1)) == TileType.SPIDER_WEB
    assert troll.pos == (5, 1)


def test_processing_order_changes_the_outcome(layout, scripted):
    w = layout(CORRIDOR)
    spider, troll = w.npcs
    rng = scripted(
        ints=[50, 50, 0],
        shuffles=[[LEFT, RIGHT, UP, DOWN], [LEFT, RIGHT, UP, DOWN]],
    )
    move_npcs(w, rng, order=[1, 0])
    # NPCs do not block each other, so the troll walks onto the spider's cell
    assert troll.pos == (3, 1)
    assert spider.pos == (2, 1)
    assert w.terrain.tile((3, 1)) == TileType.SPIDER_WEB


def test_order_must_be_a_permutation(layout, rng):
    w = layout(CORRIDOR)
    with pytest.raises(ValueError):
        move_npcs(w, rng, order=[0, 0])
