import pytest

from catan_lite.engine.board import standard_board
from catan_lite.engine.economy import (
    COSTS,
    EconomyRules,
    ResourceEconomy,
    can_afford,
    missing_resources,
)
from catan_lite.engine.errors import GameOver, InsufficientResources, InvalidPhase
from catan_lite.engine.events import EventLog
from catan_lite.engine.game_state import GameState, make_player
from catan_lite.engine.types import EventKind, GamePhase, ResourceType, StructureType
from catan_lite.utils.repro import make_rng


class FixedRandom:
    """Bernoulli source that always returns the same draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _playing_state(*hands):
    players = [make_player(f"P{pid}", hand) for pid, hand in enumerate(hands)]
    return GameState(players=players, phase=GamePhase.PLAYING)


def test_insufficient_settlement_reports_exact_shortfall():
    state = _playing_state({"wood": 1, "brick": 0, "grain": 1, "sheep": 1})
    economy = ResourceEconomy()
    before = dict(state.players[0].resources)

    with pytest.raises(InsufficientResources) as excinfo:
        economy.build_structure(state, 0, StructureType.SETTLEMENT)

    assert excinfo.value.missing == {ResourceType.BRICK: 1}
    assert excinfo.value.structure == StructureType.SETTLEMENT
    player = state.players[0]
    assert player.resources == before
    assert player.buildings.settlements == 0
    assert player.buildings.roads == 0
    assert player.score == 0


def test_exact_settlement_hand_is_spent():
    state = _playing_state({"wood": 1, "brick": 1, "grain": 1, "sheep": 1})
    player = ResourceEconomy().build_structure(state, 0, "settlement")

    for resource in (ResourceType.WOOD, ResourceType.BRICK, ResourceType.GRAIN, ResourceType.SHEEP):
        assert player.resources[resource] == 0
    assert player.buildings.settlements == 1
    assert player.score == 1


def test_road_costs_wood_and_brick():
    state = _playing_state({"wood": 2, "brick": 1, "ore": 1})
    player = ResourceEconomy().build_structure(state, 0, StructureType.ROAD)

    assert player.resources[ResourceType.WOOD] == 1
    assert player.resources[ResourceType.BRICK] == 0
    assert player.resources[ResourceType.ORE] == 1
    assert player.buildings.roads == 1
    assert player.score == 0


def test_city_upgrades_a_settlement():
    state = _playing_state({"grain": 2, "ore": 3})
    player = state.players[0]
    player.buildings.settlements = 1
    player.score = 1

    ResourceEconomy().build_structure(state, 0, StructureType.CITY)

    assert player.buildings.cities == 1
    assert player.buildings.settlements == 0
    assert player.score == player.buildings.settlements + 2 * player.buildings.cities == 2
    assert player.resources[ResourceType.GRAIN] == 0
    assert player.resources[ResourceType.ORE] == 0


def test_city_without_settlement_is_allowed():
    state = _playing_state({"grain": 2, "ore": 3})
    player = ResourceEconomy().build_structure(state, 0, StructureType.CITY)
    assert player.buildings.cities == 1
    assert player.buildings.settlements == 0
    assert player.score == 2


def test_city_shortfall_lists_every_missing_resource():
    state = _playing_state({"grain": 1})
    with pytest.raises(InsufficientResources) as excinfo:
        ResourceEconomy().build_structure(state, 0, StructureType.CITY)
    assert excinfo.value.missing == {ResourceType.GRAIN: 1, ResourceType.ORE: 3}


def test_reaching_ten_points_ends_the_game():
    state = _playing_state({"wood": 2, "brick": 2, "grain": 2, "sheep": 2})
    player = state.players[0]
    player.buildings.settlements = 9
    player.score = 9
    events = EventLog()
    economy = ResourceEconomy(sink=events)

    economy.build_structure(state, 0, StructureType.SETTLEMENT)

    assert player.score == 10
    assert state.phase == GamePhase.ENDED
    assert state.winner == 0
    assert any("wins" in text for text in events.texts())

    snapshot = state.snapshot()
    with pytest.raises(GameOver):
        economy.build_structure(state, 0, StructureType.SETTLEMENT)
    assert state.snapshot() == snapshot


def test_building_during_setup_is_rejected():
    state = GameState(players=[make_player("P0", {"wood": 1, "brick": 1})])
    with pytest.raises(InvalidPhase):
        ResourceEconomy().build_structure(state, 0, StructureType.ROAD)
    assert state.players[0].buildings.roads == 0


def test_unknown_structure_is_rejected():
    state = _playing_state({})
    with pytest.raises(ValueError):
        ResourceEconomy().build_structure(state, 0, "castle")


def test_missing_resources_helpers():
    hand = {ResourceType.WOOD: 1, ResourceType.BRICK: 1}
    assert missing_resources(hand, COSTS[StructureType.ROAD]) == {}
    assert can_afford(hand, StructureType.ROAD)
    assert not can_afford(hand, StructureType.SETTLEMENT)


def test_distribute_without_matching_tiles():
    board = standard_board(seed=4)
    state = _playing_state({}, {})
    events = EventLog()

    gains = ResourceEconomy(sink=events).distribute(7, board, state, FixedRandom(0.0))

    assert all(sum(gain.values()) == 0 for gain in gains)
    assert events.texts() == ["No hexes produce resources for 7"]


def test_distribute_pays_every_successful_trial():
    board = standard_board(seed=4)
    state = _playing_state({}, {}, {})
    events = EventLog()
    producing = board.tiles_with_number(5)

    gains = ResourceEconomy(sink=events).distribute(5, board, state, FixedRandom(0.0))

    for pid, player in enumerate(state.players):
        assert player.resource_count == len(producing)
        assert sum(gains[pid].values()) == len(producing)
        for tile in producing:
            assert player.resources[tile.resource] >= 1
    assert len(events) == len(producing) * len(state.players)
    assert all(event.kind == EventKind.PLAYER for event in events)


def test_distribute_reports_when_nobody_collects():
    board = standard_board(seed=4)
    state = _playing_state({}, {})
    events = EventLog()

    ResourceEconomy(sink=events).distribute(9, board, state, FixedRandom(0.99))

    assert all(player.resource_count == 0 for player in state.players)
    assert events.texts() == ["No one collected resources on 9"]


def test_ownership_chance_is_roughly_thirty_percent():
    board = standard_board(seed=4)
    state = _playing_state({}, {}, {}, {})
    economy = ResourceEconomy()
    rng = make_rng(99)
    rolls = 500
    for _ in range(rolls):
        economy.distribute(6, board, state, rng)

    trials = rolls * len(board.tiles_with_number(6)) * len(state.players)
    collected = sum(player.resource_count for player in state.players)
    assert 0.25 < collected / trials < 0.35


def test_economy_rules_validation():
    with pytest.raises(ValueError):
        EconomyRules(ownership_chance=1.5)
    with pytest.raises(ValueError):
        EconomyRules(victory_points_to_win=0)


def test_empty_event_log_receives_build_events():
    state = _playing_state({"wood": 1, "brick": 1})
    events = EventLog()
    economy = ResourceEconomy(sink=events)
    assert economy.sink is events

    economy.build_structure(state, 0, StructureType.ROAD)
    assert events.texts() == ["P0 built a road"]
