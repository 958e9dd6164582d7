from catan_lite.engine.board import standard_board
from catan_lite.engine.events import EventLog
from catan_lite.engine.game_state import GameState, make_player
from catan_lite.engine.robber import RobberResolver, discard_half
from catan_lite.engine.types import GamePhase, ResourceType
from catan_lite.utils.repro import make_rng


def _state(*hands, current=0):
    players = [make_player(f"P{pid}", hand) for pid, hand in enumerate(hands)]
    return GameState(players=players, current_player=current, phase=GamePhase.PLAYING)


def test_discard_half_of_nine_removes_four():
    player = make_player("P0", {"wood": 4, "brick": 3, "ore": 2})
    removed = discard_half(player, make_rng(3))

    assert sum(removed.values()) == 4
    assert player.resource_count == 5
    assert all(count >= 0 for count in player.resources.values())
    for resource, amount in removed.items():
        assert amount <= {"wood": 4, "brick": 3, "ore": 2}.get(resource.value, 0)


def test_discard_never_goes_negative():
    for seed in range(25):
        player = make_player("P0", {"wood": 1, "brick": 1, "grain": 1, "sheep": 1, "ore": 6})
        discard_half(player, make_rng(seed))
        assert player.resource_count == 5
        assert all(count >= 0 for count in player.resources.values())


def test_resolve_discards_for_nine_card_holder():
    board = standard_board(seed=1)
    state = _state({}, {"wood": 4, "brick": 3, "ore": 2})
    outcome = RobberResolver().resolve(board, state, make_rng(8))

    assert sum(outcome.discards[1].values()) == 4
    assert 0 not in outcome.discards
    # Player 1 is the only steal target, so the surviving five cards are now split.
    assert state.players[0].resource_count + state.players[1].resource_count == 5
    assert state.players[0].resource_count == 1
    assert all(count >= 0 for player in state.players for count in player.resources.values())


def test_players_below_threshold_keep_their_cards():
    board = standard_board(seed=1)
    state = _state({"sheep": 7})
    events = EventLog()
    outcome = RobberResolver(sink=events).resolve(board, state, make_rng(2))

    assert outcome.discards == {}
    assert state.players[0].resources[ResourceType.SHEEP] == 7
    assert "No other players to steal from" in events.texts()


def test_eight_cards_lose_four():
    board = standard_board(seed=1)
    state = _state({"grain": 8})
    RobberResolver().resolve(board, state, make_rng(2))
    assert state.players[0].resources[ResourceType.GRAIN] == 4


def test_robber_lands_on_a_producing_tile():
    board = standard_board(seed=5)
    for seed in range(30):
        state = _state({}, {})
        events = EventLog()
        outcome = RobberResolver(sink=events).resolve(board, state, make_rng(seed))
        assert outcome.tile_index != board.desert_index
        assert board.tiles[outcome.tile_index].number_token is not None
        assert any(text.startswith(f"Robber moved to tile {outcome.tile_index} ") for text in events.texts())


def test_steal_moves_one_card_to_current_player():
    board = standard_board(seed=1)
    state = _state({}, {"ore": 1}, current=0)
    outcome = RobberResolver().resolve(board, state, make_rng(4))

    assert outcome.stolen_from == 1
    assert outcome.stolen_resource == ResourceType.ORE
    assert state.players[0].resources[ResourceType.ORE] == 1
    assert state.players[1].resources[ResourceType.ORE] == 0


def test_steal_from_empty_target_is_a_notice():
    board = standard_board(seed=1)
    state = _state({"wood": 1}, {})
    events = EventLog()
    outcome = RobberResolver(sink=events).resolve(board, state, make_rng(4))

    assert outcome.stolen_from is None
    assert outcome.stolen_resource is None
    assert state.players[0].resources[ResourceType.WOOD] == 1
    assert "P1 has nothing to steal" in events.texts()


def test_thief_is_never_the_target():
    board = standard_board(seed=1)
    for seed in range(20):
        state = _state({"wood": 1}, {"brick": 1}, {"brick": 1}, current=0)
        outcome = RobberResolver().resolve(board, state, make_rng(seed))
        assert outcome.stolen_from in (1, 2)
        assert state.players[0].resources[ResourceType.WOOD] == 1
        assert state.players[0].resources[ResourceType.BRICK] == 1


def test_empty_event_log_is_kept_as_sink():
    events = EventLog()
    assert RobberResolver(sink=events).sink is events
