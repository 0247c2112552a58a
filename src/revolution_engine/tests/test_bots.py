"""
Bot games driven through the engine from deal to game over.
"""

import pytest

from revolution_engine.bots import BotAction, GreedyBot, apply_action
from revolution_engine.engine import start_next_round, validate_card_conservation
from revolution_engine.models import CardExchange, GameOver, Playing, RoundOver
from revolution_engine.rules import create_rules

from helpers import cards, pid, rig, started_game

MAX_ACTIONS = 5000


def run_round(state, bots):
    """Let the bots act until the round (or game) is over."""
    for step in range(MAX_ACTIONS):
        if not isinstance(state.phase, (Playing, CardExchange)):
            return state
        for bot in bots:
            action = bot.choose_action(state)
            if action is not None:
                state = apply_action(state, bot.player_id, action, now=float(step))
                assert validate_card_conservation(state)
                break
        else:
            pytest.fail(f"No bot could act in phase {state.phase.name}")
    pytest.fail("Round did not finish")


@pytest.mark.parametrize("player_count", [3, 4, 5, 6])
def test_bots_play_full_game(player_count):
    """Bots play several rounds, including card exchanges at larger tables."""
    config = create_rules(rounds_to_play=3)
    state = started_game(player_count, seed=player_count, config=config)
    bots = [GreedyBot(pid(i)) for i in range(player_count)]

    for round_number in range(1, 4):
        state = run_round(state, bots)
        assert isinstance(state.phase, RoundOver)
        assert state.round_number == round_number
        assert sorted(p.finishing_position for p in state.players) == list(range(1, player_count + 1))
        state = start_next_round(state, seed=100 + round_number)

    assert isinstance(state.phase, GameOver)
    # Each round hands out 0 + 1 + ... + (n - 1) points
    total = sum(score for _, score in state.phase.final_scores)
    assert total == 3 * sum(range(player_count))


def test_bot_leads_weakest_rank():
    state = rig(started_game(3), ["3S", "3H", "9D", "2C"], ["KH"], ["QC"])
    action = GreedyBot(pid(0)).choose_action(state)
    assert action.type == "play"
    assert set(action.cards) == set(cards("3S", "3H"))


def test_bot_holds_twos_back():
    state = rig(started_game(3), ["5S", "2C", "KD"], ["9H", "4H", "2D"], ["QC"])
    state = apply_action(state, pid(0), BotAction.play(cards("5S")))
    action = GreedyBot(pid(1)).choose_action(state)
    assert list(action.cards) == cards("9H")


def test_bot_passes_without_a_valid_play():
    state = rig(started_game(3), ["KS", "3D"], ["9H", "4H"], ["QC"])
    state = apply_action(state, pid(0), BotAction.play(cards("KS")))
    action = GreedyBot(pid(1)).choose_action(state)
    assert action.type == "pass"


def test_bot_waits_for_its_turn():
    state = started_game(3)
    assert GreedyBot(pid(1)).choose_action(state) is None


def test_unknown_action_rejected():
    with pytest.raises(ValueError):
        apply_action(started_game(3), pid(0), BotAction("shuffle"))
