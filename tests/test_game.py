import random

import pytest

from salvo.game import BattleshipGame, GameMode, GameTurn
from salvo.player import MISS, SHIP, WATER


def cells_of(player, state):
    board = player.own_board_string()
    return [divmod(i, 10) for i, ch in enumerate(board) if ch == state]


@pytest.fixture
def game():
    g = BattleshipGame(rng=random.Random(7))
    g.start_new_game("Alice", "Bob")
    return g


def test_initial_state_before_start():
    g = BattleshipGame()
    assert g.current_turn is GameTurn.SETUP
    assert g.last_action_message == "Game not started. Waiting for PvP setup."
    assert g.is_game_over()
    assert g.winner_string() == "Game Over!"
    assert g.make_attack(0, 0) is False
    assert g.last_action_message == "Game is over. Game Over!"


def test_default_names_and_first_turn():
    g = BattleshipGame(rng=random.Random(1))
    g.start_new_game("", "")
    assert g.player1.name == "Player 1"
    assert g.player2.name == "Player 2"
    assert g.current_turn is GameTurn.PLAYER1
    assert g.last_action_message == "Player 1's turn to attack."
    assert g.active_mode is GameMode.PLAYER_VS_PLAYER


def test_fleets_placed(game):
    for player in (game.player1, game.player2):
        assert [(s.name, s.size) for s in player.ships] == [
            ("Carrier", 5), ("Battleship", 4), ("Cruiser", 3),
            ("Submarine", 3), ("Destroyer", 2),
        ]
        assert len(cells_of(player, SHIP)) == sum(s.size for s in player.ships)
        assert all(len(s.cells) == s.size for s in player.ships)
    assert not game.is_game_over()


def test_miss_passes_turn(game):
    r, c = cells_of(game.player2, WATER)[0]
    assert game.make_attack(r, c) is True
    assert game.last_action_message == f"Alice attacked ({r},{c}): MISS! Now Bob's turn."
    assert game.current_turn is GameTurn.PLAYER2
    assert game.player1.tracking_cell(r, c) == MISS
    assert game.player2.own_cell(r, c) == MISS


def test_hit_reported(game):
    r, c = game.player2.ships[0].cells[0].row, game.player2.ships[0].cells[0].col
    assert game.make_attack(r, c)
    assert game.last_action_message.startswith(f"Alice attacked ({r},{c}): HIT!")
    assert game.player2.ships[0].hits_taken == 1


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 10), (10, 3)])
def test_out_of_bounds_refused(game, row, col):
    assert game.make_attack(row, col) is False
    assert "invalid move" in game.last_action_message
    assert game.current_turn is GameTurn.PLAYER1


def test_repeat_target_refused(game):
    target = cells_of(game.player2, WATER)[0]
    game.make_attack(*target)
    game.make_attack(*cells_of(game.player1, WATER)[0])
    assert game.make_attack(*target) is False
    assert game.current_turn is GameTurn.PLAYER1
    assert "Cell already targeted or out of bounds" in game.last_action_message


def test_sunk_their_ship(game):
    destroyer = game.player2.ships[4]
    p1_water = cells_of(game.player1, WATER)
    for cell in destroyer.cells:
        game.make_attack(cell.row, cell.col)
        if game.current_turn is GameTurn.PLAYER2:
            game.make_attack(*p1_water.pop())
    assert destroyer.is_sunk()


def test_sunk_message_names_ship(game):
    destroyer = game.player1.ships[4]
    p2_water = cells_of(game.player2, WATER)
    for cell in destroyer.cells:
        game.make_attack(*p2_water.pop())
        game.make_attack(cell.row, cell.col)
    assert game.last_action_message.endswith(" Sunk your Destroyer! Now Alice's turn.")


def test_full_game_player1_wins(game):
    targets = cells_of(game.player2, SHIP)
    p1_water = cells_of(game.player1, WATER)
    for target in targets:
        assert game.make_attack(*target)
        if game.is_game_over():
            break
        assert game.make_attack(*p1_water.pop())
    assert game.current_turn is GameTurn.GAME_OVER_P1_WINS
    assert game.is_game_over()
    assert game.winner_string() == "Alice wins!"
    assert game.last_action_message.endswith("Alice wins!")
    assert game.make_attack(0, 0) is False
    assert game.last_action_message == "Game is over. Alice wins!"


def test_full_game_player2_wins(game):
    targets = cells_of(game.player1, SHIP)
    p2_water = cells_of(game.player2, WATER)
    for target in targets:
        game.make_attack(*p2_water.pop())
        game.make_attack(*target)
    assert game.current_turn is GameTurn.GAME_OVER_P2_WINS
    assert game.winner_string() == "Bob wins!"


def test_player_by_id(game):
    assert game.player_by_id(1) is game.player1
    assert game.player_by_id(2) is game.player2
    assert game.player_by_id(3) is None