import pytest

from salvo.game import GameTurn
from salvo.protocol import (
    GameUpdate,
    Message,
    ProtocolError,
    decode_game_update,
    encode_attack,
    encode_connect_request,
    encode_disconnect,
    encode_ready,
    encode_welcome,
    game_turn_label,
    parse_message,
)

BOARD_A = "~" * 100
BOARD_B = "S" * 5 + "~" * 95


def test_ready_and_disconnect_wire_text():
    assert encode_ready() == "READY"
    assert encode_disconnect() == "DISCONNECT"


def test_attack_wire_text():
    assert encode_attack(3, 4) == "ATTACK 3 4"


def test_attack_round_trip():
    message = parse_message(encode_attack(7, 2) + "\n")
    assert message.command == "ATTACK"
    assert message.args == ("7", "2")
    assert len(message.parts) == 3


def test_connect_request_keeps_spaces_in_name():
    message = parse_message(encode_connect_request("Ann Lee"))
    assert message.command == "CONNECT_REQUEST"
    assert " ".join(message.args) == "Ann Lee"


def test_welcome_round_trip():
    message = parse_message(encode_welcome("Host", "Guest", 2))
    assert message == Message("WELCOME", ("Host", "Guest", "2"))


def test_parse_strips_carriage_return():
    assert parse_message("READY\r\n") == Message("READY", ())


def test_parse_empty_line():
    assert parse_message("").command == ""


def test_game_update_round_trip():
    update = GameUpdate(2, BOARD_A, BOARD_B, "Ann attacked (1,2): HIT!", True, "Ann wins!")
    assert decode_game_update(update.encode().split(" ")) == update


def test_game_update_round_trip_without_winner():
    update = GameUpdate(1, BOARD_A, BOARD_B, "Ann's turn to attack.", False, "")
    line = update.encode()
    assert line.endswith(" False N/A")
    assert decode_game_update(parse_message(line).parts) == update


def test_game_update_escapes_spaces():
    update = GameUpdate(1, BOARD_A, BOARD_B, "a b", False)
    words = update.encode().split(" ")
    assert len(words) == 7
    assert words[4] == "a_SPACE_b"


def test_decode_joins_extra_winner_words():
    parts = ["GAME_UPDATE", "1", BOARD_A, BOARD_B, "x", "True", "Ann", "wins!"]
    assert decode_game_update(parts).winner == "Ann wins!"


def test_decode_empty_winner_field():
    parts = ["GAME_UPDATE", "2", BOARD_A, BOARD_B, "x", "False", ""]
    update = decode_game_update(parts)
    assert update.winner == ""
    assert update.game_over is False
    assert update.turn_id == 2


def test_decode_boolean_is_case_insensitive():
    parts = ["GAME_UPDATE", "1", BOARD_A, BOARD_B, "x", "true"]
    assert decode_game_update(parts).game_over is True


@pytest.mark.parametrize(
    "parts",
    [
        ["GAME_UPDATE", "1", BOARD_A, BOARD_B, "x"],
        ["GAME_UPDATE", "one", BOARD_A, BOARD_B, "x", "False"],
        ["GAME_UPDATE", "1", BOARD_A, BOARD_B, "x", "maybe"],
    ],
)
def test_decode_rejects_malformed(parts):
    with pytest.raises(ProtocolError):
        decode_game_update(parts)


def test_protocol_error_is_value_error():
    with pytest.raises(ValueError):
        decode_game_update(["GAME_UPDATE"])


@pytest.mark.parametrize(
    "turn, label",
    [
        (GameTurn.PLAYER1, "P1_TURN"),
        (GameTurn.PLAYER2, "P2_TURN"),
        (GameTurn.GAME_OVER_P1_WINS, "P1_WINS"),
        (GameTurn.GAME_OVER_P2_WINS, "P2_WINS"),
        (GameTurn.SETUP, "SETUP"),
    ],
)
def test_game_turn_labels(turn, label):
    assert game_turn_label(turn) == label


def test_unknown_turn_label():
    assert game_turn_label(9).startswith("UnknownTurn (")