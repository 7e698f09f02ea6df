import pytest

from salvo.statuslog import StatusLog


def _clock():
    return "12:00:00"


def test_initial_text_is_welcome():
    assert StatusLog().text == "Welcome! Setup or join a game."


def test_log_prepends_stamped_message():
    log = StatusLog(text="start", clock=_clock)
    log.log("hello")
    assert log.text == "12:00:00: hello\nstart"


def test_newest_message_comes_first():
    log = StatusLog(text="", clock=_clock)
    log.log("first")
    log.log("second")
    assert log.lines == ["12:00:00: second", "12:00:00: first"]


def test_log_is_capped_at_limit():
    log = StatusLog(text="", clock=_clock)
    for index in range(25):
        log.log(f"m{index}")
    assert len(log.lines) == 20
    assert log.lines[0] == "12:00:00: m24"
    assert log.lines[-1] == "12:00:00: m5"


def test_custom_limit():
    log = StatusLog(text="", limit=3, clock=_clock)
    for index in range(5):
        log.log(str(index))
    assert [line.split(": ")[1] for line in log.lines] == ["4", "3", "2"]


def test_replace_overwrites_everything():
    log = StatusLog(clock=_clock)
    log.log("hello")
    log.replace("Ann attacked (1,1): MISS!")
    assert log.text == "Ann attacked (1,1): MISS!"
    assert str(log) == log.text


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        StatusLog(limit=0)