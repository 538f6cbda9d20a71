import datetime as dt

import pytest
from packages.game import MAX_ROWS, Session
from packages.game.machine import Game, Phase
from packages.storage import STORAGE_SLOT, MemoryStore

WORDS = ["crane", "react", "stare", "trace", "cared", "genie", "eerie",
         "level", "lemon", "scoop"]
DAY = dt.date(2026, 10, 19)


class BrokenStore:
    """Every read and write fails like a full or read-only disk."""

    def read(self, slot):
        raise OSError("disk on fire")

    def write(self, slot, record):
        raise OSError("disk on fire")


def _ready(store=None, **kw) -> Game:
    g = Game(store=store, **kw)
    assert g.provide_words(WORDS, DAY) is True
    return g


def _others(game: Game):
    return [w for w in WORDS if w != game.secret]


def _guess(game: Game, word: str):
    for ch in word:
        game.handle_key(ch)
    return game.handle_key("submit")


def test_awaiting_word_ignores_input():
    g = Game()
    assert g.phase is Phase.AWAITING_WORD
    assert g.type_letter("a") is False
    assert g.delete_last() is False
    assert g.submit() is None
    assert g.session is None and g.letter_states == {}


def test_empty_word_list_keeps_waiting():
    g = Game()
    assert g.provide_words([], DAY) is False
    assert g.phase is Phase.AWAITING_WORD
    assert g.provide_words(WORDS, DAY) is True
    assert g.phase is Phase.PLAYING


def test_word_source_failure_keeps_waiting():
    g = Game()
    g.word_source_failed(ConnectionError("offline"))
    assert g.phase is Phase.AWAITING_WORD


def test_secret_matches_daily_selection():
    from packages.engine.daily import select_daily_word
    g = _ready()
    assert g.secret == select_daily_word(WORDS, DAY)


def test_second_delivery_is_ignored():
    g = _ready()
    secret = g.secret
    g.provide_words(["zzzzz"], dt.date(2030, 1, 1))
    assert g.secret == secret and g.day == DAY


def test_every_accepted_mutation_is_persisted():
    store = MemoryStore()
    g = _ready(store)
    g.handle_key("C")
    assert store.read(STORAGE_SLOT)["rows"][0] == "c"
    g.handle_key("Backspace")
    assert store.read(STORAGE_SLOT)["rows"][0] == ""
    _guess(g, _others(g)[0])
    rec = store.read(STORAGE_SLOT)
    assert rec["activeRowIndex"] == 1 and len(rec["evaluations"][0]) == 5


def test_notice_blocks_submit_until_cleared():
    g = _ready()
    notice = _guess(g, "zzzzz")
    assert notice.kind == "not_in_word_list" and g.notice == notice
    # typing still works while the notice shows
    for _ in range(5):
        g.handle_key("delete")
    word = _others(g)[0]
    for ch in word:
        g.handle_key(ch)
    assert g.handle_key("enter") is None
    assert g.session.active_row == 0
    g.clear_notice()
    assert g.notice is None
    assert g.submit() is None
    assert g.session.active_row == 1


def test_duplicate_guess_notice():
    g = _ready()
    word = _others(g)[0]
    _guess(g, word)
    notice = _guess(g, word)
    assert notice.kind == "already_guessed"
    assert g.session.active_row == 1


def test_win():
    g = _ready()
    _guess(g, _others(g)[0])
    _guess(g, g.secret)
    assert g.phase is Phase.WON
    s = g.session
    assert s.is_won and s.is_over and s.active_row == 1
    assert g.type_letter("a") is False
    assert g.share_text().splitlines()[0].endswith("won in 2 guesses")


def test_loss():
    g = _ready()
    for w in _others(g)[:MAX_ROWS]:
        _guess(g, w)
    assert g.phase is Phase.LOST
    assert g.session.active_row == MAX_ROWS - 1
    assert len(g.share_text().splitlines()) == MAX_ROWS + 2


def test_share_text_before_game_over_raises():
    g = _ready()
    with pytest.raises(ValueError):
        g.share_text()


def test_letter_states_recomputed():
    g = _ready()
    assert g.letter_states == {}
    word = _others(g)[0]
    _guess(g, word)
    assert set(g.letter_states) == set(word)


def test_resume_same_day():
    store = MemoryStore()
    g1 = _ready(store)
    _guess(g1, _others(g1)[0])
    g1.handle_key("a")
    g2 = _ready(store)
    assert g2.session == g1.session
    assert g2.phase is Phase.PLAYING


def test_resume_finished_game():
    store = MemoryStore()
    g1 = _ready(store)
    _guess(g1, g1.secret)
    g2 = _ready(store)
    assert g2.phase is Phase.WON


def test_stale_record_discarded():
    store = MemoryStore()
    g1 = _ready(store)
    other = _others(g1)[0]
    stale = Session.fresh(other)
    stale.rows[0] = g1.secret
    stale.active_row = 0
    store.write(STORAGE_SLOT, stale.to_record())
    g2 = _ready(store)
    assert g2.session == Session.fresh(g1.secret)


def test_broken_storage_does_not_stop_play():
    g = _ready(BrokenStore())
    assert g.phase is Phase.PLAYING
    _guess(g, g.secret)
    assert g.phase is Phase.WON


def test_unknown_rule_rejected():
    with pytest.raises(ValueError):
        Game(rule="nope")


def test_session_property_is_a_copy():
    g = _ready()
    s = g.session
    s.rows[0] = "hacked"
    assert g.session.rows[0] == ""


def test_non_ascii_words_never_become_the_secret():
    words = ["ñandu", "crane", "stare"]
    start = dt.date(2026, 1, 1)
    for offset in range(60):
        g = Game()
        g.provide_words(words, start + dt.timedelta(days=offset))
        assert g.words == ("crane", "stare")
        assert g.secret in ("crane", "stare")
        for ch in g.secret:
            g.handle_key(ch)
        assert g.session.active_guess == g.secret
