from shiritori.demo import run_demo


def test_demo_game_winner():
    finished = run_demo()
    assert finished.winner == "d"
    assert finished.words == ("wa1", "wb1", "wc1", "wd1")
    assert dict(finished.player_alive_states) == {"a": False, "b": False, "c": False, "d": True}
