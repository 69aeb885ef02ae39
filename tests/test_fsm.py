from shiritori.domain.common.fsm import can_transition_to


def test_phases_only_move_forward():
    assert can_transition_to("lobbying", "playing") is True
    assert can_transition_to("playing", "finished") is True

    assert can_transition_to("lobbying", "finished") is False
    assert can_transition_to("playing", "lobbying") is False
    assert can_transition_to("finished", "playing") is False
    assert can_transition_to("finished", "finished") is False
