from chipvoice.frame_sequence import FrameSequence


def make_looped():
    return FrameSequence(
        sequence=[5, 6, 7, 8, 9],
        is_looped=True,
        has_release=True,
        loop_start_index=1,
        release_sequence_start_index=3,
    )


def test_value_at_in_range():
    seq = make_looped()
    assert [seq.value_at(i) for i in range(5)] == [5, 6, 7, 8, 9]


def test_value_at_out_of_range_is_zero():
    seq = make_looped()
    assert seq.value_at(-1) == 0
    assert seq.value_at(5) == 0


def test_retire_index_is_65535():
    seq = FrameSequence(sequence=[3], release_sequence_start_index=0)
    assert seq.next_index_of(0) == 65535


def test_next_index_advances_in_hold_part():
    seq = make_looped()
    assert seq.next_index_of(0) == 1
    assert seq.next_index_of(1) == 2


def test_next_index_loops_at_end_of_hold_part():
    seq = make_looped()
    assert seq.next_index_of(2) == seq.loop_start_index


def test_next_index_holds_without_loop():
    seq = make_looped()
    seq.is_looped = False
    assert seq.next_index_of(2) == 2


def test_next_index_in_release_then_retire():
    seq = make_looped()
    assert seq.next_index_of(3) == 4
    assert seq.next_index_of(4) == FrameSequence.SHOULD_RETIRE


def test_is_in_release():
    seq = make_looped()
    assert not seq.is_in_release(2)
    assert seq.is_in_release(3)
    assert seq.is_in_release(4)


def test_defaults_are_empty():
    seq = FrameSequence()
    assert seq.sequence == []
    assert seq.value_at(0) == 0
    assert seq.is_in_release(0)


def test_instances_do_not_share_lists():
    first = FrameSequence()
    second = FrameSequence()
    first.sequence.append(1)
    assert second.sequence == []