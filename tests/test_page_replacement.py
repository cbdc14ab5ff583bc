import pytest

from ossim.page_replacement import PageTrace, fifo, lfu, lru, main

REFERENCE = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_fifo_textbook_faults():
    assert fifo(REFERENCE, 3).faults() == 15


def test_lru_textbook_faults():
    assert lru(REFERENCE, 3).faults() == 12


def test_fifo_shows_belady_anomaly():
    assert fifo(BELADY, 4).faults() > fifo(BELADY, 3).faults()


def test_fifo_evicts_oldest():
    trace = fifo([1, 2, 3], 2)
    assert trace.steps[-1].frames == (3, 2)


def test_fifo_hit_leaves_frames_unchanged():
    trace = fifo([1, 2, 1], 2)
    assert trace.steps[2].hit
    assert trace.steps[2].frames == trace.steps[1].frames


def test_lru_evicts_least_recent():
    trace = lru([1, 2, 1, 3], 2)
    assert trace.steps[-1].frames == (1, 3)


def test_lru_fills_frame_of_reference_index():
    trace = lru([1, 2, 2, 3], 3)
    assert trace.steps[2].frames == (1, 2, None)
    assert trace.steps[-1].frames == (3, 2, None)


def test_lfu_keeps_frequent_page():
    trace = lfu([1, 1, 2, 3], 2)
    final = trace.steps[-1].frames
    assert 1 in final
    assert 2 not in final
    assert 3 in final


def test_lfu_fills_empty_frames_in_order():
    trace = lfu([4, 5], 3)
    assert trace.steps[0].frames == (4, None, None)
    assert trace.steps[1].frames == (4, 5, None)


def test_trace_invariants():
    traces = [fifo(REFERENCE, 3), lru(REFERENCE, 3), lfu(REFERENCE, 3)]
    for trace in traces:
        assert isinstance(trace, PageTrace)
        assert [step.page for step in trace.steps] == REFERENCE
        for step in trace.steps:
            assert len(step.frames) == 3
            assert step.page in step.frames
        assert trace.faults() == sum(1 for step in trace.steps if not step.hit)
        assert trace.faults() >= len(set(REFERENCE))


def test_hit_steps_keep_frames():
    traces = [fifo(REFERENCE, 4), lru(REFERENCE, 4), lfu(REFERENCE, 4)]
    for trace in traces:
        for before, after in zip(trace.steps, trace.steps[1:]):
            if after.hit:
                assert after.frames == before.frames


def test_enough_frames_only_compulsory_faults():
    distinct = len(set(REFERENCE))
    assert fifo(REFERENCE, distinct).faults() == distinct
    assert lfu(REFERENCE, distinct).faults() == distinct


def test_single_frame_faults_on_every_change():
    pages = [1, 1, 2, 2, 1]
    assert fifo(pages, 1).faults() == 3
    assert lru(pages, 1).faults() == 3
    assert lfu(pages, 1).faults() == 3


def test_no_pages_no_faults():
    for trace in (fifo([], 3), lru([], 3), lfu([], 3)):
        assert trace.steps == ()
        assert trace.faults() == 0


@pytest.mark.parametrize("frames", [0, -2])
def test_rejects_bad_frame_count(frames):
    with pytest.raises(ValueError):
        fifo([1, 2], frames)
    with pytest.raises(ValueError):
        lru([1, 2], frames)
    with pytest.raises(ValueError):
        lfu([1, 2], frames)


def test_main_reports_faults(capsys):
    pages = ["7", "0", "1", "2", "0"]
    assert main(["fifo", "--frames", "3", *pages]) == 0
    out = capsys.readouterr().out
    expected = fifo([int(p) for p in pages], 3).faults()
    assert f"Number of page faults : {expected}" in out
    assert "hit" in out


def test_main_marks_empty_frames(capsys):
    assert main(["lfu", "--frames", "2", "9"]) == 0
    out = capsys.readouterr().out
    assert "9\t9\t_" in out


def test_main_rejects_zero_frames():
    with pytest.raises(SystemExit):
        main(["lru", "--frames", "0", "1"])