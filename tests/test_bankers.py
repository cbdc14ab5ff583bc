import pytest

from ossim.bankers import main, need_matrix, safety_check

ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
AVAILABLE = [3, 3, 2]


def test_textbook_safe_sequence():
    result = safety_check(ALLOCATION, MAXIMUM, AVAILABLE)
    assert result.safe
    assert result.sequence == (1, 3, 4, 0, 2)


def test_need_plus_allocation_is_maximum():
    need = need_matrix(ALLOCATION, MAXIMUM)
    for need_row, held_row, most_row in zip(need, ALLOCATION, MAXIMUM):
        assert [n + h for n, h in zip(need_row, held_row)] == most_row


def test_result_carries_need_matrix():
    result = safety_check(ALLOCATION, MAXIMUM, AVAILABLE)
    assert result.need == need_matrix(ALLOCATION, MAXIMUM)


def test_safe_sequence_is_permutation():
    result = safety_check(ALLOCATION, MAXIMUM, AVAILABLE)
    assert sorted(result.sequence) == list(range(len(ALLOCATION)))


def test_no_resources_is_unsafe():
    result = safety_check(ALLOCATION, MAXIMUM, [0, 0, 0])
    assert not result.safe
    assert len(result.sequence) < len(ALLOCATION)


def test_earlier_process_may_finish_after_later_one():
    result = safety_check([[0], [1]], [[2], [1]], [1])
    assert result.safe
    assert sorted(result.sequence) == [0, 1]
    assert result.sequence[-1] == 0


def test_sequence_respects_work_vector():
    result = safety_check(ALLOCATION, MAXIMUM, AVAILABLE)
    work = list(AVAILABLE)
    for pid in result.sequence:
        assert all(want <= have for want, have in zip(result.need[pid], work))
        work = [have + held for have, held in zip(work, ALLOCATION[pid])]


def test_allocation_above_maximum_rejected():
    with pytest.raises(ValueError):
        need_matrix([[3]], [[2]])


def test_mismatched_rows_rejected():
    with pytest.raises(ValueError):
        need_matrix([[1, 2]], [[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        need_matrix([[1, 2]], [[1, 2, 3]])


def test_wrong_available_width_rejected():
    with pytest.raises(ValueError):
        safety_check(ALLOCATION, MAXIMUM, [1, 1])


def test_main_reports_safe(capsys):
    args = []
    for row in ALLOCATION:
        args += ["--allocation", ",".join(map(str, row))]
    for row in MAXIMUM:
        args += ["--maximum", ",".join(map(str, row))]
    args += ["--available", *map(str, AVAILABLE)]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "The system is safe" in out
    assert "not safe" not in out


def test_main_reports_unsafe(capsys):
    assert main(["--allocation", "0", "--maximum", "1", "--available", "0"]) == 0
    assert "The system is not safe" in capsys.readouterr().out