from __future__ import annotations

import pytest

from streamext import InvalidArgument, WindowBuffer, partition


def _feed(buffer: WindowBuffer, batches: list[list[int]]) -> list[list[int]]:
    windows: list[list[int]] = []
    for batch in batches:
        windows.extend(buffer.extend(batch))
    windows.extend(buffer.flush())
    return windows


def test_window_buffer_emits_overlapping_windows() -> None:
    buffer = WindowBuffer(4, 2)
    assert buffer.extend([0, 1, 2]) == []
    assert buffer.extend([3, 4, 5]) == [[0, 1, 2, 3], [2, 3, 4, 5]]
    assert buffer.pending == [4, 5]
    assert len(buffer) == 2


def test_window_buffer_skips_gap_elements_across_batches() -> None:
    buffer = WindowBuffer(2, 5)
    assert buffer.extend([0, 1, 2]) == [[0, 1]]
    assert buffer.extend([3, 4, 5, 6]) == [[5, 6]]
    assert buffer.skipped == 3


def test_flush_pads_or_drops_trailing_window() -> None:
    padded = WindowBuffer(3, 4, pad=[0])
    assert _feed(padded, [[0, 1, 2, 3, 4], [5, 6, 7, 8, 9]]) == [[0, 1, 2], [4, 5, 6], [8, 9, 0]]

    dropped = WindowBuffer(3, 4)
    assert _feed(dropped, [[0, 1, 2, 3, 4], [5, 6, 7, 8, 9]]) == [[0, 1, 2], [4, 5, 6]]


def test_flush_ignores_leftover_overlap() -> None:
    buffer = WindowBuffer(3, 1, pad=[0])
    assert buffer.extend(range(5)) == [[0, 1, 2], [1, 2, 3], [2, 3, 4]]
    assert buffer.flush() == []
    assert len(buffer) == 0


@pytest.mark.parametrize(
    "size,step,pad",
    [(3, None, None), (3, 1, None), (3, 2, [9]), (2, 5, [9, 9, 9]), (4, 6, []), (1, 1, None), (5, 3, ["x", "y"])],
)
@pytest.mark.parametrize("batch_size", [1, 2, 7, 50])
def test_window_buffer_matches_partition_engine(size: int, step: int | None, pad: list | None, batch_size: int) -> None:
    data = list(range(23))
    batches = [data[i : i + batch_size] for i in range(0, len(data), batch_size)]
    expected = list(partition(data, size, step, pad))
    assert _feed(WindowBuffer(size, step, pad), batches) == expected


def test_window_buffer_rejects_invalid_sizes() -> None:
    with pytest.raises(InvalidArgument):
        WindowBuffer(0)
    with pytest.raises(InvalidArgument):
        WindowBuffer(3, 0)


def test_skipped_survives_flush_and_clears_on_reset() -> None:
    buffer = WindowBuffer(2, 4)
    buffer.extend(range(6))
    assert buffer.skipped == 2
    buffer.flush()
    assert buffer.skipped == 2

    buffer.reset()
    assert buffer.skipped == 0
    assert buffer.extend(range(4)) == [[0, 1]]
    assert buffer.skipped == 2
