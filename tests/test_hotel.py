import pytest

from algokit.hotel import RankTreeAllotter, SegmentTreeAllotter


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
def test_single_room(cls):
    allotter = SegmentTreeAllotter(1) if cls is SegmentTreeAllotter else RankTreeAllotter(1)
    assert allotter.count(0, 0) == 1
    assert allotter.checkin(0, 0) == 0
    assert allotter.checkin(0, 0) is None
    assert allotter.count(0, 0) == 0
    assert allotter.checkout(0) is True
    assert allotter.count(0, 0) == 1
    assert allotter.checkout(0) is False
    assert allotter.count(0, 0) == 1


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
def test_two_rooms(cls):
    allotter = SegmentTreeAllotter(2) if cls is SegmentTreeAllotter else RankTreeAllotter(2)
    assert allotter.count(0, 0) == 1
    assert allotter.count(1, 1) == 1
    assert allotter.count(0, 1) == 2
    assert allotter.checkin(0, 0) == 0
    assert allotter.count(0, 0) == 0
    assert allotter.count(0, 1) == 1
    assert allotter.checkout(0) is True
    assert allotter.count(0, 0) == 1
    assert allotter.count(0, 1) == 2
    assert allotter.checkin(1, 1) == 1
    assert allotter.count(0, 1) == 1
    assert allotter.count(1, 1) == 0
    assert allotter.checkout(1) is True
    assert allotter.count(0, 1) == 2
    assert allotter.count(1, 1) == 1
    assert allotter.checkin(0, 1) == 0
    assert allotter.count(0, 1) == 1
    assert allotter.checkin(0, 1) == 1
    assert allotter.count(0, 1) == 0
    assert allotter.checkout(0) is True
    assert allotter.checkin(1, 1) is None
    assert allotter.count(0, 1) == 1


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
def test_five_rooms(cls):
    allotter = SegmentTreeAllotter(5) if cls is SegmentTreeAllotter else RankTreeAllotter(5)
    assert allotter.checkin(0, 2) == 0
    assert allotter.count(0, 4) == 4
    assert allotter.checkin(0, 2) == 1
    assert allotter.count(0, 4) == 3
    assert allotter.checkin(0, 2) == 2
    assert allotter.count(0, 4) == 2
    assert allotter.checkin(0, 2) is None
    assert allotter.count(0, 4) == 2
    assert allotter.checkin(0, 4) == 3
    assert allotter.count(0, 4) == 1
    assert allotter.checkin(0, 4) == 4
    assert allotter.count(0, 4) == 0
    assert allotter.checkout(0) is True
    assert allotter.count(0, 4) == 1
    assert allotter.checkout(0) is False
    assert allotter.count(0, 4) == 1
    assert allotter.checkout(1) is True
    assert allotter.count(0, 4) == 2
    assert allotter.checkout(2) is True
    assert allotter.count(0, 4) == 3
    assert allotter.checkout(3) is True
    assert allotter.count(0, 4) == 4
    assert allotter.checkout(4) is True
    assert allotter.count(0, 4) == 5


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
def test_eight_rooms(cls):
    allotter = SegmentTreeAllotter(8) if cls is SegmentTreeAllotter else RankTreeAllotter(8)
    assert allotter.count(0, 7) == 8
    assert allotter.count(1, 5) == 5
    assert allotter.count(2, 6) == 5
    assert allotter.checkin(1, 3) == 1
    assert allotter.count(1, 5) == 4
    assert allotter.checkin(2, 4) == 2
    assert allotter.count(1, 5) == 3
    assert allotter.checkout(1) is True
    assert allotter.count(1, 5) == 4
    assert allotter.checkout(2) is True
    assert allotter.count(1, 5) == 5
    assert allotter.checkin(7, 7) == 7
    assert allotter.count(0, 7) == 7
    assert allotter.checkin(7, 7) is None
    assert allotter.count(0, 7) == 7


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
def test_thirteen_rooms(cls):
    allotter = SegmentTreeAllotter(13) if cls is SegmentTreeAllotter else RankTreeAllotter(13)
    assert allotter.count(11, 11) == 1
    assert allotter.count(12, 12) == 1


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
def test_many_rooms(cls):
    allotter = SegmentTreeAllotter(264) if cls is SegmentTreeAllotter else RankTreeAllotter(264)
    assert allotter.count(0, 63) == 64
    assert allotter.count(55, 222) == 168
    assert allotter.count(128, 263) == 136


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
def test_filling_every_room_in_order(cls):
    rooms = 13
    allotter = (
        SegmentTreeAllotter(rooms) if cls is SegmentTreeAllotter else RankTreeAllotter(rooms)
    )
    taken = [allotter.checkin(0, rooms - 1) for _ in range(rooms)]
    assert taken == list(range(rooms))
    assert allotter.count(0, rooms - 1) == 0
    assert allotter.checkin(0, rooms - 1) is None
    assert all(allotter.checkout(room) for room in range(rooms))
    assert allotter.count(0, rooms - 1) == rooms


@pytest.mark.parametrize("rooms", [0, -3])
def test_segment_tree_rejects_empty_hotel(rooms):
    with pytest.raises(ValueError):
        SegmentTreeAllotter(rooms)


@pytest.mark.parametrize("rooms", [0, -3])
def test_rank_tree_rejects_empty_hotel(rooms):
    with pytest.raises(ValueError):
        RankTreeAllotter(rooms)


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
@pytest.mark.parametrize("low, high", [(-1, 2), (3, 1), (0, 5), (5, 5)])
def test_rejects_bad_ranges(cls, low, high):
    allotter = SegmentTreeAllotter(5) if cls is SegmentTreeAllotter else RankTreeAllotter(5)
    with pytest.raises(ValueError):
        allotter.count(low, high)
    with pytest.raises(ValueError):
        allotter.checkin(low, high)


@pytest.mark.parametrize("cls", [SegmentTreeAllotter, RankTreeAllotter])
@pytest.mark.parametrize("room", [-1, 5])
def test_rejects_bad_checkout(cls, room):
    allotter = SegmentTreeAllotter(5) if cls is SegmentTreeAllotter else RankTreeAllotter(5)
    with pytest.raises(ValueError):
        allotter.checkout(room)