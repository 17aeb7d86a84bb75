from lifesim.core.bounds import BoundingBox, LiveRegionTracker


def test_bounding_box_dimensions_and_contains():
    box = BoundingBox(min_x=1, min_y=2, max_x=4, max_y=2)
    assert box.width == 4
    assert box.height == 1
    assert box.contains(1, 2)
    assert box.contains(4, 2)
    assert not box.contains(0, 2)
    assert not box.contains(2, 3)


def test_tracker_empty():
    tracker = LiveRegionTracker(5, 5)
    assert tracker.bounding_box is None


def test_tracker_grows_and_shrinks():
    tracker = LiveRegionTracker(10, 8)
    tracker.record(2, 3, True)
    tracker.record(7, 1, True)
    assert tracker.bounding_box == BoundingBox(2, 1, 7, 3)

    tracker.record(7, 1, False)
    assert tracker.bounding_box == BoundingBox(2, 3, 2, 3)

    tracker.record(2, 3, False)
    assert tracker.bounding_box is None


def test_tracker_shared_row_keeps_extent():
    tracker = LiveRegionTracker(6, 6)
    tracker.record(1, 4, True)
    tracker.record(5, 4, True)
    tracker.record(1, 4, False)
    assert tracker.bounding_box == BoundingBox(5, 4, 5, 4)


def test_tracker_clear():
    tracker = LiveRegionTracker(4, 4)
    tracker.record(0, 0, True)
    tracker.clear()
    assert tracker.bounding_box is None
