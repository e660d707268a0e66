"""
End-to-end tests for the single-pass enrichment and split pipeline.
"""

import math
import pytest

from core.calculations import average_grade
from core.constants import SPLIT_MIN_DISTANCE_METERS
from core.models.split import SplitType
from core.models.trackpoint import RawPoint
from core.pipeline import process_track, TrackProcessingResult
from core.splits.merger import merge_adjacent_splits


def rolling_track_steps(count=400):
    """Deterministic hilly profile with small oscillations."""
    steps = []
    previous = 100.0
    for i in range(1, count + 1):
        elevation = 100 + 40 * math.sin(i / 9.0) + ((i * 37) % 11 - 5) * 0.4
        distance = 20 + (i % 5) * 8
        steps.append((distance, elevation - previous))
        previous = elevation
    return steps


class TestScenarios:

    def test_short_climb_yields_no_splits(self, track_builder):
        """A climb that never reaches the distance threshold is dropped."""
        points = track_builder([(150, 5), (150, 5)])
        result = process_track(points)

        assert result.splits == []
        assert len(result.trackpoints) == 3

    def test_short_climb_with_coincident_end_yields_no_splits(self, track_builder):
        """Elevations 100, 105, 110 at cumulative distances 0, 200, 200."""
        points = track_builder([(200, 5), (0, 5)])
        result = process_track(points)

        assert result.splits == []
        assert [p.distance_from_start for p in result.trackpoints] == [0.0, 200.0, 200.0]
        assert result.trackpoints[2].grade == 0.0

    def test_climb_then_descent(self, climb_and_descent_points):
        result = process_track(climb_and_descent_points)

        assert len(result.splits) == 2
        ascent, descent = result.splits

        assert ascent.type == SplitType.ASCENT
        assert ascent.total_distance == pytest.approx(500, abs=0.01)
        assert ascent.average_grade == 10.0
        assert ascent.start_distance == 0.0
        assert ascent.start_elevation == 100.0
        assert ascent.end_elevation == 150.0

        assert descent.type == SplitType.DESCENT
        assert descent.total_distance == pytest.approx(500, abs=0.01)
        assert descent.average_grade == -10.0
        assert descent.start_distance == pytest.approx(ascent.end_distance)
        assert descent.end_distance == pytest.approx(1000, abs=0.01)
        assert descent.end_elevation == 100.0

    def test_climb_interrupted_by_short_dip_is_merged(self, track_builder):
        """450 m climb, 50 m dip, 400 m climb, 450 m descent."""
        points = track_builder([(450, 45), (50, -2), (400, 40), (450, -45)])
        result = process_track(points)

        assert len(result.splits) == 2
        ascent, descent = result.splits

        assert ascent.type == SplitType.ASCENT
        assert ascent.start_distance == 0.0
        assert ascent.end_distance == pytest.approx(900, abs=0.01)
        assert ascent.total_distance == pytest.approx(900, abs=0.01)
        # The dip's -2 m is discarded when the short run turns back uphill
        assert ascent.total_elevation_change == pytest.approx(85)
        assert ascent.end_elevation == pytest.approx(183)
        assert ascent.average_grade == 9.44

        assert descent.type == SplitType.DESCENT
        assert descent.start_elevation == pytest.approx(183)
        assert descent.average_grade == -10.0

    def test_empty_track(self):
        result = process_track([])
        assert result == TrackProcessingResult(trackpoints=[], splits=[])

    def test_single_point(self):
        result = process_track([RawPoint(45.0, 6.0, 100.0)])
        assert len(result.trackpoints) == 1
        assert result.trackpoints[0].distance_from_start == 0.0
        assert result.trackpoints[0].grade == 0.0
        assert result.splits == []


class TestMissingElevation:

    def test_track_without_elevation_has_no_splits(self, track_builder):
        points = [RawPoint(p.latitude, p.longitude, None)
                  for p in track_builder([(500, 50), (500, -50)])]
        result = process_track(points)

        assert result.splits == []
        assert all(p.grade == 0.0 for p in result.trackpoints)
        assert all(p.elevation is None for p in result.trackpoints)
        assert result.trackpoints[-1].distance_from_start == pytest.approx(1000, abs=0.01)

    def test_trailing_points_without_elevation_extend_track_end(self, track_builder):
        points = track_builder([(500, 50), (500, -50), (100, None)])
        result = process_track(points)

        descent = result.splits[-1]
        assert descent.end_distance == pytest.approx(1100, abs=0.01)
        assert descent.end_elevation == 100.0
        assert descent.total_distance == pytest.approx(500, abs=0.01)

    def test_gap_in_elevation_does_not_break_split(self, track_builder):
        points = track_builder([(300, 30), (100, None), (100, 10), (200, 20)])
        result = process_track(points)

        assert len(result.splits) == 1
        assert result.splits[0].type == SplitType.ASCENT
        # The steps touching the gap are not counted
        assert result.splits[0].total_distance == pytest.approx(500, abs=0.01)


class TestInvariants:

    @pytest.fixture
    def rolling_result(self, track_builder):
        return process_track(track_builder(rolling_track_steps()))

    def test_trackpoints_match_input(self, track_builder):
        points = track_builder(rolling_track_steps())
        result = process_track(points)
        assert len(result.trackpoints) == len(points)
        assert [p.elevation for p in result.trackpoints] == [p.elevation for p in points]

    def test_cumulative_distance_is_non_decreasing(self, rolling_result):
        distances = [p.distance_from_start for p in rolling_result.trackpoints]
        assert distances == sorted(distances)

    def test_rolling_track_produces_splits(self, rolling_result):
        assert len(rolling_result.splits) >= 2

    def test_splits_meet_minimum_distance(self, rolling_result):
        assert all(s.total_distance >= SPLIT_MIN_DISTANCE_METERS for s in rolling_result.splits)

    def test_split_types_alternate(self, rolling_result):
        splits = rolling_result.splits
        assert all(a.type != b.type for a, b in zip(splits, splits[1:]))

    def test_splits_are_ordered(self, rolling_result):
        splits = rolling_result.splits
        assert all(s.end_distance >= s.start_distance for s in splits)
        assert all(a.start_distance <= b.start_distance for a, b in zip(splits, splits[1:]))

    def test_average_grade_formula(self, rolling_result):
        for split in rolling_result.splits:
            assert split.average_grade == average_grade(split.total_elevation_change,
                                                        split.total_distance)

    def test_final_splits_are_already_merged(self, rolling_result):
        assert merge_adjacent_splits(rolling_result.splits) == rolling_result.splits
