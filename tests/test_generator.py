"""Tests for challenge generation."""

import random
import re

import pytest
from acquisition.challenges import ChallengeGenerator, PLAYER_POSITION
from acquisition.challenges.geometry import nearest


class TestChallengeGenerator:
    """Test random challenge generation."""

    def test_default_shape(self, generator):
        """Generated challenges respect count range, id format and axis extents."""
        for _ in range(200):
            challenge = generator.generate()
            assert re.fullmatch(r"TARG-\d{1,6}", challenge.challenge_id)
            assert challenge.player_position == PLAYER_POSITION
            assert 5 <= len(challenge.targets) <= 8
            for target in challenge.targets:
                assert -100 <= target.x <= 100
                assert -100 <= target.y <= 100
                assert -50 <= target.z <= 50

    def test_target_ids_are_sequential_and_distinct(self, generator):
        """Targets are named T1..Tn."""
        challenge = generator.generate()
        ids = [t.id for t in challenge.targets]
        assert ids == [f"T{i + 1}" for i in range(len(ids))]
        assert len(set(ids)) == len(ids)

    def test_custom_count_range(self):
        """A fixed count range always yields that many targets."""
        gen = ChallengeGenerator(target_count=(3, 3), rng=random.Random(0))
        assert all(len(gen.generate().targets) == 3 for _ in range(20))

    def test_custom_extents(self):
        """Zero extents collapse every target onto the origin plane."""
        gen = ChallengeGenerator(extents=(10.0, 10.0, 0.0), rng=random.Random(0))
        challenge = gen.generate()
        assert all(t.z == 0.0 for t in challenge.targets)

    def test_timestamp_is_integer(self, generator):
        """Timestamp is coarse epoch seconds."""
        assert isinstance(generator.generate().timestamp, int)

    @pytest.mark.parametrize("count", [(0, 4), (6, 5)])
    def test_invalid_count_range(self, count):
        """Empty or inverted ranges are rejected."""
        with pytest.raises(ValueError):
            ChallengeGenerator(target_count=count)

    def test_negative_extent_rejected(self):
        """Axis extents must be non-negative."""
        with pytest.raises(ValueError):
            ChallengeGenerator(extents=(100.0, -1.0, 50.0))


class TestBuildRecord:
    """Test expected-answer freezing."""

    def test_expected_answer_is_nearest(self, generator, clock):
        """The record carries the nearest target and the clock reading."""
        challenge = generator.generate()
        record = generator.build_record(challenge)
        assert record.challenge is challenge
        assert record.expected_answer == nearest(challenge.player_position, challenge.targets)
        assert record.created_at == clock.now

    def test_scenario_answer(self, generator, make_challenge):
        """T2 at distance 3 beats T1 at distance 10."""
        record = generator.build_record(make_challenge())
        assert record.expected_answer == "T2"


class TestChallengeInvariants:
    """Test Challenge construction checks."""

    def test_duplicate_target_ids_rejected(self):
        """Target ids must be unique within a challenge."""
        from acquisition.challenges import Challenge, Point

        with pytest.raises(ValueError):
            Challenge(
                challenge_id="TARG-1",
                player_position=PLAYER_POSITION,
                targets=(Point("T1", 1.0, 0.0, 0.0), Point("T1", 2.0, 0.0, 0.0)),
                timestamp=0,
            )

    def test_empty_targets_rejected(self):
        """A challenge needs at least one target."""
        from acquisition.challenges import Challenge

        with pytest.raises(ValueError):
            Challenge(challenge_id="TARG-1", player_position=PLAYER_POSITION, targets=(), timestamp=0)
