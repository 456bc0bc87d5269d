"""Tests for the issue/answer flow."""

import pytest
from acquisition.challenges import AnswerSubmission, Expired, Failure, NotFound, Success


class TestTargetAcquisitionChallenge:
    """Test issuing and evaluating challenges end to end."""

    def test_issue_stores_record(self, targeting, store):
        """Issuing a challenge leaves exactly one record behind."""
        challenge = targeting.issue()
        assert store.size() == 1
        record = store.consume_if_present(challenge.challenge_id)
        assert record.challenge == challenge

    def test_correct_answer_then_reuse(self, targeting, store, generator, clock, make_challenge):
        """A graded challenge cannot be graded again."""
        store.insert("TARG-42", generator.build_record(make_challenge()))
        clock.advance(0.4)

        submission = AnswerSubmission(challenge_id="TARG-42", closest_target_id="T2")
        verdict = targeting.evaluate(submission)
        assert isinstance(verdict, Success)
        assert verdict.elapsed == pytest.approx(0.4)

        assert targeting.evaluate(submission) == NotFound(challenge_id="TARG-42")

    def test_scenario_wrong_answer(self, targeting, store, generator, make_challenge):
        """Choosing T1 over T2 reports distances 3 and 10."""
        store.insert("TARG-42", generator.build_record(make_challenge()))
        verdict = targeting.evaluate(AnswerSubmission(challenge_id="TARG-42", closest_target_id="T1"))
        assert isinstance(verdict, Failure)
        assert f"{verdict.correct_distance:.2f}" == "3.00"
        assert f"{verdict.chosen_distance:.2f}" == "10.00"
        assert store.size() == 0

    def test_late_answer_is_consumed(self, targeting, store, generator, clock, make_challenge):
        """An expired answer still removes the record."""
        store.insert("TARG-42", generator.build_record(make_challenge()))
        clock.advance(1.5)

        submission = AnswerSubmission(challenge_id="TARG-42", closest_target_id="T2")
        assert isinstance(targeting.evaluate(submission), Expired)
        assert isinstance(targeting.evaluate(submission), NotFound)

    def test_swept_record_is_not_found(self, targeting, store, generator, clock, make_challenge):
        """Sweeping before the answer arrives yields NotFound, not an error."""
        store.insert("TARG-42", generator.build_record(make_challenge()))
        clock.advance(3.0)
        store.sweep_expired(max_age=2.0)

        verdict = targeting.evaluate(AnswerSubmission(challenge_id="TARG-42", closest_target_id="T2"))
        assert isinstance(verdict, NotFound)

    def test_description_mentions_limits(self, targeting):
        """Briefing reflects the configured deadline and target count."""
        text = targeting.description
        assert "Time limit: 1 second" in text
        assert "5-8 targets" in text
        assert "/mission/coordinates" in text
