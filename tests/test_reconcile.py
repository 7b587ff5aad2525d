"""Tests for best_earnings_guess: voting, tie-breaking and bucketing."""

from __future__ import annotations

import itertools
from datetime import date

import pytest

from earningsdate.errors import EarningsDateErrorCode, ReconciliationError
from earningsdate.models.earnings import AnnounceTime
from earningsdate.reconcile import Placement, best_earnings_guess, place_votes, select_session

from conftest import sourced

BMO = AnnounceTime.BEFORE_MARKET
AMC = AnnounceTime.AFTER_MARKET
UNKNOWN = AnnounceTime.UNKNOWN

WED = date(2024, 3, 6)
THU = date(2024, 3, 7)
FRI = date(2024, 3, 8)
TODAY = date(2024, 3, 1)


def _names(observations) -> list[str]:
    return [o.source for o in observations]


def _assert_partition(guess, observations) -> None:
    buckets = [
        set(_names(guess.concurrences)),
        set(_names(guess.close_disagreements)),
        set(_names(guess.far_disagreements)),
    ]
    for a, b in itertools.combinations(buckets, 2):
        assert not a & b
    for bucket in (guess.concurrences, guess.close_disagreements, guess.far_disagreements):
        assert len(_names(bucket)) == len(set(_names(bucket)))
    assert set().union(*buckets) == {o.source for o in observations}


class TestPlaceVotes:
    def test_exact_observation_votes_once(self):
        votes = place_votes([sourced("X", FRI, BMO)])
        assert list(votes) == [THU]
        assert votes[THU][0].placement is Placement.EXACT

    def test_fuzzy_observation_spills_to_neighbours(self):
        votes = place_votes([sourced("Z", THU, UNKNOWN)])
        assert sorted(votes) == [WED, THU, FRI]
        assert votes[THU][0].placement is Placement.FUZZY
        assert votes[WED][0].placement is Placement.SPILLOVER
        assert votes[FRI][0].placement is Placement.SPILLOVER

    def test_fuzzy_friday_spills_over_weekend(self):
        votes = place_votes([sourced("Z", FRI, UNKNOWN)])
        assert sorted(votes) == [THU, FRI, date(2024, 3, 11)]


class TestSelectSession:
    def test_tie_prefers_earliest(self):
        votes = place_votes([sourced("A", THU, AMC), sourced("B", FRI, AMC)])
        assert select_session(votes, TODAY) == (THU, 1)

    def test_past_sessions_ignored(self):
        votes = place_votes([
            sourced("A", WED, AMC),
            sourced("B", WED, AMC),
            sourced("C", FRI, AMC),
        ])
        assert select_session(votes, THU) == (FRI, 1)

    def test_today_is_eligible(self):
        votes = place_votes([sourced("A", THU, AMC)])
        assert select_session(votes, THU) == (THU, 1)


class TestScenarios:
    def test_before_and_after_market_agree(self):
        observations = [sourced("X", FRI, BMO), sourced("Y", THU, AMC)]
        guess = best_earnings_guess(observations, TODAY)
        assert guess.last_session == THU
        assert set(_names(guess.concurrences)) == {"X", "Y"}
        assert guess.close_disagreements == []
        assert guess.far_disagreements == []
        assert guess.votes == 2

    def test_fuzzy_observation_concurs_at_its_own_session(self):
        observations = [
            sourced("X", FRI, BMO),
            sourced("Y", THU, AMC),
            sourced("Z", THU, UNKNOWN),
        ]
        guess = best_earnings_guess(observations, TODAY)
        assert guess.last_session == THU
        assert guess.votes == 3
        assert set(_names(guess.concurrences)) == {"X", "Y", "Z"}
        assert "Z" not in _names(guess.close_disagreements)

    def test_all_sessions_in_past_raises(self):
        observations = [sourced("X", FRI, BMO), sourced("Y", THU, AMC)]
        with pytest.raises(ReconciliationError) as excinfo:
            best_earnings_guess(observations, date(2024, 3, 11))
        assert excinfo.value.code is EarningsDateErrorCode.NO_CANDIDATE

    def test_empty_input_raises_no_data(self):
        with pytest.raises(ReconciliationError) as excinfo:
            best_earnings_guess([], TODAY)
        assert excinfo.value.code is EarningsDateErrorCode.NO_DATA


class TestBucketing:
    def test_close_and_far_disagreements(self):
        observations = [
            sourced("A", THU, AMC),
            sourced("B", THU, AMC),
            sourced("C", FRI, AMC),  # one session later
            sourced("D", WED, AMC),  # one session earlier
            sourced("E", date(2024, 4, 25), AMC),
        ]
        guess = best_earnings_guess(observations, TODAY)
        assert guess.last_session == THU
        assert set(_names(guess.concurrences)) == {"A", "B"}
        assert _names(guess.close_disagreements) == ["D", "C"]
        assert _names(guess.far_disagreements) == ["E"]
        _assert_partition(guess, observations)

    def test_fuzzy_spillover_into_winner_counts_as_concurrence(self):
        # Z (unknown, Wed) spills a vote onto Thursday.
        observations = [
            sourced("A", THU, AMC),
            sourced("B", THU, AMC),
            sourced("Z", WED, UNKNOWN),
        ]
        guess = best_earnings_guess(observations, TODAY)
        assert guess.last_session == THU
        assert guess.votes == 3
        assert set(_names(guess.concurrences)) == {"A", "B", "Z"}
        _assert_partition(guess, observations)

    def test_fuzzy_far_observation_listed_once(self):
        observations = [
            sourced("A", THU, AMC),
            sourced("B", THU, AMC),
            sourced("Z", date(2024, 4, 24), UNKNOWN),
        ]
        guess = best_earnings_guess(observations, TODAY)
        assert _names(guess.far_disagreements) == ["Z"]
        _assert_partition(guess, observations)

    def test_fuzzy_votes_can_outweigh_exact_ones(self):
        # Two fuzzy sources straddling Thursday beat one exact Friday vote.
        observations = [
            sourced("A", FRI, AMC),
            sourced("Y", WED, UNKNOWN),
            sourced("Z", FRI, UNKNOWN),
        ]
        guess = best_earnings_guess(observations, TODAY)
        assert guess.last_session == THU
        assert guess.votes == 2
        assert set(_names(guess.concurrences)) == {"Y", "Z"}
        assert _names(guess.close_disagreements) == ["A"]

    def test_past_observations_become_far_disagreements(self):
        observations = [sourced("A", FRI, AMC), sourced("Old", date(2024, 2, 1), AMC)]
        guess = best_earnings_guess(observations, date(2024, 3, 4))
        assert guess.last_session == FRI
        assert _names(guess.far_disagreements) == ["Old"]

    def test_does_not_mutate_input(self):
        observations = [sourced("A", THU, AMC), sourced("B", FRI, BMO)]
        snapshot = list(observations)
        guess = best_earnings_guess(observations, TODAY)
        guess.concurrences.append(sourced("C", THU, AMC))
        assert observations == snapshot


class TestProperties:
    OBSERVATIONS = [
        sourced("A", THU, AMC),
        sourced("B", FRI, BMO),
        sourced("C", FRI, UNKNOWN),
        sourced("D", date(2024, 3, 12), AMC),
        sourced("E", date(2024, 3, 5), UNKNOWN),
        sourced("F", date(2024, 5, 2), BMO),
    ]

    def test_buckets_partition_sources(self):
        guess = best_earnings_guess(self.OBSERVATIONS, TODAY)
        _assert_partition(guess, self.OBSERVATIONS)

    def test_order_independent(self):
        expected = best_earnings_guess(self.OBSERVATIONS, TODAY)
        for perm in itertools.permutations(self.OBSERVATIONS):
            guess = best_earnings_guess(list(perm), TODAY)
            assert guess.last_session == expected.last_session
            assert guess.votes == expected.votes
            assert set(guess.concurrences) == set(expected.concurrences)
            assert set(guess.close_disagreements) == set(expected.close_disagreements)
            assert set(guess.far_disagreements) == set(expected.far_disagreements)

    def test_repeatable(self):
        first = best_earnings_guess(self.OBSERVATIONS, TODAY)
        second = best_earnings_guess(self.OBSERVATIONS, TODAY)
        assert first == second


class TestDateRangeEdges:
    def test_fuzzy_first_day_skips_missing_neighbour(self):
        votes = place_votes([sourced("Z", date(1, 1, 1), UNKNOWN)])
        assert sorted(votes) == [date(1, 1, 1), date(1, 1, 2)]

    def test_fuzzy_last_day(self):
        guess = best_earnings_guess([sourced("Z", date.max, UNKNOWN)], TODAY)
        assert guess.last_session == date(9999, 12, 30)
        assert _names(guess.concurrences) == ["Z"]
        assert guess.close_disagreements == []
        assert guess.far_disagreements == []

    def test_exact_last_day_wins(self):
        guess = best_earnings_guess([sourced("A", date.max, AMC)], TODAY)
        assert guess.last_session == date.max
        assert guess.votes == 1

    def test_before_market_first_day_is_far_disagreement(self):
        observations = [sourced("A", THU, AMC), sourced("Early", date(1, 1, 1), BMO)]
        guess = best_earnings_guess(observations, TODAY)
        assert guess.last_session == THU
        assert _names(guess.far_disagreements) == ["Early"]
        _assert_partition(guess, observations)

    def test_only_unplaceable_observations_raise(self):
        with pytest.raises(ReconciliationError) as excinfo:
            best_earnings_guess([sourced("Early", date(1, 1, 1), BMO)], TODAY)
        assert excinfo.value.code is EarningsDateErrorCode.NO_CANDIDATE
