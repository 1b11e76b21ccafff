import math

import pytest

from draftboard.config import DEFAULT_SCORING
from draftboard.models import (
    BatterRecord,
    BattingStats,
    PitcherRecord,
    PitchingStats,
    ScoringSettings,
    TwoWayRecord,
)
from draftboard.scoring import (
    calculate_batter_points,
    calculate_pitcher_points,
    calculate_player_points,
    pitching_category_value,
)


def _settings(batting=None, pitching=None) -> ScoringSettings:
    return ScoringSettings(name="Test", batting=batting or {}, pitching=pitching or {})


def test_batter_points_are_weighted_sum():
    stats = BattingStats(HR=10, R=20)
    assert calculate_batter_points(stats, {"HR": 4, "R": 1}) == 60


def test_aliased_batting_categories_score():
    stats = BattingStats.model_validate({"1B": 100, "2B": 30, "3B": 2})
    assert calculate_batter_points(stats, {"1B": 1, "2B": 2, "3B": 3}) == 166


def test_unknown_category_contributes_nothing():
    stats = BattingStats(HR=10)
    assert calculate_batter_points(stats, {"HR": 4, "XBH": 100}) == 40


def test_non_finite_weight_is_ignored():
    stats = BattingStats(HR=10, R=5)
    assert calculate_batter_points(stats, {"HR": math.nan, "R": 2}) == 10


def test_doubling_counting_stats_doubles_points():
    weights = {"HR": 4, "R": 1, "SO": -1, "SB": 2}
    base = BattingStats(HR=20, R=80, SO=120, SB=10)
    doubled = BattingStats(HR=40, R=160, SO=240, SB=20)
    assert calculate_batter_points(doubled, weights) == pytest.approx(
        2 * calculate_batter_points(base, weights)
    )


def test_innings_notation_changes_points():
    stats = PitchingStats(IP=10.1)
    assert calculate_pitcher_points(stats, {"IP": 3}, use_baseball_ip=True) == pytest.approx(31.0)
    assert calculate_pitcher_points(stats, {"IP": 3}, use_baseball_ip=False) == pytest.approx(30.3)


def test_invalid_notation_counts_zero_innings():
    stats = PitchingStats(IP=10.5)
    assert pitching_category_value(stats, "IP", use_baseball_ip=True) == 0.0


def test_missing_quality_starts_are_estimated():
    stats = PitchingStats(GS=30, G=30, IP=190, ERA=3.5)
    assert calculate_pitcher_points(stats, {"QS": 3}) == pytest.approx(52.9)


def test_uploaded_quality_starts_are_used_directly():
    stats = PitchingStats(GS=30, G=30, IP=190, ERA=3.5, QS=12)
    assert calculate_pitcher_points(stats, {"QS": 3}) == 36


def test_zero_weight_skips_estimation():
    stats = PitchingStats(GS=30, G=30, IP=190, ERA=3.5)
    assert calculate_pitcher_points(stats, {"QS": 0, "W": 5}) == 0


def test_two_way_points_add_both_sides():
    settings = _settings(batting={"HR": 4}, pitching={"SO": 1})
    batting = BattingStats(HR=40)
    pitching = PitchingStats(SO=150)
    player = TwoWayRecord(id="660271", name="Shohei Ohtani", batting=batting, pitching=pitching)

    total = calculate_player_points(player, settings, "all")
    assert total == calculate_batter_points(batting, settings.batting) + calculate_pitcher_points(
        pitching, settings.pitching
    )
    assert calculate_player_points(player, settings, "batters") == 160
    assert calculate_player_points(player, settings, "pitchers") == 150


def test_single_role_outside_its_view_scores_zero():
    settings = _settings(batting={"HR": 4}, pitching={"SO": 1})
    batter = BatterRecord(id="b1", name="Slugger", batting=BattingStats(HR=30))
    pitcher = PitcherRecord(id="p1", name="Ace", pitching=PitchingStats(SO=200))

    assert calculate_player_points(batter, settings, "pitchers") == 0
    assert calculate_player_points(pitcher, settings, "batters") == 0
    assert calculate_player_points(batter, settings, "all") == 120
    assert calculate_player_points(pitcher, settings, "all") == 200


def test_default_scoring_produces_finite_totals():
    pitcher = PitcherRecord(
        id="p1",
        name="Ace",
        pitching=PitchingStats(W=14, L=8, G=32, GS=32, IP=195.2, SO=210, H=160, ER=70, BB=50, HR=22, ERA=3.22),
    )
    points = calculate_player_points(pitcher, DEFAULT_SCORING, use_baseball_ip=True)
    assert math.isfinite(points)


def test_unsupported_record_raises():
    with pytest.raises(TypeError):
        calculate_player_points(object(), DEFAULT_SCORING)


def test_each_side_rounds_to_a_tenth():
    assert calculate_batter_points(BattingStats(R=1), {"R": 0.25}) == pytest.approx(0.3)
    assert calculate_batter_points(BattingStats(HR=3), {"HR": 1.01}) == pytest.approx(3.0)

    settings = _settings(batting={"R": 0.25}, pitching={"SO": 0.25})
    player = TwoWayRecord(
        id="660271",
        name="Shohei Ohtani",
        batting=BattingStats(R=1),
        pitching=PitchingStats(SO=1),
    )
    assert calculate_player_points(player, settings, "all") == pytest.approx(0.6)
