import pytest

from draftboard.estimation import estimate_complete_games, estimate_quality_starts, estimate_shutouts
from draftboard.ingest import OutcomeSelection, apply_outcome_estimates, parse_projection_text


PITCHERS_CSV = (
    "Name,Team,G,GS,IP,ERA,QS,MLBAMID\n"
    "Gerrit Cole,NYY,30,30,190.1,3.20,20,543037\n"
    "Clay Holmes,NYM,30,29,165.2,3.80,,605280\n"
    "Devin Williams,NYY,65,0,62,2.50,,642207\n"
)


def _parsed():
    return parse_projection_text(PITCHERS_CSV)


def test_nothing_selected_returns_input_unchanged():
    result = _parsed()
    updated = apply_outcome_estimates(result.players, result.missing_outcomes, OutcomeSelection())
    assert updated is result.players


def test_quality_starts_filled_only_where_missing():
    result = _parsed()
    updated = apply_outcome_estimates(result.players, result.missing_outcomes, OutcomeSelection(QS=True))

    cole, holmes, williams = updated
    assert cole.pitching.QS == 20
    assert holmes.pitching.QS == pytest.approx(
        estimate_quality_starts(games_started=29, games=30, innings=165.2, era=3.8)
    )
    assert holmes.pitching.QS > 0
    assert williams.pitching.QS == 0
    assert result.players[1].pitching.QS == 0


def test_shutouts_filled_without_touching_complete_games():
    result = _parsed()
    updated = apply_outcome_estimates(
        result.players, result.missing_outcomes, OutcomeSelection(ShO=True), use_baseball_ip=True
    )

    cole = updated[0]
    inputs = {"games_started": 30, "games": 30, "innings": 190.1, "era": 3.2, "use_baseball_ip": True}
    complete_games = estimate_complete_games(**inputs)
    assert cole.pitching.CG == 0
    assert cole.pitching.ShO == pytest.approx(estimate_shutouts(complete_games=complete_games, **inputs))


def test_all_outcomes_selected():
    result = _parsed()
    selection = OutcomeSelection(QS=True, CG=True, ShO=True)
    assert selection.any()

    updated = apply_outcome_estimates(result.players, result.missing_outcomes, selection)
    for pitcher in updated:
        assert pitcher.pitching.QS >= 0
        assert pitcher.pitching.CG >= 0
        assert pitcher.pitching.ShO >= 0
    assert updated[2].pitching.CG == 0


def test_no_missing_summary_is_a_no_op():
    result = _parsed()
    updated = apply_outcome_estimates(result.players, None, OutcomeSelection(QS=True))
    assert updated is result.players
