import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest

from draftboard.ingest import (
    IdConfig,
    ProjectionFileError,
    build_projection_group,
    detect_delimiter,
    detect_id_source,
    detect_role,
    generated_player_id,
    load_projection_file,
    merge_two_way,
    parse_projection_text,
)
from draftboard.models import BatterRecord, PitcherRecord


BATTERS_CSV = (
    "Name,Team,G,PA,HR,R,RBI,SB,1B,2B,PlayerId,MLBAMID\n"
    "Aaron Judge,NYY,150,680,52,120,130,8,70,30,15640,592450\n"
    "Juan Soto,NYM,155,700,38,115,105,9,90,28,20123,665742\n"
)

PITCHERS_CSV = (
    "Name,Team,G,GS,IP,ERA,W,SO,QS,MLBAMID\n"
    "Gerrit Cole,NYY,30,30,190.1,3.20,14,210,20,543037\n"
    "Clay Holmes,NYM,30,29,165.2,3.80,11,150,,605280\n"
)


def test_detect_delimiter_prefers_tabs_when_dominant():
    assert detect_delimiter("Name\tTeam\tHR\nA\tB\t1") == "\t"
    assert detect_delimiter("Name,Team,HR\nA,B,1") == ","


def test_detect_role_counts_marker_columns():
    assert detect_role(["Name", "PA", "AB", "HR"]) == "batter"
    assert detect_role(["Name", "IP", "ERA", "GS"]) == "pitcher"
    assert detect_role(["Name", "HR"]) == "pitcher"


def test_detect_id_source_priority():
    assert detect_id_source(["Name", "PlayerId", "MLBAMID"]) == "MLBAMID"
    assert detect_id_source(["Name", "playerid"]) == "PlayerId"
    assert detect_id_source(["Name", "Team"]) == "generated"


def test_parse_batters_with_mlbam_ids():
    result = parse_projection_text(BATTERS_CSV)

    assert result.role == "batter"
    assert result.row_count == 2
    assert result.errors == []
    assert result.id_source == "MLBAMID"
    assert not result.needs_id_selection
    assert result.missing_outcomes is None

    judge = result.players[0]
    assert isinstance(judge, BatterRecord)
    assert judge.id == "592450"
    assert judge.player_id == "15640"
    assert judge.batting.HR == 52
    assert judge.batting.singles == 70
    assert judge.batting.value("2B") == 30


def test_parse_tab_separated_pitchers_with_bom():
    content = "\ufeff" + PITCHERS_CSV.replace(",", "\t")
    result = parse_projection_text(content)

    assert result.role == "pitcher"
    assert result.available_columns[0] == "Name"
    cole = result.players[0]
    assert isinstance(cole, PitcherRecord)
    assert cole.pitching.IP == pytest.approx(190.1)
    assert cole.pitching.QS == 20


def test_missing_outcome_columns_are_summarized():
    result = parse_projection_text(PITCHERS_CSV)

    missing = result.missing_outcomes
    assert missing is not None
    assert missing["QS"].total_players == 2
    assert missing["QS"].missing_player_ids == ("605280",)
    assert missing["CG"].missing_player_ids == ("543037", "605280")
    assert missing["ShO"].missing_player_ids == ("543037", "605280")


def test_generated_ids_when_no_identifier_column():
    content = (
        "Name,Team,IP,ERA,GS\n"
        "Gerrit Cole,NYY,190,3.2,30\n"
        "Gerrit Cole,NYY,10,5.0,2\n"
        "Free Agent Jr.,,20,4.0,0\n"
    )
    result = parse_projection_text(content)

    assert result.id_source == "generated"
    assert result.needs_id_selection
    assert [p.id for p in result.players] == [
        "pitcher-gerritcole-NYY",
        "pitcher-gerritcole-NYY-2",
        "pitcher-freeagent-FA",
    ]


def test_generated_player_id_normalizes_name():
    assert generated_player_id("batter", "José Ramírez", "cle") == "batter-joseramirez-CLE"
    assert generated_player_id("batter", "Bobby Witt Jr.", "KC") == "batter-bobbywitt-KC"


def test_explicit_id_config_skips_selection_prompt():
    content = "Name,Team,fgid,PA,HR\nAaron Judge,NYY,sa123,680,52\n"
    result = parse_projection_text(content, id_config=IdConfig(source="custom", custom_column="fgid"))

    assert not result.needs_id_selection
    assert result.id_source == "custom"
    assert result.players[0].id == "sa123"


def test_blank_identifier_falls_back_to_generated_id_with_note():
    content = "Name,Team,PA,HR,MLBAMID\nAaron Judge,NYY,680,52,\n"
    result = parse_projection_text(content)

    assert result.players[0].id == "batter-aaronjudge-NYY"
    assert result.errors == ["Row 1: no MLBAMID value; generated 'batter-aaronjudge-NYY'"]


def test_malformed_rows_are_skipped_with_errors():
    content = (
        "Name,Team,PA,HR,MLBAMID\n"
        "Aaron Judge,NYY,680,52,592450\n"
        "Bad Row,NYY,600,lots,1\n"
        ",NYY,600,10,2\n"
        "Duplicate,NYY,600,10,592450\n"
    )
    result = parse_projection_text(content)

    assert result.row_count == 1
    assert result.errors == [
        "Row 2: column 'HR' value 'lots' is not numeric",
        "Row 3: missing player name",
        "Row 4: duplicate identifier '592450'",
    ]


def test_force_role_overrides_detection():
    content = "Name,Team,HR,MLBAMID\nShohei Ohtani,LAD,44,660271\n"
    assert parse_projection_text(content).role == "pitcher"
    assert parse_projection_text(content, force_role="batter").role == "batter"


def test_unreadable_files_raise():
    with pytest.raises(ProjectionFileError):
        parse_projection_text("")
    with pytest.raises(ProjectionFileError):
        parse_projection_text("Team,HR\nNYY,3\n")


def test_load_projection_file(tmp_path: Path):
    path = tmp_path / "batters.csv"
    path.write_text(BATTERS_CSV, encoding="utf-8")

    result = load_projection_file(path)
    assert result.row_count == 2


def test_merge_two_way_joins_on_identifier():
    batters = [BatterRecord(id="a1", name="Two Way"), BatterRecord(id="b1", name="Hitter")]
    pitchers = [PitcherRecord(id="a1", name="Two Way", team="LAD"), PitcherRecord(id="c1", name="Arm")]

    merged = merge_two_way(batters, pitchers)

    assert [p.id for p in merged.two_way] == ["a1"]
    assert merged.two_way[0].team == "LAD"
    assert [p.id for p in merged.batters] == ["b1"]
    assert [p.id for p in merged.pitchers] == ["c1"]


def test_build_projection_group_records_provenance():
    batters = parse_projection_text(BATTERS_CSV + "Shohei Ohtani,LAD,150,650,44,110,100,20,80,30,19755,660271\n")
    pitchers = parse_projection_text(PITCHERS_CSV + "Shohei Ohtani,LAD,20,20,110,3.1,8,130,10,660271\n")
    created = datetime(2025, 3, 1, tzinfo=timezone.utc)

    group = build_projection_group(" Steamer 2025 ", batters=batters, pitchers=pitchers, created_at=created)

    assert group.name == "Steamer 2025"
    assert group.created_at == created
    assert group.batter_id_source == "MLBAMID"
    assert group.pitcher_id_source == "MLBAMID"
    assert group.can_merge_two_way
    assert [p.id for p in group.two_way] == ["660271"]
    assert len(group.batters) == 3
    assert len(group.pitchers) == 3


def test_generated_ids_block_two_way_merging():
    batters = parse_projection_text("Name,Team,PA,HR\nAaron Judge,NYY,680,52\n")
    group = build_projection_group("Mixed", batters=batters)

    assert group.batter_id_source == "generated"
    assert group.pitcher_id_source is None
    assert not group.can_merge_two_way
    assert group.two_way == []


def test_build_projection_group_requires_name_and_upload():
    batters = parse_projection_text(BATTERS_CSV)
    with pytest.raises(ValueError):
        build_projection_group("  ", batters=batters)
    with pytest.raises(ValueError):
        build_projection_group("Empty")


def test_bad_optional_cells_keep_the_player(caplog: pytest.LogCaptureFixture):
    content = (
        "Name,Team,PA,HR,R,WAR,ADP,MLBAMID\n"
        "Aaron Judge,NYY,680,52,120,N/A,1.5,592450\n"
        "Juan Soto,NYM,700,38,115,6.1,-,665742\n"
    )
    with caplog.at_level(logging.WARNING, logger="draftboard.ingest.projections"):
        result = parse_projection_text(content)

    assert result.row_count == 2
    judge, soto = result.players
    assert judge.batting.WAR == 0
    assert judge.adp == 1.5
    assert soto.batting.WAR == pytest.approx(6.1)
    assert soto.adp is None
    assert result.errors == [
        "Row 1: column 'WAR' value 'N/A' is not numeric; ignored",
        "Row 2: column 'ADP' value '-' is not numeric; ignored",
    ]
    assert "WAR" in caplog.text


def test_bad_counting_stat_still_skips_the_row():
    content = "Name,Team,PA,HR,AVG,MLBAMID\nAaron Judge,NYY,680,--,.301,592450\n"
    result = parse_projection_text(content)

    assert result.row_count == 0
    assert result.errors == ["Row 1: column 'HR' value '--' is not numeric"]
