"""Tests for scrapers/nba_sportsref_helpers.py module."""

from __future__ import annotations

from datetime import date

from birthday_scraper.scrapers.nba_sportsref_helpers import (
    extract_birthday_entries,
    extract_league_average_fg_pct,
    extract_roster_rows,
    extract_schedule_games,
    extract_stat_line,
    parse_birth_date,
)
from conftest import box_score_row, roster_row, schedule_row


class TestExtractRosterRows:
    """Tests for extract_roster_rows."""

    def test_keeps_rows_with_birth_dates(self):
        row = roster_row("Trae Young", "youngtr01", "September 19, 1998")
        payload = "\n".join(["<table>", '<tr><th data-stat="birth_date">Birth Date</th>', row, "</table>"])
        assert extract_roster_rows(payload) == ['<tr><th data-stat="birth_date">Birth Date</th>', row]

    def test_empty_page(self):
        assert extract_roster_rows("<html></html>") == []


class TestParseBirthDate:
    """Tests for parse_birth_date."""

    def test_in_season_month(self):
        assert parse_birth_date("December 11, 2000") == (12, 11, 2000)

    def test_off_season_month_filtered(self):
        assert parse_birth_date("September 19, 1998") is None

    def test_malformed(self):
        assert parse_birth_date("Birth Date") is None
        assert parse_birth_date("March x, 1999") is None


class TestExtractBirthdayEntries:
    """Tests for extract_birthday_entries."""

    def test_yields_in_season_birthdays(self):
        rows = [
            roster_row("Trae Young", "youngtr01", "September 19, 1998"),
            roster_row("Dejounte Murray", "murrade01", "September 19, 1996"),
            roster_row("John Collins", "collijo01", "September 23, 1997"),
            roster_row("Bogdan Bogdanovic", "bogdabo01", "August 18, 1992"),
            roster_row("Clint Capela", "capelca01", "May 18, 1994"),
            roster_row("Onyeka Okongwu", "okongon01", "December 11, 2000"),
        ]
        entries = list(extract_birthday_entries(rows))
        assert len(entries) == 1
        month, day, entry = entries[0]
        assert (month, day) == (12, 11)
        assert entry.player_name == "Onyeka Okongwu"
        assert entry.birth_year == 2000

    def test_skips_header_rows(self):
        rows = ['<tr><th data-stat="birth_date">Birth Date</th></tr>']
        assert list(extract_birthday_entries(rows)) == []

    def test_skips_rows_without_player_link(self):
        rows = ['<tr><td data-stat="birth_date" csk="20001211" >December 11, 2000</td></tr>']
        assert list(extract_birthday_entries(rows)) == []


class TestExtractScheduleGames:
    """Tests for extract_schedule_games."""

    def test_past_game_has_score(self):
        payload = schedule_row("16", "BOS", "ATL", "90", "100")
        games = extract_schedule_games(payload, 2023, 1, date(2023, 1, 20))
        assert len(games) == 1
        game = games[0]
        assert game.game_date == date(2023, 1, 16)
        assert (game.visitor, game.home) == ("BOS", "ATL")
        assert game.final_score == (90, 100)

    def test_future_game_has_no_score(self):
        payload = schedule_row("25", "BOS", "ATL", "90", "100")
        games = extract_schedule_games(payload, 2023, 1, date(2023, 1, 20))
        assert games[0].final_score is None

    def test_today_is_not_past(self):
        payload = schedule_row("20", "MIA", "NYK", "101", "99")
        games = extract_schedule_games(payload, 2023, 1, date(2023, 1, 20))
        assert games[0].final_score is None

    def test_empty_scores(self):
        payload = schedule_row("16", "BOS", "ATL")
        games = extract_schedule_games(payload, 2023, 1, date(2023, 1, 20))
        assert games[0].final_score is None

    def test_fall_month_uses_prior_year(self):
        payload = schedule_row("5", "LAL", "GSW", "110", "120", month=11, year=2022)
        games = extract_schedule_games(payload, 2023, 11, date(2023, 1, 20))
        assert games[0].game_date == date(2022, 11, 5)

    def test_skips_header_and_unparseable_rows(self):
        payload = "\n".join([
            '<tr><th data-stat="visitor_team_name">Visitor/Neutral</th></tr>',
            schedule_row("16", "BOS", "ATL", "90", "100"),
            '<tr><td data-stat="visitor_team_name">day=xx&</td></tr>',
        ])
        games = extract_schedule_games(payload, 2023, 1, date(2023, 1, 20))
        assert [game.day for game in games] == [16]


class TestExtractStatLine:
    """Tests for extract_stat_line."""

    def test_played(self):
        payload = box_score_row("Trae Young", "youngtr01")
        stat_line = extract_stat_line(payload, "Trae Young")
        assert stat_line.outcome == "played"
        assert stat_line.annotation() == " (34:12 mp, 30 pts, 10/22 fga, 4 reb, 11 ast)"

    def test_did_not_play(self):
        """Did Not Play wins even without numeric fields."""
        payload = '<tr><th data-stat="player"><a href="/players/y/youngtr01.html">Trae Young</a></th><td data-stat="reason" >Did Not Play</td></tr>'
        stat_line = extract_stat_line(payload, "Trae Young")
        assert stat_line.outcome == "did_not_play"
        assert stat_line.annotation() == " (DNP)"

    def test_did_not_dress(self):
        payload = '<tr><th data-stat="player">Trae Young</th><td data-stat="reason" >Did Not Dress</td></tr>'
        assert extract_stat_line(payload, "Trae Young").annotation() == " (DND)"

    def test_uses_first_matching_line(self):
        """Basic box score comes before the advanced one."""
        payload = "\n".join([
            "<h2>Trae Young leads</h2>",
            box_score_row("Trae Young", "youngtr01", pts="30"),
            box_score_row("Trae Young", "youngtr01", pts="99"),
        ])
        assert extract_stat_line(payload, "Trae Young").points == 30

    def test_non_numeric_field_is_unavailable(self):
        payload = box_score_row("Trae Young", "youngtr01", fga="")
        stat_line = extract_stat_line(payload, "Trae Young")
        assert stat_line.outcome == "unavailable"
        assert stat_line.annotation() == ""

    def test_player_absent(self):
        payload = box_score_row("Trae Young", "youngtr01")
        assert extract_stat_line(payload, "Clint Capela").outcome == "unavailable"


class TestExtractLeagueAverageFgPct:
    """Tests for extract_league_average_fg_pct."""

    def test_reads_league_average(self):
        payload = (
            '<table id="shooting-team"><tr><td data-stat="fg_pct" >.471</td></tr>'
            '<tr><th>League Average</th><td data-stat="fg_pct" >.466</td></tr></table>'
        )
        assert extract_league_average_fg_pct(payload) == "0.466"

    def test_team_rows_without_league_average(self):
        """A team's percentage is never reported as the league average."""
        payload = (
            '<table id="shooting-team"><tr><th>Boston Celtics</th>'
            '<td data-stat="fg_pct" >.491</td></tr></table>'
        )
        assert extract_league_average_fg_pct(payload) is None

    def test_missing_table(self):
        assert extract_league_average_fg_pct('<td data-stat="fg_pct" >.466</td>') is None
