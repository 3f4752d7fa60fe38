"""Unit tests for balanced team generation."""

import pytest

from kostkas.models import PlayerStat, TeamMember
from kostkas.team_generator import generate_balanced_teams, player_score, snake_draft
from kostkas.validators import TeamSelectionError


def stat(name, played, won):
    return PlayerStat(name=name, played=played, won=won, percentage=won / played * 100 if played else 0.0)


class TestPlayerScore:
    """Tests for the balancing score."""

    def test_score_formula(self):
        """Test score = percentage + wins * 1.5."""
        assert player_score(stat('Ana', 10, 6)) == pytest.approx(60 + 9)

    def test_custom_weight(self):
        """Test the win weight can be changed."""
        assert player_score(stat('Ana', 10, 6), win_weight=0) == pytest.approx(60)

    def test_no_matches_scores_zero(self):
        """Test missing stats and zero matches score 0."""
        assert player_score(None) == 0
        assert player_score(stat('Ana', 0, 0)) == 0


class TestSnakeDraft:
    """Tests for the pairwise alternating split."""

    def test_four_players(self):
        """Test scores [90, 80, 70, 60] split into A={90, 60}, B={80, 70}."""
        ordered = [TeamMember(name=str(s), score=s) for s in (90, 80, 70, 60)]
        team_a, team_b = snake_draft(ordered)
        assert [m.score for m in team_a] == [90, 60]
        assert [m.score for m in team_b] == [80, 70]

    def test_odd_count(self):
        """Test a trailing player goes where the first of its pair would."""
        ordered = [TeamMember(name=str(i)) for i in range(1, 6)]
        team_a, team_b = snake_draft(ordered)
        assert [m.name for m in team_a] == ['1', '4', '5']
        assert [m.name for m in team_b] == ['2', '3']

    def test_trailing_player_on_odd_pair(self):
        """Test with seven players the last one lands in team B (pair 3 is odd)."""
        ordered = [TeamMember(name=str(i)) for i in range(1, 8)]
        team_a, team_b = snake_draft(ordered)
        assert [m.name for m in team_a] == ['1', '4', '5']
        assert [m.name for m in team_b] == ['2', '3', '6', '7']

    def test_sizes_balanced(self):
        """Test team sizes never differ by more than one."""
        for n in range(2, 12):
            team_a, team_b = snake_draft([TeamMember(name=str(i)) for i in range(n)])
            assert abs(len(team_a) - len(team_b)) <= 1


class TestGenerateBalancedTeams:
    """Tests for the full generator."""

    @pytest.fixture
    def stats(self):
        return [
            stat('Dani', 10, 2),   # 23
            stat('Ana', 10, 6),    # 69
            stat('Carla', 10, 4),  # 46
            stat('Bea', 10, 5),    # 57.5
        ]

    def test_sorted_by_score_then_drafted(self, stats):
        """Test the strongest and weakest end up together."""
        teams = generate_balanced_teams(['Dani', 'Carla', 'Bea', 'Ana'], stats)
        assert [m.name for m in teams.team_a] == ['Ana', 'Dani']
        assert [m.name for m in teams.team_b] == ['Bea', 'Carla']

    def test_members_carry_percentage_and_wins(self, stats):
        """Test each member reports win percentage and wins."""
        teams = generate_balanced_teams(['Ana', 'Bea'], stats)
        ana = teams.team_a[0]
        assert (ana.name, ana.percentage, ana.won) == ('Ana', 60.0, 6)
        assert ana.score == pytest.approx(69)

    def test_team_averages(self, stats):
        """Test each team's average win percentage."""
        teams = generate_balanced_teams(['Ana', 'Bea', 'Carla', 'Dani'], stats)
        assert teams.average_a == pytest.approx((60 + 20) / 2)
        assert teams.average_b == pytest.approx((50 + 40) / 2)

    def test_accepts_mapping(self, stats):
        """Test stats can be passed keyed by name."""
        teams = generate_balanced_teams(['Ana', 'Bea'], {s.name: s for s in stats})
        assert [m.name for m in teams.team_a] == ['Ana']

    def test_unknown_players_score_zero(self, stats):
        """Test players without stats are drafted last."""
        teams = generate_balanced_teams(['Nuevo', 'Ana', 'Bea'], stats)
        assert [m.name for m in teams.team_a] == ['Ana']
        assert [m.name for m in teams.team_b] == ['Bea', 'Nuevo']
        assert teams.team_b[1].score == 0

    def test_ties_keep_selection_order(self):
        """Test equal scores keep the order players were selected in."""
        teams = generate_balanced_teams(['Eva', 'Fran', 'Gala'], [])
        assert [m.name for m in teams.team_a] == ['Eva']
        assert [m.name for m in teams.team_b] == ['Fran', 'Gala']

    @pytest.mark.parametrize('selected', [[], ['Ana']])
    def test_fewer_than_two_players(self, selected, stats):
        """Test the generator refuses to run with fewer than 2 players."""
        with pytest.raises(TeamSelectionError, match='at least 2'):
            generate_balanced_teams(selected, stats)

    def test_duplicate_selection(self, stats):
        """Test a player can't be selected twice."""
        with pytest.raises(TeamSelectionError, match='more than once'):
            generate_balanced_teams(['Ana', 'Ana'], stats)

    def test_selection_error_is_value_error(self):
        """Test callers can catch ValueError."""
        assert issubclass(TeamSelectionError, ValueError)
