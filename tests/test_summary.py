"""Tests for ScoreCardData and build_score_card extraction."""

from resume_grader.models.summary import build_score_card

from helpers import make_result


def test_score_card_groups_by_category(groups):
	data = build_score_card(make_result(groups, penalty=1))
	assert [c.category for c in data.categories] == [g.name for g in groups]
	assert [len(c.rules) for c in data.categories] == [7, 6, 3, 8, 4]
	keyword = data.categories[0]
	assert keyword.weighted_penalty == sum(r.weight for r in groups[0].rules)
	assert keyword.max_penalty == keyword.weighted_penalty * 10
	assert data.final_score == 90.0
	assert data.grade == "Excellent"
	assert data.usage is None


def test_score_card_usage_only_when_requested(groups):
	data = build_score_card(make_result(groups), show_usage=True)
	assert data.usage.total_tokens == 150
	assert data.usage.cost_usd == 0.0025
	assert data.top_fixes == [
	    "Improve Role-specific keywords",
	    "Improve Technical skills coverage",
	    "Improve Industry terminology",
	]
