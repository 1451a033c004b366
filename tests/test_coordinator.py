import asyncio
import json

import pytest

from resume_grader.core.coordinator import evaluate_groups, merge_group_results
from resume_grader.errors import GroupExhaustedError, MergeIntegrityError
from resume_grader.models.evaluation import GroupResult
from resume_grader.models.usage import TokenUsage
from resume_grader.models.verdict import RuleVerdict

from helpers import DummyClient, group_for, verdicts_for


@pytest.mark.asyncio
async def test_merge_order_independent_of_completion_order(
        config, groups, rubric):

	async def handler(kw):
		group = group_for(kw, groups)
		# later groups finish first
		await asyncio.sleep(0.01 * (len(groups) - group.index))
		return json.dumps(verdicts_for(group))

	client = DummyClient(handler)
	verdicts, usage = await evaluate_groups(client, config, groups, "resume")
	assert [v.rule for v in verdicts] == [r.rule for r in rubric]
	assert len(client.calls) == 5
	assert usage.total_tokens == 5 * 15


@pytest.mark.asyncio
async def test_one_failing_group_fails_whole_evaluation(config, groups):

	def handler(kw):
		group = group_for(kw, groups)
		if group.name == "Experience":
			return "garbage"
		return json.dumps(verdicts_for(group))

	client = DummyClient(handler)
	with pytest.raises(GroupExhaustedError) as exc_info:
		await evaluate_groups(client, config, groups, "resume")
	assert exc_info.value.group == "Experience"
	experience_calls = [
	    kw for kw in client.calls if group_for(kw, groups).name == "Experience"
	]
	assert len(experience_calls) == config.total_attempts
	assert len(client.calls) == 4 + config.total_attempts


@pytest.mark.asyncio
async def test_first_failure_in_group_order_is_raised(config, groups):

	def handler(kw):
		group = group_for(kw, groups)
		if group.name in ("Structure", "Formatting"):
			return RuntimeError(f"{group.name} down")
		return json.dumps(verdicts_for(group))

	with pytest.raises(GroupExhaustedError) as exc_info:
		await evaluate_groups(DummyClient(handler), config, groups, "resume")
	assert exc_info.value.group == "Structure"


@pytest.mark.asyncio
async def test_short_group_response_fails_merge(config, groups):

	def handler(kw):
		group = group_for(kw, groups)
		payload = verdicts_for(group)
		if group.name == "Writing Style":
			payload = payload[:-1]
		return json.dumps(payload)

	with pytest.raises(MergeIntegrityError) as exc_info:
		await evaluate_groups(DummyClient(handler), config, groups, "resume")
	assert exc_info.value.expected == 28
	assert exc_info.value.actual == 27


def test_merge_group_results_concatenates_in_given_order(groups):
	results = [
	    GroupResult(
	        group=g.name,
	        verdicts=[RuleVerdict(**v) for v in verdicts_for(g)],
	        usage=TokenUsage(prompt_tokens=1, completion_tokens=1,
	                         total_tokens=2),
	    ) for g in groups[:2]
	]
	verdicts, usage = merge_group_results(
	    results, [r.rule for g in groups[:2] for r in g.rules])
	assert verdicts[0].rule == groups[0].rules[0].rule
	assert verdicts[7].rule == groups[1].rules[0].rule
	assert usage.total_tokens == 4


def test_merge_group_results_count_mismatch(groups, rubric):
	results = [
	    GroupResult(group=groups[0].name,
	                verdicts=[RuleVerdict(**v) for v in verdicts_for(groups[0])])
	]
	with pytest.raises(MergeIntegrityError):
		merge_group_results(results, [r.rule for r in rubric])


def test_merge_group_results_rejects_rule_out_of_place(groups):
	verdicts = [RuleVerdict(**v) for v in verdicts_for(groups[0])]
	# right count, but the second rule is replaced by a repeat of the first
	verdicts[1] = verdicts[0]
	results = [GroupResult(group=groups[0].name, verdicts=verdicts)]
	with pytest.raises(MergeIntegrityError) as exc_info:
		merge_group_results(results, [r.rule for r in groups[0].rules])
	assert "Technical skills coverage" in exc_info.value.message


@pytest.mark.asyncio
async def test_repeated_rule_in_group_reply_is_retried(
        config, groups, rubric):
	state = {"structure_calls": 0}

	def handler(kw):
		group = group_for(kw, groups)
		payload = verdicts_for(group)
		if group.name == "Structure":
			state["structure_calls"] += 1
			if state["structure_calls"] == 1:
				payload[1] = dict(payload[0])
		return json.dumps(payload)

	verdicts, _ = await evaluate_groups(DummyClient(handler), config, groups,
	                                    "resume")
	assert state["structure_calls"] == 2
	assert [v.rule for v in verdicts] == [r.rule for r in rubric]


@pytest.mark.asyncio
async def test_invented_rule_never_reaches_merge(config, groups):

	def handler(kw):
		group = group_for(kw, groups)
		payload = verdicts_for(group)
		if group.name == "Formatting":
			payload[-1] = {
			    "rule": "Invented rule",
			    "weight": 500,
			    "penalty": 10
			}
		return json.dumps(payload)

	with pytest.raises(GroupExhaustedError) as exc_info:
		await evaluate_groups(DummyClient(handler), config, groups, "resume")
	assert exc_info.value.group == "Formatting"
	assert "unknown rule 'Invented rule'" in exc_info.value.message
