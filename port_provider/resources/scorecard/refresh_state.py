from port_provider.core.json_value import dump_json
from port_provider.core.models import Rule, Scorecard
from port_provider.resources.scorecard.models import (
    QueryModel,
    RuleModel,
    ScorecardModel,
)
from port_provider.utils.misc import format_timestamp


def refresh_rule_state(rule: Rule) -> RuleModel:
    return RuleModel(
        identifier=rule.identifier,
        title=rule.title,
        level=rule.level,
        query=QueryModel(
            combinator=rule.query.combinator,
            conditions=[dump_json(condition) for condition in rule.query.conditions],
        ),
    )


def refresh_scorecard_state(scorecard: Scorecard, blueprint: str) -> ScorecardModel:
    return ScorecardModel(
        id=f"{blueprint}:{scorecard.identifier}",
        identifier=scorecard.identifier,
        blueprint=scorecard.blueprint or blueprint,
        title=scorecard.title,
        rules=[refresh_rule_state(rule) for rule in scorecard.rules],
        created_at=format_timestamp(scorecard.created_at),
        created_by=scorecard.created_by,
        updated_at=format_timestamp(scorecard.updated_at),
        updated_by=scorecard.updated_by,
    )
