from port_provider.core.json_value import load_json_attribute
from port_provider.core.models import Query, Rule, Scorecard
from port_provider.resources.scorecard.models import RuleModel, ScorecardModel


def rule_model_to_port_body(rule: RuleModel) -> Rule:
    conditions = [
        load_json_attribute(
            f"rules.{rule.identifier}.query.conditions.{index}",
            condition,
            expect_object=True,
        )
        for index, condition in enumerate(rule.query.conditions)
        if condition is not None
    ]
    return Rule(
        identifier=rule.identifier,
        title=rule.title,
        level=rule.level,
        query=Query(combinator=rule.query.combinator, conditions=conditions),
    )


def scorecard_model_to_port_body(model: ScorecardModel) -> Scorecard:
    return Scorecard(
        identifier=model.identifier,
        title=model.title,
        blueprint=model.blueprint,
        rules=[rule_model_to_port_body(rule) for rule in model.rules],
    )
