from pydantic import BaseModel, Extra


class QueryModel(BaseModel, extra=Extra.forbid):
    combinator: str
    # Every condition is a JSON encoded object
    conditions: list[str | None] = []


class RuleModel(BaseModel, extra=Extra.forbid):
    identifier: str
    title: str | None = None
    level: str
    query: QueryModel


class ScorecardModel(BaseModel, extra=Extra.forbid):
    id: str | None = None
    identifier: str
    blueprint: str
    title: str | None = None
    rules: list[RuleModel] = []
    created_at: str | None = None
    created_by: str | None = None
    updated_at: str | None = None
    updated_by: str | None = None
