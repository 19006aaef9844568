from .models import QueryModel, RuleModel, ScorecardModel
from .refresh_state import refresh_scorecard_state
from .resource import ScorecardResource
from .to_body import scorecard_model_to_port_body

__all__ = [
    "QueryModel",
    "RuleModel",
    "ScorecardModel",
    "ScorecardResource",
    "refresh_scorecard_state",
    "scorecard_model_to_port_body",
]
