from .policies import Policy, is_authorized
from .decorators import policy_required, principal_from_claims

__all__ = ["Policy", "is_authorized", "policy_required", "principal_from_claims"]
