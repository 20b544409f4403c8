"""
Authorization Gate and Access Policy

The gate compares the caller's MSP ID with the one authorized organization it
was configured with. Which operations go through the gate is decided by an
explicit per-operation policy table rather than by each contract function.

Profiles:
    observed: matches the deployed contracts. Personnel existence checks and
              listing, and every case read path plus case seeding, are open.
    strict:   every operation is gated.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping

from .errors import AuthorizationDeniedError, IdentityUnavailableError
from .identity import ClientIdentityProtocol

logger = logging.getLogger(__name__)


class PolicyProfile(str, Enum):
    """Built-in access policy profiles"""
    OBSERVED = "observed"
    STRICT = "strict"


class AccessDecision(str, Enum):
    """Outcome of an authorization check"""
    ALLOW = "allow"
    DENY = "deny"


# Operation name -> requires authorization
OBSERVED_POLICY: Dict[str, bool] = {
    # Personnel
    "seedPersonnel": True,
    "createPersonnel": True,
    "readPersonnel": True,
    "updatePersonnel": True,
    "deletePersonnel": True,
    "personnelExists": False,
    "listAllPersonnel": False,
    # Cases
    "seedCases": False,
    "fileCase": True,
    "readCase": False,
    "updateCaseStatus": True,
    "deleteCase": True,
    "caseExists": False,
    "listAllCases": False,
}

STRICT_POLICY: Dict[str, bool] = {operation: True for operation in OBSERVED_POLICY}

POLICY_PROFILES: Dict[PolicyProfile, Dict[str, bool]] = {
    PolicyProfile.OBSERVED: OBSERVED_POLICY,
    PolicyProfile.STRICT: STRICT_POLICY,
}


@dataclass(frozen=True)
class AccessPolicy:
    """Per-operation authorization table; unknown operations are gated"""
    rules: Mapping[str, bool] = field(default_factory=dict)
    profile: str = "custom"

    @classmethod
    def from_profile(cls, profile: "PolicyProfile | str") -> "AccessPolicy":
        try:
            profile = PolicyProfile(profile)
        except ValueError:
            raise ValueError(
                f"Unknown access policy profile {profile!r}; "
                f"expected one of {[p.value for p in PolicyProfile]}"
            )
        return cls(rules=dict(POLICY_PROFILES[profile]), profile=profile.value)

    def requires_authorization(self, operation: str) -> bool:
        return self.rules.get(operation, True)

    def open_operations(self) -> List[str]:
        """Operations any organization may run under this policy"""
        return sorted(op for op, gated in self.rules.items() if not gated)


class AuthorizationGate:
    """Permits or denies a caller based on its organization"""

    def __init__(self, authorized_msp_id: str, policy: AccessPolicy):
        if not authorized_msp_id:
            raise ValueError("authorized_msp_id must not be empty")
        self.authorized_msp_id = authorized_msp_id
        self.policy = policy

    def authorize(self, identity: ClientIdentityProtocol) -> AccessDecision:
        """Decide for a caller, independent of the operation"""
        try:
            msp_id = identity.get_msp_id()
        except IdentityUnavailableError:
            return AccessDecision.DENY
        if msp_id != self.authorized_msp_id:
            return AccessDecision.DENY
        return AccessDecision.ALLOW

    def enforce(self, identity: ClientIdentityProtocol, operation: str) -> None:
        """Raise AuthorizationDeniedError if the policy gates operation and the caller is denied"""
        if not self.policy.requires_authorization(operation):
            return
        if self.authorize(identity) == AccessDecision.ALLOW:
            return

        # Denied; resolve the MSP ID again only to report the reason
        try:
            msp_id = identity.get_msp_id()
        except IdentityUnavailableError as e:
            logger.warning(f"Denied {operation}: unable to get MSP ID: {e}")
            raise AuthorizationDeniedError(
                f"access denied: unable to get MSP ID: {e}",
                operation=operation,
            ) from e

        logger.warning(f"Denied {operation} for organization {msp_id}")
        raise AuthorizationDeniedError(
            f"access denied: only {self.authorized_msp_id} can perform {operation}",
            operation=operation,
            msp_id=msp_id,
        )


__all__ = [
    "PolicyProfile",
    "AccessDecision",
    "OBSERVED_POLICY",
    "STRICT_POLICY",
    "POLICY_PROFILES",
    "AccessPolicy",
    "AuthorizationGate",
]
