"""Submission of validated squads and lineups to the fantasy service."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .analysis import Violation, validate_lineup, validate_squad
from .client import FantasyService, ServiceError
from .logging import get_logger
from .models import LineupComposer, SquadBuilder


logger = get_logger(__name__)


class SubmissionKind(Enum):
    SQUAD = "squad"
    LINEUP = "lineup"


@dataclass
class SubmissionResult:
    """
    Outcome of a submission attempt.

    Attributes:
        success: Whether the service accepted the submission.
        reason: Failure message (service detail or local refusal).
        violations: Set when the submission was blocked by validation.
    """

    success: bool
    reason: Optional[str] = None
    violations: list[Violation] = field(default_factory=list)

    @classmethod
    def ok(cls) -> "SubmissionResult":
        return cls(success=True)

    @classmethod
    def failure(cls, reason: str, violations: Optional[list[Violation]] = None) -> "SubmissionResult":
        return cls(success=False, reason=reason, violations=violations or [])


class SubmissionGateway:
    """
    The only path from local selections to the fantasy service.

    Each submission is validated first and never sent if invalid. At most
    one submission of each kind may be outstanding; a second attempt of the
    same kind is refused. Service failures are returned, not raised, and
    leave the selection untouched so the user can retry explicitly.
    """

    def __init__(self, service: FantasyService) -> None:
        self.service = service
        self._in_flight: set[SubmissionKind] = set()

    def is_in_flight(self, kind: SubmissionKind) -> bool:
        return kind in self._in_flight

    def submit_squad(self, user_id: int, builder: SquadBuilder) -> SubmissionResult:
        """Validate and send the builder's squad."""
        result = validate_squad(builder.selection, builder.catalog, builder.cap)
        if not result.is_valid:
            return SubmissionResult.failure("; ".join(result.messages), result.violations)

        outcome = self._send(
            SubmissionKind.SQUAD,
            lambda: self.service.submit_squad(user_id, builder.selection),
            gameweek=builder.gameweek,
        )
        if outcome.success:
            builder.mark_submitted()
        return outcome

    def submit_lineup(self, user_id: int, composer: LineupComposer) -> SubmissionResult:
        """Validate and send the composer's lineup."""
        result = validate_lineup(composer.lineup, composer.squad)
        if not result.is_valid:
            return SubmissionResult.failure("; ".join(result.messages), result.violations)

        outcome = self._send(
            SubmissionKind.LINEUP,
            lambda: self.service.submit_lineup(user_id, composer.lineup),
            gameweek=composer.lineup.gameweek,
        )
        if outcome.success:
            composer.mark_submitted()
        return outcome

    def _send(self, kind: SubmissionKind, call, gameweek: int) -> SubmissionResult:
        if kind in self._in_flight:
            logger.warning("submission already in flight", kind=kind.value, gameweek=gameweek)
            return SubmissionResult.failure(f"A {kind.value} submission is already in progress")

        self._in_flight.add(kind)
        try:
            call()
        except ServiceError as e:
            logger.warning("submission failed", kind=kind.value, gameweek=gameweek, reason=str(e))
            return SubmissionResult.failure(str(e))
        finally:
            self._in_flight.discard(kind)

        logger.info("submission accepted", kind=kind.value, gameweek=gameweek)
        return SubmissionResult.ok()
