"""Pairing Checker - validation of generated rounds.

Checks a round (or every round of a tournament) against the guarantees the
pairing engine makes: full coverage, no duplicates, correct bye count and,
where the system promises it, no rematches.
"""

# Rack Pairing
# Copyright (C) 2025  Rack Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Set

from rackpairing.constants import (
    PAIRING_INITIAL_FONTES,
    PAIRING_KOTH,
    PAIRING_ROUND_ROBIN,
)
from rackpairing.models.pairing import Pairing
from rackpairing.models.tournament import PairingHistory, Tournament
from rackpairing.pairing.round_robin import (
    fill_absent_slots,
    pair_round_robin,
    round_robin_rounds,
)
from rackpairing.type_hints import MaybeHistory
from rackpairing.utils import setup_logger

logger = setup_logger(__name__)

COVERAGE = "coverage"
DUPLICATES = "duplicates"
BYE_PARITY = "bye_parity"
REMATCH = "rematch"
ROUND_ROBIN_COMPLETE = "round_robin_complete"


class CriterionStatus(Enum):
    """Status of a single check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """How serious a failed check is."""

    ABSOLUTE = "ABSOLUTE"  # broken guarantee
    WARNING = "WARNING"  # accepted, but worth surfacing


@dataclass
class CriterionResult:
    """Result of validating a single criterion."""

    criterion: str
    status: CriterionStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    round_number: Optional[int] = None
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def message(self) -> str:
        if self.round_number is None:
            return self.description
        return f"Round {self.round_number}: {self.description}"


@dataclass
class ValidationReport:
    """Complete validation report for one round or a tournament."""

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    warnings: List[CriterionResult] = field(default_factory=list)
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary,
            "overall_status": self.overall_status.value,
            "compliance_percentage": self.compliance_percentage,
            "violations": [v.message for v in self.violations],
            "warnings": [w.message for w in self.warnings],
        }


def _status_for(failed: object) -> CriterionStatus:
    return CriterionStatus.VIOLATION if failed else CriterionStatus.COMPLIANT


def _severity_for(failed: object) -> Optional[ViolationType]:
    return ViolationType.ABSOLUTE if failed else None


def _build_report(results: List[CriterionResult]) -> ValidationReport:
    applicable = [r for r in results if r.status != CriterionStatus.NOT_APPLICABLE]
    failed = [r for r in applicable if r.status == CriterionStatus.VIOLATION]
    violations = [r for r in failed if r.violation_type == ViolationType.ABSOLUTE]
    warnings = [r for r in failed if r.violation_type == ViolationType.WARNING]
    compliant = len(applicable) - len(failed)
    overall = CriterionStatus.VIOLATION if violations else CriterionStatus.COMPLIANT
    summary = (
        f"{compliant}/{len(applicable)} checks passed, "
        f"{len(violations)} violations, {len(warnings)} warnings"
    )
    return ValidationReport(
        total_criteria=len(applicable),
        compliant_count=compliant,
        violations=violations,
        overall_status=overall,
        summary=summary,
        warnings=warnings,
        criteria_results=results,
    )


class PairingChecker:
    """Validates generated pairings."""

    def check_round(
        self,
        roster: Iterable[str],
        pairings: Sequence[Pairing],
        history: MaybeHistory = None,
        *,
        require_no_rematch: bool = False,
        check_rematches: bool = True,
        expected_byes: Optional[int] = None,
        round_number: Optional[int] = None,
    ) -> List[CriterionResult]:
        """Run every round-level check and return the individual results.

        ``roster`` holds the user_ids that had to be paired. ``expected_byes``
        defaults to one bye for an odd roster; systems that can hand out
        several byes, such as Initial Fontes, pass an explicit count.
        """
        roster_ids = set(roster)
        placements = Counter(uid for pairing in pairings for uid in pairing.user_ids)

        missing = sorted(roster_ids - set(placements))
        unknown = sorted(set(placements) - roster_ids)
        coverage = CriterionResult(
            COVERAGE,
            _status_for(missing or unknown),
            _severity_for(missing or unknown),
            f"unpaired {missing}, not on roster {unknown}"
            if missing or unknown
            else "every participant placed",
            round_number,
            {"missing": missing, "unknown": unknown},
        )

        repeated = sorted(uid for uid, count in placements.items() if count > 1)
        duplicates = CriterionResult(
            DUPLICATES,
            _status_for(repeated),
            _severity_for(repeated),
            f"placed more than once: {repeated}" if repeated else "no duplicates",
            round_number,
            {"repeated": repeated},
        )

        if expected_byes is None:
            expected_byes = len(roster_ids) % 2
        byes = sum(1 for pairing in pairings if pairing.is_bye)
        bye_parity = CriterionResult(
            BYE_PARITY,
            _status_for(byes != expected_byes),
            _severity_for(byes != expected_byes),
            f"{byes} byes, expected {expected_byes}",
            round_number,
        )

        results = [coverage, duplicates, bye_parity]

        if not check_rematches:
            results.append(
                CriterionResult(
                    REMATCH, CriterionStatus.NOT_APPLICABLE, round_number=round_number
                )
            )
            return results

        rematches = [
            str(pairing)
            for pairing in pairings
            if not pairing.is_bye
            and history
            and (
                pairing.player2_id in history.get(pairing.player1_id, ())
                or pairing.player1_id in history.get(pairing.player2_id, ())
            )
        ]
        if rematches:
            severity = (
                ViolationType.ABSOLUTE if require_no_rematch else ViolationType.WARNING
            )
            results.append(
                CriterionResult(
                    REMATCH,
                    CriterionStatus.VIOLATION,
                    severity,
                    f"rematches {rematches}",
                    round_number,
                    {"rematches": rematches},
                )
            )
        else:
            results.append(
                CriterionResult(
                    REMATCH, CriterionStatus.COMPLIANT, None, "no rematches", round_number
                )
            )
        return results

    def validate_round(
        self,
        roster: Iterable[str],
        pairings: Sequence[Pairing],
        history: MaybeHistory = None,
        **kwargs,
    ) -> ValidationReport:
        """Validate a single round. Keyword arguments go to :meth:`check_round`."""
        return _build_report(self.check_round(roster, pairings, history, **kwargs))

    def validate_tournament(self, tournament: Tournament) -> ValidationReport:
        """Validate every created round of a tournament.

        The roster of a past round is whoever appears in it; unknown user_ids
        are still caught against the registered participants. Round robin
        rounds are compared with the schedule drawn over every registered
        participant, so a table left open by an absence counts as a bye.
        """
        system = tournament.pairing_system
        registered = tournament.get_participant_list()
        registered_ids = {p.user_id for p in registered}
        cycle = round_robin_rounds(len(registered))
        results: List[CriterionResult] = []
        history = PairingHistory()
        seen_pairs: Set[frozenset] = set()
        rosters: Dict[int, Set[str]] = {}

        for round_number in range(1, tournament.current_round + 1):
            pairings = [
                m.to_pairing() for m in tournament.matches_for_round(round_number)
            ]
            roster = {uid for p in pairings for uid in p.user_ids} & registered_ids
            rosters[round_number] = roster

            expected_byes = None
            if system == PAIRING_ROUND_ROBIN:
                scheduled = fill_absent_slots(
                    pair_round_robin(registered, round_number), roster
                )
                expected_byes = sum(1 for p in scheduled if p.is_bye)
            elif system == PAIRING_INITIAL_FONTES:
                expected_byes = sum(1 for p in pairings if p.is_bye)

            strict = system == PAIRING_ROUND_ROBIN and round_number <= cycle
            results.extend(
                self.check_round(
                    roster,
                    pairings,
                    history,
                    require_no_rematch=strict,
                    check_rematches=system != PAIRING_KOTH,
                    expected_byes=expected_byes,
                    round_number=round_number,
                )
            )

            for pairing in pairings:
                if pairing.is_bye:
                    continue
                seen_pairs.add(frozenset(pairing.user_ids))
                history.add_pairing(pairing.player1_id, pairing.player2_id)

        if system == PAIRING_ROUND_ROBIN:
            results.append(
                self._check_round_robin_complete(tournament, rosters, seen_pairs)
            )

        report = _build_report(results)
        if report.violations:
            logger.warning(f"{tournament.name}: {report.summary}")
        return report

    def _check_round_robin_complete(
        self,
        tournament: Tournament,
        rosters: Dict[int, Set[str]],
        seen_pairs: Set[frozenset],
    ) -> CriterionResult:
        registered = tournament.get_participant_list()
        cycle = round_robin_rounds(len(registered))
        if tournament.current_round < cycle:
            return CriterionResult(ROUND_ROBIN_COMPLETE, CriterionStatus.NOT_APPLICABLE)
        active = {p.user_id for p in registered if p.is_active}
        # a table is owed only when both sides were present for its round
        unplayed = [
            str(pairing)
            for round_number in range(1, cycle + 1)
            for pairing in pair_round_robin(registered, round_number)
            if not pairing.is_bye
            and set(pairing.user_ids) <= rosters[round_number] & active
            and frozenset(pairing.user_ids) not in seen_pairs
        ]
        if unplayed:
            return CriterionResult(
                ROUND_ROBIN_COMPLETE,
                CriterionStatus.VIOLATION,
                ViolationType.ABSOLUTE,
                f"pairs never scheduled: {unplayed}",
                details={"unplayed": unplayed},
            )
        return CriterionResult(
            ROUND_ROBIN_COMPLETE,
            CriterionStatus.COMPLIANT,
            description="every scheduled pair met",
        )


def create_pairing_checker() -> PairingChecker:
    """Create a pairing checker instance."""
    return PairingChecker()
