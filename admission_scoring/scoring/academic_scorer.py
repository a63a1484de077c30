"""
Academic Achievement Scorer
admission_scoring/scoring/academic_scorer.py

Scores publications, patents, competitions and innovation projects.

Formula:
    total  = publications + patents + competitions + innovation
    total  = 15 if the special talent exemption was passed
    capped = min(total, 15)

Publications:   Σ base(kind) × authorship ratio  (first 2 C papers only)
Patents:        2.0 per sole first-inventor patent, 1.6 if shared
Competitions:   dedup by work_key → per-entry value → best 3, ≤1 external
Innovation:     completed projects by level × role, capped at 2.0

Invalid or unknown values score zero; the scorer never raises.
"""

import structlog
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from admission_scoring.models.academic import (
    AcademicInputs,
    CompetitionRecord,
    InnovationProjectRecord,
    PatentRecord,
    PublicationRecord,
)
from admission_scoring.models.enumerations import InnovationRole, PublicationKind
from admission_scoring.scoring.rules import Ordinance, get_ordinance
from admission_scoring.scoring.utils import ZERO, group_by_key, quantize_score

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AcademicScoreResult:
    """Output of AcademicScorer.calculate(). Sub-totals are uncapped."""
    publications: Decimal
    patents: Decimal
    competitions: Decimal
    innovation: Decimal    # already capped at the innovation ceiling
    total: Decimal         # may exceed the academic ceiling
    capped: Decimal        # min(total, 15)

    def as_dict(self) -> Dict[str, float]:
        return {name: float(value) for name, value in asdict(self).items()}


@dataclass(frozen=True)
class CompetitionCandidate:
    """A competition entry that survived work_key dedup, with its value."""
    record: CompetitionRecord
    value: Decimal


class AcademicScorer:
    """Calculate the academic achievement score under one ordinance."""

    def __init__(self, ordinance: Optional[Ordinance] = None):
        self.ordinance = ordinance or get_ordinance()

    def calculate(self, inputs: AcademicInputs) -> AcademicScoreResult:
        """
        Args:
            inputs: Publication, patent, competition and innovation records.

        Returns:
            AcademicScoreResult with per-category sub-totals, total and capped.

        Examples:
            >>> pub = PublicationRecord(title="x", category="A", author_rank=1, total_authors=1)
            >>> AcademicScorer().calculate(AcademicInputs(publications=[pub])).capped
            Decimal('10.0000')
        """
        rules = self.ordinance

        publications = self.score_publications(inputs.publications)
        patents = self.score_patents(inputs.patents)
        competitions = self.score_competitions(inputs.competitions)
        innovation = self.score_innovation(inputs.innovation)

        total = publications + patents + competitions + innovation
        if inputs.special_talent_passed:
            total = rules.academic_cap
        capped = min(total, rules.academic_cap)

        logger.info(
            "academic_scored",
            ordinance=rules.version,
            publications=float(publications),
            patents=float(patents),
            competitions=float(competitions),
            innovation=float(innovation),
            special_talent_passed=inputs.special_talent_passed,
            total=float(total),
            capped=float(capped),
        )

        return AcademicScoreResult(
            publications=quantize_score(publications),
            patents=quantize_score(patents),
            competitions=quantize_score(competitions),
            innovation=quantize_score(innovation),
            total=quantize_score(total),
            capped=quantize_score(capped),
        )

    # ------------------------------------------------------------------
    # Publications
    # ------------------------------------------------------------------

    def authorship_ratio(self, publication: PublicationRecord) -> Decimal:
        """Share of a paper's base value credited to the candidate."""
        rules = self.ordinance
        rank = publication.author_rank
        if publication.is_independent or publication.total_authors <= 1:
            return rules.sole_author_ratio
        if publication.is_co_first and rank in (1, 2):
            return rules.co_first_ratio
        if rank == 1:
            return rules.first_author_ratio
        if rank == 2:
            return rules.second_author_ratio
        return ZERO

    def publication_values(self, publications: Iterable[PublicationRecord]) -> List[Decimal]:
        """Per-paper contributions of the scoring papers, in input order."""
        rules = self.ordinance
        values: List[Decimal] = []
        c_counted = 0
        for publication in publications:
            if not publication.title:
                continue
            kind = publication.kind
            if kind is PublicationKind.CATEGORY_C:
                if c_counted >= rules.c_category_limit:
                    continue
                c_counted += 1
            base = rules.publication_base[kind]
            if not base:
                continue
            values.append(base * self.authorship_ratio(publication))
        return values

    def score_publications(self, publications: Iterable[PublicationRecord]) -> Decimal:
        return sum(self.publication_values(publications), ZERO)

    # ------------------------------------------------------------------
    # Patents
    # ------------------------------------------------------------------

    def score_patents(self, patents: Iterable[PatentRecord]) -> Decimal:
        rules = self.ordinance
        total = ZERO
        for patent in patents:
            if patent.author_rank != 1:
                continue
            if (patent.total_authors or 1) <= 1:
                total += rules.patent_base
            else:
                total += rules.patent_base * rules.patent_shared_ratio
        return total

    # ------------------------------------------------------------------
    # Competitions
    # ------------------------------------------------------------------

    def deduplicate_competitions(
        self, competitions: Sequence[CompetitionRecord]
    ) -> List[CompetitionRecord]:
        """
        Collapse entries that share a work_key to the one with the highest
        base value. Entries without a key are kept as they are.
        """
        groups = group_by_key(
            enumerate(competitions),
            key=lambda pair: pair[1].work_key or pair[0],
        )
        return [
            self._best_entry([record for _, record in members])
            for members in groups.values()
        ]

    def _best_entry(self, entries: List[CompetitionRecord]) -> CompetitionRecord:
        best = entries[0]
        best_base: Optional[Decimal] = None
        for entry in entries:
            base = self.ordinance.competition_base_value(entry.level, entry.award)
            if base is None:
                continue
            if best_base is None or base > best_base:
                best, best_base = entry, base
        return best

    def competition_value(self, record: CompetitionRecord) -> Decimal:
        """Points for a single entry after individual/team division."""
        rules = self.ordinance
        base = rules.competition_base_value(record.level, record.award)
        if not base:
            return ZERO

        if not record.is_team or record.is_personal_project:
            return base / rules.individual_divisor

        rank = record.team_rank or 0
        if rules.is_special_team_competition(record.name):
            divisor = rules.special_team_rank_divisors.get(rank)
            return base / divisor if divisor else ZERO

        size = record.total_team_members or 0
        if size <= 2:
            return base / rules.individual_divisor
        if size <= rules.small_team_max_size:
            return base / Decimal(size)
        if 1 <= rank <= rules.large_team_max_rank:
            return base / rules.large_team_divisor
        # Large team without a qualifying rank
        return ZERO

    def select_competitions(
        self, competitions: Sequence[CompetitionRecord]
    ) -> List[CompetitionCandidate]:
        """Entries that count toward the score, highest value first."""
        rules = self.ordinance
        candidates = [
            CompetitionCandidate(record=record, value=self.competition_value(record))
            for record in self.deduplicate_competitions(competitions)
        ]
        ranked = sorted(candidates, key=lambda c: c.value, reverse=True)

        selected: List[CompetitionCandidate] = []
        external_used = 0
        for candidate in ranked:
            if len(selected) >= rules.competition_max_selected:
                break
            if candidate.record.is_external:
                if external_used >= rules.competition_max_external:
                    continue
                external_used += 1
            selected.append(candidate)
        return selected

    def score_competitions(self, competitions: Sequence[CompetitionRecord]) -> Decimal:
        return sum((c.value for c in self.select_competitions(competitions)), ZERO)

    # ------------------------------------------------------------------
    # Innovation projects
    # ------------------------------------------------------------------

    def score_innovation(self, projects: Iterable[InnovationProjectRecord]) -> Decimal:
        rules = self.ordinance
        lead = InnovationRole.LEAD.value
        member = InnovationRole.MEMBER.value
        total = ZERO
        for project in projects:
            if project.status != rules.innovation_completed_status:
                continue
            by_role = rules.innovation_values.get(project.level)
            if by_role is None:
                continue
            total += by_role[lead if project.role == lead else member]
        return min(total, rules.innovation_cap)


def score_academic(
    inputs: AcademicInputs,
    ordinance: Optional[Ordinance] = None,
) -> AcademicScoreResult:
    """Score academic achievements with the given (or configured) ordinance."""
    return AcademicScorer(ordinance).calculate(inputs)
