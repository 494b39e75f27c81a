from typing import List, Dict, Sequence, Any
from dataclasses import dataclass, field
from enum import Enum
import numpy as np
from datetime import datetime
import logging

from models import MAP_SIZE, Request, Advertisement
from scoring import score_breakdown

logger = logging.getLogger(__name__)


class ValidationErrorType(Enum):
    OVERLAP = "overlap"
    BOUNDARY_VIOLATION = "boundary_violation"
    MALFORMED = "malformed"
    NOT_CONTAINING = "not_containing"
    AREA_EXCEEDED = "area_exceeded"
    COUNT_MISMATCH = "count_mismatch"


class ValidationSeverity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    error_type: ValidationErrorType
    severity: ValidationSeverity
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    ads_involved: List[int] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ValidationResult:
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    metrics: Dict[str, float] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == ValidationSeverity.WARNING)

    def issues_of(self, error_type: ValidationErrorType) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.error_type == error_type]


class OverlapChecker:
    """Checks for overlapping rectangles in a placement"""

    def check(self, ads: Sequence[Advertisement]) -> List[ValidationIssue]:
        """Check every pair at once on coordinate arrays"""
        issues = []
        if len(ads) < 2:
            return issues

        bounds = np.array([ad.to_tuple() for ad in ads], dtype=np.int64)
        row0, col0, row1, col1 = bounds.T

        rows_overlap = np.maximum.outer(row0, row0) < np.minimum.outer(row1, row1)
        cols_overlap = np.maximum.outer(col0, col0) < np.minimum.outer(col1, col1)
        pairs = np.argwhere(np.triu(rows_overlap & cols_overlap, k=1))

        for i, j in pairs:
            i, j = int(i), int(j)
            issues.append(ValidationIssue(
                error_type=ValidationErrorType.OVERLAP,
                severity=ValidationSeverity.ERROR,
                message=f"Advertisements {i} and {j} overlap",
                details={
                    "ad_i_bounds": ads[i].to_tuple(),
                    "ad_j_bounds": ads[j].to_tuple()
                },
                ads_involved=[i, j]
            ))

        return issues


class SolutionValidator:
    """
    Validates a final placement against its requests.

    A rectangle that is still its untouched 1x1 seed is never penalized as
    an error: the search cannot shrink it, so a seed that already exceeds
    the map or the requested area is reported as a warning.
    """

    def __init__(self, map_size: int = MAP_SIZE):
        self.map_size = map_size
        self.overlap_checker = OverlapChecker()

    def validate(self, requests: Sequence[Request],
                 ads: Sequence[Advertisement]) -> ValidationResult:
        issues = []

        if len(requests) != len(ads):
            issues.append(ValidationIssue(
                error_type=ValidationErrorType.COUNT_MISMATCH,
                severity=ValidationSeverity.ERROR,
                message=f"{len(requests)} requests but {len(ads)} advertisements"
            ))
            return ValidationResult(is_valid=False, issues=issues)

        for i, (req, ad) in enumerate(zip(requests, ads)):
            issues.extend(self._check_one(i, req, ad))

        issues.extend(self.overlap_checker.check(ads))

        scores = score_breakdown(requests, ads)
        metrics = {
            'count': float(len(ads)),
            'mean_score': float(scores.mean()) if len(scores) else 0.0,
            'min_score': float(scores.min()) if len(scores) else 0.0,
            'perfect_matches': float(np.count_nonzero(scores == 1.0)),
            'total_area': float(sum(ad.area for ad in ads)),
        }

        result = ValidationResult(
            is_valid=not any(issue.severity == ValidationSeverity.ERROR for issue in issues),
            issues=issues,
            metrics=metrics
        )

        if result.is_valid:
            logger.debug(f"Solution valid ({result.warning_count} warnings)")
        else:
            logger.warning(f"Solution invalid: {result.error_count} errors, "
                           f"{result.warning_count} warnings")
        return result

    def _check_one(self, index: int, req: Request, ad: Advertisement) -> List[ValidationIssue]:
        issues = []
        untouched = ad == Advertisement.seed_for(req)
        severity = ValidationSeverity.WARNING if untouched else ValidationSeverity.ERROR

        if not ad.is_well_formed():
            issues.append(ValidationIssue(
                error_type=ValidationErrorType.MALFORMED,
                severity=ValidationSeverity.ERROR,
                message=f"Advertisement {index} is empty or inverted",
                details={"bounds": ad.to_tuple()},
                ads_involved=[index]
            ))
            return issues

        if not ad.is_within_map(self.map_size):
            issues.append(ValidationIssue(
                error_type=ValidationErrorType.BOUNDARY_VIOLATION,
                severity=severity,
                message=f"Advertisement {index} leaves the {self.map_size}x{self.map_size} map",
                details={"bounds": ad.to_tuple()},
                ads_involved=[index]
            ))

        if not ad.contains(req.row, req.col):
            issues.append(ValidationIssue(
                error_type=ValidationErrorType.NOT_CONTAINING,
                severity=severity,
                message=f"Advertisement {index} misses point {req.point}",
                details={"bounds": ad.to_tuple(), "point": req.point},
                ads_involved=[index]
            ))

        if ad.area > req.area:
            issues.append(ValidationIssue(
                error_type=ValidationErrorType.AREA_EXCEEDED,
                severity=severity,
                message=f"Advertisement {index} area {ad.area} exceeds requested {req.area}",
                details={"area": ad.area, "requested": req.area},
                ads_involved=[index]
            ))

        return issues
