from dataclasses import dataclass, field
from typing import List, Optional

from ...context._dataclass.date_context import DateContext
from ...constants.validation_issues import partition_issues


@dataclass
class ValidationResult:
    """Result of validating a date context"""
    is_valid: bool
    issues: List[str] = field(default_factory=list)
    corrected: Optional[DateContext] = None  # Present only when a fix was computed

    @property
    def future_date_issues(self) -> List[str]:
        return partition_issues(self.issues)[0]

    @property
    def significant_issues(self) -> List[str]:
        return partition_issues(self.issues)[1]
