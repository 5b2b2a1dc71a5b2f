"""Use Case: Run Checks - feed every line to every active check."""

import logging
from collections.abc import Iterable

from dotenv_linter.domain.checklist import Checklist
from dotenv_linter.domain.entities import LineEntry, LintWarning

logger = logging.getLogger(__name__)


class CheckRunner:
    """
    Runs the checklist over an ordered sequence of line records.

    Lines of one file must be contiguous. Empty and comment lines are skipped
    before any check sees them, so they never affect stateful checks.
    """

    @staticmethod
    def run(lines: Iterable[LineEntry], skip_checks: Iterable[str] = ()) -> list[LintWarning]:
        """Return all warnings, ordered by line then by check registration order."""
        checks = Checklist.build(skip_checks)
        logger.debug("Active checks: %s", ", ".join(c.name for c in checks))

        warnings: list[LintWarning] = []
        for line in lines:
            if line.is_empty_or_comment():
                continue
            for check in checks:
                warning = check.run(line)
                if warning is not None:
                    warnings.append(warning)
        return warnings
