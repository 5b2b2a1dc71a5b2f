"""Checklist registry: the ordered set of checks a scan runs."""

from collections.abc import Iterable

from dotenv_linter.domain.rules import Check
from dotenv_linter.domain.rules.duplicated_key import DuplicatedKeyChecker
from dotenv_linter.domain.rules.incorrect_delimiter import IncorrectDelimiterChecker
from dotenv_linter.domain.rules.key_without_value import KeyWithoutValueChecker
from dotenv_linter.domain.rules.leading_character import LeadingCharacterChecker
from dotenv_linter.domain.rules.lowercase_key import LowercaseKeyChecker
from dotenv_linter.domain.rules.quote_character import QuoteCharacterChecker
from dotenv_linter.domain.rules.space_character import SpaceCharacterChecker
from dotenv_linter.domain.rules.unordered_key import UnorderedKeyChecker

# Registration order decides the order of warnings raised on the same line.
CHECK_CLASSES: tuple[type[Check], ...] = (
    DuplicatedKeyChecker,
    IncorrectDelimiterChecker,
    LeadingCharacterChecker,
    KeyWithoutValueChecker,
    LowercaseKeyChecker,
    QuoteCharacterChecker,
    SpaceCharacterChecker,
    UnorderedKeyChecker,
)


class Checklist:
    """Builds fresh check instances. No top-level functions."""

    @staticmethod
    def names() -> list[str]:
        """Registered check names, in registration order."""
        return [check_class.name for check_class in CHECK_CLASSES]

    @staticmethod
    def build(skip_checks: Iterable[str] = ()) -> list[Check]:
        """
        Instantiate every registered check, then drop the skipped ones.

        Skip names match by exact string equality only.
        """
        skipped = set(skip_checks)
        checks: list[Check] = [check_class() for check_class in CHECK_CLASSES]
        return [check for check in checks if check.name not in skipped]
