"""
Display Name Substitution
=========================

Player names in the image are at most three characters. A substitution
maps one of those names to a longer display name, e.g. "AAA:Alice".

Rules are checked in the order given and the first exact, case-sensitive
match wins. Substitution only affects what is displayed; decoded records
are never changed.
"""

from dataclasses import dataclass, field
from typing import Iterable
import logging

from tap_eeprom.errors import SubstitutionSpecError

logger = logging.getLogger(__name__)


SUBSTITUTION_SEPARATOR = ":"


@dataclass(frozen=True)
class NameSubstitution:
    """Replace the decoded name `original` with `replacement`."""
    original: str
    replacement: str


def parse_substitution(spec: str) -> NameSubstitution:
    """
    Parse a "NAME:REPLACEMENT" argument.

    The spec is split at the first colon, so the replacement may itself
    contain colons.

    Raises:
        SubstitutionSpecError: If the name or the replacement is empty,
            or the spec has no colon
    """
    original, separator, replacement = spec.partition(SUBSTITUTION_SEPARATOR)
    if not original:
        raise SubstitutionSpecError(
            spec, "contains no record name to substitute before the colon"
        )
    if not separator or not replacement:
        raise SubstitutionSpecError(
            spec, "contains no name to use as a substitute after the colon"
        )
    return NameSubstitution(original, replacement)


@dataclass
class NameResolver:
    """
    Ordered list of name substitutions.

    Example:
        >>> resolver = NameResolver.from_specs(["AAA:Alice"])
        >>> resolver.resolve("AAA")
        'Alice'
        >>> resolver.resolve("BBB")
        'BBB'
    """
    rules: list[NameSubstitution] = field(default_factory=list)

    @classmethod
    def from_specs(cls, specs: Iterable[str]) -> "NameResolver":
        """Build a resolver from raw "NAME:REPLACEMENT" strings."""
        return cls([parse_substitution(spec) for spec in specs])

    def resolve(self, name: str) -> str:
        """Return the display name for `name`."""
        for rule in self.rules:
            if rule.original == name:
                logger.debug(f"Substituting {name!r} -> {rule.replacement!r}")
                return rule.replacement
        return name
