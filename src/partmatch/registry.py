"""Pattern registry: ordered (component type, regex) rules resolved against an MPN.

The registry performs no tie-breaking. When several vendors' rules accept the
same MPN every matching type is reported; picking a winner is the job of the
handler dispatch in the engine.
"""

import logging
import re
from dataclasses import dataclass

from .component_types import ComponentType
from .mpn import clean_mpn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRule:
    """A single immutable (type, regex) association."""
    component_type: ComponentType
    pattern: re.Pattern
    owner: str | None = None  # Handler name that registered the rule

    def accepts(self, mpn: str) -> bool:
        return self.pattern.fullmatch(mpn) is not None


class PatternRegistry:
    """Index from ComponentType to its ordered list of matchers.

    Rules are kept in insertion order per type. Once `freeze()` is called the
    registry rejects further registration.
    """

    def __init__(self):
        self._rules: dict[ComponentType, list[PatternRule]] = {}
        self._frozen = False

    def register(
        self,
        component_type: ComponentType,
        pattern: str | re.Pattern,
        owner: str | None = None,
    ) -> PatternRule:
        """Add a matcher for a type. Duplicates and overlaps are allowed."""
        if self._frozen:
            raise RuntimeError("Pattern registry is frozen; register patterns before first use")
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        rule = PatternRule(component_type, pattern, owner)
        self._rules.setdefault(component_type, []).append(rule)
        return rule

    def freeze(self) -> None:
        self._frozen = True
        logger.debug(f"Pattern registry frozen with {len(self)} rules across {len(self._rules)} types")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def types(self) -> list[ComponentType]:
        """Registered types in first-registration order."""
        return list(self._rules)

    def rules_for(self, component_type: ComponentType) -> tuple[PatternRule, ...]:
        return tuple(self._rules.get(component_type, ()))

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._rules.values())

    def _candidate_rules(self, component_type: ComponentType, owner: str | None = None):
        """Rules of `component_type` and of every refinement of it."""
        for registered, rules in self._rules.items():
            if not registered.is_a(component_type):
                continue
            for rule in rules:
                if owner is None or rule.owner == owner:
                    yield rule

    def match(self, mpn: str | None) -> frozenset[ComponentType]:
        """Every type whose matcher accepts the MPN, expanded with ancestors.

        Empty set means the MPN is unrecognized.
        """
        mpn = clean_mpn(mpn)
        if not mpn:
            return frozenset()
        matched: set[ComponentType] = set()
        for component_type, rules in self._rules.items():
            if any(rule.accepts(mpn) for rule in rules):
                matched.update(component_type.lineage)
        return frozenset(matched)

    def matches(self, mpn: str | None, component_type: ComponentType) -> bool:
        """Check whether any rule for the type (or a refinement of it) accepts the MPN."""
        mpn = clean_mpn(mpn)
        if not mpn or component_type is None:
            return False
        return any(rule.accepts(mpn) for rule in self._candidate_rules(component_type))

    def matches_for_owner(self, mpn: str | None, component_type: ComponentType, owner: str) -> bool:
        """Like `matches` but only consults rules registered by one handler."""
        mpn = clean_mpn(mpn)
        if not mpn or component_type is None:
            return False
        return any(rule.accepts(mpn) for rule in self._candidate_rules(component_type, owner))

    def owners(self, mpn: str | None) -> list[str]:
        """Handler names whose rules accept the MPN, in registration order."""
        mpn = clean_mpn(mpn)
        if not mpn:
            return []
        found: list[str] = []
        for rules in self._rules.values():
            for rule in rules:
                if rule.owner and rule.owner not in found and rule.accepts(mpn):
                    found.append(rule.owner)
        return found
