"""Tests for the pattern registry."""

import pytest

from partmatch.component_types import ComponentType
from partmatch.registry import PatternRegistry


@pytest.fixture
def registry():
    registry = PatternRegistry()
    registry.register(ComponentType.MEMORY_FLASH_WINBOND, r"^W25Q[0-9]+.*", owner="winbond")
    registry.register(ComponentType.OPAMP_TI, r"^LM358.*", owner="texas_instruments")
    registry.register(ComponentType.OPAMP_ONSEMI, r"^LM358.*", owner="onsemi")
    registry.register(ComponentType.OPAMP_ONSEMI, r"^MC1458.*", owner="onsemi")
    return registry


class TestRegister:
    """Registration and freezing."""

    def test_rules_kept_in_insertion_order(self, registry):
        rules = registry.rules_for(ComponentType.OPAMP_ONSEMI)
        assert [rule.pattern.pattern for rule in rules] == [r"^LM358.*", r"^MC1458.*"]
        assert all(rule.owner == "onsemi" for rule in rules)

    def test_types_in_first_registration_order(self, registry):
        assert registry.types() == [
            ComponentType.MEMORY_FLASH_WINBOND,
            ComponentType.OPAMP_TI,
            ComponentType.OPAMP_ONSEMI,
        ]

    def test_len_counts_rules(self, registry):
        assert len(registry) == 4

    def test_unknown_type_has_no_rules(self, registry):
        assert registry.rules_for(ComponentType.CONNECTOR) == ()

    def test_register_after_freeze_raises(self, registry):
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RuntimeError):
            registry.register(ComponentType.OPAMP_TI, r"^TL072.*")

    def test_patterns_are_case_insensitive(self, registry):
        assert registry.matches("w25q128jvsiq", ComponentType.MEMORY_FLASH)


class TestMatch:
    """Resolving an MPN to the set of matching types."""

    def test_match_expands_ancestors(self, registry):
        assert registry.match("W25Q128JVSIQ") == frozenset({
            ComponentType.MEMORY_FLASH_WINBOND,
            ComponentType.MEMORY_FLASH,
            ComponentType.MEMORY,
        })

    def test_match_reports_every_vendor(self, registry):
        # No tie-breaking: both vendors' types are reported
        matched = registry.match("LM358DR")
        assert ComponentType.OPAMP_TI in matched
        assert ComponentType.OPAMP_ONSEMI in matched
        assert ComponentType.OPAMP in matched

    @pytest.mark.parametrize("mpn", ["", "   ", None, "XYZ123"])
    def test_no_match(self, registry, mpn):
        assert registry.match(mpn) == frozenset()

    def test_matches_base_type_through_refinement(self, registry):
        assert registry.matches("W25Q64JVSSIQ", ComponentType.MEMORY_FLASH_WINBOND)
        assert registry.matches("W25Q64JVSSIQ", ComponentType.MEMORY_FLASH)
        assert registry.matches("W25Q64JVSSIQ", ComponentType.MEMORY)
        assert not registry.matches("W25Q64JVSSIQ", ComponentType.MEMORY_EEPROM)

    def test_matches_rejects_empty_and_none_type(self, registry):
        assert not registry.matches("", ComponentType.MEMORY)
        assert not registry.matches("W25Q64", None)

    def test_matches_for_owner(self, registry):
        assert registry.matches_for_owner("MC1458P", ComponentType.OPAMP, "onsemi")
        assert not registry.matches_for_owner("MC1458P", ComponentType.OPAMP, "texas_instruments")

    def test_owners_in_registration_order(self, registry):
        assert registry.owners("LM358N") == ["texas_instruments", "onsemi"]
        assert registry.owners("MC1458") == ["onsemi"]
        assert registry.owners("") == []
