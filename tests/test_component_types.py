"""Tests for the component type taxonomy."""

import pytest

from partmatch.component_types import (
    MEMORY_KINDS,
    SENSOR_KINDS,
    ComponentType,
    most_specific,
)


class TestVendorQualifier:
    """Base type and vendor derivation from type names."""

    @pytest.mark.parametrize("component_type,base", [
        (ComponentType.MOSFET_AOS, ComponentType.MOSFET),
        (ComponentType.MEMORY_FLASH_WINBOND, ComponentType.MEMORY_FLASH),
        (ComponentType.TEMPERATURE_SENSOR_TI, ComponentType.TEMPERATURE_SENSOR),
        (ComponentType.CAPACITOR_CERAMIC_MURATA, ComponentType.CAPACITOR_CERAMIC),
        (ComponentType.WIFI_SOC_ESPRESSIF, ComponentType.WIFI_SOC),
    ])
    def test_base_type_strips_vendor(self, component_type, base):
        assert component_type.base_type is base
        assert not component_type.is_base_type

    def test_base_types_are_their_own_base(self):
        for component_type in (ComponentType.MEMORY_FLASH, ComponentType.OPAMP, ComponentType.RESISTOR_CHIP):
            assert component_type.base_type is component_type
            assert component_type.is_base_type
            assert component_type.vendor is None

    def test_vendor(self):
        assert ComponentType.OPAMP_TI.vendor == "TI"
        assert ComponentType.CONNECTOR_JST.vendor == "JST"

    def test_every_qualified_type_has_a_base(self):
        # ComponentType[...] lookup inside base_type must never fail
        for component_type in ComponentType:
            assert component_type.base_type.is_base_type


class TestHierarchy:
    """Parent chain, lineage and category."""

    def test_lineage_of_vendor_type(self):
        assert ComponentType.MEMORY_FLASH_WINBOND.lineage == (
            ComponentType.MEMORY_FLASH_WINBOND,
            ComponentType.MEMORY_FLASH,
            ComponentType.MEMORY,
        )

    def test_lineage_of_root(self):
        assert ComponentType.OPAMP.lineage == (ComponentType.OPAMP,)

    def test_category(self):
        assert ComponentType.MEMORY_SRAM_ISSI.category is ComponentType.MEMORY
        assert ComponentType.HUMIDITY_SENSOR_BOSCH.category is ComponentType.SENSOR
        assert ComponentType.RESISTOR_CHIP_YAGEO.category is ComponentType.RESISTOR
        assert ComponentType.WIFI_SOC_BEKEN.category is ComponentType.MICROCONTROLLER
        assert ComponentType.MOSFET_INFINEON.category is ComponentType.MOSFET

    def test_parent(self):
        assert ComponentType.MEMORY_FLASH.parent is ComponentType.MEMORY
        assert ComponentType.MEMORY_FLASH_MACRONIX.parent is ComponentType.MEMORY
        assert ComponentType.MEMORY.parent is None

    def test_is_a(self):
        assert ComponentType.MEMORY_EEPROM_MICROCHIP.is_a(ComponentType.MEMORY_EEPROM)
        assert ComponentType.MEMORY_EEPROM_MICROCHIP.is_a(ComponentType.MEMORY)
        assert not ComponentType.MEMORY_EEPROM_MICROCHIP.is_a(ComponentType.MEMORY_FLASH)
        assert not ComponentType.MEMORY.is_a(ComponentType.MEMORY_FLASH)

    def test_passive_and_semiconductor(self):
        assert ComponentType.CAPACITOR_ELECTROLYTIC_NICHICON.is_passive
        assert not ComponentType.CAPACITOR_ELECTROLYTIC_NICHICON.is_semiconductor
        assert ComponentType.OPAMP_ADI.is_semiconductor
        assert not ComponentType.CONNECTOR_JST.is_passive
        assert not ComponentType.CONNECTOR_JST.is_semiconductor


class TestKindTables:
    """Sensor and memory kind lookups are keyed by base types."""

    def test_sensor_kinds_keys_are_sensor_subtypes(self):
        for component_type in SENSOR_KINDS:
            assert component_type.is_base_type
            assert component_type.category is ComponentType.SENSOR

    def test_memory_kinds_keys_are_memory_subtypes(self):
        for component_type in MEMORY_KINDS:
            assert component_type.is_base_type
            assert component_type.category is ComponentType.MEMORY


class TestMostSpecific:
    """most_specific picks the deepest type of a matched set."""

    def test_deepest_wins(self):
        types = {ComponentType.MEMORY, ComponentType.MEMORY_FLASH, ComponentType.MEMORY_FLASH_WINBOND}
        assert most_specific(types) is ComponentType.MEMORY_FLASH_WINBOND

    def test_empty(self):
        assert most_specific([]) is None
