"""Component type taxonomy.

Types form a closed hierarchy:
- base types (MOSFET, MEMORY_FLASH, TEMPERATURE_SENSOR, ...)
- vendor-qualified refinements named <BASE>_<VENDOR> (MEMORY_FLASH_WINBOND)

The base type of a qualified type is found by stripping the vendor qualifier.
Base types may have a broader parent (MEMORY_FLASH -> MEMORY); the root of that
chain is the type's category, which is what similarity scoring gates on.
"""

from enum import Enum


# Vendor qualifiers that may appear as the final "_" segment of a type name
VENDOR_QUALIFIERS = frozenset({
    "AOS", "INFINEON", "ONSEMI", "TI", "ADI", "MAXIM", "BOSCH", "SENSIRION",
    "MICROCHIP", "WINBOND", "MACRONIX", "ISSI", "JST", "YAGEO", "MURATA",
    "NICHICON", "ESPRESSIF", "BEKEN",
})


class ComponentType(Enum):
    """Closed set of component type tags."""

    # Discrete semiconductors
    DIODE = "DIODE"
    DIODE_ONSEMI = "DIODE_ONSEMI"
    TRANSISTOR = "TRANSISTOR"
    TRANSISTOR_ONSEMI = "TRANSISTOR_ONSEMI"
    MOSFET = "MOSFET"
    MOSFET_AOS = "MOSFET_AOS"
    MOSFET_INFINEON = "MOSFET_INFINEON"
    MOSFET_ONSEMI = "MOSFET_ONSEMI"

    # Analog ICs
    OPAMP = "OPAMP"
    OPAMP_TI = "OPAMP_TI"
    OPAMP_ONSEMI = "OPAMP_ONSEMI"
    OPAMP_ADI = "OPAMP_ADI"
    VOLTAGE_REGULATOR = "VOLTAGE_REGULATOR"
    VOLTAGE_REGULATOR_ONSEMI = "VOLTAGE_REGULATOR_ONSEMI"
    VOLTAGE_REGULATOR_TI = "VOLTAGE_REGULATOR_TI"

    # Memory
    MEMORY = "MEMORY"
    MEMORY_FLASH = "MEMORY_FLASH"
    MEMORY_EEPROM = "MEMORY_EEPROM"
    MEMORY_SRAM = "MEMORY_SRAM"
    MEMORY_FLASH_WINBOND = "MEMORY_FLASH_WINBOND"
    MEMORY_FLASH_MACRONIX = "MEMORY_FLASH_MACRONIX"
    MEMORY_FLASH_ISSI = "MEMORY_FLASH_ISSI"
    MEMORY_EEPROM_MICROCHIP = "MEMORY_EEPROM_MICROCHIP"
    MEMORY_EEPROM_ONSEMI = "MEMORY_EEPROM_ONSEMI"
    MEMORY_SRAM_ISSI = "MEMORY_SRAM_ISSI"

    # Sensors
    SENSOR = "SENSOR"
    TEMPERATURE_SENSOR = "TEMPERATURE_SENSOR"
    HUMIDITY_SENSOR = "HUMIDITY_SENSOR"
    PRESSURE_SENSOR = "PRESSURE_SENSOR"
    ACCELEROMETER = "ACCELEROMETER"
    GYROSCOPE = "GYROSCOPE"
    TEMPERATURE_SENSOR_TI = "TEMPERATURE_SENSOR_TI"
    TEMPERATURE_SENSOR_ADI = "TEMPERATURE_SENSOR_ADI"
    TEMPERATURE_SENSOR_MAXIM = "TEMPERATURE_SENSOR_MAXIM"
    TEMPERATURE_SENSOR_BOSCH = "TEMPERATURE_SENSOR_BOSCH"
    TEMPERATURE_SENSOR_SENSIRION = "TEMPERATURE_SENSOR_SENSIRION"
    HUMIDITY_SENSOR_BOSCH = "HUMIDITY_SENSOR_BOSCH"
    HUMIDITY_SENSOR_SENSIRION = "HUMIDITY_SENSOR_SENSIRION"
    PRESSURE_SENSOR_BOSCH = "PRESSURE_SENSOR_BOSCH"
    ACCELEROMETER_ADI = "ACCELEROMETER_ADI"
    ACCELEROMETER_BOSCH = "ACCELEROMETER_BOSCH"
    GYROSCOPE_BOSCH = "GYROSCOPE_BOSCH"

    # Electromechanical
    CONNECTOR = "CONNECTOR"
    CONNECTOR_JST = "CONNECTOR_JST"

    # Passives
    RESISTOR = "RESISTOR"
    RESISTOR_CHIP = "RESISTOR_CHIP"
    RESISTOR_CHIP_YAGEO = "RESISTOR_CHIP_YAGEO"
    CAPACITOR = "CAPACITOR"
    CAPACITOR_CERAMIC = "CAPACITOR_CERAMIC"
    CAPACITOR_ELECTROLYTIC = "CAPACITOR_ELECTROLYTIC"
    CAPACITOR_CERAMIC_YAGEO = "CAPACITOR_CERAMIC_YAGEO"
    CAPACITOR_CERAMIC_MURATA = "CAPACITOR_CERAMIC_MURATA"
    CAPACITOR_ELECTROLYTIC_NICHICON = "CAPACITOR_ELECTROLYTIC_NICHICON"

    # Controllers and wireless SoCs
    MICROCONTROLLER = "MICROCONTROLLER"
    WIFI_SOC = "WIFI_SOC"
    WIFI_SOC_ESPRESSIF = "WIFI_SOC_ESPRESSIF"
    WIFI_SOC_BEKEN = "WIFI_SOC_BEKEN"

    @property
    def vendor(self) -> str | None:
        """Vendor qualifier of a manufacturer-scoped type, None for base types."""
        head, _, tail = self.name.rpartition("_")
        if head and tail in VENDOR_QUALIFIERS:
            return tail
        return None

    @property
    def base_type(self) -> "ComponentType":
        """The type with its vendor qualifier stripped (self for base types)."""
        vendor = self.vendor
        if vendor is None:
            return self
        return ComponentType[self.name[: -(len(vendor) + 1)]]

    @property
    def is_base_type(self) -> bool:
        return self.vendor is None

    @property
    def parent(self) -> "ComponentType | None":
        """Next broader base type (MEMORY_FLASH -> MEMORY), None at the root."""
        return _PARENTS.get(self.base_type)

    @property
    def lineage(self) -> tuple["ComponentType", ...]:
        """self, its base type, then each broader parent up to the category."""
        chain = [self]
        current = self.base_type
        while current is not None:
            if current is not chain[-1]:
                chain.append(current)
            current = _PARENTS.get(current)
        return tuple(chain)

    @property
    def category(self) -> "ComponentType":
        return self.lineage[-1]

    def is_a(self, other: "ComponentType") -> bool:
        """True if `other` is this type or one of its ancestors."""
        return other in self.lineage

    @property
    def is_passive(self) -> bool:
        return self.category in PASSIVE_CATEGORIES

    @property
    def is_semiconductor(self) -> bool:
        return self.category in SEMICONDUCTOR_CATEGORIES


_PARENTS: dict[ComponentType, ComponentType] = {
    ComponentType.MEMORY_FLASH: ComponentType.MEMORY,
    ComponentType.MEMORY_EEPROM: ComponentType.MEMORY,
    ComponentType.MEMORY_SRAM: ComponentType.MEMORY,
    ComponentType.TEMPERATURE_SENSOR: ComponentType.SENSOR,
    ComponentType.HUMIDITY_SENSOR: ComponentType.SENSOR,
    ComponentType.PRESSURE_SENSOR: ComponentType.SENSOR,
    ComponentType.ACCELEROMETER: ComponentType.SENSOR,
    ComponentType.GYROSCOPE: ComponentType.SENSOR,
    ComponentType.RESISTOR_CHIP: ComponentType.RESISTOR,
    ComponentType.CAPACITOR_CERAMIC: ComponentType.CAPACITOR,
    ComponentType.CAPACITOR_ELECTROLYTIC: ComponentType.CAPACITOR,
    ComponentType.WIFI_SOC: ComponentType.MICROCONTROLLER,
}

PASSIVE_CATEGORIES = frozenset({
    ComponentType.RESISTOR,
    ComponentType.CAPACITOR,
})

SEMICONDUCTOR_CATEGORIES = frozenset({
    ComponentType.DIODE,
    ComponentType.TRANSISTOR,
    ComponentType.MOSFET,
    ComponentType.OPAMP,
    ComponentType.VOLTAGE_REGULATOR,
    ComponentType.MEMORY,
    ComponentType.SENSOR,
    ComponentType.MICROCONTROLLER,
})

# Sensor sub-kinds, keyed by the base type that carries them
SENSOR_KINDS: dict[ComponentType, str] = {
    ComponentType.TEMPERATURE_SENSOR: "temperature",
    ComponentType.HUMIDITY_SENSOR: "humidity",
    ComponentType.PRESSURE_SENSOR: "pressure",
    ComponentType.ACCELEROMETER: "accelerometer",
    ComponentType.GYROSCOPE: "gyroscope",
}

MEMORY_KINDS: dict[ComponentType, str] = {
    ComponentType.MEMORY_FLASH: "flash",
    ComponentType.MEMORY_EEPROM: "eeprom",
    ComponentType.MEMORY_SRAM: "sram",
}


def most_specific(types) -> ComponentType | None:
    """Pick the type with the deepest lineage (ties keep iteration order)."""
    best = None
    for component_type in types:
        if best is None or len(component_type.lineage) > len(best.lineage):
            best = component_type
    return best
