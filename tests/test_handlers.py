"""Tests for manufacturer handlers - pattern tables, package / series / attribute extraction."""

import pytest

from partmatch import classify, get_engine
from partmatch.component_types import ComponentType
from partmatch.handlers import (
    HANDLER_CLASSES,
    AlphaOmegaHandler,
    AnalogDevicesHandler,
    BekenHandler,
    BoschHandler,
    EspressifHandler,
    InfineonHandler,
    IssiHandler,
    JSTHandler,
    MacronixHandler,
    ManufacturerHandler,
    MaximHandler,
    MicrochipHandler,
    MurataHandler,
    NichiconHandler,
    OnsemiHandler,
    SensirionHandler,
    TexasInstrumentsHandler,
    WinbondHandler,
    YageoHandler,
    default_handlers,
)
from partmatch.registry import PatternRegistry


# =============================================================================
# CLASSIFICATION TABLE
# =============================================================================

# mpn, primary type, package, series
CLASSIFICATION_CASES = [
    # Alpha & Omega
    ("AOD4184A", ComponentType.MOSFET_AOS, "TO-252", "AOD4184"),
    ("AO3400A", ComponentType.MOSFET_AOS, "SOT-23", "AO3400"),
    ("AOTL66912-TR", ComponentType.MOSFET_AOS, "TOLL", "AOTL66912"),
    ("AONS66916", ComponentType.MOSFET_AOS, "DFN", "AONS66916"),
    # Infineon
    ("IRF530NPBF", ComponentType.MOSFET_INFINEON, "TO-220", "IRF530"),
    ("IRFP250N", ComponentType.MOSFET_INFINEON, "TO-247", "IRFP250"),
    ("IPP060N06N3", ComponentType.MOSFET_INFINEON, "TO-220", "IPP060N06N3"),
    # Texas Instruments
    ("LM358N", ComponentType.OPAMP_TI, "DIP", "LM358"),
    ("LM358DR", ComponentType.OPAMP_TI, "SOIC", "LM358"),
    ("TL072CP", ComponentType.OPAMP_TI, "DIP", "TL072"),
    ("LM35DZ", ComponentType.TEMPERATURE_SENSOR_TI, "TO-92", "LM35"),
    ("TMP117AIDRVR", ComponentType.TEMPERATURE_SENSOR_TI, "WSON", "TMP117"),
    ("LM317T", ComponentType.VOLTAGE_REGULATOR_TI, "TO-220", "LM317"),
    # onsemi
    ("MC1458DR2G", ComponentType.OPAMP_ONSEMI, "SOIC", "MC1458"),
    ("2N2222A", ComponentType.TRANSISTOR_ONSEMI, "TO-18", "2N2222"),
    ("MMBT3904", ComponentType.TRANSISTOR_ONSEMI, "SOT-23", "MMBT3904"),
    ("MUR460", ComponentType.DIODE_ONSEMI, "DO-201", "MUR460"),
    ("MC7805CTG", ComponentType.VOLTAGE_REGULATOR_ONSEMI, "TO-220", "MC7805"),
    ("CAT24C256WI-GT3", ComponentType.MEMORY_EEPROM_ONSEMI, "SOIC", "CAT24C256"),
    # Analog Devices
    ("ADXL345BCCZ-RL7", ComponentType.ACCELEROMETER_ADI, "LGA", "ADXL345"),
    ("TMP36GT9Z", ComponentType.TEMPERATURE_SENSOR_ADI, "TO-92", "TMP36"),
    ("AD8606ARZ", ComponentType.OPAMP_ADI, "SOIC", "AD8606"),
    # Maxim
    ("DS18B20+", ComponentType.TEMPERATURE_SENSOR_MAXIM, "TO-92", "DS18B20"),
    ("DS18B20U+T&R", ComponentType.TEMPERATURE_SENSOR_MAXIM, "uSOP-8", "DS18B20"),
    ("MAX31855KASA+", ComponentType.TEMPERATURE_SENSOR_MAXIM, "SOIC-8", "MAX31855"),
    # Bosch
    ("BME280", ComponentType.HUMIDITY_SENSOR_BOSCH, "LGA", "BME280"),
    ("BMP280", ComponentType.PRESSURE_SENSOR_BOSCH, "LGA", "BMP280"),
    ("BMI160", ComponentType.ACCELEROMETER_BOSCH, "LGA", "BMI160"),
    # Sensirion
    ("SHT31-DIS-B", ComponentType.HUMIDITY_SENSOR_SENSIRION, "DFN", "SHT31"),
    ("STS31", ComponentType.TEMPERATURE_SENSOR_SENSIRION, None, "STS31"),
    # Microchip
    ("24LC256-I/SN", ComponentType.MEMORY_EEPROM_MICROCHIP, "SOIC", "24LC256"),
    ("25LC256-I/P", ComponentType.MEMORY_EEPROM_MICROCHIP, "DIP", "25LC256"),
    ("AT24C256C-SSHL-T", ComponentType.MEMORY_EEPROM_MICROCHIP, "SOIC", "AT24C256"),
    ("AT24CM01-XHM", ComponentType.MEMORY_EEPROM_MICROCHIP, "TSSOP", "AT24CM01"),
    # Winbond
    ("W25Q128JVSIQ", ComponentType.MEMORY_FLASH_WINBOND, "SOIC-8 208mil", "W25Q128"),
    ("W25Q32JWSSIQ", ComponentType.MEMORY_FLASH_WINBOND, "SOIC-8", "W25Q32"),
    ("W25N01GVZEIG", ComponentType.MEMORY_FLASH_WINBOND, "WSON-8", "W25N01"),
    # Macronix
    ("MX25L12835FM2I-10G", ComponentType.MEMORY_FLASH_MACRONIX, "SOIC-8 208mil", "MX25L128"),
    ("MX25U3235FM1I-10G", ComponentType.MEMORY_FLASH_MACRONIX, "SOIC-8", "MX25U32"),
    # ISSI
    ("IS61WV25616BLL-10TLI", ComponentType.MEMORY_SRAM_ISSI, "TSOP-II", "IS61WV25616"),
    ("IS25LP128F-JBLE", ComponentType.MEMORY_FLASH_ISSI, "SOIC-8", "IS25LP128"),
    # JST
    ("PHR-2", ComponentType.CONNECTOR_JST, None, "PH"),
    ("B2B-PH-K-S", ComponentType.CONNECTOR_JST, "K-S", "PH"),
    ("SM04B-SRSS-TB", ComponentType.CONNECTOR_JST, "TB", "SH"),
    # Yageo
    ("RC0603FR-0710KL", ComponentType.RESISTOR_CHIP_YAGEO, "0603", "RC0603"),
    ("CC0603KRX7R9BB104", ComponentType.CAPACITOR_CERAMIC_YAGEO, "0603", "CC0603"),
    # Murata
    ("GRM188R71H104KA93D", ComponentType.CAPACITOR_CERAMIC_MURATA, "0603", "GRM188"),
    # Nichicon
    ("UHS1E101MPD", ComponentType.CAPACITOR_ELECTROLYTIC_NICHICON, "PD", "UHS"),
    # Espressif
    ("ESP32-WROOM-32E-N4", ComponentType.WIFI_SOC_ESPRESSIF, "WROOM-32E", "ESP32"),
    ("ESP32-S3-WROOM-1-N8R8", ComponentType.WIFI_SOC_ESPRESSIF, "WROOM-1", "ESP32-S3"),
    ("ESP32-C3FN4", ComponentType.WIFI_SOC_ESPRESSIF, "QFN-32", "ESP32-C3"),
    ("ESP-WROOM-02", ComponentType.WIFI_SOC_ESPRESSIF, "WROOM-02", "ESP8266"),
    # Beken
    ("BK7231N-QFN32", ComponentType.WIFI_SOC_BEKEN, "QFN-32", "BK7231"),
]


class TestClassificationTable:
    """Every handler's representative MPNs classify, with package and series."""

    @pytest.mark.parametrize("mpn,primary,package,series", CLASSIFICATION_CASES)
    def test_classify(self, mpn, primary, package, series):
        result = classify(mpn)
        assert result.recognized
        assert result.primary_type is primary
        assert result.package_code == package
        assert result.series == series

    @pytest.mark.parametrize("mpn,primary,package,series", CLASSIFICATION_CASES)
    def test_types_include_lineage(self, mpn, primary, package, series):
        types = classify(mpn).types
        for component_type in primary.lineage:
            assert component_type in types

    @pytest.mark.parametrize("mpn,primary,package,series", CLASSIFICATION_CASES)
    def test_lowercase_input(self, mpn, primary, package, series):
        assert classify(mpn.lower()).primary_type is primary

    @pytest.mark.parametrize("mpn", ["", "   ", "NOTAPART", "ESP32-H2", "12345"])
    def test_unrecognized(self, mpn):
        result = classify(mpn)
        assert not result.recognized
        assert result.types == frozenset()
        assert result.manufacturer is None


# =============================================================================
# HANDLER BASE
# =============================================================================


class TestHandlerBase:
    """Shared behaviour of ManufacturerHandler."""

    def test_handler_names_unique(self):
        names = [cls.name for cls in HANDLER_CLASSES]
        assert len(names) == len(set(names))
        assert all(names)

    def test_default_handlers_are_fresh_instances(self):
        first, second = default_handlers(), default_handlers()
        assert [h.name for h in first] == [h.name for h in second]
        assert first[0] is not second[0]

    def test_every_pattern_compiles_and_registers(self):
        registry = PatternRegistry()
        for handler in default_handlers():
            handler.initialize_patterns(registry)
        assert len(registry) > 0
        for handler in default_handlers():
            for component_type in handler.PATTERNS:
                assert not component_type.is_base_type, "handlers register vendor types only"

    def test_supported_types_include_parents(self):
        supported = WinbondHandler().supported_types()
        assert ComponentType.MEMORY_FLASH in supported
        assert ComponentType.MEMORY in supported

    def test_default_extractors(self):
        handler = ManufacturerHandler()
        assert handler.extract_series("MUR460RL") == "MUR460"
        assert handler.extract_series("") is None
        assert handler.extract_package_code("ABC123") is None
        assert handler.attributes("ABC123") == {}

    def test_repr(self):
        assert repr(JSTHandler()) == "JSTHandler(name='jst')"

    @pytest.mark.parametrize("handler", default_handlers(), ids=lambda h: h.name)
    def test_extractors_tolerate_garbage(self, handler):
        for mpn in (None, "", "???", "-"):
            assert handler.extract_series(mpn) is None or isinstance(handler.extract_series(mpn), str)
            handler.extract_package_code(mpn)
            assert isinstance(handler.attributes(mpn), dict)

    @pytest.mark.parametrize("mpn,primary,package,series", CLASSIFICATION_CASES)
    def test_series_is_idempotent(self, mpn, primary, package, series):
        handler = get_engine().handler(classify(mpn).handler)
        once = handler.extract_series(mpn)
        assert once == series
        assert handler.extract_series(once) == once


# =============================================================================
# PER-VENDOR ATTRIBUTES
# =============================================================================


class TestAlphaOmega:
    """AOS package-in-prefix decoding."""

    def test_four_letter_prefix_wins(self):
        handler = AlphaOmegaHandler()
        assert handler.extract_package_code("AOTL66912") == "TOLL"
        assert handler.extract_package_code("AOT290L") == "TO-220"

    def test_so8(self):
        assert AlphaOmegaHandler().extract_package_code("AO4407A") == "SO-8"


class TestInfineon:
    """IR / OptiMOS decoding."""

    def test_channel(self):
        handler = InfineonHandler()
        assert handler.attributes("IRF530NPBF") == {"channel": "N"}
        assert handler.attributes("IRF9540N") == {"channel": "P"}

    def test_optimos_package(self):
        assert InfineonHandler().extract_package_code("BSC016N06NS") == "TDSON-8"


class TestTexasInstruments:
    """TI op-amps and sensors."""

    def test_opamp_profile(self):
        attrs = TexasInstrumentsHandler().attributes("TL072CP")
        assert attrs == {"channels": 2, "input_type": "jfet"}

    def test_lm35_is_not_an_opamp(self):
        result = classify("LM35DZ")
        assert ComponentType.OPAMP not in result.types
        assert result.attributes["sensor_family"] == "LM35"
        assert result.attributes["interface"] == "analog"

    def test_tmp117(self):
        attrs = classify("TMP117AIDRVR").attributes
        assert attrs["interface"] == "I2C"
        assert attrs["sensor_kind"] == "temperature"

    def test_grade_letter_before_package(self):
        assert TexasInstrumentsHandler().extract_package_code("LM7805CT") == "TO-220"

    def test_nopb_suffix(self):
        result = classify("LM358DR/NOPB")
        assert result.primary_type is ComponentType.OPAMP_TI
        assert result.series == "LM358"

    def test_bare_lm35_series(self):
        handler = TexasInstrumentsHandler()
        assert handler.extract_series("LM35") == "LM35"
        assert handler.extract_package_code("LM35") is None

    def test_fixed_regulator_profile(self):
        result = classify("LM7805CT")
        assert result.primary_type is ComponentType.VOLTAGE_REGULATOR_TI
        assert result.series == "LM7805"
        assert result.attributes == {
            "regulator_type": "fixed",
            "polarity": "positive",
            "output_voltage": 5.0,
            "output_current_ma": 1000,
        }

    def test_adjustable_regulator_profile(self):
        attrs = TexasInstrumentsHandler().attributes("LM317T")
        assert attrs["regulator_type"] == "adjustable"
        assert "output_voltage" not in attrs


class TestOnsemi:
    """onsemi discretes, op-amps and Catalyst EEPROMs."""

    def test_transistor_profile(self):
        attrs = OnsemiHandler().attributes("2N2222A")
        assert attrs == {"polarity": "NPN", "vceo": 40, "ic_ma": 800}
        assert OnsemiHandler().attributes("2N3906")["polarity"] == "PNP"

    def test_catalyst_eeprom(self):
        attrs = classify("CAT24C256WI-GT3").attributes
        assert attrs["interface"] == "I2C"
        assert attrs["density_kbit"] == 256
        assert attrs["memory_type"] == "eeprom"

    def test_mosfet_package(self):
        assert OnsemiHandler().extract_package_code("NTD4906N") == "DPAK"

    def test_mosfet_channel(self):
        assert OnsemiHandler().attributes("FQP30N06L") == {"channel": "N"}
        assert OnsemiHandler().attributes("FQP27P06") == {"channel": "P"}

    @pytest.mark.parametrize("mpn,package", [("2N7002", "SOT-23"), ("2N7000", "TO-92")])
    def test_2n7_parts_are_mosfets(self, mpn, package):
        result = classify(mpn)
        assert result.primary_type is ComponentType.MOSFET_ONSEMI
        assert ComponentType.TRANSISTOR not in result.types
        assert result.package_code == package
        assert result.attributes == {"channel": "N"}

    def test_2n_bipolar_still_transistor(self):
        assert classify("2N3904").primary_type is ComponentType.TRANSISTOR_ONSEMI

    def test_rectifier(self):
        result = classify("1N4007")
        assert result.primary_type is ComponentType.DIODE_ONSEMI
        assert result.package_code == "DO-41"
        assert result.attributes["diode_type"] == "rectifier"
        assert result.attributes["reverse_voltage"] == 1000

    def test_signal_diode_package(self):
        assert classify("1N4148").package_code == "DO-35"

    def test_low_power_regulator(self):
        result = classify("MC78L05ACPRPG")
        assert result.primary_type is ComponentType.VOLTAGE_REGULATOR_ONSEMI
        assert result.attributes["output_voltage"] == 5.0
        assert result.attributes["output_current_ma"] == 100


class TestAnalogDevices:
    """ADI sensors and op-amps."""

    def test_accelerometer(self):
        attrs = AnalogDevicesHandler().attributes("ADXL345BCCZ-RL7")
        assert attrs["sensor_family"] == "ADXL3XX"
        assert attrs["interface"] == "SPI/I2C"

    def test_opamp(self):
        assert AnalogDevicesHandler().attributes("AD8606ARZ") == {"channels": 2, "input_type": "cmos"}


class TestMaxim:
    """Maxim / Dallas temperature sensors."""

    def test_one_wire(self):
        attrs = MaximHandler().attributes("DS18B20+")
        assert attrs["interface"] == "1-Wire"
        assert attrs["sensor_family"] == "DS18B20"

    def test_thermocouple_interface(self):
        assert MaximHandler().attributes("MAX31855KASA+")["interface"] == "SPI"


class TestBosch:
    """Multi-type Bosch sensors."""

    def test_bme280_types(self):
        types = classify("BME280").types
        assert ComponentType.HUMIDITY_SENSOR_BOSCH in types
        assert ComponentType.PRESSURE_SENSOR_BOSCH in types
        assert ComponentType.TEMPERATURE_SENSOR_BOSCH in types
        assert ComponentType.SENSOR in types

    def test_combined_sensor_kind(self):
        attrs = classify("BME280").attributes
        assert attrs["sensor_kinds"] == ["humidity", "pressure", "temperature"]
        assert attrs["sensor_kind"] == "combined"

    def test_single_kind(self):
        assert classify("BMA400").attributes["sensor_kind"] == "accelerometer"

    def test_imu(self):
        assert classify("BMI160").attributes["sensor_kinds"] == ["accelerometer", "gyroscope"]

    def test_no_package_without_series(self):
        assert BoschHandler().extract_package_code("XYZ") is None


class TestSensirion:
    """Sensirion humidity / temperature sensors."""

    def test_sht_kinds(self):
        assert classify("SHT31-DIS-B").attributes["sensor_kinds"] == ["humidity", "temperature"]

    def test_sts_temperature_only(self):
        result = classify("STS31")
        assert ComponentType.HUMIDITY_SENSOR not in result.types
        assert result.attributes["sensor_kind"] == "temperature"

    def test_variant_package(self):
        assert SensirionHandler().extract_package_code("SHT40-AD1B-R2") == "DFN"


class TestMicrochip:
    """Microchip / Atmel serial EEPROMs."""

    def test_i2c(self):
        attrs = MicrochipHandler().attributes("24LC256-I/SN")
        assert attrs == {"interface": "I2C", "density_kbit": 256, "max_clock_khz": 400}

    def test_spi(self):
        attrs = MicrochipHandler().attributes("25LC256-I/P")
        assert attrs["interface"] == "SPI"
        assert attrs["max_clock_khz"] == 10000

    def test_megabit_density(self):
        assert MicrochipHandler().attributes("AT24CM01-XHM")["density_kbit"] == 1024
        assert MicrochipHandler().attributes("24LC1025-I/P")["density_kbit"] == 1024

    def test_fast_grade(self):
        assert MicrochipHandler().attributes("24FC256-I/SN")["max_clock_khz"] == 1000


class TestWinbond:
    """Winbond serial / parallel flash."""

    def test_serial_nor(self):
        attrs = WinbondHandler().attributes("W25Q128JVSIQ")
        assert attrs == {"interface": "SPI", "density_kbit": 131072, "supply_voltage": 3.3}

    def test_low_voltage_revision(self):
        assert WinbondHandler().attributes("W25Q32JWSSIQ")["supply_voltage"] == 1.8

    def test_nand_density_in_gbit(self):
        assert WinbondHandler().attributes("W25N01GVZEIG")["density_kbit"] == 1024 * 1024

    def test_parallel(self):
        result = classify("W29GL128CL9T")
        assert result.primary_type is ComponentType.MEMORY_FLASH_WINBOND
        assert result.attributes["interface"] == "parallel"
        assert result.attributes["density_kbit"] == 131072

    def test_matches_bypasses_registry_for_other_types(self):
        handler = WinbondHandler()
        registry = PatternRegistry()
        assert handler.matches("W25Q64JVSSIQ", ComponentType.MEMORY, registry)
        assert not handler.matches("W25Q64JVSSIQ", ComponentType.MEMORY_EEPROM, registry)
        assert not handler.matches("24LC256", ComponentType.MEMORY, registry)


class TestMacronix:
    """Macronix MX25 flash."""

    def test_density_and_voltage(self):
        attrs = MacronixHandler().attributes("MX25L12835FM2I-10G")
        assert attrs == {"interface": "SPI", "supply_voltage": 3.3, "density_kbit": 131072}

    def test_1v8_family(self):
        attrs = MacronixHandler().attributes("MX25U3235FM1I-10G")
        assert attrs["supply_voltage"] == 1.8
        assert attrs["density_kbit"] == 32768


class TestIssi:
    """ISSI SRAM and flash."""

    def test_sram_organization(self):
        attrs = IssiHandler().attributes("IS61WV25616BLL-10TLI")
        assert attrs["organization"] == "256Kx16"
        assert attrs["density_kbit"] == 4096
        assert attrs["speed_ns"] == 10
        assert attrs["supply_voltage"] == 3.3
        assert attrs["interface"] == "parallel"

    def test_sram_low_voltage(self):
        attrs = IssiHandler().attributes("IS62WV51216EALL-55TLI")
        assert attrs["supply_voltage"] == 1.8
        assert attrs["density_kbit"] == 8192

    def test_flash(self):
        attrs = IssiHandler().attributes("IS25WP064A-JBLE")
        assert attrs == {"interface": "SPI", "density_kbit": 65536, "supply_voltage": 1.8}

    def test_memory_type(self):
        assert classify("IS61WV25616BLL-10TLI").attributes["memory_type"] == "sram"
        assert classify("IS25LP128F-JBLE").attributes["memory_type"] == "flash"

    def test_bare_sram_series(self):
        handler = IssiHandler()
        assert handler.extract_series("IS61WV25616") == "IS61WV25616"
        assert handler.extract_package_code("IS61WV25616") is None
        attrs = handler.attributes("IS61WV25616")
        assert "speed_ns" not in attrs
        assert attrs["organization"] == "256Kx16"


class TestJST:
    """JST housing and header decoding."""

    def test_housing(self):
        attrs = JSTHandler().attributes("PHR-2")
        assert attrs["pins"] == 2
        assert attrs["pitch"] == 2.0
        assert attrs["gender"] == "female"
        assert attrs["mounting"] == "THT"

    def test_top_entry_header(self):
        attrs = JSTHandler().attributes("B2B-PH-K-S")
        assert attrs["gender"] == "male"
        assert attrs["orientation"] == "vertical"
        assert attrs["mounting"] == "THT"

    def test_side_entry_smt_header(self):
        attrs = JSTHandler().attributes("S4B-XH-SM4-TB")
        assert attrs["mounting"] == "SMT"
        assert attrs["orientation"] == "right_angle"
        assert attrs["pitch"] == 2.5

    def test_sh_header(self):
        attrs = JSTHandler().attributes("SM04B-SRSS-TB")
        assert attrs["pins"] == 4
        assert attrs["pitch"] == 1.0
        assert attrs["current_rating"] == 1.0

    def test_simplified_name(self):
        assert JSTHandler().extract_series("XH-4") == "XH"

    def test_bare_family(self):
        assert JSTHandler().extract_series("PH") == "PH"
        assert JSTHandler().extract_series("ph") == "PH"
        assert JSTHandler().attributes("PH") == {}


class TestYageo:
    """Yageo resistor and MLCC decoding."""

    def test_resistor(self):
        attrs = YageoHandler().attributes("RC0603FR-0710KL")
        assert attrs == {
            "resistance": 10000.0,
            "size": "0603",
            "size_metric": "1608",
            "tolerance": 1.0,
            "power": 0.1,
        }

    def test_resistor_decimal_value(self):
        attrs = YageoHandler().attributes("RC0805JR-074K7L")
        assert attrs["resistance"] == pytest.approx(4700.0)
        assert attrs["tolerance"] == 5.0

    def test_capacitor(self):
        attrs = YageoHandler().attributes("CC0603KRX7R9BB104")
        assert attrs["capacitance"] == pytest.approx(100e-9)
        assert attrs["dielectric"] == "X7R"
        assert attrs["voltage"] == 50.0
        assert attrs["tolerance"] == 10.0

    @pytest.mark.parametrize("mpn", ["RC0603FR-07RL", "RC0603FR-07KL", "RT0603BRD07ML"])
    def test_value_code_without_digits(self, mpn):
        assert YageoHandler().attributes(mpn) == {}
        result = classify(mpn)
        assert result.primary_type is ComponentType.RESISTOR_CHIP_YAGEO
        assert "resistance" not in result.attributes

    def test_op_amp_is_not_a_resistor(self):
        result = classify("RC4558P")
        assert result.primary_type is ComponentType.OPAMP_TI
        assert "Yageo" not in result.other_manufacturers


class TestMurata:
    """Murata MLCC decoding."""

    def test_grm(self):
        attrs = MurataHandler().attributes("GRM188R71H104KA93D")
        assert attrs["capacitance"] == pytest.approx(100e-9)
        assert attrs["size"] == "0603"
        assert attrs["size_metric"] == "1608"
        assert attrs["dielectric"] == "X7R"
        assert attrs["voltage"] == 50.0
        assert attrs["tolerance"] == 10.0

    def test_x5r_0402(self):
        attrs = MurataHandler().attributes("GRM155R61A105KE15D")
        assert attrs["dielectric"] == "X5R"
        assert attrs["size"] == "0402"
        assert attrs["voltage"] == 10.0
        assert attrs["capacitance"] == pytest.approx(1e-6)


class TestNichicon:
    """Nichicon electrolytic decoding."""

    def test_uhs(self):
        attrs = NichiconHandler().attributes("UHS1E101MPD")
        assert attrs["capacitance"] == pytest.approx(100e-6)
        assert attrs["voltage"] == 25.0
        assert attrs["tolerance"] == 20.0
        assert attrs["temperature_rating"] == 125
        assert attrs["life"] == "standard"
        assert attrs["dielectric"] == "aluminum"

    def test_long_life(self):
        assert NichiconHandler().attributes("UKL1H100MDD")["life"] == "extra_long_life"

    def test_polymer(self):
        assert NichiconHandler().attributes("PCR1E101MCL1GS")["dielectric"] == "polymer"

    def test_unknown_series(self):
        assert NichiconHandler().extract_series("UZZ1E101MPD") is None
        assert not classify("UZZ1E101MPD").recognized


class TestEspressif:
    """Espressif modules and SoCs."""

    def test_module_memory(self):
        attrs = EspressifHandler().attributes("ESP32-S3-WROOM-1-N8R8")
        assert attrs["form"] == "module"
        assert attrs["flash_mb"] == 8
        assert attrs["psram_mb"] == 8
        assert attrs["bluetooth_version"] == 5.0

    def test_soc_memory(self):
        attrs = EspressifHandler().attributes("ESP32-C3FN4")
        assert attrs["form"] == "soc"
        assert attrs["flash_mb"] == 4
        assert attrs["psram_mb"] == 0

    def test_wifi6(self):
        assert EspressifHandler().attributes("ESP32-C6-WROOM-1-N8")["wifi_generation"] == 6

    def test_esp8266_has_no_bluetooth(self):
        attrs = EspressifHandler().attributes("ESP8266EX")
        assert attrs["bluetooth_version"] == 0.0
        assert attrs["wifi_generation"] == 4


class TestBeken:
    """Beken BK72xx SoCs."""

    def test_wifi4(self):
        attrs = BekenHandler().attributes("BK7231N-QFN32")
        assert attrs["wifi_generation"] == 4
        assert attrs["bluetooth_version"] == 4.2

    def test_wifi6(self):
        assert BekenHandler().attributes("BK7236")["wifi_generation"] == 6
        assert BekenHandler().extract_package_code("BK7236") is None
