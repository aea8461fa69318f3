"""Catalogue of known air-pollution signatures and their sensor ranges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PollutionPattern:
    """Sensor ranges that characterise one pollution source.

    VOC values are in ppm, CO2 in ppm, temperature in degrees Celsius.
    """

    name: str
    priority: int
    min_iaq: float
    max_iaq: float
    min_voc: float
    max_voc: float
    min_co2: float
    max_co2: float
    min_temp: float
    max_temp: float
    description: str
    is_threat: bool


def _p(name, priority, min_iaq, max_iaq, min_voc, max_voc, min_co2, max_co2,
       min_temp, max_temp, description, is_threat):
    return PollutionPattern(
        name, priority,
        float(min_iaq), float(max_iaq),
        float(min_voc), float(max_voc),
        float(min_co2), float(max_co2),
        float(min_temp), float(max_temp),
        description, is_threat,
    )


_SIGNATURES: tuple[PollutionPattern, ...] = (
    # Priority 1: chemical warfare agents
    _p("Organophosphate_VX", 1, 150, 400, 0.01, 0.5, 350, 700, 20, 40, "VX/Sarin: Low VOC + extreme IAQ", True),
    _p("Carbamate_Attack", 1, 120, 350, 0.05, 0.8, 300, 600, 20, 35, "Carbamate: Low VOC + high IAQ", True),
    _p("Pulmonary_Weapon", 1, 50, 90, 0.5, 1.5, 500, 900, 15, 25, "Lung-targeting aerosol", True),
    _p("Opioid_Aerosol", 1, 60, 80, 0.01, 0.3, 400, 600, 18, 25, "Fentanyl/CA", True),
    _p("Stealth_Maintenance_Dose", 1, 50, 70, 0.3, 0.7, 500, 700, 20, 40, "Post-spike low-dose drugs", True),
    _p("Signature_Switch_Attack", 1, 0, 0, 0, 0, 0, 0, 0, 0, "Rapid signature switching", True),
    _p("Stealth_Drug_Delivery", 1, 45, 55, 0.3, 0.6, 450, 550, 20, 40, "Ultra-low VOC knockout drugs", True),
    _p("Chemical_Torture", 1, 70, 90, 0.7, 1.2, 700, 900, 20, 40, "Low-dose discomfort cocktail", True),
    _p("Aerosol_Persistence", 2, 0, 0, 0.5, 1.5, 0, 0, 0, 0, "Lingering microdroplets", True),
    _p("Bitter_Solvent", 1, 70, 90, 0.8, 1.5, 700, 900, 20, 40, "GHB/Benzo bitter taste", True),
    _p("Aerosol_Spray", 1, 60, 100, 1.0, 3.0, 800, 1200, 18, 35, "Ultrafine drug particles", True),
    _p("Chemical_Weapon", 1, 100, 300, 0.01, 0.5, 400, 800, 15, 30, "Chemical warfare agent", True),
    _p("Tear_Gas", 1, 80, 200, 0.5, 2.0, 500, 1000, 20, 40, "Riot control agent", True),
    _p("Nerve_Gas", 1, 150, 400, 0.01, 0.5, 350, 700, 20, 40, "Nerve agent exposure", True),
    _p("EA_2277", 1, 130, 170, 1.2, 1.8, 900, 1100, 15, 25, "BZ-series incapacitant", True),
    # Priority 2: knockout / incapacitating agents
    _p("Chloroform_Knockout", 2, 60, 120, 5.0, 20.0, 400, 800, 15, 30, "Chloroform: High VOC + moderate IAQ", True),
    _p("GHB_Evaporation", 2, 50, 100, 3.0, 15.0, 500, 900, 20, 35, "GHB: High VOC + sweet signature", True),
    _p("Benzodiazepine_Spike", 2, 55, 110, 2.5, 12.0, 450, 850, 18, 32, "Roofies: Medium VOC + temp drop", True),
    _p("Ether_Dousing", 2, 70, 150, 8.0, 25.0, 300, 600, 10, 25, "Ether: Extreme VOC + cold spot", True),
    _p("Scopolamine_Dart", 2, 90, 180, 1.5, 6.0, 350, 700, 22, 38, "Devil's Breath: Medium VOC", True),
    _p("Mace_Spray", 2, 100, 200, 0.8, 3.5, 400, 750, 20, 40, "Self-defense spray: Sharp VOC spike", True),
    _p("Aerosolized_Drug", 2, 40, 100, 0.1, 1.5, 500, 1000, 15, 40, "Aerosolized drug delivery: Low VOC", True),
    _p("Fentanyl_Powder", 2, 80, 160, 0.05, 0.3, 600, 1200, 25, 45, "Fentanyl powder: Low VOC + high IAQ", True),
    _p("Synthetic_Cannabinoid", 2, 70, 140, 0.1, 0.5, 550, 1100, 20, 40, "Synthetic cannabinoid: Low VOC", True),
    _p("Psychedelic_Spray", 2, 60, 130, 0.2, 1.0, 500, 1000, 18, 35, "Psychedelic aerosol: Low-medium VOC", True),
    _p("Inhalant_Exposure", 2, 50, 120, 0.3, 1.5, 450, 900, 15, 30, "Inhalant abuse: Low-medium VOC", True),
    _p("Anesthetic_Spray", 2, 40, 100, 0.4, 2.0, 500, 950, 20, 35, "Anesthetic gas: Low-medium VOC", True),
    _p("Chemical_Harassment", 2, 30, 80, 0.2, 1.0, 400, 800, 15, 30, "Chemical harassment: Low VOC", True),
    # Priority 3: industrial / chemical sources
    _p("Heavy_Industrial", 3, 80, 200, 2.0, 8.0, 400, 800, 15, 40, "Heavy industry: Medium-high VOC", False),
    _p("Chemical_Plant", 3, 70, 150, 1.5, 6.0, 350, 700, 18, 38, "Chemical plant: Medium VOC", False),
    _p("KEROSENE_STOVE", 3, 60, 140, 10.0, 50.0, 800, 2000, 25, 45, "Kerosene masking", False),
    _p("INCENSE_SMOKE", 3, 50, 120, 8.0, 40.0, 600, 1800, 22, 42, "Incense masking", False),
    _p("MOTOR_EXHAUST", 3, 70, 150, 15.0, 60.0, 900, 2500, 30, 50, "Engine exhaust masking", False),
    _p("SOLVENT_DUMP", 3, 80, 200, 8.0, 30.0, 500, 1200, 18, 40, "Intentional solvent release", True),
    # Priority 4: common urban pollution
    _p("Clean_Air", 4, 0, 50, 0.0, 0.5, 400, 600, 20, 30, "Clean air: Low VOC + low CO2", False),
    _p("Moderate_Air", 4, 50, 100, 0.5, 1.0, 600, 800, 22, 35, "Moderate air: Medium VOC + CO2", False),
    _p("Unhealthy_Air", 4, 100, 150, 1.0, 2.0, 800, 1000, 25, 40, "Unhealthy air: High VOC + CO2", False),
    _p("Industrial_Pollution", 4, 150, 250, 2.0, 5.0, 900, 1200, 28, 45, "Industrial: High VOC + CO2", False),
    _p("Vehicle_Exhaust", 4, 200, 300, 3.0, 6.0, 1000, 1500, 30, 50, "Vehicle exhaust: Very high VOC + CO2", False),
    _p("Household_Pesticides", 4, 60, 180, 1.0, 3.0, 700, 1200, 22, 42, "Household pesticides: Medium-high VOC + CO2", False),
    _p("Construction_Dust", 4, 100, 200, 1.5, 3.5, 700, 1300, 25, 45, "Construction: Medium-high VOC + CO2", False),
    _p("Household_Cleaners", 4, 50, 150, 0.5, 2.5, 600, 1100, 20, 40, "Household cleaners: Medium VOC + CO2", False),
    _p("Cigarette_Smoke", 4, 80, 180, 1.0, 4.0, 700, 1300, 22, 42, "Cigarette smoke: Medium-high VOC + CO2", False),
    _p("Cooking_Fumes", 4, 60, 160, 0.8, 3.0, 650, 1200, 20, 38, "Cooking: Medium VOC + CO2", False),
    _p("Traffic_Mimicry", 4, 40, 100, 0.5, 2.0, 600, 1200, 25, 45, "Traffic: Low-medium VOC + high CO2", False),
    _p("Gas_Stove", 4, 70, 150, 1.5, 4.0, 700, 1300, 22, 40, "Gas stove: Medium VOC + CO2", False),
    _p("Paint_Vapors", 4, 50, 120, 0.5, 2.0, 600, 1100, 20, 35, "Paint: Low-medium VOC + CO2", False),
    _p("Diesel_Exhaust", 4, 60, 120, 0.8, 3.0, 800, 1400, 28, 50, "Diesel: Medium VOC + very high CO2", False),
)


def get_signatures() -> tuple[PollutionPattern, ...]:
    """Return all known pollution patterns in catalogue order."""
    return _SIGNATURES


def signature_count() -> int:
    """Return the number of known pollution patterns."""
    return len(_SIGNATURES)