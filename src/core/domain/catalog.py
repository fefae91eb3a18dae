"""
Named Unit Catalog — именованные физические величины

Каталог строится один раз при импорте модуля (import lock Python
гарантирует однократную инициализацию) и далее только читается.

Порядок объявления в CATALOG — это порядок приоритета классификатора:
при совпадении сигнатур побеждает первое объявленное имя.

Группы с одинаковой сигнатурой (первое имя побеждает):
- Pressure, CompressiveStrength, ShearModulus, Stress,
  UltimateTensileStrength, YieldStrength, YoungsModulus  → "Pressure"
- Work, Moment                                           → "Work"
- Angle, AngleOfFriction                                 → "Angle"
- MagneticFieldStrength, Magnetization                   → "MagneticFieldStrength"
- ThermalExpansionCoefficient,
  VolumetricThermalExpansionCoefficient                  → "ThermalExpansionCoefficient"

Порядок является частью публичного контракта: не сортировать.
"""

from typing import Final

from pydantic import BaseModel, Field

from src.core.domain.signature import DIMENSIONLESS, DimensionSignature


# =============================================================================
# NAMED UNIT MODEL
# =============================================================================


class NamedUnit(BaseModel):
    """Пара (имя, сигнатура) из каталога."""

    name: str = Field(..., min_length=1, description="Имя величины, например 'Pressure'")
    signature: DimensionSignature = Field(..., description="Сигнатура размерности")

    model_config = {"frozen": True}


# =============================================================================
# АТОМАРНЫЕ ЕДИНИЦЫ (7 базовых SI + угол)
# =============================================================================

LENGTH: Final = DimensionSignature(length=1)
MASS: Final = DimensionSignature(mass=1)
TIME_SPAN: Final = DimensionSignature(time=1)
ELECTRIC_CURRENT: Final = DimensionSignature(electric_current=1)
TEMPERATURE: Final = DimensionSignature(thermodynamic_temperature=1)
AMOUNT_OF_SUBSTANCE: Final = DimensionSignature(amount_of_substance=1)
LUMINOUS_INTENSITY: Final = DimensionSignature(luminous_intensity=1)
ANGLE: Final = DimensionSignature(angle=1)

ATOMIC_UNITS: Final[tuple[DimensionSignature, ...]] = (
    LENGTH,
    MASS,
    TIME_SPAN,
    ELECTRIC_CURRENT,
    TEMPERATURE,
    AMOUNT_OF_SUBSTANCE,
    LUMINOUS_INTENSITY,
    ANGLE,
)


# =============================================================================
# СОСТАВНЫЕ ЕДИНИЦЫ (топологический порядок определений)
# =============================================================================

# Геометрия
AREA: Final = LENGTH**2
VOLUME: Final = LENGTH**3
INVERSE_LENGTH: Final = DIMENSIONLESS / LENGTH
INVERSE_AREA: Final = DIMENSIONLESS / AREA
INVERSE_VOLUME: Final = DIMENSIONLESS / VOLUME
ANGLE_OF_FRICTION: Final = ANGLE

# Кинематика
FREQUENCY: Final = DIMENSIONLESS / TIME_SPAN
VELOCITY: Final = LENGTH / TIME_SPAN
ACCELERATION: Final = VELOCITY / TIME_SPAN
KINEMATIC_VISCOSITY: Final = AREA / TIME_SPAN
VOLUME_FLOW_RATE: Final = VOLUME / TIME_SPAN

# Механика
DENSITY: Final = MASS / VOLUME
FORCE: Final = MASS * ACCELERATION
PRESSURE: Final = FORCE / AREA
COMPRESSIVE_STRENGTH: Final = PRESSURE
SHEAR_MODULUS: Final = PRESSURE
STRESS: Final = PRESSURE
ULTIMATE_TENSILE_STRENGTH: Final = PRESSURE
YIELD_STRENGTH: Final = PRESSURE
YOUNGS_MODULUS: Final = PRESSURE
STIFFNESS: Final = FORCE / LENGTH
STIFFNESS_DENSITY: Final = PRESSURE / LENGTH
WORK: Final = FORCE * LENGTH
MOMENT: Final = FORCE * LENGTH
POWER: Final = WORK / TIME_SPAN
SPECIFIC_ENERGY: Final = WORK / MASS
DISSIPATION_RATE: Final = POWER / MASS
DYNAMIC_VISCOSITY: Final = PRESSURE * TIME_SPAN

# Электромагнетизм
ELECTRIC_CHARGE: Final = ELECTRIC_CURRENT * TIME_SPAN
ELECTRIC_POTENTIAL: Final = POWER / ELECTRIC_CURRENT
CURRENT_DENSITY: Final = ELECTRIC_CURRENT / AREA
SURFACE_CHARGE_DENSITY: Final = ELECTRIC_CHARGE / AREA
VOLUME_CHARGE_DENSITY: Final = ELECTRIC_CHARGE / VOLUME
MAGNETIC_FIELD_STRENGTH: Final = ELECTRIC_CURRENT / LENGTH
MAGNETIZATION: Final = ELECTRIC_CURRENT / LENGTH
MAGNETIC_FLUX: Final = ELECTRIC_POTENTIAL * TIME_SPAN
MAGNETIC_FLUX_DENSITY: Final = MAGNETIC_FLUX / AREA
ELECTRICAL_CAPACITANCE: Final = ELECTRIC_CHARGE / ELECTRIC_POTENTIAL
ELECTRICAL_INDUCTANCE: Final = MAGNETIC_FLUX / ELECTRIC_CURRENT
ELECTRICAL_RESISTANCE: Final = ELECTRIC_POTENTIAL / ELECTRIC_CURRENT
ELECTRICAL_CONDUCTANCE: Final = DIMENSIONLESS / ELECTRICAL_RESISTANCE
ELECTRICAL_CONDUCTIVITY: Final = ELECTRICAL_CONDUCTANCE / LENGTH
ELECTROMAGNETIC_POTENTIAL: Final = MAGNETIC_FLUX / LENGTH
VACUUM_PERMITTIVITY: Final = ELECTRICAL_CAPACITANCE / LENGTH

# Термодинамика
THERMAL_CONDUCTIVITY: Final = POWER / (LENGTH * TEMPERATURE)
THERMAL_EXPANSION_COEFFICIENT: Final = DIMENSIONLESS / TEMPERATURE
VOLUMETRIC_THERMAL_EXPANSION_COEFFICIENT: Final = DIMENSIONLESS / TEMPERATURE
SPECIFIC_HEAT: Final = SPECIFIC_ENERGY / TEMPERATURE
HEAT_FLUX: Final = POWER / AREA
THERMAL_TRANSFER_COEFFICIENT: Final = HEAT_FLUX / TEMPERATURE


# =============================================================================
# CATALOG (порядок = приоритет классификации)
# =============================================================================


def _entry(name: str, signature: DimensionSignature) -> NamedUnit:
    return NamedUnit(name=name, signature=signature)


CATALOG: Final[tuple[NamedUnit, ...]] = (
    _entry("Dimensionless", DIMENSIONLESS),
    _entry("Length", LENGTH),
    _entry("Area", AREA),
    _entry("Volume", VOLUME),
    _entry("Mass", MASS),
    _entry("Angle", ANGLE),
    _entry("AngleOfFriction", ANGLE_OF_FRICTION),
    _entry("Density", DENSITY),
    _entry("TimeSpan", TIME_SPAN),
    _entry("Frequency", FREQUENCY),
    _entry("Velocity", VELOCITY),
    _entry("Acceleration", ACCELERATION),
    _entry("Temperature", TEMPERATURE),
    _entry("ElectricCurrent", ELECTRIC_CURRENT),
    _entry("CurrentDensity", CURRENT_DENSITY),
    _entry("ElectricPotential", ELECTRIC_POTENTIAL),
    _entry("ElectricCharge", ELECTRIC_CHARGE),
    _entry("SurfaceChargeDensity", SURFACE_CHARGE_DENSITY),
    _entry("VolumeChargeDensity", VOLUME_CHARGE_DENSITY),
    _entry("MagneticFieldStrength", MAGNETIC_FIELD_STRENGTH),
    _entry("MagneticFlux", MAGNETIC_FLUX),
    _entry("MagneticFluxDensity", MAGNETIC_FLUX_DENSITY),
    _entry("Magnetization", MAGNETIZATION),
    _entry("ElectricalCapacitance", ELECTRICAL_CAPACITANCE),
    _entry("ElectricalInductance", ELECTRICAL_INDUCTANCE),
    _entry("ElectricalConductance", ELECTRICAL_CONDUCTANCE),
    _entry("ElectricalResistance", ELECTRICAL_RESISTANCE),
    _entry("ElectricalConductivity", ELECTRICAL_CONDUCTIVITY),
    _entry("ElectromagneticPotential", ELECTROMAGNETIC_POTENTIAL),
    _entry("AmountOfSubstance", AMOUNT_OF_SUBSTANCE),
    _entry("LuminousIntensity", LUMINOUS_INTENSITY),
    _entry("Pressure", PRESSURE),
    _entry("CompressiveStrength", COMPRESSIVE_STRENGTH),
    _entry("ShearModulus", SHEAR_MODULUS),
    _entry("Stress", STRESS),
    _entry("UltimateTensileStrength", ULTIMATE_TENSILE_STRENGTH),
    _entry("YieldStrength", YIELD_STRENGTH),
    _entry("YoungsModulus", YOUNGS_MODULUS),
    _entry("Stiffness", STIFFNESS),
    _entry("StiffnessDensity", STIFFNESS_DENSITY),
    _entry("Force", FORCE),
    _entry("Work", WORK),
    _entry("Power", POWER),
    _entry("Moment", MOMENT),
    _entry("SpecificEnergy", SPECIFIC_ENERGY),
    _entry("ThermalConductivity", THERMAL_CONDUCTIVITY),
    _entry("ThermalExpansionCoefficient", THERMAL_EXPANSION_COEFFICIENT),
    _entry(
        "VolumetricThermalExpansionCoefficient",
        VOLUMETRIC_THERMAL_EXPANSION_COEFFICIENT,
    ),
    _entry("SpecificHeat", SPECIFIC_HEAT),
    _entry("ThermalTransferCoefficient", THERMAL_TRANSFER_COEFFICIENT),
    _entry("HeatFlux", HEAT_FLUX),
    _entry("DynamicViscosity", DYNAMIC_VISCOSITY),
    _entry("KinematicViscosity", KINEMATIC_VISCOSITY),
    _entry("VacuumPermittivity", VACUUM_PERMITTIVITY),
    _entry("VolumeFlowRate", VOLUME_FLOW_RATE),
    _entry("DissipationRate", DISSIPATION_RATE),
    _entry("InverseLength", INVERSE_LENGTH),
    _entry("InverseArea", INVERSE_AREA),
    _entry("InverseVolume", INVERSE_VOLUME),
)

_BY_NAME: Final[dict[str, NamedUnit]] = {unit.name: unit for unit in CATALOG}


# =============================================================================
# LOOKUPS
# =============================================================================


def get_named_unit(name: str) -> NamedUnit:
    """
    Поиск записи каталога по имени.

    Raises:
        KeyError: Если имя не из каталога
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown unit type: {name!r}") from None


def catalog_names() -> tuple[str, ...]:
    """Имена каталога в порядке приоритета."""
    return tuple(unit.name for unit in CATALOG)
