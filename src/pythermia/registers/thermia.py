"""Thermia heat pump register catalog.

Auto-generated from thermia_registers.csv by thermia-registers-codegen - do not edit manually.
Generated: 2026-10-19T14:03:27Z
"""

from __future__ import annotations

from pythermia.registers.definitions import (
    ALL_MODELS,
    INVERTER_ONLY,
    MEGA_ONLY,
    RegisterDefinition,
    RegisterKind,
)

THERMIA_REGISTERS: tuple[RegisterDefinition, ...] = (
    RegisterDefinition(
        name="setpointOperationalMode",
        kind=RegisterKind.HOLDING_REGISTER,
        address=0,
        default_value=0,
        scale=1,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Control",
        description="Operational mode",
    ),
    RegisterDefinition(
        name="setpointHeatCurve",
        kind=RegisterKind.HOLDING_REGISTER,
        address=4,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heating",
        subsystem="Curve",
        description="Heat curve setting",
    ),
    RegisterDefinition(
        name="setpointHeatCurveFineTune",
        kind=RegisterKind.HOLDING_REGISTER,
        address=5,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heating",
        subsystem="Curve",
        description="Heat curve fine tune",
    ),
    RegisterDefinition(
        name="setpointIndoorTemperature",
        kind=RegisterKind.HOLDING_REGISTER,
        address=6,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heating",
        subsystem="Control",
        description="Indoor temperature setting",
    ),
    RegisterDefinition(
        name="setpointHotWater",
        kind=RegisterKind.HOLDING_REGISTER,
        address=7,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Hot water",
        subsystem="Control",
        description="Hot water setting",
    ),
    RegisterDefinition(
        name="setpointHeatingCurveMaxSupply",
        kind=RegisterKind.HOLDING_REGISTER,
        address=9,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heating",
        subsystem="Curve",
        description="Maximum supply line temperature",
    ),
    RegisterDefinition(
        name="setpointHeatingCurveMinSupply",
        kind=RegisterKind.HOLDING_REGISTER,
        address=11,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heating",
        subsystem="Curve",
        description="Minimum supply line temperature",
    ),
    RegisterDefinition(
        name="setpointHotWaterImmersionHeaterStartDelay",
        kind=RegisterKind.HOLDING_REGISTER,
        address=36,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Hot water",
        subsystem="Additional heat",
        description="Tap water immersion heater start delay",
    ),
    RegisterDefinition(
        name="setpointExternalAdditionalHeaterStart",
        kind=RegisterKind.HOLDING_REGISTER,
        address=75,
        default_value=0,
        scale=1,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Additional heat",
        description="External additional heater start threshold",
    ),
    RegisterDefinition(
        name="setpointExternalAdditionalHeaterStop",
        kind=RegisterKind.HOLDING_REGISTER,
        address=78,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Additional heat",
        description="External additional heater stop threshold",
    ),
    RegisterDefinition(
        name="valueCondenserInTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=8,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Sensors",
        description="Condenser in temperature",
    ),
    RegisterDefinition(
        name="valueCondenserOutTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=9,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Sensors",
        description="Condenser out temperature",
    ),
    RegisterDefinition(
        name="valueHeatpumpBrineInTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=10,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Sensors",
        description="Brine in temperature",
    ),
    RegisterDefinition(
        name="valueHeatpumpBrineOutTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=11,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Sensors",
        description="Brine out temperature",
    ),
    RegisterDefinition(
        name="valueHeatpumpSupplyLineTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=12,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heating",
        subsystem="Sensors",
        description="System supply line temperature",
    ),
    RegisterDefinition(
        name="valueHeatpumpOutdoorTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=13,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Sensors",
        description="Outdoor temperature",
    ),
    RegisterDefinition(
        name="valueHotWaterTopTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=15,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Hot water",
        subsystem="Sensors",
        description="Tap water top temperature",
    ),
    RegisterDefinition(
        name="valueHotWaterLowerTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=16,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Hot water",
        subsystem="Sensors",
        description="Tap water lower temperature",
    ),
    RegisterDefinition(
        name="valueHotWaterWeightedTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=17,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Hot water",
        subsystem="Sensors",
        description="Tap water weighted temperature",
    ),
    RegisterDefinition(
        name="valueHeatpumpSupplyLineSetPoint",
        kind=RegisterKind.INPUT_REGISTER,
        address=18,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heating",
        subsystem="Control",
        description="System supply line set point",
    ),
    RegisterDefinition(
        name="valueHeatpumpCompressorSpeedPercent",
        kind=RegisterKind.INPUT_REGISTER,
        address=35,
        default_value=0,
        scale=1,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Compressor",
        description="Compressor speed, percent",
    ),
    RegisterDefinition(
        name="valueHeatpumpHeatingEffect",
        kind=RegisterKind.INPUT_REGISTER,
        address=304,
        default_value=0,
        scale=100,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Power",
        description="Heating effect, kW",
    ),
)

__all__ = ["THERMIA_REGISTERS"]
