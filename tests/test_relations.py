import operator

import numpy as np
import pytest
from pytest import approx

from physq import (
    Acceleration,
    AccelerationUnit,
    Area,
    DynamicKinematicPressure,
    DynamicPressure,
    DynamicViscosity,
    ElectricCharge,
    ElectricCurrent,
    Energy,
    Force,
    Frequency,
    FrequencyUnit,
    GasConstant,
    HeatCapacityRatio,
    HeatFlux,
    IsobaricHeatCapacity,
    IsochoricHeatCapacity,
    KinematicPressureDifference,
    KinematicViscosity,
    Length,
    LinearThermalExpansionCoefficient,
    MachNumber,
    Mass,
    MassDensity,
    MassRate,
    MassRateUnit,
    MassUnit,
    Memory,
    MemoryRate,
    MemoryUnit,
    Power,
    PrandtlNumber,
    PressureDifference,
    Quantity,
    ReynoldsNumber,
    ScalarStrain,
    SoundSpeed,
    SpecificGasConstant,
    SpecificIsobaricHeatCapacity,
    SpecificIsochoricHeatCapacity,
    Speed,
    SpeedUnit,
    StaticKinematicPressure,
    StaticPressure,
    StrainRate,
    TemperatureDifference,
    TemperatureGradient,
    ThermalConductivity,
    ThermalDiffusivity,
    Time,
    TimeUnit,
    TotalKinematicPressure,
    TotalPressure,
    TransportEnergyConsumption,
    Volume,
)
from physq import relations
from physq.relations import Add, Divide, Multiply, Subtract

OPERATIONS = {Multiply: operator.mul, Divide: operator.truediv, Add: operator.add, Subtract: operator.sub}
EXPECTED = {Multiply: 12.0, Divide: 0.75, Add: 7.0, Subtract: -1.0}


class TestScenarios:
    def test_period(self):
        assert Frequency(0.5, FrequencyUnit.Hertz).period() == Time(2.0, TimeUnit.Second)

    def test_acceleration(self):
        acceleration = Speed(8.0, SpeedUnit.MetrePerSecond) / Time(2.0, TimeUnit.Second)
        assert acceleration == Acceleration(4.0, AccelerationUnit.MetrePerSquareSecond)

    def test_mass_rate(self):
        frequency = MassRate(8.0, MassRateUnit.KilogramPerSecond) / Mass(4.0, MassUnit.Kilogram)
        assert frequency == Frequency(2.0, FrequencyUnit.Hertz)


class TestRelationalConstructors:
    def test_speed(self):
        length, time = Length(10.0), Time(4.0)
        speed = Speed(length, time)
        assert speed == Speed(2.5)
        assert Length(speed, time) == length
        assert Time(length, speed) == time
        assert Speed(length, time.frequency()) == Speed(2.5)

    def test_reciprocal(self):
        assert Time(Frequency(4.0)) == Time(0.25)
        assert Frequency(Time(0.5)) == Frequency(2.0)
        assert Time(0.5).frequency() == Frequency(2.0)

    def test_dimensionless(self):
        assert MachNumber(Speed(680.0), SoundSpeed(340.0)) == MachNumber(2.0)
        strain = ScalarStrain(LinearThermalExpansionCoefficient(1.0e-5), TemperatureDifference(100.0))
        assert strain.value == approx(1.0e-3)
        assert StrainRate(strain, Time(2.0)).value == approx(5.0e-4)

    def test_thermodynamics(self):
        ratio = HeatCapacityRatio(IsobaricHeatCapacity(1005.0), IsochoricHeatCapacity(718.0))
        assert ratio.value == approx(1005.0 / 718.0)
        prandtl = PrandtlNumber(KinematicViscosity(1.5e-5), ThermalDiffusivity(2.0e-5))
        assert prandtl.value == approx(0.75)
        gradient = TemperatureGradient(TemperatureDifference(10.0), Length(2.0))
        assert gradient == TemperatureGradient(5.0)
        assert HeatFlux(ThermalConductivity(0.5), gradient) == HeatFlux(2.5)

    def test_unrelated(self):
        with pytest.raises(TypeError):
            Speed(Length(1.0), Mass(1.0))
        with pytest.raises(TypeError):
            Mass(Length(1.0))
        with pytest.raises(TypeError):
            Speed(Length(1.0), Time(1.0), Time(1.0))


class TestOperators:
    def test_kinematics(self):
        assert isinstance(Length(10.0) / Time(2.0), Speed)
        assert Speed(5.0) * Time(2.0) == Length(10.0)
        assert Time(2.0) * Speed(5.0) == Length(10.0)
        assert Length(10.0) * Frequency(0.5) == Speed(5.0)
        assert Speed(5.0) / Length(10.0) == Frequency(0.5)
        assert Acceleration(2.0) * Time(3.0) == Speed(6.0)

    def test_geometry(self):
        assert Length(2.0) * Length(3.0) == Area(6.0)
        assert Area(6.0) * Length(2.0) == Volume(12.0)
        assert Volume(12.0) / Area(6.0) == Length(2.0)
        assert Area(6.0) / Length(3.0) == Length(2.0)

    def test_mechanics(self):
        assert Mass(2.0) * Acceleration(3.0) == Force(6.0)
        assert Force(6.0) / Mass(2.0) == Acceleration(3.0)
        assert StaticPressure(100.0) * Area(2.0) == Force(200.0)
        assert Force(200.0) / Area(2.0) == StaticPressure(100.0)
        assert Force(2.0) * Speed(3.0) == Power(6.0)
        assert MassDensity(1000.0) * Volume(2.0) == Mass(2000.0)
        viscosity = KinematicViscosity(1.0e-6) * MassDensity(1000.0)
        assert isinstance(viscosity, DynamicViscosity)
        assert viscosity.value == approx(1.0e-3)

    def test_work_and_transport_energy(self):
        assert Force(2.0) * Length(3.0) == Energy(6.0)
        assert Energy(6.0) / Force(2.0) == Length(3.0)
        assert Energy(6.0) / Length(3.0) == TransportEnergyConsumption(2.0)
        assert TransportEnergyConsumption(2.0) * Length(3.0) == Energy(6.0)

    def test_rates(self):
        assert Energy(10.0) / Time(2.0) == Power(5.0)
        assert Power(5.0) * Time(2.0) == Energy(10.0)
        assert ElectricCharge(10.0) / Time(2.0) == ElectricCurrent(5.0)
        assert Memory(8.0, MemoryUnit.Byte) / Time(2.0) == MemoryRate(32.0)

    def test_reciprocals(self):
        product = Frequency(2.0) * Time(3.0)
        assert product == approx(6.0)
        assert not isinstance(product, Quantity)
        assert 1.0 / Time(4.0) == Frequency(0.25)
        assert 2.0 / Frequency(4.0) == Time(0.5)

    def test_unrelated(self):
        with pytest.raises(TypeError):
            Length(1.0) * Mass(1.0)
        with pytest.raises(TypeError):
            Mass(1.0) / Length(1.0)
        with pytest.raises(TypeError):
            Speed(1.0) * SoundSpeed(1.0)


class TestIdealGas:
    def test_mayer_relation(self):
        cp, cv = IsobaricHeatCapacity(1005.0), IsochoricHeatCapacity(718.0)
        gas_constant = cp - cv
        assert isinstance(gas_constant, GasConstant)
        assert gas_constant == GasConstant(287.0)
        assert cv + gas_constant == cp
        assert gas_constant + cv == cp
        assert cp - gas_constant == cv
        assert GasConstant(cp, cv) == GasConstant(287.0)
        assert IsochoricHeatCapacity(cp, gas_constant) == cv
        assert IsobaricHeatCapacity(cv, gas_constant) == cp

    def test_specific_mayer_relation(self):
        cp, cv = SpecificIsobaricHeatCapacity(1004.5), SpecificIsochoricHeatCapacity(717.5)
        gas_constant = SpecificGasConstant(cp, cv)
        assert gas_constant == SpecificGasConstant(287.0)
        assert isinstance(cv + gas_constant, SpecificIsobaricHeatCapacity)
        assert cp - gas_constant == cv

    def test_heat_capacity_ratio(self):
        cp, cv, gas_constant = IsobaricHeatCapacity(1005.0), IsochoricHeatCapacity(718.0), GasConstant(287.0)
        assert HeatCapacityRatio(cp, gas_constant).value == approx(1005.0 / 718.0)
        assert HeatCapacityRatio(cv, gas_constant).value == approx(1005.0 / 718.0)
        assert HeatCapacityRatio(gas_constant, cv).value == approx(1005.0 / 718.0)
        specific = HeatCapacityRatio(SpecificIsobaricHeatCapacity(1004.5), SpecificGasConstant(287.0))
        assert specific.value == approx(1.4)

    def test_from_heat_capacity_ratio(self):
        gamma = HeatCapacityRatio(1.4)
        assert GasConstant(gamma, IsochoricHeatCapacity(717.5)).value == approx(287.0)
        assert GasConstant(gamma, IsobaricHeatCapacity(1004.5)).value == approx(287.0)
        assert IsochoricHeatCapacity(GasConstant(287.0), gamma).value == approx(717.5)
        assert IsobaricHeatCapacity(gamma, GasConstant(287.0)).value == approx(1004.5)
        assert SpecificGasConstant(gamma, SpecificIsochoricHeatCapacity(717.5)).value == approx(287.0)

    def test_unrelated(self):
        with pytest.raises(TypeError):
            IsobaricHeatCapacity(1.0) - SpecificIsochoricHeatCapacity(1.0)
        with pytest.raises(TypeError):
            GasConstant(1.0) - IsochoricHeatCapacity(1.0)


class TestPressure:
    def test_total_pressure(self):
        static, dynamic = StaticPressure(101325.0), DynamicPressure(1500.0)
        total = static + dynamic
        assert isinstance(total, TotalPressure)
        assert total == TotalPressure(102825.0)
        assert dynamic + static == total
        assert total - dynamic == static
        assert total - static == dynamic
        assert TotalPressure(static, dynamic) == total
        assert StaticPressure(total, dynamic) == static

    def test_pressure_difference(self):
        high, low = StaticPressure(2.0e5), StaticPressure(1.5e5)
        difference = high - low
        assert isinstance(difference, PressureDifference)
        assert difference == PressureDifference(5.0e4)
        assert low + difference == high
        assert difference + low == high
        assert high - difference == low
        same = low
        low += difference
        assert same is low
        assert low == high

    def test_dynamic_pressure(self):
        dynamic = DynamicPressure(MassDensity(1.25), Speed(40.0))
        assert dynamic == DynamicPressure(1000.0)
        assert Speed(dynamic, MassDensity(1.25)).value == approx(40.0)
        assert MassDensity(dynamic, Speed(40.0)).value == approx(1.25)

    def test_kinematic_pressure(self):
        density = MassDensity(1000.0)
        static = StaticPressure(2.0e5) / density
        assert isinstance(static, StaticKinematicPressure)
        assert static.print() == "200.000000000000000 J/kg"
        dynamic = DynamicKinematicPressure(Speed(10.0))
        assert dynamic == DynamicKinematicPressure(50.0)
        assert Speed(dynamic).value == approx(10.0)
        assert DynamicPressure(5.0e4) / density == dynamic
        total = static + dynamic
        assert isinstance(total, TotalKinematicPressure)
        assert total * density == TotalPressure(2.5e5)
        assert total - static == dynamic
        assert StaticKinematicPressure(300.0) - static == KinematicPressureDifference(100.0)
        assert KinematicPressureDifference(PressureDifference(1000.0), density) == KinematicPressureDifference(1.0)

    def test_not_interchangeable(self):
        with pytest.raises(TypeError):
            StaticPressure(1.0) + TotalPressure(1.0)
        with pytest.raises(TypeError):
            DynamicPressure(1.0) - StaticPressure(1.0)
        with pytest.raises(TypeError):
            TotalPressure(StaticPressure(1.0), StaticPressure(2.0))


class TestReynoldsNumber:
    def test_dynamic_viscosity(self):
        reynolds = ReynoldsNumber(MassDensity(1000.0), Speed(2.0), Length(0.05), DynamicViscosity(1.0e-3))
        assert reynolds.value == approx(1.0e5)

    def test_kinematic_viscosity(self):
        reynolds = ReynoldsNumber(Speed(2.0), Length(0.05), KinematicViscosity(1.0e-6))
        assert reynolds.value == approx(1.0e5)

    def test_operand_order(self):
        with pytest.raises(TypeError):
            ReynoldsNumber(Length(0.05), Speed(2.0), KinematicViscosity(1.0e-6))


class TestFormulaTable:
    def test_every_formula_evaluates(self):
        for formula in relations.formulas():
            left, right = formula.left(3.0), formula.right(4.0)
            result = OPERATIONS[formula.operator](left, right)
            expected = EXPECTED[formula.operator]
            if formula.result is None:
                assert not isinstance(result, Quantity)
                assert result == approx(expected)
            else:
                assert type(result) is formula.result
                assert result.value == approx(expected)

    def test_every_formula_constructs(self):
        for formula in relations.formulas():
            if formula.result is None:
                continue
            resolved = relations.producing(formula.result, formula.left, formula.right)
            assert resolved is not None
            direct = formula.result(formula.left(3.0), formula.right(4.0))
            assert direct.value == approx(EXPECTED[resolved.operator])

    def test_formula_consistency(self):
        for formula in relations.formulas():
            if formula.result is None or formula.operator not in (Divide, Subtract):
                continue
            left, right = formula.left(3.0), formula.right(4.0)
            if formula.operator == Divide:
                # left / right = result implies right * result = left
                assert (right * (left / right)).value == approx(left.value)
            else:
                # left - right = result implies right + result = left
                assert (right + (left - right)).value == approx(left.value)

    def test_every_derivation_evaluates(self):
        for result, operands in relations.derivations():
            arguments = [operand(2.0 + index) for index, operand in enumerate(operands)]
            value = result(*arguments)
            assert type(value) is result
            assert np.isfinite(value.value)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            relations.forward(Speed, Length, Multiply, Time)
        with pytest.raises(ValueError):
            relations.forward(Length, Length, Add, Time)

    def test_conflict(self):
        with pytest.raises(ValueError):
            relations.forward(Force, Energy, Divide, Length)
        with pytest.raises(ValueError):
            relations.forward(TotalPressure, StaticPressure, Subtract, StaticPressure)
        with pytest.raises(ValueError):
            relations.derived(ReynoldsNumber, (Speed, Length, KinematicViscosity), lambda *values: 0.0)

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            relations.forward(Speed, Length, "%", Time)

    def test_idempotent(self):
        formula = relations.forward(Speed, Length, Divide, Time)
        assert formula == relations.lookup(Length, Divide, Time)
        assert str(formula) == "Speed = Length / Time"
        assert str(relations.lookup(StaticPressure, Add, DynamicPressure)) == (
            "TotalPressure = StaticPressure + DynamicPressure"
        )
