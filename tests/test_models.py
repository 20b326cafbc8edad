import math

import pytest

from libiso import (
    ArithmeticOverflow,
    BrunauerEmmettTeller,
    DubininRadushkevich,
    Elovich,
    ErrorKind,
    FowlerGuggenheim,
    Freundlich,
    FritzSchlunderIV,
    FritzSchlunderV,
    Halsey,
    HarkinJura,
    Henry,
    HillDeBoer,
    IsothermException,
    Jossens,
    Kiselev,
    Langmuir,
    LangmuirFreundlich,
    MacMillanTeller,
    NewtonRaphsonSettings,
    NotConvergenceException,
    RedlichPeterson,
    Sips,
    Temkin,
    TooManyIterations,
    Unilan,
    ValidationError,
    WeberVanVliet,
)


@pytest.mark.parametrize(
    "model, ce, expected",
    [
        (Langmuir(1.432, 2.372e-3), 0.07643, 0.00025956303),
        (Freundlich(10, 15), 0.1, 8.576958986),
        (Freundlich(2.31, 0.8876), 0.172, 0.3179308179),
        (Jossens(0.4897, 1.432, 3), 0.2, 0.09683070742),
        (BrunauerEmmettTeller(0.6, 1.8, 2.4), 0.1, 0.04544179525),
        (LangmuirFreundlich(15.8130, 5.53199, 5.45859), 0.692379, 6.744231250),
        (FritzSchlunderIV(71.3166, 0.357335, 0.779255, 0.669959), 1.36520, 63.11313414),
        (
            FritzSchlunderV(6.05758, 0.217337, 0.0885359, 0.0169304, 0.0746286),
            1.3273,
            19.77715227,
        ),
        (FritzSchlunderV(0.4897, 1.432, 0.2372, 0.7865, 0.05226), 1.6, 0.423087468),
        (HarkinJura(1.432, 0.2372), 1.6, 6.57943567),
        (RedlichPeterson(1.432, 0.2372, 0.4897), 1.6, 1.764378026),
        (Henry(45), 0.2, 9.0),
    ],
)
def test_reference_values(model, ce, expected):
    assert model.qe(ce) == pytest.approx(expected, rel=1e-6)


def test_temkin():
    model = Temkin(10.3, 10)
    assert model.qe(0.1, 132) == pytest.approx(3.244105344, rel=1e-5)


def test_temkin_domain():
    model = Temkin(10.3, 10)
    with pytest.raises(ValidationError) as err:
        model.qe(0.1)
    assert err.value.kind is ErrorKind.BAD_TEMP_LE_ZERO
    with pytest.raises(ValidationError) as err:
        model.qe(0.05, 132)
    assert err.value.kind is ErrorKind.BAD_KCE_K1_LE_ONE


def test_dubinin_radushkevich():
    model = DubininRadushkevich(1.432, 2.372e-7)
    assert model.qe(0.07643, 132) == pytest.approx(0.1940124818, rel=1e-5)
    assert model.qe(0.0, 132) == 0.0

    model.rgas = 4.157231309
    assert model.qe(0.07643, 132) == pytest.approx(0.8687897360, rel=1e-5)


def test_gas_constant_is_validated():
    with pytest.raises(ValidationError) as err:
        DubininRadushkevich(1.432, 2.372e-7, rgas=0.0)
    assert err.value.kind is ErrorKind.BAD_RGAS_LE_ZERO

    model = Temkin(10.3, 10)
    with pytest.raises(ValidationError):
        model.set("rgas", -1.0)
    assert model.rgas == pytest.approx(8.314462618)


def test_constants_do_not_count_as_parameters():
    assert Temkin.parameter_count() == 2
    assert [name for name, _ in Temkin.parameter_info()] == ["k1", "k2"]
    assert Temkin(10.3, 10, rgas=8.0) != Temkin(10.3, 10)


def test_harkin_jura_domain():
    model = HarkinJura(1.432, 0.2372)
    assert model.qe(0.0) == 0.0
    with pytest.raises(ValidationError) as err:
        model.qe(10.0)
    assert err.value.kind is ErrorKind.BAD_LOG_CE_GT_K2


def test_halsey_needs_positive_concentration():
    with pytest.raises(ValidationError) as err:
        Halsey(1.432, 0.2372).qe(0.0)
    assert err.value.kind is ErrorKind.BAD_CE_LE_ZERO


@pytest.mark.parametrize("ce", [2.4, 3.0])
def test_bet_above_saturation(ce):
    with pytest.raises(ValidationError) as err:
        BrunauerEmmettTeller(0.6, 1.8, 2.4).qe(ce)
    assert err.value.kind is ErrorKind.BAD_RESULT


def test_macmillan_teller():
    model = MacMillanTeller(1.0, 2.0, 3.0)
    assert model.qe(0.0) == 0.0
    assert model.qe(1.0) == pytest.approx((2.0 / math.log(3.0)) ** (1 / 3))
    with pytest.raises(ValidationError):
        model.qe(3.0)


def test_overflow():
    with pytest.raises(IsothermException) as err:
        Freundlich(1.0, 0.001).qe(1e10)
    assert err.value.kind is ErrorKind.BAD_OVERFLOW
    assert isinstance(err.value, OverflowError)


@pytest.mark.parametrize(
    "model", [Langmuir(1.0, 10.0), Sips(1.0, 10.0, 1.0), Unilan(1.0, 10.0, 1.0)]
)
def test_non_finite_result(model):
    # k1 * Ce overflows to inf and the ratio becomes nan
    with pytest.raises(ArithmeticOverflow) as err:
        model.qe(1e308)
    assert err.value.kind is ErrorKind.BAD_OVERFLOW
    assert err.value.value == 1e308


def test_redlich_peterson_exponent():
    with pytest.raises(ValidationError) as err:
        RedlichPeterson(1.432, 0.2372, 1.0)
    assert err.value.kind is ErrorKind.BAD_K3_GE_ONE
    with pytest.raises(ValidationError) as err:
        RedlichPeterson(1.432, 0.2372, 0.0)
    assert err.value.kind is ErrorKind.BAD_K3_LE_ZERO


def test_fritz_schlunder_exponents_closed_interval():
    FritzSchlunderV(1.0, 1.0, 1.0, 0.0, 1.0)
    with pytest.raises(ValidationError) as err:
        FritzSchlunderV(1.0, 1.0, 1.0, 1.5, 0.5)
    assert err.value.kind is ErrorKind.BAD_K3_BETWEEN_01
    with pytest.raises(ValidationError) as err:
        FritzSchlunderV(1.0, 1.0, 1.0, 0.5, -0.5)
    assert err.value.kind is ErrorKind.BAD_K4_BETWEEN_01


# ------ implicit models ----------


def test_elovich():
    model = Elovich(1.432, 2.372e-7)
    assert model.qe(0.07643) == pytest.approx(2.596100820e-8, rel=1e-5)
    assert model.qe(0.0) == 0.0


@pytest.mark.parametrize("ce", [0.01, 1.0, 50.0])
def test_elovich_equation(ce):
    model = Elovich(2.0, 3.0)
    theta = model.qe(ce) / model.qmax
    assert theta == pytest.approx(model.k1 * ce * math.exp(-theta), rel=1e-9)


def test_fowler_guggenheim():
    model = FowlerGuggenheim(68.1867, 5.42910, 3.27480)
    assert model.qe(0.0553181, 386.833) == pytest.approx(15.74575511, rel=1e-5)
    assert model.qe(0.0, 386.833) == 0.0


@pytest.mark.parametrize("ce", [1e-3, 0.0553181, 1.0, 100.0])
def test_fowler_guggenheim_equation(ce):
    model = FowlerGuggenheim(68.1867, 5.42910, 3.27480)
    temperature = 386.833
    theta = model.qe(ce, temperature) / model.qmax
    assert 0.0 < theta < 1.0
    rhs = theta / (1 - theta) * math.exp(theta * model.k2 / (model.rgas * temperature))
    assert model.k1 * ce == pytest.approx(rhs, rel=1e-8)


def test_fowler_guggenheim_needs_temperature():
    with pytest.raises(ValidationError) as err:
        FowlerGuggenheim(68.1867, 5.42910, 3.27480).qe(0.1)
    assert err.value.kind is ErrorKind.BAD_TEMP_LE_ZERO


@pytest.mark.parametrize("ce", [1e-3, 0.1, 1.0])
def test_hill_de_boer_equation(ce):
    model = HillDeBoer(10.0, 2.0, 1000.0)
    temperature = 300.0
    theta = model.qe(ce, temperature) / model.qmax
    assert 0.0 < theta < 1.0
    u = theta / (1 - theta)
    rhs = u * math.exp(u - theta * model.k2 / (model.rgas * temperature))
    assert model.k1 * ce == pytest.approx(rhs, rel=1e-8)


@pytest.mark.parametrize("ce", [1e-3, 0.1, 1.0, 10.0])
def test_kiselev_equation(ce):
    model = Kiselev(5.0, 2.0, 3.0)
    theta = model.qe(ce) / model.qmax
    assert 0.0 < theta < 1.0
    rhs = theta / ((1 - theta) * (1 + model.k2 * theta))
    assert model.k1 * ce == pytest.approx(rhs, rel=1e-8)


def test_weber_van_vliet():
    assert WeberVanVliet(1.0, 1.0, 1.0, 1.0).qe(8.0) == pytest.approx(2.0)
    assert WeberVanVliet(1.0, 1.0, 1.0, 1.0).qe(0.0) == 0.0


@pytest.mark.parametrize("ce", [0.1, 2.0, 30.0])
def test_weber_van_vliet_equation(ce):
    model = WeberVanVliet(1.5, 0.5, 0.8, 1.2)
    q = model.qe(ce)
    assert q > 0.0
    k1, k2, k3, k4 = model.values()
    assert ce == pytest.approx(k1 * q ** (k2 * q**k3 + k4), rel=1e-8)


def test_solver_failure_reports_model():
    model = Kiselev(5.0, 2.0, 3.0)
    model.solver_settings = NewtonRaphsonSettings(max_iterations=1, threshold=1e-300)
    with pytest.raises(TooManyIterations) as err:
        model.qe(1.0)
    assert err.value.classname == "Kiselev"
    assert err.value.kind is ErrorKind.NON_CONVERGENCE
    assert 0.0 < err.value.last_value < 1.0


# ------ inverse ----------


def test_inverse_langmuir():
    model = Langmuir(2.0, 0.5)
    assert model.ce(1.0) == pytest.approx(2.0, rel=1e-8)
    assert model.qe(model.ce(0.3)) == pytest.approx(0.3, rel=1e-8)


def test_inverse_henry():
    assert Henry(45).ce(9.0) == pytest.approx(0.2)


def test_inverse_temperature_model():
    model = FowlerGuggenheim(68.1867, 5.42910, 3.27480)
    ce = model.ce(15.74575511, 386.833, guess=0.1)
    assert ce == pytest.approx(0.0553181, rel=1e-5)


def test_inverse_of_zero():
    assert Langmuir(2.0, 0.5).ce(0.0) == 0.0


def test_inverse_negative_target():
    with pytest.raises(ValidationError) as err:
        Langmuir(2.0, 0.5).ce(-1.0)
    assert err.value.kind is ErrorKind.BAD_QE_LT_ZERO


def test_inverse_unreachable_target():
    # Langmuir never exceeds qmax
    with pytest.raises(NotConvergenceException) as err:
        Langmuir(1.0, 1.0).ce(2.0)
    assert err.value.classname == "Langmuir"


def test_concentration_bounds():
    assert Langmuir(2.0, 0.5).concentration_bounds() == (0.0, math.inf)
    assert Temkin(0.5, 10).concentration_bounds() == (2.0, math.inf)
    assert BrunauerEmmettTeller(1.0, 1.0, 10.0).concentration_bounds() == (0.0, 10.0)
    assert MacMillanTeller(1.0, 2.0, 3.0).concentration_bounds() == (0.0, 3.0)
    assert HarkinJura(1.432, 2.0).concentration_bounds() == (0.0, 100.0)


def test_inverse_bet_below_saturation():
    # qe = Ce / (10 - Ce), the first Newton step would jump past K2
    assert BrunauerEmmettTeller(1.0, 1.0, 10.0).ce(99.0) == pytest.approx(9.9, rel=1e-8)


def test_inverse_macmillan_teller():
    model = MacMillanTeller(1.0, 2.0, 3.0)
    assert model.ce(model.qe(2.5)) == pytest.approx(2.5, rel=1e-8)


def test_inverse_harkin_jura():
    model = HarkinJura(1.432, 0.2372)
    assert model.ce(model.qe(1.5)) == pytest.approx(1.5, rel=1e-8)


def test_inverse_temkin():
    model = Temkin(10.3, 10)
    target = model.qe(0.098, 132)
    assert model.ce(target, 132) == pytest.approx(0.098, rel=1e-8)


def test_inverse_temkin_starts_inside_domain():
    # K1 * Ce > 1 needs Ce > 2, the default start 1.0 is moved to 4.0
    model = Temkin(0.5, 10)
    assert model.ce(model.qe(3.0, 300), 300) == pytest.approx(3.0, rel=1e-8)


# Run the tests
if __name__ == "__main__":
    pytest.main()
