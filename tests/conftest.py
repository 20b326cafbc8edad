import pytest

from libiso import available_isotherms, get_isotherm

# valid parameters for every registered model
SAMPLE_PARAMETERS = {
    "Henry": (45.0,),
    "Langmuir": (1.432, 2.372e-3),
    "Freundlich": (2.31, 0.8876),
    "Temkin": (10.3, 10.0),
    "DubininRadushkevich": (1.432, 2.372e-7),
    "HarkinJura": (1.432, 0.2372),
    "Jovanovic": (1.432, 0.2372),
    "Halsey": (1.432, 0.2372),
    "Elovich": (1.432, 0.2372),
    "Sips": (1.0, 2.0, 3.0),
    "Toth": (1.0, 2.0, 3.0),
    "Hill": (1.0, 2.0, 3.0),
    "HillDeBoer": (68.1867, 5.42910, 3.27480),
    "FowlerGuggenheim": (68.1867, 5.42910, 3.27480),
    "Kiselev": (1.0, 2.0, 3.0),
    "Khan": (1.0, 2.0, 3.0),
    "Jossens": (0.4897, 1.432, 3.0),
    "KobleCorrigan": (1.0, 2.0, 3.0),
    "HollKrich": (1.0, 2.0, 3.0),
    "LangmuirFreundlich": (15.8130, 5.53199, 5.45859),
    "BrouersSotolongo": (1.0, 2.0, 3.0),
    "BrunauerEmmettTeller": (0.6, 1.8, 2.4),
    "MacMillanTeller": (1.0, 2.0, 3.0),
    "RadkePrausnitzI": (1.0, 2.0, 3.0),
    "RadkePrausnitzIII": (1.0, 2.0, 3.0),
    "RedlichPeterson": (1.432, 0.2372, 0.4897),
    "Unilan": (1.0, 2.0, 3.0),
    "ValenzuelaMyers": (1.0, 2.0, 3.0),
    "ViethSladek": (1.0, 2.0, 3.0),
    "FritzSchlunderIII": (1.0, 2.0, 3.0),
    "FritzSchlunderIV": (71.3166, 0.357335, 0.779255, 0.669959),
    "MarczewskiJaroniec": (1.0, 2.0, 1.5, 0.5),
    "Baudu": (1.0, 2.0, 0.5, 0.5),
    "WeberVanVliet": (1.0, 1.0, 1.0, 1.0),
    "FritzSchlunderV": (6.05758, 0.217337, 0.0885359, 0.0169304, 0.0746286),
}

SAMPLE_CE = 0.1
SAMPLE_TEMPERATURE = 300.0


@pytest.fixture(params=available_isotherms())
def model_name(request):
    return request.param


@pytest.fixture
def model_class(model_name):
    return get_isotherm(model_name)


@pytest.fixture
def model(model_class, model_name):
    return model_class(*SAMPLE_PARAMETERS[model_name])
