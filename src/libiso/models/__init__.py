from .one_parameter import Henry  # noqa: F401
from .two_parameters import (  # noqa: F401
    DubininRadushkevich,
    Elovich,
    Freundlich,
    Halsey,
    HarkinJura,
    Jovanovic,
    Langmuir,
    Temkin,
)
from .three_parameters import (  # noqa: F401
    BrouersSotolongo,
    BrunauerEmmettTeller,
    FowlerGuggenheim,
    FritzSchlunderIII,
    Hill,
    HillDeBoer,
    HollKrich,
    Jossens,
    Khan,
    Kiselev,
    KobleCorrigan,
    LangmuirFreundlich,
    MacMillanTeller,
    RadkePrausnitzI,
    RadkePrausnitzIII,
    RedlichPeterson,
    Sips,
    Toth,
    Unilan,
    ValenzuelaMyers,
    ViethSladek,
)
from .four_parameters import (  # noqa: F401
    Baudu,
    FritzSchlunderIV,
    MarczewskiJaroniec,
    WeberVanVliet,
)
from .five_parameters import FritzSchlunderV  # noqa: F401

__all__ = [
    "Henry",
    "Langmuir",
    "Freundlich",
    "Temkin",
    "DubininRadushkevich",
    "HarkinJura",
    "Jovanovic",
    "Halsey",
    "Elovich",
    "Sips",
    "Toth",
    "Hill",
    "HillDeBoer",
    "FowlerGuggenheim",
    "Kiselev",
    "Khan",
    "Jossens",
    "KobleCorrigan",
    "HollKrich",
    "LangmuirFreundlich",
    "BrouersSotolongo",
    "BrunauerEmmettTeller",
    "MacMillanTeller",
    "RadkePrausnitzI",
    "RadkePrausnitzIII",
    "RedlichPeterson",
    "Unilan",
    "ValenzuelaMyers",
    "ViethSladek",
    "FritzSchlunderIII",
    "FritzSchlunderIV",
    "MarczewskiJaroniec",
    "Baudu",
    "WeberVanVliet",
    "FritzSchlunderV",
]
