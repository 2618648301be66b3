"""RFC 7919 finite-field Diffie-Hellman groups.

The table below is built once at import time and exposed read-only.  Each
entry is keyed by the bit length of its prime modulus; every prime is a safe
prime and the generator is 2.

Reference: https://datatracker.ietf.org/doc/rfc7919/
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..errors import ConfigurationError


@dataclass(frozen=True)
class GroupParameters:
    """Public parameters of one FFDHE group.

    Attributes:
        bit_length: Size of the prime modulus in bits.
        prime: The safe prime modulus *p*.
        generator: Generator used for key derivation and encryption.
        security_level: Estimated symmetric-equivalent security in bits.
    """

    bit_length: int
    prime: int
    generator: int
    security_level: int


# ---------------------------------------------------------------------------
# Decimal expansions of the ffdhe2048 / ffdhe3072 / ffdhe4096 primes.
# ---------------------------------------------------------------------------
FFDHE2048_PRIME = int(
    "3231700607131100730015351347782516336248805713348907517458843413"
    "9269806834136210002792056362640164685458556357935330816928829023"
    "0805734726252735547424612457410262025279165729728627063003252634"
    "2821314576693141422365422094111134862999165747826803423055308634"
    "9050635557712219187890332729569696129743856241741236237225197346"
    "4026918557977679768230146253979330580152268587307611975324364674"
    "7585546071504389684494036613049769781285429595865959756705128385"
    "2132784468522925504568272879113720098931873959143374175837826000"
    "2780349731985520606075332341226032546840881200311059074842810039"
    "94966956119696956248629032338072839127039")

FFDHE3072_PRIME = int(
    "5809605995369958062758586654274580047791722104970656507438869740"
    "0877932949390221797531009001503166024148369605978935312543157560"
    "6570017050794302579472387161906828282257914820765998433172428605"
    "7133800207014820356957933334364535176201393094406964280368146360"
    "3224173972019215566563106962984174143184349293928069288683148317"
    "8433223703856826098871223719666574290035351278840387777656894549"
    "1183287529096888884348887176901995757588549340219807606149955056"
    "8717810461171954534270702545338589647291017542811217873303255065"
    "7492850350133493757919134917890180186645126283156057037978028260"
    "4068262795024384318599710948857446185134652829941527736472860172"
    "3545167338678777808290513461671535943295923392522958719768890698"
    "8596412803859300233684615352214902622998439478163850112531267645"
    "1837144945451331832522946684620954184360294871798125320434686136"
    "2300552132485879356231243386526247862218711299025701199641342820"
    "18641257113252046271726747647")

FFDHE4096_PRIME = int(
    "1044388881413152506673611132423542708364181673367771525125030890"
    "7568810991880245320563047930618693284587230918039729392297936549"
    "8516840149749171757448384422511661821256564989989623806152825569"
    "0984013755361148305106047581812557457571303413897964307070369153"
    "2330349165456090491611176765422524170343061484327348744016820982"
    "0505581306537749541093443577600856946467702102343300543716388075"
    "3068613673525551966829473007537177831003494630326494021352410947"
    "4091552505181313295429471653521640892150195489090743121646476279"
    "3836655023631476086411693408796002107783968838838303390611794093"
    "5023026686459274599124189299486771919466921436930468113859003854"
    "6956744938966085033267766162304122520162377531880051605156724317"
    "0342902692545072222521397289193688055172237442450011725340039160"
    "8019951133386097176734162660461073160502839490488652900367939577"
    "2924470386371562680142229594018112708255137107101131937576538529"
    "3104981018752267096498871845642770627902420140013035102927725787"
    "3323362974483425793829163819060563081096261611614988801585554385"
    "0048307489761811575451216979058985435623309701821510973946002868"
    "1186807251604739440438955570629831176158864913390405112377051676"
    "7707951778179308436153604841663369568605395358405635911568855382"
    "987714763476172799")

GROUPS: Mapping[int, GroupParameters] = MappingProxyType(
    {
        2048: GroupParameters(2048, FFDHE2048_PRIME, 2, 103),
        3072: GroupParameters(3072, FFDHE3072_PRIME, 2, 125),
        4096: GroupParameters(4096, FFDHE4096_PRIME, 2, 150),
    }
)

SUPPORTED_BIT_LENGTHS = tuple(GROUPS)
DEFAULT_BIT_LENGTH = 2048


def get_group(bit_length: int = DEFAULT_BIT_LENGTH) -> GroupParameters:
    """Look up the group parameters for *bit_length*.

    Args:
        bit_length: One of 2048, 3072 or 4096.

    Returns:
        The matching :class:`GroupParameters`.

    Raises:
        ConfigurationError: If no group is defined for *bit_length*.
    """
    try:
        return GROUPS[bit_length]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unsupported bit length {bit_length!r}; "
            f"expected one of {SUPPORTED_BIT_LENGTHS}"
        ) from None
