"""
Reference White Catalog
=======================

Tristimulus values (Y normalized to 100) of the CIE standard illuminants for
the 2° (CIE 1931) and 10° (CIE 1964) standard observers. These are the only
inputs the XYZ ↔ L*a*b* edges take besides the color itself.

>>> from chromaconv.spaces.reference_white import get_reference_white
>>> get_reference_white("D65", 2)
ReferenceWhite(x=95.04, y=100.0, z=108.88)
"""

from __future__ import annotations
from enum import Enum, IntEnum
from typing import Dict, NamedTuple, Tuple, Union

from ..exceptions import UnsupportedConversion


class ReferenceWhite(NamedTuple):
    x: float
    y: float
    z: float


class Illuminant(str, Enum):
    D50 = "D50"
    D55 = "D55"
    D65 = "D65"
    D75 = "D75"
    A = "A"
    B = "B"
    C = "C"
    E = "E"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"


class Observer(IntEnum):
    TWO_DEGREE = 2
    TEN_DEGREE = 10


#                       2°                              10°
_TABLE: Dict[Illuminant, Tuple[Tuple[float, float, float], Tuple[float, float, float]]] = {
    Illuminant.D50: ((96.42, 100.0, 82.51),   (96.72, 100.0, 81.42)),
    Illuminant.D55: ((95.68, 100.0, 92.14),   (95.79, 100.0, 90.92)),
    Illuminant.D65: ((95.04, 100.0, 108.88),  (94.81, 100.0, 107.30)),
    Illuminant.D75: ((94.97, 100.0, 122.64),  (94.41, 100.0, 120.64)),
    Illuminant.A:   ((109.85, 100.0, 35.58),  (111.14, 100.0, 35.20)),
    Illuminant.B:   ((99.09, 100.0, 85.31),   (99.17, 100.0, 84.349)),
    Illuminant.C:   ((98.07, 100.0, 118.23),  (97.28, 100.0, 116.14)),
    Illuminant.E:   ((100.0, 100.0, 100.0),   (100.0, 100.0, 100.0)),
    Illuminant.F1:  ((92.83, 100.0, 103.66),  (94.79, 100.0, 103.19)),
    Illuminant.F2:  ((99.18, 100.0, 67.39),   (103.28, 100.0, 69.02)),
    Illuminant.F3:  ((103.75, 100.0, 49.86),  (108.96, 100.0, 51.96)),
    Illuminant.F4:  ((109.14, 100.0, 38.81),  (114.96, 100.0, 40.96)),
    Illuminant.F5:  ((90.87, 100.0, 98.72),   (93.36, 100.0, 98.63)),
    Illuminant.F6:  ((97.30, 100.0, 60.19),   (102.14, 100.0, 62.07)),
    Illuminant.F7:  ((95.04, 100.0, 108.75),  (95.79, 100.0, 107.68)),
    Illuminant.F8:  ((96.41, 100.0, 82.33),   (97.11, 100.0, 81.13)),
    Illuminant.F9:  ((100.36, 100.0, 67.86),  (102.11, 100.0, 67.82)),
    Illuminant.F10: ((96.17, 100.0, 81.71),   (99.00, 100.0, 83.13)),
    Illuminant.F11: ((100.96, 100.0, 64.37),  (103.86, 100.0, 65.62)),
    Illuminant.F12: ((108.04, 100.0, 39.22),  (111.42, 100.0, 40.35)),
}

REFERENCE_WHITES: Dict[Tuple[Illuminant, Observer], ReferenceWhite] = {
    (illuminant, observer): ReferenceWhite(*values[index])
    for illuminant, values in _TABLE.items()
    for index, observer in enumerate((Observer.TWO_DEGREE, Observer.TEN_DEGREE))
}


def get_reference_white(
    illuminant: Union[Illuminant, str] = Illuminant.D65,
    observer: Union[Observer, int] = Observer.TWO_DEGREE,
) -> ReferenceWhite:
    """
    Look up a reference white by illuminant code and observer angle.

    Args:
        illuminant: Illuminant code, e.g. ``"D65"`` or ``Illuminant.D65``
        observer: Observer angle in degrees, 2 or 10

    Returns:
        The reference white tristimulus triple.

    Raises:
        UnsupportedConversion: If the illuminant or observer is not catalogued.
    """
    if isinstance(illuminant, str) and not isinstance(illuminant, Illuminant):
        illuminant = illuminant.upper()
    try:
        key = (Illuminant(illuminant), Observer(observer))
    except ValueError as exc:
        raise UnsupportedConversion(
            f"No reference white for illuminant {illuminant!r} / observer {observer!r}"
        ) from exc
    return REFERENCE_WHITES[key]


DEFAULT_REFERENCE_WHITE = REFERENCE_WHITES[(Illuminant.D65, Observer.TWO_DEGREE)]
