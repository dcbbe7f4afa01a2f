"""Conventional atomic weights as published by IUPAC.

Values lifted from https://en.wikipedia.org/wiki/List_of_chemical_elements.
"""

from __future__ import annotations

ATOMIC_WEIGHTS: dict[str, str] = {
    "H": "1.008 u(±)",
    "He": "4.002602(2) u(±)",
    "Li": "6.94 u(±)",
    "Be": "9.0121831(5) u(±)",
    "B": "10.81 u(±)",
    "C": "12.011 u(±)",
    "N": "14.007 u(±)",
    "O": "15.999 u(±)",
    "F": "18.998403163(6) u(±)",
    "Ne": "20.1797(6) u(±)",
    "Na": "22.98976928(2) u(±)",
    "Mg": "24.305 u(±)",
    "Al": "26.9815384(3) u(±)",
    "Si": "28.085 u(±)",
    "P": "30.973761998(5) u(±)",
    "S": "32.06 u(±)",
    "Cl": "35.45 u(±)",
    "Ar": "39.948 u(±)",
    "K": "39.0983(1) u(±)",
    "Ca": "40.078(4) u(±)",
    "Sc": "44.955908(5) u(±)",
    "Ti": "47.867(1) u(±)",
    "V": "50.9415(1) u(±)",
    "Cr": "51.9961(6) u(±)",
    "Mn": "54.938043(2) u(±)",
    "Fe": "55.845(2) u(±)",
    "Co": "58.933194(3) u(±)",
    "Ni": "58.6934(4) u(±)",
    "Cu": "63.546(3) u(±)",
    "Zn": "65.38(2) u(±)",
    "Ga": "69.723(1) u(±)",
    "Ge": "72.630(8) u(±)",
    "As": "74.921595(6) u(±)",
    "Se": "78.971(8) u(±)",
    "Br": "79.904 u(±)",
    "Kr": "83.798(2) u(±)",
    "Rb": "85.4678(3) u(±)",
    "Sr": "87.62(1) u(±)",
    "Y": "88.90584(1) u(±)",
    "Zr": "91.224(2) u(±)",
    "Nb": "92.90637(1) u(±)",
    "Mo": "95.95(1) u(±)",
    "Ru": "101.07(2) u(±)",
    "Rh": "102.90549(2) u(±)",
    "Pd": "106.42(1) u(±)",
    "Ag": "107.8682(2) u(±)",
    "Cd": "112.414(4) u(±)",
    "In": "114.818(1) u(±)",
    "Sn": "118.710(7) u(±)",
    "Sb": "121.760(1) u(±)",
    "Te": "127.60(3) u(±)",
    "I": "126.90447(3) u(±)",
    "Xe": "131.293(6) u(±)",
    "Cs": "132.90545196(6) u(±)",
    "Ba": "137.327(7) u(±)",
    "La": "138.90547(7) u(±)",
    "Ce": "140.116(1) u(±)",
    "Pr": "140.90766(1) u(±)",
    "Nd": "144.242(3) u(±)",
    "Sm": "150.36(2) u(±)",
    "Eu": "151.964(1) u(±)",
    "Gd": "157.25(3) u(±)",
    "Tb": "158.925354(8) u(±)",
    "Dy": "162.500(1) u(±)",
    "Ho": "164.930328(7) u(±)",
    "Er": "167.259(3) u(±)",
    "Tm": "168.934218(6) u(±)",
    "Yb": "173.045(10) u(±)",
    "Lu": "174.9668(1) u(±)",
    "Hf": "178.49(2) u(±)",
    "Ta": "180.94788(2) u(±)",
    "W": "183.84(1) u(±)",
    "Re": "186.207(1) u(±)",
    "Os": "190.23(3) u(±)",
    "Ir": "192.217(2) u(±)",
    "Pt": "195.084(9) u(±)",
    "Au": "196.966570(4) u(±)",
    "Hg": "200.592(3) u(±)",
    "Tl": "204.38 u(±)",
    "Pb": "207.2(1) u(±)",
    "Bi": "208.98040(1) u(±)",
    "Th": "232.0377(4) u(±)",
    "Pa": "231.03588(1) u(±)",
    "U": "238.02891(3) u(±)",
    # No atomic weight for unstable elements; mass number of the most
    # stable isotope instead.
    "Tc": "[98] (mass number)",
    "Pm": "[145] (mass number)",
    "Po": "[209] (mass number)",
    "At": "[210] (mass number)",
    "Rn": "[222] (mass number)",
    "Fr": "[223] (mass number)",
    "Ra": "[226] (mass number)",
    "Ac": "[227] (mass number)",
    "Np": "[237] (mass number)",
    "Pu": "[244] (mass number)",
    "Am": "[243] (mass number)",
    "Cm": "[247] (mass number)",
    "Bk": "[247] (mass number)",
    "Cf": "[251] (mass number)",
    "Es": "[252] (mass number)",
    "Fm": "[257] (mass number)",
    "Md": "[258] (mass number)",
    "No": "[259] (mass number)",
    "Lr": "[266] (mass number)",
    "Rf": "[267] (mass number)",
    "Db": "[268] (mass number)",
    "Sg": "[269] (mass number)",
    "Bh": "[270] (mass number)",
    "Hs": "[270] (mass number)",
    "Mt": "[278] (mass number)",
    "Ds": "[281] (mass number)",
    "Rg": "[282] (mass number)",
    "Cn": "[285] (mass number)",
    "Nh": "[286] (mass number)",
    "Fl": "[289] (mass number)",
    "Mc": "[290] (mass number)",
    "Lv": "[293] (mass number)",
    "Ts": "[294] (mass number)",
    "Og": "[294] (mass number)",
}
