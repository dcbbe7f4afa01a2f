"""Element categories by metallic classification, with app display colors."""

from __future__ import annotations

import enum


class Category(enum.Enum):
    ALKALI_METAL = "Alkali Metal"
    ALKALINE_EARTH_METAL = "Alkaline Earth Metal"
    LANTHANIDE = "Lanthanide"
    ACTINIDE = "Actinide"
    TRANSITION_METAL = "Transition Metal"
    POST_TRANSITION_METAL = "Post-transition Metal"
    METALLOID = "Metalloid"
    REACTIVE_NONMETAL = "Reactive Nonmetal"
    NOBLE_GAS = "Noble Gas"
    UNKNOWN = "Unknown chemical properties"

    @property
    def label(self) -> str:
        return self.value


CATEGORY_MEMBERS: dict[Category, tuple[str, ...]] = {
    Category.ALKALI_METAL: ("Li", "Na", "K", "Rb", "Cs", "Fr"),
    Category.ALKALINE_EARTH_METAL: ("Be", "Mg", "Ca", "Sr", "Ba", "Ra"),
    Category.LANTHANIDE: (
        "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd",
        "Tb", "Dy", "Ho", "Er", "Tm", "Yb", "Lu",
    ),
    Category.ACTINIDE: (
        "Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm",
        "Bk", "Cf", "Es", "Fm", "Md", "No", "Lr",
    ),
    Category.TRANSITION_METAL: (
        "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni",
        "Cu", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh",
        "Pd", "Ag", "Hf", "Ta", "W", "Re", "Os", "Ir",
        "Pt", "Au", "Rf", "Db", "Sg", "Bh", "Hs",
    ),
    Category.POST_TRANSITION_METAL: (
        "Al", "Zn", "Ga", "Cd", "In", "Sn", "Hg", "Tl", "Pb", "Bi", "Po", "Cn",
    ),
    Category.METALLOID: ("B", "Si", "Ge", "As", "Sb", "Te", "At"),
    Category.REACTIVE_NONMETAL: ("H", "C", "N", "O", "F", "P", "S", "Cl", "Se", "Br", "I"),
    Category.NOBLE_GAS: ("He", "Ne", "Ar", "Kr", "Xe", "Rn"),
    Category.UNKNOWN: ("Mt", "Ds", "Rg", "Nh", "Fl", "Mc", "Lv", "Ts", "Og"),
}

# Packed ARGB gradient pairs, one per category
CATEGORY_COLORS: dict[Category, tuple[int, int]] = {
    Category.ALKALI_METAL: (0xFFD32F2F, 0xFFFF77A9),
    Category.ALKALINE_EARTH_METAL: (0xFFF46B45, 0xFFEEA849),
    Category.LANTHANIDE: (0xFF8BC34A, 0xFFD4E157),
    Category.ACTINIDE: (0xFF0ED2F7, 0xFFB2FEFA),
    Category.TRANSITION_METAL: (0xFFFFCA28, 0xFFFFF263),
    Category.POST_TRANSITION_METAL: (0xFF11998E, 0xFF38EF7D),
    Category.METALLOID: (0xFF0072FF, 0xFF00C6FF),
    Category.REACTIVE_NONMETAL: (0xFF536DFE, 0xFF8E99F3),
    Category.NOBLE_GAS: (0xFF9796F0, 0xFFFBC7D4),
    Category.UNKNOWN: (0xFF757F9A, 0xFFD7DDE8),
}
