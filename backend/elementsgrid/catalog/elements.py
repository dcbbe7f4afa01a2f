"""The 118 elements and their cell in the 10 x 18 periodic table grid.

Columns run 0-17 left to right, rows 0-9 top to bottom. The lanthanides and
actinides sit in rows 8 and 9, below the main body of the table.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    number: int
    symbol: str
    name: str
    column: int
    row: int


ELEMENTS: tuple[CatalogEntry, ...] = (
    CatalogEntry(1, "H", "Hydrogen", column=0, row=0),
    CatalogEntry(2, "He", "Helium", column=17, row=0),
    CatalogEntry(3, "Li", "Lithium", column=0, row=1),
    CatalogEntry(4, "Be", "Beryllium", column=1, row=1),
    CatalogEntry(5, "B", "Boron", column=12, row=1),
    CatalogEntry(6, "C", "Carbon", column=13, row=1),
    CatalogEntry(7, "N", "Nitrogen", column=14, row=1),
    CatalogEntry(8, "O", "Oxygen", column=15, row=1),
    CatalogEntry(9, "F", "Fluorine", column=16, row=1),
    CatalogEntry(10, "Ne", "Neon", column=17, row=1),
    CatalogEntry(11, "Na", "Sodium", column=0, row=2),
    CatalogEntry(12, "Mg", "Magnesium", column=1, row=2),
    CatalogEntry(13, "Al", "Aluminium", column=12, row=2),
    CatalogEntry(14, "Si", "Silicon", column=13, row=2),
    CatalogEntry(15, "P", "Phosphorus", column=14, row=2),
    CatalogEntry(16, "S", "Sulfur", column=15, row=2),
    CatalogEntry(17, "Cl", "Chlorine", column=16, row=2),
    CatalogEntry(18, "Ar", "Argon", column=17, row=2),
    CatalogEntry(19, "K", "Potassium", column=0, row=3),
    CatalogEntry(20, "Ca", "Calcium", column=1, row=3),
    CatalogEntry(21, "Sc", "Scandium", column=2, row=3),
    CatalogEntry(22, "Ti", "Titanium", column=3, row=3),
    CatalogEntry(23, "V", "Vanadium", column=4, row=3),
    CatalogEntry(24, "Cr", "Chromium", column=5, row=3),
    CatalogEntry(25, "Mn", "Manganese", column=6, row=3),
    CatalogEntry(26, "Fe", "Iron", column=7, row=3),
    CatalogEntry(27, "Co", "Cobalt", column=8, row=3),
    CatalogEntry(28, "Ni", "Nickel", column=9, row=3),
    CatalogEntry(29, "Cu", "Copper", column=10, row=3),
    CatalogEntry(30, "Zn", "Zinc", column=11, row=3),
    CatalogEntry(31, "Ga", "Gallium", column=12, row=3),
    CatalogEntry(32, "Ge", "Germanium", column=13, row=3),
    CatalogEntry(33, "As", "Arsenic", column=14, row=3),
    CatalogEntry(34, "Se", "Selenium", column=15, row=3),
    CatalogEntry(35, "Br", "Bromine", column=16, row=3),
    CatalogEntry(36, "Kr", "Krypton", column=17, row=3),
    CatalogEntry(37, "Rb", "Rubidium", column=0, row=4),
    CatalogEntry(38, "Sr", "Strontium", column=1, row=4),
    CatalogEntry(39, "Y", "Yttrium", column=2, row=4),
    CatalogEntry(40, "Zr", "Zirconium", column=3, row=4),
    CatalogEntry(41, "Nb", "Niobium", column=4, row=4),
    CatalogEntry(42, "Mo", "Molybdenum", column=5, row=4),
    CatalogEntry(43, "Tc", "Technetium", column=6, row=4),
    CatalogEntry(44, "Ru", "Ruthenium", column=7, row=4),
    CatalogEntry(45, "Rh", "Rhodium", column=8, row=4),
    CatalogEntry(46, "Pd", "Palladium", column=9, row=4),
    CatalogEntry(47, "Ag", "Silver", column=10, row=4),
    CatalogEntry(48, "Cd", "Cadmium", column=11, row=4),
    CatalogEntry(49, "In", "Indium", column=12, row=4),
    CatalogEntry(50, "Sn", "Tin", column=13, row=4),
    CatalogEntry(51, "Sb", "Antimony", column=14, row=4),
    CatalogEntry(52, "Te", "Tellurium", column=15, row=4),
    CatalogEntry(53, "I", "Iodine", column=16, row=4),
    CatalogEntry(54, "Xe", "Xenon", column=17, row=4),
    CatalogEntry(55, "Cs", "Caesium", column=0, row=5),
    CatalogEntry(56, "Ba", "Barium", column=1, row=5),
    CatalogEntry(57, "La", "Lanthanum", column=2, row=8),
    CatalogEntry(58, "Ce", "Cerium", column=3, row=8),
    CatalogEntry(59, "Pr", "Praseodymium", column=4, row=8),
    CatalogEntry(60, "Nd", "Neodymium", column=5, row=8),
    CatalogEntry(61, "Pm", "Promethium", column=6, row=8),
    CatalogEntry(62, "Sm", "Samarium", column=7, row=8),
    CatalogEntry(63, "Eu", "Europium", column=8, row=8),
    CatalogEntry(64, "Gd", "Gadolinium", column=9, row=8),
    CatalogEntry(65, "Tb", "Terbium", column=10, row=8),
    CatalogEntry(66, "Dy", "Dysprosium", column=11, row=8),
    CatalogEntry(67, "Ho", "Holmium", column=12, row=8),
    CatalogEntry(68, "Er", "Erbium", column=13, row=8),
    CatalogEntry(69, "Tm", "Thulium", column=14, row=8),
    CatalogEntry(70, "Yb", "Ytterbium", column=15, row=8),
    CatalogEntry(71, "Lu", "Lutetium", column=16, row=8),
    CatalogEntry(72, "Hf", "Hafnium", column=3, row=5),
    CatalogEntry(73, "Ta", "Tantalum", column=4, row=5),
    CatalogEntry(74, "W", "Tungsten", column=5, row=5),
    CatalogEntry(75, "Re", "Rhenium", column=6, row=5),
    CatalogEntry(76, "Os", "Osmium", column=7, row=5),
    CatalogEntry(77, "Ir", "Iridium", column=8, row=5),
    CatalogEntry(78, "Pt", "Platinum", column=9, row=5),
    CatalogEntry(79, "Au", "Gold", column=10, row=5),
    CatalogEntry(80, "Hg", "Mercury", column=11, row=5),
    CatalogEntry(81, "Tl", "Thallium", column=12, row=5),
    CatalogEntry(82, "Pb", "Lead", column=13, row=5),
    CatalogEntry(83, "Bi", "Bismuth", column=14, row=5),
    CatalogEntry(84, "Po", "Polonium", column=15, row=5),
    CatalogEntry(85, "At", "Astatine", column=16, row=5),
    CatalogEntry(86, "Rn", "Radon", column=17, row=5),
    CatalogEntry(87, "Fr", "Francium", column=0, row=6),
    CatalogEntry(88, "Ra", "Radium", column=1, row=6),
    CatalogEntry(89, "Ac", "Actinium", column=2, row=9),
    CatalogEntry(90, "Th", "Thorium", column=3, row=9),
    CatalogEntry(91, "Pa", "Protactinium", column=4, row=9),
    CatalogEntry(92, "U", "Uranium", column=5, row=9),
    CatalogEntry(93, "Np", "Neptunium", column=6, row=9),
    CatalogEntry(94, "Pu", "Plutonium", column=7, row=9),
    CatalogEntry(95, "Am", "Americium", column=8, row=9),
    CatalogEntry(96, "Cm", "Curium", column=9, row=9),
    CatalogEntry(97, "Bk", "Berkelium", column=10, row=9),
    CatalogEntry(98, "Cf", "Californium", column=11, row=9),
    CatalogEntry(99, "Es", "Einsteinium", column=12, row=9),
    CatalogEntry(100, "Fm", "Fermium", column=13, row=9),
    CatalogEntry(101, "Md", "Mendelevium", column=14, row=9),
    CatalogEntry(102, "No", "Nobelium", column=15, row=9),
    CatalogEntry(103, "Lr", "Lawrencium", column=16, row=9),
    CatalogEntry(104, "Rf", "Rutherfordium", column=3, row=6),
    CatalogEntry(105, "Db", "Dubnium", column=4, row=6),
    CatalogEntry(106, "Sg", "Seaborgium", column=5, row=6),
    CatalogEntry(107, "Bh", "Bohrium", column=6, row=6),
    CatalogEntry(108, "Hs", "Hassium", column=7, row=6),
    CatalogEntry(109, "Mt", "Meitnerium", column=8, row=6),
    CatalogEntry(110, "Ds", "Darmstadtium", column=9, row=6),
    CatalogEntry(111, "Rg", "Roentgenium", column=10, row=6),
    CatalogEntry(112, "Cn", "Copernicium", column=11, row=6),
    CatalogEntry(113, "Nh", "Nihonium", column=12, row=6),
    CatalogEntry(114, "Fl", "Flerovium", column=13, row=6),
    CatalogEntry(115, "Mc", "Moscovium", column=14, row=6),
    CatalogEntry(116, "Lv", "Livermorium", column=15, row=6),
    CatalogEntry(117, "Ts", "Tennessine", column=16, row=6),
    CatalogEntry(118, "Og", "Oganesson", column=17, row=6),
)
