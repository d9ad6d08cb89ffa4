"""Element identification and nuclear stability data."""

MAX_PROTON_COUNT = 99

# Index 0 is the empty atom.
_SYMBOLS = (
    "",
    "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar", "K", "Ca",
    "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y", "Zr",
    "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn",
    "Sb", "Te", "I", "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd",
    "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb",
    "Lu", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th",
    "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es",
)

_NAMES = (
    "",
    "Hydrogen", "Helium", "Lithium", "Beryllium", "Boron",
    "Carbon", "Nitrogen", "Oxygen", "Fluorine", "Neon",
    "Sodium", "Magnesium", "Aluminum", "Silicon", "Phosphorus",
    "Sulfur", "Chlorine", "Argon", "Potassium", "Calcium",
    "Scandium", "Titanium", "Vanadium", "Chromium", "Manganese",
    "Iron", "Cobalt", "Nickel", "Copper", "Zinc",
    "Gallium", "Germanium", "Arsenic", "Selenium", "Bromine",
    "Krypton", "Rubidium", "Strontium", "Yttrium", "Zirconium",
    "Niobium", "Molybdenum", "Technetium", "Ruthenium", "Rhodium",
    "Palladium", "Silver", "Cadmium", "Indium", "Tin",
    "Antimony", "Tellurium", "Iodine", "Xenon", "Cesium",
    "Barium", "Lanthanum", "Cerium", "Praseodymium", "Neodymium",
    "Promethium", "Samarium", "Europium", "Gadolinium", "Terbium",
    "Dysprosium", "Holmium", "Erbium", "Thulium", "Ytterbium",
    "Lutetium", "Hafnium", "Tantalum", "Tungsten", "Rhenium",
    "Osmium", "Iridium", "Platinum", "Gold", "Mercury",
    "Thallium", "Lead", "Bismuth", "Polonium", "Astatine",
    "Radon", "Francium", "Radium", "Actinium", "Thorium",
    "Protactinium", "Uranium", "Neptunium", "Plutonium", "Americium",
    "Curium", "Berkelium", "Californium", "Einsteinium",
)

# Neutron counts of the stable isotopes, keyed by proton count.
STABLE_NEUTRON_COUNTS: dict[int, tuple[int, ...]] = {
    1: (0, 1),
    2: (1, 2),
    3: (3, 4),
    4: (5,),
    5: (5, 6),
    6: (6, 7),
    7: (7, 8),
    8: (8, 9, 10),
    9: (10,),
    10: (10, 11, 12),
    11: (12,),
    12: (12, 13, 14),
    13: (14,),
    14: (14, 15, 16),
    15: (16,),
    16: (16, 17, 18, 20),
    17: (18, 20),
    18: (18, 20, 22),
    19: (20, 22),
    20: (20, 22, 23, 24, 26),
}

_PROTON_COUNT_BY_SYMBOL = {
    symbol.lower(): index for index, symbol in enumerate(_SYMBOLS) if symbol
}


def _check_proton_count(proton_count: int) -> None:
    if not 0 <= proton_count <= MAX_PROTON_COUNT:
        raise ValueError(
            f"proton_count must be between 0 and {MAX_PROTON_COUNT}: {proton_count}"
        )


def get_symbol(proton_count: int) -> str:
    """Return the chemical symbol for an element, or "" for zero protons."""
    _check_proton_count(proton_count)
    return _SYMBOLS[proton_count]


def get_name(proton_count: int) -> str:
    """Return the English element name, or "" for zero protons."""
    _check_proton_count(proton_count)
    return _NAMES[proton_count]


def get_proton_count(symbol: str) -> int:
    """Look up the atomic number for a chemical symbol (case-insensitive).

    Raises:
        KeyError: If the symbol is not a known element
    """
    try:
        return _PROTON_COUNT_BY_SYMBOL[symbol.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown element symbol: {symbol!r}") from None


def stable_neutron_counts(proton_count: int) -> tuple[int, ...]:
    """Return the neutron counts of stable isotopes, empty if none are tabulated."""
    return STABLE_NEUTRON_COUNTS.get(proton_count, ())


def is_stable(proton_count: int, neutron_count: int) -> bool:
    """Check whether a nucleus is one of the tabulated stable isotopes."""
    return neutron_count in stable_neutron_counts(proton_count)
