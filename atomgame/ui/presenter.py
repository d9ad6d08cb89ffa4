"""Plain-text rendering of atoms, challenges and results."""

from ..atom import elements
from ..atom.models import NumberAtom
from ..challenges.answers import AnswerCheck, ElementAnswer, SymbolAnswer
from ..challenges.challenge import Challenge
from ..challenges.types import ChallengeType

# Electron capacity of each shell as drawn in the schematic
SHELL_CAPACITIES = (2, 8, 8, 18)

TITLES = {
    ChallengeType.SCHEMATIC_TO_ELEMENT: "Find the element",
    ChallengeType.COUNTS_TO_ELEMENT: "Find the element",
    ChallengeType.COUNTS_TO_CHARGE: "What is the total charge?",
    ChallengeType.SCHEMATIC_TO_CHARGE: "What is the total charge?",
    ChallengeType.COUNTS_TO_MASS: "What is the mass number?",
    ChallengeType.SCHEMATIC_TO_MASS: "What is the mass number?",
    ChallengeType.SYMBOL_TO_COUNTS: "How many particles?",
    ChallengeType.SYMBOL_TO_SCHEMATIC: "Build the atom",
}


def format_charge(charge: int) -> str:
    """Format a charge the way it is written on a symbol, e.g. 2+ or 1-."""
    if charge == 0:
        return "0"
    return f"{abs(charge)}{'+' if charge > 0 else '-'}"


def format_time(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_counts(atom: NumberAtom) -> str:
    return (
        f"Protons: {atom.proton_count}   "
        f"Neutrons: {atom.neutron_count}   "
        f"Electrons: {atom.electron_count}"
    )


def format_symbol(
    atom: NumberAtom,
    show_proton_count: bool = True,
    show_mass_number: bool = True,
    show_charge: bool = True,
) -> str:
    """Render a chemical symbol on one line, with ? for hidden numbers."""
    mass = str(atom.mass_number) if show_mass_number else "?"
    protons = str(atom.proton_count) if show_proton_count else "?"
    charge = format_charge(atom.charge) if show_charge else "?"
    symbol = elements.get_symbol(atom.proton_count) if show_proton_count else "?"
    return f"mass {mass} | {symbol} | charge {charge} | atomic number {protons}"


def electron_shells(electron_count: int) -> list[int]:
    """Split electrons into shells, innermost first."""
    shells = []
    remaining = electron_count
    for capacity in SHELL_CAPACITIES:
        if remaining <= 0:
            break
        shells.append(min(capacity, remaining))
        remaining -= capacity
    if remaining > 0:
        shells.append(remaining)
    return shells


def format_schematic(atom: NumberAtom) -> str:
    """Text schematic: protons as +, neutrons as o, electrons per shell."""
    nucleus = "+" * atom.proton_count + "o" * atom.neutron_count
    shells = " ".join("(" + "-" * count + ")" for count in electron_shells(atom.electron_count))
    return f"nucleus [{nucleus}]  shells {shells or '(none)'}"


def challenge_title(challenge_type: ChallengeType) -> str:
    if challenge_type.is_symbol_entry:
        return "Complete the symbol"
    return TITLES[challenge_type]


def challenge_prompt(challenge: Challenge) -> str:
    """What the player is shown for a challenge."""
    challenge_type = challenge.challenge_type
    atom = challenge.answer_atom

    if challenge_type in (ChallengeType.SYMBOL_TO_COUNTS, ChallengeType.SYMBOL_TO_SCHEMATIC):
        shown = format_symbol(atom)
    elif challenge_type.value.startswith("schematic-"):
        shown = format_schematic(atom)
    else:
        shown = format_counts(atom)

    if challenge_type.is_symbol_entry:
        template = format_symbol(
            atom,
            show_proton_count=not challenge_type.configurable_proton_count,
            show_mass_number=not challenge_type.configurable_mass_number,
            show_charge=not challenge_type.configurable_charge,
        )
        shown = f"{shown}\nSymbol: {template}"
    return shown


def answer_hint(challenge_type: ChallengeType) -> str:
    """How to type an answer for this challenge type."""
    if challenge_type.is_to_element:
        return "Type the element symbol (or atomic number) and neutral/ion, e.g. 'C neutral'"
    if challenge_type.asks_for_charge:
        return "Type the charge, e.g. 2+ or -1"
    if challenge_type.asks_for_mass:
        return "Type the mass number"
    if challenge_type.is_symbol_entry:
        fields = []
        if challenge_type.configurable_proton_count:
            fields.append("atomic number")
        if challenge_type.configurable_mass_number:
            fields.append("mass number")
        if challenge_type.configurable_charge:
            fields.append("charge")
        if len(fields) == 3:
            return "Type atomic number, mass number and charge, e.g. '6 12 0'"
        return f"Type the {fields[0]}"
    return "Type protons, neutrons and electrons, e.g. '6 6 6'"


def describe_submission(submission) -> str:
    if isinstance(submission, ElementAnswer):
        name = elements.get_name(submission.atom.proton_count)
        if submission.neutral_or_ion is None:
            return name
        return f"{name}, {submission.neutral_or_ion.value}"
    if isinstance(submission, SymbolAnswer):
        return format_symbol(submission.to_atom())
    return format_counts(submission)


def describe_result(result: AnswerCheck) -> str:
    """Feedback line for an evaluated answer."""
    if result.is_correct:
        return "Correct!"
    if result.charge_mismatch:
        return (
            f"Not quite: you said {result.submitted_charge.value}, "
            f"but it is {'a neutral atom' if result.correct_charge.value == 'neutral' else 'an ion'}."
        )
    return "Not quite."


def describe_correct_answer(challenge: Challenge) -> str:
    return f"The answer is: {describe_submission(challenge.correct_submission())}"
