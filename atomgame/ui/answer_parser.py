"""Parse typed answers into challenge submissions."""

import re
from typing import Union

from pydantic import ValidationError

from ..atom import elements
from ..atom.models import NumberAtom
from ..challenges.answers import (
    ElementAnswer,
    NeutralOrIon,
    SymbolAnswer,
    counts_for_charge,
    counts_for_mass_number,
    element_answer_for,
)
from ..challenges.challenge import Challenge

Submission = Union[NumberAtom, ElementAnswer, SymbolAnswer]

_TRAILING_SIGN = re.compile(r"^(\d+)([+-])$")


class AnswerParseError(ValueError):
    """Raised when typed text cannot be turned into an answer."""


def parse_int(token: str) -> int:
    """Parse an integer, accepting charge notation such as 2+ or 3-."""
    token = token.strip()
    match = _TRAILING_SIGN.match(token)
    if match:
        token = match.group(2) + match.group(1)
    try:
        return int(token)
    except ValueError:
        raise AnswerParseError(f"Not a number: {token!r}") from None


def parse_element(token: str) -> int:
    """Parse an element given by symbol or atomic number."""
    if token.lstrip("+-").isdigit():
        proton_count = parse_int(token)
        if not 1 <= proton_count <= elements.MAX_PROTON_COUNT:
            raise AnswerParseError(f"No element has atomic number {proton_count}")
        return proton_count
    try:
        return elements.get_proton_count(token)
    except KeyError:
        raise AnswerParseError(f"Unknown element: {token!r}") from None


def parse_answer(challenge: Challenge, text: str) -> Submission:
    """Turn the text typed for a challenge into a submission.

    Args:
        challenge: The challenge being answered
        text: What the player typed

    Returns:
        A submission in the shape the challenge type expects

    Raises:
        AnswerParseError: If the text does not fit the expected format
    """
    tokens = text.replace(",", " ").split()
    if not tokens:
        raise AnswerParseError("Enter an answer first")

    challenge_type = challenge.challenge_type
    try:
        if challenge_type.is_to_element:
            return _parse_to_element(challenge, tokens)
        if challenge_type.is_symbol_entry:
            return _parse_symbol(challenge, tokens)
        return _parse_counts(challenge, tokens)
    except ValidationError as e:
        raise AnswerParseError(f"Not a possible atom: {e.errors()[0]['msg']}") from None


def _parse_to_element(challenge: Challenge, tokens: list[str]) -> ElementAnswer:
    if len(tokens) != 2:
        raise AnswerParseError("Expected an element and 'neutral' or 'ion', e.g. 'C neutral'")
    proton_count = parse_element(tokens[0])
    try:
        neutral_or_ion = NeutralOrIon(tokens[1].lower())
    except ValueError:
        raise AnswerParseError(f"Expected 'neutral' or 'ion', got {tokens[1]!r}") from None
    return element_answer_for(challenge.answer_atom, proton_count, neutral_or_ion)


def _parse_counts(challenge: Challenge, tokens: list[str]) -> NumberAtom:
    challenge_type = challenge.challenge_type
    values = [parse_int(token) for token in tokens]
    if len(values) == 3:
        protons, neutrons, electrons = values
        return NumberAtom(proton_count=protons, neutron_count=neutrons, electron_count=electrons)
    if len(values) == 1 and challenge_type.asks_for_charge:
        return counts_for_charge(challenge.answer_atom, values[0])
    if len(values) == 1 and challenge_type.asks_for_mass:
        return counts_for_mass_number(challenge.answer_atom, values[0])
    raise AnswerParseError("Expected protons, neutrons and electrons")


def _parse_symbol(challenge: Challenge, tokens: list[str]) -> SymbolAnswer:
    challenge_type = challenge.challenge_type
    values = [parse_int(token) for token in tokens]
    if len(values) == 3:
        proton_count, mass_number, charge = values
        return SymbolAnswer(proton_count=proton_count, mass_number=mass_number, charge=charge)
    if len(values) != 1:
        raise AnswerParseError("Expected one number, or atomic number, mass number and charge")

    # Fields that are not configurable show the answer's values
    configurable = [
        name
        for name, enabled in (
            ("proton_count", challenge_type.configurable_proton_count),
            ("mass_number", challenge_type.configurable_mass_number),
            ("charge", challenge_type.configurable_charge),
        )
        if enabled
    ]
    if len(configurable) != 1:
        raise AnswerParseError("Expected atomic number, mass number and charge")
    fields = SymbolAnswer.from_atom(challenge.answer_atom).model_dump()
    fields[configurable[0]] = values[0]
    return SymbolAnswer(**fields)
