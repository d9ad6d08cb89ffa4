"""Submitted answer shapes and the result of checking them."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..atom.models import NumberAtom


class NeutralOrIon(str, Enum):
    """The player's classification of an atom's charge."""

    NEUTRAL = "neutral"
    ION = "ion"

    @classmethod
    def for_charge(cls, charge: int) -> "NeutralOrIon":
        return cls.NEUTRAL if charge == 0 else cls.ION


class ElementAnswer(BaseModel):
    """An element picked on the periodic table, optionally classified as neutral or ion."""

    model_config = ConfigDict(frozen=True)

    atom: NumberAtom
    neutral_or_ion: Optional[NeutralOrIon] = Field(
        default=None, description="None when no classification was asked for"
    )


class SymbolAnswer(BaseModel):
    """The numbers entered around a chemical symbol."""

    model_config = ConfigDict(frozen=True)

    proton_count: int = Field(ge=0, description="Atomic number")
    mass_number: int = Field(ge=0, description="Protons plus neutrons")
    charge: int = Field(description="Net charge")

    @model_validator(mode="after")
    def _check_describes_atom(self) -> "SymbolAnswer":
        if self.mass_number < self.proton_count:
            raise ValueError(
                f"mass_number {self.mass_number} is less than proton_count {self.proton_count}"
            )
        if self.charge > self.proton_count:
            raise ValueError(
                f"charge {self.charge} would need a negative electron count"
            )
        return self

    def to_atom(self) -> NumberAtom:
        return NumberAtom.from_symbol_values(self.proton_count, self.mass_number, self.charge)

    @classmethod
    def from_atom(cls, atom: NumberAtom) -> "SymbolAnswer":
        return cls(
            proton_count=atom.proton_count,
            mass_number=atom.mass_number,
            charge=atom.charge,
        )


class AnswerCheck(BaseModel):
    """Result of evaluating one submitted answer."""

    model_config = ConfigDict(frozen=True)

    is_correct: bool
    submitted_atom: NumberAtom
    correct_charge: Optional[NeutralOrIon] = None
    submitted_charge: Optional[NeutralOrIon] = None

    @property
    def charge_mismatch(self) -> bool:
        """Whether the neutral/ion classification was wrong."""
        return (
            self.correct_charge is not None
            and self.submitted_charge is not None
            and self.correct_charge != self.submitted_charge
        )


def counts_for_charge(answer_atom: NumberAtom, charge: int) -> NumberAtom:
    """Build a counts submission from an entered charge.

    Protons and neutrons are taken from the answer, as they are shown to
    the player; the electron count follows from the entered charge.
    """
    return NumberAtom(
        proton_count=answer_atom.proton_count,
        neutron_count=answer_atom.neutron_count,
        electron_count=answer_atom.proton_count - charge,
    )


def counts_for_mass_number(answer_atom: NumberAtom, mass_number: int) -> NumberAtom:
    """Build a counts submission from an entered mass number."""
    return NumberAtom(
        proton_count=answer_atom.proton_count,
        neutron_count=mass_number - answer_atom.proton_count,
        electron_count=answer_atom.electron_count,
    )


def element_answer_for(
    answer_atom: NumberAtom,
    proton_count: int,
    neutral_or_ion: Optional[NeutralOrIon],
) -> ElementAnswer:
    """Build a periodic-table submission for a picked element.

    The neutron count shown in the challenge is carried over so that only
    the element choice and the classification are being judged.
    """
    atom = NumberAtom(
        proton_count=proton_count,
        neutron_count=answer_atom.neutron_count,
        electron_count=proton_count,
    )
    return ElementAnswer(atom=atom, neutral_or_ion=neutral_or_ion)
