"""Pydantic model for an atom described by particle counts."""

from pydantic import BaseModel, ConfigDict, Field


class NumberAtom(BaseModel):
    """An atomic configuration described by its proton, neutron and electron counts."""

    model_config = ConfigDict(frozen=True)

    proton_count: int = Field(default=0, ge=0, description="Number of protons")
    neutron_count: int = Field(default=0, ge=0, description="Number of neutrons")
    electron_count: int = Field(default=0, ge=0, description="Number of electrons")

    @property
    def mass_number(self) -> int:
        """Total number of nucleons."""
        return self.proton_count + self.neutron_count

    @property
    def charge(self) -> int:
        """Net charge in elementary charge units."""
        return self.proton_count - self.electron_count

    @property
    def is_neutral(self) -> bool:
        return self.charge == 0

    def is_equivalent(self, other: "NumberAtom") -> bool:
        """Check whether all three particle counts match."""
        return (
            self.proton_count == other.proton_count
            and self.neutron_count == other.neutron_count
            and self.electron_count == other.electron_count
        )

    @classmethod
    def from_symbol_values(
        cls,
        proton_count: int,
        mass_number: int,
        charge: int,
    ) -> "NumberAtom":
        """Create an atom from the numbers shown in a chemical symbol.

        Args:
            proton_count: Atomic number (lower left of the symbol)
            mass_number: Mass number (upper left of the symbol)
            charge: Net charge (upper right of the symbol)

        Returns:
            The equivalent NumberAtom
        """
        return cls(
            proton_count=proton_count,
            neutron_count=mass_number - proton_count,
            electron_count=proton_count - charge,
        )

    def __str__(self) -> str:
        return f"{self.proton_count}p {self.neutron_count}n {self.electron_count}e"
