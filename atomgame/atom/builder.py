"""Free-play atom builder."""

import logging

from . import elements
from .models import NumberAtom

logger = logging.getLogger(__name__)

# Particles available in the buckets
MAX_PROTONS = 10
MAX_NEUTRONS = 13
MAX_ELECTRONS = 10


class AtomBuilder:
    """A mutable atom the player assembles one particle at a time.

    Counts are bounded by the number of particles in each bucket. Use
    ``snapshot()`` to get an immutable NumberAtom of the current build.
    """

    def __init__(
        self,
        max_protons: int = MAX_PROTONS,
        max_neutrons: int = MAX_NEUTRONS,
        max_electrons: int = MAX_ELECTRONS,
    ):
        """Initialize an empty builder.

        Args:
            max_protons: Protons available in the proton bucket
            max_neutrons: Neutrons available in the neutron bucket
            max_electrons: Electrons available in the electron bucket
        """
        self.max_protons = max_protons
        self.max_neutrons = max_neutrons
        self.max_electrons = max_electrons
        self.proton_count = 0
        self.neutron_count = 0
        self.electron_count = 0

    def add_proton(self) -> bool:
        if self.proton_count >= self.max_protons:
            return False
        self.proton_count += 1
        return True

    def add_neutron(self) -> bool:
        if self.neutron_count >= self.max_neutrons:
            return False
        self.neutron_count += 1
        return True

    def add_electron(self) -> bool:
        if self.electron_count >= self.max_electrons:
            return False
        self.electron_count += 1
        return True

    def remove_proton(self) -> bool:
        if self.proton_count == 0:
            return False
        self.proton_count -= 1
        return True

    def remove_neutron(self) -> bool:
        if self.neutron_count == 0:
            return False
        self.neutron_count -= 1
        return True

    def remove_electron(self) -> bool:
        if self.electron_count == 0:
            return False
        self.electron_count -= 1
        return True

    def set_counts(self, proton_count: int, neutron_count: int, electron_count: int) -> None:
        """Replace the whole build at once.

        Raises:
            ValueError: If a count is negative or exceeds its bucket
        """
        limits = (
            ("proton_count", proton_count, self.max_protons),
            ("neutron_count", neutron_count, self.max_neutrons),
            ("electron_count", electron_count, self.max_electrons),
        )
        for name, value, limit in limits:
            if not 0 <= value <= limit:
                raise ValueError(f"{name} must be between 0 and {limit}: {value}")
        self.proton_count = proton_count
        self.neutron_count = neutron_count
        self.electron_count = electron_count
        logger.debug("Atom set to %dp %dn %de", proton_count, neutron_count, electron_count)

    def reset(self) -> None:
        """Return every particle to its bucket."""
        self.proton_count = 0
        self.neutron_count = 0
        self.electron_count = 0

    def snapshot(self) -> NumberAtom:
        return NumberAtom(
            proton_count=self.proton_count,
            neutron_count=self.neutron_count,
            electron_count=self.electron_count,
        )

    @property
    def mass_number(self) -> int:
        return self.proton_count + self.neutron_count

    @property
    def charge(self) -> int:
        return self.proton_count - self.electron_count

    @property
    def is_neutral(self) -> bool:
        return self.charge == 0

    @property
    def element_symbol(self) -> str:
        return elements.get_symbol(self.proton_count)

    @property
    def element_name(self) -> str:
        return elements.get_name(self.proton_count)

    @property
    def is_stable(self) -> bool:
        """Whether the nucleus is stable; an empty nucleus counts as stable."""
        if self.mass_number == 0:
            return True
        return elements.is_stable(self.proton_count, self.neutron_count)
