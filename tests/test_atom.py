"""
Unit tests for the atom package.

Tests for NumberAtom, the element tables and the free-play builder.
"""

import pytest
from pydantic import ValidationError

from atomgame.atom import elements
from atomgame.atom.builder import MAX_NEUTRONS, MAX_PROTONS, AtomBuilder
from atomgame.atom.models import NumberAtom


class TestNumberAtom:
    """Tests for NumberAtom."""

    def test_number_atom_when_ion_then_derives_mass_and_charge(self, magnesium_ion):
        """Mass number and charge are derived from the counts."""
        # Assert
        assert magnesium_ion.mass_number == 24
        assert magnesium_ion.charge == 2
        assert not magnesium_ion.is_neutral

    def test_number_atom_when_negative_count_then_rejected(self):
        """Counts must be non-negative."""
        with pytest.raises(ValidationError):
            NumberAtom(proton_count=-1, neutron_count=0, electron_count=0)

    def test_number_atom_when_frozen_then_assignment_rejected(self, carbon):
        with pytest.raises(ValidationError):
            carbon.proton_count = 7

    def test_is_equivalent_when_one_count_differs_then_false(self, carbon):
        # Arrange
        other = NumberAtom(proton_count=6, neutron_count=7, electron_count=6)

        # Assert
        assert carbon.is_equivalent(carbon.model_copy())
        assert not carbon.is_equivalent(other)

    def test_from_symbol_values_when_anion_then_adds_electrons(self):
        """O-16 with a 2- charge has ten electrons."""
        # Act
        atom = NumberAtom.from_symbol_values(proton_count=8, mass_number=16, charge=-2)

        # Assert
        assert (atom.proton_count, atom.neutron_count, atom.electron_count) == (8, 8, 10)

    def test_number_atom_when_printed_then_shows_counts(self, carbon):
        assert str(carbon) == "6p 6n 6e"


class TestElements:
    """Tests for the element tables."""

    def test_get_symbol_when_carbon_then_c(self):
        assert elements.get_symbol(6) == "C"
        assert elements.get_name(6) == "Carbon"

    def test_get_symbol_when_zero_protons_then_empty(self):
        assert elements.get_symbol(0) == ""
        assert elements.get_name(0) == ""

    def test_get_symbol_when_out_of_range_then_raises(self):
        with pytest.raises(ValueError):
            elements.get_symbol(elements.MAX_PROTON_COUNT + 1)

    def test_tables_when_indexed_to_max_then_last_element_is_einsteinium(self):
        assert elements.get_symbol(elements.MAX_PROTON_COUNT) == "Es"
        assert elements.get_name(elements.MAX_PROTON_COUNT) == "Einsteinium"

    def test_get_proton_count_when_any_case_then_found(self):
        assert elements.get_proton_count("Ne") == 10
        assert elements.get_proton_count("ne") == 10
        assert elements.get_proton_count(" NA ") == 11

    def test_get_proton_count_when_unknown_symbol_then_key_error(self):
        with pytest.raises(KeyError):
            elements.get_proton_count("Xx")

    def test_is_stable_when_tabulated_isotope_then_true(self):
        # Assert
        assert elements.is_stable(6, 6)
        assert elements.is_stable(6, 7)
        assert not elements.is_stable(6, 8)

    def test_stable_neutron_counts_when_untabulated_element_then_empty(self):
        assert elements.stable_neutron_counts(50) == ()


class TestAtomBuilder:
    """Tests for AtomBuilder."""

    def test_builder_when_particles_added_then_identifies_element(self):
        # Arrange
        builder = AtomBuilder()

        # Act
        for _ in range(6):
            builder.add_proton()
            builder.add_neutron()
            builder.add_electron()

        # Assert
        assert builder.element_symbol == "C"
        assert builder.element_name == "Carbon"
        assert builder.mass_number == 12
        assert builder.is_neutral
        assert builder.is_stable

    def test_builder_when_empty_then_no_element_and_stable(self):
        builder = AtomBuilder()

        assert builder.element_symbol == ""
        assert builder.is_stable

    def test_add_proton_when_bucket_empty_then_returns_false(self):
        # Arrange
        builder = AtomBuilder()
        for _ in range(MAX_PROTONS):
            assert builder.add_proton()

        # Act
        added = builder.add_proton()

        # Assert
        assert not added
        assert builder.proton_count == MAX_PROTONS

    def test_remove_electron_when_none_then_returns_false(self):
        builder = AtomBuilder()

        assert not builder.remove_electron()
        assert builder.electron_count == 0

    def test_set_counts_when_over_bucket_then_raises_and_keeps_build(self):
        # Arrange
        builder = AtomBuilder()
        builder.set_counts(3, 4, 3)

        # Act / Assert
        with pytest.raises(ValueError):
            builder.set_counts(3, MAX_NEUTRONS + 1, 3)
        assert builder.snapshot() == NumberAtom(proton_count=3, neutron_count=4, electron_count=3)

    def test_snapshot_when_builder_changes_then_snapshot_unchanged(self):
        # Arrange
        builder = AtomBuilder()
        builder.set_counts(1, 0, 1)
        snapshot = builder.snapshot()

        # Act
        builder.remove_electron()

        # Assert
        assert snapshot.electron_count == 1
        assert builder.charge == 1

    def test_reset_when_built_then_empty(self):
        builder = AtomBuilder()
        builder.set_counts(2, 2, 2)

        builder.reset()

        assert builder.snapshot() == NumberAtom()
