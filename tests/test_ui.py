"""
Unit tests for the text side of the UI: answer parsing and presentation.
"""

import pytest

from atomgame.atom.models import NumberAtom
from atomgame.challenges.answers import AnswerCheck, ElementAnswer, NeutralOrIon, SymbolAnswer
from atomgame.challenges.types import ChallengeType
from atomgame.ui.answer_parser import AnswerParseError, parse_answer, parse_element, parse_int
from atomgame.ui.presenter import (
    answer_hint,
    challenge_prompt,
    challenge_title,
    describe_correct_answer,
    describe_result,
    electron_shells,
    format_charge,
    format_symbol,
    format_time,
)


class TestParsing:
    """Tests for parse_int() and parse_element()."""

    @pytest.mark.parametrize(
        "text,expected",
        [("3", 3), ("-2", -2), ("2+", 2), ("1-", -1), (" 0 ", 0)],
    )
    def test_parse_int_when_charge_notation_then_signed_value(self, text, expected):
        assert parse_int(text) == expected

    def test_parse_int_when_not_a_number_then_parse_error(self):
        with pytest.raises(AnswerParseError):
            parse_int("two")

    def test_parse_element_when_symbol_or_number_then_proton_count(self):
        assert parse_element("Mg") == 12
        assert parse_element("12") == 12

    def test_parse_element_when_out_of_range_then_parse_error(self):
        with pytest.raises(AnswerParseError):
            parse_element("0")
        with pytest.raises(AnswerParseError):
            parse_element("Qq")


class TestParseAnswer:
    """Tests for parse_answer()."""

    def test_parse_answer_when_counts_then_number_atom(self, make_challenge, carbon):
        # Arrange
        challenge = make_challenge(ChallengeType.SYMBOL_TO_COUNTS, carbon)

        # Act
        submission = parse_answer(challenge, "6, 6, 6")

        # Assert
        assert submission == carbon
        assert challenge.evaluate(submission).is_correct

    def test_parse_answer_when_single_charge_then_electrons_follow(
        self, make_challenge, magnesium_ion
    ):
        # Arrange
        challenge = make_challenge(ChallengeType.COUNTS_TO_CHARGE, magnesium_ion)

        # Act
        submission = parse_answer(challenge, "2+")

        # Assert
        assert submission == magnesium_ion

    def test_parse_answer_when_single_mass_then_neutrons_follow(self, make_challenge, carbon):
        challenge = make_challenge(ChallengeType.SCHEMATIC_TO_MASS, carbon)

        submission = parse_answer(challenge, "13")

        assert submission.neutron_count == 7
        assert not challenge.evaluate(submission).is_correct

    def test_parse_answer_when_element_and_class_then_element_answer(
        self, make_challenge, magnesium_ion
    ):
        # Arrange
        challenge = make_challenge(ChallengeType.COUNTS_TO_ELEMENT, magnesium_ion)

        # Act
        submission = parse_answer(challenge, "mg ION")

        # Assert
        assert isinstance(submission, ElementAnswer)
        assert submission.neutral_or_ion == NeutralOrIon.ION
        assert challenge.evaluate(submission).is_correct

    def test_parse_answer_when_element_only_then_parse_error(self, make_challenge, magnesium_ion):
        challenge = make_challenge(ChallengeType.COUNTS_TO_ELEMENT, magnesium_ion)

        with pytest.raises(AnswerParseError, match="'neutral' or 'ion'"):
            parse_answer(challenge, "Mg")

    def test_parse_answer_when_ion_declared_neutral_then_charge_mismatch(
        self, make_challenge, magnesium_ion
    ):
        # Arrange
        challenge = make_challenge(ChallengeType.COUNTS_TO_ELEMENT, magnesium_ion)

        # Act
        result = challenge.evaluate(parse_answer(challenge, "Mg neutral"))

        # Assert
        assert not result.is_correct
        assert result.correct_charge == NeutralOrIon.ION
        assert result.submitted_charge == NeutralOrIon.NEUTRAL

    def test_parse_answer_when_single_symbol_field_then_others_from_answer(
        self, make_challenge, magnesium_ion
    ):
        # Arrange
        challenge = make_challenge(ChallengeType.COUNTS_TO_SYMBOL_MASS, magnesium_ion)

        # Act
        submission = parse_answer(challenge, "25")

        # Assert
        assert submission == SymbolAnswer(proton_count=12, mass_number=25, charge=2)

    def test_parse_answer_when_full_symbol_then_symbol_answer(self, make_challenge, carbon):
        challenge = make_challenge(ChallengeType.SCHEMATIC_TO_SYMBOL_ALL, carbon)

        submission = parse_answer(challenge, "6 12 0")

        assert challenge.evaluate(submission).is_correct

    def test_parse_answer_when_single_value_for_all_fields_then_parse_error(
        self, make_challenge, carbon
    ):
        challenge = make_challenge(ChallengeType.COUNTS_TO_SYMBOL_ALL, carbon)

        with pytest.raises(AnswerParseError):
            parse_answer(challenge, "6")

    def test_parse_answer_when_impossible_atom_then_parse_error(self, make_challenge, carbon):
        challenge = make_challenge(ChallengeType.COUNTS_TO_CHARGE, carbon)

        with pytest.raises(AnswerParseError, match="Not a possible atom"):
            parse_answer(challenge, "7+")

    def test_parse_answer_when_empty_then_parse_error(self, make_challenge, carbon):
        challenge = make_challenge(ChallengeType.SYMBOL_TO_COUNTS, carbon)

        with pytest.raises(AnswerParseError):
            parse_answer(challenge, "   ")


class TestPresenter:
    """Tests for the presenter's formatting helpers."""

    def test_format_charge_when_signed_then_symbol_notation(self):
        assert format_charge(2) == "2+"
        assert format_charge(-1) == "1-"
        assert format_charge(0) == "0"

    def test_format_time_when_seconds_then_minutes_and_seconds(self):
        assert format_time(75.6) == "1:15"
        assert format_time(0) == "0:00"

    def test_electron_shells_when_eleven_then_two_eight_one(self):
        assert electron_shells(11) == [2, 8, 1]
        assert electron_shells(0) == []

    def test_format_symbol_when_field_hidden_then_question_mark(self, magnesium_ion):
        text = format_symbol(magnesium_ion, show_mass_number=False)

        assert "mass ?" in text
        assert "Mg" in text
        assert "2+" in text

    def test_challenge_prompt_when_symbol_entry_then_configurable_field_hidden(
        self, make_challenge, carbon
    ):
        challenge = make_challenge(ChallengeType.COUNTS_TO_SYMBOL_CHARGE, carbon)

        prompt = challenge_prompt(challenge)

        assert "Protons: 6" in prompt
        assert "charge ?" in prompt

    @pytest.mark.parametrize("challenge_type", list(ChallengeType))
    def test_title_and_hint_when_any_type_then_text(self, challenge_type):
        assert challenge_title(challenge_type)
        assert answer_hint(challenge_type)

    def test_describe_result_when_charge_mismatch_then_explains(self, carbon):
        # Arrange
        result = AnswerCheck(
            is_correct=False,
            submitted_atom=carbon,
            correct_charge=NeutralOrIon.ION,
            submitted_charge=NeutralOrIon.NEUTRAL,
        )

        # Act
        text = describe_result(result)

        # Assert
        assert "neutral" in text
        assert "an ion" in text

    def test_describe_correct_answer_when_element_challenge_then_names_element(
        self, make_challenge, magnesium_ion
    ):
        challenge = make_challenge(ChallengeType.COUNTS_TO_ELEMENT, magnesium_ion)

        assert describe_correct_answer(challenge) == "The answer is: Magnesium, ion"

    def test_describe_correct_answer_when_counts_challenge_then_counts(self, make_challenge):
        atom = NumberAtom(proton_count=1, neutron_count=0, electron_count=1)
        challenge = make_challenge(ChallengeType.SYMBOL_TO_SCHEMATIC, atom)

        assert "Protons: 1" in describe_correct_answer(challenge)
