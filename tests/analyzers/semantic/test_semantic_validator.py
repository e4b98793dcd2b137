"""semantic_validator 모듈 단위 테스트."""

import pytest

from pronunciation_coach.analyzers.pronunciation.assessment_types import SemanticType
from pronunciation_coach.analyzers.semantic.semantic_validator import (
    FormTableValidator,
    ISemanticValidator,
    format_context,
    identify_minor_pronunciation_error,
)
from pronunciation_coach.models.assessment import AssessmentContext

FORMS = {
    'hablar': {
        ('indicative', 'pres', '1s'): {'hablo'},
        ('indicative', 'pres', '3s'): {'habla'},
    },
    'comer': {
        ('indicative', 'pres', '1s'): {'como'},
        ('indicative', 'pretIndef', '1s'): {'comí'},
    },
}


@pytest.fixture
def validator():
    return FormTableValidator(FORMS)


def context(lemma, tense='pres', person='1s', mood='indicative'):
    return AssessmentContext(lemma=lemma, mood=mood, tense=tense, person=person)


class TestFormatContext:
    """format_context 함수 테스트."""

    def test_indicative(self):
        assert format_context('indicative', 'pres', '3s') == 'Presente con él/ella'

    def test_subjunctive(self):
        assert format_context('subjunctive', 'subjPres', '1s') == 'Presente de subjuntivo con yo'

    def test_imperative(self):
        assert format_context('imperative', 'impAff', '2s_tu') == 'imperativo con tú'

    def test_unknown_labels_pass_through(self):
        assert format_context('indicative', 'raro', 'x') == 'raro con x'


class TestIdentifyMinorPronunciationError:
    """identify_minor_pronunciation_error 함수 테스트."""

    @pytest.mark.parametrize("target,recognized,description", [
        ('bebo', 'vevo', 'confusión b/v'),
        ('hablo', 'ablo', 'h muda no pronunciada'),
        ('hace', 'haze', 'ceceo/seseo'),
        ('llamo', 'yamo', 'yeísmo'),
    ])
    def test_patterns(self, target, recognized, description):
        assert identify_minor_pronunciation_error(target, recognized)[0] == description

    def test_default(self):
        assert identify_minor_pronunciation_error('como', 'coma')[0] == 'diferencia menor de pronunciación'


class TestFormTableValidator:
    """FormTableValidator 클래스 테스트."""

    def test_satisfies_protocol(self, validator):
        assert isinstance(validator, ISemanticValidator)

    def test_exact_match(self, validator):
        result = validator.validate_conjugation('Hablo', 'hablo', context('hablar'))

        assert result.type is SemanticType.EXACT_MATCH
        assert result.pedagogical_score == 100

    def test_valid_conjugation(self):
        forms = {'ser': {('indicative', 'pres', '2s_vos'): {'sos', 'eres'}}}
        result = FormTableValidator(forms).validate_conjugation(
            'eres', 'sos', context('ser', person='2s_vos')
        )

        assert result.type is SemanticType.VALID_CONJUGATION
        assert result.pedagogical_score == 95

    def test_wrong_context(self, validator):
        result = validator.validate_conjugation('hablo', 'habla', context('hablar'))

        assert result.type is SemanticType.WRONG_CONTEXT
        assert result.pedagogical_score == 20
        assert result.message == 'Es una conjugación válida de "hablar" pero para Presente con él/ella'
        assert result.suggestion == 'Para Presente con yo debe ser "hablo"'

    def test_different_verb(self, validator):
        result = validator.validate_conjugation('hablo', 'como', context('hablar'))

        assert result.type is SemanticType.DIFFERENT_VERB
        assert result.pedagogical_score == 10
        assert result.message == '"como" es conjugación de "comer", no de "hablar"'
        assert result.suggestion == 'Pronuncia la conjugación correcta de "hablar": "hablo"'

    def test_accent_error(self, validator):
        result = validator.validate_conjugation('comí', 'comi', context('comer', tense='pretIndef'))

        assert result.type is SemanticType.ACCENT_ERROR
        assert result.pedagogical_score == 85
        assert result.suggestion == 'Practica la acentuación española'

    def test_minor_pronunciation_without_lemma(self, validator):
        result = validator.validate_conjugation('bebo', 'vevo')

        assert result.type is SemanticType.MINOR_PRONUNCIATION
        assert result.pedagogical_score == 60
        assert result.message == 'Error menor de pronunciación: confusión b/v'

    def test_incorrect_word(self, validator):
        result = validator.validate_conjugation('hablo', 'comemos')

        assert result.type is SemanticType.INCORRECT_WORD
        assert result.pedagogical_score == 0
        assert result.message == '"comemos" no es la conjugación correcta'
        assert result.suggestion == 'La conjugación correcta es "hablo"'

    def test_from_records(self):
        validator = FormTableValidator.from_records([
            {'lemma': 'vivir', 'mood': 'indicative', 'tense': 'pres', 'person': '1s', 'value': 'Vivo'},
            {'lemma': 'vivir', 'mood': 'indicative', 'tense': 'pres', 'person': '3s', 'value': 'vive'},
            {'lemma': None, 'value': 'x'},
        ])

        assert validator.forms['vivir'][('indicative', 'pres', '1s')] == {'vivo'}
        result = validator.validate_conjugation('vivo', 'vive', context('vivir'))
        assert result.type is SemanticType.WRONG_CONTEXT
