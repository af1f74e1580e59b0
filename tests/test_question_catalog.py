"""Tests for the fixed question catalog."""

import pytest

from risk_app.core.prediction_schema import PredictionInput
from risk_app.core.question_catalog import QUESTION_CATALOG, field_ids, question_at


class TestQuestionCatalog:
    """The catalog is fixed, ordered, and bound to wire field ids."""

    def test_has_twenty_questions(self):
        assert len(QUESTION_CATALOG) == 20

    def test_order_is_fixed(self):
        assert field_ids()[0] == "Breathing_Problem"
        assert field_ids()[14] == "Contact_with_COVID_Patient"
        assert field_ids()[-1] == "Sanitization_from_Market"

    def test_labels_are_readable_field_ids(self):
        assert question_at(17).label == "Family Working in Public Exposed Places"
        assert question_at(17).field_id == "Family_Working_in_Public_Exposed_Places"

    def test_field_ids_match_request_schema(self):
        assert set(field_ids()) == set(PredictionInput.model_fields)

    @pytest.mark.parametrize("index", [-1, 20])
    def test_question_at_rejects_out_of_range(self, index):
        with pytest.raises(IndexError):
            question_at(index)
