"""Tests for building the request record."""

import pytest
from pydantic import ValidationError

from risk_app.core.prediction_schema import PredictionInput, build_prediction_record
from risk_app.core.question_catalog import field_ids


class TestBuildPredictionRecord:
    """Answers are bound to field ids by name and validated."""

    def test_binds_answers_to_field_ids_in_catalog_order(self):
        answers = [1 if index in (0, 14) else 0 for index in range(20)]
        body = build_prediction_record(answers).to_json_body()

        assert body["Breathing_Problem"] == 1.0
        assert body["Contact_with_COVID_Patient"] == 1.0
        assert body["Fever"] == 0.0
        assert sum(body.values()) == 2.0

    def test_body_has_exactly_the_twenty_fields_as_floats(self):
        body = build_prediction_record([1] * 20).to_json_body()

        assert set(body) == set(field_ids())
        assert all(isinstance(value, float) for value in body.values())

    @pytest.mark.parametrize("count", [0, 19, 21])
    def test_rejects_wrong_answer_count(self, count):
        with pytest.raises(ValueError):
            build_prediction_record([0] * count)

    def test_rejects_non_binary_values(self):
        answers = [0] * 20
        answers[3] = 2
        with pytest.raises(ValidationError):
            build_prediction_record(answers)

    def test_schema_forbids_extra_and_missing_fields(self):
        values = {field_id: 0.0 for field_id in field_ids()}
        with pytest.raises(ValidationError):
            PredictionInput(**values, Age=1.0)
        del values["Fever"]
        with pytest.raises(ValidationError):
            PredictionInput(**values)
