"""Request schema posted to the prediction service."""

from __future__ import annotations

from typing import Annotated, Sequence

from pydantic import AfterValidator, BaseModel, ConfigDict

from risk_app.constants.questionnaire_constants import NO_VALUE, QUESTION_COUNT, YES_VALUE
from risk_app.core.question_catalog import QUESTION_CATALOG, field_ids


def _check_binary(value: float) -> float:
    if value not in (float(NO_VALUE), float(YES_VALUE)):
        raise ValueError(f"answer must be {NO_VALUE} or {YES_VALUE}, got {value}")
    return value


BinaryAnswer = Annotated[float, AfterValidator(_check_binary)]


class PredictionInput(BaseModel):
    """Twenty required 0.0/1.0 fields, named exactly as the service expects."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    Breathing_Problem: BinaryAnswer
    Fever: BinaryAnswer
    Dry_Cough: BinaryAnswer
    Sore_Throat: BinaryAnswer
    Running_Nose: BinaryAnswer
    Asthma: BinaryAnswer
    Chronic_Lung_Disease: BinaryAnswer
    Headache: BinaryAnswer
    Heart_Disease: BinaryAnswer
    Diabetes: BinaryAnswer
    Hyper_Tension: BinaryAnswer
    Fatigue: BinaryAnswer
    Gastrointestinal: BinaryAnswer
    Abroad_Travel: BinaryAnswer
    Contact_with_COVID_Patient: BinaryAnswer
    Attended_Large_Gathering: BinaryAnswer
    Visited_Public_Exposed_Places: BinaryAnswer
    Family_Working_in_Public_Exposed_Places: BinaryAnswer
    Wearing_Masks: BinaryAnswer
    Sanitization_from_Market: BinaryAnswer

    def to_json_body(self) -> dict[str, float]:
        return self.model_dump(mode="json")


if set(PredictionInput.model_fields) != set(field_ids()):
    raise RuntimeError("PredictionInput fields and question catalog field ids differ.")


def build_prediction_record(answers: Sequence[int]) -> PredictionInput:
    """Bind each answer to its catalog field id and validate the record.

    Answers are given in catalog order. The binding goes through an explicit
    ``{field_id: value}`` table, so the request never depends on the order in
    which the schema declares its fields.
    """
    if len(answers) != QUESTION_COUNT:
        raise ValueError(f"Expected {QUESTION_COUNT} answers, got {len(answers)}.")
    values = {
        question.field_id: float(answer)
        for question, answer in zip(QUESTION_CATALOG, answers)
    }
    return PredictionInput(**values)
