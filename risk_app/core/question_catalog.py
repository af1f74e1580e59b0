"""Fixed catalog of the twenty yes/no questions asked by the client."""

from __future__ import annotations

from dataclasses import dataclass

from risk_app.constants.questionnaire_constants import QUESTION_COUNT


@dataclass(frozen=True, slots=True)
class Question:
    """Yes/no question bound to the field identifier the service expects."""

    field_id: str
    label: str


def _question(field_id: str) -> Question:
    return Question(field_id=field_id, label=field_id.replace("_", " "))


QUESTION_CATALOG: tuple[Question, ...] = (
    _question("Breathing_Problem"),
    _question("Fever"),
    _question("Dry_Cough"),
    _question("Sore_Throat"),
    _question("Running_Nose"),
    _question("Asthma"),
    _question("Chronic_Lung_Disease"),
    _question("Headache"),
    _question("Heart_Disease"),
    _question("Diabetes"),
    _question("Hyper_Tension"),
    _question("Fatigue"),
    _question("Gastrointestinal"),
    _question("Abroad_Travel"),
    _question("Contact_with_COVID_Patient"),
    _question("Attended_Large_Gathering"),
    _question("Visited_Public_Exposed_Places"),
    _question("Family_Working_in_Public_Exposed_Places"),
    _question("Wearing_Masks"),
    _question("Sanitization_from_Market"),
)

if len(QUESTION_CATALOG) != QUESTION_COUNT:
    raise RuntimeError(f"Question catalog must hold {QUESTION_COUNT} questions.")
if len({question.field_id for question in QUESTION_CATALOG}) != QUESTION_COUNT:
    raise RuntimeError("Question catalog field ids must be unique.")


def question_at(index: int) -> Question:
    """Return the question for a 0-based slot.

    Negative indexes are rejected rather than counted from the end.
    """
    if not 0 <= index < QUESTION_COUNT:
        raise IndexError(f"Question index {index} is outside 0..{QUESTION_COUNT - 1}.")
    return QUESTION_CATALOG[index]


def field_ids() -> tuple[str, ...]:
    return tuple(question.field_id for question in QUESTION_CATALOG)
