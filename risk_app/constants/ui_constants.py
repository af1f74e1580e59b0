"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "COVID-19 Risk Assessment"
HEADING_TEXT: str = "COVID-19 Risk Assessment"
INSTRUCTIONS_TEXT: str = "Answer Yes or No for each question:"
WINDOW_MIN_WIDTH: int = 420

QUESTION_NUMBER_TEMPLATE: str = "Question {number} of {total}"
PROGRESS_TEMPLATE: str = "Progress: {answered} / {total}"

YES_BUTTON: str = "Yes"
NO_BUTTON: str = "No"
SUBMIT_BUTTON: str = "Submit Answers"
SUBMITTING_BUTTON: str = "Submitting…"
START_OVER_BUTTON: str = "Start Over"
RESET_ANSWERS_BUTTON: str = "Reset Answers"

RESULT_HEADING: str = "Risk Assessment Result"
ERROR_HEADING: str = "Error"

THEME_NAME: str = "light"  # "light" or "dark"
