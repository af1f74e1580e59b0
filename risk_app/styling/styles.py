"""Centralized stylesheet helpers for the questionnaire window."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 18px;
                padding: 8px 16px;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QPushButton#outlinedButton {{
                background-color: transparent;
                color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
            }}
            QProgressBar {{
                border: none;
                border-radius: 2px;
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
                max-height: 4px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.PROGRESS_CHUNK.get(theme)};
            }}
        """

    @staticmethod
    def get_card_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QFrame {{ background-color: {ColorPalette.CARD_BACKGROUND.get(theme)}; "
            "border-radius: 12px; }"
        )

    @staticmethod
    def get_result_card_style(is_error: bool, theme: Theme = Theme.LIGHT) -> str:
        container = ColorPalette.ERROR_CONTAINER if is_error else ColorPalette.RESULT_CONTAINER
        text = ColorPalette.ERROR_TEXT if is_error else ColorPalette.RESULT_TEXT
        return (
            f"QFrame {{ background-color: {container.get(theme)}; border-radius: 12px; }}\n"
            f"QLabel {{ background-color: transparent; color: {text.get(theme)}; }}"
        )

    @staticmethod
    def get_heading_style() -> str:
        return "font-size: 20pt; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_caption_style() -> str:
        return "font-size: 10pt;"
