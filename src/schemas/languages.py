from .models import LanguageItem

SOURCE_LANGUAGES: tuple[LanguageItem, ...] = (
    LanguageItem(display_name="English", value="en"),
    LanguageItem(display_name="Chinese (Mandarin)", value="zh"),
    LanguageItem(display_name="Japanese", value="ja"),
    LanguageItem(display_name="Korean", value="ko"),
)

TARGET_LANGUAGES: tuple[LanguageItem, ...] = (
    LanguageItem(display_name="English", value="en"),
    LanguageItem(display_name="Chinese (Mandarin)", value="zh"),
)


def find_language(value: str, languages: tuple[LanguageItem, ...] = SOURCE_LANGUAGES) -> LanguageItem | None:
    return next((language for language in languages if language.value == value.lower()), None)
