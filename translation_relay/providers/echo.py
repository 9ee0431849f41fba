"""Echo provider: returns the first input text unchanged. For testing."""

from translation_relay.providers.base import DEFAULT_LANG, TranslationProvider
from translation_relay.result import TranslationResult


class EchoProvider(TranslationProvider):
    """Returns the first input text unchanged."""

    async def translate(
        self, texts: list[str], source_lang: str, target_lang: str
    ) -> TranslationResult:
        if not texts:
            return TranslationResult.rejected(400, "No text to translate")
        return TranslationResult.success(
            data=texts[0],
            source_lang=source_lang or DEFAULT_LANG,
            target_lang=target_lang or DEFAULT_LANG,
            method="Echo",
        )
