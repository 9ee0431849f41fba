"""Abstract translation provider interface."""

from abc import ABC, abstractmethod

from translation_relay.result import TranslationResult

# Fallback for an empty source or target language
DEFAULT_LANG = "en"


class TranslationProvider(ABC):
    """Base class for all translation providers."""

    @abstractmethod
    async def translate(
        self, texts: list[str], source_lang: str, target_lang: str
    ) -> TranslationResult:
        """Translate a batch of texts from source_lang to target_lang.

        Args:
            texts: Texts to translate, in order.
            source_lang: Source language code (e.g. "en"). Empty means default.
            target_lang: Target language code (e.g. "es"). Empty means default.

        Returns:
            Normalized result. Providers report failures through the result
            instead of raising.
        """
        ...

    async def close(self) -> None:
        """Release provider resources. Nothing to release by default."""
