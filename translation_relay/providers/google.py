"""Google Cloud provider: Translation API v2 over HTTPS, optionally via a proxy."""

import json
import logging
from typing import Any

import httpx

from translation_relay.providers.base import DEFAULT_LANG, TranslationProvider
from translation_relay.result import TranslationResult

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"
DEFAULT_TIMEOUT = 30.0
METHOD = "GoogleCloud"

_PROXY_SCHEMES = ("http", "https", "socks5", "socks5h")

_UNSET: Any = object()


def build_request_body(texts: list[str], source_lang: str, target_lang: str) -> dict[str, Any]:
    """Build the v2 request body. Format is always plain text."""
    return {
        "q": list(texts),
        "source": source_lang,
        "target": target_lang,
        "format": "text",
    }


def parse_proxy_url(proxy_url: str) -> httpx.URL:
    """Parse a proxy address, raising on anything that is not an http(s) or socks5 URL."""
    bad = next((ch for ch in proxy_url if not ch.isprintable()), None)
    if bad is not None:
        raise ValueError(f"invalid control character {bad!r} in proxy URL")
    url = httpx.URL(proxy_url)
    if url.scheme not in _PROXY_SCHEMES:
        raise ValueError(f"unsupported proxy scheme {url.scheme!r}")
    if not url.host:
        raise ValueError("proxy URL has no host")
    return url


def parse_translations(body: bytes) -> list[str]:
    """Extract translated texts from a v2 response body.

    Raises:
        ValueError: Body is not JSON or does not have the v2 response shape.
    """
    try:
        payload = json.loads(body)
    except RecursionError as exc:
        raise ValueError("response JSON is nested too deeply") from exc
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

    data = payload.get("data")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("'data' is not an object")
    items = data.get("translations")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ValueError("'data.translations' is not an array")

    translations = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError("translation item is not an object")
        text = item.get("translatedText")
        if text is None:
            text = ""
        elif not isinstance(text, str):
            raise ValueError(
                f"'translatedText' is {type(text).__name__}, expected a string"
            )
        translations.append(text)
    return translations


async def translate_by_google(
    source_lang: str,
    target_lang: str,
    texts: list[str],
    api_key: str,
    proxy_url: str = "",
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    log: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TranslationResult:
    """Translate texts with the Google Cloud Translation API v2.

    Sends a single request and never retries. Only the first translated
    item is returned, even when several texts are sent.

    Args:
        source_lang: Source language code, "en" when empty.
        target_lang: Target language code, "en" when empty.
        texts: Texts to translate.
        api_key: Google Cloud API key, sent as the ``key`` query parameter.
        proxy_url: Optional http(s) or socks5 proxy address.
        timeout: Request timeout in seconds, None for no timeout.
        log: Logger for diagnostics, module logger when None.
        transport: Optional httpx transport replacing the network layer.
            When set, the proxy is still validated but not used.

    Returns:
        A TranslationResult. Failures are reported through the result,
        never raised.
    """
    log = log or logger

    if not texts:
        return TranslationResult.rejected(400, "No text to translate")
    if not api_key:
        return TranslationResult.rejected(400, "API key is required")

    source_lang = source_lang or DEFAULT_LANG
    target_lang = target_lang or DEFAULT_LANG

    try:
        content = json.dumps(
            build_request_body(texts, source_lang, target_lang), ensure_ascii=False
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        log.error("Failed to marshal request: %s", exc)
        return TranslationResult.fault(500, "Failed to marshal request", exc)

    proxy: httpx.URL | None = None
    if proxy_url:
        try:
            proxy = parse_proxy_url(proxy_url)
        except (httpx.InvalidURL, ValueError) as exc:
            log.error("Failed to parse proxy URL: %s", exc)
            return TranslationResult.fault(503, f"Invalid proxy URL: {exc}", exc)
        log.info("Using proxy: %s", proxy_url)
    else:
        log.info("No proxy specified, using direct connection")

    client_kwargs: dict[str, Any] = {"timeout": httpx.Timeout(timeout)}
    if transport is not None:
        client_kwargs["transport"] = transport
    elif proxy is not None:
        client_kwargs["proxy"] = proxy

    async with httpx.AsyncClient(**client_kwargs) as client:
        try:
            request = client.build_request(
                "POST",
                GOOGLE_TRANSLATE_URL,
                params={"key": api_key},
                content=content,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            log.error("Failed to create request: %s", exc)
            return TranslationResult.fault(503, "Failed to create request", exc)

        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as exc:
            log.error("Request error: %s", exc)
            return TranslationResult.fault(
                503, f"Translation request failed: {exc}", exc
            )

        try:
            body = await response.aread()
        except httpx.HTTPError as exc:
            log.error("Failed to read response body: %s", exc)
            return TranslationResult.fault(
                503, f"Failed to read response: {exc}", exc
            )
        finally:
            await response.aclose()

    if response.status_code != 200:
        log.warning("API returned non-200 status code: %d", response.status_code)
        return TranslationResult.rejected(
            response.status_code,
            f"API error: {body.decode('utf-8', errors='replace')}",
        )

    try:
        translations = parse_translations(body)
    except ValueError as exc:
        log.error("Failed to parse response: %s", exc)
        return TranslationResult.fault(503, f"Failed to parse response: {exc}", exc)

    if not translations:
        log.warning("API returned empty translations array")
        return TranslationResult.rejected(
            503, "Translation failed, API returns an empty result"
        )

    return TranslationResult.success(
        data=translations[0],
        source_lang=source_lang,
        target_lang=target_lang,
        method=METHOD,
    )


class GoogleCloudProvider(TranslationProvider):
    """Translates text using the Google Cloud Translation API v2."""

    def __init__(
        self,
        api_key: str = "",
        proxy_url: str = "",
        timeout: float | None = _UNSET,
    ) -> None:
        # Imported lazily so translate_by_google never loads .env files
        from translation_relay import config

        # Each argument falls back to config on its own; timeout=None means no limit
        api_key = api_key or config.GOOGLE_API_KEY
        proxy_url = proxy_url or config.PROXY_URL
        if timeout is _UNSET:
            timeout = config.REQUEST_TIMEOUT

        self.api_key: str = api_key
        self.proxy_url: str = proxy_url
        self.timeout: float | None = timeout

    async def translate(
        self, texts: list[str], source_lang: str, target_lang: str
    ) -> TranslationResult:
        return await translate_by_google(
            source_lang,
            target_lang,
            texts,
            self.api_key,
            self.proxy_url,
            timeout=self.timeout,
        )
