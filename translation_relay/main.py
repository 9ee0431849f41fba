"""Entry point: translate command-line texts with the configured provider."""

import asyncio
import json
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """Translate argv texts and print the relay result as JSON."""
    from translation_relay import config
    from translation_relay.providers import load_provider

    texts = sys.argv[1:] if argv is None else argv
    if not texts:
        print("usage: translation-relay TEXT [TEXT ...]", file=sys.stderr)
        sys.exit(2)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    # httpx logs full request URLs, which carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger = logging.getLogger(__name__)
    logger.info("Translating %d text(s) with provider=%s", len(texts), config.TRANSLATION_PROVIDER)

    provider = load_provider(config.TRANSLATION_PROVIDER)

    async def run():
        try:
            return await provider.translate(texts, config.SOURCE_LANG, config.TARGET_LANG)
        finally:
            await provider.close()

    result = asyncio.run(run())
    print(json.dumps(result.to_dict(), ensure_ascii=False))

    if not result.ok:
        logger.error("Translation failed: code=%d message=%s", result.code, result.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
