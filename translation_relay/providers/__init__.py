from translation_relay.providers.echo import EchoProvider
from translation_relay.providers.google import GoogleCloudProvider

PROVIDERS: dict[str, type] = {
    "echo": EchoProvider,
    "google": GoogleCloudProvider,
}


def load_provider(name: str, **kwargs):
    """Load a translation provider by name."""
    cls = PROVIDERS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown provider '{name}'. Available: {list(PROVIDERS.keys())}"
        )
    return cls(**kwargs)
