"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from reel.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[str]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Every mockable component uses its mock unless named in ``unmock``.
    Settings come from the environment (conftest sets ENVIRONMENT=test).

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # In-memory backend
        container = build_test_container()

        # Against a running backend at API__BASE_URL
        container = build_test_container(unmock={"api"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=bool(base.__mock_component__)
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
