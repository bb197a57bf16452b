import pytest


@pytest.fixture(scope="session")
def shops_domain():
    """Initialize the shops domain once per session."""
    from shops.domain import shops

    shops.init()
    return shops


@pytest.fixture(autouse=True)
def run_around_tests(shops_domain):
    """Push domain context before each test, cleanup after."""
    ctx = shops_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
