import pytest

from auth_strategies import AuthContext, BaseStrategy
from auth_strategies.infrastructure.auth.registry import (
    StrategyRegistry,
    reset_strategy_registry,
)


class BasicAuthStrategy(BaseStrategy):
    """Accepts the fixed credentials alice:secret."""

    def is_applicable(self):
        return self.context.get_header("Authorization", "").startswith("Basic ")

    def authenticate(self):
        if self.context.get_header("Authorization") == "Basic alice:secret":
            self.success("alice", roles=["user"])
        else:
            self.fail("bad credentials")


@pytest.fixture(autouse=True)
def clean_global_registry():
    """Give every test a fresh process-wide registry."""
    reset_strategy_registry()
    yield
    reset_strategy_registry()


@pytest.fixture
def registry():
    return StrategyRegistry()


@pytest.fixture
def basic_strategy():
    return BasicAuthStrategy


@pytest.fixture
def context():
    return AuthContext(
        method="GET",
        path="/machines",
        headers={"authorization": "Basic alice:secret"},
        client_ip="10.0.0.1",
    )
