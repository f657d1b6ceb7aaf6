"""Tests for the error taxonomy."""

from auth_strategies.domain.core.exceptions import (
    AuthStrategyError,
    ConfigurationError,
    ContractViolationError,
    MissingCapabilityError,
    StrategyRegistrationError,
)


class TestExceptions:
    """Test exception hierarchy and messages."""

    def test_missing_capability(self):
        error = MissingCapabilityError("basic")

        assert str(error) == "authenticate is not declared in the 'basic' strategy"
        assert error.label == "basic"
        assert isinstance(error, StrategyRegistrationError)
        assert isinstance(error, AttributeError)

    def test_contract_violation(self):
        error = ContractViolationError("basic")

        assert str(error) == "'basic' is not a Strategy"
        assert isinstance(error, StrategyRegistrationError)
        assert isinstance(error, TypeError)

    def test_configuration_error_details(self):
        error = ConfigurationError("bad config", details=[{"loc": ("label",)}])

        assert isinstance(error, AuthStrategyError)
        assert error.details == [{"loc": ("label",)}]
