"""Authentication port interface."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class AuthStatus(Enum):
    """Authentication outcome enumeration."""
    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


@dataclass
class AuthContext:
    """Request data handed to a strategy by the host layer."""

    method: str = "GET"
    path: str = "/"
    headers: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, Any] = field(default_factory=dict)
    client_ip: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a request header, ignoring case."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default


@dataclass
class AuthResult:
    """Result of running a strategy."""

    status: AuthStatus
    user_id: Optional[str] = None
    user_roles: List[str] = field(default_factory=list)
    permissions: List[str] = field(default_factory=list)
    message: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status is AuthStatus.SUCCESS


class StrategyPort(ABC):
    """Capability set every authentication strategy exposes."""

    @abstractmethod
    def authenticate(self) -> Any:
        """
        Perform the authentication check against the current context.

        Implementations record their outcome through the helpers provided
        by BaseStrategy (success, fail, skip).
        """

    @abstractmethod
    def is_applicable(self) -> bool:
        """
        Decide whether this strategy should run for the current context.

        Returns:
            True if the host should invoke authenticate
        """
