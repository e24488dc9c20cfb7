"""
Trusted Types bridge: turn certified script text into a branded
``TrustedScript`` that sinks can recognise as pre-vetted.

``TrustedTypePolicyFactory`` plays the platform role (the equivalent of a
browser's ``trustedTypes`` object): it mints named policies, optionally
restricted to an allow-list, and rejects duplicate names. A
``TrustedTypesBridge`` asks its factory for one policy the first time it is
needed and caches the outcome, policy or "unsupported", for its lifetime.
A failed or impossible creation is never retried; callers fall back to
plain strings.

All bridges go through ``get_default_bridge()`` unless one is injected, so
there is exactly one default policy per process.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any, final

from safescript.core.config import settings
from safescript.core.errors import PolicyCreationError, TypeMismatchError

_LOG = logging.getLogger(__name__)

_MINT_TOKEN = object()


@final
class TrustedScript:
    """Branded script value. Only a ``TrustedTypePolicy`` can create one."""

    __slots__ = ("_value", "_policy_name")

    def __init__(self, value: str, policy_name: str, token: object) -> None:
        if token is not _MINT_TOKEN:
            raise TypeError("TrustedScript can only be created by a TrustedTypePolicy")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_policy_name", policy_name)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("TrustedScript cannot be subclassed")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("TrustedScript is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("TrustedScript is immutable")

    def __reduce__(self) -> Any:
        raise TypeError("TrustedScript cannot be pickled")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"<TrustedScript policy={self._policy_name!r} {self._value!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrustedScript):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((TrustedScript, self._value))

    def to_json(self) -> str:
        return self._value

    @property
    def policy_name(self) -> str:
        return self._policy_name


def _identity(text: str) -> str:
    return text


class TrustedTypePolicy:
    """A named capability for minting ``TrustedScript`` values."""

    def __init__(self, name: str, create_script: Callable[[str], str] | None = None) -> None:
        self.name = name
        self._create_script = create_script

    def create_script(self, text: str) -> TrustedScript:
        """Run the policy rule on *text* and brand the result."""
        if self._create_script is None:
            raise PolicyCreationError(f"Policy {self.name!r} does not define create_script")
        return TrustedScript(self._create_script(text), self.name, _MINT_TOKEN)

    def __repr__(self) -> str:
        return f"<TrustedTypePolicy {self.name!r}>"


class TrustedTypePolicyFactory:
    """
    Creates named policies.

    ``allowed_names`` mirrors a CSP ``trusted-types`` directive: when given,
    only those names may be created. Names are single-use unless
    ``allow_duplicates`` is set.
    """

    def __init__(
        self,
        allowed_names: Iterable[str] | None = None,
        *,
        allow_duplicates: bool = False,
    ) -> None:
        self._allowed = set(allowed_names) if allowed_names is not None else None
        self._allow_duplicates = allow_duplicates
        self._policies: dict[str, TrustedTypePolicy] = {}
        self._lock = threading.Lock()

    def create_policy(
        self,
        name: str,
        create_script: Callable[[str], str] | None = None,
    ) -> TrustedTypePolicy:
        if self._allowed is not None and name not in self._allowed:
            raise PolicyCreationError(f"Policy name {name!r} is not allowed")
        with self._lock:
            if name in self._policies and not self._allow_duplicates:
                raise PolicyCreationError(f"Policy {name!r} already exists")
            policy = TrustedTypePolicy(name, create_script)
            self._policies[name] = policy
            return policy

    def get_policy_names(self) -> list[str]:
        with self._lock:
            return sorted(self._policies)

    @staticmethod
    def is_script(value: Any) -> bool:
        return isinstance(value, TrustedScript)


class TrustedTypesBridge:
    """
    Lazily creates and caches one policy from *factory*.

    ``factory=None`` means the platform has no trusted types support;
    ``get_policy()`` then always returns ``None``.
    """

    def __init__(
        self,
        factory: TrustedTypePolicyFactory | None,
        policy_name: str,
    ) -> None:
        self._factory = factory
        self.policy_name = policy_name
        self._lock = threading.Lock()
        self._resolved = False
        self._policy: TrustedTypePolicy | None = None

    def get_policy(self) -> TrustedTypePolicy | None:
        """Return the cached policy, creating it on first call; ``None`` if unsupported."""
        if self._resolved:
            return self._policy
        with self._lock:
            if self._resolved:
                return self._policy
            try:
                self._policy = self._create_policy()
            finally:
                self._resolved = True
            return self._policy

    def _create_policy(self) -> TrustedTypePolicy | None:
        if self._factory is None:
            _LOG.debug("Trusted types unsupported; %s falls back to strings", self.policy_name)
            return None
        try:
            # Values reaching the policy were already certified by SafeScript builders.
            policy = self._factory.create_policy(self.policy_name, create_script=_identity)
        except Exception as e:
            _LOG.warning("Trusted types policy %s could not be created: %s", self.policy_name, e)
            return None
        _LOG.info("Created trusted types policy %s", self.policy_name)
        return policy

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    def to_trusted_script(self, text: str) -> TrustedScript | str:
        """Brand *text* with the policy if there is one, otherwise return it unchanged."""
        policy = self.get_policy()
        if policy is None:
            return text
        return policy.create_script(text)


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_lock = threading.Lock()
_default_bridge: TrustedTypesBridge | None = None


def build_bridge_from_settings() -> TrustedTypesBridge:
    """Bridge configured from ``TRUSTED_TYPES_*`` settings."""
    factory = None
    if settings.TRUSTED_TYPES_ENABLED:
        factory = TrustedTypePolicyFactory(settings.allowed_policy_names)
    return TrustedTypesBridge(factory, settings.script_policy_name)


def get_default_bridge() -> TrustedTypesBridge:
    global _default_bridge
    bridge = _default_bridge
    if bridge is not None:
        return bridge
    with _default_lock:
        if _default_bridge is None:
            _default_bridge = build_bridge_from_settings()
        return _default_bridge


def set_default_bridge(bridge: TrustedTypesBridge) -> None:
    """Install *bridge* as the process default (application wiring, tests)."""
    global _default_bridge
    if not isinstance(bridge, TrustedTypesBridge):
        raise TypeMismatchError("TrustedTypesBridge", bridge)
    with _default_lock:
        _default_bridge = bridge


def reset_default_bridge() -> None:
    """Drop the default bridge; the next access rebuilds it from settings."""
    global _default_bridge
    with _default_lock:
        _default_bridge = None


def get_policy() -> TrustedTypePolicy | None:
    """Policy of the default bridge, or ``None`` when trusted types are unavailable."""
    return get_default_bridge().get_policy()
