"""PolicyHost — the host-facing side of the credential policy hooks.

The host calls :meth:`PolicyHost.check_password` whenever a role's secret
is created or changed, and :meth:`PolicyHost.process_utility` before
executing an attribute-change request. Every registered handler sees the
same arguments; the first veto is returned verbatim and nothing after it
runs.

Lifecycle::

    host = PolicyHost(settings)
    handle = host.load()        # install the built-in policy plugin
    ...
    host.unload(handle)         # restore the chain as it was before load()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from credpolicy.config.settings import PolicySettings
from credpolicy.domain.credentials import AttributeChangeRequest
from credpolicy.domain.timeutil import utc_now
from credpolicy.domain.types import SecretKind
from credpolicy.plugins.builtins.policy_plugin import PolicyPlugin
from credpolicy.plugins.manager import PluginHandle, PluginManager
from credpolicy.services.credential import Clock, CredentialCheckService
from credpolicy.services.gate import CredentialChangeGate
from credpolicy.services.result import PolicyResult
from credpolicy.services.strength import StrengthChecker
from credpolicy.services.verification import CredentialVerifier

BUILTIN_PLUGIN_NAME = "credpolicy"

logger = logging.getLogger(__name__)


class PolicyHost:
    """Owns the hook chain and the load/unload lifecycle."""

    def __init__(
        self,
        settings: PolicySettings | None = None,
        *,
        plugins: PluginManager | None = None,
        strength_checker: StrengthChecker | None = None,
        verifier: CredentialVerifier | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.settings = settings or PolicySettings()
        self.plugins = plugins or PluginManager()
        self._strength_checker = strength_checker
        self._verifier = verifier
        self._clock = clock

    def load(self, *, discover: bool = False) -> PluginHandle:
        """Install the built-in policy plugin and return its handle.

        With *discover*, entry-point plugins are loaded first so that they
        sit ahead of the built-in credential check in the chain.
        """
        if discover:
            self.plugins.discover_and_load()

        strength = self._strength_checker
        if strength is None:
            strength = self.plugins.hook.register_strength_checker()

        policy = self.settings.policy
        plugin = PolicyPlugin(
            CredentialCheckService(
                policy,
                strength_checker=strength,
                verifier=self._verifier,
                clock=self._clock,
            ),
            CredentialChangeGate(policy.gate),
        )
        handle = self.plugins.register_plugin(plugin, name=BUILTIN_PLUGIN_NAME)
        logger.info("credpolicy extension loaded")
        return handle

    def unload(self, handle: PluginHandle) -> None:
        """Remove the plugin installed by :meth:`load`."""
        self.plugins.unregister(handle)
        logger.info("credpolicy extension unloaded")

    def check_password(
        self,
        username: str,
        secret: str,
        secret_kind: SecretKind | str,
        expiration: datetime | None,
        *,
        now: datetime | None = None,
    ) -> PolicyResult:
        """Run every installed credential handler; the first veto wins."""
        veto = self.plugins.hook.check_password(
            username=username,
            secret=secret,
            secret_kind=SecretKind(secret_kind),
            expiration=expiration,
            now=now if now is not None else self._clock(),
        )
        if veto is not None:
            return veto
        return PolicyResult.success("check_password", username=username)

    def check_utility(self, request: AttributeChangeRequest) -> PolicyResult:
        """Run every installed request handler; the first veto wins."""
        veto = self.plugins.hook.process_utility(request=request)
        if veto is not None:
            return veto
        return PolicyResult.success("process_utility", kind=str(request.kind))

    def process_utility[T](
        self,
        request: AttributeChangeRequest,
        execute: Callable[[AttributeChangeRequest], T],
    ) -> T:
        """Gate *request* and, only if nothing vetoes it, run *execute*.

        Raises:
            PolicyViolation: If any handler rejects the request.
        """
        self.check_utility(request).raise_for_error()
        return execute(request)
