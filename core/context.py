"""
Context management utilities for tenant isolation handling.

The "current organization" is never stored in process-wide state. Each request
(or each explicit `tenant_context()` block) binds its own `TenantContext` to a
context variable, which is private to the running thread or asyncio task.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Callable, Optional

_UNRESOLVED = object()

# Context variable holding the tenant context of the active request
_current_context: ContextVar[Optional["TenantContext"]] = ContextVar("current_tenant_context", default=None)


def _default_resolver(principal):
    from organizations.services import resolve_current_organization

    return resolve_current_organization(principal)


class TenantContext:
    """
    Lazily resolves and memoizes the organization of one principal.

    The resolver runs at most once per context, on first access. A context built
    with an explicit `organization` is pinned: the resolver is never consulted.
    """

    def __init__(
        self,
        principal: Any = None,
        resolver: Optional[Callable[[Any], Any]] = None,
        organization: Any = _UNRESOLVED,
    ):
        self._principal = principal
        self._resolver = resolver or _default_resolver
        self._pinned = organization is not _UNRESOLVED
        self._organization = organization

    @property
    def principal(self):
        # The middleware passes a callable so that authentication happens on demand
        if callable(self._principal):
            self._principal = self._principal()
        return self._principal

    @property
    def is_pinned(self) -> bool:
        return self._pinned

    @property
    def organization(self):
        if self._organization is _UNRESOLVED:
            self._organization = self._resolver(self.principal)
        return self._organization

    @property
    def organization_id(self):
        organization = self.organization
        return organization.pk if organization is not None else None

    def invalidate(self):
        """
        Drops the memoized organization so the next access resolves it again.
        """
        if not self._pinned:
            self._organization = _UNRESOLVED

    def belongs_to(self, principal) -> bool:
        current = self.principal
        if current is None or principal is None:
            return False
        return getattr(current, "pk", None) is not None and current.pk == getattr(principal, "pk", None)


def activate(context: TenantContext) -> Token:
    """
    Binds a tenant context to the current execution context.
    Returns the token needed to restore the previous binding.
    """
    return _current_context.set(context)


def deactivate(token: Token):
    _current_context.reset(token)


def get_current_context() -> Optional[TenantContext]:
    return _current_context.get()


def get_current_organization():
    """
    Retrieves the organization of the current execution context.
    Returns None if no context is active or the principal has no organization.
    """
    context = _current_context.get()
    if context is None:
        return None
    return context.organization


def get_current_organization_id():
    context = _current_context.get()
    if context is None:
        return None
    return context.organization_id


def invalidate_current_organization(principal=None):
    """
    Forces the active context to resolve again on next access.
    With a principal, only a context belonging to that principal is invalidated.
    """
    context = _current_context.get()
    if context is None:
        return
    if principal is None or context.belongs_to(principal):
        context.invalidate()


def set_current_organization(organization):
    """
    Pins the organization for the current execution context (system code, shell, tests).
    """
    _current_context.set(TenantContext(organization=organization))


def reset_current_organization():
    """
    Unbinds any tenant context.
    """
    _current_context.set(None)


@contextmanager
def tenant_context(organization: Any = _UNRESOLVED, *, principal=None, resolver=None):
    """
    Runs a block inside a tenant context, restoring the previous one afterwards.

    Pass `organization` to pin a tenant (management commands, tasks), or
    `principal` to resolve it from memberships like a request would.
    """
    context = TenantContext(principal=principal, resolver=resolver, organization=organization)
    token = activate(context)
    try:
        yield context
    finally:
        deactivate(token)
