"""
Unit tests for the request-scoped tenant context.
"""

import threading
from types import SimpleNamespace

from core.context import (
    TenantContext,
    activate,
    deactivate,
    get_current_context,
    get_current_organization,
    get_current_organization_id,
    invalidate_current_organization,
    reset_current_organization,
    set_current_organization,
    tenant_context,
)


def make_resolver(mapping, calls):
    def resolver(principal):
        calls.append(principal)
        if principal is None:
            return None
        return mapping.get(principal.pk)

    return resolver


class TestTenantContext:
    """
    Memoization and invalidation of a single context.
    """

    def test_resolver_runs_once_per_context(self):
        org = SimpleNamespace(pk=1)
        user = SimpleNamespace(pk=10)
        calls = []
        context = TenantContext(principal=user, resolver=make_resolver({10: org}, calls))

        assert context.organization is org
        assert context.organization is org
        assert context.organization_id == 1
        assert calls == [user]

    def test_absent_organization_is_memoized_too(self):
        calls = []
        context = TenantContext(principal=SimpleNamespace(pk=10), resolver=make_resolver({}, calls))

        assert context.organization is None
        assert context.organization_id is None
        assert len(calls) == 1

    def test_callable_principal_is_evaluated_lazily(self):
        org = SimpleNamespace(pk=1)
        user = SimpleNamespace(pk=10)
        lookups = []

        def lookup():
            lookups.append(True)
            return user

        context = TenantContext(principal=lookup, resolver=make_resolver({10: org}, []))
        assert lookups == []

        assert context.organization is org
        assert context.principal is user
        assert lookups == [True]

    def test_invalidate_forces_a_new_resolution(self):
        user = SimpleNamespace(pk=10)
        mapping = {}
        calls = []
        context = TenantContext(principal=user, resolver=make_resolver(mapping, calls))

        assert context.organization is None

        new_org = SimpleNamespace(pk=2)
        mapping[10] = new_org
        assert context.organization is None  # still memoized

        context.invalidate()
        assert context.organization is new_org
        assert len(calls) == 2

    def test_pinned_context_never_calls_the_resolver(self):
        org = SimpleNamespace(pk=5)
        calls = []
        context = TenantContext(organization=org, resolver=make_resolver({}, calls))

        context.invalidate()

        assert context.is_pinned is True
        assert context.organization is org
        assert calls == []


class TestContextBinding:
    """
    Module-level helpers operating on the bound context.
    """

    def test_no_context_means_no_organization(self):
        assert get_current_context() is None
        assert get_current_organization() is None
        assert get_current_organization_id() is None

    def test_activate_and_deactivate_restore_previous_binding(self):
        outer = TenantContext(organization=SimpleNamespace(pk=1))
        inner = TenantContext(organization=SimpleNamespace(pk=2))

        outer_token = activate(outer)
        inner_token = activate(inner)
        assert get_current_organization_id() == 2

        deactivate(inner_token)
        assert get_current_organization_id() == 1

        deactivate(outer_token)
        assert get_current_context() is None

    def test_tenant_context_restores_previous_context_even_on_error(self):
        set_current_organization(SimpleNamespace(pk=1))

        try:
            with tenant_context(SimpleNamespace(pk=2)):
                assert get_current_organization_id() == 2
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert get_current_organization_id() == 1

    def test_tenant_context_with_none_pins_an_empty_tenant(self):
        calls = []
        with tenant_context(None, resolver=make_resolver({}, calls)):
            assert get_current_organization() is None
        assert calls == []

    def test_reset_current_organization(self):
        set_current_organization(SimpleNamespace(pk=3))
        reset_current_organization()

        assert get_current_organization_id() is None

    def test_invalidate_current_organization_only_touches_matching_principal(self):
        user = SimpleNamespace(pk=10)
        other = SimpleNamespace(pk=20)
        calls = []

        with tenant_context(principal=user, resolver=make_resolver({10: SimpleNamespace(pk=1)}, calls)):
            get_current_organization()

            invalidate_current_organization(other)
            get_current_organization()
            assert len(calls) == 1

            invalidate_current_organization(user)
            get_current_organization()
            assert len(calls) == 2

    def test_invalidate_without_active_context_is_a_noop(self):
        invalidate_current_organization(SimpleNamespace(pk=10))

        assert get_current_context() is None


def test_parallel_requests_never_see_each_other_organization():
    """
    Two principals resolve concurrently in separate threads; each only ever sees its own
    organization, and each context resolves exactly once.
    """
    org_a = SimpleNamespace(pk=1)
    org_b = SimpleNamespace(pk=2)
    user_a = SimpleNamespace(pk=10)
    user_b = SimpleNamespace(pk=20)
    calls = []
    resolver = make_resolver({10: org_a, 20: org_b}, calls)

    barrier = threading.Barrier(2, timeout=5)
    seen = {}

    def handle_request(user):
        with tenant_context(principal=user, resolver=resolver):
            barrier.wait()
            first = get_current_organization()
            barrier.wait()
            second = get_current_organization()
        seen[user.pk] = (first, second, get_current_context())

    threads = [threading.Thread(target=handle_request, args=(user,)) for user in (user_a, user_b)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert seen[10] == (org_a, org_a, None)
    assert seen[20] == (org_b, org_b, None)
    assert sorted(principal.pk for principal in calls) == [10, 20]
    # Nothing leaked into the test's own thread
    assert get_current_context() is None
