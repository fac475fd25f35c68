"""Request throttling keyed on the caller's role and address.

Callers are never Django users, so the stock ``ScopedRateThrottle`` key
(``user.pk`` for authenticated requests) does not apply.  Requests are
bucketed per scope on ``<role>:<client ip>``, or on the client ip alone
when no role header was sent.
"""

from rest_framework.throttling import ScopedRateThrottle


class RoleScopedRateThrottle(ScopedRateThrottle):
    """``ScopedRateThrottle`` whose identity is role plus client address."""

    def get_cache_key(self, request, view):
        ident = self.get_ident(request)
        role = getattr(request.user, "role", None)
        if role:
            ident = f"{role}:{ident}"
        return self.cache_format % {"scope": self.scope, "ident": ident}
