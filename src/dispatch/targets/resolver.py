"""Target resolver: determines the phone number an SMS goes to.

Resolution order, first match wins:

1. An explicit phone literal. It is normalized; an invalid literal fails
   outright and never falls through to a lookup.
2. The target user's login identifier, which is their phone number.
3. The target customer's stored phone number.

Lookups that return nothing or an invalid number fall through to the next
source. :meth:`TargetResolver.can_potentially_resolve` is the cheap,
I/O-free companion used by handlers to decide applicability; everything it
approves is actually attempted by :meth:`TargetResolver.resolve`.
"""

from typing import Optional

import structlog

from dispatch.event import DispatchEvent
from dispatch.exceptions import InvalidPhoneNumber, TargetNotResolvable
from dispatch.ports.directory_port import CustomerDirectory, UserDirectory
from dispatch.shared.phone import format_phone_number

logger = structlog.get_logger(__name__)


class TargetResolver:
    def __init__(self, users: UserDirectory, customers: CustomerDirectory):
        self._users = users
        self._customers = customers

    @staticmethod
    def can_potentially_resolve(
        phone: Optional[str] = None,
        user_id: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> bool:
        return bool(phone or user_id or customer_id)

    def can_resolve_event(self, event: DispatchEvent) -> bool:
        return self.can_potentially_resolve(
            phone=event.phone_number,
            user_id=event.target_user_id,
            customer_id=event.target_customer_id,
        )

    def resolve(
        self,
        tenant_id: str,
        phone: Optional[str] = None,
        user_id: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> str:
        """Return a normalized phone number or raise :class:`TargetNotResolvable`.

        Raises :class:`InvalidPhoneNumber` (a ``TargetNotResolvable``) when an
        explicit literal is malformed.
        """
        if phone:
            return format_phone_number(phone)

        if user_id:
            resolved = self._normalized_or_none(self._users.get_login_identifier(user_id))
            if resolved:
                return resolved
            logger.debug("User has no usable phone identifier", tenant_id=tenant_id, user_id=user_id)

        if customer_id:
            resolved = self._normalized_or_none(self._customers.get_customer_phone(tenant_id, customer_id))
            if resolved:
                return resolved
            logger.debug("Customer has no usable phone number", tenant_id=tenant_id, customer_id=customer_id)

        raise TargetNotResolvable(f"No phone number available for SMS in tenant {tenant_id}")

    def resolve_for_event(self, event: DispatchEvent) -> str:
        return self.resolve(
            event.tenant_id,
            phone=event.phone_number,
            user_id=event.target_user_id,
            customer_id=event.target_customer_id,
        )

    @staticmethod
    def _normalized_or_none(candidate: Optional[str]) -> Optional[str]:
        if not candidate:
            return None
        try:
            return format_phone_number(candidate)
        except InvalidPhoneNumber:
            return None
