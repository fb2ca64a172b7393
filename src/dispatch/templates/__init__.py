"""Template registry: maps EventKind to a message renderer.

:func:`get_template` is total: every kind resolves to a renderer, kinds
without a dedicated template fall back to :class:`GenericTemplate`.
"""

from dispatch.taxonomy import EventKind
from dispatch.templates.admin_activity import AdminActivityTemplate
from dispatch.templates.customer_account import CustomerAccountTemplate
from dispatch.templates.generic import GenericTemplate
from dispatch.templates.ml_status import MLStatusTemplate
from dispatch.templates.order_update import OrderUpdateTemplate
from dispatch.templates.stock_alert import StockAlertTemplate
from dispatch.templates.subscription_alert import SubscriptionAlertTemplate
from dispatch.templates.tenant_approved import TenantApprovedTemplate

_TEMPLATES = (
    OrderUpdateTemplate,
    CustomerAccountTemplate,
    SubscriptionAlertTemplate,
    MLStatusTemplate,
    AdminActivityTemplate,
    StockAlertTemplate,
    TenantApprovedTemplate,
)

TEMPLATE_REGISTRY: dict[EventKind, type] = {
    kind: template_cls for template_cls in _TEMPLATES for kind in template_cls.kinds
}


def get_template(kind):
    """Look up the template class for a kind, falling back to the generic one."""
    return TEMPLATE_REGISTRY.get(kind, GenericTemplate)


def render_message(kind, context: dict | None = None) -> dict:
    """Render ``{"title", "body"}`` for ``kind`` from the event payload."""
    return get_template(kind).render(kind, context or {})
