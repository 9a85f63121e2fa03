"""Built-in template library."""

from voice_matrix.domain.templates.library.appointment_booking import APPOINTMENT_BOOKING_TEMPLATE
from voice_matrix.domain.templates.library.customer_feedback import CUSTOMER_FEEDBACK_TEMPLATE
from voice_matrix.domain.templates.library.customer_support_triage import (
    CUSTOMER_SUPPORT_TRIAGE_TEMPLATE,
)
from voice_matrix.domain.templates.library.lead_qualification import LEAD_QUALIFICATION_TEMPLATE
from voice_matrix.domain.templates.library.sales_discovery import SALES_DISCOVERY_TEMPLATE

BUILTIN_TEMPLATES = [
    LEAD_QUALIFICATION_TEMPLATE,
    CUSTOMER_SUPPORT_TRIAGE_TEMPLATE,
    APPOINTMENT_BOOKING_TEMPLATE,
    SALES_DISCOVERY_TEMPLATE,
    CUSTOMER_FEEDBACK_TEMPLATE,
]

__all__ = [
    "APPOINTMENT_BOOKING_TEMPLATE",
    "BUILTIN_TEMPLATES",
    "CUSTOMER_FEEDBACK_TEMPLATE",
    "CUSTOMER_SUPPORT_TRIAGE_TEMPLATE",
    "LEAD_QUALIFICATION_TEMPLATE",
    "SALES_DISCOVERY_TEMPLATE",
]
