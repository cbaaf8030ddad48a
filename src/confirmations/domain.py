"""Confirmations bounded context: registration confirmation dispatch.

Composes event-registration confirmation emails from operator input,
validates the recipient, and hands each one to an external delivery
provider exactly once, reporting the outcome back to the operator.
"""

import structlog
from protean.domain import Domain

confirmations = Domain(name="confirmations")

logger = structlog.get_logger(__name__)
