import stripe

from app.core import settings
from app.core.errors import UpstreamFailure
from app.core.logging import get_logger
from app.schemas import SPaymentIntent

logger = get_logger(__name__)


class StripePaymentGateway:
    """Creates Stripe payment intents with an explicit API key.

    No module-level ``stripe.api_key`` is set, so each gateway carries its own
    credentials and tests can swap in a fake through the dependency.
    """

    def __init__(
        self,
        api_key: str,
        payment_method_types: list[str] | None = None,
    ):
        self.api_key = api_key
        self.payment_method_types = payment_method_types or list(
            settings.PAYMENT_METHOD_TYPES
        )

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict | None = None,
    ) -> SPaymentIntent:
        try:
            intent = stripe.PaymentIntent.create(
                api_key=self.api_key,
                amount=amount,
                currency=currency,
                payment_method_types=self.payment_method_types,
                metadata=metadata or {},
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe error: {e}", exc_info=True)
            raise UpstreamFailure("Error in course buying", status_code=500) from e

        return SPaymentIntent(
            id=intent.id,
            amount=intent.amount,
            currency=intent.currency,
            client_secret=intent.client_secret,
        )
