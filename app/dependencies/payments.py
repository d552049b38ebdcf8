from app.core import settings
from app.helpers.payment_gateway import StripePaymentGateway


def get_payment_gateway() -> StripePaymentGateway:
    return StripePaymentGateway(api_key=settings.STRIPE_SECRET_KEY)
