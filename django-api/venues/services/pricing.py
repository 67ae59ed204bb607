"""Booking price arithmetic.

Amounts stay as full-precision Decimals; only presentation rounds them.
"""

from decimal import Decimal

from venues.domain import Money, PriceBreakdown

SERVICE_FEE_RATE = Decimal("0.10")


def compute_total(hourly_rate: Money | Decimal | int | float, duration_hours: Decimal | int | float) -> PriceBreakdown:
    if not isinstance(hourly_rate, Money):
        hourly_rate = Money.of(hourly_rate)
    hours = duration_hours if isinstance(duration_hours, Decimal) else Decimal(str(duration_hours))
    if hours <= 0:
        raise ValueError("Booking duration must be positive")

    subtotal = hourly_rate.amount * hours
    service_fee = subtotal * SERVICE_FEE_RATE
    return PriceBreakdown(
        subtotal=Money(subtotal),
        service_fee=Money(service_fee),
        total=Money(subtotal + service_fee),
    )
