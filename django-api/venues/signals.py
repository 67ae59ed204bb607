"""Django signals for cache invalidation.

``booking_created`` is sent by the booking service after a booking is
recorded. Venue responses do not depend on bookings, so only the dashboard
keys are dropped.
"""

import logging

from django.core.cache import cache
from django.dispatch import Signal, receiver

from venues import cache_keys

logger = logging.getLogger(__name__)

# Sent with ``booking`` and ``owner_id`` (the owner of the booked venue).
booking_created = Signal()


@receiver(booking_created)
def invalidate_dashboard_cache(sender, booking, owner_id=None, **kwargs):
    """Invalidate dashboard caches when a booking is created."""
    keys = [cache_keys.admin_dashboard()]
    if owner_id:
        keys.append(cache_keys.owner_dashboard(owner_id))
    cache.delete_many(keys)
    logger.debug("Invalidated %s after booking %s", keys, booking.id)
