"""Fixed demo data loaded into the in-memory store when it is opened."""

from datetime import date

from venues.domain import (
    Booking,
    BookingId,
    BookingStatus,
    Money,
    OpeningHours,
    Principal,
    Review,
    Role,
    Venue,
    VenueId,
    VenueRef,
)

_PEXELS = "https://images.pexels.com/photos"


def _image(photo: str, size: str = "h=350") -> str:
    return f"{_PEXELS}/{photo}?auto=compress&cs=tinysrgb&{size}"


def _hours(weekdays: str, saturday: str, sunday: str) -> tuple[OpeningHours, ...]:
    return (
        OpeningHours(days="Monday - Friday", hours=weekdays),
        OpeningHours(days="Saturday", hours=saturday),
        OpeningHours(days="Sunday", hours=sunday),
    )


def _dates(*days: int) -> frozenset[date]:
    return frozenset(date(2025, 1, day) for day in days)


def _avatar(photo: str) -> str:
    return _image(photo, "h=100")


def _gallery(*photos: str) -> tuple[str, ...]:
    return tuple(_image(photo, "h=650&w=940") for photo in photos)


def seed_venues() -> list[Venue]:
    return [
        Venue(
            id=VenueId("1"),
            name="Olympic Stadium",
            description=(
                "A state-of-the-art multi-purpose stadium with a seating capacity of "
                "60,000, a retractable roof and premium hospitality areas."
            ),
            location="Olympic Park, New York",
            price=Money.of(1200),
            rating=4.8,
            review_count=243,
            type="Football",
            image_url=_image("46798/the-ball-stadion-football-the-pitch-46798.jpeg"),
            images=_gallery(
                "46798/the-ball-stadion-football-the-pitch-46798.jpeg",
                "270085/pexels-photo-270085.jpeg",
                "2648977/pexels-photo-2648977.jpeg",
            ),
            amenities=("Locker Rooms", "Showers", "Restrooms", "Parking", "Floodlights", "Scoreboard"),
            opening_hours=_hours("08:00 AM - 10:00 PM", "09:00 AM - 11:00 PM", "10:00 AM - 08:00 PM"),
            available_dates=_dates(15, 16, 17, 18, 22, 23),
            time_slots=(
                "09:00 AM - 10:00 AM",
                "10:00 AM - 11:00 AM",
                "11:00 AM - 12:00 PM",
                "01:00 PM - 02:00 PM",
                "02:00 PM - 03:00 PM",
                "03:00 PM - 04:00 PM",
                "04:00 PM - 05:00 PM",
                "06:00 PM - 07:00 PM",
                "07:00 PM - 08:00 PM",
            ),
            reviews=(
                Review(
                    id="101",
                    user_name="James Wilson",
                    user_avatar=_avatar("220453/pexels-photo-220453.jpeg"),
                    rating=5.0,
                    date=date(2024, 12, 10),
                    text="Amazing stadium! The facilities were top-notch and the staff was very helpful.",
                ),
                Review(
                    id="102",
                    user_name="Sarah Johnson",
                    user_avatar=_avatar("415829/pexels-photo-415829.jpeg"),
                    rating=4.5,
                    date=date(2024, 11, 28),
                    text="Clean and well-maintained. The only issue was limited parking space.",
                ),
            ),
            owner_id="owner-1",
        ),
        Venue(
            id=VenueId("2"),
            name="Central Arena",
            description=(
                "A versatile indoor arena for basketball and volleyball tournaments "
                "with professional-grade courts and digital scoreboards."
            ),
            location="Downtown, Los Angeles",
            price=Money.of(800),
            rating=4.6,
            review_count=182,
            type="Basketball",
            image_url=_image("358042/pexels-photo-358042.jpeg"),
            images=_gallery(
                "358042/pexels-photo-358042.jpeg",
                "1752757/pexels-photo-1752757.jpeg",
                "2277981/pexels-photo-2277981.jpeg",
            ),
            amenities=(
                "Locker Rooms",
                "Showers",
                "Restrooms",
                "Concession Stand",
                "Equipment Rental",
                "First Aid Station",
            ),
            opening_hours=_hours("07:00 AM - 11:00 PM", "08:00 AM - 10:00 PM", "09:00 AM - 09:00 PM"),
            available_dates=_dates(15, 16, 20, 21, 22, 23),
            time_slots=(
                "08:00 AM - 09:00 AM",
                "09:00 AM - 10:00 AM",
                "10:00 AM - 11:00 AM",
                "11:00 AM - 12:00 PM",
                "01:00 PM - 02:00 PM",
                "02:00 PM - 03:00 PM",
                "03:00 PM - 04:00 PM",
                "06:00 PM - 07:00 PM",
                "07:00 PM - 08:00 PM",
            ),
            reviews=(
                Review(
                    id="201",
                    user_name="Michael Brown",
                    user_avatar=_avatar("1222271/pexels-photo-1222271.jpeg"),
                    rating=4.8,
                    date=date(2024, 12, 5),
                    text="Perfect venue for our basketball tournament.",
                ),
                Review(
                    id="202",
                    user_name="Emily Davis",
                    user_avatar=_avatar("1239291/pexels-photo-1239291.jpeg"),
                    rating=4.2,
                    date=date(2024, 11, 22),
                    text="Good facilities but the air conditioning could be improved.",
                ),
            ),
            owner_id="owner-1",
        ),
        Venue(
            id=VenueId("3"),
            name="Riverside Tennis Club",
            description=(
                "Premium tennis facility with 8 clay courts and 4 hard courts, a "
                "clubhouse, a pro shop and a viewing area for spectators."
            ),
            location="Riverside, Chicago",
            price=Money.of(600),
            rating=4.9,
            review_count=156,
            type="Tennis",
            image_url=_image("209977/pexels-photo-209977.jpeg"),
            images=_gallery(
                "209977/pexels-photo-209977.jpeg",
                "2403408/pexels-photo-2403408.jpeg",
                "2519217/pexels-photo-2519217.jpeg",
            ),
            amenities=(
                "Clubhouse",
                "Pro Shop",
                "Changing Rooms",
                "Showers",
                "Ball Machines",
                "Coaching Services",
            ),
            opening_hours=_hours("06:00 AM - 09:00 PM", "07:00 AM - 08:00 PM", "08:00 AM - 07:00 PM"),
            available_dates=_dates(15, 16, 17, 18, 19, 20),
            time_slots=(
                "06:00 AM - 07:00 AM",
                "07:00 AM - 08:00 AM",
                "08:00 AM - 09:00 AM",
                "09:00 AM - 10:00 AM",
                "10:00 AM - 11:00 AM",
                "11:00 AM - 12:00 PM",
                "01:00 PM - 02:00 PM",
                "02:00 PM - 03:00 PM",
                "03:00 PM - 04:00 PM",
            ),
            reviews=(
                Review(
                    id="301",
                    user_name="Robert Taylor",
                    user_avatar=_avatar("614810/pexels-photo-614810.jpeg"),
                    rating=5.0,
                    date=date(2024, 12, 8),
                    text="The best tennis facility in the city!",
                ),
                Review(
                    id="302",
                    user_name="Jennifer Clark",
                    user_avatar=_avatar("774909/pexels-photo-774909.jpeg"),
                    rating=4.7,
                    date=date(2024, 11, 30),
                    text="Excellent courts and amenities. The coaching services are top-notch.",
                ),
            ),
            owner_id="owner-1",
        ),
        Venue(
            id=VenueId("4"),
            name="Greenfield Cricket Stadium",
            description=(
                "Dedicated cricket facility with an international standard pitch, "
                "practice nets and seating for up to 15,000 people."
            ),
            location="Greenfield, Houston",
            price=Money.of(900),
            rating=4.5,
            review_count=120,
            type="Cricket",
            image_url=_image("3628912/pexels-photo-3628912.jpeg"),
            images=_gallery(
                "3628912/pexels-photo-3628912.jpeg",
                "163398/cricket-ball-wicket-stumps-163398.jpeg",
                "3532158/pexels-photo-3532158.jpeg",
            ),
            amenities=(
                "Practice Nets",
                "Changing Rooms",
                "Electronic Scoreboard",
                "Floodlights",
                "Spectator Seating",
                "Media Facilities",
            ),
            opening_hours=_hours("09:00 AM - 08:00 PM", "08:00 AM - 09:00 PM", "10:00 AM - 07:00 PM"),
            available_dates=_dates(17, 18, 19, 23, 24, 25),
            time_slots=(
                "09:00 AM - 11:00 AM",
                "11:00 AM - 01:00 PM",
                "01:00 PM - 03:00 PM",
                "03:00 PM - 05:00 PM",
                "05:00 PM - 07:00 PM",
            ),
            reviews=(
                Review(
                    id="401",
                    user_name="David Lee",
                    user_avatar=_avatar("220453/pexels-photo-220453.jpeg"),
                    rating=4.6,
                    date=date(2024, 12, 2),
                    text="Excellent cricket facility with great pitch conditions.",
                ),
                Review(
                    id="402",
                    user_name="Priya Sharma",
                    user_avatar=_avatar("415829/pexels-photo-415829.jpeg"),
                    rating=4.3,
                    date=date(2024, 11, 18),
                    text="Good stadium for local tournaments. The canteen options could be improved.",
                ),
            ),
            owner_id="owner-2",
        ),
        Venue(
            id=VenueId("5"),
            name="Diamond Baseball Park",
            description=(
                "Professional baseball stadium with seating for 25,000 spectators, "
                "premium dugouts, bullpens and batting cages."
            ),
            location="Southside, Philadelphia",
            price=Money.of(1500),
            rating=4.7,
            review_count=208,
            type="Baseball",
            image_url=_image("209841/pexels-photo-209841.jpeg"),
            images=_gallery(
                "209841/pexels-photo-209841.jpeg",
                "2570139/pexels-photo-2570139.jpeg",
                "2362868/pexels-photo-2362868.jpeg",
            ),
            amenities=(
                "Dugouts",
                "Bullpens",
                "Batting Cages",
                "Locker Rooms",
                "Concession Stands",
                "VIP Suites",
            ),
            opening_hours=_hours("08:00 AM - 10:00 PM", "09:00 AM - 11:00 PM", "10:00 AM - 09:00 PM"),
            available_dates=_dates(16, 17, 18, 21, 22, 23),
            time_slots=(
                "09:00 AM - 12:00 PM",
                "01:00 PM - 04:00 PM",
                "05:00 PM - 08:00 PM",
            ),
            reviews=(
                Review(
                    id="501",
                    user_name="Thomas Garcia",
                    user_avatar=_avatar("1222271/pexels-photo-1222271.jpeg"),
                    rating=4.9,
                    date=date(2024, 12, 12),
                    text="Incredible baseball stadium with excellent facilities.",
                ),
                Review(
                    id="502",
                    user_name="Amanda Wilson",
                    user_avatar=_avatar("1239291/pexels-photo-1239291.jpeg"),
                    rating=4.5,
                    date=date(2024, 11, 25),
                    text="Great venue for our college tournament. Would book again!",
                ),
            ),
            owner_id="owner-2",
        ),
    ]


def seed_bookings(venues: list[Venue]) -> list[Booking]:
    by_id = {venue.id.value: VenueRef.snapshot(venue) for venue in venues}
    rows = [
        ("1001", "1", date(2025, 1, 15), "09:00 AM - 11:00 AM", BookingStatus.CONFIRMED, 2400),
        ("1002", "2", date(2025, 1, 18), "02:00 PM - 04:00 PM", BookingStatus.PENDING, 1600),
        ("1003", "3", date(2024, 12, 10), "10:00 AM - 12:00 PM", BookingStatus.COMPLETED, 1200),
        ("1004", "4", date(2024, 12, 5), "01:00 PM - 03:00 PM", BookingStatus.CANCELLED, 1800),
        ("1005", "5", date(2025, 1, 21), "05:00 PM - 08:00 PM", BookingStatus.CONFIRMED, 4500),
    ]
    return [
        Booking(
            id=BookingId(booking_id),
            venue=by_id[venue_id],
            date=day,
            time=slot,
            status=status,
            total_price=Money.of(price),
            payment_method="card",
            customer="user-1",
        )
        for booking_id, venue_id, day, slot, status, price in rows
    ]


def seed_accounts() -> list[Principal]:
    return [
        Principal(id="user-1", name="John Doe", email="john@example.com", role=Role.USER),
        Principal(id="owner-1", name="Stadium Owner", email="owner@example.com", role=Role.OWNER),
        Principal(id="owner-2", name="Park Owner", email="parks@example.com", role=Role.OWNER),
        Principal(id="admin-1", name="Admin User", email="admin@example.com", role=Role.ADMIN),
    ]
