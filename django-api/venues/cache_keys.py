"""Cache keys for API responses."""

from urllib.parse import quote

VENUE_LIST_PREFIX = "venues:list"


def venue_list(query: str, category: str) -> str:
    return f"{VENUE_LIST_PREFIX}:{quote(query.lower(), safe='')}:{quote(category.lower(), safe='')}"


def venue_detail(venue_id: str) -> str:
    return f"venues:{venue_id}"


def owner_dashboard(owner_id: str) -> str:
    return f"dashboard:owner:{owner_id}"


def admin_dashboard() -> str:
    return "dashboard:admin"
