"""National holiday lists used by the one-click import.

Lunar-calendar festivals move every year, so only years listed in
NATIONAL_HOLIDAYS_BY_YEAR get exact dates; other years fall back to a
template with approximate month/day values.
"""

from __future__ import annotations

from datetime import date

NATIONAL_HOLIDAYS_BY_YEAR: dict[int, list[tuple[str, str, str]]] = {
    2025: [
        ("2025-01-26", "Republic Day", "National holiday celebrating the adoption of the Constitution"),
        ("2025-02-26", "Maha Shivaratri", "Hindu festival"),
        ("2025-03-14", "Holi", "Festival of colors"),
        ("2025-04-06", "Ram Navami", "Birth of Lord Rama"),
        ("2025-04-10", "Mahavir Jayanti", "Jain festival"),
        ("2025-04-18", "Good Friday", "Christian holiday"),
        ("2025-05-12", "Buddha Purnima", "Birth of Gautama Buddha"),
        ("2025-08-15", "Independence Day", "National holiday celebrating independence from British rule"),
        ("2025-08-16", "Janmashtami", "Birth of Lord Krishna"),
        ("2025-10-02", "Gandhi Jayanti", "Birth anniversary of Mahatma Gandhi"),
        ("2025-10-02", "Dussehra", "Victory of good over evil"),
        ("2025-10-20", "Diwali", "Festival of lights"),
        ("2025-10-21", "Govardhan Puja", "Day after Diwali"),
        ("2025-11-05", "Guru Nanak Jayanti", "Birth of Guru Nanak"),
        ("2025-12-25", "Christmas", "Birth of Jesus Christ"),
    ],
}

# (month, day, name, description)
NATIONAL_HOLIDAY_TEMPLATE: list[tuple[int, int, str, str]] = [
    (1, 26, "Republic Day", "National holiday celebrating the adoption of the Constitution"),
    (3, 8, "Maha Shivaratri", "Hindu festival"),
    (3, 25, "Holi", "Festival of colors"),
    (4, 14, "Good Friday", "Christian holiday"),
    (4, 17, "Ram Navami", "Birth of Lord Rama"),
    (4, 21, "Mahavir Jayanti", "Jain festival"),
    (5, 23, "Buddha Purnima", "Birth of Gautama Buddha"),
    (8, 15, "Independence Day", "National holiday celebrating independence from British rule"),
    (8, 26, "Janmashtami", "Birth of Lord Krishna"),
    (10, 2, "Gandhi Jayanti", "Birth anniversary of Mahatma Gandhi"),
    (10, 12, "Dussehra", "Victory of good over evil"),
    (10, 31, "Diwali", "Festival of lights"),
    (11, 1, "Diwali (Second Day)", "Festival of lights - Day 2"),
    (11, 15, "Guru Nanak Jayanti", "Birth of Guru Nanak"),
    (12, 25, "Christmas", "Birth of Jesus Christ"),
]


def national_holidays(year: int) -> list[tuple[date, str, str]]:
    exact = NATIONAL_HOLIDAYS_BY_YEAR.get(int(year))
    if exact:
        return [(date.fromisoformat(d), name, desc) for d, name, desc in exact]
    return [(date(int(year), m, d), name, desc) for m, d, name, desc in NATIONAL_HOLIDAY_TEMPLATE]
