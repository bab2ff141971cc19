"""Major cultural observances with cross-border business impact.

Holidays are matched by case-insensitive keyword against the holiday name,
so "Eid al-Fitr (Day 2)" and "Chinese Lunar New Year's Eve" both resolve.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CulturalObservance:
    """A recurring observance and the markets it affects."""

    name: str
    segment: str
    note: str
    affected_markets: tuple[str, ...]


GLOBAL_OBSERVANCES: dict[str, CulturalObservance] = {
    "Passover": CulturalObservance(
        name="Passover / Pesach",
        segment="Global Jewish Audience",
        note=(
            "Reach into Jewish communities globally is significantly reduced. Expect no "
            "business activity in Israel and reduced engagement in the US and London hubs."
        ),
        affected_markets=("IL", "US", "GB", "FR"),
    ),
    "Eid al-Fitr": CulturalObservance(
        name="Eid al-Fitr",
        segment="Muslim & MENA Markets",
        note=(
            "Marks the end of Ramadan. Expect office closures across MENA and "
            "significant impact on global Muslim audience segments."
        ),
        affected_markets=("AE", "SA", "TR", "EG", "ID", "MY", "GB", "FR"),
    ),
    "Lunar New Year": CulturalObservance(
        name="Lunar New Year / Spring Festival",
        segment="APAC & Global Diaspora",
        note=(
            "Dominant impact on APAC supply chains and corporate teams. High travel "
            "volume and office closures for 3-7 days in key Asian markets."
        ),
        affected_markets=("CN", "SG", "VN", "MY", "KR", "AU", "US", "CA"),
    ),
    "Diwali": CulturalObservance(
        name="Diwali",
        segment="Indian & Hindu Markets",
        note=(
            "Festival of Lights. Extensive impact on Indian markets and the South Asian "
            "diaspora. High retail activity but low corporate response."
        ),
        affected_markets=("IN", "SG", "GB", "CA", "US", "AU"),
    ),
}


def get_global_impact(holiday_name: str) -> CulturalObservance | None:
    """Return the observance whose keyword appears in ``holiday_name``, if any."""
    if not holiday_name:
        return None
    lowered = holiday_name.lower()
    for keyword, observance in GLOBAL_OBSERVANCES.items():
        if keyword.lower() in lowered:
            return observance
    return None
