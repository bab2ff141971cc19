"""Country-code constants used by classification and event filtering."""

# Holidays reported under these countries are treated as global-impact rather
# than local. The set is a heuristic stand-in for worldwide cultural or
# religious observance (Jewish, Muslim/MENA and Lunar calendars).
DEFAULT_PROXY_HUBS: frozenset[str] = frozenset({"IL", "AE", "CN"})

# Industry events stored under this code match every target country.
GLOBAL_COUNTRY_CODE = "Global"
