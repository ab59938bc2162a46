"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

REGULAR_DAY_MINUTES = 8 * 60
OVERTIME_TIER1_MINUTES = 2 * 60
DOUBLE_PAY_MULTIPLIER = Decimal("2")

DEFAULT_HOURLY_RATE = Decimal("200")
DEFAULT_OVERTIME_MULTIPLIER1 = Decimal("1.34")
DEFAULT_OVERTIME_MULTIPLIER2 = Decimal("1.67")
DEFAULT_BREAK_MINUTES = 60
DEFAULT_SETTLEMENT_DAY = 25

RECORDS_KEY = "salary_records"
SETTINGS_KEY = "salary_settings"
