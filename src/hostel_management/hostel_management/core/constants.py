"""Defaults shared by services, seed data and settings."""

DEFAULT_SESSION_DAYS = 7
DEFAULT_TABLE_NAME = "hostel-management"

OTP_LENGTH = 6
OTP_EXPIRY_MINUTES = 10
OTP_MAX_ATTEMPTS = 5

DEFAULT_ROOM_CAPACITY = 2
DEFAULT_ROOM_FLOOR = 1
DEFAULT_ROOM_TYPE = "double"

NOT_ASSIGNED = "Not Assigned"
ADMIN_APPROVER = "Admin"

TOP_N_STATISTICS = 5
MAINTENANCE_TREND_MONTHS = 5
FOOD_CATEGORIES = ("Breakfast", "Lunch", "Dinner", "Snacks")
