SECRET_KEY = "test-secret"
ADMIN_PASSWORD = "admin-test-password"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORE_BACKEND = "memory"
DYNAMODB_TABLE_NAME = "hostel-management-test"
AWS_REGION = "us-east-1"

SMTP_HOST = ""
EMAIL_FROM = "test@localhost"

OTP_EXPIRY_MINUTES = 10
OTP_MAX_ATTEMPTS = 5
SESSION_DAYS = 7

AUTO_INIT_DB = False
AUTO_SEED_DB = False
