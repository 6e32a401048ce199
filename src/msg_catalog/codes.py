"""Constants for the codes in the bundled catalog."""

# authentication
AUTHENTICATION_FAILED = "AUTH_001"
UNAUTHORIZED_ACCESS = "AUTH_002"
LOGIN_SUCCESSFUL = "AUTH_003"
SESSION_EXPIRED = "AUTH_004"
INVALID_TOKEN = "AUTH_005"
ACCOUNT_LOCKED = "AUTH_006"
LOGOUT_SUCCESSFUL = "AUTH_007"
PASSWORD_RESET_REQUIRED = "AUTH_008"
INVALID_REFRESH_TOKEN = "AUTH_009"
MFA_REQUIRED = "AUTH_010"

# crud
CREATED_SUCCESSFULLY = "CRUD_001"
UPDATED_SUCCESSFULLY = "CRUD_002"
DELETED_SUCCESSFULLY = "CRUD_003"
RESOURCE_NOT_FOUND = "CRUD_004"
RETRIEVED_SUCCESSFULLY = "CRUD_005"
CREATION_FAILED = "CRUD_006"
UPDATE_FAILED = "CRUD_007"
DELETION_FAILED = "CRUD_008"
NO_CHANGES_DETECTED = "CRUD_009"
CONFLICT_DETECTED = "CRUD_010"

# validation
VALIDATION_FAILED = "VAL_001"
REQUIRED_FIELD_MISSING = "VAL_002"
INVALID_FORMAT = "VAL_003"
VALUE_OUT_OF_RANGE = "VAL_004"
INVALID_EMAIL = "VAL_005"
INVALID_PHONE_NUMBER = "VAL_006"
PASSWORD_TOO_WEAK = "VAL_007"
PASSWORDS_DONT_MATCH = "VAL_008"
INVALID_DATE = "VAL_009"
VALUE_TOO_SHORT = "VAL_010"
VALUE_TOO_LONG = "VAL_011"
INVALID_URL = "VAL_012"
INVALID_FILE_EXTENSION = "VAL_013"
DUPLICATE_VALUE = "VAL_014"
INVALID_CHARACTERS = "VAL_015"

# system
SYSTEM_ERROR = "SYS_001"
PROCESSING_REQUEST = "SYS_002"
SERVICE_DEGRADED = "SYS_003"
MAINTENANCE_MODE = "SYS_004"
OPERATION_COMPLETED = "SYS_005"
RATE_LIMIT_EXCEEDED = "SYS_006"
SERVICE_UNAVAILABLE = "SYS_007"
REQUEST_QUEUED = "SYS_008"
TIMEOUT = "SYS_009"
CONFIGURATION_ERROR = "SYS_010"

# database
DATABASE_CONNECTION_FAILED = "DB_001"
DUPLICATE_ENTRY = "DB_002"
FOREIGN_KEY_CONSTRAINT = "DB_003"
TRANSACTION_FAILED = "DB_004"
DATA_INTEGRITY_ERROR = "DB_005"
QUERY_TIMEOUT = "DB_006"
DEADLOCK_DETECTED = "DB_007"
MIGRATION_PENDING = "DB_008"

# files
FILE_UPLOADED_SUCCESSFULLY = "FILE_001"
INVALID_FILE_TYPE = "FILE_002"
FILE_TOO_LARGE = "FILE_003"
FILE_UPLOAD_FAILED = "FILE_004"
FILE_DOWNLOADED_SUCCESSFULLY = "FILE_005"
FILE_NOT_FOUND = "FILE_006"
FILE_ACCESS_DENIED = "FILE_007"
FILE_DELETED_SUCCESSFULLY = "FILE_008"
CORRUPTED_FILE = "FILE_009"
STORAGE_QUOTA_EXCEEDED = "FILE_010"
FILE_ALREADY_EXISTS = "FILE_011"
VIRUS_DETECTED = "FILE_012"

# network
NETWORK_ERROR = "NET_001"
REQUEST_TIMEOUT = "NET_002"
BAD_REQUEST = "NET_003"
SERVER_ERROR = "NET_004"
API_RATE_LIMIT_EXCEEDED = "NET_005"
CONNECTION_REFUSED = "NET_006"
SSL_CERTIFICATE_ERROR = "NET_007"
SLOW_CONNECTION = "NET_008"
GATEWAY_TIMEOUT = "NET_009"
CONNECTION_ESTABLISHED = "NET_010"

# payments
PAYMENT_SUCCESSFUL = "PAY_001"
PAYMENT_FAILED = "PAY_002"
INSUFFICIENT_FUNDS = "PAY_003"
CARD_DECLINED = "PAY_004"
INVALID_CARD_DETAILS = "PAY_005"
CARD_EXPIRED = "PAY_006"
REFUND_PROCESSED = "PAY_007"
REFUND_FAILED = "PAY_008"
PAYMENT_PENDING = "PAY_009"
TRANSACTION_LIMIT_EXCEEDED = "PAY_010"
PAYMENT_GATEWAY_ERROR = "PAY_011"
SUBSCRIPTION_ACTIVATED = "PAY_012"
SUBSCRIPTION_EXPIRING_SOON = "PAY_013"
SUBSCRIPTION_CANCELLED = "PAY_014"

# email
EMAIL_SENT_SUCCESSFULLY = "EMAIL_001"
EMAIL_DELIVERY_FAILED = "EMAIL_002"
EMAIL_VERIFIED = "EMAIL_003"
INVALID_VERIFICATION_LINK = "EMAIL_004"
VERIFICATION_EMAIL_SENT = "EMAIL_005"

# search
NO_RESULTS_FOUND = "SEARCH_001"
SEARCH_COMPLETED = "SEARCH_002"
TOO_MANY_RESULTS = "SEARCH_003"
INVALID_SEARCH_QUERY = "SEARCH_004"

# import
IMPORT_COMPLETED = "IMPORT_001"
IMPORT_FAILED = "IMPORT_002"
PARTIAL_IMPORT = "IMPORT_003"

# export
EXPORT_COMPLETED = "EXPORT_001"
EXPORT_FAILED = "EXPORT_002"
