"""Shortcuts for the bundled codes, grouped by category.

Every call resolves through the process-wide registry, so custom stores
configured there apply here too.

    Msg.Auth.login_failed()
    Msg.Crud.created("User")
    Msg.Validation.required_field("Email").to_json()
    Msg.custom("APP_001")
"""

from typing import Any

from msg_catalog import codes
from msg_catalog.message_model import Message
from msg_catalog.registry import get_message


def _with_params(code: str, **params: Any) -> Message:
    """Resolve code and substitute the params that are not None."""
    return get_message(code).with_params_if_provided(params)


class AuthMessages:
    @staticmethod
    def login_failed() -> Message:
        return get_message(codes.AUTHENTICATION_FAILED)

    @staticmethod
    def unauthorized() -> Message:
        return get_message(codes.UNAUTHORIZED_ACCESS)

    @staticmethod
    def login_success() -> Message:
        return get_message(codes.LOGIN_SUCCESSFUL)

    @staticmethod
    def session_expired() -> Message:
        return get_message(codes.SESSION_EXPIRED)

    @staticmethod
    def invalid_token() -> Message:
        return get_message(codes.INVALID_TOKEN)

    @staticmethod
    def account_locked() -> Message:
        return get_message(codes.ACCOUNT_LOCKED)

    @staticmethod
    def logout_success() -> Message:
        return get_message(codes.LOGOUT_SUCCESSFUL)

    @staticmethod
    def password_reset_required() -> Message:
        return get_message(codes.PASSWORD_RESET_REQUIRED)

    @staticmethod
    def invalid_refresh_token() -> Message:
        return get_message(codes.INVALID_REFRESH_TOKEN)

    @staticmethod
    def mfa_required() -> Message:
        return get_message(codes.MFA_REQUIRED)


class CrudMessages:
    """Create, update and delete outcomes; resource fills {resource}."""

    @staticmethod
    def created(resource: str | None = None) -> Message:
        return _with_params(codes.CREATED_SUCCESSFULLY, resource=resource)

    @staticmethod
    def updated(resource: str | None = None) -> Message:
        return _with_params(codes.UPDATED_SUCCESSFULLY, resource=resource)

    @staticmethod
    def deleted(resource: str | None = None) -> Message:
        return _with_params(codes.DELETED_SUCCESSFULLY, resource=resource)

    @staticmethod
    def not_found(resource: str | None = None) -> Message:
        return _with_params(codes.RESOURCE_NOT_FOUND, resource=resource)

    @staticmethod
    def retrieved(resource: str | None = None) -> Message:
        return _with_params(codes.RETRIEVED_SUCCESSFULLY, resource=resource)

    @staticmethod
    def creation_failed(resource: str | None = None) -> Message:
        return _with_params(codes.CREATION_FAILED, resource=resource)

    @staticmethod
    def update_failed(resource: str | None = None) -> Message:
        return _with_params(codes.UPDATE_FAILED, resource=resource)

    @staticmethod
    def deletion_failed(resource: str | None = None) -> Message:
        return _with_params(codes.DELETION_FAILED, resource=resource)

    @staticmethod
    def no_changes(resource: str | None = None) -> Message:
        return _with_params(codes.NO_CHANGES_DETECTED, resource=resource)

    @staticmethod
    def conflict(resource: str | None = None) -> Message:
        return _with_params(codes.CONFLICT_DETECTED, resource=resource)


class ValidationMessages:
    @staticmethod
    def failed() -> Message:
        return get_message(codes.VALIDATION_FAILED)

    @staticmethod
    def required_field(field: str | None = None) -> Message:
        return _with_params(codes.REQUIRED_FIELD_MISSING, field=field)

    @staticmethod
    def invalid_format(field: str | None = None) -> Message:
        return _with_params(codes.INVALID_FORMAT, field=field)

    @staticmethod
    def out_of_range(field: str | None = None, min: Any = None, max: Any = None) -> Message:
        return _with_params(codes.VALUE_OUT_OF_RANGE, field=field, min=min, max=max)

    @staticmethod
    def invalid_email() -> Message:
        return get_message(codes.INVALID_EMAIL)

    @staticmethod
    def invalid_phone_number() -> Message:
        return get_message(codes.INVALID_PHONE_NUMBER)

    @staticmethod
    def password_too_weak() -> Message:
        return get_message(codes.PASSWORD_TOO_WEAK)

    @staticmethod
    def passwords_dont_match() -> Message:
        return get_message(codes.PASSWORDS_DONT_MATCH)

    @staticmethod
    def invalid_date(field: str | None = None) -> Message:
        return _with_params(codes.INVALID_DATE, field=field)

    @staticmethod
    def too_short(field: str | None = None, min_length: int | None = None) -> Message:
        return _with_params(codes.VALUE_TOO_SHORT, field=field, minLength=min_length)

    @staticmethod
    def too_long(field: str | None = None, max_length: int | None = None) -> Message:
        return _with_params(codes.VALUE_TOO_LONG, field=field, maxLength=max_length)

    @staticmethod
    def invalid_url() -> Message:
        return get_message(codes.INVALID_URL)

    @staticmethod
    def invalid_file_extension(field: str | None = None, type: str | None = None) -> Message:
        return _with_params(codes.INVALID_FILE_EXTENSION, field=field, type=type)

    @staticmethod
    def duplicate_value(value: Any = None) -> Message:
        return _with_params(codes.DUPLICATE_VALUE, value=value)

    @staticmethod
    def invalid_characters(field: str | None = None) -> Message:
        return _with_params(codes.INVALID_CHARACTERS, field=field)


class SystemMessages:
    @staticmethod
    def error() -> Message:
        return get_message(codes.SYSTEM_ERROR)

    @staticmethod
    def processing() -> Message:
        return get_message(codes.PROCESSING_REQUEST)

    @staticmethod
    def degraded() -> Message:
        return get_message(codes.SERVICE_DEGRADED)

    @staticmethod
    def maintenance() -> Message:
        return get_message(codes.MAINTENANCE_MODE)

    @staticmethod
    def completed() -> Message:
        return get_message(codes.OPERATION_COMPLETED)

    @staticmethod
    def rate_limit_exceeded() -> Message:
        return get_message(codes.RATE_LIMIT_EXCEEDED)

    @staticmethod
    def unavailable() -> Message:
        return get_message(codes.SERVICE_UNAVAILABLE)

    @staticmethod
    def queued() -> Message:
        return get_message(codes.REQUEST_QUEUED)

    @staticmethod
    def timeout() -> Message:
        return get_message(codes.TIMEOUT)

    @staticmethod
    def configuration_error() -> Message:
        return get_message(codes.CONFIGURATION_ERROR)


class DatabaseMessages:
    @staticmethod
    def connection_failed() -> Message:
        return get_message(codes.DATABASE_CONNECTION_FAILED)

    @staticmethod
    def duplicate_entry(resource: str | None = None, field: str | None = None) -> Message:
        return _with_params(codes.DUPLICATE_ENTRY, resource=resource, field=field)

    @staticmethod
    def foreign_key_constraint() -> Message:
        return get_message(codes.FOREIGN_KEY_CONSTRAINT)

    @staticmethod
    def transaction_failed() -> Message:
        return get_message(codes.TRANSACTION_FAILED)

    @staticmethod
    def integrity_error() -> Message:
        return get_message(codes.DATA_INTEGRITY_ERROR)

    @staticmethod
    def query_timeout() -> Message:
        return get_message(codes.QUERY_TIMEOUT)

    @staticmethod
    def deadlock() -> Message:
        return get_message(codes.DEADLOCK_DETECTED)

    @staticmethod
    def migration_pending() -> Message:
        return get_message(codes.MIGRATION_PENDING)


class FileMessages:
    """File outcomes; file_name fills {fileName}."""

    @staticmethod
    def uploaded(file_name: str | None = None) -> Message:
        return _with_params(codes.FILE_UPLOADED_SUCCESSFULLY, fileName=file_name)

    @staticmethod
    def invalid_type(*allowed_types: str) -> Message:
        return _with_params(codes.INVALID_FILE_TYPE, allowedTypes=", ".join(allowed_types) or None)

    @staticmethod
    def too_large(max_size: str | None = None) -> Message:
        return _with_params(codes.FILE_TOO_LARGE, maxSize=max_size)

    @staticmethod
    def upload_failed(file_name: str | None = None) -> Message:
        return _with_params(codes.FILE_UPLOAD_FAILED, fileName=file_name)

    @staticmethod
    def downloaded(file_name: str | None = None) -> Message:
        return _with_params(codes.FILE_DOWNLOADED_SUCCESSFULLY, fileName=file_name)

    @staticmethod
    def not_found(file_name: str | None = None) -> Message:
        return _with_params(codes.FILE_NOT_FOUND, fileName=file_name)

    @staticmethod
    def access_denied(file_name: str | None = None) -> Message:
        return _with_params(codes.FILE_ACCESS_DENIED, fileName=file_name)

    @staticmethod
    def deleted(file_name: str | None = None) -> Message:
        return _with_params(codes.FILE_DELETED_SUCCESSFULLY, fileName=file_name)

    @staticmethod
    def corrupted(file_name: str | None = None) -> Message:
        return _with_params(codes.CORRUPTED_FILE, fileName=file_name)

    @staticmethod
    def quota_exceeded() -> Message:
        return get_message(codes.STORAGE_QUOTA_EXCEEDED)

    @staticmethod
    def already_exists(file_name: str | None = None) -> Message:
        return _with_params(codes.FILE_ALREADY_EXISTS, fileName=file_name)

    @staticmethod
    def virus_detected(file_name: str | None = None) -> Message:
        return _with_params(codes.VIRUS_DETECTED, fileName=file_name)


class NetworkMessages:
    @staticmethod
    def error() -> Message:
        return get_message(codes.NETWORK_ERROR)

    @staticmethod
    def timeout() -> Message:
        return get_message(codes.REQUEST_TIMEOUT)

    @staticmethod
    def bad_request() -> Message:
        return get_message(codes.BAD_REQUEST)

    @staticmethod
    def server_error() -> Message:
        return get_message(codes.SERVER_ERROR)

    @staticmethod
    def rate_limit_exceeded() -> Message:
        return get_message(codes.API_RATE_LIMIT_EXCEEDED)

    @staticmethod
    def connection_refused() -> Message:
        return get_message(codes.CONNECTION_REFUSED)

    @staticmethod
    def ssl_error() -> Message:
        return get_message(codes.SSL_CERTIFICATE_ERROR)

    @staticmethod
    def slow_connection() -> Message:
        return get_message(codes.SLOW_CONNECTION)

    @staticmethod
    def gateway_timeout() -> Message:
        return get_message(codes.GATEWAY_TIMEOUT)

    @staticmethod
    def connected(service: str | None = None) -> Message:
        return _with_params(codes.CONNECTION_ESTABLISHED, service=service)


class PaymentMessages:
    @staticmethod
    def successful(amount: Any = None) -> Message:
        return _with_params(codes.PAYMENT_SUCCESSFUL, amount=amount)

    @staticmethod
    def failed() -> Message:
        return get_message(codes.PAYMENT_FAILED)

    @staticmethod
    def insufficient_funds() -> Message:
        return get_message(codes.INSUFFICIENT_FUNDS)

    @staticmethod
    def card_declined() -> Message:
        return get_message(codes.CARD_DECLINED)

    @staticmethod
    def invalid_card() -> Message:
        return get_message(codes.INVALID_CARD_DETAILS)

    @staticmethod
    def card_expired() -> Message:
        return get_message(codes.CARD_EXPIRED)

    @staticmethod
    def refund_processed(amount: Any = None) -> Message:
        return _with_params(codes.REFUND_PROCESSED, amount=amount)

    @staticmethod
    def refund_failed() -> Message:
        return get_message(codes.REFUND_FAILED)

    @staticmethod
    def pending() -> Message:
        return get_message(codes.PAYMENT_PENDING)

    @staticmethod
    def limit_exceeded(limit: Any = None) -> Message:
        return _with_params(codes.TRANSACTION_LIMIT_EXCEEDED, limit=limit)

    @staticmethod
    def gateway_error() -> Message:
        return get_message(codes.PAYMENT_GATEWAY_ERROR)

    @staticmethod
    def subscription_activated() -> Message:
        return get_message(codes.SUBSCRIPTION_ACTIVATED)

    @staticmethod
    def subscription_expiring(expiry_date: Any = None) -> Message:
        return _with_params(codes.SUBSCRIPTION_EXPIRING_SOON, expiryDate=expiry_date)

    @staticmethod
    def subscription_cancelled() -> Message:
        return get_message(codes.SUBSCRIPTION_CANCELLED)


class EmailMessages:
    @staticmethod
    def sent(recipient: str | None = None) -> Message:
        return _with_params(codes.EMAIL_SENT_SUCCESSFULLY, recipient=recipient)

    @staticmethod
    def delivery_failed(recipient: str | None = None) -> Message:
        return _with_params(codes.EMAIL_DELIVERY_FAILED, recipient=recipient)

    @staticmethod
    def verified() -> Message:
        return get_message(codes.EMAIL_VERIFIED)

    @staticmethod
    def invalid_verification_link() -> Message:
        return get_message(codes.INVALID_VERIFICATION_LINK)

    @staticmethod
    def verification_sent(email: str | None = None) -> Message:
        return _with_params(codes.VERIFICATION_EMAIL_SENT, email=email)


class SearchMessages:
    @staticmethod
    def no_results(query: str | None = None) -> Message:
        return _with_params(codes.NO_RESULTS_FOUND, query=query)

    @staticmethod
    def completed(count: int | None = None, query: str | None = None) -> Message:
        return _with_params(codes.SEARCH_COMPLETED, count=count, query=query)

    @staticmethod
    def too_many_results() -> Message:
        return get_message(codes.TOO_MANY_RESULTS)

    @staticmethod
    def invalid_query() -> Message:
        return get_message(codes.INVALID_SEARCH_QUERY)


class ImportMessages:
    @staticmethod
    def completed(count: int | None = None) -> Message:
        return _with_params(codes.IMPORT_COMPLETED, count=count)

    @staticmethod
    def failed(file_name: str | None = None) -> Message:
        return _with_params(codes.IMPORT_FAILED, fileName=file_name)

    @staticmethod
    def partial(success_count: int | None = None, total_count: int | None = None) -> Message:
        return _with_params(codes.PARTIAL_IMPORT, successCount=success_count, totalCount=total_count)


class ExportMessages:
    @staticmethod
    def completed(count: int | None = None, file_name: str | None = None) -> Message:
        return _with_params(codes.EXPORT_COMPLETED, count=count, fileName=file_name)

    @staticmethod
    def failed() -> Message:
        return get_message(codes.EXPORT_FAILED)


class Msg:
    """Entry point grouping the category shortcuts."""

    Auth = AuthMessages
    Crud = CrudMessages
    Validation = ValidationMessages
    System = SystemMessages
    Database = DatabaseMessages
    File = FileMessages
    Network = NetworkMessages
    Payment = PaymentMessages
    Email = EmailMessages
    Search = SearchMessages
    Import = ImportMessages
    Export = ExportMessages

    @staticmethod
    def custom(code: str) -> Message:
        """Resolve any code, bundled or custom."""
        return get_message(code)
