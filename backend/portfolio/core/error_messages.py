# portfolio/core/error_messages.py


class ErrorMessages:
    SERVER_ERROR = "Server error."
    VALIDATION_FAILED = "Invalid request data."
    MISSING_FIELDS = "Missing required fields: {fields}."
    INVALID_EMAIL = "Invalid email format."
    SMS_DISABLED = "SMS functionality is not currently enabled."
    SMS_NOT_IMPLEMENTED = "SMS functionality is not implemented yet."


class SuccessMessages:
    DELETED = "{resource} deleted successfully."
    CONTACT_RECEIVED = "Message received. Thank you for reaching out!"
