"""User-facing result messages returned by handlers.

Success messages are the ``data`` of mutating operations; failure messages
become ``DomainError.message`` values.
"""


class AuthMessages:
    """Registration and login messages."""

    REGISTER_SUCCESS = "Register user success"
    EMAIL_ALREADY_REGISTERED = "This email has been registered"
    INVALID_CREDENTIALS = "Email or password is incorrect"
    EMAIL_NOT_REGISTERED = "This email has not been registered"


class UserProfileMessages:
    """Profile management messages."""

    UPDATE_SUCCESS = "Update account success"
    REMOVE_SUCCESS = "Remove account success"
    NOT_FOUND_BY_ID = "No find UserProfile with ID {user_profile_id}"
    NOT_FOUND_BY_EMAIL = "No find UserProfile with email {email}"


class ProductMessages:
    """Product management messages."""

    CREATE_SUCCESS = "Create product success"
    UPDATE_SUCCESS = "Update product success"
    DELETE_SUCCESS = "Delete product success"
    NOT_FOUND_BY_ID = "No find Product with ID {product_id}"
    FILE_EMPTY = "File cannot be empty"
    FILE_UNREADABLE = "File is not a readable spreadsheet"
    PRODUCT_IDS_EMPTY = "List of product id cannot be empty"
