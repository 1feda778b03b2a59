"""Constants for Account model field names"""


class AccountFields:
    """Field name constants for Account model"""
    ID = "user_id"
    USERNAME = "username"
    PASSWORD_HASH = "password_hash"
    PROFILE_COMPLETE = "profile_complete"

    FULL_NAME = "full_name"
    ADDRESS_1 = "address_1"
    ADDRESS_2 = "address_2"
    CITY = "city"
    STATE = "state"
    ZIPCODE = "zipcode"

    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
