"""Reviews API permissions."""

from user_auth_app.api.permissions import IsCustomer


class IsCustomerReviewer(IsCustomer):
    """Only customers may write reviews; other roles get 403."""

    message = "Only customers can write reviews."
