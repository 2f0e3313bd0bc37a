class NoValidPricesError(Exception):
    def __init__(self, message: str = "No valid prices found"):
        self.message = message
        super().__init__(message)


class PageVerificationError(Exception):
    def __init__(self, message: str, page_name: str | None = None):
        self.message = message
        self.page_name = page_name
        super().__init__(message)


class PhoneNumberNotFoundError(PageVerificationError):
    def __init__(self, expected: str, page_name: str | None = None):
        self.expected = expected
        super().__init__(
            f"Expected phone number '{expected}' was not found on the page",
            page_name=page_name,
        )
