"""Error types raised by the voice search pipeline."""


class VoiceSearchError(Exception):
    """Base error carrying a message safe to speak back to the shopper."""

    def __init__(self, message: str, user_message: str):
        self.message = message
        self.user_message = user_message
        super().__init__(self.message)


class CatalogUnavailable(VoiceSearchError):
    """The product catalog could not be reached, answered with an error, or timed out."""

    def __init__(self, message: str, original_error: Exception | None = None):
        self.original_error = original_error
        super().__init__(
            message,
            "عذراً، لا يمكننا الوصول إلى المتجر حالياً. حاولي مرة أخرى بعد قليل.",
        )
