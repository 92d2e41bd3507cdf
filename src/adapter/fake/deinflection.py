"""In-memory implementation of DeinflectionPort for testing."""

from port.deinflection import DeinflectionOptions, TextVariant


class FakeDeinflectionAdapter:
    """Fake analyzer that returns preconfigured variants, or raises."""

    def __init__(
        self,
        variants: list[tuple[str, str]] | None = None,
        error: Exception | None = None,
    ):
        self.variants = variants or []
        self.error = error
        self.calls: list[tuple[str, str, DeinflectionOptions]] = []

    async def get_text_variants(
        self, text: str, language: str, options: DeinflectionOptions,
    ) -> list[TextVariant]:
        self.calls.append((text, language, options))
        if self.error:
            raise self.error
        return [
            TextVariant(original_text=original, deinflected_text=deinflected)
            for original, deinflected in self.variants
        ]
