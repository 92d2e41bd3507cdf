"""Query variant builder.

Turns raw input text into ordered (query, source text) candidates using the
deinflection provider. Every deinflected form the provider returns becomes
a variant, deduplicated by query and in provider order; the trimmed input is
always appended as the final fallback.
"""

import logging

from domain.model.entry import QueryVariant
from port.deinflection import DeinflectionOptions, DeinflectionPort

logger = logging.getLogger(__name__)


def _make_variant(query: str | None, source_text: str | None) -> QueryVariant | None:
    normalized_query = (query or "").strip()
    if not normalized_query:
        return None
    normalized_source = (source_text or normalized_query).strip()
    return QueryVariant(
        query=normalized_query,
        source_text=normalized_source,
        original_text_length=len(normalized_source),
    )


async def build_query_variants(
    text: str,
    language: str,
    deinflection: DeinflectionPort | None = None,
    options: DeinflectionOptions | None = None,
) -> list[QueryVariant]:
    """Build the ordered variant list for one language.

    Provider failures are swallowed; the raw-text variant is always present
    when text is non-blank.
    """
    variants: list[QueryVariant] = []
    seen: set[str] = set()

    def push(query: str | None, source_text: str | None) -> None:
        variant = _make_variant(query, source_text)
        if variant is None or variant.query in seen:
            return
        seen.add(variant.query)
        variants.append(variant)

    if deinflection is not None:
        try:
            text_variants = await deinflection.get_text_variants(
                text, language, options or DeinflectionOptions(),
            )
            for text_variant in text_variants:
                push(text_variant.deinflected_text, text_variant.original_text)
        except Exception as e:
            logger.debug(
                "Deinflection failed, using raw query",
                extra={"language": language, "error_type": type(e).__name__},
            )

    push(text, text)
    return variants
