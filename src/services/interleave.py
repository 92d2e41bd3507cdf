"""Cross-language result merging."""

from domain.model.entry import DictionaryEntry, LanguageResult


def interleave_language_entries(
    language_results: list[LanguageResult], max_results: int,
) -> list[DictionaryEntry]:
    """Merge per-language ranked lists round-robin by rank.

    Takes rank 0 from every language in order, then rank 1, and so on,
    skipping exhausted languages, until max_results entries are collected
    or a full round adds nothing.
    """
    merged: list[DictionaryEntry] = []
    rank = 0
    added = True
    while len(merged) < max_results and added:
        added = False
        for language_result in language_results:
            if rank < len(language_result.entries):
                merged.append(language_result.entries[rank])
                added = True
                if len(merged) >= max_results:
                    break
        rank += 1
    return merged


def resolve_original_text_length(
    language_results: list[LanguageResult],
    entries: list[DictionaryEntry],
    query: str,
) -> int:
    """Length of input the merged result covers.

    First nonzero of: the longest per-language length; the longest known
    entry match length or headword term length; the query length.
    """
    longest = max((result.original_text_length for result in language_results), default=0)
    if longest > 0:
        return longest

    for entry in entries:
        if entry.metadata.match_length:
            longest = max(longest, entry.metadata.match_length)
        elif entry.headwords:
            longest = max(longest, len(entry.headwords[0].term))
    if longest > 0:
        return longest

    return len(query)
