JOURNAL_MAX_LENGTH = 4000


def is_valid_journal_text(text: str) -> bool:
    return bool(text and text.strip()) and len(text) <= JOURNAL_MAX_LENGTH
