def to_uppercase(value: str | None) -> str | None:
    """
    Upper-case and strip a raw environment value, passing None through.
    """
    if value is None:
        return None
    return value.strip().upper()


def to_lowercase(value: str | None) -> str | None:
    """
    Lower-case and strip a raw environment value, passing None through.
    """
    if value is None:
        return None
    return value.strip().lower()
