from shopfront.domain.user.exceptions import MissingFieldError


def normalize_name(name: str | None) -> str:
    """Strip a display name, rejecting missing or blank values."""
    if not name or not name.strip():
        raise MissingFieldError("name")
    return name.strip()
