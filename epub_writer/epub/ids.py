from collections.abc import Iterable


def next_item_id(existing_ids: Iterable[str], prefix: str = "R") -> str:
    # IDs can't start with a digit, hence the prefix
    max_id = 0
    for item_id in existing_ids:
        suffix = _numeric_suffix(item_id, prefix)
        if suffix is not None and suffix > max_id:
            max_id = suffix
    return f"{prefix}{max_id + 1}"


def next_creator_id(existing_ids: Iterable[str], prefix: str = "creator") -> str:
    max_id = 0
    for creator_id in existing_ids:
        if creator_id == prefix:
            suffix = 1
        else:
            suffix = _numeric_suffix(creator_id, prefix)
        if suffix is not None and suffix > max_id:
            max_id = suffix

    if max_id == 0:
        return prefix
    return f"{prefix}{max_id + 1}"


def _numeric_suffix(value: str, prefix: str) -> int | None:
    if not value.startswith(prefix):
        return None
    suffix = value[len(prefix) :]
    if not suffix.isascii() or not suffix.isdigit():
        return None
    return int(suffix)
