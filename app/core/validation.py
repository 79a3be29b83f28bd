from typing import Dict, Iterable, List

# Location prefixes FastAPI puts in front of the field name
_SOURCES = ("body", "path", "query")


def error_messages(errors: Iterable[dict]) -> Dict[str, List[str]]:
    """
    Group pydantic error entries into a field -> reasons map.

    An error with no field location (e.g. the body is not an object) is
    reported under "body".
    """
    messages: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _SOURCES and len(loc) > 1:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        # string_rules errors carry every failed rule in ctx["reasons"]
        reasons = (error.get("ctx") or {}).get("reasons") or [error["msg"]]
        messages.setdefault(field, []).extend(reasons)
    return messages
