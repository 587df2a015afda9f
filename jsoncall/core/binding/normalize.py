# jsoncall/core/binding/normalize.py


def normalize(s: str) -> str:
    """
    Return a JSON array string to be used as parameters.

    A bare scalar or object is wrapped so single-argument calls may omit
    the brackets. Well-formedness is not checked here.

    Example:
        >>> normalize(' 5 ')
        '[5]'
    """
    s = s.strip()
    if s.startswith("["):
        return s
    return "[" + s + "]"
