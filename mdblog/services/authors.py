from typing import Any, Iterable, List, Optional, Sequence

from mdblog.schemas.blog import Author, AuthorRef
from mdblog.services.frontmatter_fields import is_author_object


def resolve_author_from_config(
    name: str, roster: Optional[Sequence[Author]] = None
) -> AuthorRef:
    """
    Look ``name`` up in the roster by full name, ignoring case.

    Returns the roster entry on a match and the bare name otherwise. There is
    no partial matching: "John" never resolves to "John Doe".
    """
    if not roster:
        return name

    wanted = name.lower()
    for author in roster:
        if author.name.lower() == wanted:
            return author
    return name


def extract_author_name(item: Any) -> Optional[str]:
    if isinstance(item, str):
        return item.strip() or None
    if is_author_object(item):
        return item["name"].strip() or None
    if isinstance(item, Author):
        return item.name.strip() or None
    return None


def _collect_names(value: Any) -> List[str]:
    if value is None:
        return []
    items: Iterable[Any] = value if isinstance(value, (list, tuple)) else [value]
    names = []
    for item in items:
        name = extract_author_name(item)
        if name:
            names.append(name)
    return names


def normalize_authors(
    author: Any = None,
    authors: Any = None,
    roster: Optional[Sequence[Author]] = None,
) -> List[AuthorRef]:
    """
    Merge the ``authors`` and legacy ``author`` frontmatter fields.

    Both accept a name, a ``{name: ...}`` mapping, or a list of either. Names
    from ``authors`` come first, duplicates keep their first position, and
    each name is then resolved against the roster. Extra keys on inline
    mappings (an ``affiliation``, say) are not carried over.
    """
    collected = _collect_names(authors) + _collect_names(author)

    unique: List[str] = []
    for name in collected:
        if name not in unique:
            unique.append(name)

    return [resolve_author_from_config(name, roster) for name in unique]


def resolve_default_author(
    default_author: Optional[str], roster: Optional[Sequence[Author]] = None
) -> Optional[AuthorRef]:
    if not default_author:
        return None
    return resolve_author_from_config(default_author, roster)


def ensure_authors_resolved(
    authors: Sequence[AuthorRef], roster: Optional[Sequence[Author]] = None
) -> List[AuthorRef]:
    """Resolve any bare names left in ``authors``; Author entries pass through."""
    if not roster:
        return list(authors)
    return [
        author if isinstance(author, Author) else resolve_author_from_config(author, roster)
        for author in authors
    ]


def get_author_name(author: AuthorRef) -> str:
    return author if isinstance(author, str) else author.name


def get_author_names(authors: Sequence[AuthorRef]) -> List[str]:
    return [get_author_name(author) for author in authors]


def _as_handle(handle: str) -> str:
    return "@" + handle.replace("@", "", 1)


def select_twitter_creator(
    authors: Sequence[AuthorRef], site_handle: Optional[str] = None
) -> Optional[str]:
    """
    Pick the ``@handle`` credited on social cards.

    Only the first author is considered; without a handle there the site
    handle is used.
    """
    if authors:
        first = authors[0]
        if isinstance(first, Author) and first.twitter:
            return _as_handle(first.twitter)
    if site_handle:
        return _as_handle(site_handle)
    return None


def authors_for_post(
    post_authors: Sequence[AuthorRef],
    default_author: Optional[str],
    roster: Optional[Sequence[Author]] = None,
) -> List[AuthorRef]:
    """The post's own authors, or the site default author when it has none."""
    if post_authors:
        chosen: Sequence[AuthorRef] = post_authors
    else:
        fallback = resolve_default_author(default_author, roster)
        chosen = [fallback] if fallback else []
    return ensure_authors_resolved(chosen, roster)
