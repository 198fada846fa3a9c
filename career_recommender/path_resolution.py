import logging
import warnings
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import UnresolvedPathIdWarning
from .naive_bayes import PATH_KEYS, CareerPathCandidate
from .records import CatalogEntry

logger = logging.getLogger(__name__)

# internal key -> fragment expected in the catalog display name
NAME_FRAGMENTS: Dict[str, str] = {
    "fullstack": "Full Stack",
    "datascience": "Data Science",
    "cloud": "Cloud",
    "mobile": "Mobile",
    "security": "Cybersecurity",
}


def _resolve_by_name(key: str, catalog: Sequence[CatalogEntry]) -> Optional[str]:
    fragment = NAME_FRAGMENTS.get(key)
    if not fragment:
        return None
    for entry in catalog:
        if fragment in entry.name and entry.id:
            return entry.id
    return None


def _resolve_by_slug(key: str, catalog: Sequence[CatalogEntry]) -> Optional[str]:
    for entry in catalog:
        if entry.slug == key and entry.id:
            return entry.id
    return None


def build_path_id_mapping(
    catalog: Iterable[CatalogEntry],
    mode: str = "name",
    keys: Sequence[str] = PATH_KEYS,
) -> Dict[str, Optional[str]]:
    """
    Map every internal path key to a catalog id, or None when nothing matches.

    mode="name" reproduces the legacy display-name substring match.
    mode="slug" uses the catalog entry's stable slug instead.
    """
    entries = list(catalog)
    if mode == "name":
        resolve = _resolve_by_name
    elif mode == "slug":
        resolve = _resolve_by_slug
    else:
        raise ValueError(f"Unknown path resolution mode: {mode!r}")

    return {key: resolve(key, entries) for key in keys}


def apply_path_ids(
    candidates: Iterable[CareerPathCandidate],
    mapping: Dict[str, Optional[str]],
) -> tuple[List[CareerPathCandidate], List[str]]:
    """
    Attach catalog ids to scored candidates.
    Returns the new candidates and the keys that stayed unresolved.
    """
    resolved: List[CareerPathCandidate] = []
    unresolved: List[str] = []

    for c in candidates:
        path_id = mapping.get(c.path_key)
        if path_id is None:
            unresolved.append(c.path_key)
        resolved.append(replace(c, career_path_id=path_id))

    if unresolved:
        logger.warning("Career path keys not found in catalog: %s", ", ".join(unresolved))
        warnings.warn(
            f"Unresolved career path keys: {', '.join(unresolved)}",
            UnresolvedPathIdWarning,
            stacklevel=2,
        )

    return resolved, unresolved
