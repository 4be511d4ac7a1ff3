"""IncludeTreeBuilder — ``include`` values -> forest of ``Include`` nodes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import DEFAULT_KEYWORDS, QueryKeywords
from .model import Include

if TYPE_CHECKING:
    from .model import Values

_logger = logging.getLogger(__name__)

RELATION_DELIMITER = ","
NESTED_RELATION_DELIMITER = "."


class IncludeTreeBuilder:
    """
    Build the inclusion hierarchy from every ``include`` value.

    ``include=author,comments.author,comments.replies`` produces::

        author
        comments
        ├── author
        └── replies

    Chains arriving in later fragments are merged into the nodes that
    already exist, so ``include=author&include=author.avatar`` yields a
    single ``author`` root with an ``avatar`` child. Siblings keep the
    order in which they were first seen.
    """

    def __init__(self, keywords: QueryKeywords = DEFAULT_KEYWORDS) -> None:
        self._key = keywords.include

    def build(self, values: Values) -> tuple[Include, ...]:
        # Node store: index -> relation name / children by relation name.
        relations: list[str] = []
        children: list[dict[str, int]] = []
        roots: dict[str, int] = {}

        for item in values.get(self._key, ()):
            if item.nested_keys is not None or not item.value:
                _logger.debug("Skipping include value %r", item)
                continue
            for chain in item.value.split(RELATION_DELIMITER):
                level = roots
                for relation in chain.split(NESTED_RELATION_DELIMITER):
                    if not relation:
                        break
                    index = level.get(relation)
                    if index is None:
                        index = len(relations)
                        relations.append(relation)
                        children.append({})
                        level[relation] = index
                    level = children[index]

        # Children always have a higher index than their parent, so a
        # reverse sweep freezes every subtree before it is referenced.
        frozen: dict[int, Include] = {}
        for index in range(len(relations) - 1, -1, -1):
            frozen[index] = Include(
                relation=relations[index],
                includes=tuple(frozen[child] for child in children[index].values()),
            )
        return tuple(frozen[index] for index in roots.values())
