from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from .config import ComposerSettings
from .errors import InlineExpansionError, UnknownReferenceError
from .fragments import FragmentType, TemplateEntity, TypeFilter, TypeTag, reference_pattern_for

logger = logging.getLogger(__name__)

NamesFilter = Union[str, Iterable[str], None]


def _splice(content: str) -> Callable:
    # Callable replacement keeps backslashes in ``content`` literal.
    return lambda match: match.group(1) + content + match.group(3)


class FragmentRegistry:
    """In-memory registry of named query fragments.

    Fragments are registered under the name their spread references use
    (``...Name``). A registered text is one of three kinds: a named
    ``fragment`` that gets appended to a composed query, a ``query``, or an
    ``inline`` snippet without a header that is pasted in place of its
    references.
    """

    def __init__(self, settings: ComposerSettings | None = None):
        self.settings = settings if settings is not None else ComposerSettings()
        self._fragments: Dict[str, TemplateEntity] = {}

    def __len__(self) -> int:
        return len(self._fragments)

    def __contains__(self, name: object) -> bool:
        return name in self._fragments

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)

    # ------------------------------------------------------------------
    # Registration and lookup
    # ------------------------------------------------------------------
    def register(self, name: str, content: str) -> None:
        entity = TemplateEntity.from_content(name, content)
        previous = self._fragments.get(name)
        if previous is not None and previous.content != content:
            logger.warning("Fragment %r re-registered with different content; replacing it", name)
        self._fragments[name] = entity
        logger.debug(
            "Registered fragment %r (type=%s, dependencies=%s)",
            name,
            entity.type.value,
            list(entity.dependencies),
        )

    def register_many(self, fragments: Mapping[str, str]) -> None:
        for name, content in fragments.items():
            self.register(name, content)

    def has(self, name: str) -> bool:
        return name in self._fragments

    def get(self, name: str) -> Optional[TemplateEntity]:
        return self._fragments.get(name)

    def get_content(self, name: str) -> Optional[str]:
        entity = self.get(name)
        if entity is None:
            return None
        return entity.content

    def dependencies_of(self, name: str, ignore: Iterable[str] | None = None) -> Optional[List[str]]:
        """Return the names ``name`` references, minus ``ignore``.

        ``None`` stands for both an unknown name and an empty result.
        """

        entity = self.get(name)
        if entity is None:
            return None

        deps = list(entity.dependencies)
        if ignore is not None:
            ignored = set(ignore)
            deps = [dep for dep in deps if dep not in ignored]

        return deps or None

    def find(self, names: NamesFilter = None, fragment_type: TypeTag | None = None) -> Dict[str, TemplateEntity]:
        """Select fragments by name and exact type, in registration order.

        ``None`` disables the respective filter; a single string counts as
        one name.
        """

        wanted: Optional[set[str]]
        if names is None:
            wanted = None
        elif isinstance(names, str):
            wanted = {names}
        else:
            wanted = set(names)

        result: Dict[str, TemplateEntity] = {}
        for name, entity in self._fragments.items():
            if wanted is not None and name not in wanted:
                continue
            if fragment_type is not None and entity.type != fragment_type:
                continue
            result[name] = entity
        return result

    def get_contents(self, names: NamesFilter = None, fragment_type: TypeTag | None = None) -> List[str]:
        return [entity.content for entity in self.find(names, fragment_type).values()]

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def dependency_tree(self, names: Iterable[str], types: TypeFilter = None) -> List[str]:
        """Collect ``names`` and everything they reference, depth-first.

        Every reachable name must be registered, otherwise
        :class:`UnknownReferenceError` is raised and nothing is returned.

        When ``types`` is given, a fragment of another type is not admitted
        and its references are not followed either: the whole subtree below
        it is pruned. Resolving a root query relies on this to keep inline
        snippets and whatever they reference out of the fragment closure.
        """

        if types is not None and not isinstance(types, str):
            types = tuple(types)

        result: List[str] = []

        def visit(name: str, referrer: Optional[str]) -> None:
            if name not in result:
                entity = self.get(name)
                if entity is None:
                    raise UnknownReferenceError(name, referrer=referrer)
                if types is not None and not entity.is_type(types):
                    return
                result.append(name)

            # Everything collected so far is excluded; this breaks reference cycles.
            deps = self.dependencies_of(name, ignore=result)
            if not deps:
                return
            for dep in deps:
                visit(dep, name)

        for name in names:
            visit(name, None)

        logger.debug("Dependency tree resolved %d fragments: %s", len(result), result)
        return list(dict.fromkeys(result))

    def inline_expand(self, text: str) -> str:
        """Replace ``...Name`` references to inline fragments with their content.

        Passes over all inline fragments repeat until one pass changes
        nothing, so inline fragments may reference each other. The
        characters delimiting a reference are kept around the pasted text.
        """

        inline = [
            (entity, reference_pattern_for(name))
            for name, entity in self.find(fragment_type=FragmentType.INLINE).items()
        ]
        limit = self.settings.max_inline_passes

        passes = 0
        while True:
            expanded: List[str] = []
            for entity, pattern in inline:
                if pattern.search(text) is None:
                    continue
                text = pattern.sub(_splice(entity.content), text)
                expanded.append(entity.name)

            if not expanded:
                break

            passes += 1
            if 0 < limit < passes:
                raise InlineExpansionError(expanded, passes=passes)

        logger.debug("Inline expansion finished after %d productive passes", passes)
        return text

    def resolve_root(self, query: str) -> str:
        """Compose ``query`` with every fragment it needs into one text.

        The query comes first, followed by the named fragments it reaches
        in registration order; inline references are then expanded across
        the whole text. A query without references is returned unchanged.
        """

        root = TemplateEntity.from_content(self.settings.root_name, query)
        if not root.dependencies:
            return query

        names = self.dependency_tree(root.dependencies, FragmentType.FRAGMENT)
        parts = [query, *self.get_contents(names)]
        logger.debug("Composing root query with %d fragments", len(parts) - 1)

        return self.inline_expand(self.settings.separator.join(parts))


__all__ = ["FragmentRegistry", "NamesFilter"]
