from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

ROOT_QUERY_NAME = "query"


class FragmentType(str, Enum):
    FRAGMENT = "fragment"
    QUERY = "query"
    INLINE = "inline"


TypeTag = Union[FragmentType, str]
TypeFilter = Union[TypeTag, Iterable[TypeTag], None]


class TemplateEntity(BaseModel):
    """A named unit of query text together with what its text declares.

    ``type``, ``is_inline`` and ``dependencies`` are always derived from
    ``content`` during validation; values passed for them are discarded.
    ``is_inline`` is computed on its own rather than from ``type``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    content: str
    type: FragmentType = FragmentType.INLINE
    is_inline: bool = True
    dependencies: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _derive_from_content(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        content = data.get("content")
        if not isinstance(content, str):
            return data

        from .patterns import classify, extract_references, is_inline_content  # local import to avoid cycles

        return {
            **data,
            "type": classify(content),
            "is_inline": is_inline_content(content),
            "dependencies": tuple(extract_references(content)),
        }

    @classmethod
    def from_content(cls, name: str, content: str) -> "TemplateEntity":
        return cls(name=name, content=content)

    def is_type(self, types: Union[TypeTag, Iterable[TypeTag]]) -> bool:
        """Check ``type`` against one tag or any of several tags."""

        if isinstance(types, str):
            return types == self.type
        return any(tag == self.type for tag in types)


__all__ = [
    "ROOT_QUERY_NAME",
    "FragmentType",
    "TemplateEntity",
    "TypeFilter",
    "TypeTag",
]
