from pydantic import __version__ as _pydantic_version

# gqlcompose relies on the Pydantic v2 API (model_validator, ConfigDict, etc.).
# Import errors should surface early if an incompatible version is installed.
if not _pydantic_version.startswith("2"):
    raise ImportError(
        "gqlcompose requires pydantic>=2.0; detected version %s" % _pydantic_version
    )

from .config import ComposerSettings, load_settings
from .errors import FragmentError, InlineExpansionError, UnknownReferenceError
from .fragments import ROOT_QUERY_NAME, FragmentType, TemplateEntity
from .registry import FragmentRegistry

# Process-wide registry for callers that do not manage their own.
store = FragmentRegistry()


def register_fragment(name: str, content: str) -> None:
    store.register(name, content)


def resolve_query(query: str) -> str:
    return store.resolve_root(query)


__all__ = [
    "ComposerSettings",
    "load_settings",
    "FragmentError",
    "InlineExpansionError",
    "UnknownReferenceError",
    "ROOT_QUERY_NAME",
    "FragmentType",
    "TemplateEntity",
    "FragmentRegistry",
    "store",
    "register_fragment",
    "resolve_query",
]
