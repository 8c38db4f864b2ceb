# liquid_translate/core/i18n/__init__.py
"""
Translation lookup and the ``t`` Liquid filter.
"""
from liquid_translate.core.i18n.errors import (  # noqa: F401
    TranslationError,
    MalformedKeyError,
    NamespaceNotFoundError,
    KeyNotFoundError,
    NotTraversableError,
    NonScalarValueError,
    MissingTranslationsError,
)
from liquid_translate.core.i18n.path_resolver import (  # noqa: F401
    ParsedKey,
    split_key,
    lookup,
    resolve,
)
from liquid_translate.core.i18n.translate_filter import (  # noqa: F401
    FILTER_NAME,
    make_translate_filter,
    translate,
)
