""" Picking update files out of a bucket listing """
from typing import Iterable, Sequence

from ..models.pd.update_file import ObjectDescriptor, SelectionSet


DEFAULT_EXTENSIONS = ('.json', '.dll')


def has_allowed_extension(key: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> bool:
    lowered = key.lower()
    return any(lowered.endswith(ext.lower()) for ext in extensions)


def select_update_files(
        descriptors: Iterable[ObjectDescriptor],
        extensions: Sequence[str] = DEFAULT_EXTENSIONS
) -> SelectionSet:
    """
    Keep objects whose key ends with one of ``extensions`` (case-insensitive).

    Listing order is preserved. Keys with an empty base name stay in the
    selection (they count towards the headers) and are skipped later by
    the archive writer.
    """
    return SelectionSet(objects=[
        d for d in descriptors if has_allowed_extension(d.key, extensions)
    ])
