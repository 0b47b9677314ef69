from typing import Iterable

from googlecpi.errors import InvalidTagError
from .schema import TAGS_SCHEMA, TagsValidator


def check_tag(tag, field: str = "tags"):
    """Check a single tag against the naming rules.

    Raises:
        InvalidTagError: with the first rule the tag breaks
    """
    Tags([tag]).validate(field=field)


class Tags(tuple):
    """Ordered set of tags attached to an instance or a network.

    Tags are kept as given, checking them is up to the caller
    (see :py:meth:`validate`).
    """

    def __new__(cls, tags: Iterable[str] = ()):
        return super().__new__(cls, tags)

    def validate(self, field: str = "tags"):
        """Stop at the first invalid tag."""
        # items are checked in order
        error = next(TagsValidator(TAGS_SCHEMA).iter_errors(list(self)), None)
        if error is None:
            return
        cause = error.cause
        assert isinstance(cause, InvalidTagError)
        raise InvalidTagError(cause.tag, cause.rule, field=field) from error
