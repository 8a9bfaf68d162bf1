"""Guest gender vocabulary.

Guests enter their gender in whatever language the checkout page was
shown in. Each known surface form maps to one canonical bucket; forms
not listed here are left unclassified.
"""

from enum import Enum
from types import MappingProxyType


class GenderBucket(str, Enum):
    MALE = "male"
    FEMALE = "female"


_SURFACE_FORMS: dict[GenderBucket, tuple[str, ...]] = {
    GenderBucket.MALE: (
        "male",  # en
        "masculin",  # fr
        "masculino",  # es
        "पुरुष",  # hi
        "männlich",  # de
        "maschio",  # it
        "男性",  # ja
    ),
    GenderBucket.FEMALE: (
        "female",
        "féminin",
        "femenino",
        "महिला",
        "weiblich",
        "femmina",
        "女性",
    ),
}

GENDER_VOCABULARY = MappingProxyType(
    {form: bucket for bucket, forms in _SURFACE_FORMS.items() for form in forms}
)


def classify_gender(value: str | None) -> GenderBucket | None:
    """Return the bucket for a guest-entered gender, matched case-insensitively."""
    if not value:
        return None
    return GENDER_VOCABULARY.get(value.lower())
