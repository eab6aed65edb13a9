"""MongoDB read preference modes."""

from enum import Enum
from typing import Any

from pymongo import ReadPreference


class ReadPreferenceMode(str, Enum):
    """How reads are balanced over a replica set.

    https://www.mongodb.com/docs/manual/core/read-preference/
    """

    PRIMARY = "primary"
    PRIMARY_PREFERRED = "primaryPreferred"
    SECONDARY = "secondary"
    SECONDARY_PREFERRED = "secondaryPreferred"
    NEAREST = "nearest"

    @property
    def driver_mode(self) -> Any:
        """Matching pymongo read preference instance (for ``get_database``)."""
        return {
            ReadPreferenceMode.PRIMARY: ReadPreference.PRIMARY,
            ReadPreferenceMode.PRIMARY_PREFERRED: ReadPreference.PRIMARY_PREFERRED,
            ReadPreferenceMode.SECONDARY: ReadPreference.SECONDARY,
            ReadPreferenceMode.SECONDARY_PREFERRED: ReadPreference.SECONDARY_PREFERRED,
            ReadPreferenceMode.NEAREST: ReadPreference.NEAREST,
        }[self]
