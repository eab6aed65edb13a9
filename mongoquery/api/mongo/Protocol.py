"""MongoDB connection string protocols."""

from enum import Enum


class Protocol(str, Enum):
    """Scheme used to build the connection string.

    https://www.mongodb.com/docs/manual/reference/connection-string/
    """

    # Connection string that lists every host
    STANDARD = "mongodb"

    # Hostname resolved through a DNS SRV record (eg: Atlas deployments)
    SRV = "mongodb+srv"
